"""
Utility modules for the freelance workflow.
"""

from .money import format_amount, to_decimal
from .time import utc_now, format_receipt_timestamp

__all__ = ["format_amount", "to_decimal", "utc_now", "format_receipt_timestamp"]
