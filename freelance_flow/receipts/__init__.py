"""
Receipt sinks: durable records of completed payments.
"""

from .base import ReceiptRecord, ReceiptSink
from .factory import create_receipt_sink
from .file_sink import FileReceiptSink
from .stdout_sink import StdoutReceiptSink

__all__ = [
    "FileReceiptSink",
    "ReceiptRecord",
    "ReceiptSink",
    "StdoutReceiptSink",
    "create_receipt_sink",
]
