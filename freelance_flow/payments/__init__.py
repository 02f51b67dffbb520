"""
Payment methods used to settle a completed milestone.
"""

from .methods import (
    DirectPayment,
    EscrowPayment,
    PaymentKind,
    PaymentMethod,
    create_payment_method,
)

__all__ = [
    "DirectPayment",
    "EscrowPayment",
    "PaymentKind",
    "PaymentMethod",
    "create_payment_method",
]
