"""
Payment method variants.

A payment method is immutable once constructed. When the true amount becomes
known a new instance replaces the old one (see ``with_amount``); the amount is
never changed in place.
"""

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Union

from ..errors import PaymentFailureError
from ..logging.config import get_workflow_logger, log_payment_event
from ..utils.money import to_decimal

logger = get_workflow_logger(__name__)


class PaymentKind(str, Enum):
    """Supported payment methods."""
    ESCROW = "Escrow"
    DIRECT = "Direct"

    @classmethod
    def parse(cls, value: Union[str, "PaymentKind"]) -> "PaymentKind":
        """Parse a case-insensitive kind name ("escrow", "Direct", ...)."""
        if isinstance(value, cls):
            return value
        for kind in cls:
            if kind.value.lower() == str(value).strip().lower():
                return kind
        raise ValueError(f"Unknown payment kind: {value!r}")


@dataclass(frozen=True)
class PaymentMethod(ABC):
    """Base class for payment transfer mechanisms."""

    amount: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        object.__setattr__(self, "amount", to_decimal(self.amount))
        if self.amount < 0:
            raise ValueError(f"Payment amount cannot be negative, got {self.amount}")

    @property
    @abstractmethod
    def kind(self) -> PaymentKind:
        """Variant discriminator."""

    @property
    def payment_type(self) -> str:
        """Stable display name used for summaries and receipts."""
        return self.kind.value

    def with_amount(self, amount: Decimal) -> "PaymentMethod":
        """Return a fresh instance of the same variant carrying ``amount``."""
        return dataclasses.replace(self, amount=amount)

    def process_payment(self) -> None:
        """
        Execute the transfer.

        Raises:
            PaymentFailureError: If the amount is not positive
        """
        if self.amount <= 0:
            log_payment_event(logger, self.payment_type, self.amount, "rejected")
            raise PaymentFailureError(amount=self.amount)

        for line in self._transfer_lines():
            print(line, flush=True)

        log_payment_event(logger, self.payment_type, self.amount, "processed")

    @abstractmethod
    def _transfer_lines(self) -> list[str]:
        """Console lines describing the transfer."""


@dataclass(frozen=True)
class EscrowPayment(PaymentMethod):
    """Funds held in escrow; confirmed immediately once the milestone is done."""

    @property
    def kind(self) -> PaymentKind:
        return PaymentKind.ESCROW

    def _transfer_lines(self) -> list[str]:
        return [
            f"Processing escrow payment of ${self.amount}",
            "Funds held in escrow until milestone completion...",
        ]


@dataclass(frozen=True)
class DirectPayment(PaymentMethod):
    """Immediate transfer to the freelancer."""

    @property
    def kind(self) -> PaymentKind:
        return PaymentKind.DIRECT

    def _transfer_lines(self) -> list[str]:
        return [
            f"Processing direct payment of ${self.amount}",
            "Payment transferred immediately...",
        ]


_PAYMENT_CLASSES = {
    PaymentKind.ESCROW: EscrowPayment,
    PaymentKind.DIRECT: DirectPayment,
}


def create_payment_method(kind: Union[str, PaymentKind],
                          amount: Decimal = Decimal("0")) -> PaymentMethod:
    """Create a payment method of the given kind."""
    return _PAYMENT_CLASSES[PaymentKind.parse(kind)](amount=amount)
