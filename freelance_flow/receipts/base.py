"""Base classes for receipt sinks."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from ..logging.config import get_logger
from ..utils.money import format_amount
from ..utils.time import format_receipt_timestamp, utc_now

RECEIPT_HEADER = "=== PAYMENT RECEIPT ==="
RECEIPT_FOOTER = "========================"


@dataclass(frozen=True)
class ReceiptRecord:
    """A completed payment as written to a sink."""
    milestone_title: str
    amount: Decimal
    payment_kind: str
    timestamp: datetime

    def render(self, currency_symbol: str = "$") -> str:
        """Render the human-readable receipt block, ending with a blank line."""
        lines = [
            RECEIPT_HEADER,
            f"Milestone: {self.milestone_title}",
            f"Amount: {currency_symbol}{format_amount(self.amount)}",
            f"Payment Type: {self.payment_kind}",
            f"Timestamp: {format_receipt_timestamp(self.timestamp)}",
            RECEIPT_FOOTER,
            "",
        ]
        return "\n".join(lines) + "\n"


class ReceiptSink(ABC):
    """Base class for receipt destinations."""

    def __init__(self, name: str, currency_symbol: str = "$",
                 clock: Optional[Callable[[], datetime]] = None):
        self.name = name
        self.currency_symbol = currency_symbol
        self.clock = clock or utc_now
        self.logger = get_logger(f"receipts.{name}")
        self._record_count = 0

    def record(self, milestone_title: str, amount: Decimal, payment_kind: str) -> ReceiptRecord:
        """
        Append a receipt for a completed payment.

        Args:
            milestone_title: Title of the paid milestone
            amount: Amount transferred
            payment_kind: Payment discriminator ("Escrow" or "Direct")

        Returns:
            The record that was written

        Raises:
            ReceiptWriteError: If the destination cannot be written
        """
        receipt = ReceiptRecord(
            milestone_title=milestone_title,
            amount=amount,
            payment_kind=payment_kind,
            timestamp=self.clock(),
        )
        self._write(receipt)
        self._record_count += 1

        self.logger.info(
            "Receipt recorded",
            sink=self.name,
            milestone=milestone_title,
            amount=str(amount),
            payment_kind=payment_kind,
        )
        return receipt

    @property
    def record_count(self) -> int:
        return self._record_count

    @abstractmethod
    def _write(self, receipt: ReceiptRecord) -> None:
        """Write one rendered receipt to the destination."""
