"""
Milestone base class.

A milestone starts PENDING and moves to COMPLETED exactly once. While pending
it owes nothing; once completed ``calculate_payment`` returns the variant's
amount. The attached payment method is owned by the milestone and is only
ever replaced, never modified.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum

from ..errors import AlreadyCompletedError
from ..logging.config import get_workflow_logger, log_milestone_transition
from ..payments.methods import PaymentMethod

logger = get_workflow_logger(__name__)

ZERO = Decimal("0")


class MilestoneStatus(str, Enum):
    """Milestone lifecycle states."""
    PENDING = "Pending"
    COMPLETED = "Completed"


class Milestone(ABC):
    """Common behaviour for fixed-price and hourly milestones."""

    def __init__(self, title: str, description: str, payment_method: PaymentMethod) -> None:
        self.title = title
        self.description = description
        self._payment_method = payment_method
        self._status = MilestoneStatus.PENDING

    @property
    def status(self) -> MilestoneStatus:
        return self._status

    @property
    def completed(self) -> bool:
        return self._status == MilestoneStatus.COMPLETED

    @property
    def payment_method(self) -> PaymentMethod:
        return self._payment_method

    def bind_payment_method(self, payment_method: PaymentMethod) -> None:
        """Replace the attached payment method with a new instance."""
        self._payment_method = payment_method

    def display_summary(self) -> str:
        """Multi-line read-only summary of the milestone."""
        return "\n".join([
            f"Milestone: {self.title}",
            f"Description: {self.description}",
            f"Status: {self._status.value}",
            f"Payment Method: {self._payment_method.payment_type}",
        ])

    def calculate_payment(self) -> Decimal:
        """Amount due: the variant amount once completed, zero while pending."""
        if not self.completed:
            return ZERO
        return self._amount_due()

    def complete(self) -> None:
        """
        Mark the milestone as completed.

        State changes only after everything that can fail has run.

        Raises:
            AlreadyCompletedError: If the milestone was completed before
            InvalidHoursError: Hourly milestone with no hours recorded
        """
        if self.completed:
            raise AlreadyCompletedError(milestone_title=self.title)

        self._check_can_complete()

        amount = self._amount_due()
        lines = self._completion_lines(amount)

        previous = self._status
        self._status = MilestoneStatus.COMPLETED
        log_milestone_transition(
            logger, self.title, previous.value, self._status.value,
            context={"amount_due": str(amount)}
        )

        for line in lines:
            print(line, flush=True)

    def _check_can_complete(self) -> None:
        """Variant precondition; raise a DomainError to refuse completion."""

    @abstractmethod
    def _amount_due(self) -> Decimal:
        """Amount owed once completed."""

    @abstractmethod
    def _completion_lines(self, amount: Decimal) -> list[str]:
        """Console lines printed on completion."""
