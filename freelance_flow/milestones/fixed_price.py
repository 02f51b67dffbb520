"""Fixed-price milestone."""

from decimal import Decimal

from ..payments.methods import PaymentMethod
from ..utils.money import Number, to_decimal
from .base import Milestone


class FixedPriceMilestone(Milestone):
    """Milestone paid a fixed amount on completion."""

    def __init__(self, title: str, description: str, payment_method: PaymentMethod,
                 fixed_amount: Number) -> None:
        super().__init__(title, description, payment_method)
        self.fixed_amount = to_decimal(fixed_amount)

    def _amount_due(self) -> Decimal:
        return self.fixed_amount

    def _completion_lines(self, amount: Decimal) -> list[str]:
        return [
            f"Fixed-price milestone '{self.title}' completed!",
            f"Payment amount: ${amount}",
        ]
