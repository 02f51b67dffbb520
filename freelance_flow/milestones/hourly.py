"""
Hourly milestone.

Hours may be set to zero but a milestone with zero hours cannot be completed.
Negative hours are always rejected and leave the stored value unchanged.
"""

from decimal import Decimal, localcontext

from ..errors import InvalidHoursError
from ..payments.methods import PaymentMethod
from ..utils.money import Number, to_decimal
from .base import Milestone, ZERO


class HourlyMilestone(Milestone):
    """Milestone paid ``hours_worked * hourly_rate`` on completion."""

    def __init__(self, title: str, description: str, payment_method: PaymentMethod,
                 hourly_rate: Number) -> None:
        super().__init__(title, description, payment_method)
        self.hourly_rate = to_decimal(hourly_rate)
        self._hours_worked = ZERO

    @property
    def hours_worked(self) -> Decimal:
        return self._hours_worked

    def set_hours_worked(self, hours: Number) -> None:
        """
        Record the hours worked.

        Raises:
            InvalidHoursError: If ``hours`` is negative
        """
        hours = to_decimal(hours)
        if hours < 0:
            raise InvalidHoursError(hours=hours, context={"milestone": self.title})
        self._hours_worked = hours

    def _check_can_complete(self) -> None:
        if self._hours_worked <= 0:
            raise InvalidHoursError(hours=self._hours_worked, context={"milestone": self.title})

    def _amount_due(self) -> Decimal:
        hours, rate = self._hours_worked, self.hourly_rate
        with localcontext() as ctx:
            # Enough precision for the product to be exact
            ctx.prec = max(ctx.prec, len(hours.as_tuple().digits) + len(rate.as_tuple().digits))
            return hours * rate

    def _completion_lines(self, amount: Decimal) -> list[str]:
        return [
            f"Hourly milestone '{self.title}' completed!",
            f"Hours worked: {self._hours_worked} at ${self.hourly_rate}/hr",
            f"Payment amount: ${amount}",
        ]
