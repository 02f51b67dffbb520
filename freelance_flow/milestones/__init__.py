"""
Milestone variants: the unit of work whose completion determines payment.
"""

from .base import Milestone, MilestoneStatus
from .fixed_price import FixedPriceMilestone
from .hourly import HourlyMilestone

__all__ = [
    "FixedPriceMilestone",
    "HourlyMilestone",
    "Milestone",
    "MilestoneStatus",
]
