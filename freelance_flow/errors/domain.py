"""
Domain error classifications for milestones and project input.

These exceptions describe bad input that a caller can correct and retry,
such as negative hours or a milestone completed twice.
"""

from decimal import Decimal
from typing import Optional, Dict, Any


class DomainError(Exception):
    """Base class for recoverable domain validation failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class InvalidHoursError(DomainError):
    """Hours worked were negative, or zero at the moment of completion."""

    def __init__(self, message: str = "Invalid hours worked: cannot be negative or zero",
                 hours: Optional[Decimal] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.hours = hours


class AlreadyCompletedError(DomainError):
    """A milestone was asked to complete a second time."""

    def __init__(self, message: str = "Milestone has already been completed",
                 milestone_title: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.milestone_title = milestone_title


class MalformedProjectError(DomainError):
    """Raw project input is missing a field or has the wrong type."""

    def __init__(self, message: str, field: Optional[str] = None,
                 raw_value: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.raw_value = raw_value
