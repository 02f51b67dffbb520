"""
Workflow failure classifications for errors fatal to a single run.

These exceptions stop the remaining workflow steps. They are caught only at
the engine boundary and turned into a failure report.
"""

from decimal import Decimal
from typing import Optional, Dict, Any


class WorkflowFailureError(Exception):
    """Base class for unrecoverable workflow failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MissingCollaboratorError(WorkflowFailureError):
    """A required party or milestone was never supplied to the engine."""

    def __init__(self, message: str = "Required workflow collaborator is missing",
                 missing: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing = missing or []


class PaymentFailureError(WorkflowFailureError):
    """The payment amount was not positive when payment was due."""

    def __init__(self, message: str = "Payment processing failed: amount is zero or negative",
                 amount: Optional[Decimal] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.amount = amount


class ReceiptWriteError(WorkflowFailureError):
    """The receipt destination could not be opened or written."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 target: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.target = target
