"""
Error classification for the project workflow.

Domain errors are raised by milestones and input loading and may be caught by
a caller that wants to retry with corrected input. Workflow failures are
fatal to a single run and are only handled at the engine boundary.
"""

from .domain import (
    DomainError,
    InvalidHoursError,
    AlreadyCompletedError,
    MalformedProjectError,
)
from .workflow_failures import (
    WorkflowFailureError,
    MissingCollaboratorError,
    PaymentFailureError,
    ReceiptWriteError,
)

__all__ = [
    # Domain Errors
    "DomainError",
    "InvalidHoursError",
    "AlreadyCompletedError",
    "MalformedProjectError",
    # Workflow Failures
    "WorkflowFailureError",
    "MissingCollaboratorError",
    "PaymentFailureError",
    "ReceiptWriteError",
]
