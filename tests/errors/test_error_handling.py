"""
Error classification tests for the workflow.

Covers the domain/workflow-failure split and the attributes each error carries.
"""

from decimal import Decimal

from freelance_flow.errors import (
    AlreadyCompletedError,
    DomainError,
    InvalidHoursError,
    MalformedProjectError,
    MissingCollaboratorError,
    PaymentFailureError,
    ReceiptWriteError,
    WorkflowFailureError,
)


class TestErrorClassification:
    """Test error classification system."""

    def test_domain_error_hierarchy(self):
        """Test recoverable domain errors."""
        base_error = DomainError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        hours_error = InvalidHoursError(hours=Decimal("-5"))
        assert isinstance(hours_error, DomainError)
        assert hours_error.hours == Decimal("-5")
        assert str(hours_error) == "Invalid hours worked: cannot be negative or zero"

        completed_error = AlreadyCompletedError(milestone_title="Website")
        assert isinstance(completed_error, DomainError)
        assert completed_error.milestone_title == "Website"

        malformed_error = MalformedProjectError("bad", field="client.name", raw_value=3)
        assert malformed_error.field == "client.name"
        assert malformed_error.raw_value == 3

    def test_workflow_failure_hierarchy(self):
        """Test fatal workflow failures."""
        missing_error = MissingCollaboratorError(missing=["client"])
        assert isinstance(missing_error, WorkflowFailureError)
        assert missing_error.recoverable is False
        assert missing_error.missing == ["client"]

        payment_error = PaymentFailureError(amount=Decimal("0"))
        assert payment_error.amount == Decimal("0")
        assert str(payment_error) == "Payment processing failed: amount is zero or negative"

        receipt_error = ReceiptWriteError("disk full", operation="append", target="r.txt",
                                          context={"errno": 28})
        assert receipt_error.operation == "append"
        assert receipt_error.target == "r.txt"
        assert receipt_error.context == {"errno": 28}

    def test_families_are_disjoint(self):
        """Test that the two error families do not overlap."""
        assert not issubclass(InvalidHoursError, WorkflowFailureError)
        assert not issubclass(PaymentFailureError, DomainError)
