"""
Project workflow engine.

Drives one project run end to end: precondition check, participant and
milestone display, milestone completion, payment and receipt. The engine is
the only error boundary; ``run`` reports failures instead of raising them.
"""

import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

import structlog

from .errors import (
    DomainError,
    MissingCollaboratorError,
    PaymentFailureError,
    ReceiptWriteError,
    WorkflowFailureError,
)
from .logging.config import get_workflow_logger
from .milestones import Milestone
from .models.parties import Client, Freelancer
from .receipts.base import ReceiptRecord, ReceiptSink

logger = structlog.get_logger(__name__)
workflow_logger = get_workflow_logger(__name__)


class WorkflowStatus(str, Enum):
    """Terminal outcome of a run."""
    SUCCESS = "success"
    FAILED = "failed"


class WorkflowStep(str, Enum):
    """Workflow steps, in execution order."""
    PRECONDITIONS = "preconditions"
    DISPLAY = "display"
    COMPLETE_MILESTONE = "complete_milestone"
    CALCULATE_PAYMENT = "calculate_payment"
    PROCESS_PAYMENT = "process_payment"
    RECORD_RECEIPT = "record_receipt"


@dataclass(frozen=True)
class WorkflowOutcome:
    """Result of ``WorkflowEngine.run``."""
    status: WorkflowStatus
    project_name: str
    amount: Optional[Decimal] = None
    payment_kind: Optional[str] = None
    receipt: Optional[ReceiptRecord] = None
    error: Optional[Exception] = None
    failed_step: Optional[WorkflowStep] = None

    @property
    def succeeded(self) -> bool:
        return self.status == WorkflowStatus.SUCCESS


class WorkflowEngine:
    """
    Orchestrator for a single freelance project.

    Owns the client, freelancer, milestone and receipt sink for its lifetime.
    Pipeline:
    Preconditions → Display → Complete → Amount check → Payment → Receipt
    """

    def __init__(
        self,
        project_name: str,
        client: Optional[Client],
        freelancer: Optional[Freelancer],
        milestone: Optional[Milestone],
        receipt_sink: Optional[ReceiptSink],
    ) -> None:
        self.project_name = project_name
        self.client = client
        self.freelancer = freelancer
        self.milestone = milestone
        self.receipt_sink = receipt_sink
        self.logger = logger.bind(project=project_name)
        self.workflow_logger = workflow_logger.bind(project=project_name)

    def run(self) -> WorkflowOutcome:
        """
        Execute the workflow, stopping at the first failure.

        Returns:
            WorkflowOutcome describing success or the failing step
        """
        step = WorkflowStep.PRECONDITIONS
        amount: Optional[Decimal] = None

        try:
            self._check_collaborators()

            step = WorkflowStep.DISPLAY
            self._display()

            step = WorkflowStep.COMPLETE_MILESTONE
            self.milestone.complete()

            step = WorkflowStep.CALCULATE_PAYMENT
            amount = self.milestone.calculate_payment()
            if amount <= 0:
                raise PaymentFailureError(amount=amount, context={"milestone": self.milestone.title})

            step = WorkflowStep.PROCESS_PAYMENT
            payment_method = self.milestone.payment_method
            if payment_method.amount != amount:
                self.milestone.bind_payment_method(payment_method.with_amount(amount))
            self.milestone.payment_method.process_payment()

            step = WorkflowStep.RECORD_RECEIPT
            receipt = self._record_receipt(amount)

        except (DomainError, WorkflowFailureError) as e:
            self.workflow_logger.warning(
                "Workflow failed",
                step=step.value,
                error=str(e),
                error_type=type(e).__name__,
                recoverable=e.recoverable,
                context=e.context
            )
            return self._fail(step, e, amount)

        except Exception as e:
            self.logger.error(
                "Unexpected error during workflow",
                step=step.value,
                error=str(e),
                error_type=type(e).__name__
            )
            return self._fail(step, e, amount)

        print("\n=== PROJECT WORKFLOW COMPLETED SUCCESSFULLY ===", flush=True)
        self.workflow_logger.info(
            "Workflow completed",
            milestone=self.milestone.title,
            amount=str(amount),
            payment_kind=receipt.payment_kind
        )
        return WorkflowOutcome(
            status=WorkflowStatus.SUCCESS,
            project_name=self.project_name,
            amount=amount,
            payment_kind=receipt.payment_kind,
            receipt=receipt,
        )

    def _check_collaborators(self) -> None:
        missing = [
            name for name, value in (
                ("client", self.client),
                ("freelancer", self.freelancer),
                ("milestone", self.milestone),
            )
            if value is None
        ]
        if missing:
            raise MissingCollaboratorError(
                f"Missing required collaborator: {', '.join(missing)}",
                missing=missing
            )

    def _display(self) -> None:
        lines = [
            "\n=== PROJECT WORKFLOW START ===",
            f"Project: {self.project_name}",
            "",
            "Participants:",
            self.client.display_info(),
            self.freelancer.display_info(),
            "",
            "Milestone Details:",
            self.milestone.display_summary(),
            "",
        ]
        print("\n".join(lines), flush=True)

    def _record_receipt(self, amount: Decimal) -> ReceiptRecord:
        payment_kind = self.milestone.payment_method.payment_type

        if self.receipt_sink is None:
            raise ReceiptWriteError("Receipt sink is unavailable", operation="record")

        try:
            return self.receipt_sink.record(self.milestone.title, amount, payment_kind)
        except ReceiptWriteError:
            raise
        except Exception as e:
            raise ReceiptWriteError(
                f"Receipt sink failed: {e}",
                operation="record",
                context={"sink_error_type": type(e).__name__}
            ) from e

    def _fail(self, step: WorkflowStep, error: Exception,
              amount: Optional[Decimal]) -> WorkflowOutcome:
        print(f"Error during execution: {error}", file=sys.stderr, flush=True)

        payment_kind = None
        if self.milestone is not None:
            payment_kind = self.milestone.payment_method.payment_type

        return WorkflowOutcome(
            status=WorkflowStatus.FAILED,
            project_name=self.project_name,
            amount=amount,
            payment_kind=payment_kind,
            error=error,
            failed_step=step,
        )
