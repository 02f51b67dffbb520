"""
Project construction from raw input.

Converts a raw mapping (typically parsed from YAML) into a ready-to-run
WorkflowEngine. This layer only coerces types; domain rules such as rejecting
negative hours stay with the milestone, so an InvalidHoursError surfaces here
before any engine exists.
"""

from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .engine import WorkflowEngine
from .errors import MalformedProjectError
from .logging.config import get_logger
from .milestones import FixedPriceMilestone, HourlyMilestone, Milestone
from .models.parties import Client, Freelancer
from .payments.methods import PaymentKind, create_payment_method
from .receipts.base import ReceiptSink
from .utils.money import to_decimal

logger = get_logger(__name__)

MILESTONE_TYPES = ("fixed", "hourly")


def _require(data: dict[str, Any], field: str, path: str) -> Any:
    if not isinstance(data, dict):
        raise MalformedProjectError(f"{path or 'project'} must be a mapping", field=path, raw_value=data)
    if field not in data or data[field] is None:
        full = f"{path}.{field}" if path else field
        raise MalformedProjectError(f"Missing required field: {full}", field=full)
    return data[field]


def _as_text(value: Any, field: str) -> str:
    if isinstance(value, (dict, list)):
        raise MalformedProjectError(f"{field} must be text", field=field, raw_value=value)
    return str(value).strip()


def _as_decimal(value: Any, field: str) -> Decimal:
    try:
        return to_decimal(value)
    except (TypeError, ValueError) as e:
        raise MalformedProjectError(f"{field} must be a finite number", field=field, raw_value=value) from e


class ProjectBuilder:
    """
    Builds the project object graph from a raw mapping.

    Expected shape::

        project_name: E-Commerce Website
        client: {name, email, company}
        freelancer: {name, email, skills, hourly_rate}
        milestone: {title, description, type: fixed|hourly, amount | hours_worked, hourly_rate?}
        payment: escrow|direct
    """

    def __init__(self, receipt_sink: Optional[ReceiptSink],
                 default_payment_kind: str = "escrow"):
        self.receipt_sink = receipt_sink
        self.default_payment_kind = default_payment_kind
        self.logger = logger

    def build(self, project_data: dict[str, Any]) -> WorkflowEngine:
        """
        Build a WorkflowEngine from raw project data.

        Raises:
            MalformedProjectError: If a field is missing or cannot be coerced
            InvalidHoursError: If an hourly milestone has negative hours
        """
        project_name = _as_text(_require(project_data, "project_name", ""), "project_name")
        client = self.build_client(_require(project_data, "client", ""))
        freelancer = self.build_freelancer(_require(project_data, "freelancer", ""))
        payment_kind = self._parse_payment_kind(project_data.get("payment", self.default_payment_kind))
        milestone = self.build_milestone(_require(project_data, "milestone", ""), freelancer, payment_kind)

        self.logger.info(
            "Project built",
            project=project_name,
            milestone=milestone.title,
            milestone_type=type(milestone).__name__,
            payment_kind=payment_kind.value
        )
        return WorkflowEngine(project_name, client, freelancer, milestone, self.receipt_sink)

    def build_client(self, data: dict[str, Any]) -> Client:
        return Client(
            name=_as_text(_require(data, "name", "client"), "client.name"),
            email=_as_text(_require(data, "email", "client"), "client.email"),
            company_name=_as_text(data.get("company") or "", "client.company"),
        )

    def build_freelancer(self, data: dict[str, Any]) -> Freelancer:
        rate = _as_decimal(_require(data, "hourly_rate", "freelancer"), "freelancer.hourly_rate")
        if rate < 0:
            raise MalformedProjectError(
                "freelancer.hourly_rate cannot be negative",
                field="freelancer.hourly_rate", raw_value=rate
            )
        return Freelancer(
            name=_as_text(_require(data, "name", "freelancer"), "freelancer.name"),
            email=_as_text(_require(data, "email", "freelancer"), "freelancer.email"),
            skill_set=_as_text(data.get("skills") or "", "freelancer.skills"),
            hourly_rate=rate,
        )

    def build_milestone(self, data: dict[str, Any], freelancer: Freelancer,
                        payment_kind: PaymentKind) -> Milestone:
        title = _as_text(_require(data, "title", "milestone"), "milestone.title")
        description = _as_text(data.get("description") or "", "milestone.description")
        milestone_type = _as_text(_require(data, "type", "milestone"), "milestone.type").lower()

        # Amount is unknown until the milestone type is resolved
        payment = create_payment_method(payment_kind)

        if milestone_type == "fixed":
            amount = _as_decimal(_require(data, "amount", "milestone"), "milestone.amount")
            if amount < 0:
                raise MalformedProjectError(
                    "milestone.amount cannot be negative", field="milestone.amount", raw_value=amount
                )
            return FixedPriceMilestone(title, description, payment.with_amount(amount), amount)

        if milestone_type == "hourly":
            rate = freelancer.hourly_rate
            if data.get("hourly_rate") is not None:
                rate = _as_decimal(data["hourly_rate"], "milestone.hourly_rate")
            hours = _as_decimal(_require(data, "hours_worked", "milestone"), "milestone.hours_worked")

            milestone = HourlyMilestone(title, description, payment, rate)
            milestone.set_hours_worked(hours)
            return milestone

        raise MalformedProjectError(
            f"milestone.type must be one of {', '.join(MILESTONE_TYPES)}",
            field="milestone.type", raw_value=milestone_type
        )

    def _parse_payment_kind(self, value: Any) -> PaymentKind:
        try:
            return PaymentKind.parse(value)
        except ValueError as e:
            raise MalformedProjectError(str(e), field="payment", raw_value=value) from e


def load_project_file(path: Union[str, Path]) -> dict[str, Any]:
    """Read raw project data from a YAML file."""
    with open(path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise MalformedProjectError(f"Project file must contain a mapping: {path}", raw_value=data)
    return data


def build_project(project_data: dict[str, Any], receipt_sink: Optional[ReceiptSink],
                  default_payment_kind: str = "escrow") -> WorkflowEngine:
    """Build a WorkflowEngine from raw project data."""
    return ProjectBuilder(receipt_sink, default_payment_kind).build(project_data)
