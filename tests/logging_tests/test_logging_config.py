"""Tests for structured logging helpers."""

from decimal import Decimal

import pytest
import structlog
from structlog.testing import capture_logs

from freelance_flow.logging.config import (
    configure_logging,
    get_workflow_logger,
    log_milestone_transition,
    log_payment_event,
)
from freelance_flow.milestones import FixedPriceMilestone
from freelance_flow.payments import DirectPayment


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestLoggingHelpers:
    """Test audit event helpers."""

    def test_workflow_logger_binds_subsystem(self):
        """Test workflow logger context binding."""
        with capture_logs() as logs:
            get_workflow_logger("test").info("hello")

        assert logs[0]["subsystem"] == "workflow"
        assert logs[0]["audit_trail"] is True

    def test_log_milestone_transition(self):
        """Test the milestone transition audit event."""
        with capture_logs() as logs:
            log_milestone_transition(
                structlog.get_logger("test"), "Website", "Pending", "Completed",
                context={"amount_due": "10"}
            )

        assert logs == [{
            "event": "milestone_transition",
            "log_level": "info",
            "milestone": "Website",
            "from_status": "Pending",
            "to_status": "Completed",
            "context": {"amount_due": "10"},
        }]

    def test_log_payment_event_levels(self):
        """Test log levels for processed and rejected payments."""
        logger = structlog.get_logger("test")
        with capture_logs() as logs:
            log_payment_event(logger, "Escrow", Decimal("5"), "processed")
            log_payment_event(logger, "Direct", Decimal("0"), "rejected")

        assert [entry["log_level"] for entry in logs] == ["info", "warning"]
        assert logs[0]["amount"] == "5"

    def test_milestone_completion_is_audited(self, capsys):
        """Test that completing a milestone emits an audit event."""
        milestone = FixedPriceMilestone("Website", "Full stack", DirectPayment(), Decimal("10"))

        with capture_logs() as logs:
            milestone.complete()

        transition = next(e for e in logs if e["event"] == "milestone_transition")
        assert transition["to_status"] == "Completed"
        assert transition["context"] == {"amount_due": "10"}


class TestConfigureLogging:
    """Test structlog configuration."""

    @pytest.mark.parametrize("format_json", [True, False])
    def test_configure_logging(self, format_json):
        """Test configuring console and JSON output."""
        configure_logging(level="debug", format_json=format_json, include_caller=True)

        config = structlog.get_config()
        assert config["wrapper_class"] is structlog.stdlib.BoundLogger
        renderer = config["processors"][-1]
        expected = structlog.processors.JSONRenderer if format_json else structlog.dev.ConsoleRenderer
        assert isinstance(renderer, expected)
