"""
Centralized logging configuration for the freelance workflow.

This module provides standardized logging configuration using structlog
for all components. Milestone transitions and payments are logged as
audit events through the helpers below so every run leaves the same trail.
"""
import logging
import sys
from decimal import Decimal
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # stdout carries workflow output; log lines go to stderr
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer(default=str))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_workflow_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for workflow audit events.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound with the workflow subsystem context
    """
    # Initial values keep the logger lazy until first use
    return structlog.get_logger(
        name,
        subsystem="workflow",
        audit_trail=True
    )


def log_milestone_transition(
    logger: FilteringBoundLogger,
    milestone_title: str,
    from_status: str,
    to_status: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a milestone status change with standardized format.

    Args:
        logger: Structlog logger instance
        milestone_title: Title of the milestone
        from_status: Status before the change
        to_status: Status after the change
        context: Additional context data
    """
    bound_logger = logger.bind(
        milestone=milestone_title,
        from_status=from_status,
        to_status=to_status,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.info("milestone_transition")


def log_payment_event(
    logger: FilteringBoundLogger,
    payment_kind: str,
    amount: Decimal,
    outcome: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a payment attempt with standardized format.

    Args:
        logger: Structlog logger instance
        payment_kind: Payment discriminator ("Escrow" or "Direct")
        amount: Amount being transferred
        outcome: "processed" or "rejected"
        context: Additional context data
    """
    bound_logger = logger.bind(
        payment_kind=payment_kind,
        amount=str(amount),
        outcome=outcome,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if outcome == "processed":
        bound_logger.info("payment_event")
    else:
        bound_logger.warning("payment_event")
