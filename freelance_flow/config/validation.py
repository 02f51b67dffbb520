"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

RECEIPT_METHODS = ("file", "stdout")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
PAYMENT_KINDS = ("escrow", "direct")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_receipt_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate receipt sink parameters."""
        errors = []

        if "method" in params:
            value = params["method"]
            if value not in RECEIPT_METHODS:
                errors.append(ValidationError(
                    field="receipts.method",
                    message=f"Must be one of {', '.join(RECEIPT_METHODS)}",
                    value=value
                ))

        if "output_path" in params:
            value = params["output_path"]
            if not isinstance(value, str) or not value.strip():
                errors.append(ValidationError(
                    field="receipts.output_path",
                    message="Must be a non-empty string",
                    value=value
                ))

        if "currency_symbol" in params:
            value = params["currency_symbol"]
            if not isinstance(value, str):
                errors.append(ValidationError(
                    field="receipts.currency_symbol",
                    message="Must be a string",
                    value=value
                ))

        if "create_dirs" in params:
            value = params["create_dirs"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="receipts.create_dirs",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="logging.format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_workflow_defaults(params: dict[str, Any]) -> list[ValidationError]:
        """Validate workflow defaults."""
        errors = []

        if "default_payment_kind" in params:
            value = params["default_payment_kind"]
            if not isinstance(value, str) or value.lower() not in PAYMENT_KINDS:
                errors.append(ValidationError(
                    field="workflow.default_payment_kind",
                    message=f"Must be one of {', '.join(PAYMENT_KINDS)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "receipts" in config:
            errors.extend(ConfigValidator.validate_receipt_params(config["receipts"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "workflow" in config:
            errors.extend(ConfigValidator.validate_workflow_defaults(config["workflow"]))

        return errors
