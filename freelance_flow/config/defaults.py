"""Default configuration parameters for the freelance workflow."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ReceiptParams:
    """Receipt sink parameters."""
    method: str = "file"                             # file, stdout
    output_path: str = "payment_receipts.txt"        # Append-only receipt log
    currency_symbol: str = "$"
    create_dirs: bool = True                         # Create parent directories on first write


@dataclass(frozen=True)
class LoggingParams:
    """Logging parameters passed to configure_logging."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class WorkflowDefaults:
    """Defaults applied when project input omits optional fields."""
    default_payment_kind: str = "escrow"             # escrow, direct


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    receipts: ReceiptParams
    logging: LoggingParams
    workflow: WorkflowDefaults


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        receipts=ReceiptParams(),
        logging=LoggingParams(),
        workflow=WorkflowDefaults(),
    )
