"""Receipt sink construction from configuration."""

from typing import Any

from .base import ReceiptSink
from .file_sink import FileReceiptSink
from .stdout_sink import StdoutReceiptSink


def create_receipt_sink(receipt_config: dict[str, Any]) -> ReceiptSink:
    """
    Create the sink described by the ``receipts`` config section.

    Args:
        receipt_config: Merged ``receipts`` section (see config.defaults.ReceiptParams)

    Returns:
        Configured receipt sink

    Raises:
        ValueError: If the method is not supported
    """
    method = receipt_config.get("method", "file")
    currency_symbol = receipt_config.get("currency_symbol", "$")

    if method == "file":
        return FileReceiptSink(
            receipt_config.get("output_path", "payment_receipts.txt"),
            currency_symbol=currency_symbol,
            create_dirs=receipt_config.get("create_dirs", True),
        )
    if method == "stdout":
        return StdoutReceiptSink(currency_symbol=currency_symbol)

    raise ValueError(f"Unsupported receipt method: {method}")
