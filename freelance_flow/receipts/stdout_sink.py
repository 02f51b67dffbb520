"""Standard output receipt sink."""

import sys

from .base import ReceiptRecord, ReceiptSink


class StdoutReceiptSink(ReceiptSink):
    """Prints rendered receipts to stdout for console-only runs."""

    def __init__(self, currency_symbol: str = "$", **kwargs):
        super().__init__("stdout", currency_symbol=currency_symbol, **kwargs)

    def _write(self, receipt: ReceiptRecord) -> None:
        print(receipt.render(self.currency_symbol), end="", file=sys.stdout, flush=True)
