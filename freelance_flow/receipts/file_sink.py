"""Append-only file receipt sink."""

import fcntl
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional, Union

from ..errors import ReceiptWriteError
from .base import ReceiptRecord, ReceiptSink


class FileReceiptSink(ReceiptSink):
    """Appends rendered receipts to a text file."""

    def __init__(self, output_path: Union[str, Path], currency_symbol: str = "$",
                 create_dirs: bool = True,
                 clock: Optional[Callable[[], datetime]] = None):
        super().__init__("file", currency_symbol=currency_symbol, clock=clock)
        self.output_path = Path(output_path)
        self.create_dirs = create_dirs

    def _write(self, receipt: ReceiptRecord) -> None:
        try:
            if self.create_dirs:
                self.output_path.parent.mkdir(parents=True, exist_ok=True)

            # The lock is released when the file is closed
            with open(self.output_path, "a") as f:
                fcntl.flock(f.fileno(), fcntl.LOCK_EX)
                f.write(receipt.render(self.currency_symbol))
                f.flush()

        except OSError as e:
            self.logger.warning(
                "Receipt file write failed",
                sink=self.name,
                output_path=str(self.output_path),
                error=str(e)
            )
            raise ReceiptWriteError(
                f"Unable to open log file: {self.output_path}",
                operation="append",
                target=str(self.output_path),
                context={"os_error": str(e)}
            ) from e

        print(f"Payment receipt logged to file: {self.output_path}", flush=True)
