"""
Line-oriented run log for svg2unity.

Messages go to the console and, when a log file is configured, are appended to
it so that successive runs accumulate in one file.
"""

from __future__ import annotations

import sys
import time
from datetime import datetime
from pathlib import Path
from typing import Optional


class SimpleLogger:
    """Console and log file output for a conversion run."""

    def __init__(self, log_file: Optional[Path] = None):
        self.log_file = log_file
        self.started = time.time()

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)
            self._record(f"\n--- svg2unity run {datetime.now().isoformat(timespec='seconds')} ---")

    def log(self, message: str, level: str = "", stamped: bool = True) -> None:
        """Print one line and mirror it to the log file.

        ``ERROR`` lines go to stderr. Unstamped lines carry neither time nor level.
        """
        line = message
        if stamped:
            tag = f" {level}:" if level else ""
            line = f"[{datetime.now():%H:%M:%S}]{tag} {message}"

        print(line, file=sys.stderr if level == "ERROR" else sys.stdout, flush=True)
        self._record(line)

    def _record(self, line: str) -> None:
        if not self.log_file:
            return
        try:
            with open(self.log_file, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError:
            pass  # a broken log file never aborts a conversion

    def progress(self, done: int, total: int, frame: Path, keyframes: int) -> None:
        """Report how far the frame traversal has got."""
        elapsed = time.time() - self.started
        rate = done / elapsed if elapsed > 0 else 0.0
        self.log(
            f"frame {done}/{total} ({done / total:.0%}) {frame.name}: "
            f"{keyframes:,} keyframes, {rate:.0f} frames/s"
        )

    def success(self, message: str) -> None:
        self.log(message, level="DONE")

    def error(self, message: str) -> None:
        self.log(message, level="ERROR")

    def status(self, message: str) -> None:
        """Final exit status line, printed bare."""
        self.log(message, stamped=False)
