# logger_utils.py - logging setup and timing helpers

from __future__ import annotations

import logging
import time
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"
ROOT_LOGGER = "autocorrector"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_path: Optional[str] = None) -> logging.Logger:
    """
    Configure the package logger.
    Console output goes through rich on stderr so it never mixes with suggestions
    printed on stdout. An optional plain-text file handler mirrors everything.
    """
    pkg = logging.getLogger(ROOT_LOGGER)
    pkg.setLevel(logging.DEBUG if verbose else logging.WARNING)
    for h in list(pkg.handlers):
        pkg.removeHandler(h)
        h.close()

    console = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    pkg.addHandler(console)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setFormatter(logging.Formatter(LOG_FORMAT))
        fh.setLevel(logging.DEBUG)
        pkg.addHandler(fh)
        pkg.setLevel(logging.DEBUG)

    pkg.propagate = False
    return pkg


class Log:
    """Metric helpers layered over stdlib logging."""

    @staticmethod
    def metric(tag: str, value, unit: str = "", log: Optional[logging.Logger] = None) -> None:
        """
        Record a metric (timings, counts).
        Example: corpus ingest done: 0.123s
        """
        (log or logger).info("%s: %s%s", tag, value, unit)

    @staticmethod
    def time_block(label: str, log: Optional[logging.Logger] = None) -> "_Timer":
        """
        Measure execution time of a code block:
            with Log.time_block("trie build"):
                build()
        """
        return _Timer(label, log)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str, log: Optional[logging.Logger] = None):
        self.label = label
        self.log = log
        self.start = time.perf_counter()
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = round(time.perf_counter() - self.start, 3)
        if exc_type is None:
            Log.metric(f"{self.label} done", self.elapsed, "s", self.log)
        else:
            (self.log or logger).debug("%s aborted after %ss", self.label, self.elapsed)
