"""
Environment-gated logger.

Wraps a standard library logger so that informational output is only emitted
in development. Errors are always forwarded.
"""
import logging
import time
from typing import Any, Dict, Iterable, List, Optional

from app.core.config import AppConfig


class AppLogger:
    """
    Conditional logger.

    Every channel except ``error`` is a no-op unless ``enabled`` is true.
    ``enabled`` is decided once, by whoever builds the logger.
    """

    def __init__(self, name: str, enabled: bool, logger: Optional[logging.Logger] = None):
        self.enabled = enabled
        self._logger = logger or logging.getLogger(name)
        if enabled and not self._logger.isEnabledFor(logging.DEBUG):
            # Debug output in development regardless of LOG_LEVEL
            self._logger.setLevel(logging.DEBUG)
        self._timers: Dict[str, float] = {}
        self._depth = 0

    @classmethod
    def from_config(cls, name: str, config: AppConfig) -> "AppLogger":
        return cls(name, enabled=config.is_development)

    def _format(self, args: Iterable[Any]) -> str:
        message = " ".join(str(arg) for arg in args)
        return "  " * self._depth + message

    def log(self, *args: Any) -> None:
        if self.enabled:
            self._logger.info(self._format(args))

    def info(self, *args: Any) -> None:
        if self.enabled:
            self._logger.info(self._format(args))

    def warn(self, *args: Any) -> None:
        if self.enabled:
            self._logger.warning(self._format(args))

    def debug(self, *args: Any) -> None:
        if self.enabled:
            self._logger.debug(self._format(args))

    def error(self, *args: Any) -> None:
        # Always log errors, even in production
        self._logger.error(self._format(args))

    def table(self, rows: List[Dict[str, Any]]) -> None:
        """Log a list of dicts as an aligned text table."""
        if not self.enabled:
            return
        if not rows:
            self._logger.info(self._format(["(empty table)"]))
            return

        columns: List[str] = []
        for row in rows:
            for key in row:
                if key not in columns:
                    columns.append(key)

        widths = {
            column: max(len(str(column)), *(len(str(row.get(column, ""))) for row in rows))
            for column in columns
        }
        header = " | ".join(str(column).ljust(widths[column]) for column in columns)
        lines = [header, "-+-".join("-" * widths[column] for column in columns)]
        for row in rows:
            lines.append(" | ".join(str(row.get(column, "")).ljust(widths[column]) for column in columns))

        for line in lines:
            self._logger.info(self._format([line]))

    def time(self, label: str = "default") -> None:
        if self.enabled:
            self._timers[label] = time.perf_counter()

    def time_end(self, label: str = "default") -> None:
        if not self.enabled:
            return
        started = self._timers.pop(label, None)
        if started is None:
            self._logger.warning(self._format([f"Timer '{label}' does not exist"]))
            return
        elapsed_ms = (time.perf_counter() - started) * 1000
        self._logger.info(self._format([f"{label}: {elapsed_ms:.3f}ms"]))

    def group(self, label: str = "") -> None:
        if self.enabled:
            if label:
                self._logger.info(self._format([label]))
            self._depth += 1

    def group_end(self) -> None:
        if self.enabled and self._depth > 0:
            self._depth -= 1
