"""Structured event loggers for solver and CLI diagnostics."""

from __future__ import annotations

import json
import sys
from typing import Any, Dict, Protocol, TextIO

LEVELS: Dict[str, int] = {"debug": 10, "info": 20, "warning": 30}


class Logger(Protocol):
    """Anything that accepts named events with keyword fields."""

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO``-level event."""
        ...

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG``-level event."""
        ...

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING``-level event."""
        ...


class NoopLogger:
    """Logger that drops every event; the solver default."""

    def info(self, event: str, **fields: Any) -> None:
        return

    def debug(self, event: str, **fields: Any) -> None:
        return

    def warning(self, event: str, **fields: Any) -> None:
        return


class StdLogger:
    """Write events to a text stream as ``level event k=v`` lines or JSON.

    Args:
        level: Minimum level to emit (``"debug"``, ``"info"`` or ``"warning"``).
        json_fmt: Emit one JSON object per event instead of plain text.
        stream: Destination stream, ``sys.stderr`` when omitted.

    Examples:
        ```python
        >>> import io
        >>> buf = io.StringIO()
        >>> StdLogger(level="info", stream=buf).info("solve.done", pops=3)
        >>> buf.getvalue()
        'info solve.done pops=3\\n'
        ```
    """

    def __init__(
        self,
        level: str = "warning",
        json_fmt: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        if level not in LEVELS:
            raise ValueError(f"unknown log level '{level}'")
        self.level = level
        self.json_fmt = json_fmt
        self.stream = stream or sys.stderr

    def enabled(self, level: str) -> bool:
        """Return ``True`` if events at ``level`` would be written."""
        return LEVELS[level] >= LEVELS[self.level]

    def log(self, level: str, event: str, **fields: Any) -> None:
        """Emit ``event`` at ``level`` with additional ``fields``."""
        if not self.enabled(level):
            return
        if self.json_fmt:
            record: Dict[str, Any] = {"level": level, "event": event}
            record.update(fields)
            line = json.dumps(record, default=repr)
        else:
            kv = " ".join(f"{k}={v}" for k, v in fields.items())
            line = f"{level} {event} {kv}".rstrip()
        self.stream.write(line + "\n")

    def info(self, event: str, **fields: Any) -> None:
        """Emit an ``INFO`` event."""
        self.log("info", event, **fields)

    def debug(self, event: str, **fields: Any) -> None:
        """Emit a ``DEBUG`` event."""
        self.log("debug", event, **fields)

    def warning(self, event: str, **fields: Any) -> None:
        """Emit a ``WARNING`` event."""
        self.log("warning", event, **fields)


__all__ = ["LEVELS", "Logger", "NoopLogger", "StdLogger"]
