"""
Structured trace events emitted while a move is being decided.

The kernel never logs directly; it hands TraceEvents to a tracer, which is
any callable taking one event. The default tracer writes them to the
standard logger, and TraceRecorder keeps them around for tests and the CLI.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional


logger = logging.getLogger(__name__)

# Events that deserve more than debug level
WARNING_EVENTS = {"no_safe_move"}


@dataclass
class TraceEvent:
    name: str
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        data = {"event": self.name}
        for key, value in self.fields.items():
            data[key] = _plain(value)
        return data


def _plain(value: Any) -> Any:
    # Directions serialize by wire name, coordinates as [x, y]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_plain(v) for v in value]
    return value


Tracer = Callable[[TraceEvent], None]


def log_trace(event: TraceEvent) -> None:
    """Default tracer: one log line per event."""
    level = logging.WARNING if event.name in WARNING_EVENTS else logging.DEBUG
    if not logger.isEnabledFor(level):
        return
    details = ", ".join(f"{k}={v}" for k, v in event.to_dict().items() if k != "event")
    logger.log(level, f"{event.name.upper()}: {details}")


class TraceRecorder:
    """
    Collects every event it is handed, optionally forwarding to another tracer.
    """

    def __init__(self, forward: Optional[Tracer] = None):
        self.events: List[TraceEvent] = []
        self.forward = forward

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)
        if self.forward is not None:
            self.forward(event)

    def named(self, name: str) -> List[TraceEvent]:
        return [e for e in self.events if e.name == name]

    def as_dicts(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self.events]
