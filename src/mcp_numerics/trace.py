"""Per-iteration tracing shared by every solver family.

Solvers never print. They hand a :class:`TraceEvent` to a :class:`Tracer`,
which forwards it to an optional user callback and, when ``show_iterations``
is set, logs it at INFO level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceEvent:
    solver: str
    stage: str
    iteration: int
    data: Dict[str, Any] = field(default_factory=dict)


TraceCallback = Callable[[TraceEvent], None]


def format_value(value: Any) -> str:
    if isinstance(value, np.ndarray):
        if value.ndim == 2:
            return "\n" + np.array2string(value, precision=4, suppress_small=True, max_line_width=200)
        return np.array2string(value, precision=6, suppress_small=True)
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


class Tracer:
    def __init__(
        self,
        solver: str,
        show_iterations: bool = False,
        callback: Optional[TraceCallback] = None,
    ):
        self.solver = solver
        self.show_iterations = show_iterations
        self.callback = callback

    @property
    def enabled(self) -> bool:
        return self.show_iterations or self.callback is not None

    def emit(self, stage: str, iteration: int = 0, **data: Any) -> None:
        if not self.enabled:
            return
        # Arrays are mutated in place by the solvers after the event is emitted.
        payload = {
            key: value.copy() if isinstance(value, np.ndarray) else value
            for key, value in data.items()
        }
        event = TraceEvent(self.solver, stage, iteration, payload)
        if self.show_iterations:
            details = ", ".join(f"{key}={format_value(value)}" for key, value in payload.items())
            logger.info("%s [%s] iteration %d: %s", self.solver, stage, iteration, details)
        if self.callback is not None:
            self.callback(event)


class TraceCollector:
    """Callback that keeps every event it receives, for inspection after a solve."""

    def __init__(self) -> None:
        self.events: List[TraceEvent] = []

    def __call__(self, event: TraceEvent) -> None:
        self.events.append(event)

    def stages(self) -> List[str]:
        return [event.stage for event in self.events]
