"""In-memory pub/sub bus for lifecycle signals, delivered once per tick."""
from __future__ import annotations

from typing import Any, Callable

_Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals until ``flush()``.

    Signals published by a handler during a flush wait for the next one,
    so a tick never delivers an unbounded chain.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        batch, self._queue = self._queue, []
        for signal_name, data in batch:
            for handler in tuple(self._subscribers.get(signal_name, ())):
                handler(signal_name, data)
