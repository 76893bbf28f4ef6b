"""Synchronous domain-event dispatcher.

Handlers are registered per event name and called synchronously, in
registration order, for every event published under that name.  A
handler that raises does not stop delivery to the others: the failure is
counted per event and handler, kept as a dead letter and passed to the
optional error callback.
"""

from __future__ import annotations

import logging
import time
from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from ordering.core.interfaces import EventHandler
from ordering.domain.events import DomainEvent
from ordering.observability.logger import correlation_scope

logger = logging.getLogger(__name__)


@dataclass
class DeadLetter:
    """Record of a handler failure."""

    event_name: str
    handler: str
    event_id: str
    error: str
    timestamp: float = field(default_factory=time.monotonic)


def _handler_name(handler: EventHandler[Any]) -> str:
    return type(handler).__name__


class EventDispatcher:
    """Explicit registry mapping event name to an ordered list of handlers.

    Construct one at process start, register handlers, and pass the
    instance to every component that publishes events.  Registering the
    same handler instance twice under the same name is a no-op.

    A handler that raises is logged, counted and recorded as a dead
    letter; the remaining handlers still run and the failure never
    reaches the publisher.
    """

    def __init__(
        self,
        on_handler_error: Callable[
            [str, str, str, Exception], None
        ] | None = None,
    ) -> None:
        # event name → handlers in registration order
        self._handlers: dict[str, list[EventHandler[Any]]] = defaultdict(list)
        self._on_handler_error = on_handler_error

        # Observability
        self._error_counts: dict[str, int] = defaultdict(int)
        self._dead_letters: list[DeadLetter] = []
        self._events_dispatched: int = 0

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def register(self, event_name: str, handler: EventHandler[Any]) -> None:
        """Subscribe *handler* to events named *event_name*."""
        handlers = self._handlers[event_name]
        if any(h is handler for h in handlers):
            logger.debug(
                "Handler %s already registered for %s",
                _handler_name(handler),
                event_name,
            )
            return
        handlers.append(handler)

    def unregister(self, event_name: str, handler: EventHandler[Any]) -> None:
        """Remove *handler* from *event_name*.  No-op if not registered."""
        handlers = self._handlers.get(event_name)
        if not handlers:
            return
        handlers[:] = [h for h in handlers if h is not handler]
        if not handlers:
            del self._handlers[event_name]

    def unregister_all(self) -> None:
        """Drop every registration."""
        self._handlers.clear()

    def get_handlers(self, event_name: str) -> list[EventHandler[Any]]:
        """Handlers for *event_name* in registration order (snapshot)."""
        return list(self._handlers.get(event_name, ()))

    @property
    def event_names(self) -> list[str]:
        return list(self._handlers)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def notify(self, event: DomainEvent[Any]) -> None:
        """Deliver *event* to every handler registered under ``event.name``."""
        handlers = self.get_handlers(event.name)
        if not handlers:
            logger.debug("No handlers registered for %s", event.name)
            return

        with correlation_scope(event.event_id):
            self._deliver(event, handlers)

        self._events_dispatched += 1

    def _deliver(
        self, event: DomainEvent[Any], handlers: list[EventHandler[Any]],
    ) -> None:
        for handler in handlers:
            try:
                handler.handle(event)
            except Exception as exc:
                name = _handler_name(handler)
                self._error_counts[f"{event.name}/{name}"] += 1
                self._dead_letters.append(
                    DeadLetter(
                        event_name=event.name,
                        handler=name,
                        event_id=event.event_id,
                        error=str(exc),
                    )
                )
                logger.exception(
                    "Handler error on event=%s handler=%s event_id=%s",
                    event.name,
                    name,
                    event.event_id,
                )

                # Fire external error callback
                if self._on_handler_error is not None:
                    try:
                        self._on_handler_error(event.name, name, event.event_id, exc)
                    except Exception:
                        logger.warning(
                            "on_handler_error callback failed",
                            exc_info=True,
                        )

    # ------------------------------------------------------------------
    # Observability
    # ------------------------------------------------------------------

    def get_error_counts(self) -> dict[str, int]:
        """Return per-event/handler error counts."""
        return dict(self._error_counts)

    @property
    def dead_letters(self) -> list[DeadLetter]:
        """Access the dead-letter list (read-only snapshot)."""
        return list(self._dead_letters)

    @property
    def events_dispatched(self) -> int:
        """Events delivered to at least one handler."""
        return self._events_dispatched

    def clear_dead_letters(self) -> list[DeadLetter]:
        """Drain the dead-letter list and return all entries."""
        drained = self._dead_letters[:]
        self._dead_letters.clear()
        return drained
