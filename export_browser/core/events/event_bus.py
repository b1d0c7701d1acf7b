"""
Central domain event bus.

Catalog refreshes, deletes, preview switches and toast notifications are
published here; the presentation layer subscribes and pushes them to the
webview.
"""
import asyncio
import logging
from collections import defaultdict
from typing import Awaitable, Callable, Dict, List, Type

from export_browser.core.events.domain_event import DomainEvent

# An event handler is an async callable taking the event and returning None
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class DomainEventBus:
    """
    Async publish/subscribe bus for export browser domain events.

    Subscribers of one event run concurrently. A failing subscriber is logged
    and does not stop the others, and never reaches the publisher: a delete or
    a refresh that already succeeded is not turned into a failure by a broken
    WebSocket push.
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = defaultdict(list)
        self._lock = asyncio.Lock()

    async def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe ``handler`` to ``event_type``.

        Args:
            event_type: The DomainEvent subclass to listen for. Subclasses of it
                are not matched; dispatch is on the exact type.
            handler: Async callable invoked with each published event.
        """
        async with self._lock:
            self._handlers[event_type].append(handler)
            logging.debug(f"Handler {handler.__name__} subscribed to {event_type.__name__}")

    async def publish(self, event: DomainEvent) -> None:
        """
        Deliver ``event`` to every handler subscribed to its type.

        Returns once all handlers have finished. Handler exceptions are logged
        with a stack trace and swallowed.

        Args:
            event: The domain event instance to publish.
        """
        event_type = type(event)
        # Copy so a subscribe during publish does not change this delivery
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logging.debug(f"No handlers for event {event_type.__name__}")
            return

        logging.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")
        await asyncio.gather(*(self._safe_execute(handler, event) for handler in handlers))

    async def _safe_execute(self, handler: EventHandler, event: DomainEvent) -> None:
        """Run one handler, logging instead of raising on failure."""
        try:
            await handler(event)
        except Exception as e:
            logging.error(
                f"Unhandled exception in handler '{handler.__name__}' for event "
                f"'{type(event).__name__}': {e}",
                exc_info=True,
            )
