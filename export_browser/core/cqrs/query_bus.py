import logging
from typing import Any, Awaitable, Callable, Dict, Type

from export_browser.core.cqrs.query import Query

logger = logging.getLogger(__name__)


class QueryBus:
    """
    Async query bus (mediator). Routes each query type to exactly one handler.
    """

    def __init__(self):
        self._handlers: Dict[Type[Query], Callable[[Query], Awaitable[Any]]] = {}

    def register(self, query_type: Type[Query], handler: Callable[[Query], Awaitable[Any]]):
        """
        Register the single handler for a query type.

        Raises ValueError if the query type already has a handler.
        """
        if query_type in self._handlers:
            logger.error(f"Handler for query '{query_type.__name__}' is already registered.")
            raise ValueError(f"Handler for query '{query_type.__name__}' is already registered.")

        self._handlers[query_type] = handler
        logger.debug(f"Handler '{handler.__name__}' registered for '{query_type.__name__}'")

    def is_registered(self, query_type: Type[Query]) -> bool:
        return query_type in self._handlers

    async def execute(self, query: Query) -> Any:
        query_type = type(query)
        handler = self._handlers.get(query_type)

        if not handler:
            logger.error(f"No handler found for query '{query_type.__name__}'")
            raise ValueError(f"No handler registered for query '{query_type.__name__}'")

        logger.debug(f"Executing query '{query_type.__name__}' with handler '{handler.__name__}'")

        try:
            return await handler(query)
        except Exception as e:
            # Log and re-raise so the bridge endpoint can turn it into a 500
            logger.error(
                f"Error in handler '{handler.__name__}' executing '{query_type.__name__}': {e}",
                exc_info=True,
            )
            raise
