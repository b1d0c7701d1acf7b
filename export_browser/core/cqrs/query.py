from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TQuery = TypeVar("TQuery", bound="Query")
TResult = TypeVar("TResult")


class Query(ABC):
    """
    Base class for all queries.
    A query is a read-only request; handling it never changes catalog or preview state.
    """
    pass


class QueryHandler(Generic[TQuery, TResult], ABC):
    @abstractmethod
    async def handle(self, query: TQuery) -> TResult:
        raise NotImplementedError
