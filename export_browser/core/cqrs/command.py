from abc import ABC, abstractmethod
from typing import Generic, TypeVar

TCommand = TypeVar("TCommand", bound="Command")
TResult = TypeVar("TResult")


class Command(ABC):
    """Base class for all commands. A command requests a state change (refresh, open, delete...)."""
    pass


class CommandHandler(Generic[TCommand, TResult], ABC):
    @abstractmethod
    async def handle(self, command: TCommand) -> TResult:
        raise NotImplementedError
