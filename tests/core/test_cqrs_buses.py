from dataclasses import dataclass

import pytest

from export_browser.core.cqrs.command import Command
from export_browser.core.cqrs.command_bus import CommandBus
from export_browser.core.cqrs.query import Query
from export_browser.core.cqrs.query_bus import QueryBus


@dataclass(frozen=True)
class EchoQuery(Query):
    value: str


@dataclass(frozen=True)
class CountCommand(Command):
    amount: int


class TestQueryBus:

    @pytest.mark.asyncio
    async def test_execute_routes_to_registered_handler(self):
        bus = QueryBus()

        async def handle_echo(query: EchoQuery) -> str:
            return query.value.upper()

        bus.register(EchoQuery, handle_echo)

        assert bus.is_registered(EchoQuery)
        assert await bus.execute(EchoQuery(value="report.csv")) == "REPORT.CSV"

    def test_register_twice_raises(self):
        bus = QueryBus()

        async def handler(query):
            return None

        bus.register(EchoQuery, handler)
        with pytest.raises(ValueError):
            bus.register(EchoQuery, handler)

    @pytest.mark.asyncio
    async def test_execute_without_handler_raises(self):
        with pytest.raises(ValueError, match="No handler registered"):
            await QueryBus().execute(EchoQuery(value="x"))

    @pytest.mark.asyncio
    async def test_handler_errors_propagate(self):
        bus = QueryBus()

        async def broken(query):
            raise RuntimeError("handler failed")

        bus.register(EchoQuery, broken)
        with pytest.raises(RuntimeError):
            await bus.execute(EchoQuery(value="x"))


class TestCommandBus:

    @pytest.mark.asyncio
    async def test_execute_returns_handler_result(self):
        bus = CommandBus()
        seen = []

        async def handle_count(command: CountCommand) -> int:
            seen.append(command.amount)
            return sum(seen)

        bus.register(CountCommand, handle_count)

        assert await bus.execute(CountCommand(amount=2)) == 2
        assert await bus.execute(CountCommand(amount=3)) == 5

    def test_register_twice_raises(self):
        bus = CommandBus()

        async def handler(command):
            return None

        bus.register(CountCommand, handler)
        with pytest.raises(ValueError):
            bus.register(CountCommand, handler)

    @pytest.mark.asyncio
    async def test_execute_without_handler_raises(self):
        with pytest.raises(ValueError):
            await CommandBus().execute(CountCommand(amount=1))
