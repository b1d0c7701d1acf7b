"""
Tests for the DomainEventBus.
"""

from unittest.mock import Mock

import pytest

from export_browser.core.events.catalog_events import ExportFileDeletedEvent, NotificationEvent
from export_browser.core.events.domain_event import DomainEvent
from export_browser.core.events.event_bus import DomainEventBus


@pytest.mark.asyncio
async def test_subscribe_and_publish():
    """A handler is called when its subscribed event is published."""
    bus = DomainEventBus()
    handler_mock = Mock()

    async def async_handler(event: DomainEvent):
        handler_mock(event)

    await bus.subscribe(ExportFileDeletedEvent, async_handler)

    event = ExportFileDeletedEvent(file_name="a.txt")
    await bus.publish(event)

    handler_mock.assert_called_once_with(event)


@pytest.mark.asyncio
async def test_publish_to_correct_handlers_only():
    bus = DomainEventBus()
    deleted_mock = Mock()
    notice_mock = Mock()

    async def on_deleted(event):
        deleted_mock(event)

    async def on_notice(event):
        notice_mock(event)

    await bus.subscribe(ExportFileDeletedEvent, on_deleted)
    await bus.subscribe(NotificationEvent, on_notice)

    await bus.publish(NotificationEvent(success=True, message="File path copied to clipboard!"))

    deleted_mock.assert_not_called()
    notice_mock.assert_called_once()


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others():
    """If one handler raises, the remaining handlers still run."""
    bus = DomainEventBus()
    survivor = Mock()

    async def broken_handler(event):
        raise RuntimeError("boom")

    async def working_handler(event):
        survivor(event)

    await bus.subscribe(ExportFileDeletedEvent, broken_handler)
    await bus.subscribe(ExportFileDeletedEvent, working_handler)

    event = ExportFileDeletedEvent(file_name="b.csv")
    await bus.publish(event)

    survivor.assert_called_once_with(event)


@pytest.mark.asyncio
async def test_publish_without_subscribers_is_noop():
    bus = DomainEventBus()
    await bus.publish(ExportFileDeletedEvent(file_name="c.pdf"))


def test_events_carry_id_and_timestamp():
    first = ExportFileDeletedEvent(file_name="a.txt")
    second = ExportFileDeletedEvent(file_name="a.txt")

    assert first.event_id != second.event_id
    assert first.timestamp.tzinfo is not None
