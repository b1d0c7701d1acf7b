"""
Preview Dispatcher - opens one export file at a time for preview.

Responsibilities:
- Pick the preview strategy from the file extension
- Keep exactly one active PreviewResult (or none)
- Release the held binary resource before anything new is rendered
- Turn every read/decode failure into an unsupported preview
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

from export_browser.core.events.catalog_events import PreviewChangedEvent
from export_browser.core.events.event_bus import DomainEventBus
from export_browser.core.exceptions import ExportBrowserError, HostUnavailableError
from export_browser.domains.file_catalog.models import FileEntry

from .classifier import classify
from .models import PreviewKind, PreviewResult, UnsupportedPreview
from .registry import PreviewStrategyRegistry
from .resource_lifecycle import ResourceLifecycle


class PreviewDispatcher:

    def __init__(
        self,
        export_directory: Path,
        registry: Optional[PreviewStrategyRegistry],
        lifecycle: ResourceLifecycle,
        event_bus: Optional[DomainEventBus] = None,
    ):
        self._export_directory = export_directory
        self._registry = registry
        self._lifecycle = lifecycle
        self._event_bus = event_bus

        self._active: Optional[PreviewResult] = None
        # open/close must not interleave at await points
        self._lock = asyncio.Lock()

        logging.info("PreviewDispatcher initialized")

    @property
    def active(self) -> Optional[PreviewResult]:
        return self._active

    @property
    def active_file_name(self) -> Optional[str]:
        return self._active.file_name if self._active else None

    def classify(self, filename: str) -> PreviewKind:
        """Preview kind for ``filename``, by extension only."""
        if self._registry is None:
            return classify(filename)
        return self._registry.kind_for(filename)

    async def open(self, entry: FileEntry) -> PreviewResult:
        """
        Replace the active preview with one for ``entry``.

        Never raises: anything that cannot be previewed comes back as
        UnsupportedPreview.
        """
        async with self._lock:
            self._clear()
            result = await self._render(entry)
            self._active = result

        logging.info(f"Preview opened: {entry.name} ({result.kind})")
        await self._publish(result.file_name, result.kind)
        return result

    async def close(self) -> None:
        """Close the preview view and release any held binary resource."""
        async with self._lock:
            had_preview = self._active is not None
            self._clear()

        if had_preview:
            logging.info("Preview closed")
            await self._publish(None, None)

    async def forget(self, name: str) -> bool:
        """Close the preview if it is showing ``name`` (the file is gone)."""
        if self.active_file_name != name:
            return False
        await self.close()
        return True

    def _clear(self) -> None:
        self._lifecycle.release()
        self._active = None

    async def _render(self, entry: FileEntry) -> PreviewResult:
        if self._registry is None:
            logging.warning(str(HostUnavailableError()))
            return UnsupportedPreview(file_name=entry.name, reason="desktop host not available")

        strategy = self._registry.resolve(entry.name)
        if strategy is None:
            logging.debug(f"No preview strategy for {entry.name}")
            return UnsupportedPreview(file_name=entry.name, reason="file type cannot be previewed")

        try:
            return await strategy.render(entry.name, self._export_directory / entry.name)
        except ExportBrowserError as e:
            logging.error(f"File read failed: {e}")
            return UnsupportedPreview(file_name=entry.name, reason=str(e))
        except Exception as e:
            logging.error(f"Unexpected error previewing {entry.name}: {e}", exc_info=True)
            return UnsupportedPreview(file_name=entry.name, reason=str(e))

    async def _publish(self, file_name: Optional[str], kind: Optional[str]) -> None:
        if self._event_bus:
            await self._event_bus.publish(PreviewChangedEvent(file_name=file_name, kind=kind))
