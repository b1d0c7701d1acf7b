"""
File Catalog Service - lists the export folder and keeps the in-memory catalog.

Responsibilities:
- Enumerate the export folder, keeping regular files only
- Fetch modification times concurrently, one task per entry
- Commit refresh results only when they are still the newest refresh
- Remove single entries after a delete without rescanning

A broken entry is skipped, a broken folder yields an empty list. Nothing is
raised past this service.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from export_browser.config import Settings
from export_browser.core.events.catalog_events import CatalogRefreshedEvent
from export_browser.core.events.event_bus import DomainEventBus
from export_browser.core.exceptions import (
    EntryMetadataFailedError,
    HostUnavailableError,
    ListingFailedError,
)
from export_browser.core.host import FileSystemCapability

from .catalog_repository import CatalogRepository
from .models import FileEntry, sort_catalog


class FileCatalogService:

    def __init__(
        self,
        settings: Settings,
        filesystem: Optional[FileSystemCapability],
        repository: CatalogRepository,
        event_bus: Optional[DomainEventBus] = None,
    ):
        self._settings = settings
        self._filesystem = filesystem
        self._repository = repository
        self._event_bus = event_bus
        self._entry_timeout = settings.entry_metadata_timeout_seconds

        self._generation = 0
        self._committed_generation = 0
        self._in_flight = 0

        logging.info("FileCatalogService initialized")

    @property
    def export_directory(self) -> Path:
        return self._settings.export_directory

    @property
    def host_available(self) -> bool:
        return self._filesystem is not None

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    @property
    def committed_generation(self) -> int:
        return self._committed_generation

    async def list_directory(self, path: Path) -> List[FileEntry]:
        """
        List regular files in ``path``, newest first.

        Returns an empty list if the directory cannot be read.
        """
        if self._filesystem is None:
            logging.warning(str(HostUnavailableError()))
            return []

        try:
            names = await self._filesystem.list_dir(path)
        except Exception as e:
            logging.error(str(ListingFailedError(str(path), str(e))))
            return []

        # Per-entry failures are isolated in _fetch_entry, so gather never raises here
        results = await asyncio.gather(*(self._fetch_entry(path, name) for name in names))
        entries = [entry for entry in results if entry is not None]

        logging.debug(f"Listed {len(entries)} files ({len(names)} entries) in {path}")
        return sort_catalog(entries)

    async def _fetch_entry(self, directory: Path, name: str) -> Optional[FileEntry]:
        try:
            file_stat = await asyncio.wait_for(
                self._filesystem.stat(directory / name), timeout=self._entry_timeout
            )
        except asyncio.TimeoutError:
            logging.warning(str(EntryMetadataFailedError(name, "metadata fetch timed out")))
            return None
        except Exception as e:
            logging.warning(str(EntryMetadataFailedError(name, str(e))))
            return None

        if not file_stat.is_file:
            logging.debug(f"Skipping non-file entry: {name}")
            return None

        return FileEntry(name=name, modified_at=file_stat.modified_at_ms or 0)

    async def refresh(self) -> List[FileEntry]:
        """
        Re-list the export folder and commit the result to the catalog.

        If another refresh started while this one was running, this result is
        stale and is dropped in favour of the newer one.
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1

        try:
            entries = await self.list_directory(self.export_directory)
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logging.debug(
                f"Discarding stale catalog refresh #{generation} (newest is #{self._generation})"
            )
            return await self._repository.get_sorted()

        await self._repository.replace_all(entries)
        self._committed_generation = generation
        logging.info(f"Catalog refreshed: {len(entries)} files in {self.export_directory}")

        if self._event_bus:
            await self._event_bus.publish(
                CatalogRefreshedEvent(
                    generation=generation,
                    file_names=tuple(entry.name for entry in entries),
                )
            )

        return entries

    async def snapshot(self) -> List[FileEntry]:
        """Current catalog, newest first, without touching the disk."""
        return await self._repository.get_sorted()

    async def get_entry(self, name: str) -> Optional[FileEntry]:
        return await self._repository.get(name)

    async def remove_entry(self, name: str) -> bool:
        """
        Drop one entry from the catalog (used after a successful delete).

        Any refresh still in flight may have listed the folder before the delete,
        so its result is invalidated to keep the removed entry from coming back.
        """
        if self._in_flight:
            self._generation += 1
            logging.debug(f"Invalidated in-flight catalog refresh after removing {name}")

        removed = await self._repository.remove(name)
        if not removed:
            logging.debug(f"Entry not in catalog, nothing to remove: {name}")
        return removed

    def get_service_info(self) -> dict:
        return {
            "service": "FileCatalogService",
            "export_directory": str(self.export_directory),
            "host_available": self.host_available,
            "entry_timeout_seconds": self._entry_timeout,
            "generation": self._generation,
            "committed_generation": self._committed_generation,
        }
