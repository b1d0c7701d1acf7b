"""
Catalog Repository - in-memory storage for the current FileEntry set.
"""

import asyncio
import logging
from typing import Dict, Iterable, List, Optional

from .models import FileEntry, sort_catalog


class CatalogRepository:
    """
    Holds the catalog keyed by file name. Insertion order is the directory
    enumeration order; the sorted view is recomputed on every read.
    """

    def __init__(self):
        self._entries_by_name: Dict[str, FileEntry] = {}
        self._lock = asyncio.Lock()

    async def replace_all(self, entries: Iterable[FileEntry]) -> None:
        """Swap in a freshly listed set of entries."""
        fresh: Dict[str, FileEntry] = {}
        for entry in entries:
            if entry.name in fresh:
                logging.warning(f"Duplicate catalog entry ignored: {entry.name}")
                continue
            fresh[entry.name] = entry

        async with self._lock:
            self._entries_by_name = fresh

    async def get(self, name: str) -> Optional[FileEntry]:
        async with self._lock:
            return self._entries_by_name.get(name)

    async def get_sorted(self) -> List[FileEntry]:
        async with self._lock:
            return sort_catalog(self._entries_by_name.values())

    async def remove(self, name: str) -> bool:
        async with self._lock:
            if name in self._entries_by_name:
                del self._entries_by_name[name]
                return True
            return False

    async def count(self) -> int:
        async with self._lock:
            return len(self._entries_by_name)
