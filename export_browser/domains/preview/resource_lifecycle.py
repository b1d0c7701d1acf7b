import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from .models import ResourceHandle


@dataclass(frozen=True)
class RenderResource:
    """Bytes held for the embedded viewer, plus the handle the webview uses to fetch them."""

    handle: ResourceHandle
    data: bytes
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class ResourceLifecycle:
    """
    Owner of the single live binary rendering resource.

    Any held resource is released before a new one is created, so at most one
    exists at a time. Releasing when nothing is held does nothing.
    """

    def __init__(self, url_prefix: str = "/api/preview/resources"):
        self._url_prefix = url_prefix.rstrip("/")
        self._current: Optional[RenderResource] = None
        self._created_count = 0
        self._released_count = 0

    @property
    def current_handle(self) -> Optional[ResourceHandle]:
        return self._current.handle if self._current else None

    @property
    def live_count(self) -> int:
        return 1 if self._current is not None else 0

    @property
    def created_count(self) -> int:
        return self._created_count

    @property
    def released_count(self) -> int:
        return self._released_count

    def acquire(self, data: bytes, media_type: str) -> ResourceHandle:
        self.release()

        resource_id = str(uuid.uuid4())
        handle = ResourceHandle(
            resource_id=resource_id,
            media_type=media_type,
            size_bytes=len(data),
            url=f"{self._url_prefix}/{resource_id}",
        )
        self._current = RenderResource(handle=handle, data=data)
        self._created_count += 1

        logging.debug(f"Render resource {resource_id} created ({len(data)} bytes, {media_type})")
        return handle

    def release(self) -> bool:
        """Drop the held resource. Returns False if there was nothing to release."""
        if self._current is None:
            return False

        resource_id = self._current.handle.resource_id
        self._current = None
        self._released_count += 1
        logging.debug(f"Render resource {resource_id} released")
        return True

    def get(self, resource_id: str) -> Optional[RenderResource]:
        """The live resource with this id, or None once it has been released."""
        if self._current is not None and self._current.handle.resource_id == resource_id:
            return self._current
        return None
