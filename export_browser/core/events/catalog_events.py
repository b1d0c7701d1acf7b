from dataclasses import dataclass
from typing import Optional, Tuple

from export_browser.core.events.domain_event import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CatalogRefreshedEvent(DomainEvent):
    """A refresh committed a new catalog snapshot."""

    generation: int
    file_names: Tuple[str, ...]


@dataclass(frozen=True, kw_only=True)
class ExportFileDeletedEvent(DomainEvent):
    """A file was removed from disk and from the catalog."""

    file_name: str


@dataclass(frozen=True, kw_only=True)
class PreviewChangedEvent(DomainEvent):
    """The active preview was replaced or closed (file_name is None when closed)."""

    file_name: Optional[str]
    kind: Optional[str]


@dataclass(frozen=True, kw_only=True)
class NotificationEvent(DomainEvent):
    """A user-facing notice (toast) produced by a file operation."""

    success: bool
    message: str
    detail: Optional[str] = None
