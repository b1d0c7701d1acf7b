from typing import Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


class FileEntry(BaseModel):
    """One regular file in the export folder."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="File name, unique within the export folder")
    modified_at: int = Field(
        default=0, description="Last modification time in epoch milliseconds (0 if unknown)"
    )


class CatalogSnapshot(BaseModel):
    """The catalog as handed to the webview."""

    host_available: bool = Field(..., description="False outside the desktop host")
    directory: Optional[str] = Field(None, description="Absolute export folder path")
    entries: List[FileEntry] = Field(default_factory=list, description="Newest first")
    is_loading: bool = Field(default=False, description="A refresh is in flight")
    message: Optional[str] = Field(None, description="Shown instead of the list when set")

    @computed_field
    @property
    def total_files(self) -> int:
        return len(self.entries)


def sort_catalog(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """
    Newest first. Python's sort is stable with reverse=True, so entries with the
    same timestamp keep their enumeration order.
    """
    return sorted(entries, key=lambda entry: entry.modified_at, reverse=True)
