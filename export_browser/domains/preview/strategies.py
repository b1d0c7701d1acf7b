"""
Preview strategies, one per previewable format.

Each strategy reads a file through the host filesystem capability and returns
a PreviewResult. Read problems surface as ReadFailedError, content problems as
DecodeFailedError; the dispatcher turns both into an unsupported preview.
"""

from pathlib import Path
from typing import Protocol

from export_browser.core.exceptions import DecodeFailedError, ReadFailedError
from export_browser.core.host import BinaryPayload, FileSystemCapability

from .decoders import decode_binary, parse_delimited
from .models import (
    BinaryResourcePreview,
    PreviewKind,
    PreviewResult,
    TabularPreview,
    TextPreview,
)
from .resource_lifecycle import ResourceLifecycle


class PreviewStrategy(Protocol):
    kind: PreviewKind

    async def render(self, name: str, path: Path) -> PreviewResult: ...


async def _read_text(filesystem: FileSystemCapability, name: str, path: Path, file_format: str) -> str:
    try:
        return await filesystem.read_text(path)
    except UnicodeDecodeError as e:
        raise DecodeFailedError(name, file_format, str(e)) from e
    except OSError as e:
        raise ReadFailedError(name, e.strerror or str(e)) from e


class TextPreviewStrategy:
    kind = PreviewKind.TEXT

    def __init__(self, filesystem: FileSystemCapability):
        self._filesystem = filesystem

    async def render(self, name: str, path: Path) -> PreviewResult:
        content = await _read_text(self._filesystem, name, path, "text")
        return TextPreview(file_name=name, content=content)


class TabularPreviewStrategy:
    kind = PreviewKind.TABULAR

    def __init__(self, filesystem: FileSystemCapability):
        self._filesystem = filesystem

    async def render(self, name: str, path: Path) -> PreviewResult:
        text = await _read_text(self._filesystem, name, path, "csv")
        columns, rows = parse_delimited(name, text)
        return TabularPreview(file_name=name, columns=columns, rows=rows)


class BinaryResourcePreviewStrategy:
    kind = PreviewKind.BINARY_RESOURCE

    def __init__(
        self,
        filesystem: FileSystemCapability,
        lifecycle: ResourceLifecycle,
        media_type: str = "application/octet-stream",
    ):
        self._filesystem = filesystem
        self._lifecycle = lifecycle
        self._media_type = media_type

    async def render(self, name: str, path: Path) -> PreviewResult:
        try:
            payload: BinaryPayload = await self._filesystem.read_binary(path)
        except OSError as e:
            raise ReadFailedError(name, e.strerror or str(e)) from e

        data = decode_binary(name, payload)
        handle = self._lifecycle.acquire(data, self._media_type)
        return BinaryResourcePreview(file_name=name, handle=handle)
