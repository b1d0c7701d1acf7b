"""
Filesystem capability of the desktop host.

All export-folder I/O goes through a ``FileSystemCapability``. Outside the
desktop host there is no capability at all (``None``), which callers treat as
"feature disabled" rather than as an error.
"""

import base64
import logging
import stat
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Union

import aiofiles
import aiofiles.os

BinaryPayload = Union[str, bytes, bytearray, memoryview]


@dataclass(frozen=True)
class FileStat:
    """The subset of stat information the catalog needs."""

    is_file: bool
    modified_at_ms: Optional[int]
    size_bytes: int = 0


class FileSystemCapability(Protocol):
    async def exists(self, path: Path) -> bool: ...

    async def is_dir(self, path: Path) -> bool: ...

    async def make_dirs(self, path: Path) -> None: ...

    async def list_dir(self, path: Path) -> List[str]: ...

    async def stat(self, path: Path) -> FileStat: ...

    async def read_text(self, path: Path) -> str: ...

    async def read_binary(self, path: Path) -> BinaryPayload: ...

    async def remove(self, path: Path) -> None: ...


class LocalFileSystem:
    """FileSystemCapability backed by the local disk through aiofiles."""

    async def exists(self, path: Path) -> bool:
        return await aiofiles.os.path.exists(str(path))

    async def is_dir(self, path: Path) -> bool:
        return await aiofiles.os.path.isdir(str(path))

    async def make_dirs(self, path: Path) -> None:
        await aiofiles.os.makedirs(str(path), exist_ok=True)

    async def list_dir(self, path: Path) -> List[str]:
        return await aiofiles.os.listdir(str(path))

    async def stat(self, path: Path) -> FileStat:
        stat_result = await aiofiles.os.stat(str(path))
        mtime_ns = getattr(stat_result, "st_mtime_ns", None)
        return FileStat(
            is_file=stat.S_ISREG(stat_result.st_mode),
            modified_at_ms=mtime_ns // 1_000_000 if mtime_ns is not None else None,
            size_bytes=stat_result.st_size,
        )

    async def read_text(self, path: Path) -> str:
        # newline="" keeps line endings exactly as stored
        async with aiofiles.open(str(path), "r", encoding="utf-8", newline="") as f:
            return await f.read()

    async def read_binary(self, path: Path) -> BinaryPayload:
        async with aiofiles.open(str(path), "rb") as f:
            return await f.read()

    async def remove(self, path: Path) -> None:
        await aiofiles.os.remove(str(path))


class Base64BridgeFileSystem(LocalFileSystem):
    """
    Variant used when the webview shell marshals binary reads over a JSON IPC
    channel: ``read_binary`` hands back base64 text instead of bytes.
    """

    async def read_binary(self, path: Path) -> BinaryPayload:
        raw = await super().read_binary(path)
        return base64.b64encode(raw).decode("ascii")


def normalize_binary_payload(payload: BinaryPayload) -> bytes:
    """
    Convert whatever the host returned for a binary read into raw bytes.

    Raises:
        ValueError: if a text payload is not valid base64.
        TypeError: for any other payload type.
    """
    if isinstance(payload, str):
        return base64.b64decode(payload, validate=True)
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    raise TypeError(f"Unsupported binary payload type: {type(payload).__name__}")


def resolve_filesystem_capability(
    host_runtime: str, transport: str = "native"
) -> Optional[FileSystemCapability]:
    """
    Pick the filesystem capability for this process. Called once at startup.

    Returns None when not running inside the desktop host.
    """
    if host_runtime != "desktop":
        logging.info(
            f"Host runtime '{host_runtime}' has no filesystem access - export browser disabled"
        )
        return None

    if transport == "base64":
        logging.info("Filesystem capability: local disk (base64 binary transport)")
        return Base64BridgeFileSystem()

    logging.info("Filesystem capability: local disk")
    return LocalFileSystem()
