from .clipboard import ClipboardCapability, CommandLineClipboard
from .filesystem import (
    BinaryPayload,
    Base64BridgeFileSystem,
    FileStat,
    FileSystemCapability,
    LocalFileSystem,
    normalize_binary_payload,
    resolve_filesystem_capability,
)

__all__ = [
    "BinaryPayload",
    "Base64BridgeFileSystem",
    "ClipboardCapability",
    "CommandLineClipboard",
    "FileStat",
    "FileSystemCapability",
    "LocalFileSystem",
    "normalize_binary_payload",
    "resolve_filesystem_capability",
]
