from typing import Dict

from .models import PreviewKind

DEFAULT_KIND_BY_EXTENSION: Dict[str, PreviewKind] = {
    "txt": PreviewKind.TEXT,
    "csv": PreviewKind.TABULAR,
    "pdf": PreviewKind.BINARY_RESOURCE,
}


def extension_of(filename: str) -> str:
    """Lowercased text after the last dot, or "" when the name has no dot."""
    if "." not in filename:
        return ""
    return filename.rsplit(".", 1)[1].lower()


def classify(filename: str) -> PreviewKind:
    """Preview kind for a file name. Looks at the extension only, never at content."""
    return DEFAULT_KIND_BY_EXTENSION.get(extension_of(filename), PreviewKind.UNSUPPORTED)
