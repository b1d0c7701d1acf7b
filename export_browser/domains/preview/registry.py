import logging
from typing import Dict, List, Optional

from export_browser.config import Settings
from export_browser.core.host import FileSystemCapability

from .classifier import DEFAULT_KIND_BY_EXTENSION, extension_of
from .models import PreviewKind
from .resource_lifecycle import ResourceLifecycle
from .strategies import (
    BinaryResourcePreviewStrategy,
    PreviewStrategy,
    TabularPreviewStrategy,
    TextPreviewStrategy,
)


class PreviewStrategyRegistry:
    """
    Extension -> preview strategy lookup. Unknown extensions have no strategy
    and therefore preview as unsupported.
    """

    def __init__(self):
        self._strategies: Dict[str, PreviewStrategy] = {}

    def register(self, extension: str, strategy: PreviewStrategy) -> None:
        key = extension.lower().lstrip(".")
        if key in self._strategies:
            raise ValueError(f"Preview strategy for '.{key}' is already registered.")
        self._strategies[key] = strategy
        logging.debug(f"Preview strategy {type(strategy).__name__} registered for .{key}")

    def resolve(self, filename: str) -> Optional[PreviewStrategy]:
        return self._strategies.get(extension_of(filename))

    def kind_for(self, filename: str) -> PreviewKind:
        strategy = self.resolve(filename)
        return strategy.kind if strategy else PreviewKind.UNSUPPORTED

    @property
    def extensions(self) -> List[str]:
        return sorted(self._strategies)


def build_default_registry(
    settings: Settings,
    filesystem: FileSystemCapability,
    lifecycle: ResourceLifecycle,
) -> PreviewStrategyRegistry:
    """The registry for every extension in DEFAULT_KIND_BY_EXTENSION (.txt, .csv, .pdf)."""
    registry = PreviewStrategyRegistry()
    text_strategy = TextPreviewStrategy(filesystem)
    tabular_strategy = TabularPreviewStrategy(filesystem)

    for extension, kind in DEFAULT_KIND_BY_EXTENSION.items():
        if kind == PreviewKind.TEXT:
            registry.register(extension, text_strategy)
        elif kind == PreviewKind.TABULAR:
            registry.register(extension, tabular_strategy)
        elif kind == PreviewKind.BINARY_RESOURCE:
            media_type = settings.preview_media_types.get(extension, "application/octet-stream")
            registry.register(
                extension, BinaryResourcePreviewStrategy(filesystem, lifecycle, media_type=media_type)
            )

    return registry
