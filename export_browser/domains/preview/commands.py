from dataclasses import dataclass

from export_browser.core.cqrs.command import Command


@dataclass(frozen=True)
class OpenPreviewCommand(Command):
    name: str


@dataclass(frozen=True)
class ClosePreviewCommand(Command):
    pass
