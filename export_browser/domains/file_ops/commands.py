from dataclasses import dataclass

from export_browser.core.cqrs.command import Command


@dataclass(frozen=True)
class DeleteExportFileCommand(Command):
    name: str


@dataclass(frozen=True)
class CopyExportPathCommand(Command):
    name: str
