from dataclasses import dataclass

from export_browser.core.cqrs.command import Command


# Re-list the export folder and commit the new catalog
@dataclass(frozen=True)
class RefreshCatalogCommand(Command):
    pass
