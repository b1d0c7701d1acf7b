from dataclasses import dataclass

from export_browser.core.cqrs.query import Query


@dataclass(frozen=True)
class ResolveExportPathQuery(Query):
    name: str
