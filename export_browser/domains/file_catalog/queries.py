from dataclasses import dataclass

from export_browser.core.cqrs.query import Query


# Current catalog, without rescanning
@dataclass(frozen=True)
class GetCatalogQuery(Query):
    pass


# Single catalog entry by file name
@dataclass(frozen=True)
class GetCatalogEntryQuery(Query):
    name: str


@dataclass(frozen=True)
class GetCatalogInfoQuery(Query):
    pass
