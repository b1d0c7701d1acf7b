from dataclasses import dataclass

from export_browser.core.cqrs.query import Query


@dataclass(frozen=True)
class GetActivePreviewQuery(Query):
    pass


# Bytes of the live binary resource, for the embedded viewer
@dataclass(frozen=True)
class GetPreviewResourceQuery(Query):
    resource_id: str
