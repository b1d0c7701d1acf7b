from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class PreviewKind(str, Enum):
    TEXT = "text"
    TABULAR = "tabular"
    BINARY_RESOURCE = "binary_resource"
    UNSUPPORTED = "unsupported"


class ResourceHandle(BaseModel):
    """Reference to a live binary rendering resource, served at ``url`` until released."""

    resource_id: str
    media_type: str
    size_bytes: int
    url: str


class TextPreview(BaseModel):
    kind: Literal["text"] = "text"
    file_name: str
    content: str


class TabularPreview(BaseModel):
    kind: Literal["tabular"] = "tabular"
    file_name: str
    columns: List[str] = Field(default_factory=list, description="Header names in column order")
    rows: List[Dict[str, str]] = Field(default_factory=list)


class BinaryResourcePreview(BaseModel):
    kind: Literal["binary_resource"] = "binary_resource"
    file_name: str
    handle: ResourceHandle


class UnsupportedPreview(BaseModel):
    kind: Literal["unsupported"] = "unsupported"
    file_name: str
    reason: Optional[str] = None


PreviewResult = Annotated[
    Union[TextPreview, TabularPreview, BinaryResourcePreview, UnsupportedPreview],
    Field(discriminator="kind"),
]
