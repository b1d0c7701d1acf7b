from typing import Optional

from pydantic import BaseModel, Field


class OperationNotice(BaseModel):
    """Outcome of a file operation, shown to the user as a toast."""

    success: bool
    message: str
    detail: Optional[str] = Field(None, description="Error detail when success is False")
    file_name: Optional[str] = None
