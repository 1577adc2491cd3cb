"""
Shared schemas: response envelope, pagination and embedded summaries.
"""
from pydantic import BaseModel
from typing import Generic, Optional, TypeVar

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """Envelope wrapping every successful response."""
    success: bool = True
    data: Optional[DataT] = None
    message: Optional[str] = None


class Pagination(BaseModel):
    """Pagination block for listing responses."""
    page: int
    limit: int
    total: int
    pages: int


class AuthorSummary(BaseModel):
    """Author details embedded in content responses."""
    id: int
    full_name: str
    email: str

    class Config:
        from_attributes = True


class EventSummary(BaseModel):
    """Minimal event reference embedded in photo responses."""
    id: int
    title: str

    class Config:
        from_attributes = True
