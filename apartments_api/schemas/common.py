from typing import Generic, TypeVar, List, Optional

from pydantic import BaseModel

T = TypeVar("T")


class PageMeta(BaseModel):
    """Pagination metadata computed over the filtered set."""

    page: int
    page_size: int
    total: int
    total_pages: int


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response."""

    data: List[T]
    meta: PageMeta


class SingleResponse(BaseModel, Generic[T]):
    """Envelope for a single record."""

    data: T


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    errors: Optional[List[str]] = None
    detail: Optional[str] = None
    stack: Optional[str] = None

    @classmethod
    def create(
        cls,
        message: str,
        errors: Optional[List[str]] = None,
        detail: Optional[str] = None,
        stack: Optional[str] = None,
    ):
        """Create error response with standard format."""
        return cls(error=message, errors=errors, detail=detail, stack=stack)

    def to_content(self) -> dict:
        return self.model_dump(exclude_none=True)
