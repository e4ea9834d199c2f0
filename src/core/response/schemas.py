import math
from typing import Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

SortDirection = Literal["asc", "desc"]


class ErrorDetail(BaseModel):
    field: str = ""
    code: str = Field(default="ERROR")
    message: str = Field(default="Unknown Error")
    target: Optional[str] = Field(default=None)


class PageRequest(BaseModel):
    """Which slice of an ordered result set to fetch."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=0, ge=0)
    size: int = Field(default=10, ge=1)
    sort_field: str = "id"
    sort_direction: SortDirection = "desc"

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    """A slice of results plus the totals needed to render pagination."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    items: List[T] = Field(default_factory=list)
    page: int = 0
    size: int = 10
    total_pages: int = 0
    total_elements: int = 0

    @classmethod
    def build(cls, items: List[T], page_request: PageRequest, total: int) -> "Page[T]":
        return cls(
            items=list(items),
            page=page_request.page,
            size=page_request.size,
            total_pages=math.ceil(total / page_request.size) if total else 0,
            total_elements=total,
        )

    @property
    def is_empty(self) -> bool:
        return not self.items

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages


class ErrorResponse(BaseModel):
    success: bool = Field(default=False)
    message: Optional[str] = Field(default=None)
    error_code: str = Field(default="ERROR")
    error_details: List[ErrorDetail] = Field(default_factory=list)
