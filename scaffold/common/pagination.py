"""Pagination/filter contract shared by all generated list endpoints.

Three layers, one per boundary:

* ``PaginationParams`` / ``FilterParams`` - pydantic request shapes bound
  from the query string. FastAPI coerces and rejects malformed input
  (``limit < 1``, ``offset < 0``, unknown ``order``) before a service runs.
* ``PaginatedResult`` - what a repository adapter returns: one page of rows
  plus the pre-pagination ``total``.
* ``Page`` - what a service returns: the ``{data, paginate}`` envelope with
  ``pages`` derived. ``PaginatedResponse`` is its pydantic twin used as the
  FastAPI ``response_model``.
"""
import math
from dataclasses import dataclass
from typing import Any, Callable, Generic, List, Literal, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_LIMIT = 10
DEFAULT_OFFSET = 0
DEFAULT_SORT = "createdAt"
DEFAULT_ORDER = "DESC"

SortOrder = Literal["ASC", "DESC"]


class PaginationParams(BaseModel):
    model_config = ConfigDict(extra="ignore")

    limit: int = Field(DEFAULT_LIMIT, ge=1)
    offset: int = Field(DEFAULT_OFFSET, ge=0)
    sort: str = Field(DEFAULT_SORT, min_length=1)
    order: SortOrder = DEFAULT_ORDER

    @field_validator("order", mode="before")
    @classmethod
    def normalize_order(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class FilterParams(PaginationParams):
    search: Optional[str] = None


def compute_pages(total: int, limit: int) -> int:
    """Number of pages needed to show ``total`` rows ``limit`` at a time."""
    return math.ceil(total / limit)


@dataclass
class PaginatedResult(Generic[T]):
    data: List[T]
    total: int
    limit: int
    offset: int


@dataclass
class PageMeta:
    total: int
    limit: int
    offset: int
    pages: int


@dataclass
class Page(Generic[T]):
    data: List[T]
    paginate: PageMeta

    @classmethod
    def from_result(cls, result: PaginatedResult[T]) -> "Page[T]":
        return cls(
            data=list(result.data),
            paginate=PageMeta(
                total=result.total,
                limit=result.limit,
                offset=result.offset,
                pages=compute_pages(result.total, result.limit),
            ),
        )

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(data=[fn(item) for item in self.data], paginate=self.paginate)


class PaginateMeta(BaseModel):
    total: int = Field(ge=0)
    limit: int = Field(ge=1)
    offset: int = Field(ge=0)
    pages: int = Field(ge=0)


class PaginatedResponse(BaseModel, Generic[T]):
    data: List[T]
    paginate: PaginateMeta

    @classmethod
    def from_page(cls, page: Page[Any]) -> "PaginatedResponse[T]":
        meta = page.paginate
        return cls(
            data=page.data,
            paginate=PaginateMeta(
                total=meta.total,
                limit=meta.limit,
                offset=meta.offset,
                pages=meta.pages,
            ),
        )
