"""Contract shared by every generated CRUD module."""
from scaffold.common.errors import (
    InvalidResourceNameError,
    InvalidSortFieldError,
    NotFoundError,
    ScaffoldError,
)
from scaffold.common.pagination import (
    FilterParams,
    Page,
    PageMeta,
    PaginatedResponse,
    PaginatedResult,
    PaginateMeta,
    PaginationParams,
    compute_pages,
)

__all__ = [
    "FilterParams",
    "InvalidResourceNameError",
    "InvalidSortFieldError",
    "NotFoundError",
    "Page",
    "PageMeta",
    "PaginatedResponse",
    "PaginatedResult",
    "PaginateMeta",
    "PaginationParams",
    "ScaffoldError",
    "compute_pages",
]
