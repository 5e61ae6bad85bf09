"""Error types raised by the generator and by generated modules."""
from typing import Iterable


class ScaffoldError(Exception):
    """Base class for all scaffold errors."""


class InvalidResourceNameError(ScaffoldError, ValueError):
    """Raised when the generator is invoked with a missing or malformed resource name."""


class NotFoundError(ScaffoldError):
    """Raised when no live row exists for the requested id."""

    def __init__(self, resource: str, id: str):
        self.resource = resource
        self.id = id
        super().__init__(f"{resource} {id} not found")


class InvalidSortFieldError(ScaffoldError, ValueError):
    """Raised when a listing is sorted by a key that is not a mapped column."""

    def __init__(self, sort: str, allowed: Iterable[str]):
        self.sort = sort
        self.allowed = sorted(allowed)
        super().__init__(
            f"Cannot sort by '{sort}'; expected one of: {', '.join(self.allowed)}"
        )
