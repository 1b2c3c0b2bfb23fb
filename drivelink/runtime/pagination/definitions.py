"""Page result structure shared by page parsers and the paginator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from ...core.exceptions import DriveError

T = TypeVar("T")


@dataclass
class PageResult(Generic[T]):
    """Outcome of parsing one page, or of a whole listing.

    Attributes:
        items: Records in server order (may be partial when ``error`` is set)
        next_token: Cursor for the following page; None means no more pages
        error: First hard error; when set, ``next_token`` is always None
    """

    items: list[T] = field(default_factory=list)
    next_token: str | None = None
    error: DriveError | None = None

    def __post_init__(self) -> None:
        if self.error is not None:
            self.next_token = None

    @property
    def is_complete(self) -> bool:
        return self.error is None and self.next_token is None

    def unwrap(self) -> list[T]:
        """Return the items, or raise the error with the items attached."""
        if self.error is not None:
            self.error.partial_items = list(self.items)
            raise self.error
        return self.items
