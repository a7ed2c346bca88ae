"""
Page records for pagedlist.

A page is one fetched, contiguous slice of the backing collection. Pages are
replaced wholesale on refetch and never mutated in place.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Page(Generic[T]):
    """
    Represents a single fetched page.

    Attributes:
        index: Page number (0-based)
        first_row: Absolute index of the first item (index * page_size)
        items: Items of this page, at most page_size of them
        page_size: Configured page size the page was fetched with
    """

    index: int
    first_row: int
    items: tuple[T, ...] = field(default_factory=tuple)
    page_size: int = 1

    @classmethod
    def from_rows(cls, index: int, page_size: int, rows: Sequence[T]) -> "Page[T]":
        return cls(index=index, first_row=index * page_size, items=tuple(rows), page_size=page_size)

    @property
    def count(self) -> int:
        """Number of items in this page."""
        return len(self.items)

    @property
    def is_last(self) -> bool:
        """Returns True if the page is short, i.e. nothing follows it."""
        return self.count < self.page_size

    @property
    def last_row(self) -> int:
        """Absolute index one past the last item of this page."""
        return self.first_row + self.count

    def item_at(self, offset: int) -> T:
        return self.items[offset]
