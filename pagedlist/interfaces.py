"""
Boundary types of pagedlist.

Fetchers are what a PageCache consumes: they know nothing about filtering.
Providers are what a backend supplies to a FilterScopedListView: they receive
the active filter explicitly on every call.
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

# (first_row) -> at most page_size items starting at first_row
RowFetcher = Callable[[int], Sequence[T]]

# () -> total number of items
SizeFetcher = Callable[[], int]

# (first_row, filter) -> at most page_size matching items starting at first_row
FilterablePagingProvider = Callable[[int, str], Sequence[T]]

# (filter) -> number of matching items
FilterableCountProvider = Callable[[str], int]

# item -> label shown for it (and compared against incoming filters)
CaptionGenerator = Callable[[Any], str]


@runtime_checkable
class IndexedFilterableSource(Protocol[T_co]):
    """
    Everything a rendering widget needs from a lazy, filterable list.
    Widgets go through this and never touch pages directly.
    """

    def get(self, index: int) -> T_co: ...

    def size(self) -> int: ...

    def set_filter(self, new_filter: str | None) -> None: ...

    def refresh(self) -> None: ...
