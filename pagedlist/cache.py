"""
Page-granular lazy cache over an indexed collection.

PageCache makes a large, expensive-to-query collection look like a small
in-memory sequence. It fetches whole pages on first touch, keeps them until
invalidated and memoizes the total size.
"""

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar, overload

from ._logging import logger
from .config import CacheOptions
from .exceptions import ContractViolationError, IndexOutOfRangeError
from .interfaces import RowFetcher, SizeFetcher
from .pagination import Page

T = TypeVar("T")


class PageCache(Sequence[T], Generic[T]):
    """
    Lazily fetched, page-cached view of a collection.

    The cache knows nothing about filtering: it only sees absolute row
    indexes. Pages are fetched with ``row_fetcher(first_row)`` and the size
    with ``size_fetcher()``, both synchronously and only on demand.

    Callback failures propagate unchanged and leave no entry behind.
    A row fetcher returning more than ``page_size`` rows, or a size fetcher
    returning anything but a non-negative int, raises ContractViolationError.

    Usage:
        cache = PageCache(lambda first: rows[first : first + 30], lambda: len(rows))
        cache.get(42)     # fetches rows 30..59 (and the size) once
        cache[43]         # served from the cached page
        cache.invalidate()
    """

    def __init__(
        self,
        row_fetcher: RowFetcher[T],
        size_fetcher: SizeFetcher,
        page_size: int | None = None,
        options: CacheOptions | None = None,
    ) -> None:
        if options is None:
            options = CacheOptions() if page_size is None else CacheOptions(page_size=page_size)
        elif page_size is not None and page_size != options.page_size:
            raise ValueError("Pass either page_size or options, not both")

        self.options = options
        self.row_fetcher = row_fetcher
        self.size_fetcher = size_fetcher

        self.pages: dict[int, Page[T]] = {}
        self.known_size: int | None = None

    @classmethod
    def empty(cls, page_size: int | None = None) -> "PageCache[T]":
        """Returns a cache over an empty collection."""
        return cls(lambda first_row: (), lambda: 0, page_size=page_size)

    @property
    def page_size(self) -> int:
        return self.options.page_size

    # --- CORE OPERATIONS ---

    def get(self, index: int) -> T:
        """
        Returns the item at ``index``, fetching its page if needed.

        Raises:
            IndexOutOfRangeError: If index is negative or >= size(), or the
                fetched page is shorter than the index implies.
            ContractViolationError: If the row fetcher returns an oversized page.
        """
        size = self.size()
        if index < 0 or index >= size:
            raise IndexOutOfRangeError(index, size)

        page_index, offset = divmod(index, self.page_size)
        page = self.pages.get(page_index)
        if page is None:
            page = self._fetch_page(page_index)

        if offset >= page.count:
            raise IndexOutOfRangeError(
                index,
                size,
                message=(
                    f"Index {index} out of range: page {page_index} holds only "
                    f"{page.count} rows but size is {size}"
                ),
            )
        return page.item_at(offset)

    def size(self) -> int:
        """
        Returns the total number of items.
        The size fetcher runs at most once between invalidations.
        """
        if self.known_size is not None:
            return self.known_size

        logger.debug("Fetching size", extra={"operation": "size"})
        size = self.size_fetcher()

        if isinstance(size, bool) or not isinstance(size, int) or size < 0:
            raise ContractViolationError(
                f"Size fetcher must return a non-negative int, got {size!r}", actual=size
            )

        self.known_size = size
        logger.debug("Size fetched", extra={"operation": "size", "size": size})
        return size

    def invalidate(self) -> None:
        """Drops all cached pages and the memoized size. Does not fetch."""
        dropped = len(self.pages)
        self.pages.clear()
        self.known_size = None
        logger.debug("Cache invalidated", extra={"operation": "invalidate", "pages": dropped})

    def _fetch_page(self, page_index: int) -> Page[T]:
        first_row = page_index * self.page_size

        logger.debug(
            "Fetching page",
            extra={"operation": "fetch", "page_index": page_index, "first_row": first_row},
        )

        rows = self.row_fetcher(first_row)

        if len(rows) > self.page_size:
            raise ContractViolationError(
                f"Row fetcher returned {len(rows)} rows for first_row={first_row}, "
                f"page size is {self.page_size}",
                first_row=first_row,
                page_size=self.page_size,
                actual=len(rows),
            )

        page = Page.from_rows(page_index, self.page_size, rows)
        self.pages[page_index] = page

        logger.debug(
            "Page fetched",
            extra={
                "operation": "fetch",
                "page_index": page_index,
                "first_row": first_row,
                "rows": page.count,
            },
        )
        return page

    # --- INSPECTION ---

    def page_index_of(self, index: int) -> int:
        """Returns the number of the page holding ``index``."""
        return index // self.page_size

    def is_page_cached(self, page_index: int) -> bool:
        return page_index in self.pages

    @property
    def cached_page_indexes(self) -> list[int]:
        """Sorted numbers of the pages currently held."""
        return sorted(self.pages)

    # --- SEQUENCE PROTOCOL ---

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> list[T]: ...

    def __getitem__(self, index: int | slice) -> T | list[T]:
        if isinstance(index, slice):
            return [self.get(i) for i in range(*index.indices(self.size()))]
        if index < 0:
            # Count from the end like a list, but keep the caller's index in errors
            if index + self.size() < 0:
                raise IndexOutOfRangeError(index, self.size())
            index += self.size()
        return self.get(index)

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[T]:
        # Explicit range so that a short page raises instead of ending iteration
        for index in range(self.size()):
            yield self.get(index)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(page_size={self.page_size}, "
            f"cached_pages={self.cached_page_indexes}, known_size={self.known_size})"
        )
