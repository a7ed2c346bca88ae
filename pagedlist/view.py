"""
Filter-aware lazy list for selection widgets.

FilterScopedListView puts a "current filter" in front of a PageCache. The
backend providers receive that filter explicitly on every call. Changing the
filter flushes the cache, keeping it unchanged reuses every fetched page.
"""

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from ._logging import logger, redact_filter
from .cache import PageCache
from .config import DEFAULT_PAGE_SIZE
from .interfaces import CaptionGenerator, FilterableCountProvider, FilterablePagingProvider

T = TypeVar("T")


class FilterScopedListView(Generic[T]):
    """
    Lazy, filterable list backing a selection widget (e.g. a combo box).

    Until providers are bound with ``load_from`` the view is empty.

    Usage:
        view = FilterScopedListView(
            lambda first_row, flt: service.find_persons(flt, first_row, 30),
            lambda flt: service.count_persons(flt),
        )
        view.set_filter("ali")
        view.size()   # count_provider("ali")
        view.get(0)   # paging_provider(0, "ali")
    """

    def __init__(
        self,
        paging_provider: FilterablePagingProvider[T] | None = None,
        count_provider: FilterableCountProvider | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
        caption_generator: CaptionGenerator = str,
    ) -> None:
        self._current_filter = ""
        self._value: T | None = None
        self.caption_generator = caption_generator

        self.paging_provider: FilterablePagingProvider[T] | None = None
        self.count_provider: FilterableCountProvider | None = None
        self.cache: PageCache[T] = PageCache.empty(page_size)

        if paging_provider is not None or count_provider is not None:
            self.load_from(paging_provider, count_provider, page_size)

    # --- BACKEND BINDING ---

    def load_from(
        self,
        paging_provider: FilterablePagingProvider[T] | None,
        count_provider: FilterableCountProvider | None,
        page_size: int | None = None,
    ) -> "FilterScopedListView[T]":
        """
        Binds the view to a backend, replacing the cache.

        Args:
            paging_provider: ``(first_row, filter) -> rows``, at most page_size rows
            count_provider: ``(filter) -> int``
            page_size: Rows per fetch; keeps the current page size if omitted

        Returns:
            The view itself, for chaining.
        """
        if paging_provider is None or count_provider is None:
            raise ValueError("Both paging_provider and count_provider are required")

        if page_size is None:
            page_size = self.page_size

        # The filter is read at call time, never captured at bind time
        def fetch_rows(first_row: int) -> Sequence[T]:
            return paging_provider(first_row, self._current_filter)

        def fetch_size() -> int:
            return count_provider(self._current_filter)

        self.paging_provider = paging_provider
        self.count_provider = count_provider
        self.cache = PageCache(fetch_rows, fetch_size, page_size=page_size)

        logger.info(
            "Backend bound",
            extra={"operation": "load_from", "page_size": page_size},
        )
        return self

    # --- FILTERING ---

    @property
    def current_filter(self) -> str:
        return self._current_filter

    def set_filter(self, new_filter: str | None) -> None:
        """
        Sets the filter the backend is queried with.

        A combo box re-issues the caption of its selection as a filter when
        its popup is reopened. A filter equal to the selected item's caption
        is therefore taken as the empty filter.

        The cache is invalidated only if the effective filter changed.
        """
        if new_filter is None:
            new_filter = ""

        if self._value is not None and self.get_caption(self._value) == new_filter:
            new_filter = ""

        if new_filter == self._current_filter:
            return

        self._current_filter = new_filter
        self.cache.invalidate()

        logger.info(
            "Filter changed",
            extra={"operation": "set_filter", "filter_hash": redact_filter(new_filter)},
        )

    def refresh(self) -> None:
        """Drops cached entities, e.g. after the backend was written to."""
        self.cache.invalidate()
        logger.info("Cache refreshed", extra={"operation": "refresh"})

    # --- SELECTION ---

    @property
    def value(self) -> T | None:
        """The currently selected item, or None."""
        return self._value

    @value.setter
    def value(self, item: T | None) -> None:
        self._value = item

    def select(self, item: T | None) -> "FilterScopedListView[T]":
        self._value = item
        return self

    def clear_selection(self) -> None:
        self._value = None

    def get_caption(self, item: T) -> str:
        return self.caption_generator(item)

    def with_caption_generator(
        self, caption_generator: CaptionGenerator
    ) -> "FilterScopedListView[T]":
        self.caption_generator = caption_generator
        return self

    # --- INDEXED ACCESS (delegates to the cache) ---

    @property
    def page_size(self) -> int:
        return self.cache.page_size

    def get(self, index: int) -> T:
        return self.cache.get(index)

    def size(self) -> int:
        return self.cache.size()

    def __getitem__(self, index: int) -> T:
        return self.cache[index]

    def __len__(self) -> int:
        return self.cache.size()

    def __iter__(self) -> Iterator[T]:
        return iter(self.cache)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(filter_hash={redact_filter(self._current_filter)!r}, "
            f"cache={self.cache!r})"
        )
