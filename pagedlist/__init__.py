from .cache import PageCache
from .config import DEFAULT_PAGE_SIZE, CacheOptions
from .exceptions import ContractViolationError, IndexOutOfRangeError, PagedListError
from .interfaces import (
    CaptionGenerator,
    FilterableCountProvider,
    FilterablePagingProvider,
    IndexedFilterableSource,
    RowFetcher,
    SizeFetcher,
)
from .pagination import Page
from .providers import ListProvider
from .view import FilterScopedListView

__all__ = [
    "PageCache",
    "FilterScopedListView",
    "Page",
    "ListProvider",
    # Configuration
    "CacheOptions",
    "DEFAULT_PAGE_SIZE",
    # Boundary types
    "RowFetcher",
    "SizeFetcher",
    "FilterablePagingProvider",
    "FilterableCountProvider",
    "CaptionGenerator",
    "IndexedFilterableSource",  # What widgets program against
    # Exceptions
    "PagedListError",
    "IndexOutOfRangeError",
    "ContractViolationError",
]
