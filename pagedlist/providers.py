"""
In-memory backend for FilterScopedListView.

ListProvider plays the role a service facade (an ORM repository, a REST
client) plays in production: it answers "rows from first_row under filter"
and "count under filter". It is handy for tests, demos and small lists.
"""

from collections.abc import Iterable, Sequence
from typing import Generic, TypeVar

from ._logging import logger, redact_filter
from .interfaces import CaptionGenerator, FilterableCountProvider, FilterablePagingProvider

T = TypeVar("T")


class ListProvider(Generic[T]):
    """
    Filters and slices a list of items.

    An empty filter matches everything. Otherwise an item matches when the
    case-folded filter is a substring of its case-folded caption.
    Item order is preserved; no sorting is applied.
    """

    def __init__(self, items: Iterable[T], caption_generator: CaptionGenerator = str) -> None:
        self.items: list[T] = list(items)
        self.caption_generator = caption_generator

        # Backend hit counters
        self.find_calls = 0
        self.count_calls = 0

    def _matching(self, filter_string: str | None) -> list[T]:
        if not filter_string:
            return self.items
        needle = filter_string.casefold()
        return [item for item in self.items if needle in self.caption_generator(item).casefold()]

    def find_entities(
        self, first_row: int, filter_string: str | None, max_results: int
    ) -> list[T]:
        """
        Returns at most ``max_results`` matching items starting at ``first_row``.

        Raises:
            ValueError: If first_row is negative or max_results is not positive
        """
        if first_row < 0:
            raise ValueError(f"first_row must be non-negative, got {first_row}")
        if max_results <= 0:
            raise ValueError(f"max_results must be positive, got {max_results}")

        self.find_calls += 1
        logger.debug(
            "Finding entities",
            extra={
                "operation": "find_entities",
                "first_row": first_row,
                "limit": max_results,
                "filter_hash": redact_filter(filter_string),
            },
        )
        return list(self._matching(filter_string)[first_row : first_row + max_results])

    def count(self, filter_string: str | None) -> int:
        """Returns the number of items matching ``filter_string``."""
        self.count_calls += 1
        return len(self._matching(filter_string))

    def paging_provider(self, page_size: int) -> FilterablePagingProvider[T]:
        """Returns a ``(first_row, filter)`` callable fetching ``page_size`` rows."""

        def find(first_row: int, filter_string: str) -> Sequence[T]:
            return self.find_entities(first_row, filter_string, page_size)

        return find

    def count_provider(self) -> FilterableCountProvider:
        return self.count
