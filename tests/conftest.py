"""
Shared pytest fixtures and configuration for pagedlist tests.

This module provides recording fetchers and a small people backend used
across the unit tests.
"""

import pytest

from pagedlist import FilterScopedListView, ListProvider
from tests.helpers.backends import Person, RecordingBackend, RecordingFilterableBackend


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests with in-memory backends")


@pytest.fixture
def letters() -> list[str]:
    return ["A", "B", "C", "D", "E"]


@pytest.fixture
def backend(letters: list[str]) -> RecordingBackend:
    """Recording fetchers over five letters with a page size of 3."""
    return RecordingBackend(data=letters, page_size=3)


@pytest.fixture
def numbers_backend() -> RecordingBackend:
    """Recording fetchers over 100 integers with a page size of 10."""
    return RecordingBackend(data=list(range(100)), page_size=10)


@pytest.fixture
def filterable_backend(letters: list[str]) -> RecordingFilterableBackend:
    """
    Recording providers over the letters plus "xA" and "xB", page size 3.
    Filter "x" matches exactly the two extra items.
    """
    return RecordingFilterableBackend(data=letters + ["xA", "xB"], page_size=3)


@pytest.fixture
def filterable_view(filterable_backend: RecordingFilterableBackend) -> FilterScopedListView[str]:
    return FilterScopedListView(
        filterable_backend.find, filterable_backend.count, page_size=filterable_backend.page_size
    )


@pytest.fixture
def people() -> list[Person]:
    return [
        Person("Alice", "Smith"),
        Person("Bob", "Jones"),
        Person("Carol", "Alison"),
        Person("Dave", "Brown"),
        Person("Eve", "Black"),
        Person("Frank", "Malik"),
        Person("Grace", "Hall"),
    ]


@pytest.fixture
def people_provider(people: list[Person]) -> ListProvider[Person]:
    return ListProvider(people)


@pytest.fixture
def people_view(people_provider: ListProvider[Person]) -> FilterScopedListView[Person]:
    """A view over the people backend with a page size of 3."""
    page_size = 3
    return FilterScopedListView(
        people_provider.paging_provider(page_size),
        people_provider.count_provider(),
        page_size=page_size,
    )
