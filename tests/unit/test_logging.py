import logging

from pagedlist import FilterScopedListView, PageCache
from pagedlist._logging import logger, redact_filter


def test_library_logger_has_null_handler():
    assert logger.name == "pagedlist"
    assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)


def test_redact_filter():
    assert redact_filter("") == ""
    assert redact_filter(None) == ""
    assert redact_filter("alice") == redact_filter("alice")
    assert redact_filter("alice") != redact_filter("bob")
    assert len(redact_filter("alice")) == 8
    assert "alice" not in redact_filter("alice")


def test_cache_logging(backend, caplog):
    """Verify fetch logging and its context."""
    caplog.set_level(logging.DEBUG, logger="pagedlist")
    cache = PageCache(backend.fetch_rows, backend.fetch_size, page_size=3)

    cache.get(4)
    cache.invalidate()

    assert "Fetching size" in caplog.text
    assert "Fetching page" in caplog.text
    assert "Page fetched" in caplog.text
    assert "Cache invalidated" in caplog.text

    fetched = [r for r in caplog.records if r.getMessage() == "Page fetched"]
    assert fetched[0].page_index == 1
    assert fetched[0].first_row == 3
    assert fetched[0].rows == 2


def test_view_logs_filter_hash_only(filterable_view, caplog):
    caplog.set_level(logging.INFO, logger="pagedlist")

    filterable_view.set_filter("secret")
    filterable_view.set_filter("secret")
    filterable_view.refresh()

    changed = [r for r in caplog.records if r.getMessage() == "Filter changed"]
    assert len(changed) == 1
    assert changed[0].filter_hash == redact_filter("secret")
    assert "secret" not in caplog.text
    assert "Cache refreshed" in caplog.text


def test_load_from_logs(people_provider, caplog):
    caplog.set_level(logging.INFO, logger="pagedlist")

    FilterScopedListView().load_from(
        people_provider.paging_provider(5), people_provider.count_provider(), page_size=5
    )

    bound = [r for r in caplog.records if r.getMessage() == "Backend bound"]
    assert bound[0].page_size == 5
    assert bound[0].operation == "load_from"
