import hashlib
import logging

# Create the library logger
logger = logging.getLogger("pagedlist")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def redact_filter(filter_string: str | None) -> str:
    """
    Redacts a filter string for logging.
    Filters are typed by users, so only a short hash is logged. That still
    allows correlating log lines of the same filter without revealing it.
    """
    if not filter_string:
        return ""
    return hashlib.sha256(filter_string.encode("utf-8")).hexdigest()[:8]
