class PagedListError(Exception):
    """Base exception for all pagedlist errors."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class IndexOutOfRangeError(PagedListError, IndexError):
    """
    Raised when an index is outside the collection.

    Also raised when a fetched page is shorter than the requested offset
    implies, i.e. the backend holds fewer rows than its reported size.
    Subclasses IndexError so that sequence iteration stops on it.
    """

    def __init__(
        self,
        index: int,
        size: int | None = None,
        message: str | None = None,
        original_error: Exception | None = None,
    ) -> None:
        if message is None:
            message = f"Index {index} out of range"
            if size is not None:
                message += f" for size {size}"
        super().__init__(message, original_error)
        self.index = index
        self.size = size


class ContractViolationError(PagedListError):
    """Raised when a fetch callback returns data that breaks its contract."""

    def __init__(
        self,
        message: str,
        first_row: int | None = None,
        page_size: int | None = None,
        actual: object | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message, original_error)
        self.first_row = first_row
        self.page_size = page_size
        self.actual = actual
