from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PAGE_SIZE = 30


class CacheOptions(BaseModel):
    """
    Validated settings of a PageCache.

    page_size trades backend round-trips against over-fetching. The default
    matches a typical dropdown window.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    page_size: int = Field(DEFAULT_PAGE_SIZE, gt=0, strict=True)
