"""This module defines the container returned by paginated queries."""

import math
from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


def total_pages(count: int, page_size: int) -> int:
    """Computes the number of pages of a listing.

    Args:
        count: The total number of matching rows.
        page_size: The number of rows per page.

    Returns:
        `ceil(count / page_size)`, and never less than 1 so an empty listing
        still renders one (empty) page.
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int | None) -> int:
    """Normalizes a requested page number to at least 1."""
    if page is None or page < 1:
        return 1
    return page


class Page(BaseModel, Generic[T]):
    """One page of rows plus the total count of matching rows."""

    items: list[T] = Field(default_factory=list)
    count: int = 0
    page: int = 1
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        """The number of pages, at least 1."""
        return total_pages(self.count, self.page_size)

    @property
    def has_next(self) -> bool:
        """Whether a following page exists."""
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        """Whether a preceding page exists."""
        return self.page > 1

    @staticmethod
    def offset_for(page: int, page_size: int) -> int:
        """Returns the row offset of a page."""
        return (clamp_page(page) - 1) * page_size
