"""Pagination helpers."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

FIRST_PAGE_NUM = 0
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Page(Generic[T]):
    """A slice of an ordered collection."""

    content: list[T]
    page_number: int
    page_size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return (self.total_elements - 1) // self.page_size + 1

    @property
    def is_first(self) -> bool:
        return self.page_number == FIRST_PAGE_NUM

    @property
    def is_last(self) -> bool:
        return (self.page_number + 1) * self.page_size >= self.total_elements


def paginate(items: Sequence[T], page_number: int, page_size: int) -> Page[T]:
    """Cut a page out of the full ordered list."""
    start = max(page_number, 0) * max(page_size, 0)
    content = list(items[start : start + max(page_size, 0)])
    return Page(
        content=content,
        page_number=page_number,
        page_size=page_size,
        total_elements=len(items),
    )
