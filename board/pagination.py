"""
Pagination primitives shared by the repository, service and router layers.

``PageSpec`` describes the slice a caller asks for; ``Page`` carries the
slice back together with the total-count metadata needed to render page
navigation.
"""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_SORT_KEY = "id"

# Largest OFFSET a signed 64-bit SQL integer can hold.
MAX_OFFSET = 2**63 - 1


class SortDirection(str, enum.Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: str) -> "SortDirection":
        return cls(value.strip().upper())


@dataclass(frozen=True)
class PageSpec:
    page_number: int = 0
    page_size: int = 5
    sort_key: str = DEFAULT_SORT_KEY
    sort_direction: SortDirection = SortDirection.DESC

    @property
    def offset(self) -> int:
        """SQL OFFSET value computed from the 0-based page and page size."""
        return self.page_number * self.page_size

    @staticmethod
    def parse_sort(value: str) -> tuple[str, SortDirection]:
        """
        Split a ``"property[,direction]"`` sort expression.

        The direction is case-insensitive and defaults to ascending when
        omitted, e.g. ``"title"`` -> ``("title", ASC)`` and
        ``"postId,desc"`` -> ``("postId", DESC)``.
        """
        key, _, direction = value.partition(",")
        key = key.strip() or DEFAULT_SORT_KEY
        if not direction.strip():
            return key, SortDirection.ASC
        return key, SortDirection.parse(direction)


@dataclass
class Page(Generic[T]):
    items: list[T]
    page_number: int
    page_size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0 or self.total_elements <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @property
    def number_of_elements(self) -> int:
        return len(self.items)

    @property
    def is_first(self) -> bool:
        return self.page_number == 0

    @property
    def is_last(self) -> bool:
        return self.page_number + 1 >= self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        return Page(
            items=[fn(item) for item in self.items],
            page_number=self.page_number,
            page_size=self.page_size,
            total_elements=self.total_elements,
        )
