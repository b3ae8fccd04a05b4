"""Pagination inputs accepted by the resource builder.

Two shapes are recognised on raw data:

- ``CursorPaginator``: a concrete class carrying the items of one page and
  the cursor values around it.
- ``LengthAwarePaginator``: any object exposing page counters and a total.
  ``Paginator`` is a ready-made implementation.
"""

import math
from typing import Any, Iterable, Protocol, runtime_checkable
from urllib.parse import urlencode


@runtime_checkable
class LengthAwarePaginator(Protocol):
    """Protocol for paginated sets that know their total size."""

    def items(self) -> Iterable[Any]:
        """Return the items of the current page."""
        ...

    def total(self) -> int:
        """Return the total number of items across all pages."""
        ...

    def per_page(self) -> int:
        """Return the page size."""
        ...

    def current_page(self) -> int:
        """Return the 1-based current page number."""
        ...

    def last_page(self) -> int:
        """Return the last page number."""
        ...

    def url(self, page: int) -> str:
        """Return the URL of the given page."""
        ...


class Paginator:
    """Length-aware paginator over one already sliced page of items."""

    def __init__(
        self,
        items: Iterable[Any],
        total: int,
        per_page: int,
        current_page: int = 1,
        path: str = "",
        page_name: str = "page",
    ):
        if per_page <= 0:
            raise ValueError("per_page must be greater than 0")
        if current_page < 1:
            raise ValueError("current_page must be at least 1")
        if total < 0:
            raise ValueError("total cannot be negative")

        self._items = _page_items(items)
        self._total = total
        self._per_page = per_page
        self._current_page = current_page
        self._path = path
        self._page_name = page_name
        self._query: dict[str, Any] = {}

    def items(self) -> Iterable[Any]:
        return self._items

    def total(self) -> int:
        return self._total

    def per_page(self) -> int:
        return self._per_page

    def current_page(self) -> int:
        return self._current_page

    def last_page(self) -> int:
        return max(math.ceil(self._total / self._per_page), 1)

    def append(self, query: dict[str, Any]) -> "Paginator":
        """Add query parameters to every generated URL."""
        self._query.update(query)
        return self

    def url(self, page: int) -> str:
        page = max(page, 1)
        query = {**self._query, self._page_name: page}
        return f"{self._path}?{urlencode(query)}"


class CursorPaginator:
    """One page of items addressed by cursor values instead of page numbers.

    Args:
        items: Items of the current page.
        cursor: Cursor value of the current page.
        previous: Cursor value of the previous page, if any.
        next: Cursor value of the next page, if any.
    """

    def __init__(
        self,
        items: Iterable[Any],
        cursor: Any,
        previous: Any = None,
        next: Any = None,
    ):
        self._items = _page_items(items)
        self._cursor = cursor
        self._previous = previous
        self._next = next

    def items(self) -> Iterable[Any]:
        return self._items

    def cursor(self) -> Any:
        return self._cursor

    def previous(self) -> Any:
        return self._previous

    def next(self) -> Any:
        return self._next

    def count(self) -> int:
        """Number of items on this page."""
        return len(self._items)


def _page_items(items: Iterable[Any]) -> Iterable[Any]:
    """One-shot iterators are read once so the page can be counted and walked."""
    if hasattr(items, "__len__"):
        return items
    return list(items)
