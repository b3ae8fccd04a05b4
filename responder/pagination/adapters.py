"""Engine-side pagination types handed to serializers."""

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from responder.pagination.paginator import LengthAwarePaginator


class PaginatorAdapter:
    """Adapts a length-aware paginator to the serializer pagination contract."""

    def __init__(self, paginator: LengthAwarePaginator, query: dict[str, Any] | None = None):
        self._paginator = paginator
        self._query = dict(query or {})

    @property
    def paginator(self) -> LengthAwarePaginator:
        return self._paginator

    @property
    def current_page(self) -> int:
        return self._paginator.current_page()

    @property
    def last_page(self) -> int:
        return self._paginator.last_page()

    @property
    def total(self) -> int:
        return self._paginator.total()

    @property
    def per_page(self) -> int:
        return self._paginator.per_page()

    @property
    def count(self) -> int:
        """Number of items on the current page."""
        items = self._paginator.items()
        return len(items) if hasattr(items, "__len__") else len(list(items))

    def url(self, page: int) -> str:
        """URL of the given page with the adapter's query parameters merged in."""
        url = self._paginator.url(page)
        if not self._query:
            return url
        parts = urlsplit(url)
        query = dict(parse_qsl(parts.query, keep_blank_values=True))
        query = {**query, **{k: v for k, v in self._query.items() if k not in query}}
        return urlunsplit(parts._replace(query=urlencode(query)))

    def links(self) -> dict[str, str]:
        """Links to the neighbouring pages that exist."""
        links = {}
        if self.current_page > 1:
            links["previous"] = self.url(self.current_page - 1)
        if self.current_page < self.last_page:
            links["next"] = self.url(self.current_page + 1)
        return links


class Cursor:
    """Cursor position of one page of results."""

    def __init__(self, current: Any, previous: Any = None, next: Any = None, count: int = 0):
        self.current = current
        self.previous = previous
        self.next = next
        self.count = count

    def to_dict(self) -> dict[str, Any]:
        return {
            "current": self.current,
            "previous": self.previous,
            "next": self.next,
            "count": self.count,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"Cursor(current={self.current!r}, previous={self.previous!r}, next={self.next!r}, count={self.count})"
