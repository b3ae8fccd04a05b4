"""Factory converting pagination inputs into serializer pagination types."""

from typing import Any

from responder.pagination.adapters import Cursor, PaginatorAdapter
from responder.pagination.paginator import CursorPaginator, LengthAwarePaginator


class PaginatorFactory:
    """Builds paginator adapters and cursors.

    Args:
        query: Query parameters appended to every generated page URL.
    """

    def __init__(self, query: dict[str, Any] | None = None):
        self._query = dict(query or {})

    def make(self, paginator: LengthAwarePaginator) -> PaginatorAdapter:
        """Wrap a length-aware paginator in an adapter."""
        return PaginatorAdapter(paginator, self._query)

    def make_cursor(self, paginator: CursorPaginator) -> Cursor:
        """Build a cursor from a cursor paginator."""
        return Cursor(
            paginator.cursor(),
            paginator.previous(),
            paginator.next(),
            paginator.count(),
        )
