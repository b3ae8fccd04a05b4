"""Serializer contract used by the transform engine."""

from abc import ABC, abstractmethod
from typing import Any

from responder.pagination.adapters import Cursor, PaginatorAdapter


class Serializer(ABC):
    """Shapes transformed data into the final output structure.

    The engine calls exactly one of :meth:`collection`, :meth:`item`,
    :meth:`primitive` or :meth:`null` for the root resource, then merges the
    mappings returned by :meth:`meta`, :meth:`paginator` and :meth:`cursor`
    into the result.
    """

    @abstractmethod
    def collection(self, resource_key: str | None, data: list[Any]) -> Any:
        """Serialize a list of transformed records."""

    @abstractmethod
    def item(self, resource_key: str | None, data: Any) -> Any:
        """Serialize one transformed record."""

    @abstractmethod
    def null(self) -> Any:
        """Serialize the absence of data."""

    def primitive(self, data: Any) -> Any:
        """Serialize a scalar value. Scalars pass through by default."""
        return data

    def meta(self, meta: dict[str, Any]) -> dict[str, Any]:
        """Serialize meta data into a mapping merged into the output."""
        if not meta:
            return {}
        return {"meta": meta}

    def paginator(self, paginator: PaginatorAdapter) -> dict[str, Any]:
        """Serialize length-aware pagination details."""
        pagination = {
            "total": paginator.total,
            "count": paginator.count,
            "per_page": paginator.per_page,
            "current_page": paginator.current_page,
            "total_pages": paginator.last_page,
            "links": paginator.links(),
        }
        return {"pagination": pagination}

    def cursor(self, cursor: Cursor) -> dict[str, Any]:
        """Serialize cursor pagination details."""
        return {"cursor": cursor.to_dict()}
