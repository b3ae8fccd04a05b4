"""Resource types wrapping data for transformation."""

from typing import Any

from responder.pagination.adapters import Cursor, PaginatorAdapter


class Resource:
    """Data plus the transformer, key, pagination and meta used to render it.

    At most one of ``paginator`` and ``cursor`` is bound at a time; binding
    one clears the other.
    """

    def __init__(self, data: Any = None, transformer: Any = None, resource_key: str | None = None):
        self.data = data
        self.transformer = transformer
        self.resource_key = resource_key
        self.meta: dict[str, Any] = {}
        self.paginator: PaginatorAdapter | None = None
        self.cursor: Cursor | None = None

    def set_meta(self, meta: dict[str, Any]) -> "Resource":
        """Merge meta data into the resource. Later keys win."""
        self.meta.update(meta)
        return self

    def set_paginator(self, paginator: PaginatorAdapter) -> "Resource":
        self.paginator = paginator
        self.cursor = None
        return self

    def set_cursor(self, cursor: Cursor) -> "Resource":
        self.cursor = cursor
        self.paginator = None
        return self

    def set_transformer(self, transformer: Any) -> "Resource":
        self.transformer = transformer
        return self

    def set_resource_key(self, resource_key: str) -> "Resource":
        self.resource_key = resource_key
        return self

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(data={self.data!r}, transformer={self.transformer!r}, "
            f"resource_key={self.resource_key!r})"
        )


class Item(Resource):
    """A single record."""


class Collection(Resource):
    """A sequence of records."""


class Primitive(Resource):
    """A scalar value."""


class NullResource(Resource):
    """No data at all."""

    def __init__(self, data: Any = None, transformer: Any = None, resource_key: str | None = None):
        super().__init__(None, transformer, resource_key)
