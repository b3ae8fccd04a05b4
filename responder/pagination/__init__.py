"""Pagination inputs, adapters and the paginator factory."""

from responder.pagination.adapters import Cursor, PaginatorAdapter
from responder.pagination.factory import PaginatorFactory
from responder.pagination.paginator import CursorPaginator, LengthAwarePaginator, Paginator

__all__ = [
    "CursorPaginator",
    "LengthAwarePaginator",
    "Paginator",
    "PaginatorAdapter",
    "Cursor",
    "PaginatorFactory",
]
