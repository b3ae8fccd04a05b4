"""Factory wrapping raw data into resources."""

import logging
from numbers import Number
from typing import Any, Iterable, Mapping

from responder.pagination.paginator import CursorPaginator, LengthAwarePaginator
from responder.resources.resource import Collection, Item, NullResource, Primitive, Resource
from responder.transformers.contracts import Transformable

logger = logging.getLogger(__name__)

SCALAR_TYPES = (str, bytes, bool, Number)


class ResourceFactory:
    """Picks the resource type for a piece of data.

    - ``None`` becomes a :class:`NullResource`
    - paginators become a :class:`Collection` over their page items
    - scalars become a :class:`Primitive`
    - mappings and other objects become an :class:`Item`
    - other iterables become a :class:`Collection`

    Pagination binding is left to the caller; the factory never touches the
    data beyond reading it.
    """

    def make(
        self,
        data: Any = None,
        transformer: Any = None,
        resource_key: str | None = None,
    ) -> Resource:
        if isinstance(data, Resource):
            return self._update(data, transformer, resource_key)

        transformer = self._resolve_transformer(transformer)

        if data is None:
            return NullResource(None, transformer, resource_key)

        if isinstance(data, (CursorPaginator, LengthAwarePaginator)):
            items = self._materialize(data.items())
            return Collection(items, self._infer_transformer(items, transformer, True), resource_key)

        if isinstance(data, SCALAR_TYPES):
            return Primitive(data, transformer, resource_key)

        if self._is_collection(data):
            items = self._materialize(data)
            return Collection(items, self._infer_transformer(items, transformer, True), resource_key)

        return Item(data, self._infer_transformer(data, transformer, False), resource_key)

    def _update(self, resource: Resource, transformer: Any, resource_key: str | None) -> Resource:
        if transformer is not None:
            resource.set_transformer(self._resolve_transformer(transformer))
        if resource_key is not None:
            resource.set_resource_key(resource_key)
        return resource

    def _resolve_transformer(self, transformer: Any) -> Any:
        """Transformer classes are instantiated; instances and callables pass through."""
        if isinstance(transformer, type):
            return transformer()
        return transformer

    def _infer_transformer(self, data: Any, transformer: Any, is_collection: bool) -> Any:
        """Fall back to the data's own transformer when none was given."""
        if transformer is not None:
            return transformer

        sample = data
        if is_collection:
            sample = next(iter(data), None)

        if _declares_transformer(sample):
            inferred = self._resolve_transformer(sample.transformer())
            logger.debug(
                "Using transformer declared by data",
                extra={"context": {"transformer": type(inferred).__name__}},
            )
            return inferred
        return None

    @staticmethod
    def _is_collection(data: Any) -> bool:
        return isinstance(data, Iterable) and not isinstance(data, Mapping)

    @staticmethod
    def _materialize(items: Iterable[Any]) -> Iterable[Any]:
        """Keep sized containers as they are so their capabilities survive."""
        if hasattr(items, "__len__") and hasattr(items, "__getitem__"):
            return items
        if isinstance(items, (set, frozenset)):
            return items
        return list(items)


def _declares_transformer(sample: Any) -> bool:
    """A ``transformer`` data field is not a declaration; only a method is."""
    if isinstance(sample, Mapping) or not isinstance(sample, Transformable):
        return False
    return callable(getattr(sample, "transformer", None))
