"""Fluent builder resolving transformation directives into one engine call."""

import logging
from typing import Any

from responder.core.exceptions import ResourceNotBoundError
from responder.pagination.adapters import Cursor, PaginatorAdapter
from responder.pagination.factory import PaginatorFactory
from responder.pagination.paginator import CursorPaginator, LengthAwarePaginator
from responder.resources.factory import ResourceFactory
from responder.resources.resource import Resource
from responder.serializers.base import Serializer
from responder.serializers.registry import resolve_serializer
from responder.transform.directives import (
    RelationDirective,
    bare_names,
    normalize_names,
    normalize_relations,
    parse_directive,
)
from responder.transform.engine import TransformFactory
from responder.transformers.contracts import (
    DefaultRelationsProvider,
    IncludeMethodProbe,
    Loadable,
)

logger = logging.getLogger(__name__)


class TransformBuilder:
    """Accumulates directives for one resource and transforms it.

    Typical use:

        builder.resource(posts, PostTransformer(), "posts") \\
            .with_("author", {"comments:limit(5)": only_approved}) \\
            .without("author.avatar") \\
            .only("id", "title") \\
            .meta({"generated_at": now}) \\
            .transform()

    Calling :meth:`resource` again replaces the resource and clears the
    accumulated includes, excludes and fieldsets. The serializer is kept.

    A builder belongs to a single request; it is not safe to share.
    """

    def __init__(
        self,
        resource_factory: ResourceFactory,
        transform_factory: TransformFactory,
        paginator_factory: PaginatorFactory,
    ):
        self._resource_factory = resource_factory
        self._transform_factory = transform_factory
        self._paginator_factory = paginator_factory

        self._resource: Resource | None = None
        self._serializer: Serializer | None = None
        self._reset_directives()

    def resource(
        self,
        data: Any = None,
        transformer: Any = None,
        resource_key: str | None = None,
    ) -> "TransformBuilder":
        """Wrap data in a resource and make it the active one.

        Cursor paginators bind a cursor and length-aware paginators bind a
        paginator on the new resource. Without arguments an empty resource is
        bound, which lets callers stage directives before data is known.
        """
        self._resource = self._resource_factory.make(data, transformer, resource_key)
        self._reset_directives()

        if isinstance(data, CursorPaginator):
            self._resource.set_cursor(self._paginator_factory.make_cursor(data))
        elif isinstance(data, LengthAwarePaginator):
            self._resource.set_paginator(self._paginator_factory.make(data))

        return self

    def cursor(self, cursor: Cursor) -> "TransformBuilder":
        """Bind a cursor on the active resource."""
        self._require_resource("cursor").set_cursor(cursor)
        return self

    def paginator(self, paginator: PaginatorAdapter) -> "TransformBuilder":
        """Bind a paginator adapter on the active resource."""
        self._require_resource("paginator").set_paginator(paginator)
        return self

    def meta(self, data: dict[str, Any]) -> "TransformBuilder":
        """Merge meta data into the active resource."""
        self._require_resource("meta").set_meta(data)
        return self

    def serializer(self, serializer: Any) -> "TransformBuilder":
        """Set the serializer from an instance, Serializer subclass or registered name.

        Raises:
            InvalidSuccessSerializerError: If the value does not resolve to a
                serializer. The previous serializer stays bound.
        """
        self._serializer = resolve_serializer(serializer)
        return self

    def with_(self, *relations: Any) -> "TransformBuilder":
        """Include relations.

        Accepts names, ``{spec: constraint}`` mappings, and lists mixing both.
        Repeated calls add to the existing includes.
        """
        self._includes.extend(normalize_relations(*relations))
        return self

    def without(self, *relations: Any) -> "TransformBuilder":
        """Exclude relations, including default ones."""
        self._excludes.extend(normalize_names(*relations))
        return self

    def only(self, *fields: Any) -> "TransformBuilder":
        """Restrict output to the given fields."""
        self._fieldsets.extend(normalize_names(*fields))
        return self

    def transform(self) -> Any:
        """Eager-load relations and run the transform engine on the resource.

        Errors raised by the data layer or the engine propagate unchanged.

        Raises:
            ResourceNotBoundError: If no resource is bound.
        """
        resource = self._require_resource("transform")
        transformer = resource.transformer

        relations = self._merge_default_relations(transformer)
        self._eager_load(resource.data, self._loadable_relations(relations, transformer))

        options = {
            "includes": [directive.spec for directive in relations],
            "excludes": list(self._excludes),
            "fieldsets": list(self._fieldsets),
        }
        logger.debug(
            "Transforming resource",
            extra={"resource_key": resource.resource_key, "context": {"includes": len(options["includes"])}},
        )
        return self._transform_factory.make(resource, self._serializer, options)

    def _merge_default_relations(self, transformer: Any) -> list[RelationDirective]:
        """Explicit includes followed by transformer defaults not already named."""
        relations = list(self._includes)
        if not isinstance(transformer, DefaultRelationsProvider):
            return relations

        names = set(bare_names(relations))
        for default in transformer.default_relations():
            name = parse_directive(default).name
            if name not in names:
                relations.append(RelationDirective(name))
                names.add(name)
        return relations

    @staticmethod
    def _loadable_relations(relations: list[RelationDirective], transformer: Any) -> list[str | dict[str, Any]]:
        """Relations the data layer should load: those without an include method."""
        if not isinstance(transformer, IncludeMethodProbe):
            return [directive.load_entry() for directive in relations]
        return [
            directive.load_entry()
            for directive in relations
            if not transformer.has_include_method(directive.segment)
        ]

    @staticmethod
    def _eager_load(data: Any, relations: list[str | dict[str, Any]]) -> None:
        if not relations or not isinstance(data, Loadable):
            return
        logger.debug("Eager loading relations", extra={"context": {"relations": relations}})
        data.load(relations)

    def _require_resource(self, operation: str) -> Resource:
        if self._resource is None:
            raise ResourceNotBoundError(
                "No resource bound; call resource() first",
                context={"operation": operation},
            )
        return self._resource

    def _reset_directives(self) -> None:
        self._includes: list[RelationDirective] = []
        self._excludes: list[str] = []
        self._fieldsets: list[str] = []
