"""Default transform engine.

The builder only depends on the :class:`TransformFactory` protocol;
:class:`TransformEngine` is the implementation shipped with the package. It
walks one resource, resolves the requested includes through the transformer,
applies excludes and fieldsets, and hands the root to the serializer.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Protocol

from responder.core.exceptions import TransformError
from responder.resources.factory import ResourceFactory
from responder.resources.resource import Collection, Item, NullResource, Primitive, Resource
from responder.serializers.base import Serializer
from responder.serializers.builtins import SuccessSerializer
from responder.transform.directives import PATH_SEPARATOR, parse_include_params
from responder.transformers.contracts import DefaultRelationsProvider, IncludeMethodProbe
from responder.transformers.transformer import INCLUDE_METHOD_PREFIX, Transformer, to_mapping

logger = logging.getLogger(__name__)

TransformOptions = Mapping[str, Iterable[str]]


class TransformFactory(Protocol):
    """Anything able to turn a resource into output data."""

    def make(
        self,
        resource: Resource,
        serializer: Serializer | None,
        options: TransformOptions,
    ) -> Any:
        """Transform and serialize a resource.

        ``options`` carries ``includes``, ``excludes`` and ``fieldsets`` lists.
        """
        ...


@dataclass
class IncludeNode:
    """One requested relation with its parameters and nested requests."""

    params: dict[str, list[str]] = field(default_factory=dict)
    children: dict[str, "IncludeNode"] = field(default_factory=dict)


def build_include_tree(includes: Iterable[str]) -> dict[str, IncludeNode]:
    """Turn dotted include specs into a tree keyed by relation name.

    Parameters attach to the last segment of a path.
    """
    tree: dict[str, IncludeNode] = {}
    for spec in includes:
        path, params = parse_include_params(spec)
        segments = path.split(PATH_SEPARATOR)
        nodes = tree
        for index, segment in enumerate(segments):
            node = nodes.setdefault(segment, IncludeNode())
            if index == len(segments) - 1:
                node.params.update(params)
            nodes = node.children
    return tree


def build_fieldsets(fieldsets: Iterable[str]) -> dict[str, set[str]]:
    """Group field filters by the relation path they apply to.

    ``"id"`` filters the root, ``"author.name"`` filters the ``author`` include.
    """
    grouped: dict[str, set[str]] = {}
    for fieldset in fieldsets:
        path, _, name = fieldset.rpartition(PATH_SEPARATOR)
        grouped.setdefault(path, set()).add(name)
    return grouped


def _merge_trees(primary: dict[str, IncludeNode], extra: dict[str, IncludeNode]) -> dict[str, IncludeNode]:
    """Merge ``extra`` into a copy of ``primary``; entries of ``primary`` win."""
    merged = dict(primary)
    for name, node in extra.items():
        if name in merged:
            existing = merged[name]
            merged[name] = IncludeNode(
                params={**node.params, **existing.params},
                children=_merge_trees(existing.children, node.children),
            )
        else:
            merged[name] = node
    return merged


def _child_path(path: str, name: str) -> str:
    return f"{path}{PATH_SEPARATOR}{name}" if path else name


class TransformEngine:
    """Transforms a resource and serializes the result.

    Args:
        recursion_limit: Maximum depth of nested includes.
        resource_factory: Factory used to wrap relation values read from data.
    """

    def __init__(self, recursion_limit: int = 10, resource_factory: ResourceFactory | None = None):
        if recursion_limit <= 0:
            raise ValueError("recursion_limit must be greater than 0")
        self._recursion_limit = recursion_limit
        self._resource_factory = resource_factory or ResourceFactory()

    def make(
        self,
        resource: Resource,
        serializer: Serializer | None,
        options: TransformOptions,
    ) -> Any:
        serializer = serializer if serializer is not None else SuccessSerializer()
        walk = _Walk(
            includes=build_include_tree(options.get("includes", [])),
            excludes=set(options.get("excludes", [])),
            fieldsets=build_fieldsets(options.get("fieldsets", [])),
            recursion_limit=self._recursion_limit,
            resource_factory=self._resource_factory,
        )
        data = walk.transform_resource(resource, walk.includes, "", 0)
        output = self._serialize(resource, serializer, data)
        return self._merge_sections(resource, serializer, output)

    @staticmethod
    def _serialize(resource: Resource, serializer: Serializer, data: Any) -> Any:
        if isinstance(resource, NullResource):
            return serializer.null()
        if isinstance(resource, Primitive):
            return serializer.primitive(data)
        if isinstance(resource, Collection):
            return serializer.collection(resource.resource_key, data)
        return serializer.item(resource.resource_key, data)

    @staticmethod
    def _merge_sections(resource: Resource, serializer: Serializer, output: Any) -> Any:
        sections: dict[str, Any] = {}
        if resource.paginator is not None:
            sections.update(serializer.paginator(resource.paginator))
        if resource.cursor is not None:
            sections.update(serializer.cursor(resource.cursor))
        sections.update(serializer.meta(resource.meta))

        if not sections:
            return output
        if output is None:
            return sections
        if not isinstance(output, Mapping):
            raise TransformError(
                "Cannot merge meta or pagination into non-mapping output",
                context={"output_type": type(output).__name__, "sections": sorted(sections)},
            )
        return {**output, **sections}


class _Walk:
    """State of one engine pass."""

    def __init__(
        self,
        includes: dict[str, IncludeNode],
        excludes: set[str],
        fieldsets: dict[str, set[str]],
        recursion_limit: int,
        resource_factory: ResourceFactory,
    ):
        self.includes = includes
        self.excludes = excludes
        self.fieldsets = fieldsets
        self.recursion_limit = recursion_limit
        self.resource_factory = resource_factory

    def transform_resource(self, resource: Resource, tree: dict[str, IncludeNode], path: str, depth: int) -> Any:
        if isinstance(resource, NullResource):
            return None
        if isinstance(resource, Primitive):
            if resource.transformer is None:
                return resource.data
            return self._apply_transformer(resource.transformer, resource.data)
        if isinstance(resource, Collection):
            return [
                self.transform_item(item, resource.transformer, tree, path, depth)
                for item in resource.data
            ]
        if isinstance(resource, Item):
            return self.transform_item(resource.data, resource.transformer, tree, path, depth)
        raise TransformError(
            "Unsupported resource type",
            context={"resource_type": type(resource).__name__},
        )

    def transform_item(self, data: Any, transformer: Any, tree: dict[str, IncludeNode], path: str, depth: int) -> Any:
        payload = self._apply_transformer(transformer, data)
        if not isinstance(payload, Mapping):
            return payload

        payload = dict(payload)
        included = []
        for name, node in self._requested(transformer, tree, path).items():
            payload[name] = self._include(data, transformer, name, node, path, depth)
            included.append(name)

        return self._filter_fields(payload, path, included)

    def _apply_transformer(self, transformer: Any, data: Any) -> Any:
        if transformer is None:
            return to_mapping(data)
        transform = getattr(transformer, "transform", None)
        if callable(transform):
            return transform(data)
        if callable(transformer):
            return transformer(data)
        raise TransformError(
            "Transformer must be callable or have a transform() method",
            context={"transformer_type": type(transformer).__name__},
        )

    def _requested(self, transformer: Any, tree: dict[str, IncludeNode], path: str) -> dict[str, IncludeNode]:
        if isinstance(transformer, DefaultRelationsProvider):
            tree = _merge_trees(tree, build_include_tree(transformer.default_relations()))

        requested = {}
        for name, node in tree.items():
            if _child_path(path, name) in self.excludes:
                continue
            if isinstance(transformer, Transformer) and not transformer.allows(name):
                logger.debug(
                    "Ignoring include not declared by transformer",
                    extra={"context": {"relation": _child_path(path, name), "transformer": type(transformer).__name__}},
                )
                continue
            requested[name] = node
        return requested

    def _include(self, data: Any, transformer: Any, name: str, node: IncludeNode, path: str, depth: int) -> Any:
        if depth + 1 > self.recursion_limit:
            raise TransformError(
                "Include recursion limit exceeded",
                context={"relation": _child_path(path, name), "limit": self.recursion_limit},
            )

        child_path = _child_path(path, name)
        if isinstance(transformer, IncludeMethodProbe) and transformer.has_include_method(name):
            result = getattr(transformer, f"{INCLUDE_METHOD_PREFIX}{name}")(data, node.params)
            if result is None:
                return None
            if not isinstance(result, Resource):
                raise TransformError(
                    "Include method must return a resource or None",
                    context={"relation": child_path, "returned": type(result).__name__},
                )
            return self.transform_resource(result, node.children, child_path, depth + 1)

        value = data.get(name) if isinstance(data, Mapping) else getattr(data, name, None)
        nested = transformer.relation_transformer(name) if isinstance(transformer, Transformer) else None
        resource = self.resource_factory.make(value, nested)
        return self.transform_resource(resource, node.children, child_path, depth + 1)

    def _filter_fields(self, payload: dict[str, Any], path: str, included: list[str]) -> dict[str, Any]:
        fields = self.fieldsets.get(path)
        if not fields:
            return payload
        return {key: value for key, value in payload.items() if key in fields or key in included}
