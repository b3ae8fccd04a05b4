"""Base transformer class."""

import dataclasses
from typing import Any, ClassVar, Iterable, Mapping

from responder.resources.resource import Collection, Item, NullResource, Primitive

INCLUDE_METHOD_PREFIX = "include_"
WILDCARD = "*"


class Transformer:
    """Turns one data object into a plain mapping.

    Subclasses override :meth:`transform` and declare their relations:

        class PostTransformer(Transformer):
            relations = {"author": UserTransformer, "comments": CommentTransformer}
            defaults = ["author"]

            def transform(self, post):
                return {"id": post.id, "title": post.title}

            def include_comments(self, post, params):
                limit = int(params.get("limit", ["10"])[0])
                return self.collection(post.comments[:limit], CommentTransformer())

    ``relations`` is either a list of allowed relation names or a mapping of
    relation name to the transformer used for it (``None`` for raw values).
    ``["*"]`` allows any relation. ``defaults`` lists relations included even
    when nobody asked for them.

    A relation with an ``include_<name>`` method is resolved by calling it with
    ``(data, params)``; it is never eager-loaded on the data.
    """

    relations: ClassVar[Iterable[str] | Mapping[str, Any]] = [WILDCARD]
    defaults: ClassVar[Iterable[str]] = []

    def transform(self, data: Any) -> dict[str, Any]:
        """Transform data into a mapping. The default copies the data's fields."""
        return to_mapping(data)

    def default_relations(self) -> list[str]:
        return list(self.defaults)

    def available_relations(self) -> list[str]:
        return list(self.relations)

    def allows(self, relation: str) -> bool:
        """Whether a relation may be included."""
        available = self.available_relations()
        if WILDCARD in available or relation in available:
            return True
        return relation in {_relation_segment(spec) for spec in self.default_relations()}

    def relation_transformer(self, relation: str) -> Any:
        """Transformer mapped to a relation, or None."""
        if isinstance(self.relations, Mapping):
            transformer = self.relations.get(relation)
            if isinstance(transformer, type) and issubclass(transformer, Transformer):
                return transformer()
            return transformer
        return None

    def has_include_method(self, segment: str) -> bool:
        return callable(getattr(self, f"{INCLUDE_METHOD_PREFIX}{segment}", None))

    def item(self, data: Any, transformer: Any = None, resource_key: str | None = None) -> Item:
        return Item(data, transformer, resource_key)

    def collection(
        self, data: Iterable[Any], transformer: Any = None, resource_key: str | None = None
    ) -> Collection:
        return Collection(data, transformer, resource_key)

    def primitive(self, data: Any, transformer: Any = None) -> Primitive:
        return Primitive(data, transformer)

    def null(self) -> NullResource:
        return NullResource()


def _relation_segment(spec: str) -> str:
    """First path segment of a relation spec, parameters dropped."""
    return spec.split(":", 1)[0].split(".", 1)[0]


def to_mapping(data: Any) -> Any:
    """Best-effort conversion of a data object into a plain mapping.

    Mappings are copied, ``to_dict()`` is honoured, dataclass instances are
    converted and plain objects give their public attributes. Anything else
    is returned unchanged.
    """
    if isinstance(data, Mapping):
        return dict(data)
    to_dict = getattr(data, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return dataclasses.asdict(data)
    if hasattr(data, "__dict__") and not isinstance(data, type):
        return {key: value for key, value in vars(data).items() if not key.startswith("_")}
    return data
