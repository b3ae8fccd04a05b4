"""Capability protocols checked on data and transformers.

Objects opt in by implementing the method; checks use ``isinstance`` against
these runtime-checkable protocols instead of probing method names ad hoc.
"""

from typing import Any, Protocol, Sequence, runtime_checkable


@runtime_checkable
class Loadable(Protocol):
    """Data that can eager-load relations before it is transformed.

    ``relations`` holds plain relation names and single-entry
    ``{name: constraint}`` mappings, in load order.
    """

    def load(self, relations: Sequence[str | dict[str, Any]]) -> Any:
        ...


@runtime_checkable
class DefaultRelationsProvider(Protocol):
    """Transformer declaring relations that are always included."""

    def default_relations(self) -> list[str]:
        ...


@runtime_checkable
class IncludeMethodProbe(Protocol):
    """Transformer able to report whether it resolves a relation itself."""

    def has_include_method(self, segment: str) -> bool:
        ...


@runtime_checkable
class Transformable(Protocol):
    """Data that knows which transformer should be used for it."""

    def transformer(self) -> Any:
        ...
