"""Relation directive parsing.

An include directive names a relation and may carry engine parameters after
the first colon, e.g. ``"comments:limit(5|1):order(created_at|desc)"``. The
text before the colon is the bare relation name used for eager loading; the
full string is what the transform engine receives.

Directives arrive in several shapes (plain strings, ``{spec: constraint}``
mappings, lists mixing both). Everything is normalized into an ordered list
of :class:`RelationDirective` before it is stored.
"""

import re
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Sequence

PARAMS_SEPARATOR = ":"
PATH_SEPARATOR = "."
PARAM_VALUE_SEPARATOR = "|"

_PARAM_PATTERN = re.compile(r"^(\w+)(?:\(([^)]*)\))?$")


@dataclass(frozen=True)
class RelationDirective:
    """One include directive.

    Attributes:
        spec: The directive exactly as given, parameters included.
        constraint: Optional eager-load constraint (usually a callable) that
            travels with the relation to the data layer.
    """

    spec: str
    constraint: Any = None

    @property
    def name(self) -> str:
        """Bare relation name: everything before the first colon."""
        return self.spec.split(PARAMS_SEPARATOR, 1)[0]

    @property
    def segment(self) -> str:
        """First path segment of the bare name (``"foo"`` for ``"foo.bar"``)."""
        return self.name.split(PATH_SEPARATOR, 1)[0]

    @property
    def has_constraint(self) -> bool:
        return self.constraint is not None

    def load_entry(self) -> str | dict[str, Any]:
        """Entry handed to a data layer ``load`` call."""
        if self.has_constraint:
            return {self.name: self.constraint}
        return self.name


def parse_directive(spec: str, constraint: Any = None) -> RelationDirective:
    """Build a directive from its string form and optional constraint.

    Raises:
        TypeError: If spec is not a string.
        ValueError: If spec has an empty relation name.
    """
    if not isinstance(spec, str):
        raise TypeError(f"relation directive must be a string, got {type(spec).__name__}")
    directive = RelationDirective(spec, constraint)
    if not directive.name.strip():
        raise ValueError(f"relation directive has no relation name: {spec!r}")
    return directive


def from_names(names: Iterable[str]) -> list[RelationDirective]:
    """Directives for plain relation names, in order."""
    return [parse_directive(name) for name in names]


def from_pairs(pairs: Iterable[tuple[str, Any]]) -> list[RelationDirective]:
    """Directives for ``(spec, constraint)`` pairs, in order."""
    return [parse_directive(spec, constraint) for spec, constraint in pairs]


def normalize_relations(*relations: Any) -> list[RelationDirective]:
    """Flatten every accepted argument shape into one ordered directive list.

    Accepts strings, :class:`RelationDirective` instances, mappings of
    ``spec -> constraint`` (``None`` meaning no constraint), and lists or tuples
    of any of those. Order follows argument order, then element order;
    unordered sets are rejected.

    Example:
        >>> [d.spec for d in normalize_relations("a", ["b", {"c": None}])]
        ['a', 'b', 'c']
    """
    directives: list[RelationDirective] = []
    for relation in relations:
        if isinstance(relation, RelationDirective):
            directives.append(relation)
        elif isinstance(relation, str):
            directives.append(parse_directive(relation))
        elif isinstance(relation, Mapping):
            directives.extend(from_pairs(relation.items()))
        elif isinstance(relation, (list, tuple)):
            directives.extend(normalize_relations(*relation))
        else:
            raise TypeError(
                f"unsupported relation directive type: {type(relation).__name__}"
            )
    return directives


def normalize_names(*names: Any) -> list[str]:
    """Flatten strings and lists or tuples of strings into one ordered list."""
    flattened: list[str] = []
    for name in names:
        if isinstance(name, str):
            flattened.append(name)
        elif isinstance(name, (list, tuple)):
            flattened.extend(normalize_names(*name))
        else:
            raise TypeError(f"expected a string or a sequence of strings, got {type(name).__name__}")
    return flattened


def parse_include_params(spec: str) -> tuple[str, dict[str, list[str]]]:
    """Split an include spec into its relation path and parameters.

    ``"foo.bar:limit(5|1):order(name)"`` gives
    ``("foo.bar", {"limit": ["5", "1"], "order": ["name"]})``. Parameters
    without parentheses get an empty value list.

    Raises:
        ValueError: If a parameter segment is malformed.
    """
    path, *raw_params = spec.split(PARAMS_SEPARATOR)
    params: dict[str, list[str]] = {}
    for raw in raw_params:
        match = _PARAM_PATTERN.match(raw.strip())
        if match is None:
            raise ValueError(f"malformed include parameter {raw!r} in {spec!r}")
        key, values = match.group(1), match.group(2)
        params[key] = values.split(PARAM_VALUE_SEPARATOR) if values else []
    return path, params


def bare_names(directives: Sequence[RelationDirective]) -> list[str]:
    """Bare names of the given directives, in order."""
    return [directive.name for directive in directives]
