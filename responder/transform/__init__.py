"""Transform orchestration: directive parsing, the builder and the engine."""

from responder.transform.builder import TransformBuilder
from responder.transform.directives import (
    RelationDirective,
    bare_names,
    from_names,
    from_pairs,
    normalize_names,
    normalize_relations,
    parse_directive,
    parse_include_params,
)
from responder.transform.engine import (
    IncludeNode,
    TransformEngine,
    TransformFactory,
    build_fieldsets,
    build_include_tree,
)

__all__ = [
    "TransformBuilder",
    "TransformEngine",
    "TransformFactory",
    "IncludeNode",
    "build_include_tree",
    "build_fieldsets",
    "RelationDirective",
    "bare_names",
    "parse_directive",
    "parse_include_params",
    "from_names",
    "from_pairs",
    "normalize_relations",
    "normalize_names",
]
