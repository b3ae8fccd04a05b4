"""Transformers and the capability protocols checked on data and transformers."""

from responder.transformers.contracts import (
    DefaultRelationsProvider,
    IncludeMethodProbe,
    Loadable,
    Transformable,
)
from responder.transformers.transformer import Transformer, to_mapping

__all__ = [
    "Transformer",
    "to_mapping",
    "Loadable",
    "DefaultRelationsProvider",
    "IncludeMethodProbe",
    "Transformable",
]
