"""Responder - transform application data into API response payloads.

A fluent builder collects includes, excludes, field filters, pagination and
meta for one resource, eager-loads the relations the transformer needs, and
hands everything to a transform engine in a single pass.
"""

__version__ = "0.1.0"

# Public API
from responder.api import make_builder, transformation

# Exceptions
from responder.core.exceptions import (
    ConfigError,
    InvalidSerializerError,
    InvalidSuccessSerializerError,
    ResourceError,
    ResourceNotBoundError,
    ResponderError,
    SerializerError,
    TransformError,
)

# Configuration
from responder.models.config import ResponderConfig

# Core classes
from responder.pagination import CursorPaginator, Paginator, PaginatorFactory
from responder.resources import ResourceFactory
from responder.serializers import (
    ArraySerializer,
    DataArraySerializer,
    NoopSerializer,
    Serializer,
    SuccessSerializer,
    register_serializer,
)
from responder.transform import TransformBuilder, TransformEngine
from responder.transformers import Transformer

__all__ = [
    # Version
    "__version__",
    # Public API
    "transformation",
    "make_builder",
    # Core classes
    "TransformBuilder",
    "TransformEngine",
    "ResourceFactory",
    "PaginatorFactory",
    "Paginator",
    "CursorPaginator",
    "Transformer",
    "Serializer",
    "ArraySerializer",
    "DataArraySerializer",
    "SuccessSerializer",
    "NoopSerializer",
    "register_serializer",
    "ResponderConfig",
    # Exceptions
    "ResponderError",
    "ConfigError",
    "ResourceError",
    "ResourceNotBoundError",
    "SerializerError",
    "InvalidSerializerError",
    "InvalidSuccessSerializerError",
    "TransformError",
]
