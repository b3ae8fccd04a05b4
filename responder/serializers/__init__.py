"""Serializers and the serializer registry.

Built-in serializers register themselves on import: array, data_array,
success, noop.
"""

# Registry must be imported first (built-ins use register_serializer decorator)
from responder.serializers.registry import (
    SerializerFactory,
    clear_registry,
    get_serializer,
    list_serializer_types,
    register_serializer,
    resolve_serializer,
)
from responder.serializers.base import Serializer
from responder.serializers.builtins import (
    ArraySerializer,
    DataArraySerializer,
    NoopSerializer,
    SuccessSerializer,
)

__all__ = [
    "Serializer",
    "ArraySerializer",
    "DataArraySerializer",
    "SuccessSerializer",
    "NoopSerializer",
    "SerializerFactory",
    "register_serializer",
    "get_serializer",
    "resolve_serializer",
    "list_serializer_types",
    "clear_registry",
]
