"""Serializer registry for resolving serializers by name."""

from typing import Any, Callable, overload

from responder.core.exceptions import InvalidSuccessSerializerError, SerializerError
from responder.serializers.base import Serializer

SerializerFactory = Callable[[], Serializer]

_serializer_registry: dict[str, SerializerFactory] = {}


@overload
def register_serializer(
    serializer_type: str,
) -> Callable[[SerializerFactory], SerializerFactory]: ...


@overload
def register_serializer(serializer_type: str, factory: SerializerFactory) -> None: ...


def register_serializer(
    serializer_type: str,
    factory: SerializerFactory | None = None,
) -> Callable[[SerializerFactory], SerializerFactory] | None:
    """Register a serializer factory.

    Can be used as a decorator or called directly:

        # As decorator
        @register_serializer("success")
        class SuccessSerializer(ArraySerializer):
            ...

        # Direct call
        register_serializer("json_api", JsonApiSerializer)

    Args:
        serializer_type: Unique identifier for the serializer (e.g., 'success').
        factory: Zero-argument factory or Serializer subclass (optional if used
            as decorator).

    Raises:
        SerializerError: If a serializer with the same type is already registered.
    """

    def _register(f: SerializerFactory) -> SerializerFactory:
        if serializer_type in _serializer_registry:
            raise SerializerError(
                f"Serializer '{serializer_type}' is already registered",
                context={"serializer_type": serializer_type},
            )
        _serializer_registry[serializer_type] = f
        return f

    if factory is not None:
        _register(factory)
        return None

    return _register


def get_serializer(serializer_type: str) -> Serializer:
    """Create a serializer using the registered factory.

    Raises:
        InvalidSuccessSerializerError: If the type is not registered or the
            factory does not produce a Serializer.
    """
    factory = _serializer_registry.get(serializer_type)
    if factory is None:
        available = ", ".join(sorted(_serializer_registry.keys())) or "(none)"
        raise InvalidSuccessSerializerError(
            f"Unknown serializer type: '{serializer_type}'",
            context={"serializer_type": serializer_type, "available_types": available},
        )
    serializer = factory()
    if not isinstance(serializer, Serializer):
        raise InvalidSuccessSerializerError(
            f"Serializer factory '{serializer_type}' did not produce a serializer",
            context={"serializer_type": serializer_type, "produced": type(serializer).__name__},
        )
    return serializer


def resolve_serializer(value: Any) -> Serializer:
    """Resolve a serializer instance, Serializer subclass or registered name.

    Raises:
        InvalidSuccessSerializerError: If the value does not resolve to a Serializer.
    """
    if isinstance(value, Serializer):
        return value
    if isinstance(value, str):
        return get_serializer(value)
    if isinstance(value, type) and issubclass(value, Serializer):
        return value()
    raise InvalidSuccessSerializerError(
        "Serializer must be a Serializer instance, subclass or registered name",
        context={"given": value.__name__ if isinstance(value, type) else type(value).__name__},
    )


def list_serializer_types() -> list[str]:
    """Return a sorted list of all registered serializer types."""
    return sorted(_serializer_registry.keys())


def clear_registry() -> None:
    """Clear all registered serializers. Intended for testing only."""
    _serializer_registry.clear()
