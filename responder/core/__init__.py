"""Core module for responder package."""

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
from responder.core.logging import StructuredFormatter, configure_logging

__all__ = [
    "ResponderError",
    "ConfigError",
    "ResourceError",
    "ResourceNotBoundError",
    "SerializerError",
    "InvalidSerializerError",
    "InvalidSuccessSerializerError",
    "TransformError",
    "configure_logging",
    "StructuredFormatter",
]
