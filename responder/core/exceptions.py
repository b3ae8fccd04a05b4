"""Exception hierarchy for the responder package."""


class ResponderError(Exception):
    """Base exception for all responder errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(ResponderError):
    """Raised when configuration loading or validation fails."""

    pass


class ResourceError(ResponderError):
    """Raised when resource operations fail."""

    pass


class ResourceNotBoundError(ResourceError):
    """Raised when a builder operation needs a resource but none is bound."""

    pass


class SerializerError(ResponderError):
    """Raised when serializer registration or resolution fails."""

    pass


class InvalidSerializerError(SerializerError):
    """Raised when a value cannot be used as a serializer."""

    pass


class InvalidSuccessSerializerError(InvalidSerializerError):
    """Raised when a value does not resolve to a success serializer."""

    pass


class TransformError(ResponderError):
    """Raised when transform execution fails."""

    pass
