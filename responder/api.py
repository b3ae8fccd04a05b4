"""Public Python API for responder package.

This module provides the main entry point for building transformations.
"""

from typing import Any

from responder.models.config import ResponderConfig
from responder.pagination.factory import PaginatorFactory
from responder.resources.factory import ResourceFactory
from responder.transform.builder import TransformBuilder
from responder.transform.engine import TransformEngine


def make_builder(config: ResponderConfig | None = None) -> TransformBuilder:
    """Create a builder wired with the default factories.

    The configured serializer is bound up front; no resource is bound yet.

    Raises:
        InvalidSuccessSerializerError: If the configured serializer name is not registered
    """
    config = config or ResponderConfig()
    resource_factory = ResourceFactory()
    builder = TransformBuilder(
        resource_factory,
        TransformEngine(config.recursion_limit, resource_factory),
        PaginatorFactory(config.pagination_query),
    )
    return builder.serializer(config.serializer)


def transformation(
    data: Any = None,
    transformer: Any = None,
    resource_key: str | None = None,
    config: ResponderConfig | None = None,
) -> TransformBuilder:
    """Start a transformation of data.

    Args:
        data: Record, collection, paginator or cursor paginator (optional)
        transformer: Transformer instance, Transformer subclass or callable
        resource_key: Key used by serializers that name their payload
        config: Configuration; defaults apply when omitted

    Returns:
        A builder with the resource bound, ready for directives

    Example:
        >>> from responder import transformation
        >>> transformation({"id": 1, "secret": "x"}).only("id").transform()
        {'data': {'id': 1}}
    """
    return make_builder(config).resource(data, transformer, resource_key)
