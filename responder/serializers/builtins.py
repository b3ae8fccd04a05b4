"""Built-in serializers."""

from typing import Any

from responder.serializers.base import Serializer
from responder.serializers.registry import register_serializer


@register_serializer("array")
class ArraySerializer(Serializer):
    """Items render as-is; collections are keyed by resource key or ``data``."""

    def collection(self, resource_key: str | None, data: list[Any]) -> Any:
        return {resource_key or "data": data}

    def item(self, resource_key: str | None, data: Any) -> Any:
        return data

    def null(self) -> Any:
        return {}


@register_serializer("data_array")
class DataArraySerializer(ArraySerializer):
    """Every payload is nested under a ``data`` key."""

    def collection(self, resource_key: str | None, data: list[Any]) -> Any:
        return {"data": data}

    def item(self, resource_key: str | None, data: Any) -> Any:
        return {"data": data}

    def null(self) -> Any:
        return {"data": None}


@register_serializer("success")
class SuccessSerializer(DataArraySerializer):
    """Default serializer for successful responses.

    Data sits under ``data``; meta keys are merged at the top level next to
    ``pagination`` or ``cursor``.
    """

    def primitive(self, data: Any) -> Any:
        return {"data": data}

    def meta(self, meta: dict[str, Any]) -> dict[str, Any]:
        return dict(meta)


@register_serializer("noop")
class NoopSerializer(Serializer):
    """Returns transformed data without wrapping it or adding meta."""

    def collection(self, resource_key: str | None, data: list[Any]) -> Any:
        return data

    def item(self, resource_key: str | None, data: Any) -> Any:
        return data

    def null(self) -> Any:
        return None

    def meta(self, meta: dict[str, Any]) -> dict[str, Any]:
        return {}

    def paginator(self, paginator: Any) -> dict[str, Any]:
        return {}

    def cursor(self, cursor: Any) -> dict[str, Any]:
        return {}
