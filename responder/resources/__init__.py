"""Resources and the factory that wraps raw data into them."""

from responder.resources.factory import ResourceFactory
from responder.resources.resource import Collection, Item, NullResource, Primitive, Resource

__all__ = [
    "Resource",
    "Item",
    "Collection",
    "Primitive",
    "NullResource",
    "ResourceFactory",
]
