"""Unit tests for ResourceFactory and resources."""

from dataclasses import dataclass

import pytest

from responder.pagination import Cursor, CursorPaginator, Paginator, PaginatorAdapter
from responder.resources import Collection, Item, NullResource, Primitive, ResourceFactory
from responder.transformers import Transformer


class UserTransformer(Transformer):
    def transform(self, user):
        return {"id": user.id}


@dataclass
class User:
    id: int

    def transformer(self):
        return UserTransformer


@dataclass
class Part:
    id: int
    transformer: str


@pytest.fixture
def factory():
    return ResourceFactory()


class TestResourceFactory:
    """Tests for picking the resource type."""

    def test_none_makes_null_resource(self, factory):
        resource = factory.make()
        assert isinstance(resource, NullResource)
        assert resource.data is None

    @pytest.mark.parametrize("value", ["text", 3, 2.5, True, b"raw"])
    def test_scalars_make_primitives(self, factory, value):
        assert isinstance(factory.make(value), Primitive)

    def test_mapping_makes_item(self, factory):
        resource = factory.make({"id": 1}, None, "user")
        assert isinstance(resource, Item)
        assert resource.resource_key == "user"

    def test_object_makes_item(self, factory):
        assert isinstance(factory.make(object()), Item)

    def test_list_makes_collection_keeping_the_container(self, factory):
        data = [{"id": 1}]
        resource = factory.make(data)
        assert isinstance(resource, Collection)
        assert resource.data is data

    def test_generator_is_materialized(self, factory):
        resource = factory.make({"id": i} for i in range(3))
        assert isinstance(resource, Collection)
        assert resource.data == [{"id": 0}, {"id": 1}, {"id": 2}]

    def test_paginator_makes_collection_of_page_items(self, factory):
        items = [1, 2]
        resource = factory.make(Paginator(items, total=4, per_page=2))
        assert isinstance(resource, Collection)
        assert resource.data is items

    def test_cursor_paginator_makes_collection_of_page_items(self, factory):
        resource = factory.make(CursorPaginator(["a"], 1))
        assert isinstance(resource, Collection)
        assert resource.data == ["a"]

    def test_factory_does_not_bind_pagination(self, factory):
        resource = factory.make(Paginator([1], total=1, per_page=1))
        assert resource.paginator is None
        assert resource.cursor is None

    def test_transformer_class_is_instantiated(self, factory):
        resource = factory.make({"id": 1}, UserTransformer)
        assert isinstance(resource.transformer, UserTransformer)

    def test_callable_transformer_passes_through(self, factory):
        def transformer(data):
            return data

        assert factory.make({"id": 1}, transformer).transformer is transformer

    def test_transformer_inferred_from_data(self, factory):
        assert isinstance(factory.make(User(1)).transformer, UserTransformer)

    def test_transformer_inferred_from_first_collection_item(self, factory):
        assert isinstance(factory.make([User(1), User(2)]).transformer, UserTransformer)

    def test_transformer_field_is_not_a_declaration(self, factory):
        resource = factory.make(Part(1, "T-800"))

        assert isinstance(resource, Item)
        assert resource.transformer is None

    def test_existing_resource_is_returned(self, factory):
        resource = Item({"id": 1})
        assert factory.make(resource, None, "user") is resource
        assert resource.resource_key == "user"


class TestResource:
    """Tests for resource bindings."""

    def test_meta_merges(self):
        resource = Item({}).set_meta({"a": 1}).set_meta({"a": 2, "b": 3})
        assert resource.meta == {"a": 2, "b": 3}

    def test_cursor_and_paginator_are_exclusive(self):
        adapter = PaginatorAdapter(Paginator([], total=0, per_page=1))
        resource = Collection([])

        resource.set_paginator(adapter).set_cursor(Cursor(1))
        assert resource.paginator is None
        assert resource.cursor == Cursor(1)

        resource.set_paginator(adapter)
        assert resource.cursor is None
        assert resource.paginator is adapter

    def test_null_resource_ignores_data(self):
        assert NullResource("ignored").data is None
