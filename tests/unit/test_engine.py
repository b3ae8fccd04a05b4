"""Unit tests for the default transform engine."""

from types import SimpleNamespace

import pytest

from responder.core.exceptions import TransformError
from responder.pagination import Cursor, Paginator, PaginatorAdapter
from responder.resources import Collection, Item, NullResource, Primitive
from responder.serializers import ArraySerializer, NoopSerializer, SuccessSerializer
from responder.transform.engine import TransformEngine, build_fieldsets, build_include_tree
from responder.transformers import Transformer


class AuthorTransformer(Transformer):
    relations = ["avatar"]
    defaults = ["avatar"]

    def transform(self, author):
        return {"id": author["id"], "name": author["name"]}


class CommentTransformer(Transformer):
    def transform(self, comment):
        return {"id": comment["id"]}


class PostTransformer(Transformer):
    relations = {"author": AuthorTransformer, "comments": CommentTransformer}

    def transform(self, post):
        return {"id": post["id"], "title": post["title"]}

    def include_comments(self, post, params):
        limit = int(params.get("limit", [len(post["comments"])])[0])
        return self.collection(post["comments"][:limit], CommentTransformer())


class DigestTransformer(PostTransformer):
    relations = ["author"]
    defaults = ["comments:limit(1)"]

    def transform(self, post):
        return {"id": post["id"]}


class BrokenTransformer(Transformer):
    def include_bad(self, data, params):
        return {"not": "a resource"}


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def post():
    return {
        "id": 1,
        "title": "Hello",
        "secret": "hidden",
        "author": {"id": 7, "name": "Ann", "avatar": "ann.png"},
        "comments": [{"id": 10, "body": "first"}, {"id": 11, "body": "second"}],
    }


@pytest.fixture
def engine():
    return TransformEngine()


def options(includes=(), excludes=(), fieldsets=()):
    return {"includes": list(includes), "excludes": list(excludes), "fieldsets": list(fieldsets)}


# ============================================================================
# Tree Building Tests
# ============================================================================


class TestIncludeTree:
    """Tests for build_include_tree and build_fieldsets."""

    def test_dotted_paths_nest(self):
        tree = build_include_tree(["author.avatar", "comments:limit(2)"])
        assert list(tree) == ["author", "comments"]
        assert list(tree["author"].children) == ["avatar"]
        assert tree["comments"].params == {"limit": ["2"]}

    def test_params_attach_to_last_segment(self):
        tree = build_include_tree(["author.posts:limit(1)"])
        assert tree["author"].params == {}
        assert tree["author"].children["posts"].params == {"limit": ["1"]}

    def test_fieldsets_group_by_path(self):
        assert build_fieldsets(["id", "title", "author.name"]) == {
            "": {"id", "title"},
            "author": {"name"},
        }


# ============================================================================
# Transformation Tests
# ============================================================================


class TestTransformEngine:
    """Tests for TransformEngine.make."""

    def test_item_without_transformer(self, engine):
        assert engine.make(Item({"id": 1}), SuccessSerializer(), options()) == {"data": {"id": 1}}

    def test_transformer_output_is_serialized(self, engine, post):
        result = engine.make(Item(post, PostTransformer()), SuccessSerializer(), options())
        assert result == {"data": {"id": 1, "title": "Hello"}}

    def test_callable_transformer(self, engine, post):
        result = engine.make(Item(post, lambda p: {"id": p["id"]}), SuccessSerializer(), options())
        assert result == {"data": {"id": 1}}

    def test_relation_included_with_mapped_transformer_and_its_defaults(self, engine, post):
        result = engine.make(Item(post, PostTransformer()), SuccessSerializer(), options(["author"]))
        assert result["data"]["author"] == {"id": 7, "name": "Ann", "avatar": "ann.png"}

    def test_include_method_receives_params(self, engine, post):
        result = engine.make(Item(post, PostTransformer()), SuccessSerializer(), options(["comments:limit(1)"]))
        assert result["data"]["comments"] == [{"id": 10}]

    def test_default_with_params_goes_through_include_method(self, engine, post):
        result = engine.make(Item(post, DigestTransformer()), SuccessSerializer(), options())
        assert result == {"data": {"id": 1, "comments": [{"id": 10}]}}

    def test_nested_default_can_be_excluded(self, engine, post):
        result = engine.make(
            Item(post, PostTransformer()),
            SuccessSerializer(),
            options(["author"], excludes=["author.avatar"]),
        )
        assert result["data"]["author"] == {"id": 7, "name": "Ann"}

    def test_excluded_relation_is_not_included(self, engine, post):
        result = engine.make(Item(post, PostTransformer()), SuccessSerializer(), options(["author"], ["author"]))
        assert "author" not in result["data"]

    def test_undeclared_relation_is_ignored(self, engine, post):
        result = engine.make(Item(post, PostTransformer()), SuccessSerializer(), options(["secret"]))
        assert result == {"data": {"id": 1, "title": "Hello"}}

    def test_fieldsets_filter_fields_but_keep_includes(self, engine, post):
        result = engine.make(
            Item(post, PostTransformer()),
            SuccessSerializer(),
            options(["author"], fieldsets=["title", "author.name"]),
        )
        assert result == {"data": {"title": "Hello", "author": {"name": "Ann", "avatar": "ann.png"}}}

    def test_relations_read_from_object_attributes(self, engine):
        data = SimpleNamespace(id=1, owner=SimpleNamespace(id=2))
        result = engine.make(Item(data, lambda d: {"id": d.id}), SuccessSerializer(), options(["owner"]))
        assert result["data"]["owner"] == {"id": 2}

    def test_missing_relation_is_none(self, engine):
        result = engine.make(Item({"id": 1}), SuccessSerializer(), options(["owner"]))
        assert result == {"data": {"id": 1, "owner": None}}

    def test_collection_with_resource_key(self, engine, post):
        result = engine.make(Collection([post], PostTransformer(), "posts"), ArraySerializer(), options())
        assert result == {"posts": [{"id": 1, "title": "Hello"}]}

    def test_null_and_primitive(self, engine):
        assert engine.make(NullResource(), SuccessSerializer(), options()) == {"data": None}
        assert engine.make(Primitive(5), SuccessSerializer(), options()) == {"data": 5}

    def test_primitive_transformer_applies(self, engine):
        assert engine.make(Primitive(5, lambda v: v * 2), NoopSerializer(), options()) == 10

    def test_missing_serializer_defaults_to_success(self, engine):
        assert engine.make(Item({"id": 1}), None, options()) == {"data": {"id": 1}}


class TestSections:
    """Tests for meta and pagination merging."""

    def test_meta_and_paginator_are_merged(self, engine):
        resource = Collection([{"id": 1}])
        resource.set_paginator(PaginatorAdapter(Paginator([{"id": 1}], total=1, per_page=10)))
        resource.set_meta({"generated": "now"})

        result = engine.make(resource, SuccessSerializer(), options())

        assert result["data"] == [{"id": 1}]
        assert result["generated"] == "now"
        assert result["pagination"]["total"] == 1

    def test_cursor_is_merged(self, engine):
        resource = Collection([]).set_cursor(Cursor(1, None, 2, 0))
        result = engine.make(resource, SuccessSerializer(), options())
        assert result == {"data": [], "cursor": {"current": 1, "previous": None, "next": 2, "count": 0}}

    def test_noop_serializer_returns_bare_list(self, engine):
        resource = Collection([{"id": 1}]).set_meta({"ignored": True})
        assert engine.make(resource, NoopSerializer(), options()) == [{"id": 1}]

    def test_meta_on_non_mapping_output_raises(self, engine):
        resource = Item({"id": 1}, lambda d: "flat").set_meta({"a": 1})
        with pytest.raises(TransformError):
            engine.make(resource, ArraySerializer(), options())


class TestEngineErrors:
    """Tests for engine failures."""

    def test_recursion_limit(self, post):
        engine = TransformEngine(recursion_limit=1)
        with pytest.raises(TransformError) as exc_info:
            engine.make(Item(post, PostTransformer()), SuccessSerializer(), options(["author"]))

        assert exc_info.value.context["relation"] == "author.avatar"

    def test_invalid_recursion_limit(self):
        with pytest.raises(ValueError):
            TransformEngine(recursion_limit=0)

    def test_include_method_must_return_resource(self, engine):
        with pytest.raises(TransformError):
            engine.make(Item({}, BrokenTransformer()), SuccessSerializer(), options(["bad"]))

    def test_invalid_transformer(self, engine):
        with pytest.raises(TransformError):
            engine.make(Item({}, 42), SuccessSerializer(), options())
