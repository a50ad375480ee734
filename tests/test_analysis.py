import dataclasses
from concurrent.futures import ThreadPoolExecutor

import pytest

from lexiform.services.analysis import (
    Type,
    TypeMetaCache,
    create_type_meta,
    get_type_meta,
    infer_noun,
)


def test_infer_noun_blog_post():
    noun = infer_noun("BlogPost")
    assert noun.singular == "blog post"
    assert noun.plural == "blog posts"
    assert noun.actions == ("create", "update", "delete")
    assert noun.events == ("created", "updated", "deleted")


def test_infer_noun_pluralizes_last_word_only():
    assert infer_noun("Category").plural == "categories"
    assert infer_noun("UserPerson").plural == "user people"
    assert infer_noun("CategoryTag").plural == "category tags"


def test_create_type_meta():
    meta = create_type_meta("BlogPost")
    assert meta.name == "BlogPost"
    assert meta.singular == "blog post"
    assert meta.plural == "blog posts"
    assert meta.slug == "blog-post"
    assert meta.slug_plural == "blog-posts"
    assert meta.creator == "creator"
    assert meta.created_at == "createdAt"
    assert meta.created_by == "createdBy"
    assert meta.updated_at == "updatedAt"
    assert meta.updated_by == "updatedBy"
    assert meta.created == "BlogPost.created"
    assert meta.updated == "BlogPost.updated"
    assert meta.deleted == "BlogPost.deleted"


def test_type_meta_to_dict_uses_camel_case():
    data = create_type_meta("BlogPost").to_dict()
    assert data["slugPlural"] == "blog-posts"
    assert data["createdAt"] == "createdAt"
    assert data["updatedBy"] == "updatedBy"
    assert data["created"] == "BlogPost.created"


def test_create_type_meta_is_uncached():
    assert create_type_meta("Post") is not create_type_meta("Post")


def test_cache_returns_same_instance(type_cache):
    first = type_cache.get("Post")
    second = type_cache.get("Post")
    assert first is second

    other = type_cache.get("Comment")
    assert other is not first
    assert first.name == "Post"
    assert first.plural == "posts"
    assert len(type_cache) == 2
    assert "Comment" in type_cache


def test_caches_are_isolated(type_cache):
    type_cache.get("Post")
    assert "Post" not in TypeMetaCache()


def test_get_type_meta_uses_given_cache(type_cache):
    meta = get_type_meta("Tag", type_cache)
    assert "Tag" in type_cache
    assert Type("Tag", type_cache) is meta


def test_type_uses_process_wide_cache():
    assert Type("Invoice") is Type("Invoice")
    assert "Invoice" in TypeMetaCache.get_instance()


def test_concurrent_first_lookups_share_one_instance(type_cache):
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(type_cache.get, ["Order"] * 32))
    assert all(meta is results[0] for meta in results)
    assert len(type_cache) == 1


def test_type_meta_is_frozen(type_cache):
    meta = type_cache.get("Post")
    with pytest.raises(dataclasses.FrozenInstanceError):
        meta.plural = "postings"


def test_concurrent_get_instance_builds_one_cache(monkeypatch):
    monkeypatch.setattr(TypeMetaCache, "_instance", None)
    with ThreadPoolExecutor(max_workers=8) as pool:
        caches = list(pool.map(lambda _: TypeMetaCache.get_instance(), range(32)))
    assert all(cache is caches[0] for cache in caches)
