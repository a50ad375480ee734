"""Type-name analysis: noun inference and cached type metadata.

A type name such as ``BlogPost`` is split into words and turned into the
naming conventions schema code needs: phrases (``blog post``/``blog posts``),
slugs (``blog-post``), audit fields (``createdAt``) and event names
(``BlogPost.created``).
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Self

from lexiform.services.noun import pluralize
from lexiform.services.tokens import split_camel_case

logger = logging.getLogger(__name__)

DEFAULT_ACTIONS: tuple[str, ...] = ("create", "update", "delete")
DEFAULT_EVENTS: tuple[str, ...] = ("created", "updated", "deleted")

_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True, slots=True)
class Noun:
    """Singular/plural phrases for a type, plus its default actions and events."""

    singular: str
    plural: str
    actions: tuple[str, ...] = DEFAULT_ACTIONS
    events: tuple[str, ...] = DEFAULT_EVENTS

    def to_dict(self) -> dict:
        return {
            "singular": self.singular,
            "plural": self.plural,
            "actions": list(self.actions),
            "events": list(self.events),
        }


@dataclass(frozen=True, slots=True)
class TypeMeta:
    """Naming conventions derived from one type name.

    Audit field names are the same for every type; only ``name``, the
    phrases, the slugs and the event names vary.
    """

    name: str
    singular: str
    plural: str
    slug: str
    slug_plural: str
    created: str
    updated: str
    deleted: str
    creator: str = "creator"
    created_at: str = "createdAt"
    created_by: str = "createdBy"
    updated_at: str = "updatedAt"
    updated_by: str = "updatedBy"
    actions: tuple[str, ...] = field(default=DEFAULT_ACTIONS)
    events: tuple[str, ...] = field(default=DEFAULT_EVENTS)

    def to_dict(self) -> dict:
        """Convert to the camelCase dictionary schema code consumes."""
        return {
            "name": self.name,
            "singular": self.singular,
            "plural": self.plural,
            "slug": self.slug,
            "slugPlural": self.slug_plural,
            "creator": self.creator,
            "createdAt": self.created_at,
            "createdBy": self.created_by,
            "updatedAt": self.updated_at,
            "updatedBy": self.updated_by,
            "created": self.created,
            "updated": self.updated,
            "deleted": self.deleted,
            "actions": list(self.actions),
            "events": list(self.events),
        }


def infer_noun(type_name: str) -> Noun:
    """Infer singular and plural phrases from a type name.

    Only the last word is pluralized:
        >>> infer_noun("BlogPost").plural
        'blog posts'
    """
    words = split_camel_case(type_name)
    singular = " ".join(words).lower()
    plural = " ".join([*words[:-1], pluralize(words[-1])]).lower()
    return Noun(singular=singular, plural=plural)


def create_type_meta(type_name: str) -> TypeMeta:
    """Build fresh (uncached) metadata for ``type_name``."""
    noun = infer_noun(type_name)
    return TypeMeta(
        name=type_name,
        singular=noun.singular,
        plural=noun.plural,
        slug=_WHITESPACE.sub("-", noun.singular),
        slug_plural=_WHITESPACE.sub("-", noun.plural),
        created=f"{type_name}.created",
        updated=f"{type_name}.updated",
        deleted=f"{type_name}.deleted",
        actions=noun.actions,
        events=noun.events,
    )


class TypeMetaCache:
    """Permanent memo of ``TypeMeta`` by type name.

    Entries are never evicted. Concurrent first lookups of one name may both
    compute it; ``dict.setdefault`` keeps a single winner and every caller
    gets that instance.
    """

    _instance: "TypeMetaCache | None" = None
    _instance_lock = threading.Lock()

    def __init__(self) -> None:
        self._entries: dict[str, TypeMeta] = {}

    @classmethod
    def get_instance(cls) -> Self:
        """Get or create the process-wide cache."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def get(self, type_name: str) -> TypeMeta:
        meta = self._entries.get(type_name)
        if meta is None:
            logger.debug("TypeMeta cache miss for %r", type_name)
            meta = self._entries.setdefault(type_name, create_type_meta(type_name))
        return meta

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def get_type_meta(type_name: str, cache: TypeMetaCache | None = None) -> TypeMeta:
    """Cached ``TypeMeta`` for ``type_name`` (process-wide cache by default)."""
    if cache is None:
        cache = TypeMetaCache.get_instance()
    return cache.get(type_name)


def Type(name: str, cache: TypeMetaCache | None = None) -> TypeMeta:  # noqa: N802
    """Type accessor used by schema code: ``Type("Post").plural == "posts"``."""
    return get_type_meta(name, cache)
