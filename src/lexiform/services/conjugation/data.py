"""Verb records and the known-verbs override table."""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Self

from pydantic import TypeAdapter, ValidationError

from lexiform.errors import KnownVerbsError
from lexiform.models import VerbRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReverseFields:
    """Field names produced by an action, keyed by preposition.

    ``in`` and ``for`` are keywords, hence the trailing underscores.
    """

    at: str | None = None
    by: str | None = None
    in_: str | None = None
    for_: str | None = None

    @classmethod
    def from_participle(cls, past_participle: str) -> Self:
        """publish -> published -> publishedAt / publishedBy / publishedIn / publishedFor."""
        return cls(
            at=f"{past_participle}At",
            by=f"{past_participle}By",
            in_=f"{past_participle}In",
            for_=f"{past_participle}For",
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary, skipping fields that are not set."""
        fields = {"at": self.at, "by": self.by, "in": self.in_, "for": self.for_}
        return {key: value for key, value in fields.items() if value is not None}


@dataclass(frozen=True, slots=True)
class VerbForms:
    """Conjugated forms of one action."""

    action: str
    actor: str
    act: str
    activity: str
    result: str
    reverse: ReverseFields
    inverse: str | None = None
    description: str | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        data = {
            "action": self.action,
            "actor": self.actor,
            "act": self.act,
            "activity": self.activity,
            "result": self.result,
            "reverse": self.reverse.to_dict(),
        }
        if self.inverse is not None:
            data["inverse"] = self.inverse
        if self.description is not None:
            data["description"] = self.description
        return data


# ============================================================================
# Built-in Verbs
# ============================================================================


DEFAULT_VERBS: dict[str, VerbForms] = {
    "create": VerbForms(
        action="create",
        actor="creator",
        act="creates",
        activity="creating",
        result="creation",
        reverse=ReverseFields(at="createdAt", by="createdBy", in_="createdIn", for_="createdFor"),
        inverse="delete",
    ),
    "update": VerbForms(
        action="update",
        actor="updater",
        act="updates",
        activity="updating",
        result="update",
        reverse=ReverseFields(at="updatedAt", by="updatedBy"),
    ),
    "delete": VerbForms(
        action="delete",
        actor="deleter",
        act="deletes",
        activity="deleting",
        result="deletion",
        reverse=ReverseFields(at="deletedAt", by="deletedBy"),
        inverse="create",
    ),
    "publish": VerbForms(
        action="publish",
        actor="publisher",
        act="publishes",
        activity="publishing",
        result="publication",
        reverse=ReverseFields(at="publishedAt", by="publishedBy"),
        inverse="unpublish",
    ),
    "archive": VerbForms(
        action="archive",
        actor="archiver",
        act="archives",
        activity="archiving",
        result="archive",
        reverse=ReverseFields(at="archivedAt", by="archivedBy"),
        inverse="unarchive",
    ),
}


# ============================================================================
# Known-Verbs Table
# ============================================================================


_RECORDS = TypeAdapter(dict[str, VerbRecord])


def _from_record(record: VerbRecord) -> VerbForms:
    reverse = record.reverse
    return VerbForms(
        action=record.action,
        actor=record.actor,
        act=record.act,
        activity=record.activity,
        result=record.result,
        reverse=ReverseFields(at=reverse.at, by=reverse.by, in_=reverse.in_, for_=reverse.for_),
        inverse=record.inverse,
        description=record.description,
    )


class KnownVerbs(Mapping[str, VerbForms]):
    """Read-only table of pre-registered verb records.

    A record found here is returned as-is by the conjugator; nothing in it
    is derived or adjusted. Keys are matched verbatim.
    """

    def __init__(self, verbs: Mapping[str, VerbForms] | None = None) -> None:
        self._verbs = MappingProxyType(dict(verbs or {}))

    def __getitem__(self, action: str) -> VerbForms:
        return self._verbs[action]

    def __iter__(self) -> Iterator[str]:
        return iter(self._verbs)

    def __len__(self) -> int:
        return len(self._verbs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._verbs)!r})"

    @classmethod
    def default(cls) -> Self:
        """The built-in table: create, update, delete, publish, archive."""
        return cls(DEFAULT_VERBS)

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Load a JSON object mapping action names to verb records.

        Raises:
            KnownVerbsError: If the file cannot be read or a record is invalid.
        """
        path = Path(path)
        try:
            records = _RECORDS.validate_json(path.read_bytes())
        except OSError as e:
            raise KnownVerbsError(f"Cannot read known verbs file {path}: {e}") from e
        except ValidationError as e:
            raise KnownVerbsError(f"Invalid known verbs file {path}: {e}") from e

        logger.info("Loaded %d known verbs from %s", len(records), path)
        return cls({action: _from_record(record) for action, record in records.items()})

    @classmethod
    def load(cls, path: str | Path | None = None) -> Self:
        """Built-in table, overlaid with the records in ``path`` if given."""
        known = cls.default()
        if path:
            known = known.merged(cls.from_file(path))
        return known

    def merged(self, other: Mapping[str, VerbForms]) -> Self:
        """New table with ``other``'s records taking precedence."""
        return type(self)({**self._verbs, **other})
