"""Verb conjugation: known-verbs lookup first, derivation otherwise."""

from functools import lru_cache
from typing import Self

from lexiform.services.verb import (
    to_actor,
    to_gerund,
    to_past_participle,
    to_present,
    to_result,
)

from .data import KnownVerbs, ReverseFields, VerbForms


class Conjugator:
    """Builds ``VerbForms`` for any action name.

    The known-verbs table is injected so callers (and tests) control which
    actions are overridden.
    """

    def __init__(self, known_verbs: KnownVerbs | None = None) -> None:
        self._known_verbs = KnownVerbs.default() if known_verbs is None else known_verbs

    @classmethod
    @lru_cache(maxsize=1)
    def get_instance(cls) -> Self:
        """Get or create the process-wide conjugator over the built-in table."""
        return cls()

    @property
    def known_verbs(self) -> KnownVerbs:
        return self._known_verbs

    def conjugate(self, action: str) -> VerbForms:
        """Conjugate ``action``.

        Example:
            >>> Conjugator().conjugate("approve").actor
            'approver'

        A known verb is returned exactly as registered. Anything else,
        including nonsense tokens, is lowercased and derived mechanically.
        """
        if action in self._known_verbs:
            return self._known_verbs[action]

        base = action.lower()
        return VerbForms(
            action=base,
            actor=to_actor(base),
            act=to_present(base),
            activity=to_gerund(base),
            result=to_result(base),
            reverse=ReverseFields.from_participle(to_past_participle(base)),
        )

    def get_verb_fields(self, action: str) -> dict[str, str]:
        """Reverse field names of a registered action, or ``{}``.

        Only the known-verbs table is consulted; unregistered actions are
        not derived.
        """
        verb = self._known_verbs.get(action)
        if verb is None:
            return {}
        return verb.reverse.to_dict()


def conjugate(action: str) -> VerbForms:
    """Conjugate with the process-wide conjugator."""
    return Conjugator.get_instance().conjugate(action)


def get_verb_fields(action: str) -> dict[str, str]:
    """Reverse fields from the built-in known-verbs table."""
    return Conjugator.get_instance().get_verb_fields(action)
