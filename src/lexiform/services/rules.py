"""Ordered suffix rules, evaluated first-match-wins.

Every inflection in this package is a short list of ``Rule`` objects. The
list order is the precedence order, so ``ate`` is checked before the
generic ``e`` ending, a table lookup before any suffix rule, and so on.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .tokens import is_vowel


@dataclass(frozen=True, slots=True)
class Rule:
    """A single (predicate, transform) pair."""

    name: str
    matches: Callable[[str], bool]
    apply: Callable[[str], str]


def apply_rules(word: str, rules: Sequence[Rule], default: Callable[[str], str]) -> str:
    """Run ``word`` through ``rules`` and return the first match's output.

    Args:
        word: The token to transform.
        rules: Rules in precedence order.
        default: Transform used when no rule matches.

    Returns:
        The transformed token.
    """
    for rule in rules:
        if rule.matches(word):
            return rule.apply(word)
    return default(word)


def first_match(word: str, rules: Sequence[Rule]) -> str | None:
    """Name of the rule that would handle ``word``, or None for the default."""
    for rule in rules:
        if rule.matches(word):
            return rule.name
    return None


def ends_with_consonant_y(word: str) -> bool:
    """True for words like ``copy`` or ``category`` (but not ``day``)."""
    return word.endswith("y") and not is_vowel(word[-2:-1])
