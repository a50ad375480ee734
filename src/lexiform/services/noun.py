"""English noun pluralization and singularization.

Rules are matched against the lowercased word, but regular-rule output is
built from the caller's own spelling, so ``Category`` becomes
``Categories``. Irregular-table hits keep only the case of the leading
letter (``Person`` -> ``People``).

The two directions are not perfect inverses. Every irregular pair round
trips, but regular nouns with ambiguous endings may not: ``quiz`` ->
``quizzes`` -> ``quizz`` and ``bus`` -> ``buses`` -> ``buse``.
"""

from .rules import Rule, apply_rules, ends_with_consonant_y, first_match
from .tokens import preserve_case

# singular -> plural
IRREGULAR_PLURALS: dict[str, str] = {
    "person": "people",
    "child": "children",
    "man": "men",
    "woman": "women",
    "foot": "feet",
    "tooth": "teeth",
    "goose": "geese",
    "mouse": "mice",
    "ox": "oxen",
    "leaf": "leaves",
    "life": "lives",
    "knife": "knives",
    "wife": "wives",
    "half": "halves",
    "self": "selves",
    "calf": "calves",
    "analysis": "analyses",
    "crisis": "crises",
    "thesis": "theses",
    "datum": "data",
    "medium": "media",
    "criterion": "criteria",
    "phenomenon": "phenomena",
}

# plural -> singular
IRREGULAR_SINGULARS: dict[str, str] = {v: k for k, v in IRREGULAR_PLURALS.items()}


def _ends(*suffixes: str):
    return lambda w: w.lower().endswith(suffixes)


PLURAL_RULES = (
    Rule(
        "irregular",
        lambda w: w.lower() in IRREGULAR_PLURALS,
        lambda w: preserve_case(w, IRREGULAR_PLURALS[w.lower()]),
    ),
    Rule("consonant_y", lambda w: ends_with_consonant_y(w.lower()), lambda w: w[:-1] + "ies"),
    # quiz -> quizzes, fez -> fezzes
    Rule("single_z", lambda w: _ends("z")(w) and not _ends("zz")(w), lambda w: w + "zes"),
    Rule("sibilant", _ends("s", "x", "zz", "ch", "sh"), lambda w: w + "es"),
    Rule("f", _ends("f"), lambda w: w[:-1] + "ves"),
    Rule("fe", _ends("fe"), lambda w: w[:-2] + "ves"),
)

SINGULAR_RULES = (
    Rule(
        "irregular",
        lambda w: w.lower() in IRREGULAR_SINGULARS,
        lambda w: preserve_case(w, IRREGULAR_SINGULARS[w.lower()]),
    ),
    Rule("ies", _ends("ies"), lambda w: w[:-3] + "y"),
    Rule("ves", _ends("ves"), lambda w: w[:-3] + "f"),
    Rule("sibilant_es", _ends("sses", "xes", "zes", "ches", "shes"), lambda w: w[:-2]),
    Rule("s", lambda w: _ends("s")(w) and not _ends("ss")(w), lambda w: w[:-1]),
)


def pluralize(singular: str) -> str:
    """Pluralize a single noun.

    Example:
        >>> pluralize("post"), pluralize("category"), pluralize("person")
        ('posts', 'categories', 'people')
    """
    return apply_rules(singular, PLURAL_RULES, lambda w: w + "s")


def singularize(plural: str) -> str:
    """Singularize a single noun; unrecognized words come back unchanged.

    Example:
        >>> singularize("posts"), singularize("categories"), singularize("people")
        ('post', 'category', 'person')
    """
    return apply_rules(plural, SINGULAR_RULES, lambda w: w)


def plural_rule(singular: str) -> str:
    """Name of the rule ``pluralize`` applies to ``singular``."""
    return first_match(singular, PLURAL_RULES) or "default"


def singular_rule(plural: str) -> str:
    """Name of the rule ``singularize`` applies to ``plural``."""
    return first_match(plural, SINGULAR_RULES) or "unchanged"
