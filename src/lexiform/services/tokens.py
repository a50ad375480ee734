"""Character-level helpers shared by the noun and verb derivers."""

import re

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")


def is_vowel(char: str) -> bool:
    """Check if a character is one of a, e, i, o, u (any case)."""
    return bool(char) and char.lower() in "aeiou"


def capitalize(s: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    return s[:1].upper() + s[1:]


def preserve_case(original: str, replacement: str) -> str:
    """Carry the leading-letter case of ``original`` over to ``replacement``.

    Irregular tables are stored lowercase, so ``Person`` maps to ``People``
    while ``person`` maps to ``people``. Only the first character is
    considered.
    """
    first = original[:1]
    if first == first.upper():
        return capitalize(replacement)
    return replacement


def split_camel_case(s: str) -> list[str]:
    """Split a camelCase/PascalCase token into its words.

    Example:
        >>> split_camel_case("BlogPost")
        ['Blog', 'Post']
    """
    return _CAMEL_BOUNDARY.sub(r"\1 \2", s).split(" ")
