"""English verb form derivation.

Derives the spellings a naming convention needs from a base verb:
- past participle (publish -> published), used for reverse fields
- actor noun (publish -> publisher)
- present tense, 3rd person (publish -> publishes)
- gerund (publish -> publishing)
- result noun (create -> creation)

This is a heuristic over common suffix patterns, not a dictionary. The
consonant-doubling decision in particular is driven by a closed list of
known verbs: longer words outside the list never double (``edit`` ->
``edited``, but also ``regret`` -> ``regreted``).
"""

from enum import StrEnum, auto

from .rules import Rule, apply_rules, ends_with_consonant_y
from .tokens import is_vowel


class VerbForm(StrEnum):
    """Derivable verb forms."""

    PAST_PARTICIPLE = auto()  # created
    ACTOR = auto()            # publisher
    PRESENT = auto()          # creates
    GERUND = auto()           # creating
    RESULT = auto()           # creation


# Verbs whose final consonant doubles before a vowel suffix (stop -> stopped).
# Matched exactly or as a suffix, so "resubmit" doubles via "submit".
DOUBLING_VERBS: tuple[str, ...] = (
    "submit", "commit", "permit", "omit", "admit", "emit", "transmit",
    "refer", "prefer", "defer", "occur", "recur", "begin",
    "stop", "drop", "shop", "plan", "scan", "ban", "run", "gun", "stun",
    "cut", "shut", "hit", "sit", "fit", "spit", "quit", "knit",
    "get", "set", "pet", "wet", "bet", "let", "put",
    "drag", "brag", "flag", "tag", "bag", "nag", "wag",
    "hug", "bug", "mug", "tug", "rub", "scrub", "grab", "stab", "rob", "sob", "throb",
    "nod", "prod", "plod", "plot", "rot", "blot", "spot", "knot", "trot",
    "chat", "pat", "bat", "mat", "rat",
    "slap", "clap", "flap", "tap", "wrap", "snap", "trap", "cap", "map", "nap", "zap",
    "tip", "sip", "dip", "rip", "zip", "slip", "trip", "drip", "chip", "clip", "flip",
    "grip", "ship", "skip", "whip", "strip", "equip",
    "hop", "pop", "mop", "cop", "chop", "crop", "prop", "flop",
    "swim", "trim", "slim", "skim", "dim", "rim", "brim", "grim", "hem", "stem",
    "jam", "cram", "ram", "slam", "dam", "ham", "scam", "spam", "tram",
    "hum", "drum", "strum", "sum", "gum", "chum", "plum",
)


def should_double_consonant(verb: str) -> bool:
    """Check whether the final consonant doubles (CVC pattern).

    Short words (three letters or fewer) that end vowel-consonant always
    double. Longer words double only if they appear in ``DOUBLING_VERBS``.
    """
    if len(verb) < 2:
        return False

    last, second_last = verb[-1], verb[-2]

    # w, x and y never double
    if last in "wxy":
        return False

    if is_vowel(last) or not is_vowel(second_last):
        return False

    if len(verb) <= 3:
        return True

    return verb.endswith(DOUBLING_VERBS)


def _suffix_rules(e_suffix: str, y_suffix: str, suffix: str) -> tuple[Rule, ...]:
    """Rule chain shared by the past participle and actor noun."""
    return (
        Rule("silent_e", lambda v: v.endswith("e"), lambda v: v + e_suffix),
        Rule("consonant_y", ends_with_consonant_y, lambda v: v[:-1] + y_suffix),
        Rule("double_consonant", should_double_consonant, lambda v: v + v[-1] + suffix),
    )


PAST_PARTICIPLE_RULES = _suffix_rules("d", "ied", "ed")

ACTOR_RULES = _suffix_rules("r", "ier", "er")

PRESENT_RULES = (
    Rule("consonant_y", ends_with_consonant_y, lambda v: v[:-1] + "ies"),
    Rule("sibilant", lambda v: v.endswith(("s", "x", "z", "ch", "sh")), lambda v: v + "es"),
)

GERUND_RULES = (
    Rule("ie", lambda v: v.endswith("ie"), lambda v: v[:-2] + "ying"),
    Rule("silent_e", lambda v: v.endswith("e") and not v.endswith("ee"), lambda v: v[:-1] + "ing"),
    Rule("double_consonant", should_double_consonant, lambda v: v + v[-1] + "ing"),
)

# -ate, -ify and -ize are special cases of the -e rule and must precede it.
RESULT_RULES = (
    Rule("ate", lambda v: v.endswith("ate"), lambda v: v[:-1] + "ion"),
    Rule("ify", lambda v: v.endswith("ify"), lambda v: v[:-1] + "ication"),
    Rule("ize", lambda v: v.endswith("ize"), lambda v: v[:-1] + "ation"),
    Rule("silent_e", lambda v: v.endswith("e"), lambda v: v[:-1] + "ion"),
)


def to_past_participle(verb: str) -> str:
    """create -> created, copy -> copied, stop -> stopped, publish -> published."""
    return apply_rules(verb, PAST_PARTICIPLE_RULES, lambda v: v + "ed")


def to_actor(verb: str) -> str:
    """publish -> publisher, copy -> copier, run -> runner, create -> creater."""
    return apply_rules(verb, ACTOR_RULES, lambda v: v + "er")


def to_present(verb: str) -> str:
    """create -> creates, copy -> copies, publish -> publishes."""
    return apply_rules(verb, PRESENT_RULES, lambda v: v + "s")


def to_gerund(verb: str) -> str:
    """tie -> tying, create -> creating, see -> seeing, stop -> stopping."""
    return apply_rules(verb, GERUND_RULES, lambda v: v + "ing")


def to_result(verb: str) -> str:
    """validate -> validation, verify -> verification, connect -> connection.

    Not always right (``publish`` gives ``publishion``); irregular results
    belong in the known-verbs table.
    """
    return apply_rules(verb, RESULT_RULES, lambda v: v + "ion")


def derive(verb: str, form: VerbForm | str) -> str:
    """Derive a single form of ``verb``.

    Args:
        verb: Base form, used as given (no lowercasing).
        form: A ``VerbForm`` or its string value.

    Returns:
        The derived spelling.

    Raises:
        ValueError: If ``form`` is not a known verb form.
    """
    match VerbForm(form):
        case VerbForm.PAST_PARTICIPLE:
            return to_past_participle(verb)
        case VerbForm.ACTOR:
            return to_actor(verb)
        case VerbForm.PRESENT:
            return to_present(verb)
        case VerbForm.GERUND:
            return to_gerund(verb)
        case VerbForm.RESULT:
            return to_result(verb)
