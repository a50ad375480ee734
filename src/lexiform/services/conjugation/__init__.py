"""
Conjugation service package - turns action names into verb records.

This package provides:
- Verb records (VerbForms, ReverseFields)
- The known-verbs override table (KnownVerbs, DEFAULT_VERBS)
- The conjugator (Conjugator, conjugate, get_verb_fields)

Usage:
    from lexiform.services.conjugation import Conjugator, KnownVerbs
"""

from .data import (
    DEFAULT_VERBS,
    KnownVerbs,
    ReverseFields,
    VerbForms,
)

from .conjugator import (
    Conjugator,
    conjugate,
    get_verb_fields,
)

__all__ = [
    # Data
    "DEFAULT_VERBS",
    "KnownVerbs",
    "ReverseFields",
    "VerbForms",
    # Conjugator
    "Conjugator",
    "conjugate",
    "get_verb_fields",
]
