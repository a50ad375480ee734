"""lexiform services module."""

from .analysis import (
    Noun,
    Type,
    TypeMeta,
    TypeMetaCache,
    create_type_meta,
    get_type_meta,
    infer_noun,
)
from .conjugation import (
    Conjugator,
    KnownVerbs,
    ReverseFields,
    VerbForms,
    conjugate,
    get_verb_fields,
)
from .noun import (
    pluralize,
    singularize,
)
from .tokens import (
    capitalize,
    is_vowel,
    preserve_case,
    split_camel_case,
)
from .verb import (
    VerbForm,
    derive,
    should_double_consonant,
    to_actor,
    to_gerund,
    to_past_participle,
    to_present,
    to_result,
)

__all__ = [
    # Type analysis
    "Noun",
    "Type",
    "TypeMeta",
    "TypeMetaCache",
    "create_type_meta",
    "get_type_meta",
    "infer_noun",
    # Conjugation
    "Conjugator",
    "KnownVerbs",
    "ReverseFields",
    "VerbForms",
    "conjugate",
    "get_verb_fields",
    # Nouns
    "pluralize",
    "singularize",
    # Tokens
    "capitalize",
    "is_vowel",
    "preserve_case",
    "split_camel_case",
    # Verb forms
    "VerbForm",
    "derive",
    "should_double_consonant",
    "to_actor",
    "to_gerund",
    "to_past_participle",
    "to_present",
    "to_result",
]
