"""lexiform - English noun and verb inference for naming conventions.

    >>> from lexiform import Type, conjugate, pluralize
    >>> pluralize("category")
    'categories'
    >>> conjugate("publish").reverse.at
    'publishedAt'
    >>> Type("BlogPost").slug
    'blog-post'
"""

__version__ = "0.1.0"

from .errors import ConfigError, KnownVerbsError, LexiformError
from .services import (
    Conjugator,
    KnownVerbs,
    Noun,
    ReverseFields,
    Type,
    TypeMeta,
    TypeMetaCache,
    VerbForm,
    VerbForms,
    conjugate,
    create_type_meta,
    derive,
    get_type_meta,
    get_verb_fields,
    infer_noun,
    pluralize,
    singularize,
    split_camel_case,
)

__all__ = [
    "__version__",
    "ConfigError",
    "KnownVerbsError",
    "LexiformError",
    "Conjugator",
    "KnownVerbs",
    "Noun",
    "ReverseFields",
    "Type",
    "TypeMeta",
    "TypeMetaCache",
    "VerbForm",
    "VerbForms",
    "conjugate",
    "create_type_meta",
    "derive",
    "get_type_meta",
    "get_verb_fields",
    "infer_noun",
    "pluralize",
    "singularize",
    "split_camel_case",
]
