import pytest

from lexiform.services.noun import (
    IRREGULAR_PLURALS,
    IRREGULAR_SINGULARS,
    plural_rule,
    pluralize,
    singular_rule,
    singularize,
)


@pytest.mark.parametrize(
    "singular, plural",
    [
        ("post", "posts"),
        ("category", "categories"),
        ("person", "people"),
        ("child", "children"),
        ("quiz", "quizzes"),
        ("box", "boxes"),
        ("buzz", "buzzes"),
        ("church", "churches"),
        ("dish", "dishes"),
        ("wolf", "wolves"),
        ("safe", "saves"),
        ("fez", "fezzes"),
        ("day", "days"),
    ],
)
def test_pluralize(singular, plural):
    assert pluralize(singular) == plural


@pytest.mark.parametrize(
    "plural, singular",
    [
        ("posts", "post"),
        ("categories", "category"),
        ("people", "person"),
        ("boxes", "box"),
        ("churches", "church"),
        ("wolves", "wolf"),
        ("data", "datum"),
    ],
)
def test_singularize(plural, singular):
    assert singularize(plural) == singular


def test_singularize_leaves_unrecognized_words_alone():
    assert singularize("class") == "class"
    assert singularize("post") == "post"


def test_regular_rules_keep_caller_spelling():
    assert pluralize("Category") == "Categories"
    assert singularize("BlogPosts") == "BlogPost"


def test_irregulars_keep_leading_case():
    assert pluralize("Person") == "People"
    assert singularize("Children") == "Child"


def test_irregular_tables_are_symmetric():
    assert len(IRREGULAR_PLURALS) == len(IRREGULAR_SINGULARS)
    for singular, plural in IRREGULAR_PLURALS.items():
        assert IRREGULAR_SINGULARS[plural] == singular


def test_irregulars_round_trip_and_are_stable():
    for singular in IRREGULAR_PLURALS:
        plural = pluralize(singular)
        assert singularize(plural) == singular
        assert pluralize(singularize(plural)) == plural


def test_regular_round_trip_is_not_guaranteed():
    assert singularize(pluralize("quiz")) == "quizz"
    assert singularize(pluralize("bus")) == "buse"
    # -ves always comes back as -f
    assert singularize(pluralize("safe")) == "saf"


def test_empty_word():
    assert pluralize("") == "s"
    assert singularize("") == ""


def test_rule_names():
    assert plural_rule("person") == "irregular"
    assert plural_rule("quiz") == "single_z"
    assert plural_rule("category") == "consonant_y"
    assert plural_rule("safe") == "fe"
    assert plural_rule("wolf") == "f"
    assert plural_rule("post") == "default"
    assert singular_rule("categories") == "ies"
    assert singular_rule("class") == "unchanged"
