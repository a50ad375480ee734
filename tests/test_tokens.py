from lexiform.services.tokens import capitalize, is_vowel, preserve_case, split_camel_case


def test_is_vowel():
    assert is_vowel("a")
    assert is_vowel("E")
    assert not is_vowel("b")
    assert not is_vowel("y")


def test_empty_char_is_not_a_vowel():
    assert not is_vowel("")


def test_capitalize_only_touches_first_char():
    assert capitalize("blogPost") == "BlogPost"
    assert capitalize("") == ""


def test_preserve_case_follows_leading_letter():
    assert preserve_case("Person", "people") == "People"
    assert preserve_case("person", "people") == "people"
    # only the first character matters
    assert preserve_case("PERSON", "people") == "People"


def test_split_camel_case():
    assert split_camel_case("BlogPost") == ["Blog", "Post"]
    assert split_camel_case("Post") == ["Post"]
    assert split_camel_case("userProfileImage") == ["user", "Profile", "Image"]


def test_split_camel_case_keeps_acronyms_together():
    # boundaries are only lowercase -> uppercase
    assert split_camel_case("HTMLParser") == ["HTMLParser"]
    assert split_camel_case("userID") == ["user", "ID"]


def test_split_camel_case_empty():
    assert split_camel_case("") == [""]


def test_preserve_case_empty_original_capitalizes():
    assert preserve_case("", "people") == "People"
