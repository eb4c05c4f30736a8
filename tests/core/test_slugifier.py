import copy
from unittest import mock

import pytest

import limace
from limace.core.slugifier import DEFAULT_SEPARATOR, Slugifier, SlugWriter

TRANSLITERATE_PATH = "limace.core.slugifier.transliterate_char"

SAMPLE_INPUTS = [
    "",
    " ",
    "Hello, World!",
    "Crème brûlée!",
    "Hello---World!!",
    "...Hello World...",
    "Rust 2024",
    "  Leading and trailing  ",
    "already-a-slug",
    "already_a_slug",
    "MiXeD CaSe 42 Things",
    "tabs\tand\nnewlines",
    "Straße",
    "北京",
    "!!!",
    "a",
    "--",
    "__",
]


@pytest.mark.parametrize("text, separator, expected", [
    ("Hello, World!", "-", "hello-world"),
    ("Hello, World!", "_", "hello_world"),
    ("Crème brûlée!", "-", "creme-brulee"),
    ("Hello---World!!", "-", "hello-world"),
    ("...Hello World...", "-", "hello-world"),
    ("", "-", ""),
    ("Rust 2024", "-", "rust-2024"),
])
def test_slugify_scenarios(text, separator, expected):
    assert Slugifier(separator).slugify(text) == expected


def test_default_separator_is_hyphen():
    assert DEFAULT_SEPARATOR == "-"
    assert Slugifier.default().separator == "-"
    assert Slugifier().separator == "-"


def test_non_ascii_transliteration():
    slugifier = Slugifier()
    assert slugifier.slugify("Straße") == "strasse"
    assert slugifier.slugify("北京") == "bei-jing"


def test_only_separator_triggers_gives_empty_slug():
    assert Slugifier().slugify("!!! ... ---") == ""


def test_separator_in_input_is_collapsed_with_other_punctuation():
    assert Slugifier("_").slugify("snake_case -- name") == "snake_case_name"


def test_set_separator_updates_in_place():
    slugifier = Slugifier()
    slugifier.set_separator("_")
    assert slugifier.separator == "_"
    assert slugifier.slugify("Hello, World!") == "hello_world"


def test_with_separator_returns_copy_and_keeps_original():
    original = Slugifier()
    custom = original.with_separator(".")
    assert custom is not original
    assert custom.separator == "."
    assert original.separator == "-"
    assert custom.slugify("Hello, World!") == "hello.world"


def test_non_ascii_separator_is_accepted():
    assert Slugifier("·").slugify("Hello World") == "hello·world"


@pytest.mark.parametrize("bad_separator", ["", "--", "ab"])
def test_separator_must_be_one_character(bad_separator):
    with pytest.raises(ValueError):
        Slugifier(bad_separator)
    with pytest.raises(ValueError):
        Slugifier().set_separator(bad_separator)


def test_separator_must_be_a_string():
    with pytest.raises(TypeError):
        Slugifier(45)
    with pytest.raises(TypeError):
        Slugifier().with_separator(None)


def test_alphanumeric_separator_is_not_rejected():
    # Ambiguous output, but accepted.
    assert Slugifier("x").slugify("Hello World") == "helloxworld"


def test_value_semantics():
    assert Slugifier() == Slugifier.default()
    assert Slugifier("_") != Slugifier()
    assert repr(Slugifier("_")) == "Slugifier(separator='_')"
    duplicate = copy.copy(Slugifier("_"))
    assert duplicate == Slugifier("_")


def test_bytes_input_is_decoded_as_utf8():
    slugifier = Slugifier()
    assert slugifier.slugify("Crème brûlée!".encode("utf-8")) == "creme-brulee"
    assert slugifier.slugify(bytearray(b"Rust 2024")) == "rust-2024"
    assert slugifier.slugify(memoryview(b"Hello, World!")) == "hello-world"


def test_invalid_utf8_bytes_become_separators():
    assert Slugifier().slugify(b"abc\xffdef") == "abc-def"


@pytest.mark.parametrize("bad_input", [None, 42, ["Hello"]])
def test_non_string_input_raises_type_error(bad_input):
    with pytest.raises(TypeError):
        Slugifier().slugify(bad_input)


def test_lone_surrogate_becomes_separator():
    assert Slugifier().slugify("abc\ud800def") == "abc-def"


def test_empty_transliteration_triggers_separator():
    def fake_transliterate(char):
        return "" if char == "*" else char

    with mock.patch(TRANSLITERATE_PATH, side_effect=fake_transliterate):
        assert Slugifier().slugify("foo*bar") == "foo-bar"
        assert Slugifier().slugify("*foo**") == "foo"


def test_missing_transliteration_triggers_separator():
    def fake_transliterate(char):
        return None if char == "*" else char

    with mock.patch(TRANSLITERATE_PATH, side_effect=fake_transliterate):
        assert Slugifier().slugify("foo*bar") == "foo-bar"


def test_multi_character_transliteration_is_classified_per_character():
    def fake_transliterate(char):
        return "Ab C" if char == "*" else char

    with mock.patch(TRANSLITERATE_PATH, side_effect=fake_transliterate):
        assert Slugifier().slugify("x*y") == "xab-cy"


@pytest.mark.parametrize("separator", ["-", "_", ".", "~"])
@pytest.mark.parametrize("text", SAMPLE_INPUTS)
def test_slug_properties(text, separator):
    slugifier = Slugifier(separator)
    slug = slugifier.slugify(text)

    # Idempotent
    assert slugifier.slugify(slug) == slug
    # Alphabet closure
    assert all(c in "abcdefghijklmnopqrstuvwxyz0123456789" or c == separator for c in slug)
    # No runs, no edges
    assert separator * 2 not in slug
    assert not slug.startswith(separator)
    assert not slug.endswith(separator)


def test_uppercase_ascii_is_lowercased():
    upper = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert Slugifier().slugify(upper) == "abcdefghijklmnopqrstuvwxyz"


def test_module_level_slugify():
    assert limace.slugify("Hello, World!") == "hello-world"
    assert limace.slugify("Hello, World!", "_") == "hello_world"


class TestSlugWriter:

    def test_starts_pending_separator(self):
        writer = SlugWriter(Slugifier())
        assert writer.previous_separator is True
        writer.push_separator()
        assert writer.into_inner() == ""

    def test_push_char_classification(self):
        writer = SlugWriter(Slugifier())
        writer.push_char("A")
        writer.push_char("1")
        writer.push_char(" ")
        writer.push_char("!")
        writer.push_char("z")
        assert writer.into_inner() == "a1-z"

    def test_trailing_separator_is_removed(self):
        writer = SlugWriter(Slugifier("_"))
        writer.push_str("abc ")
        assert writer.buffer == ["a", "b", "c", "_"]
        assert writer.into_inner() == "abc"


def test_slugifier_is_unhashable():
    with pytest.raises(TypeError):
        hash(Slugifier())
    with pytest.raises(TypeError):
        {Slugifier(): "dash"}
