"""Tests for goalias.guesser."""

from __future__ import annotations

from goalias.guesser import (
    FALLBACK_ALIAS,
    candidate,
    guess_alias,
    iter_candidates,
    sanitize_segment,
    split_path,
)


# ---------------------------------------------------------------------------
# split_path / sanitize_segment
# ---------------------------------------------------------------------------


def test_split_path_drops_empty_segments():
    assert split_path("/a//b/c/") == ["a", "b", "c"]


def test_split_path_empty():
    assert split_path("") == []
    assert split_path("///") == []


def test_sanitize_segment_lowercases_and_strips_punctuation():
    assert sanitize_segment("Foo-Bar.v2") == "foobarv2"


def test_sanitize_segment_strips_leading_digits_only():
    assert sanitize_segment("123abc456") == "abc456"


def test_sanitize_segment_all_digits_is_empty():
    assert sanitize_segment("2024") == ""


def test_sanitize_segment_currency_symbol_removed():
    assert sanitize_segment("a$") == "a"


def test_sanitize_segment_keeps_unicode_letters():
    assert sanitize_segment("Über") == "über"


# ---------------------------------------------------------------------------
# candidate / iter_candidates
# ---------------------------------------------------------------------------


def test_candidate_levels():
    segments = split_path("github.com/xxx/fooa.bc")
    assert candidate(segments, 1) == "fooabc"
    assert candidate(segments, 2) == "xxxfooabc"
    assert candidate(segments, 3) == "githubcomxxxfooabc"


def test_candidate_sanitizes_each_segment_before_joining():
    # "123bbb" and "123ccc" each lose their own leading digits
    assert candidate(split_path("aaa/123bbb/123ccc"), 2) == "bbbccc"


def test_candidate_level_zero_is_empty():
    assert candidate(["a"], 0) == ""


def test_iter_candidates_yields_one_per_level():
    assert list(iter_candidates("a/b/123")) == ["", "b", "ab"]


def test_iter_candidates_is_lazy():
    gen = iter_candidates("a/b/c")
    assert next(gen) == "c"
    assert next(gen) == "bc"


# ---------------------------------------------------------------------------
# guess_alias
# ---------------------------------------------------------------------------


def test_guess_alias_table():
    data = {
        "A": "a",
        "a": "a",
        "a$": "a",
        "a/b": "b",
        "a/b/c": "c",
        "a/b/c-d": "cd",
        "a/b/c-d/": "cd",
        "a.b": "ab",
        "a/b.c": "bc",
        "a/b-c.d": "bcd",
        "a/bb-ccc.dddd": "bbcccdddd",
        "a/foo-go": "foogo",
        "123a": "a",
        "a/321a.b": "ab",
        "a/123": "pkg",
    }
    for path, expected in data.items():
        assert guess_alias(path) == expected, path


def test_guess_alias_digit_only_last_segment_falls_back():
    assert guess_alias("example.com/api/2") == FALLBACK_ALIAS


def test_guess_alias_empty_path_falls_back():
    assert guess_alias("") == FALLBACK_ALIAS
    assert guess_alias("/") == FALLBACK_ALIAS


def test_guess_alias_custom_fallback():
    assert guess_alias("a/123", fallback="lib") == "lib"


def test_guess_alias_is_deterministic_and_sanitized():
    for path in ["github.com/Foo/Bar-Baz", "9/8/7x", "x/__init__", "gopkg.in/yaml.v3"]:
        first = guess_alias(path)
        assert first == guess_alias(path)
        assert first.isalnum()
        assert first == first.lower()
        assert not first[0].isdigit()


def test_sanitize_segment_strips_non_ascii_leading_digits():
    # Arabic-Indic and fullwidth digits are decimal digits too
    assert sanitize_segment("٣abc") == "abc"
    assert sanitize_segment("１２foo３") == "foo３"


def test_guess_alias_non_ascii_leading_digit():
    assert guess_alias("example.com/٣abc") == "abc"
    assert guess_alias("example.com/٣") == FALLBACK_ALIAS
