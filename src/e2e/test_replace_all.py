# src/e2e/test_replace_all.py

import pytest

from backend.trie import PatternTrie, replace_all
from backend.errors import InvalidArgument


def test_replaces_every_occurrence():
    assert replace_all("aXbXcX", "X", "YZ") == "aYZbYZcYZ"


def test_replacement_containing_pattern_is_not_rescanned():
    # would loop forever if the scan restarted inside the replacement
    assert replace_all("aXbX", "X", "X2") == "aX2bX2"
    assert replace_all("aa", "a", "aa") == "aaaa"


def test_non_overlapping_left_to_right():
    assert replace_all("aaa", "aa", "b") == "ba"


def test_no_match_returns_text_unchanged():
    assert replace_all("hello", "xyz", "q") == "hello"
    assert replace_all("", "x", "y") == ""


def test_replace_with_empty_string_deletes():
    assert replace_all("a-b-c", "-", "") == "abc"


def test_multi_char_pattern_and_spaces():
    assert replace_all("the cat sat", "at", "og") == "the cog sog"
    assert replace_all("one two", " ", " and ") == "one and two"


def test_literal_not_regex():
    assert replace_all("a.c abc", ".", "!") == "a!c abc"


def test_empty_pattern_rejected():
    with pytest.raises(InvalidArgument):
        replace_all("abc", "", "x")
    # InvalidArgument is also a ValueError for callers that catch the builtin
    with pytest.raises(ValueError):
        replace_all("", "", "")


def test_available_on_the_trie():
    assert PatternTrie.replace_all("xx", "x", "y") == "yy"
    assert PatternTrie().replace_all("xx", "x", "y") == "yy"


def test_matches_builtin_replace_on_random_inputs():
    import random
    rng = random.Random(1234)
    alphabet = "abX "
    for _ in range(2000):
        text = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 30)))
        pattern = "".join(rng.choice(alphabet) for _ in range(rng.randint(1, 3)))
        replacement = "".join(rng.choice(alphabet) for _ in range(rng.randint(0, 4)))
        assert replace_all(text, pattern, replacement) == text.replace(pattern, replacement)


def test_large_line_grows_by_doubling():
    text = "a"
    for _ in range(17):
        text = replace_all(text, "a", "aa")
    assert text == "a" * (1 << 17)
