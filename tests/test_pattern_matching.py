import random

import pytest

from algokit.pattern_matching import (
    boyer_moore,
    knuth_morris_pratt,
    naive,
    naive_sentinel,
    prefix_function,
    prefix_matching,
    shift_and,
)

PATTERN = "TTAC"
TEXT = "GCTTACAGATTCAGTCTTACAGATGGT"

MATCHERS = [naive_sentinel, prefix_matching, knuth_morris_pratt, boyer_moore, shift_and]


def test_naive_on_example():
    assert naive(PATTERN, TEXT) == [2, 16]


def test_naive_finds_overlapping():
    assert naive("aa", "aaaa") == [0, 1, 2]


@pytest.mark.parametrize("matcher", MATCHERS)
def test_matchers_agree_on_example(matcher):
    assert matcher(PATTERN, TEXT) == naive(PATTERN, TEXT)


@pytest.mark.parametrize("matcher", MATCHERS)
def test_matchers_agree_on_random_strings(matcher):
    rng = random.Random(1234)
    for _ in range(300):
        text = "".join(rng.choice("ab") for _ in range(rng.randint(1, 20)))
        pattern = "".join(rng.choice("ab") for _ in range(rng.randint(1, 5)))
        assert matcher(pattern, text) == naive(pattern, text), (pattern, text)


@pytest.mark.parametrize("matcher", MATCHERS)
def test_matchers_handle_marker_like_characters(matcher):
    assert matcher("x$", "ax$x$$x$") == naive("x$", "ax$x$$x$")
    assert matcher("$", "$$a$") == naive("$", "$$a$")


@pytest.mark.parametrize("matcher", [naive, *MATCHERS])
def test_pattern_longer_than_text(matcher):
    assert matcher("abcd", "abc") == []


@pytest.mark.parametrize("matcher", [naive, *MATCHERS])
def test_empty_pattern_matches_everywhere(matcher):
    assert matcher("", "abc") == list(range(4))


def test_naive_positions_are_real_occurrences():
    rng = random.Random(7)
    text = "".join(rng.choice("abc") for _ in range(200))
    for pattern in ("ab", "abc", "cc", "a"):
        for position in naive(pattern, text):
            assert text.startswith(pattern, position)


def test_shift_and_single_char_at_start():
    assert shift_and("a", "ab") == naive("a", "ab")
    assert shift_and(PATTERN, TEXT) == naive(PATTERN, TEXT)


def test_prefix_function_invariants():
    rng = random.Random(99)
    for _ in range(100):
        s = "".join(rng.choice("ab") for _ in range(rng.randint(1, 25)))
        pref = prefix_function(s)
        assert len(pref) == len(s)
        assert pref[0] == len(s)
        for i in range(1, len(s)):
            z = pref[i]
            assert s[:z] == s[i : i + z]
            assert i + z == len(s) or s[z] != s[i + z]


def test_prefix_function_small_cases():
    assert prefix_function("") == []
    assert prefix_function("a") == [1]
    assert prefix_function("aaa") == [3, 2, 1]