import random
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from textdrills.counting import (
    char_frequencies,
    count_char,
    count_digits,
    count_vowels,
    count_words,
    duplicate_chars,
    first_non_repeating_char,
    most_frequent_char,
    non_matching_chars,
    sort_chars,
    vowel_consonant_counts,
)

SOURCE_TEXT = "this is a string where we keep count of each character in the string\n"


@given(
    st.text(alphabet=string.digits),
    st.text(alphabet=string.ascii_letters + " !#"),
)
def test_count_digits_counts_only_digits(digits, other):
    mixed = list(digits + other)
    random.Random(0).shuffle(mixed)
    assert count_digits("".join(mixed)) == len(digits)


@given(st.text(alphabet="bcdxyz12 "), st.integers(min_value=0, max_value=20))
def test_count_char_counts_inserted(base, n):
    assert count_char(base + "a" * n, "a") == n


def test_count_char_rejects_multiple_characters():
    with pytest.raises(ValueError):
        count_char("aaaa", "aa")


@given(st.text())
def test_char_frequencies_cover_text(text):
    freqs = char_frequencies(text)
    assert sum(freqs.values()) == len(text)
    assert set(freqs) == set(text)
    assert list(freqs) == list(dict.fromkeys(text))


def test_non_matching_chars_example():
    assert non_matching_chars("cabaa!") == ["b", "c"]


@given(st.text(alphabet=string.printable))
def test_non_matching_chars_invariants(text):
    result = non_matching_chars(text)
    assert result == sorted(result, key=ord)
    for char in result:
        assert text.count(char) == 1
        assert char.isascii() and char.isalnum()


def test_count_vowels_all_vowels():
    text = "aeiouAEIOU"
    assert count_vowels(text) == len(text)


@given(st.text(alphabet=string.ascii_letters + string.digits + " .,"))
def test_vowel_consonant_counts_sum_to_letters(text):
    vowels, consonants = vowel_consonant_counts(text)
    assert vowels == count_vowels(text)
    assert vowels + consonants == sum(c in string.ascii_letters for c in text)


def test_count_words_source_sentence():
    text = (
        "\t\t  Hello world this is a word count program which count the number of words"
        " in a string.\t\t   Bye!\n"
    )
    assert count_words(text) == 18


@given(
    st.lists(st.text(alphabet=string.ascii_letters + "!.", min_size=1)),
    st.sampled_from([" ", "\t", "\n", " \t ", "\n\n"]),
)
def test_count_words_matches_joined_words(words, separator):
    assert count_words(separator + separator.join(words) + separator) == len(words)


def test_first_non_repeating_char_source_text():
    assert first_non_repeating_char(SOURCE_TEXT) == "k"


def test_first_non_repeating_char_none_when_all_repeat():
    assert first_non_repeating_char("aabbaa") is None


@given(st.text())
def test_first_non_repeating_char_occurs_once(text):
    result = first_non_repeating_char(text)
    if result is None:
        assert all(text.count(c) > 1 for c in text)
    else:
        assert text.count(result) == 1


@given(st.text(alphabet=string.printable))
def test_duplicate_chars_invariants(text):
    result = duplicate_chars(text)
    assert result == sorted(result, key=ord)
    assert set(result) == {c for c in text if text.count(c) > 1}


@given(st.text())
def test_sort_chars_is_ordered_set(text):
    result = sort_chars(text)
    assert set(result) == set(text)
    assert len(result) == len(set(text))
    assert all(ord(a) < ord(b) for a, b in zip(result, result[1:]))


def test_most_frequent_char_first_wins_ties():
    assert most_frequent_char("abab") == "a"


def test_most_frequent_char_skips_spaces():
    assert most_frequent_char("     zz y") == "z"


def test_most_frequent_char_empty():
    assert most_frequent_char("   ") is None