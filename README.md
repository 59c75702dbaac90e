# textdrills

Small, plain functions for working with strings, words, digit strings and integer sequences. The package has no dependencies outside the standard library.

## Installation

```
pip install textdrills
```

To run the test suite, install the test extra and run pytest:

```
pip install "textdrills[test]"
pytest
```

## Modules

### `textdrills.textops`: string transformations

- `reverse_string(text)` returns the characters in reverse order.
- `is_palindrome(text)` tells whether the text reads the same backwards.
- `string_length(text)` returns the number of characters.
- `concatenate(first, second)` returns `second` appended to `first`.
- `compare_strings(first, second)` returns 0 when the strings are equal. Otherwise it returns the difference in character codes at the first position where they differ. A missing character counts as code 0, so `compare_strings("ab", "a")` is `98`.
- `to_upper(text)` and `to_lower(text)` change ASCII letters only.
- `toggle_case(text)` makes ASCII letters at even positions lower case and those at odd positions upper case. Positions count every character, including those that are not letters.
- `remove_spaces(text)` drops space characters. Tabs and newlines are kept.
- `remove_duplicate_chars(text)` keeps the first occurrence of each character, in order.
- `remove_special_chars(text)` keeps only ASCII letters and digits.
- `swap_first_and_last(text)` swaps the first and last characters. Strings shorter than two characters come back unchanged.
- `find_substring(text, pattern)` returns the index of the first match, or `-1`. It also returns `-1` whenever `text` is empty.

### `textdrills.counting`: character statistics

- `count_digits(text)` counts ASCII digits.
- `count_char(text, char)` counts one character. It raises `ValueError` unless `char` is exactly one character.
- `char_frequencies(text)` returns a dict from each character to its count, in order of first appearance.
- `non_matching_chars(text)` returns the ASCII letters and digits that occur exactly once, ordered by character code.
- `count_vowels(text)` counts a, e, i, o and u in either case.
- `vowel_consonant_counts(text)` returns `(vowels, other ASCII letters)`.
- `count_words(text)` counts runs of characters separated by spaces, tabs or newlines.
- `first_non_repeating_char(text)` returns the first character that occurs once, or `None`.
- `duplicate_chars(text)` returns the characters that occur more than once, ordered by code.
- `sort_chars(text)` returns each distinct character once, in ascending code order.
- `most_frequent_char(text)` returns the most frequent character other than a space. A tie goes to the character that appears first. It returns `None` if there is no such character.

### `textdrills.words`: words in a text

- `longest_word(text)` returns the first longest word, or `None`.
- `shortest_word(text)` returns the first shortest word that is under 20 characters long, or `None`.
- `largest_and_smallest_words(text)` returns both as a tuple.
- `count_word_occurrences(text, word)` counts the words equal to `word`.

Words are separated by spaces, tabs and newlines. A word counts only when a separator follows it, so a final word with nothing after it is ignored.

### `textdrills.digits`: digit strings

- `is_only_digits(text)` tells whether every character is `0` to `9`. The empty string counts as digits only.
- `parse_int(text)` parses such a string as a non-negative integer, and the empty string gives `0`. It raises `ValueError` for any other character, including a sign.

### `textdrills.anagram`

- `is_anagram(first, second)` returns true when both strings have the same length and every character of `first` occurs somewhere in `second`. Repeated characters are not matched one for one, so `is_anagram("aab", "abb")` is `True`.

### `textdrills.arrays`: integer sequences

- `sum_matching_elements(values)` adds, for each value that appears more than once, that value times the number of times it appears.
- `reverse_array(values)` returns a reversed list.
- `max_element(values)` returns the largest element. It returns `0` for an empty input or one with no element above zero.
- `sort_ascending(values)` returns a sorted list.

### `textdrills.fibonacci`

- `fibonacci_iterative(length)` returns `0, 1` followed by the terms up to index `length`.
- `fibonacci_recursive(length)` returns the first `length` terms and never fewer than two, so `fibonacci_recursive(5)` is `[0, 1, 1, 2, 3]`.

## Example

```python
from textdrills.textops import is_palindrome, find_substring
from textdrills.anagram import is_anagram
from textdrills.words import count_word_occurrences

is_palindrome("level")                           # True
find_substring("string1string2", "string2")      # 7
is_anagram("decimal", "claimed")                 # True
count_word_occurrences("count countbyte count\n", "count")  # 2
```

## Scope

This is a library of functions only. It has no command-line program, and it reads and writes no files.