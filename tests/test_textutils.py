import pytest

from tinkerkit.textutils import (
    find_substring,
    reverse_string,
    reverse_words,
    strip_extension,
    total_length,
)


def test_total_length_matches_concatenation():
    words = ("hello", "hi", "how", "are", "you")
    assert total_length(*words) == len("".join(words))


def test_total_length_single():
    assert total_length("hello") == len("hello")


def test_find_substring_source_examples():
    assert find_substring("hello", "ll") == 2
    assert find_substring("hello", "lu") == -1


def test_find_substring_empty_needle():
    assert find_substring("hello", "") == 0


def test_find_substring_needle_longer_than_haystack():
    assert find_substring("ab", "abc") == -1


@pytest.mark.parametrize("haystack,needle", [("abcabc", "ca"), ("aaaa", "aa"), ("xyz", "z")])
def test_find_substring_points_at_needle(haystack, needle):
    index = find_substring(haystack, needle)
    assert haystack[index:index + len(needle)] == needle
    assert needle not in haystack[:index + len(needle) - 1]


@pytest.mark.parametrize("text", ["", "a", "hello", "tejsaw", "ab cd"])
def test_reverse_string_round_trip(text):
    reversed_text = reverse_string(text)
    assert reverse_string(reversed_text) == text
    assert sorted(reversed_text) == sorted(text)


def test_reverse_string_value():
    assert reverse_string("hello") == "olleh"


@pytest.mark.parametrize(
    "filename,expected",
    [
        ("report.txt", "report"),
        ("archive.tar.gz", "archive.tar"),
        ("noext", "noext"),
        ("file.", "file."),
        (".bashrc", "bashrc"),
        ("...", "..."),
        ("", ""),
    ],
)
def test_strip_extension(filename, expected):
    assert strip_extension(filename) == expected


def test_reverse_words_skips_empty_runs():
    assert reverse_words("one  two three") == "three two one"


def test_reverse_words_round_trip():
    text = "the quick brown fox"
    assert reverse_words(reverse_words(text)) == text


def test_reverse_words_empty():
    assert reverse_words("   ") == ""