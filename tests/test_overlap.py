import pytest

from data_utilities.overlap import overlap


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("abcdefg", "fgjkli", "fg"),
        ("fgjkli", "abcdefg", "fg"),
        ("aaa", "aab", "aa"),
        ("abc", "abc", "abc"),
        ("abc", "xyz", ""),
        ("", "abc", ""),
    ],
)
def test_overlap(a, b, expected):
    assert overlap(a, b) == expected


def test_no_swap():
    assert overlap("fgjkli", "abcdefg", swap=False) == ""
    assert overlap("abcdefg", "fgjkli", swap=False) == "fg"


def test_contained_string_is_not_an_overlap():
    assert overlap("abcdef", "cd") == ""


def test_non_strings():
    assert overlap(None, "abc") == ""
    assert overlap("abc", 5) == ""
