import pytest

from rtlib.textsearch import strchr, strcmp, strncmp, strnstr, strrchr


@pytest.mark.parametrize(
    "s, c", [("hello world", "o"), ("abcabc", "a"), ("xyz", "z"), ("aaa", "a")]
)
def test_strchr_finds_first_occurrence(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_nul_finds_terminator():
    s = "terminated"
    assert strchr(s, "\0") == len(s)


def test_strchr_missing_character():
    assert strchr("abc", "z") is None


def test_strchr_stops_at_embedded_nul():
    assert strchr("ab\0cd", "c") is None
    assert strchr("ab\0cd", "\0") == len("ab")


def test_strchr_rejects_multiple_characters():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


@pytest.mark.parametrize(
    "s, c", [("hello world", "o"), ("abcabc", "a"), ("xyz", "x"), ("aaa", "a")]
)
def test_strrchr_finds_last_occurrence(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1 :]


def test_strrchr_nul_finds_terminator():
    s = "terminated"
    assert strrchr(s, "\0") == len(s)


def test_strrchr_missing_character():
    assert strrchr("abc", "q") is None


def test_strrchr_rejects_empty_character():
    with pytest.raises(ValueError):
        strrchr("abc", "")


def test_strrchr_not_before_strchr():
    s = "mississippi"
    for c in set(s):
        assert strrchr(s, c) >= strchr(s, c)


def test_strncmp_equal_strings():
    assert strncmp("same", "same", len("same")) == 0


def test_strncmp_returns_code_difference():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strncmp_limit_hides_later_difference():
    assert strncmp("abX", "abY", 2) == 0


def test_strncmp_zero_length():
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_shorter_string_counts_terminator():
    assert strncmp("ab", "abc", 3) == -ord("c")
    assert strncmp("abc", "ab", 3) == ord("c")


def test_strncmp_negative_length_rejected():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strcmp_equal():
    assert strcmp("raytracer", "raytracer") == 0


def test_strcmp_empty_strings():
    assert strcmp("", "") == 0
    assert strcmp("", "a") == -ord("a")


@pytest.mark.parametrize(
    "a, b", [("apple", "apply"), ("a", "ab"), ("sp", "pl"), ("cy", "C")]
)
def test_strcmp_is_antisymmetric_and_orders_like_python(a, b):
    forward = strcmp(a, b)
    backward = strcmp(b, a)
    assert forward == -backward
    assert (forward < 0) == (a < b)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 3) == 0


def test_strnstr_empty_haystack():
    assert strnstr("", "x", 10) is None


def test_strnstr_finds_needle_within_length():
    haystack = "find the needle here"
    index = strnstr(haystack, "needle", len(haystack))
    assert haystack[index : index + len("needle")] == "needle"


def test_strnstr_needle_must_fit_in_length():
    haystack = "abcdef"
    assert strnstr(haystack, "def", len(haystack) - 1) is None
    assert strnstr(haystack, "def", len(haystack)) == haystack.index("def")


def test_strnstr_length_past_end():
    haystack = "abc"
    assert strnstr(haystack, "bc", 100) == haystack.index("bc")
    assert strnstr(haystack, "cd", 100) is None


def test_strnstr_needle_longer_than_haystack():
    assert strnstr("ab", "abc", 10) is None


def test_strnstr_negative_length_rejected():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)