import pytest

from algobook.strings import (
    AhoCorasick,
    common_prefix_length,
    count_distinct_substrings,
    min_rotation,
    naive_search,
    suffix_array,
    suffix_array_naive,
)

SAMPLES = ["banana", "mississippi", "abracadabra", "aaaa", "a", "zyxwv", "abab"]


def test_aho_corasick_matches_naive_search():
    patterns = ["HE", "SHE", "HIS", "HERS"]
    text = "AHISHERSHE"
    matcher = AhoCorasick(patterns)
    result = matcher.search(text)
    expected = {
        (start + len(pattern) - 1, pattern_id)
        for pattern_id, pattern in enumerate(patterns)
        for start in naive_search(text, pattern)
    }
    assert set(result) == expected
    assert len(result) == len(expected)
    assert [end for end, _ in result] == sorted(end for end, _ in result)


def test_aho_corasick_reports_suffix_patterns_first():
    matcher = AhoCorasick(["HE", "SHE"])
    assert matcher.search("SHE") == [(2, 0), (2, 1)]


def test_aho_corasick_no_match():
    matcher = AhoCorasick(["XYZ"])
    assert matcher.search("ABCABC") == []


def test_naive_search_positions():
    haystack = "abababa"
    positions = naive_search(haystack, "aba")
    assert positions == [p for p in range(len(haystack)) if haystack.startswith("aba", p)]


def test_naive_search_needle_longer_than_haystack():
    assert naive_search("ab", "abc") == []


@pytest.mark.parametrize("text", SAMPLES)
def test_suffix_arrays_agree(text):
    assert suffix_array(text) == suffix_array_naive(text)


@pytest.mark.parametrize("text", SAMPLES)
def test_suffix_array_is_sorted_permutation(text):
    order = suffix_array(text)
    assert sorted(order) == list(range(len(text)))
    suffixes = [text[i:] for i in order]
    assert suffixes == sorted(suffixes)


def test_suffix_array_empty():
    assert suffix_array("") == []


@pytest.mark.parametrize("text", SAMPLES)
def test_min_rotation_is_smallest(text):
    rotations = [text[i:] + text[:i] for i in range(len(text))]
    assert min_rotation(text) == min(rotations)


def test_min_rotation_empty():
    assert min_rotation("") == ""


def test_common_prefix_length_banana():
    assert common_prefix_length("banana", 1, 3) == 3


def test_common_prefix_length_same_index():
    text = "banana"
    assert common_prefix_length(text, 2, 2) == len(text) - 2


def test_count_distinct_substrings_banana():
    assert count_distinct_substrings("banana") == 15


@pytest.mark.parametrize("text", SAMPLES)
def test_count_distinct_substrings_matches_set(text):
    substrings = {text[i:j] for i in range(len(text)) for j in range(i + 1, len(text) + 1)}
    assert count_distinct_substrings(text) == len(substrings)


def test_count_distinct_substrings_empty():
    assert count_distinct_substrings("") == 0