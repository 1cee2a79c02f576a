import random
from itertools import combinations
from math import comb

import pytest

from algobook.dynamic import (
    fence_max_area,
    longest_increasing_subsequence,
    max_meetings,
    morse_kth,
    selection_sort,
    selection_sort_recursive,
    snail_probability,
)


def _is_subsequence(sub, seq):
    it = iter(seq)
    return all(any(x == y for y in it) for x in sub)


def test_lis_is_longest_increasing_subsequence():
    values = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5, 8]
    result = longest_increasing_subsequence(values)
    assert all(a < b for a, b in zip(result, result[1:]))
    assert _is_subsequence(result, values)
    best = max(
        r
        for r in range(1, len(values) + 1)
        for c in combinations(values, r)
        if all(a < b for a, b in zip(c, c[1:]))
    )
    assert len(result) == best


def test_lis_of_empty_is_empty():
    assert longest_increasing_subsequence([]) == []


def test_max_meetings_matches_brute_force():
    rng = random.Random(7)
    meetings = []
    for _ in range(9):
        begin = rng.randint(0, 20)
        meetings.append((begin, begin + rng.randint(1, 6)))

    def compatible(chosen):
        ordered = sorted(chosen, key=lambda m: m[1])
        return all(a[1] <= b[0] for a, b in zip(ordered, ordered[1:]))

    best = max(
        r for r in range(len(meetings) + 1) for c in combinations(meetings, r) if compatible(c)
    )
    assert max_meetings(meetings) == best


def test_max_meetings_empty():
    assert max_meetings([]) == 0


def test_morse_strings_are_in_order():
    n, m = 3, 2
    strings = [morse_kth(n, m, k) for k in range(1, comb(n + m, n) + 1)]
    assert strings == sorted(set(strings))
    assert all(s.count("-") == n and s.count("o") == m for s in strings)
    assert strings[0] == "-" * n + "o" * m
    assert strings[-1] == "o" * m + "-" * n


def test_morse_k_out_of_range():
    with pytest.raises(ValueError):
        morse_kth(2, 2, comb(4, 2) + 1)
    with pytest.raises(ValueError):
        morse_kth(2, 2, 0)


def test_snail_certain_and_impossible():
    assert snail_probability(5, 5) == 1.0
    assert snail_probability(5, 11) == 0.0
    assert snail_probability(0, 0) == 1.0


def test_snail_probability_decreases_with_depth():
    probs = [snail_probability(6, depth) for depth in range(14)]
    assert all(0.0 <= p <= 1.0 for p in probs)
    assert all(a >= b for a, b in zip(probs, probs[1:]))


def test_snail_negative_days():
    with pytest.raises(ValueError):
        snail_probability(-1, 0)


def test_fence_matches_brute_force():
    rng = random.Random(11)
    for _ in range(30):
        heights = [rng.randint(0, 10) for _ in range(rng.randint(1, 12))]
        best = max(
            min(heights[i:j + 1]) * (j - i + 1)
            for i in range(len(heights))
            for j in range(i, len(heights))
        )
        assert fence_max_area(heights) == best


def test_fence_empty_raises():
    with pytest.raises(ValueError):
        fence_max_area([])


def test_selection_sorts_source_example():
    values = [2, 4, 5, 6, 3, 1]
    assert selection_sort(values) == [1, 2, 3, 4, 5, 6]
    assert selection_sort_recursive(values) == [1, 2, 3, 4, 5, 6]
    assert values == [2, 4, 5, 6, 3, 1]


def test_selection_sorts_match_sorted():
    rng = random.Random(3)
    for size in range(12):
        values = [rng.randint(-5, 5) for _ in range(size)]
        assert selection_sort(values) == sorted(values)
        assert selection_sort_recursive(values) == sorted(values)