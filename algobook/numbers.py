"""Number-theory and combinatorics routines."""

from __future__ import annotations

from itertools import accumulate, pairwise
from math import factorial, isqrt
from typing import Sequence


def binary_search(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in the sorted ``values``, or -1 if absent."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def prime_sieve(limit: int) -> list[bool]:
    """Sieve of Eratosthenes: entry ``i`` tells whether ``i`` is prime, 0..limit."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    sieve = [False, False] + [True] * (limit - 1) if limit >= 1 else [False]
    for i in range(2, isqrt(limit) + 1):
        if sieve[i]:
            for j in range(i * i, limit + 1, i):
                sieve[j] = False
    return sieve[: limit + 1]


def prime_sieve_mask(limit: int) -> bytes:
    """Sieve packed into bits: bit ``i % 8`` of byte ``i // 8`` is set if ``i`` is prime."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    mask = bytearray(b"\xff") * (limit // 8 + 1)

    def clear(n: int) -> None:
        mask[n >> 3] &= ~(1 << (n & 7)) & 0xFF

    for n in range(min(2, limit + 1)):
        clear(n)
    for n in range(limit + 1, len(mask) * 8):
        clear(n)
    for i in range(2, isqrt(limit) + 1):
        if mask[i >> 3] & (1 << (i & 7)):
            for j in range(i * i, limit + 1, i):
                clear(j)
    return bytes(mask)


def mask_has(mask: bytes, n: int) -> bool:
    """Whether bit ``n`` is set in a packed sieve."""
    if not 0 <= n < len(mask) * 8:
        raise ValueError(f"{n} is outside the mask")
    return bool(mask[n >> 3] & (1 << (n & 7)))


def binomial(n: int, r: int) -> int:
    """Binomial coefficient C(n, r) from Pascal's triangle."""
    if not 0 <= r <= n:
        raise ValueError("binomial requires 0 <= r <= n")
    row = [1]
    for _ in range(n):
        row = [1, *(a + b for a, b in pairwise(row)), 1]
    return row[r]


def divisor_counts(limit: int) -> list[int]:
    """Entry ``i`` is the number of divisors of ``i`` for 1..limit (entry 0 is 0)."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    counts = [0] * (limit + 1)
    for i in range(1, limit + 1):
        for multiple in range(i, limit + 1, i):
            counts[multiple] += 1
    return counts


def gcd(p: int, q: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while q:
        p, q = q, p % q
    return p


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, keeping only a sliding window of terms."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def is_prime(n: int) -> bool:
    """Trial-division primality test."""
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % i for i in range(3, isqrt(n) + 1, 2))


def prime_factors(n: int) -> list[int]:
    """Prime factors of ``n`` in non-decreasing order, by trial division."""
    factors: list[int] = []
    div = 2
    while div * div <= n:
        while n % div == 0:
            n //= div
            factors.append(div)
        div += 1
    if n > 1:
        factors.append(n)
    return factors


def smallest_factor_sieve(limit: int) -> list[int]:
    """Entry ``i`` is ``i`` if prime, else its smallest prime factor; 0 and 1 hold -1."""
    if limit < 1:
        raise ValueError("limit must be at least 1")
    sieve = list(range(limit + 1))
    sieve[0] = sieve[1] = -1
    for i in range(2, isqrt(limit) + 1):
        if sieve[i] == i:
            for j in range(i * i, limit + 1, i):
                if sieve[j] == j:
                    sieve[j] = i
    return sieve


def factorize_with_sieve(n: int, sieve: Sequence[int]) -> list[int]:
    """Prime factors of ``n`` using a table from :func:`smallest_factor_sieve`."""
    if n >= len(sieve):
        raise ValueError(f"{n} is beyond the sieve")
    factors: list[int] = []
    while n > 1:
        factors.append(sieve[n])
        n //= sieve[n]
    return factors


def permutation_rank(perm: Sequence[int]) -> int:
    """1-based position of ``perm`` among its permutations in lexicographic order."""
    size = len(perm)
    rank = 0
    for i, value in enumerate(perm):
        smaller_after = sum(1 for later in perm[i + 1:] if later < value)
        rank += factorial(size - i - 1) * smaller_after
    return rank + 1


def count_maximal_stable_sets(explode: Sequence[int]) -> int:
    """Count non-empty sets that are conflict-free and cannot be extended.

    ``explode[i]`` is a bit mask of the items that conflict with item ``i``.
    """
    m = len(explode)
    full = (1 << m) - 1
    count = 0
    for chosen in range(1, 1 << m):
        conflicts = 0
        for i, mask in enumerate(explode):
            if chosen & (1 << i):
                conflicts |= mask
        if conflicts == ~chosen & full:
            count += 1
    return count


def count_compositions(n: int, k: int) -> int:
    """Ways to write ``n`` as an ordered sum of ``k`` numbers from 0..n."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    row = [1] + [0] * n
    for _ in range(k):
        row = list(accumulate(row))
    return row[n]