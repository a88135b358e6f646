"""Small array algorithms: odd-occurrence lookup and prime sieving."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable


def first_odd_occurrence(items: Iterable[Hashable]):
    """Return the first item that occurs an odd number of times, or ``None``."""
    values = list(items)
    counts = Counter(values)
    return next((value for value in values if counts[value] % 2), None)


def sieve_of_eratosthenes(limit: int) -> list[int]:
    """Return all primes not greater than ``limit`` in ascending order."""
    if limit < 2:
        return []
    is_prime = bytearray([1]) * (limit + 1)
    is_prime[0] = is_prime[1] = 0
    candidate = 2
    while candidate * candidate <= limit:
        if is_prime[candidate]:
            is_prime[candidate * candidate :: candidate] = bytes(
                len(range(candidate * candidate, limit + 1, candidate))
            )
        candidate += 1
    return [number for number, flag in enumerate(is_prime) if flag]