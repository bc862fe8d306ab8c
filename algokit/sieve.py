"""Prime sieves over a full range and over a segment."""

from __future__ import annotations

from math import isqrt


def _clear(flags: bytearray, start: int, step: int) -> None:
    flags[start::step] = bytes(len(range(start, len(flags), step)))


class Sieve:
    """Sieve of Eratosthenes for the integers ``0 .. n``."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("limit must not be negative")
        self._flags = bytearray([1]) * (n + 1)
        self._flags[:2] = bytes(len(self._flags[:2]))
        for i in range(2, isqrt(n) + 1):
            if self._flags[i]:
                _clear(self._flags, i * i, i)

    @property
    def limit(self) -> int:
        return len(self._flags) - 1

    def is_prime(self, n: int) -> bool:
        """Tell whether ``n`` is prime; ``n`` must lie within the sieve."""
        if not 0 <= n <= self.limit:
            raise IndexError(f"{n} is outside the sieve")
        return bool(self._flags[n])

    def primes(self) -> list[int]:
        """Return the primes up to the limit in increasing order."""
        return [number for number, flag in enumerate(self._flags) if flag]


class SegmentedSieve:
    """Primes in ``low .. high``, found with base primes up to the square root of ``high``."""

    def __init__(self, low: int, high: int) -> None:
        if low < 1 or high < low:
            raise ValueError("need 1 <= low <= high")
        self._low = low
        self._flags = bytearray([1]) * (high - low + 1)
        for prime in Sieve(isqrt(high)).primes():
            start = max(prime * prime, -(-low // prime) * prime)
            _clear(self._flags, start - low, prime)
        if low == 1:
            self._flags[0] = 0

    def primes(self) -> list[int]:
        """Return the primes in the segment in increasing order."""
        return [self._low + offset for offset, flag in enumerate(self._flags) if flag]