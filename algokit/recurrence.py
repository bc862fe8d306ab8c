"""Linear recurrences evaluated by matrix exponentiation modulo a prime."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007

Matrix = list[list[int]]


def matmul(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]], mod: int = MOD) -> Matrix:
    """Return the product ``a @ b`` with every entry reduced modulo ``mod``."""
    if not a or not b or any(len(row) != len(b) for row in a):
        raise ValueError("matrix shapes do not allow multiplication")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) % mod for column in columns] for row in a]


def matpow(matrix: Sequence[Sequence[int]], n: int, mod: int = MOD) -> Matrix:
    """Return ``matrix`` raised to the power ``n`` by repeated squaring."""
    if n < 0:
        raise ValueError("exponent must not be negative")
    size = len(matrix)
    if size == 0 or any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square and non-empty")
    result = [[int(i == j) for j in range(size)] for i in range(size)]
    base = [list(row) for row in matrix]
    while n:
        if n & 1:
            result = matmul(result, base, mod)
        base = matmul(base, base, mod)
        n >>= 1
    return result


class LinearRecurrence:
    """A recurrence of order ``k`` given by ``k`` initial values and ``k`` coefficients.

    The coefficients form the first row of a companion matrix ``C`` whose
    sub-diagonal is all ones; the initial values form a column vector.
    """

    def __init__(self, initials: Sequence[int], coefficients: Sequence[int]) -> None:
        if not initials:
            raise ValueError("at least one initial value is needed")
        if len(initials) != len(coefficients):
            raise ValueError("initial values and coefficients must have the same length")
        order = len(coefficients)
        self._initials = [[value] for value in initials]
        self._companion = [list(coefficients)] + [
            [int(column == row - 1) for column in range(order)] for row in range(1, order)
        ]

    @property
    def order(self) -> int:
        return len(self._initials)

    def nth(self, n: int) -> int:
        """Return term ``n``.

        Below the order this is the initial value itself; from there on it is
        the first entry of ``C**n`` applied to the initial column, modulo MOD.
        """
        if n < 0:
            raise ValueError("index must not be negative")
        if n < self.order:
            return self._initials[n][0]
        return matmul(matpow(self._companion, n), self._initials)[0][0]