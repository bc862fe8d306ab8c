import pytest
from hypothesis import given, strategies as st

from algokit.recurrence import MOD, LinearRecurrence, matmul, matpow


def fibonacci():
    return LinearRecurrence([0, 1], [1, 1])


def test_fibonacci_worked_example():
    assert fibonacci().nth(10) == 55


def test_fibonacci_satisfies_recurrence():
    fib = fibonacci()
    terms = [fib.nth(i) for i in range(200)]
    for i in range(2, 200):
        assert terms[i] == (terms[i - 1] + terms[i - 2]) % MOD


@given(st.integers(min_value=1, max_value=10**12))
def test_fibonacci_doubling_identity(n):
    fib = fibonacci()
    f_n, f_next = fib.nth(n), fib.nth(n + 1)
    assert fib.nth(2 * n) == f_n * (2 * f_next - f_n) % MOD


def test_terms_below_order_are_initial_values():
    rec = LinearRecurrence([7, 9], [1, 1])
    assert rec.nth(0) == 7
    assert rec.nth(1) == 9
    assert rec.order == 2


def test_large_index_is_reduced():
    value = fibonacci().nth(10**18)
    assert 0 <= value < MOD


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        LinearRecurrence([0, 1], [1])


def test_empty_recurrence_rejected():
    with pytest.raises(ValueError):
        LinearRecurrence([], [])


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        fibonacci().nth(-1)


def test_matpow_zero_is_identity():
    assert matpow([[2, 3], [4, 5]], 0) == [[1, 0], [0, 1]]


small_matrices = st.lists(
    st.lists(st.integers(min_value=0, max_value=10**9), min_size=3, max_size=3),
    min_size=3,
    max_size=3,
)


@given(small_matrices, st.integers(min_value=0, max_value=40), st.integers(min_value=0, max_value=40))
def test_matpow_adds_exponents(matrix, a, b):
    assert matpow(matrix, a + b) == matmul(matpow(matrix, a), matpow(matrix, b))


@given(small_matrices)
def test_matmul_by_identity(matrix):
    identity = matpow(matrix, 0)
    reduced = [[x % MOD for x in row] for row in matrix]
    assert matmul(identity, matrix) == reduced
    assert matmul(matrix, identity) == reduced


def test_matmul_shape_mismatch():
    with pytest.raises(ValueError):
        matmul([[1, 2]], [[1, 2]])


def test_matpow_rejects_non_square_and_negative():
    with pytest.raises(ValueError):
        matpow([[1, 2]], 2)
    with pytest.raises(ValueError):
        matpow([[1]], -1)