import pytest
from hypothesis import given, strategies as st

from algokit.sieve import SegmentedSieve, Sieve


def test_small_primes():
    assert Sieve(30).primes() == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_prime_count_below_ten_thousand():
    assert len(Sieve(10_000).primes()) == 1229


def test_zero_and_one_are_not_prime():
    sieve = Sieve(10)
    assert sieve.is_prime(0) is False
    assert sieve.is_prime(1) is False


def test_tiny_limits():
    assert Sieve(0).primes() == []
    assert Sieve(1).primes() == []


def test_primes_have_no_smaller_prime_factor():
    primes = Sieve(2000).primes()
    assert len(primes) == 303
    assert primes[-1] == 1999
    divisible = [
        p for index, p in enumerate(primes) if any(p % q == 0 for q in primes[:index])
    ]
    assert divisible == []


def test_products_of_primes_are_composite():
    sieve = Sieve(5000)
    primes = [p for p in sieve.primes() if p < 70]
    for p in primes:
        for q in primes:
            assert sieve.is_prime(p * q) is False


def test_is_prime_agrees_with_primes():
    sieve = Sieve(500)
    listed = set(sieve.primes())
    assert {n for n in range(501) if sieve.is_prime(n)} == listed


def test_is_prime_out_of_range():
    with pytest.raises(IndexError):
        Sieve(10).is_prime(11)
    with pytest.raises(IndexError):
        Sieve(10).is_prime(-1)


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        Sieve(-1)


@given(st.integers(min_value=1, max_value=3000), st.integers(min_value=0, max_value=600))
def test_segment_matches_full_sieve(low, width):
    high = low + width
    expected = [p for p in Sieve(high).primes() if p >= low]
    assert SegmentedSieve(low, high).primes() == expected


def test_segment_of_one_is_empty():
    assert SegmentedSieve(1, 1).primes() == []


def test_segment_bounds_rejected():
    with pytest.raises(ValueError):
        SegmentedSieve(0, 10)
    with pytest.raises(ValueError):
        SegmentedSieve(10, 5)