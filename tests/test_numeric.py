import math

import pytest

from tenzing.numeric import avg, corr, med, prime_factors, round_up, stddev, var


def test_avg_of_constant_values():
    assert avg([2.0, 2.0, 2.0]) == 2.0


def test_avg_of_mixed_values():
    assert avg([1.0, 2.0, 3.0, 6.0]) == 3.0


def test_med_odd_length():
    assert med([3, 1, 2]) == 2


def test_med_even_length_uses_element_after_midpoint():
    assert med([4, 1, 3, 2]) == 3.5


def test_med_empty_raises():
    with pytest.raises(ValueError):
        med([])


def test_var_of_constant_is_zero():
    assert var([5, 5, 5, 5]) == 0


def test_stddev_squared_is_var():
    values = [1.0, 4.0, 2.5, 9.0, 3.0]
    assert stddev(values) ** 2 == pytest.approx(var(values))


def test_corr_with_self_is_one():
    values = [1.0, 3.0, 2.0, 7.0, 5.0]
    assert corr(values, values) == pytest.approx(1.0)


def test_corr_with_negation_is_minus_one():
    values = [1.0, 3.0, 2.0, 7.0, 5.0]
    assert corr(values, [-v for v in values]) == pytest.approx(-1.0)


def test_corr_size_mismatch_raises():
    with pytest.raises(ValueError):
        corr([1.0, 2.0], [1.0])


def test_corr_empty_is_zero():
    assert corr([], []) == 0


@pytest.mark.parametrize("n", [2, 12, 97, 360, 1001, 65536, 999983])
def test_prime_factors_product_and_order(n):
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors, reverse=True)
    for f in factors:
        assert prime_factors(f) == [f]


def test_prime_factors_of_zero_is_empty():
    assert prime_factors(0) == []


def test_prime_factors_of_prime():
    assert prime_factors(13) == [13]


@pytest.mark.parametrize("n,step", [(0, 4), (1, 4), (7, 4), (8, 4), (9, 4), (100, 7)])
def test_round_up_invariants(n, step):
    r = round_up(n, step)
    assert r % step == 0
    assert n <= r < n + step


def test_round_up_exact_multiple_unchanged():
    assert round_up(8, 4) == 8