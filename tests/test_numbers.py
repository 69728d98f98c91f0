import math

import pytest

from dsakit.numbers import (
    binary_to_decimal,
    combination,
    count_digit_one,
    countdown,
    decimal_to_binary,
    exp_taylor,
    factorial,
    fibonacci,
    fibonacci_series,
    is_armstrong,
    is_prime,
    josephus,
)


@pytest.mark.parametrize("n", [0, 1, 153, 370, 371, 407])
def test_armstrong_numbers(n):
    assert is_armstrong(n)


@pytest.mark.parametrize("n", [10, 100, 152, 154, 999])
def test_not_armstrong_numbers(n):
    assert not is_armstrong(n)


def test_armstrong_negative_mirrors_positive():
    assert is_armstrong(-153)


def test_binary_to_decimal_matches_base_two_parsing():
    for text in ["1", "10", "101", "1111", "100000", "1010101"]:
        assert binary_to_decimal(int(text)) == int(text, 2)


def test_binary_round_trip():
    for n in range(0, 300):
        assert binary_to_decimal(decimal_to_binary(n)) == n


def test_decimal_to_binary_uses_only_binary_digits():
    for n in range(1, 100):
        assert set(str(decimal_to_binary(n))) <= {"0", "1"}


def test_decimal_to_binary_negative_raises():
    with pytest.raises(ValueError):
        decimal_to_binary(-1)


def test_binary_to_decimal_non_positive():
    assert binary_to_decimal(0) == 0
    assert binary_to_decimal(-101) == 0


def test_primes():
    assert all(is_prime(p) for p in (2, 3, 5, 7, 11, 13, 97))


def test_composites_and_small_values():
    assert not any(is_prime(c) for c in (0, 1, 4, 9, 15, 100))


def test_prime_has_no_divisor():
    primes = [n for n in range(2, 200) if is_prime(n)]
    assert len(primes) == 46
    assert primes[:10] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    assert all(all(p % d for d in range(2, p)) for p in primes)


def test_countdown_from_eight():
    assert countdown(8) == list(range(8, 0, -1))
    assert countdown(0) == []


def test_countdown_negative_raises():
    with pytest.raises(ValueError):
        countdown(-1)


def test_combination_matches_comb():
    for n in range(0, 12):
        for r in range(0, n + 1):
            assert combination(float(n), float(r)) == pytest.approx(math.comb(n, r))


def test_combination_zero_r_is_one():
    assert combination(5.0, 0.0) == 1.0


def test_josephus_source_example():
    assert josephus(14, 2) == 13


def test_josephus_k_one_keeps_last():
    for n in range(1, 20):
        assert josephus(n, 1) == n


def test_josephus_within_circle():
    for n in range(1, 30):
        for k in range(1, 6):
            assert 1 <= josephus(n, k) <= n


def test_josephus_empty_circle_raises():
    with pytest.raises(ValueError):
        josephus(0, 2)


def test_count_digit_one_matches_brute_force():
    for n in list(range(0, 250)) + [999, 1000, 1234, 31415]:
        assert count_digit_one(n) == sum(str(i).count("1") for i in range(1, n + 1))


def test_count_digit_one_negative():
    assert count_digit_one(-5) == 0


def test_factorial_source_example():
    assert factorial(5) == 120
    assert factorial(0) == 1


def test_factorial_recurrence():
    for n in range(1, 15):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-3)


def test_fibonacci_base_cases_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_fibonacci_series_agrees():
    series = fibonacci_series(15)
    assert len(series) == 15
    assert series == [fibonacci(i) for i in range(15)]
    assert fibonacci_series(0) == []


def test_exp_taylor_source_example():
    assert exp_taylor(2, 4) == pytest.approx(7.0)


def test_exp_taylor_zero_terms():
    assert exp_taylor(3, 0) == 1.0


def test_exp_taylor_converges():
    for x in (-1.0, 0.5, 1.0, 2.0):
        assert exp_taylor(x, 30) == pytest.approx(math.exp(x))


def test_exp_taylor_negative_terms_raises():
    with pytest.raises(ValueError):
        exp_taylor(1, -1)