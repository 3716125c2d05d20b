import pytest

from algoshelf.number_theory import (
    SIEVE_LIMIT,
    factorial,
    fibonacci,
    fibonacci_bottom_up,
    fibonacci_top_down,
    gcd,
    is_prime,
    modular_exponentiation,
    sieve,
)


def test_is_prime_source_example():
    assert is_prime(45) is False


def test_sieve_agrees_with_is_prime():
    primes = set(sieve(500))
    assert all((n in primes) == is_prime(n) for n in range(-5, 501))


def test_sieve_below_two_is_empty():
    assert sieve(1) == []
    assert sieve(-10) == []


def test_sieve_primes_have_no_small_divisors():
    primes = sieve(1000)
    assert len(primes) == 168
    assert primes[:5] == [2, 3, 5, 7, 11]
    assert all(all(p % d for d in range(2, p)) for p in primes)


def test_sieve_includes_limit_when_prime():
    primes = sieve(SIEVE_LIMIT)
    assert primes[-1] <= SIEVE_LIMIT
    assert is_prime(primes[-1])


def test_is_prime_beyond_sieve():
    assert is_prime(1_000_000_007)
    assert is_prime(2_147_483_647)
    assert not is_prime(1009 * 1013)
    assert not is_prime(1_000_000_007 * 3)


def test_factorial_source_example():
    assert factorial(6) == 720


def test_factorial_recurrence():
    assert factorial(0) == 1
    for n in range(1, 30):
        assert factorial(n) == n * factorial(n - 1)


def test_factorial_negative_raises():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fibonacci_source_examples():
    assert fibonacci(7) == 13
    assert fibonacci_top_down(4) == 3
    assert fibonacci_bottom_up(4) == 3


def test_fibonacci_variants_agree():
    for n in range(60):
        value = fibonacci(n)
        assert fibonacci_top_down(n) == value
        assert fibonacci_bottom_up(n) == value


def test_fibonacci_base_cases_and_recurrence():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1
    for n in range(2, 80):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_negative_raises():
    with pytest.raises(ValueError):
        fibonacci(-1)
    with pytest.raises(ValueError):
        fibonacci_top_down(-1)
    with pytest.raises(ValueError):
        fibonacci_bottom_up(-1)


def test_gcd_source_example():
    assert gcd(6, 9) == 3


def test_gcd_divides_both_and_is_symmetric():
    for a in range(1, 40):
        for b in range(1, 40):
            g = gcd(a, b)
            assert a % g == 0 and b % g == 0
            assert g == gcd(b, a)


def test_gcd_with_zero():
    assert gcd(17, 0) == 17
    assert gcd(0, 17) == 17


def test_modular_exponentiation_source_examples():
    assert modular_exponentiation(2, 10, 8000) == 1024
    assert modular_exponentiation(3, 6, 1) == 0


@pytest.mark.parametrize("base,power,mod", [(4, 7, 1000), (123, 456, 789), (10, 18, 1_000_000_007)])
def test_modular_exponentiation_matches_pow(base, power, mod):
    assert modular_exponentiation(base, power, mod) == pow(base, power, mod)


def test_modular_exponentiation_zero_power_gives_one():
    assert modular_exponentiation(5, 0, 1) == 1


def test_modular_exponentiation_zero_modulus_raises():
    with pytest.raises(ValueError):
        modular_exponentiation(2, 3, 0)