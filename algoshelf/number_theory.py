"""Primes, factorials, Fibonacci numbers, greatest common divisors and modular powers."""

from __future__ import annotations

import math
from functools import lru_cache
from itertools import compress

SIEVE_LIMIT = 1_000_000


def _prime_flags(limit: int) -> bytearray:
    flags = bytearray([1]) * (limit + 1)
    flags[0] = 0
    if limit >= 1:
        flags[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
    return flags


def sieve(limit: int) -> list[int]:
    """All primes up to and including ``limit`` (sieve of Eratosthenes)."""
    if limit < 2:
        return []
    return list(compress(range(limit + 1), _prime_flags(limit)))


@lru_cache(maxsize=1)
def _shared_sieve() -> tuple[bytearray, tuple[int, ...]]:
    flags = _prime_flags(SIEVE_LIMIT)
    return flags, tuple(compress(range(SIEVE_LIMIT + 1), flags))


def is_prime(number: int) -> bool:
    """Whether ``number`` is prime.

    Numbers up to ``SIEVE_LIMIT`` are looked up in a sieve; larger ones are
    tried against the sieved primes, then against odd numbers beyond them.
    """
    if number < 2:
        return False
    flags, primes = _shared_sieve()
    if number <= SIEVE_LIMIT:
        return bool(flags[number])
    for prime in primes:
        if prime * prime > number:
            return True
        if number % prime == 0:
            return False
    candidate = primes[-1] + 2
    while candidate * candidate <= number:
        if number % candidate == 0:
            return False
        candidate += 2
    return True


def factorial(n: int) -> int:
    """Product of the integers ``1..n``; ``factorial(0)`` is 1."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    return math.prod(range(1, n + 1))


def _check_index(n: int) -> None:
    if n < 0:
        raise ValueError("Fibonacci index must not be negative")


def fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number, with ``fibonacci(0) == 0`` and ``fibonacci(1) == 1``."""
    _check_index(n)
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_top_down(n: int) -> int:
    """The ``n``-th Fibonacci number by memoised recursion."""
    _check_index(n)
    memo: dict[int, int] = {0: 0, 1: 1}

    def solve(k: int) -> int:
        if k not in memo:
            memo[k] = solve(k - 1) + solve(k - 2)
        return memo[k]

    return solve(n)


def fibonacci_bottom_up(n: int) -> int:
    """The ``n``-th Fibonacci number from a table filled upwards from the base cases."""
    _check_index(n)
    table = [0, 1]
    for i in range(2, n + 1):
        table.append(table[i - 1] + table[i - 2])
    return table[n]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b != 0:
        a, b = b, a % b
    return a


def modular_exponentiation(base: int, power: int, mod: int) -> int:
    """``base ** power % mod`` by repeated squaring.

    A power of zero or less gives 1, whatever the modulus.
    """
    if mod == 0:
        raise ValueError("modulus must not be zero")
    base %= mod
    answer = 1
    while power > 0:
        if power % 2 == 1:
            answer = answer * base % mod
        base = base * base % mod
        power //= 2
    return answer