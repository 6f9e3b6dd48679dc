"""Number-theoretic helpers and small numeric routines."""

from __future__ import annotations

from functools import lru_cache

__all__ = [
    "gcd",
    "catalan",
    "find_digits",
    "sieve_of_eratosthenes",
    "taylor_exp",
    "power",
    "positive_mod",
    "lcm",
    "lowest_set_bit",
    "xor_hash",
]


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two non-negative integers by repeated subtraction."""
    if a < 0 or b < 0:
        raise ValueError("gcd is defined here for non-negative integers only")
    while True:
        if a == 0:
            return b
        if b == 0:
            return a
        if a == b:
            return a
        # Collapse a run of subtractions into one step; a run that would
        # reach equality stops at the smaller value.
        if a > b:
            a = a % b or b
        else:
            b = b % a or a


@lru_cache(maxsize=None)
def _catalan(n: int) -> int:
    if n <= 1:
        return 1
    return sum(_catalan(i) * _catalan(n - i - 1) for i in range(n))


def catalan(n: int) -> int:
    """The n-th Catalan number, from the recurrence C(n) = sum C(i) * C(n-i-1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    for k in range(n):
        _catalan(k)
    return _catalan(n)


def find_digits(n: int) -> int:
    """Count the digits of ``n`` (with repeats) that divide ``n`` exactly; zeros are skipped."""
    if n <= 0:
        return 0
    return sum(1 for digit in map(int, str(n)) if digit and n % digit == 0)


def sieve_of_eratosthenes(n: int) -> list[int]:
    """All primes less than or equal to ``n``."""
    if n < 2:
        return []
    prime = [True] * (n + 1)
    prime[0] = prime[1] = False
    p = 2
    while p * p <= n:
        if prime[p]:
            prime[p * p :: p] = [False] * len(range(p * p, n + 1, p))
        p += 1
    return [number for number, is_prime in enumerate(prime) if is_prime]


def taylor_exp(x: float, n: float) -> float:
    """Approximate e**x with ``n`` terms of the Taylor series, evaluated by Horner's rule."""
    if n < 0 or n != int(n):
        raise ValueError("n must be a non-negative whole number")
    total = 1.0
    for term in range(int(n), 0, -1):
        total = 1 + (x / term) * total
    return total


def power(base: int, exponent: int) -> int:
    """``base`` raised to a non-negative integer ``exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    if exponent == 0:
        return 1
    result = 1
    while exponent > 1:
        if exponent % 2 == 1:
            result *= base
            exponent -= 1
        exponent //= 2
        base *= base
    return result * base


def positive_mod(a: int, b: int) -> int:
    """Truncating remainder of ``a`` by ``b``, shifted by ``b`` when it is negative."""
    remainder = abs(a) % abs(b)
    if a < 0:
        remainder = -remainder
    return remainder + b if remainder < 0 else remainder


def lcm(a: int, b: int) -> int:
    """Least common multiple of two non-negative integers, not both zero."""
    divisor = gcd(a, b)
    if divisor == 0:
        raise ZeroDivisionError("lcm of 0 and 0 is undefined")
    return (a // divisor) * b


def lowest_set_bit(a: int) -> int:
    """The value of the lowest set bit of ``a``."""
    if a == 0:
        raise ValueError("zero has no set bit")
    bit = 1
    while a & bit == 0:
        bit *= 2
    return bit


def xor_hash(bits: str, key: str) -> str:
    """XOR the first eight characters of ``bits`` and ``key`` and join the codes as decimals."""
    if len(bits) < 8 or len(key) < 8:
        raise ValueError("input and key must each have at least 8 characters")
    return "".join(str(ord(left) ^ ord(right)) for left, right in zip(bits[:8], key[:8]))