"""Prime sieve and greatest common divisor helpers."""

from __future__ import annotations


def sieve(n: int) -> list[bool]:
    """Sieve of Eratosthenes: entry ``i`` is True when ``i`` is prime, 0..n."""
    if n < 1:
        raise ValueError("sieve() needs n >= 1")
    is_prime = [True] * (n + 1)
    is_prime[0] = is_prime[1] = False
    i = 2
    while i * i <= n:
        if is_prime[i]:
            is_prime[i * i :: i] = [False] * len(range(i * i, n + 1, i))
        i += 1
    return is_prime


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple; raises ZeroDivisionError when both are zero."""
    return a // gcd(a, b) * b