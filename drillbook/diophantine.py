"""Integer solutions of a*x*y + b*x + c*y + d = 0."""

from __future__ import annotations

import random
from collections import Counter
from math import gcd

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)
_WITNESSES = (2, 325, 9375, 28178, 450775, 9780504, 1795265022)

_rng = random.Random()


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test for 64-bit sized integers."""
    if n < 2:
        return False
    for p in _SMALL_PRIMES:
        if n % p == 0:
            return n == p
    d, s = n - 1, 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in _WITNESSES:
        if a % n == 0:
            continue
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(s - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n: int) -> int:
    """A non-trivial factor of the composite number n."""
    if n < 4 or is_prime(n):
        raise ValueError(f"{n} is not a composite number")
    if n % 2 == 0:
        return 2
    while True:
        c = _rng.randint(2, n - 2)
        x = y = _rng.randint(2, n - 2)
        d = 1
        while d == 1:
            x = (x * x + c) % n
            y = (y * y + c) % n
            y = (y * y + c) % n
            d = gcd(abs(x - y), n)
        if d != n:
            return d


def factorize(n: int) -> list[int]:
    """Prime factors of n with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError("only positive integers can be factorized")
    factors: list[int] = []
    pending = [n]
    while pending:
        value = pending.pop()
        if value == 1:
            continue
        if is_prime(value):
            factors.append(value)
            continue
        part = pollard_rho(value)
        pending.extend((part, value // part))
    return sorted(factors)


def divisors(n: int) -> list[int]:
    """All positive divisors of n, in ascending order."""
    result = [1]
    for prime, exponent in Counter(factorize(n)).items():
        result = [d * prime**k for d in result for k in range(exponent + 1)]
    return sorted(result)


def solve_equation(a: int, b: int, c: int, d: int) -> list[tuple[int, int]] | None:
    """Sorted integer solutions (x, y) of a*x*y + b*x + c*y + d = 0.

    Returns None when there are infinitely many solutions.
    """
    if a == 0:
        g = gcd(b, c)
        if g == 0:
            return None if d == 0 else []
        return [] if d % g else None

    # (a*x + c) * (a*y + b) == b*c - a*d
    m = b * c - a * d
    if m == 0:
        return None if c % a == 0 or b % a == 0 else []

    solutions: set[tuple[int, int]] = set()
    for positive in divisors(abs(m)):
        for u in (positive, -positive):
            v = m // u
            if (u - c) % a == 0 and (v - b) % a == 0:
                solutions.add(((u - c) // a, (v - b) // a))
    return sorted(solutions)