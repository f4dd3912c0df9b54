import pytest

from drillbook.diophantine import (
    divisors,
    factorize,
    is_prime,
    pollard_rho,
    solve_equation,
)


def _value(a, b, c, d, x, y):
    return a * x * y + b * x + c * y + d


def test_small_values_are_not_prime():
    assert is_prime(0) is False
    assert is_prime(1) is False
    assert is_prime(2) is True


def test_large_prime_and_semiprime():
    assert is_prime(1000000007) is True
    assert is_prime(1000000007 * 998244353) is False


def test_carmichael_number_is_composite():
    assert is_prime(561) is False


def test_pollard_rho_finds_proper_factor():
    for n in (9, 15, 91, 561, 1000000007 * 998244353):
        d = pollard_rho(n)
        assert 1 < d < n
        assert n % d == 0


def test_pollard_rho_rejects_prime():
    with pytest.raises(ValueError):
        pollard_rho(97)


def test_factorize_product_and_primality():
    for n in range(1, 300):
        factors = factorize(n)
        product = 1
        for f in factors:
            assert is_prime(f)
            product *= f
        assert product == n
        assert factors == sorted(factors)


def test_factorize_semiprime():
    assert factorize(1000000007 * 998244353) == [998244353, 1000000007]


def test_factorize_rejects_zero():
    with pytest.raises(ValueError):
        factorize(0)


def test_divisors_invariants():
    for n in range(1, 200):
        divs = divisors(n)
        assert divs == sorted(set(divs))
        assert divs[0] == 1 and divs[-1] == n
        assert all(n % d == 0 for d in divs)
        assert {n // d for d in divs} == set(divs)


@pytest.mark.parametrize(
    "a,b,c,d",
    [(0, 0, 0, 0), (0, 2, 4, 6), (1, 2, 3, 6)],
)
def test_infinitely_many(a, b, c, d):
    assert solve_equation(a, b, c, d) is None


@pytest.mark.parametrize(
    "a,b,c,d",
    [(0, 0, 0, 3), (0, 2, 4, 3), (4, 2, 2, 1)],
)
def test_no_solutions(a, b, c, d):
    assert solve_equation(a, b, c, d) == []
    assert not any(
        _value(a, b, c, d, x, y) == 0
        for x in range(-30, 31)
        for y in range(-30, 31)
    )


@pytest.mark.parametrize(
    "a,b,c,d",
    [(1, 0, 0, -6), (2, 3, 5, 7), (-3, 4, 1, 10), (5, -7, 2, 3)],
)
def test_finite_solutions_match_search(a, b, c, d):
    result = solve_equation(a, b, c, d)
    assert result == sorted(set(result))
    assert all(_value(a, b, c, d, x, y) == 0 for x, y in result)
    window = {
        (x, y)
        for x in range(-60, 61)
        for y in range(-60, 61)
        if _value(a, b, c, d, x, y) == 0
    }
    assert window <= set(result)