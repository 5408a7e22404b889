"""Pure mathematical operations.

All functions are stateless and raise ``InvalidRequestError`` for inputs
outside their domain.
"""

from functools import reduce

from bfhl.exceptions import InvalidRequestError


def fibonacci(n: int) -> list[int]:
    """Generate the first ``n`` terms of the Fibonacci series.

    Args:
        n: Number of terms (must be >= 0).

    Returns:
        ``[]`` for 0, ``[0]`` for 1, otherwise ``[0, 1, 1, 2, 3, ...]``.

    Raises:
        InvalidRequestError: If n is negative.
    """
    if n < 0:
        raise InvalidRequestError(f"Fibonacci input must be a non-negative integer, got: {n}")

    series: list[int] = []
    a, b = 0, 1
    for _ in range(n):
        series.append(a)
        a, b = b, a + b
    return series


def is_prime(n: int) -> bool:
    """Trial division up to sqrt(n), skipping multiples of 2 and 3."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def filter_primes(values: list[int]) -> list[int]:
    """Return the primes in ``values``, preserving order.

    Raises:
        InvalidRequestError: If ``values`` is empty.
    """
    if not values:
        raise InvalidRequestError("Prime input must be a non-empty array of integers")
    return [v for v in values if is_prime(v)]


def gcd(a: int, b: int) -> int:
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def _require_positive(values: list[int], label: str) -> None:
    if not values:
        raise InvalidRequestError(f"{label} input must be a non-empty array of integers")
    for v in values:
        if v <= 0:
            raise InvalidRequestError(f"{label} values must be positive integers, got: {v}")


def compute_lcm(values: list[int]) -> int:
    """Least common multiple of all values.

    Raises:
        InvalidRequestError: If ``values`` is empty or holds a value <= 0.
    """
    _require_positive(values, "LCM")
    return reduce(lcm, values, 1)


def compute_hcf(values: list[int]) -> int:
    """Highest common factor (GCD) of all values.

    Raises:
        InvalidRequestError: If ``values`` is empty or holds a value <= 0.
    """
    _require_positive(values, "HCF")
    return reduce(gcd, values, 0)
