"""Small numeric routines: factorials, primes, digits and simple arithmetic."""

from __future__ import annotations

import math
from collections.abc import Iterable

PI = 3.14159
MAX_AVERAGE_COUNT = 100


def factorial(n: int) -> int:
    """Return n!, treating every n below 1 as having factorial 1."""
    return math.prod(range(1, n + 1))


def is_prime(n: int) -> bool:
    """Return True if n is prime, by trial division up to n // 2."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, n // 2 + 1))


def prime_sum_pairs(n: int) -> list[tuple[int, int]]:
    """Return every pair (p, q) with p <= q, p + q == n and both prime."""
    return [
        (low, n - low)
        for low in range(2, n // 2 + 1)
        if is_prime(low) and is_prime(n - low)
    ]


def circle_area(radius: float) -> float:
    """Return the area of a circle of the given radius."""
    return PI * radius * radius


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        sign = math.copysign(1.0, left) * math.copysign(1.0, right)
        return math.copysign(math.inf, sign)
    return left / right


def calculate(operator: str, left: float, right: float) -> float:
    """Apply one of the operators +, -, * or / to two operands.

    Division by zero follows floating-point rules and yields an infinity
    or NaN rather than raising.
    """
    match operator:
        case "+":
            return left + right
        case "-":
            return left - right
        case "*":
            return left * right
        case "/":
            return _divide(left, right)
    raise ValueError(f"Entered operator is not correct: {operator!r}")


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of a and b by Euclid's algorithm."""
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return a


def add(a: int, b: int) -> int:
    """Return the sum of two numbers."""
    return a + b


def average(values: Iterable[float]) -> float:
    """Return the mean of between 1 and 100 numbers."""
    numbers = list(values)
    if not 1 <= len(numbers) <= MAX_AVERAGE_COUNT:
        raise ValueError(
            f"number of elements should be in range of (1 to {MAX_AVERAGE_COUNT})"
        )
    return sum(numbers) / len(numbers)


def fibonacci_triangle(rows: int) -> list[list[int]]:
    """Return a triangle whose row i holds the first i Fibonacci numbers from 1."""
    triangle = []
    for length in range(1, rows + 1):
        row = []
        previous, current = 0, 1
        for _ in range(length):
            row.append(current)
            previous, current = current, previous + current
        triangle.append(row)
    return triangle


def reverse_digits(n: int) -> int:
    """Return the decimal digits of n in reverse order; 0 for n <= 0."""
    reversed_value = 0
    while n > 0:
        n, digit = divmod(n, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value


def is_palindrome_number(n: int) -> bool:
    """Return True if n reads the same with its digits reversed."""
    return n == reverse_digits(n)


def swap(first, second):
    """Return the two values in swapped order."""
    return second, first


def sum_natural(n: int) -> int:
    """Return 1 + 2 + ... + n."""
    if n < 0:
        raise ValueError("n must be a non-negative integer")
    return n * (n + 1) // 2