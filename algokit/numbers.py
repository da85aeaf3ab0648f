"""Small puzzles over integers and integer sequences."""

from __future__ import annotations

from functools import reduce
from math import prod
from operator import xor
from typing import Iterable


def add(num1: int, num2: int) -> int:
    """Return the sum of two integers."""
    return num1 + num2


def alternate_digit_sum(n: int) -> int:
    """Sum the decimal digits of ``n`` with alternating signs, the leading digit positive."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    return sum(
        int(digit) if position % 2 == 0 else -int(digit)
        for position, digit in enumerate(str(n))
    )


def distinct_integers(n: int) -> int:
    """Count the distinct numbers that end up on the board when starting from ``n``."""
    return 1 if n <= 2 else n - 1


def fib(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fib(0) == 0``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    previous, current = 0, 1
    if n == 0:
        return previous
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def _fizz_buzz_word(number: int) -> str:
    if number % 15 == 0:
        return "FizzBuzz"
    if number % 3 == 0:
        return "Fizz"
    if number % 5 == 0:
        return "Buzz"
    return str(number)


def fizz_buzz(n: int) -> list[str]:
    """Return the FizzBuzz words for the numbers 1 to ``n``."""
    return [_fizz_buzz_word(number) for number in range(1, n + 1)]


def count_odds(low: int, high: int) -> int:
    """Count the odd numbers in the closed interval ``[low, high]``."""
    return (high + 1) // 2 - low // 2


def number_of_steps(num: int) -> int:
    """Count the halvings and decrements that take ``num`` down to zero."""
    if num < 0:
        raise ValueError("num must be non-negative")
    steps = 0
    while num:
        num = num // 2 if num % 2 == 0 else num - 1
        steps += 1
    return steps


def subtract_product_and_sum(n: int) -> int:
    """Return the product of the digits of ``n`` minus their sum."""
    if n < 0:
        raise ValueError("n must be non-negative")
    digits = [int(digit) for digit in str(n)] if n else []
    return prod(digits) - sum(digits)


def array_sign(nums: Iterable[int]) -> int:
    """Return the sign (-1, 0 or 1) of the product of ``nums``."""
    negatives = 0
    for number in nums:
        if number == 0:
            return 0
        if number < 0:
            negatives += 1
    return -1 if negatives % 2 else 1


def single_number(nums: Iterable[int]) -> int:
    """Return the one value that appears once where every other appears twice."""
    return reduce(xor, nums, 0)