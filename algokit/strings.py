"""Puzzles over strings and characters."""

from __future__ import annotations

import string
from itertools import accumulate, pairwise, product
from math import gcd
from typing import Iterator, Sequence

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_ALPHABET = frozenset(string.ascii_lowercase)


def is_alien_sorted(words: Sequence[str], order: str) -> bool:
    """Tell whether ``words`` are sorted under the alphabet given by ``order``."""
    if len(order) != 26 or set(order) != _ALPHABET:
        raise ValueError("order must be a permutation of the 26 lowercase letters")
    rank = {letter: position for position, letter in enumerate(order)}
    try:
        keys = [[rank[letter] for letter in word] for word in words]
    except KeyError as error:
        raise ValueError(f"letter {error.args[0]!r} is not in the alphabet") from None
    return all(first <= second for first, second in pairwise(keys))


def make_strings_equal(s: str, target: str) -> bool:
    """Tell whether binary string ``s`` can be turned into ``target`` by the OR/XOR operation."""
    if len(s) != len(target):
        raise ValueError("strings must have the same length")
    if "1" not in target:
        return s == target
    return "1" in s


def gcd_of_strings(str1: str, str2: str) -> str:
    """Return the longest string that divides both ``str1`` and ``str2``."""
    if str1 + str2 != str2 + str1:
        return ""
    return str1[: gcd(len(str1), len(str2))]


def to_lower_case(s: str) -> str:
    """Lower-case the ASCII letters of ``s``, leaving everything else alone."""
    return s.translate(_ASCII_LOWER)


def min_flips_mono_incr(s: str) -> int:
    """Return the fewest flips that make binary string ``s`` monotone increasing."""
    ones = flips = 0
    for char in s:
        if char == "0":
            flips = min(flips + 1, ones)
        else:
            ones += 1
    return flips


def is_palindrome(s: str) -> bool:
    """Tell whether ``s`` reads the same backwards."""
    return s == s[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to cut ``s`` into palindromic pieces."""

    def split(start: int) -> Iterator[list[str]]:
        if start == len(s):
            yield []
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                for rest in split(end):
                    yield [piece, *rest]

    return list(split(0))


def _valid_octet(part: str) -> bool:
    value = int(part)
    return value < 256 and str(value) == part


def restore_ip_addresses(s: str) -> list[str]:
    """Return every dotted IPv4 address whose digits, dots removed, spell ``s``."""
    if any(char not in string.digits for char in s):
        raise ValueError("s must consist of decimal digits only")
    addresses = []
    for sizes in product(range(1, 4), repeat=4):
        if sum(sizes) != len(s):
            continue
        bounds = list(accumulate(sizes, initial=0))
        parts = [s[start:end] for start, end in pairwise(bounds)]
        if all(_valid_octet(part) for part in parts):
            addresses.append(".".join(parts))
    return addresses


def reverse_string(chars: list[str]) -> None:
    """Reverse the list of characters in place."""
    chars.reverse()