import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.strings import (
    gcd_of_strings,
    is_alien_sorted,
    is_palindrome,
    make_strings_equal,
    min_flips_mono_incr,
    palindrome_partitions,
    restore_ip_addresses,
    reverse_string,
    to_lower_case,
)

lower_words = st.lists(st.text(alphabet="abcde", max_size=5), max_size=8)
binary = st.text(alphabet="01", max_size=30)


@given(lower_words)
def test_alien_sorted_with_plain_alphabet(words):
    assert is_alien_sorted(words, string.ascii_lowercase) == (words == sorted(words))


@given(st.text(alphabet="abc", min_size=3, max_size=3), st.text(alphabet="abc", min_size=3, max_size=3))
def test_alien_sorted_reversed_alphabet_swaps_answer(first, second):
    words = [first, second]
    forward = is_alien_sorted(words, string.ascii_lowercase)
    backward = is_alien_sorted(words, string.ascii_lowercase[::-1])
    if first == second:
        assert forward and backward
    else:
        assert forward != backward


@pytest.mark.parametrize("order", ["abc", string.ascii_lowercase[:-1] + "a"])
def test_alien_sorted_rejects_bad_order(order):
    with pytest.raises(ValueError):
        is_alien_sorted(["a", "b"], order)


def test_alien_sorted_rejects_unknown_letter():
    with pytest.raises(ValueError):
        is_alien_sorted(["A", "b"], string.ascii_lowercase)


@given(binary)
def test_make_strings_equal_same_string(s):
    assert make_strings_equal(s, s) is True


@given(st.integers(min_value=1, max_value=20))
def test_make_strings_equal_cannot_clear_all_ones(n):
    assert make_strings_equal("1" * n, "0" * n) is False
    assert make_strings_equal("0" * n, "1" * n) is False


def test_make_strings_equal_length_mismatch():
    with pytest.raises(ValueError):
        make_strings_equal("10", "1")


def test_gcd_of_strings_divisor():
    assert gcd_of_strings("ABCABC", "ABC") == "ABC"


def test_gcd_of_strings_none():
    assert gcd_of_strings("LEET", "CODE") == ""


@given(st.text(alphabet="ab", min_size=1, max_size=3), st.integers(1, 6), st.integers(1, 6))
def test_gcd_of_strings_divides_both(base, a, b):
    str1, str2 = base * a, base * b
    result = gcd_of_strings(str1, str2)
    assert result
    assert result * (len(str1) // len(result)) == str1
    assert result * (len(str2) // len(result)) == str2


@given(st.text(alphabet=string.printable))
def test_to_lower_case_ascii(s):
    assert to_lower_case(s) == s.lower()


def test_to_lower_case_leaves_non_ascii():
    assert to_lower_case("ÄÖ") == "ÄÖ"


@given(binary)
def test_min_flips_matches_best_split(s):
    best = min(s[:cut].count("1") + s[cut:].count("0") for cut in range(len(s) + 1))
    assert min_flips_mono_incr(s) == best


@given(st.integers(0, 10), st.integers(0, 10))
def test_min_flips_sorted_string(zeros, ones):
    assert min_flips_mono_incr("0" * zeros + "1" * ones) == 0


@given(st.text(alphabet="abc", max_size=10))
def test_is_palindrome_mirror(s):
    assert is_palindrome(s + s[::-1])
    assert is_palindrome(s + "x" + s[::-1])


def test_palindrome_partitions_example():
    assert palindrome_partitions("aab") == [["a", "a", "b"], ["aa", "b"]]


@given(st.text(alphabet="ab", max_size=8))
def test_palindrome_partitions_are_valid(s):
    partitions = palindrome_partitions(s)
    assert partitions[0] == list(s)
    for pieces in partitions:
        assert "".join(pieces) == s
        assert all(is_palindrome(piece) for piece in pieces)
    assert len({tuple(p) for p in partitions}) == len(partitions)


def test_restore_ip_addresses_example():
    assert restore_ip_addresses("25525511135") == ["255.255.11.135", "255.255.111.35"]


def test_restore_ip_addresses_zeros():
    assert restore_ip_addresses("0000") == ["0.0.0.0"]


@given(st.lists(st.integers(0, 255), min_size=4, max_size=4))
def test_restore_ip_addresses_round_trip(octets):
    address = ".".join(map(str, octets))
    digits = address.replace(".", "")
    results = restore_ip_addresses(digits)
    assert address in results
    for result in results:
        parts = result.split(".")
        assert "".join(parts) == digits
        assert all(str(int(part)) == part and int(part) < 256 for part in parts)


def test_restore_ip_addresses_rejects_non_digits():
    with pytest.raises(ValueError):
        restore_ip_addresses("1a2b")


@given(st.lists(st.characters(), max_size=20))
def test_reverse_string_in_place(chars):
    original = list(chars)
    assert reverse_string(chars) is None
    assert chars == original[::-1]
    reverse_string(chars)
    assert chars == original