import pytest

from ff3fpe.exceptions import (
    InvalidDigitForRadix, InvalidDomainBounds, InvalidKeyLength, InvalidMessageLength, InvalidRadix
)
from ff3fpe.models import FF3Params
from ff3fpe.utils.domain import (
    check_alphabet, check_message_length, check_radix, key_variant, length_bounds
)


@pytest.mark.parametrize("radix,bounds", [(10, (6, 56)), (26, (5, 40)), (36, (4, 36)), (2, (20, 192)), (16, (5, 48))])
def test_length_bounds(radix, bounds):
    assert length_bounds(radix) == bounds


def test_length_bounds_hold_domain_invariants():
    for radix in range(2, 37):
        min_len, max_len = length_bounds(radix)
        assert radix ** min_len >= 1_000_000 > radix ** (min_len - 1)
        assert radix ** (max_len // 2) <= 2 ** 96 < radix ** (max_len // 2 + 1)


def test_length_bounds_invalid_domain():
    # a domain minimum this small leaves minLen below 2
    with pytest.raises(InvalidDomainBounds):
        length_bounds(10, FF3Params(domain_min=10))
    with pytest.raises(InvalidRadix):
        length_bounds(1)


@pytest.mark.parametrize("length,bits", [(16, 128), (24, 192), (32, 256)])
def test_key_variant(length, bits):
    assert key_variant(bytes(length)) == bits


@pytest.mark.parametrize("length", [0, 15, 20, 33])
def test_key_variant_rejects(length):
    with pytest.raises(InvalidKeyLength):
        key_variant(bytes(length))


@pytest.mark.parametrize("radix", [1, 37, 0, -10, "10", 10.0, True])
def test_check_radix_rejects(radix):
    with pytest.raises(InvalidRadix):
        check_radix(radix)


def test_check_radix_accepts_range():
    for radix in range(2, 37):
        check_radix(radix)


def test_check_message_length():
    check_message_length(6, 6, 56)
    check_message_length(56, 6, 56)
    with pytest.raises(InvalidMessageLength):
        check_message_length(5, 6, 56)
    with pytest.raises(InvalidMessageLength):
        check_message_length(57, 6, 56)


def test_check_alphabet():
    check_alphabet("0123456789", 10)
    check_alphabet("0123456789abcdefghi", 26)
    with pytest.raises(InvalidDigitForRadix):
        check_alphabet("12345a", 10)
    with pytest.raises(InvalidDigitForRadix):
        check_alphabet("ABCDEF", 36)
