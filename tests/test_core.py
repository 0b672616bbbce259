import random
import string
from concurrent.futures import ThreadPoolExecutor

import pytest

from ff3fpe import (
    FF3Cipher, FF3Error, InvalidDigitForRadix, InvalidHexEncoding, InvalidKeyLength,
    InvalidMessageLength, InvalidRadix, InvalidTweakLength
)

KEY128 = "EF4359D8D580AA4F7F036D6F04FC6A94"
KEY192 = "EF4359D8D580AA4F7F036D6F04FC6A942B7E151628AED2A6"
KEY256 = "EF4359D8D580AA4F7F036D6F04FC6A942B7E151628AED2A6ABF7158809CF4F3C"

# NIST FF3 samples (ff3samples.pdf) and the FF3-1 56-bit tweak sample
VECTORS = [
    (KEY128, "D8E7920AFA330A73", 10, "890121234567890000", "750918814058654607"),
    (KEY128, "9A768A92F60E12D8", 10, "890121234567890000", "018989839189395384"),
    (KEY128, "D8E7920AFA330A73", 10, "89012123456789000000789000000", "48598367162252569629397416226"),
    (KEY128, "0000000000000000", 10, "89012123456789000000789000000", "34695224821734535122613701434"),
    (KEY128, "9A768A92F60E12D8", 26, "0123456789abcdefghi", "g2pk40i992fn20cjakb"),
    (KEY192, "D8E7920AFA330A73", 10, "890121234567890000", "646965393875028755"),
    (KEY192, "9A768A92F60E12D8", 10, "890121234567890000", "961610514491424446"),
    (KEY192, "D8E7920AFA330A73", 10, "89012123456789000000789000000", "53048884065350204541786380807"),
    (KEY192, "0000000000000000", 10, "89012123456789000000789000000", "98083802678820389295041483512"),
    (KEY192, "9A768A92F60E12D8", 26, "0123456789abcdefghi", "i0ihe2jfj7a9opf9p88"),
    (KEY256, "D8E7920AFA330A73", 10, "890121234567890000", "922011205562777495"),
    (KEY256, "9A768A92F60E12D8", 10, "890121234567890000", "504149865578056140"),
    (KEY256, "D8E7920AFA330A73", 10, "89012123456789000000789000000", "04344343235792599165734622699"),
    (KEY256, "0000000000000000", 10, "89012123456789000000789000000", "30859239999374053872365555822"),
    (KEY256, "9A768A92F60E12D8", 26, "0123456789abcdefghi", "p0b2godfja9bhb7bk38"),
    (KEY128, "D8E7920AFA330A", 10, "890121234567890000", "477064185124354662"),
]


@pytest.mark.parametrize("key,tweak,radix,plaintext,ciphertext", VECTORS)
def test_nist_vectors(key, tweak, radix, plaintext, ciphertext):
    c = FF3Cipher(key, tweak, radix)
    assert c.encrypt(plaintext) == ciphertext
    assert c.decrypt(ciphertext) == plaintext


@pytest.mark.parametrize("radix,min_len,max_len", [(10, 6, 56), (26, 5, 40), (36, 4, 36)])
def test_domain_bounds(radix, min_len, max_len):
    c = FF3Cipher(KEY128, "D8E7920AFA330A73", radix)
    assert (c.min_len, c.max_len) == (min_len, max_len)


def test_key_sizes():
    assert FF3Cipher(KEY128, "D8E7920AFA330A73").key_bits == 128
    assert FF3Cipher(KEY192, "D8E7920AFA330A73").key_bits == 192
    assert FF3Cipher(KEY256, "D8E7920AFA330A73").key_bits == 256


def test_round_trip_every_radix_at_both_bounds():
    rng = random.Random(42)
    symbols = string.digits + string.ascii_lowercase
    for radix in range(2, 37):
        c = FF3Cipher(KEY256, "D8E7920AFA330A", radix)
        for n in (c.min_len, c.min_len + 1, c.max_len - 1, c.max_len):
            plaintext = "".join(rng.choice(symbols[:radix]) for _ in range(n))
            ciphertext = c.encrypt(plaintext)
            assert len(ciphertext) == n
            assert set(ciphertext) <= set(symbols[:radix])
            assert c.decrypt(ciphertext) == plaintext


def test_deterministic():
    a = FF3Cipher(KEY128, "9A768A92F60E12D8", 26)
    b = FF3Cipher(KEY128, "9A768A92F60E12D8", 26)
    assert a.encrypt("0123456789abcdefghi") == a.encrypt("0123456789abcdefghi")
    assert a.encrypt("0123456789abcdefghi") == b.encrypt("0123456789abcdefghi")


def test_message_length_bounds():
    c = FF3Cipher(KEY128, "D8E7920AFA330A73")
    with pytest.raises(InvalidMessageLength):
        c.encrypt("1" * (c.min_len - 1))
    with pytest.raises(InvalidMessageLength):
        c.encrypt("1" * (c.max_len + 1))
    with pytest.raises(InvalidMessageLength):
        c.decrypt("1" * (c.max_len + 1))


@pytest.mark.parametrize("radix", [1, 37])
def test_invalid_radix(radix):
    with pytest.raises(InvalidRadix):
        FF3Cipher(KEY128, "D8E7920AFA330A73", radix)


def test_invalid_key_length():
    with pytest.raises(InvalidKeyLength):
        FF3Cipher("00" * 20, "D8E7920AFA330A73")


def test_invalid_hex():
    with pytest.raises(InvalidHexEncoding):
        FF3Cipher("not a key", "D8E7920AFA330A73")
    with pytest.raises(InvalidHexEncoding):
        FF3Cipher(KEY128, "D8E7920AFA330AZZ")


@pytest.mark.parametrize("tweak", ["", "D8E7920AFA33", "D8E7920AFA330A7300"])
def test_invalid_tweak_length(tweak):
    with pytest.raises(InvalidTweakLength):
        FF3Cipher(KEY128, tweak)


@pytest.mark.parametrize("text", ["89012123456789000a", "89012123456789000 ", "8901212345678900０0"])
def test_symbols_outside_radix_are_rejected(text):
    c = FF3Cipher(KEY128, "D8E7920AFA330A73")
    with pytest.raises(InvalidDigitForRadix):
        c.encrypt(text)
    with pytest.raises(InvalidDigitForRadix):
        c.decrypt(text)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        FF3Cipher(KEY128, "D8E7920AFA330A73", 99)
    assert issubclass(InvalidRadix, FF3Error)


def test_per_call_tweak_does_not_mutate_instance():
    c = FF3Cipher(KEY128, "9A768A92F60E12D8")
    assert c.encrypt_with_tweak("890121234567890000", "D8E7920AFA330A73") == "750918814058654607"
    assert c.decrypt_with_tweak("477064185124354662", "D8E7920AFA330A") == "890121234567890000"
    assert c.tweak == bytes.fromhex("9A768A92F60E12D8")
    assert c.encrypt("890121234567890000") == "018989839189395384"
    with pytest.raises(InvalidTweakLength):
        c.encrypt_with_tweak("890121234567890000", "D8E7")


def test_concurrent_calls_with_tweak_overrides():
    c = FF3Cipher(KEY128, "D8E7920AFA330A73")
    jobs = [("890121234567890000", "9A768A92F60E12D8", "018989839189395384"),
            ("890121234567890000", "D8E7920AFA330A73", "750918814058654607"),
            ("890121234567890000", "D8E7920AFA330A", "477064185124354662")] * 20

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda job: c.encrypt_with_tweak(job[0], job[1]), jobs))

    assert results == [expected for _, _, expected in jobs]
    assert c.encrypt("890121234567890000") == "750918814058654607"


def test_repr_hides_key():
    c = FF3Cipher(KEY128, "D8E7920AFA330A73")
    assert "AES-128" in repr(c)
    assert KEY128.lower() not in repr(c).lower()
