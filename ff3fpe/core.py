import logging

from ff3fpe.models import FF3Params
from ff3fpe.utils.domain import (
    check_alphabet, check_message_length, check_radix, key_variant, length_bounds
)
from ff3fpe.utils.encryption import (BlockOracle, feistel_decrypt, feistel_encrypt)
from ff3fpe.utils.tweak import (decode_hex, decode_tweak)

logger = logging.getLogger(__name__)

# -----------------------------
# FF3 Cipher
# -----------------------------
class FF3Cipher:
    """
    FF3 / FF3-1 format-preserving cipher bound to one (key, tweak, radix).

    Messages are strings over the first `radix` symbols of 0-9a-z; ciphertexts
    have the same length and alphabet. The instance is immutable once built and
    may be shared across threads: the AES oracle keeps no state between blocks,
    and per-call tweaks never touch the stored tweak.

    Args:
        key: AES key as hex (128, 192 or 256 bits)
        tweak: Tweak as hex, 56 bits (FF3-1) or 64 bits (FF3)
        radix: Alphabet size, 2..36
        params: FF3 constants

    Raises:
        InvalidHexEncoding, InvalidKeyLength, InvalidRadix, InvalidDomainBounds,
        InvalidTweakLength

    Cryptographic principles:
    - Tweakable block cipher: the tweak diversifies the permutation without
      being secret
    - Feistel network: invertible for any round function, so AES is only ever
      used in the encrypt direction
    - Domain size: radix^minLen >= 10^6 per SP 800-38G Rev 1
    """

    def __init__(self, key: str, tweak: str, radix: int = 10, params: FF3Params = FF3Params()):
        key_bytes = decode_hex(key, "key")
        self._key_bits = key_variant(key_bytes, params)
        check_radix(radix, params)
        self._min_len, self._max_len = length_bounds(radix, params)
        self._tweak = decode_tweak(tweak, params)
        self._radix = radix
        self._params = params
        self._oracle = BlockOracle(key_bytes, params)
        logger.debug("FF3Cipher AES-%d radix=%d length bounds [%d, %d]",
                     self._key_bits, radix, self._min_len, self._max_len)

    @property
    def radix(self) -> int:
        return self._radix

    @property
    def min_len(self) -> int:
        return self._min_len

    @property
    def max_len(self) -> int:
        return self._max_len

    @property
    def tweak(self) -> bytes:
        """Canonical 64-bit tweak."""
        return self._tweak

    @property
    def key_bits(self) -> int:
        return self._key_bits

    @property
    def params(self) -> FF3Params:
        return self._params

    def _validate(self, text: str):
        check_message_length(len(text), self._min_len, self._max_len)
        check_alphabet(text, self._radix)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt with the instance tweak."""
        return self._encrypt(plaintext, self._tweak)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt with the instance tweak."""
        return self._decrypt(ciphertext, self._tweak)

    def encrypt_with_tweak(self, plaintext: str, tweak: str) -> str:
        """Encrypt under a one-off hex tweak; the instance tweak is left untouched."""
        return self._encrypt(plaintext, decode_tweak(tweak, self._params))

    def decrypt_with_tweak(self, ciphertext: str, tweak: str) -> str:
        """Decrypt under a one-off hex tweak; the instance tweak is left untouched."""
        return self._decrypt(ciphertext, decode_tweak(tweak, self._params))

    def _encrypt(self, plaintext: str, tweak: bytes) -> str:
        self._validate(plaintext)
        return feistel_encrypt(self._oracle, self._radix, tweak, plaintext, self._params)

    def _decrypt(self, ciphertext: str, tweak: bytes) -> str:
        self._validate(ciphertext)
        return feistel_decrypt(self._oracle, self._radix, tweak, ciphertext, self._params)

    def __repr__(self):
        return (f"FF3Cipher(AES-{self._key_bits}, radix={self._radix}, "
                f"min_len={self._min_len}, max_len={self._max_len})")
