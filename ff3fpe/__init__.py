"""
ff3fpe - FF3 / FF3-1 Format-Preserving Encryption

Key Cryptographic Principles Documented:
Format-Preserving Encryption:

Ciphertext has the same length and alphabet as the plaintext
Messages are strings over the first radix symbols of 0-9a-z (radix 2..36)
Domain size radix^minLen is at least one million (SP 800-38G Rev 1)

Feistel Construction:

Eight alternating rounds over halves of length ceil(n/2) and floor(n/2)
Modular addition mod radix^m combines the round output with the other half
Decryption walks the same rounds backwards with subtraction

Round Function:

AES-128/192/256 applied to a single 128-bit block (ECB, no padding, no chaining)
Block input mixes one tweak half, the round index and the opposite half
Byte-reversed key, block and output as in the NIST reference orientation

Tweaks:

64-bit FF3 tweaks are used as is
56-bit FF3-1 tweaks are expanded to 64 bits with eight fixed zero bits

Messages longer than maxLen must be segmented by the caller.
"""
from ff3fpe.core import FF3Cipher
from ff3fpe.models import FF3Params
from ff3fpe.exceptions import (
    FF3Error, InvalidKeyLength, InvalidRadix, InvalidDomainBounds, InvalidTweakLength,
    InvalidMessageLength, InvalidDigitForRadix, ValueTooLarge, InvalidHexEncoding
)
from ff3fpe.utils.keygen import (generate_key, generate_tweak)

__all__ = [
    "FF3Cipher", "FF3Params",
    "FF3Error", "InvalidKeyLength", "InvalidRadix", "InvalidDomainBounds", "InvalidTweakLength",
    "InvalidMessageLength", "InvalidDigitForRadix", "ValueTooLarge", "InvalidHexEncoding",
    "generate_key", "generate_tweak",
]
