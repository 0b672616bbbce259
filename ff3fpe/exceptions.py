"""
Errors raised by the FF3 cipher.

Every error is a caller input error detected before any round runs, so all of
them derive from ValueError and none is ever retried.
"""


class FF3Error(ValueError):
    """Base class for every FF3 validation failure."""


class InvalidKeyLength(FF3Error):
    """Key is not 128, 192 or 256 bits."""


class InvalidRadix(FF3Error):
    """Radix outside the supported range."""


class InvalidDomainBounds(FF3Error):
    """Radix yields an unusable [minLen, maxLen] message length range."""


class InvalidTweakLength(FF3Error):
    """Tweak is neither 56 nor 64 bits."""


class InvalidMessageLength(FF3Error):
    """Message length outside [minLen, maxLen]."""


class InvalidDigitForRadix(FF3Error):
    """Message contains a symbol outside the radix alphabet."""


class ValueTooLarge(FF3Error):
    """Integer does not fit in the requested number of digits."""


class InvalidHexEncoding(FF3Error):
    """Key or tweak is not a valid hex string."""
