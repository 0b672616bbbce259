import logging
import math

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ff3fpe.models import FF3Params
from ff3fpe.utils.radix import (reverse, to_digit_string, to_fixed_bytes, to_integer)
from ff3fpe.utils.tweak import split

logger = logging.getLogger(__name__)

# -----------------------------
# Block Permutation Oracle
# -----------------------------
def aes_ecb_encrypt(key: bytes, block: bytes, block_size: int = 16) -> bytes:
    """
    Encrypt exactly one block with AES in ECB mode.

    ECB over a single block is the raw AES permutation: no padding, no IV and
    no chaining, so the output is a pure function of (key, block).

    Args:
        key: 16, 24 or 32-byte AES key
        block: Plaintext block, exactly block_size bytes

    Returns:
        Ciphertext block of the same size
    """
    if len(block) != block_size:
        raise ValueError(f"Data must be exactly {block_size} bytes for AES ECB encryption")
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(block) + encryptor.finalize()

class BlockOracle:
    """
    AES keyed permutation bound to one FF3 key.

    FF3 applies AES to the byte-reversed key (REVB(K) in the reference
    orientation). A fresh encryptor context is created for every block, so
    nothing buffered for one block can reach the next and a single oracle can
    be shared by concurrent calls.
    """

    def __init__(self, key: bytes, params: FF3Params = FF3Params()):
        self._key = reverse(bytes(key))
        self._block_size = params.block_size

    def encrypt_block(self, block: bytes) -> bytes:
        return aes_ecb_encrypt(self._key, block, self._block_size)

# -----------------------------
# Round Function
# -----------------------------
def calculate_p(i: int, radix: int, W: bytes, B: str, params: FF3Params = FF3Params()) -> bytes:
    """
    Build the 16-byte round input P = (W xor [i]^4) || [NUM_radix(REV(B))]^12.

    The round index fits in one byte and the other three bytes of [i]^4 are
    zero, so only the last tweak-half byte is XORed.

    Args:
        i: Round index (0..7)
        radix: Message radix
        W: Tweak half for this round (Tr on even rounds, Tl on odd)
        B: Half-string that is not updated this round

    Returns:
        Round block in big-endian orientation
    """
    P = bytearray(params.block_size)
    P[0] = W[0]
    P[1] = W[1]
    P[2] = W[2]
    P[3] = W[3] ^ i

    BBytes = to_fixed_bytes(to_integer(reverse(B), radix))
    P[params.block_size - len(BBytes):] = BBytes
    return bytes(P)

def round_function(oracle: BlockOracle, i: int, radix: int, W: bytes, B: str, other: str, m: int,
                   decrypt: bool = False, params: FF3Params = FF3Params()) -> str:
    """
    One FF3 Feistel round: derive y from B and fold it into `other`.

    Steps:
        S = REVB(CIPH(REVB(P)))
        y = NUM(S)
        c = (NUM_radix(REV(other)) +/- y) mod radix^m
        C = REV(STR^m_radix(c))

    Python's % with a positive modulus always returns a nonnegative remainder,
    which is what the decryption subtraction needs.

    Returns:
        The new half-string C, m symbols long
    """
    P = calculate_p(i, radix, W, B, params)
    S = reverse(oracle.encrypt_block(reverse(P)))
    y = int.from_bytes(S, "big")

    c = to_integer(reverse(other), radix)
    c = c - y if decrypt else c + y
    c %= radix ** m

    C = reverse(to_digit_string(c, radix, m))
    logger.debug("round %d: W=%s B=%s c=%d C=%s", i, W.hex(), B, c, C)
    return C

# -----------------------------
# Feistel Engine
# -----------------------------
def _round_params(i: int, u: int, v: int, Tl: bytes, Tr: bytes) -> tuple[int, bytes]:
    # Even rounds rewrite the u-long half under Tr, odd rounds the v-long half under Tl
    if i % 2 == 0:
        return u, Tr
    return v, Tl

def feistel_encrypt(oracle: BlockOracle, radix: int, tweak: bytes, plaintext: str,
                    params: FF3Params = FF3Params()) -> str:
    """
    FF3 encryption: eight alternating Feistel rounds with modular addition.

    Let u = ceil(n/2), v = n - u, A = X[1..u], B = X[u+1..n]
    for i <- 0..7:
        C = round(i, B, A)
        A, B = B, C
    return A || B

    Inputs must already be validated; this function cannot fail on valid input.
    """
    n = len(plaintext)
    u = math.ceil(n / 2)
    v = n - u
    A, B = plaintext[:u], plaintext[u:]
    Tl, Tr = split(tweak)
    logger.debug("encrypt n=%d u=%d v=%d Tl=%s Tr=%s", n, u, v, Tl.hex(), Tr.hex())

    for i in range(params.rounds):
        m, W = _round_params(i, u, v, Tl, Tr)
        C = round_function(oracle, i, radix, W, B, A, m, decrypt=False, params=params)
        A, B = B, C
    return A + B

def feistel_decrypt(oracle: BlockOracle, radix: int, tweak: bytes, ciphertext: str,
                    params: FF3Params = FF3Params()) -> str:
    """
    FF3 decryption, the exact inverse of feistel_encrypt.

    Same round function with (1) subtraction in place of addition and
    (2) the round indices walked from 7 down to 0.
    """
    n = len(ciphertext)
    u = math.ceil(n / 2)
    v = n - u
    A, B = ciphertext[:u], ciphertext[u:]
    Tl, Tr = split(tweak)
    logger.debug("decrypt n=%d u=%d v=%d Tl=%s Tr=%s", n, u, v, Tl.hex(), Tr.hex())

    for i in reversed(range(params.rounds)):
        m, W = _round_params(i, u, v, Tl, Tr)
        C = round_function(oracle, i, radix, W, A, B, m, decrypt=True, params=params)
        B, A = A, C
    return A + B
