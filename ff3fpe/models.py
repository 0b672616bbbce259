from dataclasses import dataclass

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    HEADER = '\033[95m'
    OKBLUE = '\033[94m'
    OKCYAN = '\033[96m'
    OKGREEN = '\033[92m'
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'
    UNDERLINE = '\033[4m'

# -----------------------------
# Core Parameters
# -----------------------------
@dataclass(frozen=True)
class FF3Params:
    """
    Fixed parameters of the FF3 / FF3-1 construction.

    FF3 is an alternating Feistel network over strings in a given radix:
    - Eight rounds, each one AES encryption of a single 128-bit block
    - 64-bit tweak (FF3) or 56-bit tweak (FF3-1) split into two halves
    - Modular addition of the round output onto the half being replaced

    Every cipher instance carries its own copy, so no module-level constant
    changes the behaviour of an existing instance.
    """
    domain_min: int = 1_000_000  # radix^minLen must reach one million (SP 800-38G Rev 1)
    rounds: int = 8  # Feistel rounds
    block_size: int = 16  # AES block size in bytes
    tweak_len: int = 8  # FF3 64-bit tweak
    tweak_len_ff3_1: int = 7  # FF3-1 56-bit tweak
    max_half_bits: int = 96  # round block bits left for the half-value
    min_radix: int = 2
    max_radix: int = 36  # digits + lowercase latin
    key_lengths: tuple = (16, 24, 32)  # AES-128, AES-192, AES-256
