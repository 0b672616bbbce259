from ff3fpe.core import FF3Cipher
from ff3fpe.models import bcolors
from ff3fpe.utils.domain import (check_radix, length_bounds)
from ff3fpe.utils.keygen import (generate_key, generate_tweak)

# -----------------------------
# Interactive Configuration Helpers
# -----------------------------
def options():
    """
    Prompt for the cipher configuration shared by encrypt and decrypt.

    Returns:
        Tuple of (key, tweak, radix)
    """
    key = input("Key (hex, 128/192/256 bits): ").strip()
    tweak = input("Tweak (hex, 56 or 64 bits): ").strip()
    radix = int(input("Radix (default 10): ").strip() or 10)
    return key, tweak, radix

# -----------------------------
# Menu Actions
# -----------------------------
def menu_encrypt():
    """
    Interactive FF3 encryption of a single message.

    Cryptographic principles:
    - Format preservation: ciphertext keeps the length and alphabet of the input
    """
    key, tweak, radix = options()
    c = FF3Cipher(key, tweak, radix)
    plaintext = input(f"Plaintext ({c.min_len}..{c.max_len} symbols): ").strip()
    print(f"{bcolors.OKGREEN}Ciphertext:{bcolors.ENDC} {c.encrypt(plaintext)}")

def menu_decrypt():
    """Interactive FF3 decryption of a single message."""
    key, tweak, radix = options()
    c = FF3Cipher(key, tweak, radix)
    ciphertext = input(f"Ciphertext ({c.min_len}..{c.max_len} symbols): ").strip()
    print(f"{bcolors.OKGREEN}Plaintext:{bcolors.ENDC} {c.decrypt(ciphertext)}")

def menu_bounds():
    radix = int(input("Radix (default 10): ").strip() or 10)
    check_radix(radix)
    min_len, max_len = length_bounds(radix)
    print(f"Radix {radix}: messages of {min_len} to {max_len} symbols")

def menu_generate_key():
    """
    Interactive key and tweak generation.

    Keys are printed, never stored: key storage is left to the caller.
    """
    bits = int(input("Key size in bits (128/192/256) [256]: ").strip() or 256)
    ff3_1 = (input("Use 56-bit FF3-1 tweak? (y/n) [y]: ").strip().lower() or "y") == "y"
    print(f"{bcolors.BOLD}Key:{bcolors.ENDC}   {generate_key(bits)}")
    print(f"{bcolors.BOLD}Tweak:{bcolors.ENDC} {generate_tweak(ff3_1)}")
