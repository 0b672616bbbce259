import os
import sys
import logging
import argparse
from ff3fpe.core import FF3Cipher
from ff3fpe.models import bcolors
from ff3fpe.utils.domain import (check_radix, length_bounds)
from ff3fpe.utils.keygen import (generate_key, generate_tweak)
from ff3fpe.utils.menu import (menu_encrypt, menu_decrypt, menu_bounds, menu_generate_key)

def build_parser():
    parser = argparse.ArgumentParser(description="FF3-1 Format-Preserving Encryption")
    parser.add_argument("--verbose", action="store_true", help="Log Feistel round details")
    subparsers = parser.add_subparsers(dest="command")

    for command, verb in (("encrypt", "Encrypt"), ("decrypt", "Decrypt")):
        sub = subparsers.add_parser(command, help=f"{verb} digit strings")
        sub.add_argument("--key", required=True, help="AES key (hex, 128/192/256 bits)")
        sub.add_argument("--tweak", required=True, help="Tweak (hex, 56 or 64 bits)")
        sub.add_argument("--radix", type=int, default=10, help="Alphabet size 2..36")
        sub.add_argument("text", nargs="+", help="Messages in the radix alphabet")

    bounds_parser = subparsers.add_parser("bounds", help="Show supported message lengths")
    bounds_parser.add_argument("--radix", type=int, default=10)

    key_parser = subparsers.add_parser("generate_key", help="Generate a random AES key")
    key_parser.add_argument("--bits", type=int, choices=[128, 192, 256], default=256)

    tweak_parser = subparsers.add_parser("generate_tweak", help="Generate a random tweak")
    tweak_parser.add_argument("--ff3", action="store_true", help="64-bit FF3 tweak instead of 56-bit FF3-1")
    return parser

def interactive():
    _=os.system("cls") | os.system("clear")
    while True:
        print(f"{bcolors.WARNING}{bcolors.BOLD}FF3-1 Format-Preserving Encryption{bcolors.ENDC}")
        print(f"{bcolors.GREY}{bcolors.BOLD}(]≡≡≡≡ø‡»{bcolors.OKCYAN}========================================-{bcolors.ENDC}")
        print("")
        print(f"{bcolors.BOLD}1){bcolors.ENDC} Encrypt")
        print(f"{bcolors.BOLD}2){bcolors.ENDC} Decrypt")
        print(f"{bcolors.BOLD}3){bcolors.ENDC} Show message length bounds for a radix")
        print(f"{bcolors.BOLD}4){bcolors.ENDC} Generate key and tweak")
        print(f"{bcolors.BOLD}0){bcolors.ENDC} Exit")
        print("")
        choice = input(f"{bcolors.BOLD}Choice: {bcolors.ENDC}").strip()
        try:
            match choice:
                case "0":
                    break
                case "1":
                    menu_encrypt()
                case "2":
                    menu_decrypt()
                case "3":
                    menu_bounds()
                case "4":
                    menu_generate_key()
                case _:
                    print("Invalid choice")
        except ValueError as e:
            print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        _=input(f"{bcolors.OKGREEN}Enter to continue...{bcolors.ENDC}")
        _=os.system("cls") | os.system("clear")

def main(argv=None):
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        match args.command:
            case "encrypt":
                c = FF3Cipher(args.key, args.tweak, args.radix)
                for text in args.text:
                    print(c.encrypt(text))
            case "decrypt":
                c = FF3Cipher(args.key, args.tweak, args.radix)
                for text in args.text:
                    print(c.decrypt(text))
            case "bounds":
                check_radix(args.radix)
                min_len, max_len = length_bounds(args.radix)
                print(f"radix {args.radix}: min {min_len} max {max_len}")
            case "generate_key":
                print(generate_key(args.bits))
            case "generate_tweak":
                print(generate_tweak(ff3_1=not args.ff3))
            case _:
                interactive()
    except ValueError as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC}", e)
        sys.exit(1)

if __name__ == "__main__":
    main()
