"""Command line front end for the number routines and the patterns."""

from __future__ import annotations

import argparse
import sys
from typing import Callable

from dsabasics import maths, recursion, star_patterns, text_patterns

PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "alpha-hill": text_patterns.alpha_hill,
    "alpha-ramp": text_patterns.alpha_ramp,
    "alpha-triangle": text_patterns.alpha_triangle,
    "binary-triangle": text_patterns.binary_triangle,
    "increasing-triangle": text_patterns.increasing_triangle,
    "letter-triangle": text_patterns.letter_triangle,
    "number-triangle": text_patterns.number_triangle,
    "number-crown": text_patterns.number_crown,
    "number-pattern": text_patterns.number_pattern,
    "reverse-letter-triangle": text_patterns.reverse_letter_triangle,
    "reverse-number-triangle": text_patterns.reverse_number_triangle,
    "triangle": text_patterns.row_triangle,
    "half-forest": star_patterns.half_forest,
    "hollow-rectangle": star_patterns.hollow_rectangle,
    "forest": star_patterns.forest,
    "reverse-star-triangle": star_patterns.reverse_star_triangle,
    "rotated-triangle": star_patterns.rotated_triangle,
    "seeding": star_patterns.seeding,
    "star-diamond": star_patterns.star_diamond,
    "star-triangle": star_patterns.star_triangle,
    "symmetric-void": star_patterns.symmetric_void,
    "symmetry": star_patterns.symmetry,
}


def _count_digits(args: argparse.Namespace) -> list[str]:
    n = args.n
    return [f"The number of digit(s) in number {n} is {maths.count_digits(n)}"]


def _reverse(args: argparse.Namespace) -> list[str]:
    n = args.n
    return [f"Reverse of Number {n} is {maths.reverse_number(n)}"]


def _palindrome(args: argparse.Namespace) -> list[str]:
    n = args.n
    verdict = "a Palindrome" if maths.is_palindrome(n) else "not a Palindrome."
    return [f"The Number {n} is {verdict}"]


def _gcd(args: argparse.Namespace) -> list[str]:
    a, b = args.a, args.b
    return [f"GCD or HCF of numbers {a} & {b} is {maths.gcd(a, b)}"]


def _divisors(args: argparse.Namespace) -> list[str]:
    n = args.n
    listed = " ".join(str(d) for d in maths.divisors(n))
    return [f"The Divisors of {n} are : {listed}"]


def _armstrong(args: argparse.Namespace) -> list[str]:
    n = args.n
    verdict = (
        "a Armstrong Number." if maths.is_armstrong(n) else "not a Armstrong Number."
    )
    return [f"The number {n} is {verdict}"]


def _prime(args: argparse.Namespace) -> list[str]:
    n = args.n
    verdict = "is a Prime number." if maths.is_prime(n) else "is not a Prime Number."
    return [f"The number {n} {verdict}"]


def _factorial(args: argparse.Namespace) -> list[str]:
    n = args.n
    return [f"The factorial of {n} is {recursion.factorial(n)}"]


def _sum(args: argparse.Namespace) -> list[str]:
    n = args.n
    return [f"The sum for first {n} natural number is {recursion.sum_natural(n)}"]


def _pattern(args: argparse.Namespace) -> list[str]:
    return PATTERNS[args.name](args.n)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsabasics",
        description="Basic number routines and printed patterns.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    single = {
        "count-digits": (_count_digits, "number of decimal digits"),
        "reverse": (_reverse, "reverse the digits of a number"),
        "palindrome": (_palindrome, "check whether a number is a palindrome"),
        "divisors": (_divisors, "list all divisors of a number"),
        "armstrong": (_armstrong, "check whether a number is an Armstrong number"),
        "prime": (_prime, "check whether a number is prime"),
        "factorial": (_factorial, "factorial of a positive number"),
        "sum": (_sum, "sum of the first N natural numbers"),
    }
    for name, (handler, help_text) in single.items():
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("n", type=int)
        sub.set_defaults(handler=handler)

    gcd_parser = commands.add_parser("gcd", help="greatest common divisor")
    gcd_parser.add_argument("a", type=int)
    gcd_parser.add_argument("b", type=int)
    gcd_parser.set_defaults(handler=_gcd)

    pattern_parser = commands.add_parser("pattern", help="print a pattern")
    pattern_parser.add_argument("name", choices=sorted(PATTERNS))
    pattern_parser.add_argument("n", type=int)
    pattern_parser.set_defaults(handler=_pattern)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        lines = args.handler(args)
    except ValueError as exc:
        print(f"dsabasics: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())