"""CLI entry point for pysequent.

Usage::

    pysequent parse "~ (the cat is on the mat)"
    pysequent decompose "A & B |~ B & A"
    pysequent prove "A > B, A |~ B"
    pysequent repl
"""

from __future__ import annotations

import argparse
import sys

from pysequent._version import __version__


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the ``pysequent`` CLI."""
    parser = argparse.ArgumentParser(
        prog="pysequent",
        description="pysequent — first-order sequent calculus decomposition",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- parse ---
    parse_parser = subparsers.add_parser("parse", help="Parse and describe a proposition")
    parse_parser.add_argument("--json", action="store_true", help="Emit JSON output")
    parse_parser.add_argument("proposition", help='Proposition, e.g. "A & B" (or - for stdin)')

    # --- decompose ---
    decompose_parser = subparsers.add_parser("decompose", help="Apply one decomposition step")
    decompose_parser.add_argument("--json", action="store_true", help="Emit JSON output")
    decompose_parser.add_argument("sequent", help='Sequent: "A, B |~ C, D" (or - for stdin)')

    # --- prove ---
    prove_parser = subparsers.add_parser("prove", help="Search for a proof of a sequent")
    prove_parser.add_argument("--trace", action="store_true", help="Print proof trace")
    prove_parser.add_argument("--max-depth", type=int, default=25, help="Max proof depth (default: 25)")
    prove_parser.add_argument("--json", action="store_true", help="Emit JSON output")
    prove_parser.add_argument("-q", "--quiet", action="store_true", help="Print nothing; use the exit code")
    prove_parser.add_argument("sequent", help='Sequent: "A, B |~ C, D" (or - for stdin)')

    # --- repl ---
    repl_parser = subparsers.add_parser("repl", help="Interactive REPL")
    repl_parser.add_argument("--max-depth", type=int, default=25, help="Max proof depth (default: 25)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "parse":
        from pysequent.cli.parse import run_parse
        return run_parse(args)
    elif args.command == "decompose":
        from pysequent.cli.decompose import run_decompose
        return run_decompose(args)
    elif args.command == "prove":
        from pysequent.cli.prove import run_prove
        return run_prove(args)
    elif args.command == "repl":
        from pysequent.cli.repl import run_repl
        return run_repl(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
