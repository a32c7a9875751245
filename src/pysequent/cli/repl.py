"""``pysequent repl`` subcommand — interactive REPL."""

from __future__ import annotations

import argparse
import logging

from pysequent.cli.output import format_branch, format_proposition
from pysequent.decompose import decompose
from pysequent.prover import SequentProver
from pysequent.sequent import parse_sequent
from pysequent.syntax import parse_proposition

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands:
  parse P             Parse a proposition and show its structure
  decompose A |~ B    Apply one decomposition step to a sequent
  prove A |~ B        Search for a proof of a sequent
  trace on/off        Toggle proof trace display
  help                Show this help
  quit                Exit the REPL
"""


def run_repl(args: argparse.Namespace) -> int:
    """Execute the ``repl`` subcommand."""
    max_depth = getattr(args, "max_depth", 25)
    print("pysequent REPL. Type 'help' for commands.\n")

    show_trace = False

    try:
        while True:
            try:
                line = input("pysequent> ").strip()
            except EOFError:
                print()
                break

            if not line:
                continue

            if line in ("quit", "exit"):
                break

            if line == "help":
                print(HELP_TEXT)
                continue

            if line.startswith("trace "):
                val = line[6:].strip().lower()
                if val == "on":
                    show_trace = True
                    print("Trace: ON")
                elif val == "off":
                    show_trace = False
                    print("Trace: OFF")
                else:
                    print("Usage: trace on/off")
                continue

            if line.startswith("parse "):
                try:
                    for out in format_proposition(parse_proposition(line[6:])):
                        print(out)
                except ValueError as e:
                    print(f"Error: {e}")
                continue

            if line.startswith("decompose "):
                try:
                    sequent = parse_sequent(line[10:])
                    for out in format_branch(sequent, decompose(sequent)):
                        print(out)
                except ValueError as e:
                    print(f"Error: {e}")
                continue

            if line.startswith("prove "):
                try:
                    result = SequentProver(max_depth=max_depth).proves(line[6:])
                    print("PROVABLE" if result.provable else "NOT PROVABLE")
                    if show_trace:
                        for tline in result.trace:
                            print(f"  {tline}")
                        print(f"  Depth: {result.depth_reached}, Cache hits: {result.cache_hits}")
                except ValueError as e:
                    print(f"Error: {e}")
                continue

            print(f"Unknown command: {line!r}. Type 'help' for commands.")

    except KeyboardInterrupt:
        print("\nInterrupted.")

    return 0
