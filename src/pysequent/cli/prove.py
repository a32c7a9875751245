"""``pysequent prove`` subcommand — search for a proof of a sequent."""

from __future__ import annotations

import argparse
import logging
import sys

from pysequent.cli.exitcodes import EXIT_ERROR, EXIT_NOT_PROVABLE, EXIT_SUCCESS
from pysequent.cli.output import emit_error, emit_json, prove_response
from pysequent.prover import SequentProver
from pysequent.sequent import parse_sequent

logger = logging.getLogger(__name__)


def run_prove(args: argparse.Namespace) -> int:
    """Execute the ``prove`` subcommand."""
    json_mode = getattr(args, "json", False)
    quiet = getattr(args, "quiet", False)
    text = args.sequent
    if text == "-":
        text = sys.stdin.readline().rstrip("\n")

    try:
        sequent = parse_sequent(text)
    except ValueError as e:
        emit_error(str(e), json_mode=json_mode, quiet=quiet)
        return EXIT_ERROR

    prover = SequentProver(max_depth=args.max_depth)
    result = prover.proves(sequent)

    if json_mode:
        emit_json(prove_response(sequent, result, result.trace if args.trace else None))
    elif not quiet:
        print("PROVABLE" if result.provable else "NOT PROVABLE")
        if args.trace:
            print("\nProof trace:")
            for line in result.trace:
                print(f"  {line}")
            print(f"\nDepth reached: {result.depth_reached}")
            print(f"Cache hits: {result.cache_hits}")

    logger.info(
        "Query %s: %s (depth %d)",
        sequent,
        "PROVABLE" if result.provable else "NOT PROVABLE",
        result.depth_reached,
    )
    return EXIT_SUCCESS if result.provable else EXIT_NOT_PROVABLE
