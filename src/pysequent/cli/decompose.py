"""``pysequent decompose`` subcommand — apply one decomposition step."""

from __future__ import annotations

import argparse
import logging
import sys

from pysequent.cli.exitcodes import EXIT_ERROR, EXIT_SUCCESS
from pysequent.cli.output import decompose_response, emit_error, emit_json, format_branch
from pysequent.decompose import decompose
from pysequent.sequent import parse_sequent

logger = logging.getLogger(__name__)


def run_decompose(args: argparse.Namespace) -> int:
    """Execute the ``decompose`` subcommand."""
    json_mode = getattr(args, "json", False)
    text = args.sequent
    if text == "-":
        text = sys.stdin.readline().rstrip("\n")

    try:
        sequent = parse_sequent(text)
    except ValueError as e:
        emit_error(str(e), json_mode=json_mode)
        return EXIT_ERROR

    branch = decompose(sequent)

    if json_mode:
        emit_json(decompose_response(sequent, branch))
    else:
        for line in format_branch(sequent, branch):
            print(line)

    logger.info(
        "Decomposed %s: %s",
        sequent,
        "atomic" if branch is None else f"{len(branch.leaves)} leaf(s)",
    )
    return EXIT_SUCCESS
