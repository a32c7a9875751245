"""``pysequent parse`` subcommand — parse and describe a proposition."""

from __future__ import annotations

import argparse
import logging
import sys

from pysequent.cli.exitcodes import EXIT_ERROR, EXIT_SUCCESS
from pysequent.cli.output import emit_error, emit_json, format_proposition, parse_response
from pysequent.syntax import PropositionError, parse_proposition

logger = logging.getLogger(__name__)


def run_parse(args: argparse.Namespace) -> int:
    """Execute the ``parse`` subcommand."""
    json_mode = getattr(args, "json", False)
    text = args.proposition
    if text == "-":
        text = sys.stdin.readline().rstrip("\n")

    try:
        prop = parse_proposition(text)
    except PropositionError as e:
        emit_error(str(e), json_mode=json_mode)
        return EXIT_ERROR

    if json_mode:
        emit_json(parse_response(prop))
    else:
        for line in format_proposition(prop):
            print(line)

    logger.info("Parsed %r as %s", text, prop)
    return EXIT_SUCCESS
