"""Text and structured JSON output for the pysequent CLI."""

from __future__ import annotations

import json
import logging
import sys

from pysequent.decompose import Branch
from pysequent.prover import ProofResult
from pysequent.sequent import Sequent
from pysequent.syntax import Proposition

logger = logging.getLogger(__name__)


def emit_json(data: dict) -> None:
    """Print compact single-line JSON to stdout."""
    print(json.dumps(data, separators=(",", ":"), ensure_ascii=False))


def format_proposition(prop: Proposition) -> list[str]:
    """Describe a parsed proposition, one fact per line."""
    return [
        str(prop),
        f"complexity: {prop.complexity()}",
        f"names: {', '.join(prop.names()) or '-'}",
        f"variables: {', '.join(prop.variables()) or '-'}",
    ]


def format_branch(sequent: Sequent, branch: Branch | None) -> list[str]:
    """Render one decomposition step; alternatives are OR, parents are AND."""
    if branch is None:
        return [f"{sequent}", "  atomic: no further decomposition"]
    lines = [f"{sequent}", f"  decomposing {branch.proposition} ({branch.side})"]
    for i, leaf in enumerate(branch.leaves, 1):
        suffix = f" with <{leaf.name}>" if leaf.name else ""
        lines.append(f"  leaf {i} [{leaf.rule}]{suffix}")
        for parent in leaf.parents:
            lines.append(f"    {parent}")
    return lines


def parse_response(prop: Proposition) -> dict:
    """Build a parse response dict."""
    return {
        "proposition": str(prop),
        "type": prop.type,
        "complexity": prop.complexity(),
        "names": prop.names(),
        "variables": prop.variables(),
    }


def decompose_response(sequent: Sequent, branch: Branch | None) -> dict:
    """Build a decompose response dict."""
    d: dict = {"sequent": sequent.to_dict(), "atomic": branch is None}
    if branch is not None:
        d["proposition"] = str(branch.proposition)
        d["side"] = branch.side
        d["leaves"] = [
            {
                "rule": leaf.rule,
                "name": leaf.name,
                "parents": [parent.to_dict() for parent in leaf.parents],
            }
            for leaf in branch.leaves
        ]
    return d


def prove_response(
    sequent: Sequent,
    result: ProofResult,
    trace: list[str] | None = None,
) -> dict:
    """Build a prove response dict."""
    d: dict = {
        "status": "PROVABLE" if result.provable else "NOT_PROVABLE",
        "sequent": sequent.to_dict(),
        "depth_reached": result.depth_reached,
        "cache_hits": result.cache_hits,
    }
    if trace is not None:
        d["trace"] = trace
    return d


def error_response(message: str) -> dict:
    """Build an error response dict."""
    return {"error": message}


def emit_error(message: str, *, json_mode: bool = False, quiet: bool = False) -> None:
    """Print an error message to stderr, or as JSON to stdout."""
    if quiet:
        return
    if json_mode:
        emit_json(error_response(message))
    else:
        print(f"Error: {message}", file=sys.stderr)
