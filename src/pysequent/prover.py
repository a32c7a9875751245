"""Proof search over the AND-OR trees produced by ``decompose``.

Performs backward (root-first) search: a sequent is provable if it is an
axiom, or if decomposing it yields some leaf whose parents are all
provable. Atomic sequents that are not axioms fail.

Axiom (identity): Gamma, A |~ A, Delta. The check is applied at every node,
not only at atomic leaves, which is sound and shortens proofs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pysequent.decompose import NameSupply, decompose
from pysequent.sequent import Sequent, parse_sequent

logger = logging.getLogger(__name__)


def is_axiom(sequent: Sequent) -> bool:
    """Return True if some proposition occurs on both sides of *sequent*."""
    return any(p in sequent.consequent for p in sequent.antecedent)


@dataclass
class ProofResult:
    """Result of a proof search.

    Attributes:
        provable: Whether the sequent is provable.
        trace: Human-readable proof trace.
        depth_reached: Maximum proof depth reached.
        cache_hits: Number of memoization cache hits.
    """

    provable: bool
    trace: list[str] = field(default_factory=list)
    depth_reached: int = 0
    cache_hits: int = 0


class SequentProver:
    """Depth-limited proof search with memoization.

    Parameters:
        max_depth: Maximum proof depth (default 25).
        name_supply: ``NameSupply`` class (or subclass) instantiated once per
            search, seeded with the root sequent's names.
    """

    def __init__(self, *, max_depth: int = 25, name_supply: type[NameSupply] = NameSupply) -> None:
        self.max_depth = max_depth
        self.name_supply = name_supply
        self._trace: list[str] = []
        self._cache: dict[str, bool] = {}
        self._depth_reached: int = 0
        self._cache_hits: int = 0
        self._names: NameSupply = name_supply()

    def proves(self, sequent: Sequent | str) -> ProofResult:
        """Search for a proof of *sequent* (a Sequent or sequent text)."""
        if isinstance(sequent, str):
            sequent = parse_sequent(sequent)

        self._trace = []
        self._cache = {}
        self._depth_reached = 0
        self._cache_hits = 0
        self._names = self.name_supply(sequent.names())

        logger.debug("Proof search: %s", sequent)
        result = self._prove(sequent, depth=0)
        logger.debug("Result: %s (depth %d, cache hits %d)",
                     result, self._depth_reached, self._cache_hits)

        return ProofResult(
            provable=result,
            trace=list(self._trace),
            depth_reached=self._depth_reached,
            cache_hits=self._cache_hits,
        )

    def query(self, sequent: Sequent | str) -> bool:
        """Convenience method: return only the provability boolean."""
        return self.proves(sequent).provable

    def _log(self, msg: str) -> None:
        self._trace.append(msg)
        logger.debug(msg)

    def _prove(self, sequent: Sequent, depth: int) -> bool:
        indent = "  " * depth
        self._depth_reached = max(self._depth_reached, depth)

        if depth > self.max_depth:
            self._log(f"{indent}DEPTH LIMIT")
            return False

        key = str(sequent)
        if key in self._cache:
            self._cache_hits += 1
            return self._cache[key]

        if is_axiom(sequent):
            self._log(f"{indent}AXIOM: {sequent}")
            self._cache[key] = True
            return True

        branch = decompose(sequent, self._names)
        result = False
        if branch is not None:
            for leaf in branch.leaves:
                suffix = f" with <{leaf.name}>" if leaf.name else ""
                self._log(f"{indent}[{leaf.rule}] on {branch.proposition}{suffix}")
                if all(self._prove(parent, depth + 1) for parent in leaf.parents):
                    result = True
                    break

        self._cache[key] = result
        if not result:
            self._log(f"{indent}FAIL: {sequent}")
        return result
