"""pysequent — first-order propositions and sequent-calculus decomposition.

Public API::

    from pysequent import parse_proposition, parse_sequent, Proposition, Sequent
    from pysequent import decompose, Branch, Leaf, NameSupply
    from pysequent import SequentProver, ProofResult, is_axiom
"""

from pysequent._version import __version__
from pysequent.decompose import Branch, Leaf, NameSupply, decompose
from pysequent.prover import ProofResult, SequentProver, is_axiom
from pysequent.sequent import (
    ANTECEDENT,
    CONSEQUENT,
    Coordinates,
    Sequent,
    SequentError,
    SequentPropositionError,
    TurnstileError,
    parse_sequent,
)
from pysequent.syntax import (
    ArityError,
    EmptyStringError,
    InvalidConnectiveError,
    MalformedStringError,
    Proposition,
    PropositionError,
    deparenthesize,
    make_proposition,
    parse_proposition,
)

__all__ = [
    "__version__",
    "ANTECEDENT",
    "CONSEQUENT",
    "ArityError",
    "Branch",
    "Coordinates",
    "EmptyStringError",
    "InvalidConnectiveError",
    "Leaf",
    "MalformedStringError",
    "NameSupply",
    "ProofResult",
    "Proposition",
    "PropositionError",
    "Sequent",
    "SequentError",
    "SequentPropositionError",
    "SequentProver",
    "TurnstileError",
    "decompose",
    "deparenthesize",
    "is_axiom",
    "make_proposition",
    "parse_proposition",
    "parse_sequent",
]
