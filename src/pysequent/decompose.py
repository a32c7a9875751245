"""One-step decomposition of sequents by the sequent-calculus rules.

``decompose`` removes the first complex member of a sequent (see
``Sequent.first_complex_proposition``) and returns a ``Branch``: an OR over
``Leaf`` alternatives, each an AND over the parent sequents it needs.

Left rules (chi in the antecedent):
    [L~]  Gamma, ~A |~ Delta       <-  Gamma |~ Delta, A
    [L>]  Gamma, A>B |~ Delta      <-  Gamma |~ Delta, A
                                   AND Gamma, B |~ Delta
    [L&]  Gamma, A & B |~ Delta    <-  Gamma, A, B |~ Delta
    [Lv]  Gamma, A v B |~ Delta    <-  Gamma, A |~ Delta
                                   AND Gamma, B |~ Delta
    [L∀]  Gamma, ∀x P |~ Delta     <-  Gamma, P[x:=n] |~ Delta   for any known n
    [L∃]  Gamma, ∃x P |~ Delta     <-  Gamma, P[x:=e] |~ Delta   e fresh

Right rules (chi in the consequent):
    [R~]  Gamma |~ Delta, ~A       <-  Gamma, A |~ Delta
    [R>]  Gamma |~ Delta, A>B      <-  Gamma, A |~ Delta, B
    [R&]  Gamma |~ Delta, A & B    <-  Gamma |~ Delta, A
                                   AND Gamma |~ Delta, B
    [Rv]  Gamma |~ Delta, A v B    <-  Gamma |~ Delta, A, B
    [R∃]  Gamma |~ Delta, ∃x P     <-  Gamma |~ Delta, P[x:=n]   for any known n
    [R∀]  Gamma |~ Delta, ∀x P     <-  Gamma |~ Delta, P[x:=e]   e fresh

Known names are those of P together with those of the rest of the sequent;
if there are none, a single fresh name is used. The reusable rules do not
keep the quantified proposition, so names introduced further up a branch
are never tried against it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import count, product
from string import ascii_lowercase

from pysequent.sequent import ANTECEDENT, CONSEQUENT, Sequent
from pysequent.syntax import (
    CONJ,
    COND,
    DISJ,
    EXISTS,
    FORALL,
    NEG,
    SYMBOLS,
    Proposition,
)

logger = logging.getLogger(__name__)


def _candidate_names() -> Iterator[str]:
    """``aa``, ``ab``, ..., ``zz``, ``aaa``, ... (all valid constant names)."""
    for length in count(2):
        for letters in product(ascii_lowercase, repeat=length):
            yield "".join(letters)


class NameSupply:
    """Source of constant names that have never been used in a search.

    Names seen in the search are reserved; ``fresh`` issues the first
    candidate name that is neither reserved nor already issued, and reserves
    it. Share one supply across a whole search so eigenvariables stay fresh
    everywhere in the proof tree. Subclasses may override ``fresh`` to change
    the naming policy.
    """

    def __init__(self, used: Iterable[str] = ()) -> None:
        self._used: set[str] = set(used)
        self._candidates = _candidate_names()

    @property
    def used(self) -> frozenset[str]:
        return frozenset(self._used)

    def reserve(self, names: Iterable[str]) -> None:
        self._used.update(names)

    def fresh(self) -> str:
        for name in self._candidates:
            if name not in self._used:
                self._used.add(name)
                logger.debug("Fresh name: %s", name)
                return name
        raise RuntimeError("name candidates exhausted")  # pragma: no cover


@dataclass
class Leaf:
    """One way of deriving a sequent: every parent must be provable.

    Attributes:
        rule: Label of the rule applied, e.g. ``"L&"``.
        parents: Sequents that together establish the decomposed sequent.
        name: The constant substituted by a quantifier rule, if any.
    """

    rule: str
    parents: list[Sequent] = field(default_factory=list)
    name: str | None = None


@dataclass
class Branch:
    """The alternatives produced by decomposing one sequent.

    The decomposed sequent is provable iff some leaf has all of its parents
    provable.

    Attributes:
        proposition: The member that was removed and decomposed.
        side: ANTECEDENT or CONSEQUENT, where it was removed from.
        leaves: Alternative leaves, in order.
    """

    proposition: Proposition
    side: str
    leaves: list[Leaf] = field(default_factory=list)


def _label(prop: Proposition, side: str) -> str:
    return ("L" if side == ANTECEDENT else "R") + SYMBOLS[prop.type]


def _push(sequent: Sequent, side: str, proposition: Proposition) -> None:
    if side == ANTECEDENT:
        sequent.push_left(proposition)
    else:
        sequent.push_right(proposition)


# ----------------------------------------------------------------------
# Propositional rules
# ----------------------------------------------------------------------


def decompose_negation(rest: Sequent, prop: Proposition, side: str) -> list[Leaf]:
    """[L~] / [R~]: move the negatum to the other side."""
    assert prop.sub is not None
    if side == ANTECEDENT:
        rest.push_right(prop.sub)
    else:
        rest.push_left(prop.sub)
    return [Leaf(_label(prop, side), [rest])]


def decompose_conditional(rest: Sequent, prop: Proposition, side: str) -> list[Leaf]:
    """[L>] splits into two parents; [R>] moves A left and B right."""
    assert prop.left is not None and prop.right is not None
    if side == ANTECEDENT:
        first = rest.clone()
        first.push_right(prop.left)
        rest.push_left(prop.right)
        return [Leaf(_label(prop, side), [first, rest])]
    rest.push_left(prop.left)
    rest.push_right(prop.right)
    return [Leaf(_label(prop, side), [rest])]


def decompose_conjunction(rest: Sequent, prop: Proposition, side: str) -> list[Leaf]:
    """[L&] keeps both conjuncts; [R&] needs each conjunct separately."""
    assert prop.left is not None and prop.right is not None
    if side == ANTECEDENT:
        rest.push_left(prop.left)
        rest.push_left(prop.right)
        return [Leaf(_label(prop, side), [rest])]
    first = rest.clone()
    first.push_right(prop.left)
    rest.push_right(prop.right)
    return [Leaf(_label(prop, side), [first, rest])]


def decompose_disjunction(rest: Sequent, prop: Proposition, side: str) -> list[Leaf]:
    """[Lv] needs each disjunct separately; [Rv] keeps both disjuncts."""
    assert prop.left is not None and prop.right is not None
    if side == CONSEQUENT:
        rest.push_right(prop.left)
        rest.push_right(prop.right)
        return [Leaf(_label(prop, side), [rest])]
    first = rest.clone()
    first.push_left(prop.left)
    rest.push_left(prop.right)
    return [Leaf(_label(prop, side), [first, rest])]


# ----------------------------------------------------------------------
# Quantifier rules
# ----------------------------------------------------------------------


def _instance(prop: Proposition, name: str) -> Proposition:
    assert prop.sub is not None and prop.variable is not None
    if prop.sub.rebinds(prop.variable):
        logger.warning(
            "Instantiating <%s> in %s, which rebinds <%s>; inner occurrences are replaced too",
            prop.variable,
            prop,
            prop.variable,
        )
    return prop.sub.instantiate(prop.variable, name)


def decompose_reusable(
    rest: Sequent, prop: Proposition, side: str, names: NameSupply
) -> list[Leaf]:
    """[R∃] / [L∀]: one leaf per known name, or one fresh name if none is known."""
    assert prop.sub is not None
    known = list(dict.fromkeys(prop.sub.names() + rest.names()))
    if not known:
        known = [names.fresh()]
    leaves = []
    for name in known:
        parent = rest.clone()
        _push(parent, side, _instance(prop, name))
        leaves.append(Leaf(_label(prop, side), [parent], name))
    return leaves


def decompose_eigenvariable(
    rest: Sequent, prop: Proposition, side: str, names: NameSupply
) -> list[Leaf]:
    """[L∃] / [R∀]: a single instance at a name never used in the search."""
    name = names.fresh()
    _push(rest, side, _instance(prop, name))
    return [Leaf(_label(prop, side), [rest], name)]


def _is_reusable(prop: Proposition, side: str) -> bool:
    return (prop.type == EXISTS) == (side == CONSEQUENT)


def decompose(sequent: Sequent, names: NameSupply | None = None) -> Branch | None:
    """Apply the rule for the first complex member of *sequent*.

    *sequent* itself is left untouched; every parent in the result is an
    independent copy. *names* supplies fresh constants for the quantifier
    rules; when omitted, a supply reserving the sequent's own names is used.
    Returns None if the sequent is atomic.
    """
    coords = sequent.first_complex_proposition()
    if coords is None:
        return None

    if names is None:
        names = NameSupply()
    names.reserve(sequent.names())

    rest = sequent.clone()
    prop = rest.remove_at(coords.side, coords.index)

    if prop.type == NEG:
        leaves = decompose_negation(rest, prop, coords.side)
    elif prop.type == COND:
        leaves = decompose_conditional(rest, prop, coords.side)
    elif prop.type == CONJ:
        leaves = decompose_conjunction(rest, prop, coords.side)
    elif prop.type == DISJ:
        leaves = decompose_disjunction(rest, prop, coords.side)
    elif prop.type in (EXISTS, FORALL):
        if _is_reusable(prop, coords.side):
            leaves = decompose_reusable(rest, prop, coords.side, names)
        else:
            leaves = decompose_eigenvariable(rest, prop, coords.side, names)
    else:  # pragma: no cover
        raise AssertionError(f"Atom {prop} reported as complex")

    logger.debug(
        "[%s] on %s: %d leaf(s), parents %s",
        leaves[0].rule,
        prop,
        len(leaves),
        [len(leaf.parents) for leaf in leaves],
    )
    return Branch(prop, coords.side, leaves)
