"""Sequents: ordered antecedent and consequent lists of propositions.

A sequent ``A, B |~ C, D`` is a single proof goal: if every antecedent
member holds then at least one consequent member does. Both sides keep
their order. Logically they are multisets, but the order fixes which
member decomposition attacks next and therefore the shape of proof trees.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pysequent.syntax import Proposition, PropositionError, parse_proposition

logger = logging.getLogger(__name__)

ANTECEDENT = "antecedent"
CONSEQUENT = "consequent"
SIDES = (ANTECEDENT, CONSEQUENT)

TURNSTILE = "|~"


class SequentError(ValueError):
    """Base class for errors raised while reading a sequent."""


class TurnstileError(SequentError):
    def __init__(self, text: str, count: int) -> None:
        self.text = text
        self.count = count
        super().__init__(
            f"Invalid sequent: {text!r}. Expected exactly one {TURNSTILE!r}, found {count}."
        )


class SequentPropositionError(SequentError):
    """A proposition inside the sequent failed to parse.

    The underlying ``PropositionError`` is available as ``error``.
    """

    def __init__(self, text: str, error: PropositionError) -> None:
        self.text = text
        self.error = error
        super().__init__(f"In sequent proposition {text!r}: {error}")


@dataclass(frozen=True)
class Coordinates:
    """Position of a proposition within a sequent."""

    side: str
    index: int


def _fmt(props: list[Proposition]) -> str:
    return ", ".join(str(p) for p in props)


@dataclass
class Sequent:
    """A proof goal ``antecedent |~ consequent``.

    Attributes:
        antecedent: Propositions assumed true, in order.
        consequent: Propositions of which at least one is to be shown, in order.
    """

    antecedent: list[Proposition] = field(default_factory=list)
    consequent: list[Proposition] = field(default_factory=list)

    def __str__(self) -> str:
        ant = _fmt(self.antecedent)
        con = _fmt(self.consequent)
        return f"{ant} {TURNSTILE} {con}".strip()

    def side(self, side: str) -> list[Proposition]:
        if side == ANTECEDENT:
            return self.antecedent
        if side == CONSEQUENT:
            return self.consequent
        raise ValueError(f"Unknown sequent side: {side!r}")

    def members(self) -> list[Proposition]:
        """Every proposition, antecedent first."""
        return self.antecedent + self.consequent

    def complexity(self) -> int:
        """Sum of the complexities of every member on both sides."""
        return sum(p.complexity() for p in self.members())

    def is_atomic(self) -> bool:
        return all(p.complexity() == 0 for p in self.members())

    def first_complex_proposition(self) -> Coordinates | None:
        """Locate the first member with complexity > 0.

        The antecedent is scanned left to right, then the consequent. Returns
        None when every member is atomic.
        """
        for side in SIDES:
            for index, prop in enumerate(self.side(side)):
                if prop.complexity() > 0:
                    return Coordinates(side, index)
        return None

    def remove_at(self, side: str, index: int) -> Proposition:
        """Detach and return the member at *index* of *side*."""
        return self.side(side).pop(index)

    def push_left(self, proposition: Proposition) -> None:
        """Append *proposition* to the antecedent."""
        self.antecedent.append(proposition)

    def push_right(self, proposition: Proposition) -> None:
        """Append *proposition* to the consequent."""
        self.consequent.append(proposition)

    def mix(self, other: Sequent) -> None:
        """Extend both sides with (copies of) the members of *other*."""
        self.antecedent.extend(p.clone() for p in other.antecedent)
        self.consequent.extend(p.clone() for p in other.consequent)

    def names(self) -> list[str]:
        """Constants mentioned by any member, in first occurrence order."""
        return list(dict.fromkeys(name for p in self.members() for name in p.names()))

    def clone(self) -> Sequent:
        return Sequent(
            antecedent=[p.clone() for p in self.antecedent],
            consequent=[p.clone() for p in self.consequent],
        )

    # --- Serialization ---

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict of canonical renderings."""
        return {
            "antecedent": [str(p) for p in self.antecedent],
            "consequent": [str(p) for p in self.consequent],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Sequent:
        """Deserialize from a dict (as produced by ``to_dict``)."""
        return cls(
            antecedent=_parse_all(data.get("antecedent", [])),
            consequent=_parse_all(data.get("consequent", [])),
        )


def _parse_all(texts: list[str]) -> list[Proposition]:
    props = []
    for text in texts:
        try:
            props.append(parse_proposition(text))
        except PropositionError as e:
            raise SequentPropositionError(text, e) from e
    return props


def _split_side(text: str) -> list[str]:
    """Split one side of a sequent on commas outside parentheses."""
    if not text.strip():
        return []
    parts = []
    depth = 0
    start = 0
    for i, c in enumerate(text):
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        elif c == "," and depth == 0:
            parts.append(text[start:i])
            start = i + 1
    parts.append(text[start:])
    return parts


def parse_sequent(text: str) -> Sequent:
    """Parse ``A, B |~ C, D`` into a Sequent.

    Either side may be empty. Commas nested inside parentheses do not split.

    Raises:
        TurnstileError: *text* does not contain exactly one turnstile.
        SequentPropositionError: one of the propositions failed to parse.
    """
    count = text.count(TURNSTILE)
    if count != 1:
        raise TurnstileError(text, count)

    ant_str, con_str = text.split(TURNSTILE)
    sequent = Sequent(
        antecedent=_parse_all(_split_side(ant_str)),
        consequent=_parse_all(_split_side(con_str)),
    )
    logger.debug("Parsed sequent: %s", sequent)
    return sequent
