"""First-order proposition syntax: the AST, placeholder scanning and parsing.

Propositions are written with whitespace-separated connective keywords and
parenthesized sub-propositions. The outermost pair of parentheses may be
omitted. Each connective has a symbol and a word form:

    negation      ~   not
    conjunction   &   and
    disjunction   v   or
    conditional   >   implies
    existential   ∃   exists
    universal     ∀   forall

A quantifier keyword is followed by its bound variable, written ``<x>`` (one
lowercase letter). Anything without a connective is an atom. Atom text is
free-form and may embed placeholders: ``<x>`` is a variable and ``<name>``
(two or more lowercase letters) is a constant.

Grouping (informal):
    proposition ::= NEG proposition
                  | QUANT '<x>' proposition
                  | proposition BINOP proposition
                  | '(' proposition ')'
                  | atom

There is no precedence table. The first binary keyword found at nesting
depth 0, scanning left to right, splits the text; anything else needs
explicit parentheses. A leading negation or quantifier takes the whole rest
of the text as its operand.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

# Proposition type constants
ATOM = "atom"
NEG = "neg"
CONJ = "conj"
DISJ = "disj"
COND = "cond"
EXISTS = "exists"
FORALL = "forall"

BINARY = frozenset({CONJ, DISJ, COND})
QUANTIFIERS = frozenset({EXISTS, FORALL})

ARITY = {ATOM: 0, NEG: 1, CONJ: 2, DISJ: 2, COND: 2, EXISTS: 1, FORALL: 1}

KEYWORDS = {
    "~": NEG,
    "not": NEG,
    "&": CONJ,
    "and": CONJ,
    "v": DISJ,
    "or": DISJ,
    ">": COND,
    "implies": COND,
    "∃": EXISTS,
    "exists": EXISTS,
    "∀": FORALL,
    "forall": FORALL,
}

SYMBOLS = {
    NEG: "~",
    CONJ: "&",
    DISJ: "v",
    COND: ">",
    EXISTS: "∃",
    FORALL: "∀",
}

# Single-character prefix keywords that may be written glued to their operand.
_PREFIX_SYMBOLS = frozenset({"~", "∃", "∀"})


class PropositionError(ValueError):
    """Base class for errors raised while reading or building a proposition."""


class EmptyStringError(PropositionError):
    def __init__(self, text: str = "") -> None:
        self.text = text
        super().__init__("Cannot parse empty proposition")


class MalformedStringError(PropositionError):
    """The text has connective structure that cannot be completed."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Malformed proposition: {text!r}")


class InvalidConnectiveError(PropositionError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid connective: {token!r}")


class ArityError(PropositionError):
    """A connective was given the wrong number of sub-propositions."""

    def __init__(self, connective: str, expected: int, got: int) -> None:
        self.connective = connective
        self.expected = expected
        self.got = got
        noun = "subproposition" if expected == 1 else "subpropositions"
        super().__init__(f"{connective} requires {expected} {noun}, not {got}")


# ----------------------------------------------------------------------
# Placeholder scanning
# ----------------------------------------------------------------------


def _placeholders(text: str) -> Iterator[str]:
    """Yield the contents of every ``<...>`` span made of lowercase letters."""
    start = text.find("<")
    while start != -1:
        end = text.find(">", start + 1)
        if end == -1:
            return
        token = text[start + 1 : end]
        if token.isascii() and token.isalpha() and token.islower():
            yield token
            start = text.find("<", end + 1)
        else:
            start = text.find("<", start + 1)


def _unique(items: Iterator[str]) -> list[str]:
    return list(dict.fromkeys(items))


def scan_variables(text: str) -> list[str]:
    """Return the single-letter placeholders in *text*, first occurrence order."""
    return _unique(t for t in _placeholders(text) if len(t) == 1)


def scan_names(text: str) -> list[str]:
    """Return the placeholders of two or more letters in *text*."""
    return _unique(t for t in _placeholders(text) if len(t) > 1)


def is_variable_token(token: str) -> bool:
    """Return True if *token* is exactly ``<x>`` for one lowercase letter."""
    return (
        len(token) == 3
        and token[0] == "<"
        and token[2] == ">"
        and token[1].isascii()
        and token[1].isalpha()
        and token[1].islower()
    )


# ----------------------------------------------------------------------
# AST
# ----------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Proposition:
    """Immutable AST node for a first-order proposition.

    Attributes:
        type: One of ATOM, NEG, CONJ, DISJ, COND, EXISTS, FORALL.
        text: The atom text (only when type == ATOM).
        sub: The negatum (NEG) or the quantified predicate (EXISTS, FORALL).
        left: Left operand (only when type in BINARY).
        right: Right operand (only when type in BINARY).
        variable: The bound variable letter (only when type in QUANTIFIERS).
    """

    type: str
    text: str | None = None
    sub: Proposition | None = None
    left: Proposition | None = None
    right: Proposition | None = None
    variable: str | None = None

    def __str__(self) -> str:
        if self.type == ATOM:
            return self.text  # type: ignore[return-value]
        if self.type == NEG:
            return f"~({self.sub})"
        if self.type in BINARY:
            assert self.left is not None
            left = str(self.left)
            # A leading prefix connective would otherwise swallow the whole group.
            if self.left.type == NEG or self.left.type in QUANTIFIERS:
                left = f"({left})"
            return f"({left} {SYMBOLS[self.type]} {self.right})"
        if self.type in QUANTIFIERS:
            return f"{SYMBOLS[self.type]}<{self.variable}>({self.sub})"
        return f"Proposition({self.type})"  # pragma: no cover

    @property
    def children(self) -> tuple[Proposition, ...]:
        """The direct sub-propositions, left to right."""
        if self.type in BINARY:
            return (self.left, self.right)  # type: ignore[return-value]
        if self.type == ATOM:
            return ()
        return (self.sub,)  # type: ignore[return-value]

    def content(self) -> list[Proposition]:
        """Return the propositional content; an atom's content is itself."""
        if self.type == ATOM:
            return [self]
        return list(self.children)

    def is_atomic(self) -> bool:
        return self.type == ATOM

    def complexity(self) -> int:
        """Length of the longest chain of connectives and quantifiers."""
        if self.type == ATOM:
            return 0
        return 1 + max(child.complexity() for child in self.children)

    def names(self) -> list[str]:
        """Constants (``<name>`` placeholders) mentioned anywhere in the tree."""
        return _unique(name for text in self._atom_texts() for name in scan_names(text))

    def variables(self) -> list[str]:
        """Variables (``<x>`` placeholders) mentioned anywhere in the tree."""
        return _unique(var for text in self._atom_texts() for var in scan_variables(text))

    def _atom_texts(self) -> Iterator[str]:
        if self.type == ATOM:
            yield self.text  # type: ignore[misc]
            return
        for child in self.children:
            yield from child._atom_texts()

    def instantiate(self, variable: str, name: str) -> Proposition:
        """Return a copy with every ``<variable>`` in atom text replaced by ``<name>``.

        Nested quantifiers binding the same letter are not respected; see
        ``rebinds``.
        """
        if self.type == ATOM:
            assert self.text is not None
            return Proposition(type=ATOM, text=self.text.replace(f"<{variable}>", f"<{name}>"))
        if self.type in BINARY:
            assert self.left is not None and self.right is not None
            return Proposition(
                type=self.type,
                left=self.left.instantiate(variable, name),
                right=self.right.instantiate(variable, name),
            )
        assert self.sub is not None
        return Proposition(
            type=self.type,
            sub=self.sub.instantiate(variable, name),
            variable=self.variable,
        )

    def rebinds(self, variable: str) -> bool:
        """Return True if some quantifier in this tree binds *variable*."""
        if self.type in QUANTIFIERS and self.variable == variable:
            return True
        return any(child.rebinds(variable) for child in self.children)

    def clone(self) -> Proposition:
        """Return a structurally equal tree sharing no nodes with this one."""
        if self.type == ATOM:
            return Proposition(type=ATOM, text=self.text)
        if self.type in BINARY:
            assert self.left is not None and self.right is not None
            return Proposition(type=self.type, left=self.left.clone(), right=self.right.clone())
        assert self.sub is not None
        return Proposition(type=self.type, sub=self.sub.clone(), variable=self.variable)


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------


def connective_kind(token: str) -> str:
    """Map a connective keyword (symbol or word) or kind constant to its kind."""
    if token in KEYWORDS:
        return KEYWORDS[token]
    if token in SYMBOLS:
        return token
    raise InvalidConnectiveError(token)


def make_proposition(
    connective: str,
    operands: Sequence[Proposition],
    variable: str | None = None,
) -> Proposition:
    """Build a compound proposition, checking the connective's arity.

    *connective* may be a keyword such as ``"&"`` or ``"forall"``, or a type
    constant such as ``CONJ``. Quantifiers also require *variable*, a single
    lowercase letter.
    """
    kind = connective_kind(connective)
    expected = ARITY[kind]
    if len(operands) != expected:
        raise ArityError(kind, expected, len(operands))
    if kind in BINARY:
        return Proposition(type=kind, left=operands[0], right=operands[1])
    if kind in QUANTIFIERS:
        if variable is None or not is_variable_token(f"<{variable}>"):
            raise PropositionError(
                f"{kind} requires a single lowercase letter variable, not {variable!r}"
            )
        return Proposition(type=kind, sub=operands[0], variable=variable)
    return Proposition(type=kind, sub=operands[0])


def atom(text: str) -> Proposition:
    return Proposition(type=ATOM, text=text)


def negation(negatum: Proposition) -> Proposition:
    return make_proposition(NEG, [negatum])


def conjunction(left: Proposition, right: Proposition) -> Proposition:
    return make_proposition(CONJ, [left, right])


def disjunction(left: Proposition, right: Proposition) -> Proposition:
    return make_proposition(DISJ, [left, right])


def conditional(left: Proposition, right: Proposition) -> Proposition:
    return make_proposition(COND, [left, right])


def existential(variable: str, predicate: Proposition) -> Proposition:
    return make_proposition(EXISTS, [predicate], variable)


def universal(variable: str, predicate: Proposition) -> Proposition:
    return make_proposition(FORALL, [predicate], variable)


# ----------------------------------------------------------------------
# Parsing
# ----------------------------------------------------------------------


def _is_connected(text: str) -> bool:
    """Return True if the first ``(`` of *text* is closed by its last ``)``."""
    depth = 0
    last = len(text) - 1
    for i, c in enumerate(text):
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
        if depth <= 0 and i < last:
            return False
    return depth == 0


def deparenthesize(text: str) -> str:
    """Strip connected outer pairs of parentheses (and surrounding whitespace).

    ``"((A))"`` becomes ``"A"`` but ``"(A) & (B)"`` is returned unchanged,
    since its outer parentheses belong to different groups.
    """
    text = text.strip()
    while text.startswith("(") and text.endswith(")") and _is_connected(text):
        text = text[1:-1].strip()
    return text


def _tokenize(text: str) -> list[str]:
    """Split on whitespace, separating a glued prefix symbol and its variable."""
    tokens = text.split()
    head = tokens[0]
    if len(head) > 1 and head[0] in _PREFIX_SYMBOLS:
        tokens[0:1] = [head[0], head[1:]]
    if KEYWORDS.get(tokens[0]) in QUANTIFIERS and len(tokens) > 1:
        var = tokens[1]
        if len(var) > 3 and is_variable_token(var[:3]):
            tokens[1:2] = [var[:3], var[3:]]
    return tokens


def _find_binary(tokens: list[str]) -> int | None:
    """Index of the first binary keyword at nesting depth 0, if any."""
    depth = 0
    for index, token in enumerate(tokens):
        depth += token.count("(") - token.count(")")
        if depth == 0 and KEYWORDS.get(token) in BINARY:
            return index
    return None


def parse_proposition(text: str) -> Proposition:
    """Parse a string into a Proposition AST.

    Examples:
        >>> str(parse_proposition("~ (the cat is on the mat)"))
        '~(the cat is on the mat)'
        >>> str(parse_proposition("A & B > C"))
        '(A & (B > C))'

    Raises:
        EmptyStringError: nothing is left once outer parentheses are removed.
        MalformedStringError: a connective is missing an operand, or a
            quantifier is not followed by a ``<x>`` variable.
    """
    body = deparenthesize(text)
    if not body:
        raise EmptyStringError(text)

    tokens = _tokenize(body)
    head = tokens[0]
    kind = KEYWORDS.get(head)

    if kind == NEG:
        negatum = deparenthesize(" ".join(tokens[1:]))
        if not negatum:
            raise MalformedStringError(body)
        return make_proposition(head, [parse_proposition(negatum)])

    if kind in QUANTIFIERS:
        if len(tokens) < 3 or not is_variable_token(tokens[1]):
            raise MalformedStringError(body)
        predicate = deparenthesize(" ".join(tokens[2:]))
        if not predicate:
            raise MalformedStringError(body)
        return make_proposition(head, [parse_proposition(predicate)], tokens[1][1])

    index = _find_binary(tokens)
    if index is not None:
        left = deparenthesize(" ".join(tokens[:index]))
        right = deparenthesize(" ".join(tokens[index + 1 :]))
        if not left or not right:
            raise MalformedStringError(body)
        return make_proposition(
            tokens[index], [parse_proposition(left), parse_proposition(right)]
        )

    return atom(" ".join(tokens))
