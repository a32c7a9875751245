"""Tests for pysequent.decompose — the sequent-calculus rules.

Each rule is checked on a minimal sequent: number of leaves, number of
parents per leaf, and the exact parent sequents.
"""

import logging

import pytest

from pysequent.decompose import Branch, Leaf, NameSupply, decompose
from pysequent.sequent import ANTECEDENT, CONSEQUENT, Sequent, parse_sequent
from pysequent.syntax import atom, conditional, conjunction


def _parents(branch):
    return [[str(p) for p in leaf.parents] for leaf in branch.leaves]


class TestTermination:
    def test_atomic_sequent(self):
        assert decompose(parse_sequent("A, B |~ C")) is None

    def test_empty_sequent(self, empty_sequent):
        assert decompose(empty_sequent) is None


class TestNegation:
    """[L~] / [R~]: the negatum changes sides."""

    def test_left(self):
        branch = decompose(parse_sequent("~ A, B |~ C"))
        assert branch.side == ANTECEDENT
        assert _parents(branch) == [["B |~ C, A"]]
        assert branch.leaves[0].rule == "L~"

    def test_right(self):
        branch = decompose(parse_sequent("B |~ ~ A, C"))
        assert branch.side == CONSEQUENT
        assert _parents(branch) == [["B, A |~ C"]]
        assert branch.leaves[0].rule == "R~"


class TestConditional:
    """[L>] splits in two; [R>] keeps one parent."""

    def test_left(self, a, b):
        branch = decompose(Sequent([conditional(a, b)], []))
        assert _parents(branch) == [["|~ A", "B |~"]]
        assert branch.leaves[0].rule == "L>"

    def test_left_keeps_context(self):
        branch = decompose(parse_sequent("A > B, C |~ D"))
        assert _parents(branch) == [["C |~ D, A", "C, B |~ D"]]

    def test_right(self):
        branch = decompose(parse_sequent("C |~ A > B, D"))
        assert _parents(branch) == [["C, A |~ D, B"]]


class TestConjunction:
    """[L&] keeps one parent; [R&] splits in two."""

    def test_left(self):
        branch = decompose(parse_sequent("A & B |~ C"))
        assert _parents(branch) == [["A, B |~ C"]]

    def test_right(self, a, b):
        branch = decompose(Sequent([], [conjunction(a, b)]))
        assert len(branch.leaves) == 1
        assert branch.leaves[0].parents == [Sequent([], [a]), Sequent([], [b])]
        assert branch.leaves[0].rule == "R&"


class TestDisjunction:
    """[Lv] splits in two; [Rv] keeps one parent."""

    def test_left(self):
        branch = decompose(parse_sequent("A v B |~ C"))
        assert _parents(branch) == [["A |~ C", "B |~ C"]]

    def test_right(self):
        branch = decompose(parse_sequent("|~ A v B"))
        assert _parents(branch) == [["|~ A, B"]]
        assert branch.leaves[0].rule == "Rv"


class TestParentCounts:
    @pytest.mark.parametrize("text", ["A > B |~", "|~ A & B", "A v B |~"])
    def test_two_parent_rules(self, text):
        branch = decompose(parse_sequent(text))
        assert len(branch.leaves) == 1
        assert len(branch.leaves[0].parents) == 2

    @pytest.mark.parametrize("text", [
        "~ A |~", "|~ ~ A", "|~ A > B", "A & B |~", "|~ A v B",
    ])
    def test_one_parent_rules(self, text):
        branch = decompose(parse_sequent(text))
        assert len(branch.leaves) == 1
        assert len(branch.leaves[0].parents) == 1


class TestSelectionOrder:
    def test_antecedent_first(self):
        branch = decompose(parse_sequent("A, B & C |~ ~ D"))
        assert branch.side == ANTECEDENT
        assert str(branch.proposition) == "(B & C)"

    def test_leftmost_in_consequent(self):
        branch = decompose(parse_sequent("A |~ B, C v D, ~ E"))
        assert str(branch.proposition) == "(C v D)"

    def test_input_not_mutated(self):
        s = parse_sequent("A & B |~ C v D")
        before = s.clone()
        decompose(s)
        assert s == before

    def test_two_parents_independent(self):
        branch = decompose(parse_sequent("C |~ A & B"))
        first, second = branch.leaves[0].parents
        first.push_left(atom("X"))
        assert str(second) == "C |~ B"

    def test_deterministic(self):
        s = parse_sequent("∀<x>(<x> sat), <tom> ran |~ <ann> stood")
        assert _parents(decompose(s)) == _parents(decompose(s))


class TestReusableQuantifiers:
    """[R∃] / [L∀]: one alternative leaf per known name."""

    def test_existential_right_known_names(self):
        branch = decompose(parse_sequent("<tom> sat |~ ∃<x>(<x> sat), <ann> stood"))
        assert [leaf.name for leaf in branch.leaves] == ["tom", "ann"]
        assert _parents(branch) == [
            ["<tom> sat |~ <ann> stood, <tom> sat"],
            ["<tom> sat |~ <ann> stood, <ann> sat"],
        ]
        assert all(leaf.rule == "R∃" for leaf in branch.leaves)

    def test_universal_left_known_names(self):
        branch = decompose(parse_sequent("∀<x>(<x> sat) |~ <tom> sat"))
        assert len(branch.leaves) == 1
        assert _parents(branch) == [["<tom> sat |~ <tom> sat"]]
        assert branch.leaves[0].rule == "L∀"

    def test_names_of_predicate_come_first(self):
        branch = decompose(parse_sequent("<ann> ran |~ ∃<x>(<x> likes <bob>)"))
        assert [leaf.name for leaf in branch.leaves] == ["bob", "ann"]

    def test_fresh_name_when_none_known(self):
        branch = decompose(parse_sequent("|~ ∃<x>(<x> sat)"))
        assert len(branch.leaves) == 1
        assert branch.leaves[0].name == "aa"
        assert _parents(branch) == [["|~ <aa> sat"]]

    def test_each_leaf_has_one_parent(self):
        branch = decompose(parse_sequent("<aa> p, <bb> p, <cc> p |~ ∃<x>(<x> q)"))
        assert len(branch.leaves) == 3
        assert all(len(leaf.parents) == 1 for leaf in branch.leaves)


class TestEigenvariables:
    """[L∃] / [R∀]: a single instance at a brand-new name."""

    def test_existential_left(self):
        branch = decompose(parse_sequent("∃<x>(<x> sat) |~ <tom> sat"))
        assert len(branch.leaves) == 1
        leaf = branch.leaves[0]
        assert leaf.rule == "L∃"
        assert leaf.name == "aa"
        assert _parents(branch) == [["<aa> sat |~ <tom> sat"]]

    def test_universal_right(self):
        branch = decompose(parse_sequent("<tom> sat |~ ∀<x>(<x> sat)"))
        leaf = branch.leaves[0]
        assert leaf.rule == "R∀"
        assert leaf.name not in {"tom"}
        assert _parents(branch) == [[f"<tom> sat |~ <{leaf.name}> sat"]]

    def test_avoids_names_in_sequent(self):
        branch = decompose(parse_sequent("<aa> p, <ab> p |~ ∀<x>(<x> q)"))
        assert branch.leaves[0].name == "ac"

    def test_shared_supply_never_repeats(self):
        names = NameSupply()
        first = decompose(parse_sequent("|~ ∀<x>(<x> q)"), names)
        second = decompose(parse_sequent("|~ ∀<x>(<x> q)"), names)
        assert first.leaves[0].name != second.leaves[0].name

    def test_custom_supply(self):
        class Fixed(NameSupply):
            def fresh(self):
                return "zed"

        branch = decompose(parse_sequent("∃<x>(<x> sat) |~"), Fixed())
        assert branch.leaves[0].name == "zed"


class TestNameSupply:
    def test_sequence(self):
        names = NameSupply()
        assert [names.fresh() for _ in range(3)] == ["aa", "ab", "ac"]

    def test_skips_reserved(self):
        names = NameSupply({"aa"})
        names.reserve(["ab"])
        assert names.fresh() == "ac"
        assert names.used == {"aa", "ab", "ac"}

    def test_rolls_over_to_three_letters(self):
        names = NameSupply("".join(p) for p in _two_letter_names())
        assert names.fresh() == "aaa"


def _two_letter_names():
    from itertools import product
    from string import ascii_lowercase
    return product(ascii_lowercase, repeat=2)


class TestShadowing:
    def test_rebinding_logs_warning(self, caplog):
        s = parse_sequent("<tom> sat |~ ∃<x>((<x> sat) & ∀<x>(<x> ran))")
        with caplog.at_level(logging.WARNING, logger="pysequent.decompose"):
            branch = decompose(s)
        assert any("rebinds" in rec.message for rec in caplog.records)
        # Substitution is unguarded: the inner binder's occurrences change too.
        assert _parents(branch) == [["<tom> sat |~ (<tom> sat & ∀<x>(<tom> ran))"]]


class TestTypes:
    def test_branch_and_leaf(self):
        branch = decompose(parse_sequent("|~ ~ A"))
        assert isinstance(branch, Branch)
        assert all(isinstance(leaf, Leaf) for leaf in branch.leaves)
