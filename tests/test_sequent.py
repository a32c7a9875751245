"""Tests for pysequent.sequent — structure, selection and parsing."""

import pytest

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
    EmptyStringError,
    MalformedStringError,
    atom,
    conjunction,
    negation,
    parse_proposition,
)


class TestComplexity:
    def test_sum_over_both_sides(self):
        s = parse_sequent("~ A, B & C |~ ~ ~ D")
        assert s.complexity() == 1 + 1 + 2

    def test_empty(self, empty_sequent):
        assert empty_sequent.complexity() == 0
        assert empty_sequent.is_atomic()

    def test_atomic_iff_no_complex_member(self):
        assert parse_sequent("A, B |~ C").is_atomic()
        assert not parse_sequent("A |~ ~ C").is_atomic()


class TestFirstComplexProposition:
    def test_antecedent_before_consequent(self):
        s = parse_sequent("A, B & C |~ ~ D")
        assert s.first_complex_proposition() == Coordinates(ANTECEDENT, 1)

    def test_consequent_when_antecedent_atomic(self):
        s = parse_sequent("A, B |~ C, D v E, ~ F")
        assert s.first_complex_proposition() == Coordinates(CONSEQUENT, 1)

    def test_none_when_atomic(self):
        assert parse_sequent("A |~ B").first_complex_proposition() is None

    def test_stable(self):
        s = parse_sequent("A, ~ B |~ C & D")
        assert s.first_complex_proposition() == s.first_complex_proposition()


class TestMutation:
    def test_remove_at(self):
        s = parse_sequent("A, B |~ C")
        removed = s.remove_at(ANTECEDENT, 0)
        assert removed == atom("A")
        assert s == Sequent([atom("B")], [atom("C")])

    def test_remove_out_of_range(self):
        with pytest.raises(IndexError):
            Sequent().remove_at(CONSEQUENT, 0)

    def test_remove_unknown_side(self):
        with pytest.raises(ValueError):
            parse_sequent("A |~ B").remove_at("middle", 0)

    def test_push(self, a, b):
        s = Sequent()
        s.push_left(a)
        s.push_right(b)
        s.push_right(a)
        assert s.antecedent == [a]
        assert s.consequent == [b, a]

    def test_mix(self):
        s = parse_sequent("A |~ B")
        s.mix(parse_sequent("C |~ D"))
        assert str(s) == "A, C |~ B, D"

    def test_clone_is_independent(self):
        s = parse_sequent("A |~ B")
        t = s.clone()
        t.push_left(atom("C"))
        assert s == parse_sequent("A |~ B")
        assert t != s


class TestNames:
    def test_union_over_both_sides(self):
        s = parse_sequent("<tom> sat |~ <ann> stood, <tom> ran")
        assert s.names() == ["tom", "ann"]

    def test_variables_are_not_names(self):
        assert parse_sequent("<x> sat |~").names() == []


class TestRendering:
    def test_str(self):
        s = Sequent([negation(atom("A")), atom("B")], [conjunction(atom("C"), atom("D"))])
        assert str(s) == "~(A), B |~ (C & D)"

    def test_empty_sides(self):
        assert str(Sequent()) == "|~"
        assert str(Sequent([], [atom("A")])) == "|~ A"
        assert str(Sequent([atom("A")], [])) == "A |~"

    def test_dict_round_trip(self):
        s = parse_sequent("A & B, ~ C |~ ∃<x>(<x> sat)")
        data = s.to_dict()
        assert data == {"antecedent": ["(A & B)", "~(C)"], "consequent": ["∃<x>(<x> sat)"]}
        assert Sequent.from_dict(data) == s


class TestParseSequent:
    def test_basic(self):
        s = parse_sequent("A, B |~ C, D")
        assert s.antecedent == [atom("A"), atom("B")]
        assert s.consequent == [atom("C"), atom("D")]

    def test_empty_sides(self):
        assert parse_sequent("|~ A") == Sequent([], [atom("A")])
        assert parse_sequent("A |~") == Sequent([atom("A")], [])
        assert parse_sequent(" |~ ") == Sequent()

    def test_nested_comma_does_not_split(self):
        s = parse_sequent("(loves <ann>, <bob>) & B |~ C")
        assert len(s.antecedent) == 1
        assert s.antecedent[0] == parse_proposition("(loves <ann>, <bob>) & B")

    def test_order_preserved(self):
        s = parse_sequent("C, A, B |~")
        assert [p.text for p in s.antecedent] == ["C", "A", "B"]

    @pytest.mark.parametrize("text,count", [("A, B", 0), ("A |~ B |~ C", 2)])
    def test_turnstile_count(self, text, count):
        with pytest.raises(TurnstileError) as exc:
            parse_sequent(text)
        assert exc.value.count == count

    def test_bad_proposition(self):
        with pytest.raises(SequentPropositionError) as exc:
            parse_sequent("A & |~ B")
        assert exc.value.text == "A & "
        assert isinstance(exc.value.error, MalformedStringError)
        assert exc.value.__cause__ is exc.value.error

    def test_empty_item(self):
        with pytest.raises(SequentPropositionError) as exc:
            parse_sequent("A, , B |~ C")
        assert isinstance(exc.value.error, EmptyStringError)

    def test_errors_are_value_errors(self):
        assert issubclass(SequentError, ValueError)
