"""Tests for the automaton text format."""

import pytest

from buchicheck.automaton.buchi import BuchiAutomaton, Transition
from buchicheck.automaton.text_format import parse_buchi_text, to_text
from buchicheck.exceptions import AutomatonFormatError
from buchicheck.samples import SAMPLES, get_sample

PURE_B = get_sample("pure-b").source


class TestValidDefinitions:
    @pytest.mark.parametrize("sample", SAMPLES, ids=lambda s: s.id)
    def test_samples_parse(self, sample):
        result = parse_buchi_text(sample.source)
        assert result.ok, f"{sample.id}: {result.errors}"
        assert result.errors == []

    def test_fields(self):
        automaton = parse_buchi_text(PURE_B).automaton
        assert automaton.states == ["q0", "q_bad"]
        assert automaton.alphabet == ["a", "b"]
        assert automaton.initial == "q0"
        assert automaton.accepting == ["q0"]
        assert automaton.transitions[0] == Transition("q0", "b", "q0")
        assert len(automaton.transitions) == 4

    def test_aliases_whitespace_and_case(self):
        source = """
            STATES: s t
            Alphabet: x, y
            initial: s
            accepting: t

            Transitions:
            s , x -> t
            t,y->s
        """
        automaton = parse_buchi_text(source).automaton
        assert automaton.states == ["s", "t"]
        assert automaton.alphabet == ["x", "y"]
        assert automaton.initial == "s"
        assert automaton.accepting == ["t"]
        assert automaton.transitions == [Transition("s", "x", "t"), Transition("t", "y", "s")]

    def test_unknown_header_lines_ignored(self):
        source = "# comment\n" + PURE_B
        assert parse_buchi_text(source).ok

    def test_to_text_round_trip(self):
        automaton = parse_buchi_text(PURE_B).automaton
        assert parse_buchi_text(to_text(automaton)).automaton == automaton


class TestInvalidDefinitions:
    def test_empty(self):
        result = parse_buchi_text("")
        assert result.automaton is None
        assert result.errors == [
            "No states declared",
            "No alphabet declared",
            "No start state declared",
            "No accepting states declared",
        ]

    def test_empty_header(self):
        errors = parse_buchi_text(PURE_B.replace("states: q0,q_bad", "states:")).errors
        assert "No entries found for states" in errors
        assert "No states declared" in errors

    @pytest.mark.parametrize(
        "line,error",
        [
            ("q0 b q0", 'Could not parse transition line: "q0 b q0"'),
            ("q0,b->", 'Could not parse transition line: "q0,b->"'),
            ("q0->q0", 'Incomplete transition: "q0->q0"'),
            ("q0,b->q9", "Transition target q9 not in states set"),
            ("q9,b->q0", "Transition source q9 not in states set"),
            ("q0,c->q0", 'Transition symbol "c" not in alphabet'),
        ],
    )
    def test_bad_transition(self, line, error):
        result = parse_buchi_text(PURE_B + "\n" + line)
        assert result.automaton is None
        assert error in result.errors

    def test_undeclared_start_and_accepting(self):
        source = PURE_B.replace("start: q0", "start: z").replace("accept: q0", "accept: y")
        errors = parse_buchi_text(source).errors
        assert 'Start state "z" not in states set' in errors
        assert 'Accepting state "y" not in states set' in errors

    def test_from_text_raises(self):
        with pytest.raises(AutomatonFormatError) as exc:
            BuchiAutomaton.from_text("states: q0")
        assert "No alphabet declared" in exc.value.errors


class TestAutomatonHelpers:
    def test_from_table(self):
        automaton = BuchiAutomaton.from_table(
            initial="q0", accepting=["q1"], delta={("q0", "a"): "q1", ("q1", "b"): "q0"}
        )
        assert automaton.states == ["q0", "q1"]
        assert automaton.alphabet == ["a", "b"]
        assert automaton.is_accepting("q1")

    def test_target_last_wins(self):
        automaton = BuchiAutomaton(
            states=["q0", "q1"],
            alphabet=["a"],
            initial="q0",
            accepting=["q0"],
            transitions=[Transition("q0", "a", "q0"), Transition("q0", "a", "q1")],
        )
        assert automaton.target("q0", "a") == "q1"
        assert automaton.target("q1", "a") is None
        assert len(automaton.transitions_from("q0")) == 2
