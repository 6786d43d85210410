"""Tests for the omega-word expression parser.

Covers operator precedence, the omega suffix rules, error messages with
positions, and canonical re-serialization of parsed trees.
"""

import pytest

from buchicheck.exceptions import ParseError
from buchicheck.parser.ast import (
    Concat,
    Literal,
    Omega,
    Plus,
    Star,
    Union,
    count_omega,
    depth,
    estimate_complexity,
    to_source,
)
from buchicheck.parser.parser import MAX_DEPTH, TOO_DEEP_MESSAGE, parse

a, b, c = Literal("a"), Literal("b"), Literal("c")


# =============================================================================
# STRUCTURE AND PRECEDENCE
# =============================================================================


class TestStructure:
    """Parsed trees for well-formed expressions."""

    CASES = [
        ("a", a, "single literal"),
        ("ab", Concat((a, b)), "concatenation"),
        ("a|b", Union((a, b)), "union"),
        ("a|bc", Union((a, Concat((b, c)))), "union binds looser than concat"),
        ("ab*", Concat((a, Star(b))), "star binds tighter than concat"),
        ("(ab)*", Star(Concat((a, b))), "parenthesized star"),
        ("a*+", Plus(Star(a)), "stacked postfix operators"),
        ("a^w", Omega(a), "omega suffix"),
        ("a^ω", Omega(a), "greek omega suffix"),
        ("a*^w", Omega(Star(a)), "star under omega"),
        ("a b ^w", Concat((a, Omega(b))), "whitespace between tokens"),
        ("(a|b)c^w", Concat((Union((a, b)), Omega(c))), "group then loop"),
        ("((a))", a, "redundant parentheses"),
        ("a|b|c", Union((a, b, c)), "flat union"),
        ("0#", Concat((Literal("0"), Literal("#"))), "non-letter literals"),
    ]

    @pytest.mark.parametrize("source,expected,name", CASES)
    def test_parse(self, source, expected, name):
        assert parse(source) == expected, f"{source!r} ({name})"

    def test_omega_closes_operand(self):
        """Nothing may follow ^w on the same operand."""
        with pytest.raises(ParseError) as exc:
            parse("a^w*")
        assert exc.value.position == 3

    def test_nodes_are_immutable(self):
        node = parse("ab")
        with pytest.raises(AttributeError):
            node.nodes = ()


# =============================================================================
# SYNTAX ERRORS
# =============================================================================


class TestSyntaxErrors:
    """Every syntax error is a ParseError with a message and position."""

    CASES = [
        ("", "Empty expression", -1),
        ("   ", "Empty expression", -1),
        ("a)", "Unexpected character ')'", 1),
        ("*a", "Unexpected character '*'", 0),
        ("a|", "Missing expression before operator", 2),
        ("|a", "Missing expression before operator", 0),
        ("()", "Missing expression before operator", 1),
        ("(ab", "Missing closing parenthesis", 3),
        ("a^x", 'Expected "w" or "ω" right after "^"', 1),
        ("a^", 'Expected "w" or "ω" right after "^"', 1),
    ]

    @pytest.mark.parametrize("source,message,position", CASES)
    def test_error(self, source, message, position):
        with pytest.raises(ParseError) as exc:
            parse(source)
        assert exc.value.message == message, f"{source!r}"
        assert exc.value.position == position, f"{source!r}"

    def test_str_includes_position(self):
        with pytest.raises(ParseError) as exc:
            parse("(ab")
        assert str(exc.value) == "Missing closing parenthesis at position 3"

    def test_str_without_position(self):
        with pytest.raises(ParseError) as exc:
            parse("")
        assert str(exc.value) == "Empty expression"


# =============================================================================
# RE-SERIALIZATION
# =============================================================================


class TestToSource:
    """to_source output parses back to an equal tree."""

    SOURCES = [
        "a",
        "ab(ba)^w",
        "a(b|c)*(ab)^w",
        "(a|b)|c",
        "a(bc)",
        "((ab)*)+",
        "(a^w)*",
        "(a^w)^w",
        "a**",
        "(a|bc)+d^ω",
        "x y z",
    ]

    @pytest.mark.parametrize("source", SOURCES)
    def test_round_trip(self, source):
        tree = parse(source)
        assert parse(to_source(tree)) == tree, f"{source!r} -> {to_source(tree)!r}"

    def test_canonical_form(self):
        assert to_source(parse("a b ^ω")) == "ab^w"
        assert to_source(parse("((a))|(b c)")) == "a|bc"


# =============================================================================
# HELPERS
# =============================================================================


class TestHelpers:
    def test_count_omega(self):
        assert count_omega(parse("ab")) == 0
        assert count_omega(parse("a^w")) == 1
        assert count_omega(parse("(a^w)^w|b^w")) == 3
        assert count_omega(None) == 0

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("a", 1),
            ("abc", 3),
            ("a|bc", 2),
            ("a*", 2),
            ("(ab)+", 3),
            ("ab^w", 4),
        ],
    )
    def test_estimate_complexity(self, source, expected):
        assert estimate_complexity(parse(source)) == expected

    def test_walk_visits_all_nodes(self):
        kinds = [type(n).__name__ for n in parse("a(b|c)*").walk()]
        assert kinds == ["Concat", "Literal", "Star", "Union", "Literal", "Literal"]

    @pytest.mark.parametrize(
        "source,expected",
        [("a", 1), ("ab", 2), ("a(b|c)*", 4), ("(ab)^w", 3)],
    )
    def test_depth(self, source, expected):
        assert depth(parse(source)) == expected

    def test_depth_of_absent_node(self):
        assert depth(None) == 0


# =============================================================================
# NESTING LIMITS
# =============================================================================


def star_chain(length):
    node = b
    for _ in range(length):
        node = Star(node)
    return node


class TestNestingLimits:
    def test_deep_parentheses(self):
        source = "(" * 300 + "b" + ")" * 300
        with pytest.raises(ParseError) as exc:
            parse(source)
        assert exc.value.message == TOO_DEEP_MESSAGE
        assert exc.value.position == MAX_DEPTH

    def test_parentheses_within_limit(self):
        assert parse("(" * 50 + "b" + ")" * 50) == b

    def test_stacked_postfix_operators(self):
        with pytest.raises(ParseError) as exc:
            parse("b" + "*" * 3000)
        assert exc.value.message == TOO_DEEP_MESSAGE
        assert exc.value.position == -1

    def test_depth_boundary(self):
        assert depth(parse("b" + "*" * (MAX_DEPTH - 1))) == MAX_DEPTH
        with pytest.raises(ParseError):
            parse("b" + "*" * MAX_DEPTH)

    def test_tree_walks_do_not_recurse(self):
        node = Omega(star_chain(5000))
        assert count_omega(node) == 1
        assert depth(node) == 5002
        assert sum(1 for _ in node.walk()) == 5002
