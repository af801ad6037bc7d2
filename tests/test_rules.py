"""Tests for the rule tables and the resolver."""

import logging
import re

import pytest

from pluralizer import PLURAL_RULES, SINGULAR_RULES, Number, Rule, resolve
from pluralizer.rules import IRREGULAR_PLURAL, IRREGULAR_SINGULAR


class TestTables:
    @pytest.mark.parametrize("table", [SINGULAR_RULES, PLURAL_RULES])
    def test_tables_are_immutable_and_non_empty(self, table):
        assert isinstance(table, tuple)
        assert table
        with pytest.raises(TypeError):
            table[0] = Rule.of("x", "y")

    def test_rules_are_frozen(self):
        with pytest.raises(AttributeError):
            SINGULAR_RULES[0].replacement = "z"

    @pytest.mark.parametrize("table", [SINGULAR_RULES, PLURAL_RULES])
    def test_every_pattern_ignores_case(self, table):
        assert all(rule.pattern.flags & re.IGNORECASE for rule in table)

    def test_irregulars_lead_each_table(self):
        singular_head = SINGULAR_RULES[:len(IRREGULAR_SINGULAR)]
        plural_head = PLURAL_RULES[:len(IRREGULAR_PLURAL)]
        assert [r.pattern.pattern for r in singular_head] == [p for p, _ in IRREGULAR_SINGULAR]
        assert [r.pattern.pattern for r in plural_head] == [p for p, _ in IRREGULAR_PLURAL]

    def test_plural_catch_all_matches_anything(self):
        last = PLURAL_RULES[-1]
        for word in ("", "x", "sheep", "123"):
            assert last.matches(word)

    def test_singular_table_ends_by_stripping_s(self):
        last = SINGULAR_RULES[-1]
        assert last.apply("pegs") == "peg"
        assert not last.matches("peg")


class TestRule:
    def test_search_is_not_anchored_unless_the_pattern_is(self):
        assert Rule.of(r"(pe)ople", r"\1rson").matches("townspeople")
        assert not Rule.of(r"^(m)en$", r"\1an").matches("women")

    def test_replaces_every_match(self):
        assert Rule.of(r"o", "0").apply("foo") == "f00"

    def test_unmatched_groups_expand_to_empty_text(self):
        rule = Rule.of(r"(?:([^f])fe|((hoo)|([lra]))f)$", r"\2\1ves")
        assert rule.apply("wife") == "wives"
        assert rule.apply("half") == "halves"


class TestResolve:
    def test_first_match_wins(self):
        table = (Rule.of(r"s$", "S"), Rule.of(r"$", "s"))
        assert resolve(table, "pegs") == "pegS"
        assert resolve(table, "peg") == "pegs"

    def test_uncountable_short_circuits_any_table(self):
        table = (Rule.of(r"$", "!"),)
        assert resolve(table, "sheep") == "sheep"
        assert resolve(table, "sheep!") == "sheep!!"

    def test_no_match_returns_word(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="pluralizer.inflection"):
            assert resolve((Rule.of(r"^q", "k"),), "apple") == "apple"
        assert "No inflection rule matched" in caplog.text

    def test_empty_table(self):
        assert resolve((), "apple") == "apple"


class TestNumber:
    @pytest.mark.parametrize("n, expected", [
        (1, Number.SINGULAR),
        (1.0, Number.SINGULAR),
        (0, Number.PLURAL),
        (-1, Number.PLURAL),
        (22, Number.PLURAL),
    ])
    def test_for_count(self, n, expected):
        assert Number.for_count(n) is expected
