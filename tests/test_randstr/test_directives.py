"""Tests for randstr.directives module."""

from __future__ import annotations

import pytest

from common.exceptions import InvalidPoolEntryError, InvalidPrefixError
from randstr.directives import PoolDirective, PoolSpec, Sign, parse_entries, parse_entry


def test_parse_entry_single_set():
    """Test a single exclusion."""
    assert parse_entry("-m") == [PoolDirective(Sign.EXCLUDE, "m")]


def test_parse_entry_multiple_sets():
    """Test several letters sharing one sign."""
    assert parse_entry("+dl") == [
        PoolDirective(Sign.INCLUDE, "d"),
        PoolDirective(Sign.INCLUDE, "l"),
    ]


def test_parse_entry_sign_switch():
    """Test that a sign inside a token applies to what follows."""
    assert parse_entry("-A+[01]") == [
        PoolDirective(Sign.EXCLUDE, "A"),
        PoolDirective(Sign.INCLUDE, ("0", "1")),
    ]


def test_parse_entry_custom_set():
    """Test custom characters between brackets, signs included literally."""
    assert parse_entry("+[%$+-]d") == [
        PoolDirective(Sign.INCLUDE, ("%", "$", "+", "-")),
        PoolDirective(Sign.INCLUDE, "d"),
    ]


def test_parse_entry_unclosed_custom_set():
    """Test that an unclosed custom set runs to the end of the token."""
    assert parse_entry("-[abc") == [PoolDirective(Sign.EXCLUDE, ("a", "b", "c"))]


def test_parse_entry_empty():
    """Test that an empty token is skipped."""
    assert parse_entry("") == []


@pytest.mark.parametrize("entry", ["d", "abc", "*m", "[x]"])
def test_parse_entry_invalid_prefix(entry: str):
    """Test tokens that do not start with + or -."""
    with pytest.raises(InvalidPrefixError, match="invalid entry prefix"):
        parse_entry(entry)


def test_parse_entry_invalid_letter():
    """Test an unknown set letter."""
    with pytest.raises(InvalidPoolEntryError, match="invalid pool entry: 'x'") as exc_info:
        parse_entry("+dx")
    assert "can be one of" in exc_info.value.hint


def test_parse_entries_last_directive_wins():
    """Test that the last directive decides a set's state."""
    assert parse_entries(["+d", "-d"]).included["d"] is False
    assert parse_entries(["-d", "+d"]).included["d"] is True
    assert parse_entries(["+d-d"]).included["d"] is False
    assert parse_entries(["-d+d"]).included["d"] is True


def test_parse_entries_all_letter_ignores_sign():
    """Test that A clears every set whichever sign it carries."""
    for entry in ["-A", "+A"]:
        pool_spec = parse_entries([entry])
        assert not any(pool_spec.included.values())


def test_parse_entries_all_then_include():
    """Test starting from nothing and adding sets back."""
    pool_spec = parse_entries(["-A", "+ld"])
    assert pool_spec.included == {"d": True, "l": True, "u": False, "s": False, "m": False}


def test_parse_entries_collects_custom_chars_in_order():
    """Test add and remove lists keep first-seen order."""
    pool_spec = parse_entries(["+[ab]", "-[.]", "+[c]"])
    assert pool_spec.add_chars == ["a", "b", "c"]
    assert pool_spec.remove_chars == ["."]


def test_pool_spec_defaults():
    """Test that every predefined set starts included."""
    pool_spec = PoolSpec()
    assert all(pool_spec.included.values())
    assert pool_spec.add_chars == []
    assert pool_spec.remove_chars == []
