# tests/test_amount_grammar.py
"""
Amount grammar: literals, fractions, mixed numbers and ranges.

Test groups:
  1. Valid amounts -> expected token
  2. Rejected amounts -> None
  3. Terminal reader behaviour on a shared buffer
  4. Canonical rendering of parsed amounts
"""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ingredient_parser.input_buffer import InputBuffer
from ingredient_parser.parsers.amount_grammar import (
    parse_amount,
    read_fraction,
    read_literal,
)
from ingredient_parser.projector import render_amount
from ingredient_parser.tokens import (
    FractionalAmount,
    RangeAmount,
    literal_amount as lit,
)


# ── Test data ───────────────────────────────────────

VALID_AMOUNTS = [
    # (raw, expected token)
    ("1", lit("1")),
    ("12", lit("12")),
    ("1.5", lit("1.5")),
    ("0.25", lit("0.25")),
    (".5", lit("0.5")),
    ("1/2", FractionalAmount(lit("1"), lit("2"))),
    ("1 1/2", FractionalAmount(lit("1"), lit("2"), whole=lit("1"))),
    ("1-1/2", FractionalAmount(lit("1"), lit("2"), whole=lit("1"))),
    ("2-1/2", FractionalAmount(lit("1"), lit("2"), whole=lit("2"))),
    ("1-2", RangeAmount(lit("1"), lit("2"))),
    ("1 - 2", RangeAmount(lit("1"), lit("2"))),
    ("5-6", RangeAmount(lit("5"), lit("6"))),
    ("1/4-1/3", RangeAmount(FractionalAmount(lit("1"), lit("4")), FractionalAmount(lit("1"), lit("3")))),
    ("1/4 - 1/3", RangeAmount(FractionalAmount(lit("1"), lit("4")), FractionalAmount(lit("1"), lit("3")))),
    (
        "1 1/2-2 1/2",
        RangeAmount(
            FractionalAmount(lit("1"), lit("2"), whole=lit("1")),
            FractionalAmount(lit("1"), lit("2"), whole=lit("2")),
        ),
    ),
]

INVALID_AMOUNTS = [
    "",
    ".",
    "test",
    "1..2",
    "1/t",
    "1-t",
    "1-1/t",
    "1/3-1",   # valid prefix, trailing garbage
    "1/2-3",   # bounds of different kinds
    "1 15",
    "1-",
]

RENDER_CASES = [
    # (raw, canonical)
    ("2", "2"),
    (".5", "0.5"),
    ("1.50", "1.50"),
    ("1/2", "1/2"),
    ("1 1/2", "1 1/2"),
    ("1-1/2", "1 1/2"),
    ("1 - 2", "1-2"),
    ("1/4 - 1/3", "1/4-1/3"),
]


# ===========================================================================
# SECTION 1: Valid amounts
# ===========================================================================

class TestValidAmounts:
    @pytest.mark.parametrize("raw,expected", VALID_AMOUNTS)
    def test_parses(self, raw, expected):
        assert parse_amount(raw) == expected

    def test_literal_is_decimal(self):
        token = parse_amount("0.25")
        assert isinstance(token.amount, Decimal)
        assert token.amount == Decimal("0.25")

    def test_mixed_flag(self):
        assert parse_amount("1 1/2").is_mixed
        assert not parse_amount("1/2").is_mixed


# ===========================================================================
# SECTION 2: Rejected amounts
# ===========================================================================

class TestInvalidAmounts:
    @pytest.mark.parametrize("raw", INVALID_AMOUNTS)
    def test_rejected(self, raw):
        assert parse_amount(raw) is None

    def test_rejection_does_not_raise(self):
        # grammar misses are values, not exceptions
        assert parse_amount("1/3-1") is None

    def test_rejection_logged_at_debug(self, caplog):
        with caplog.at_level("DEBUG", logger="ingredient_parser.parsers.amount_grammar"):
            parse_amount("1..2")
        assert "1..2" in caplog.text


# ===========================================================================
# SECTION 3: Terminal readers
# ===========================================================================

class TestTerminals:
    def test_read_literal_stops_at_non_amount(self):
        buf = InputBuffer("12.5abc")
        assert read_literal(buf) == lit("12.5")
        assert buf.position == 4

    def test_read_literal_second_point_fails(self):
        assert read_literal(InputBuffer("1.2.3")) is None

    def test_read_literal_nothing_to_read(self):
        buf = InputBuffer("abc")
        assert read_literal(buf) is None
        assert buf.position == 0

    def test_read_fraction_rewinds_failed_mixed_attempt(self):
        buf = InputBuffer("3/4 cup")
        assert read_fraction(buf) == FractionalAmount(lit("3"), lit("4"))
        assert buf.position == 3
        assert buf.depth == 0

    def test_read_fraction_failure_leaves_buffer(self):
        buf = InputBuffer("3 cups")
        assert read_fraction(buf) is None
        assert buf.position == 0


# ===========================================================================
# SECTION 4: Rendering
# ===========================================================================

class TestRendering:
    @pytest.mark.parametrize("raw,canonical", RENDER_CASES)
    def test_render(self, raw, canonical):
        assert render_amount(parse_amount(raw)) == canonical

    def test_canonical_form_reparses_to_same_token(self):
        for raw, _ in VALID_AMOUNTS:
            token = parse_amount(raw)
            assert parse_amount(render_amount(token)) == token
