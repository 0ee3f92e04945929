# ingredient_parser/parsers/amount_grammar.py
"""
Amount Grammar: typed parse of the quantity part of an ingredient line.

    amount   := range | fraction | literal
    range    := fraction ' '? '-' ' '? fraction
              | literal  ' '? '-' ' '? literal
    fraction := literal (' ' | '-') literal '/' literal      (mixed number)
              | literal '/' literal
    literal  := digits with at most one '.'                  (Decimal)

Order matters: range before fraction before literal, each alternative inside
its own checkpoint. "1-1/2" first matches the literal range 1-1, which then
fails the end-of-input check and rewinds so the mixed-number rule can take it.

The whole raw amount must be consumed; "1/3-1" is rejected even though
"1/3" is a valid prefix. Rejection is a normal outcome: parse_amount()
returns None.

Depth is fixed (three alternation levels), so backtracking stays linear in
the length of the amount.
"""

from __future__ import annotations

import logging
from decimal import Decimal, InvalidOperation
from typing import List, Optional

from ..input_buffer import InputBuffer
from ..parser_rules import ParserRule, RuleBuilder, RuleResult, first_successful
from ..tokens import AmountToken, FractionalAmount, LiteralAmount, RangeAmount

log = logging.getLogger(__name__)


# ── Terminals ────────────────────────────────────────

def read_literal(buffer: InputBuffer) -> Optional[LiteralAmount]:
    """Read digits with at most one decimal point as a LiteralAmount."""
    chars: List[str] = []
    seen_point = False
    while buffer.is_digit() or buffer.matches(lambda c: c == "."):
        c = buffer.next()
        if c == ".":
            if seen_point:
                return None
            seen_point = True
        chars.append(c)

    raw = "".join(chars)
    if not raw or raw == ".":
        return None
    try:
        return LiteralAmount(Decimal(raw))
    except InvalidOperation:
        return None


def _at_end(buffer: InputBuffer) -> bool:
    return not buffer.has_next()


def _range_separator(builder: RuleBuilder) -> RuleBuilder:
    return (
        builder
        .condition(lambda b: b.optionally_consume(" "))
        .condition(lambda b: b.try_consume("-"))
        .condition(lambda b: b.optionally_consume(" "))
    )


# ── Non-terminals ────────────────────────────────────

def read_fraction(buffer: InputBuffer) -> Optional[FractionalAmount]:
    return first_successful(_FRACTION_RULES, buffer).token


def read_range(buffer: InputBuffer) -> Optional[RangeAmount]:
    return first_successful(_RANGE_RULES, buffer).token


def read_amount(buffer: InputBuffer) -> Optional[AmountToken]:
    return first_successful(_AMOUNT_RULES, buffer).token


# ── Rules ────────────────────────────────────────────
# Built once at import; rules hold no per-call state.

_FRACTION_RULES: List[ParserRule] = [
    # 1 1/2, 1-1/2
    RuleBuilder()
    .token(read_literal)
    .condition(lambda b: b.try_consume(" ") or b.try_consume("-"))
    .token(read_literal)
    .condition(lambda b: b.try_consume("/"))
    .token(read_literal)
    .map(lambda t: RuleResult.success(FractionalAmount(numerator=t[1], denominator=t[2], whole=t[0])))
    .build(),
    # 1/2
    RuleBuilder()
    .token(read_literal)
    .condition(lambda b: b.try_consume("/"))
    .token(read_literal)
    .map(lambda t: RuleResult.success(FractionalAmount(numerator=t[0], denominator=t[1])))
    .build(),
]

_RANGE_RULES: List[ParserRule] = [
    # 1/4-1/3, 1/4 - 1/3
    _range_separator(RuleBuilder().token(read_fraction))
    .token(read_fraction)
    .map(lambda t: RuleResult.success(RangeAmount(t[0], t[1])))
    .build(),
    # 1-2, 1 - 2
    _range_separator(RuleBuilder().token(read_literal))
    .token(read_literal)
    .map(lambda t: RuleResult.success(RangeAmount(t[0], t[1])))
    .build(),
]


def _whole_input(read) -> ParserRule:
    return (
        RuleBuilder()
        .token(read)
        .condition(_at_end)
        .map(lambda t: RuleResult.success(t[0]))
        .build()
    )


_AMOUNT_RULES: List[ParserRule] = [
    _whole_input(read_range),
    _whole_input(read_fraction),
    _whole_input(read_literal),
]


# ── Public API ───────────────────────────────────────

def parse_amount(raw: str) -> Optional[AmountToken]:
    """Parse a raw amount string ("1", "1.5", "1 1/2", "1/4-1/3") to a token.

    Returns None when no alternative consumes the whole string.
    """
    if not raw:
        return None
    token = read_amount(InputBuffer(raw))
    if token is None:
        log.debug("amount grammar rejected %r", raw)
    return token


__all__ = [
    "parse_amount",
    "read_amount",
    "read_range",
    "read_fraction",
    "read_literal",
]
