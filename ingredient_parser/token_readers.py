# ingredient_parser/token_readers.py
"""
Token Readers: one reader per template placeholder.

Each reader consumes characters from the context's buffer and returns a
typed token, or None when it cannot read one. A reader that fails may have
consumed characters; the strategy rewinds the buffer between templates.

    {amount}      digits / - / '/' / '.', handed to the amount grammar
    {unit}        letters and '.', resolved against the unit vocabulary
    {form}        letters, stops at the first known form
    {ingredient}  letters, whitespace and '-', trimmed
    literal text  exact match of a template's literal segment

Vocabularies are injected and held read-only; readers carry no per-call
state, so one factory can serve any number of templates and parse calls.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional

from .errors import InvalidConfigurationError
from .input_buffer import InputBuffer, ParserContext
from .parsers.amount_grammar import parse_amount
from .parsers.form_vocab import DEFAULT_FORMS, is_known_form
from .parsers.unit_vocab import DEFAULT_UNITS, unit_kind
from .tokens import (
    AmountToken,
    FormToken,
    IngredientToken,
    LiteralToken,
    Token,
    UnitKind,
    UnitToken,
)


_AMOUNT_CHARS = frozenset("-/.")


def _is_amount_char(c: str) -> bool:
    return c.isdecimal() or c in _AMOUNT_CHARS


class TokenReader:
    """Base reader. Subclasses set token_type and implement read()."""

    token_type: str = ""

    def read(self, context: ParserContext) -> Optional[Token]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.token_type!r})"


# ── Amount ───────────────────────────────────────────

class AmountReader(TokenReader):
    token_type = "amount"

    def read(self, context: ParserContext) -> Optional[AmountToken]:
        raw = scan_raw_amount(context.buffer)
        if not raw:
            return None
        return parse_amount(raw)


def scan_raw_amount(buffer: InputBuffer) -> str:
    """Collect the amount substring at the cursor.

    Whitespace is kept only when the character after it is amount-valid
    again ("1 1/2", "1/4 - 1/3"); otherwise it ends the amount and is left
    for the next template literal.
    """
    chars: List[str] = []
    while buffer.has_next():
        if buffer.matches(_is_amount_char):
            chars.append(buffer.next())
            continue
        if chars and buffer.is_whitespace():
            lookahead = buffer.peek_ahead(1, 1)
            if lookahead and _is_amount_char(lookahead):
                chars.append(buffer.next())
                continue
        break
    return "".join(chars)


# ── Unit ─────────────────────────────────────────────

class UnitReader(TokenReader):
    token_type = "unit"

    def __init__(self, units: Optional[Mapping[str, UnitKind]] = None):
        self.units: Mapping[str, UnitKind] = MappingProxyType(
            dict(DEFAULT_UNITS if units is None else units)
        )

    def read(self, context: ParserContext) -> Optional[UnitToken]:
        buffer = context.buffer
        chars: List[str] = []
        while buffer.is_letter() or buffer.matches(lambda c: c == "."):
            chars.append(buffer.next())
        if not chars:
            return None
        raw = "".join(chars)
        return UnitToken(unit=raw, kind=unit_kind(raw, self.units))


# ── Form ─────────────────────────────────────────────

class FormReader(TokenReader):
    """Reads letters until the accumulated text is a known form.

    First match wins: with "grated" known, "gratedcheese" reads as "grated".
    """

    token_type = "form"

    def __init__(self, forms: Optional[AbstractSet[str]] = None):
        self.forms: AbstractSet[str] = frozenset(DEFAULT_FORMS if forms is None else forms)

    def read(self, context: ParserContext) -> Optional[FormToken]:
        buffer = context.buffer
        chars: List[str] = []
        while buffer.is_letter():
            chars.append(buffer.next())
            candidate = "".join(chars)
            if is_known_form(candidate, self.forms):
                return FormToken(candidate)
        return None


# ── Ingredient ───────────────────────────────────────

class IngredientReader(TokenReader):
    token_type = "ingredient"

    def read(self, context: ParserContext) -> Optional[IngredientToken]:
        buffer = context.buffer
        chars: List[str] = []
        while buffer.is_letter() or buffer.is_whitespace() or buffer.matches(lambda c: c == "-"):
            chars.append(buffer.next())
        ingredient = "".join(chars).strip()
        if not ingredient:
            return None
        return IngredientToken(ingredient)


# ── Literal ──────────────────────────────────────────

class LiteralReader(TokenReader):
    """Matches one literal template segment exactly. Empty segments always match."""

    token_type = "literal"

    def __init__(self, value: str):
        self.value = value

    def __repr__(self) -> str:
        return f"LiteralReader({self.value!r})"

    def read(self, context: ParserContext) -> Optional[LiteralToken]:
        buffer = context.buffer
        for c in self.value:
            if not buffer.try_consume(c):
                return None
        return LiteralToken(self.value)


# ── Factory ──────────────────────────────────────────

class TokenReaderFactory:
    """token_type -> reader lookup used by template compilation."""

    def __init__(self, readers: Iterable[TokenReader]):
        by_type: Dict[str, TokenReader] = {}
        for reader in readers:
            key = reader.token_type
            if not key:
                raise InvalidConfigurationError(f"{reader!r} has no token_type")
            if key in by_type:
                raise InvalidConfigurationError(f"Duplicate token reader for {key!r}")
            by_type[key] = reader
        self._readers = MappingProxyType(by_type)

    def get(self, token_type: str) -> Optional[TokenReader]:
        return self._readers.get(token_type)

    def __contains__(self, token_type: str) -> bool:
        return token_type in self._readers

    @property
    def token_types(self) -> List[str]:
        return list(self._readers)


def default_reader_factory(
    units: Optional[Mapping[str, UnitKind]] = None,
    forms: Optional[AbstractSet[str]] = None,
) -> TokenReaderFactory:
    """Amount, unit, form and ingredient readers over the given (or default) vocabularies."""
    return TokenReaderFactory([
        AmountReader(),
        UnitReader(units),
        FormReader(forms),
        IngredientReader(),
    ])
