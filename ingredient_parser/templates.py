# ingredient_parser/templates.py
"""
Templates: ingredient line shapes such as "{amount} {unit} {ingredient}".

A definition is split on {placeholder} segments with the placeholder kept, so
literal text and placeholders alternate. Empty literal segments (before a
leading or after a trailing placeholder, or between adjacent placeholders)
are dropped:

    "{amount} {unit} {ingredient}"
      -> {amount}, " ", {unit}, " ", {ingredient}

Placeholders resolve to readers through a TokenReaderFactory; literal
segments become LiteralReaders. The reader list is compiled on first use and
then reused for every parse; it holds no per-call state.

match() runs the readers in order and classifies the attempt:

    NO_MATCH       first reader failed, no tokens
    PARTIAL_MATCH  some readers succeeded before one failed
    FULL_MATCH     every reader succeeded

match() does not rewind the buffer; callers checkpoint around each attempt.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .errors import TemplateCompileError
from .input_buffer import ParserContext
from .token_readers import LiteralReader, TokenReader, TokenReaderFactory
from .tokens import Token


PLACEHOLDER_RE = re.compile(r"(\{[a-z][a-z_]*\})")


class MatchKind(Enum):
    NO_MATCH = "no_match"
    PARTIAL_MATCH = "partial_match"
    FULL_MATCH = "full_match"


@dataclass(frozen=True)
class TemplateMatch:
    template: "Template"
    kind: MatchKind
    tokens: Tuple[Token, ...]

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class Template:
    def __init__(self, definition: str, reader_factory: TokenReaderFactory):
        self._definition = definition
        self._reader_factory = reader_factory
        self._readers: Optional[Tuple[TokenReader, ...]] = None

    def __repr__(self) -> str:
        return f"Template({self._definition!r})"

    @property
    def definition(self) -> str:
        return self._definition

    @property
    def readers(self) -> Tuple[TokenReader, ...]:
        return self.compile()._readers

    def compile(self) -> "Template":
        """Resolve every placeholder once; raises TemplateCompileError."""
        if self._readers is None:
            self._readers = tuple(self._compile())
        return self

    def _compile(self) -> List[TokenReader]:
        readers: List[TokenReader] = []
        for segment in PLACEHOLDER_RE.split(self._definition):
            if PLACEHOLDER_RE.fullmatch(segment):
                token_type = segment[1:-1]
                reader = self._reader_factory.get(token_type)
                if reader is None:
                    raise TemplateCompileError(
                        f"Template {self._definition!r}: no token reader registered "
                        f"for {segment} (known: {', '.join(self._reader_factory.token_types)})"
                    )
                readers.append(reader)
            elif segment:
                readers.append(LiteralReader(segment))
        return readers

    def match(self, context: ParserContext) -> TemplateMatch:
        tokens: List[Token] = []
        for reader in self.readers:
            token = reader.read(context)
            if token is None:
                kind = MatchKind.PARTIAL_MATCH if tokens else MatchKind.NO_MATCH
                return TemplateMatch(self, kind, tuple(tokens))
            tokens.append(token)
        return TemplateMatch(self, MatchKind.FULL_MATCH, tuple(tokens))


# ── Default definitions ──────────────────────────────

AMOUNT_UNIT_FORM_INGREDIENT = "{amount} {unit} {form} {ingredient}"
AMOUNT_UNIT_INGREDIENT = "{amount} {unit} {ingredient}"
AMOUNT_NO_SPACE_UNIT_INGREDIENT = "{amount}{unit} {ingredient}"
INGREDIENT_AMOUNT_UNIT = "{ingredient}: {amount} {unit}"
AMOUNT_INGREDIENT_FORM = "{amount} {ingredient}, {form}"
AMOUNT_UNIT_INGREDIENT_FORM = "{amount} {unit} {ingredient}, {form}"
AMOUNT_UNIT_OF_FORM_INGREDIENT = "{amount} {unit} of {form} {ingredient}"
UNIT_OF_FORM_INGREDIENT = "{unit} of {form} {ingredient}"
INGREDIENT = "{ingredient}"
AMOUNT_INGREDIENT = "{amount} {ingredient}"

DEFAULT_TEMPLATE_DEFINITIONS: Tuple[str, ...] = (
    AMOUNT_UNIT_FORM_INGREDIENT,
    AMOUNT_UNIT_INGREDIENT,
    AMOUNT_NO_SPACE_UNIT_INGREDIENT,
    INGREDIENT_AMOUNT_UNIT,
    AMOUNT_INGREDIENT_FORM,
    AMOUNT_UNIT_INGREDIENT_FORM,
    AMOUNT_UNIT_OF_FORM_INGREDIENT,
    UNIT_OF_FORM_INGREDIENT,
    INGREDIENT,
    AMOUNT_INGREDIENT,
)


def compile_templates(definitions, reader_factory: TokenReaderFactory) -> List[Template]:
    """Build and eagerly compile templates, so bad placeholders fail up front."""
    return [Template(d, reader_factory).compile() for d in definitions]
