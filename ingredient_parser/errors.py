# ingredient_parser/errors.py
"""
Exception taxonomy for the ingredient parser.

Only protocol misuse (buffer / checkpoint) and invalid static configuration
raise. A line that no template matches is a normal outcome and comes back as
a failed ParseResult, never as one of these.
"""

from __future__ import annotations


class IngredientParserError(Exception):
    """Base class for every error raised by the ingredient parser."""


# ── Input buffer protocol ────────────────────────────

class InputBufferError(IngredientParserError):
    """Misuse of the InputBuffer read / checkpoint protocol."""


class BufferOutOfBoundsError(InputBufferError):
    """A read was attempted after every character had been consumed."""


class ConsumptionMismatchError(InputBufferError):
    """The expected character was not the next character in the buffer."""


class CheckpointOrderError(InputBufferError):
    """A checkpoint was released while it was not the top of the stack."""


# ── Configuration ────────────────────────────────────

class InvalidConfigurationError(IngredientParserError):
    """Required configuration is missing or malformed."""


class TemplateCompileError(InvalidConfigurationError):
    """A template definition references a token type with no registered reader."""


class StrategyNotFoundError(IngredientParserError):
    """No registered strategy handles the requested match policy."""


# ── Entry point ──────────────────────────────────────

class InvalidParserInputError(IngredientParserError):
    """The text handed to the parser cannot be parsed at all (None / empty)."""
