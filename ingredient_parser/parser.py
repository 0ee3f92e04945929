# ingredient_parser/parser.py
"""
Ingredient Parser: entry point.

    parser = IngredientParser(default_config(MatchPolicy.BEST_FULL_MATCH))
    result = parser.parse("2 cups grated cheese")
    result.details.form        # "grated"
    result.details.ingredient  # "cheese"

Flow: raw text -> sanitization rules -> ParserContext -> strategy over the
compiled templates -> ParseResult. A line no template accepts comes back as
ParseResult(success=False) listing every attempted template.
"""

from __future__ import annotations

import logging
from typing import Optional

from .config import ParserConfig, default_config
from .errors import InvalidParserInputError
from .input_buffer import ParserContext
from .results import ParseResult
from .sanitization import sanitize

log = logging.getLogger(__name__)


class IngredientParser:
    def __init__(self, config: ParserConfig):
        self.config = config

    def __repr__(self) -> str:
        return (
            f"IngredientParser(templates={len(self.config.templates)}, "
            f"strategy={self.config.strategy!r})"
        )

    def sanitize(self, text: str) -> str:
        return sanitize(text, self.config.sanitization_rules)

    def parse(self, text: str) -> ParseResult:
        if not isinstance(text, str):
            raise InvalidParserInputError(f"Expected a string, got {type(text).__name__}")
        if not text:
            raise InvalidParserInputError("Input is not able to be parsed.")

        context = ParserContext(self.sanitize(text))
        result = self.config.strategy.parse(context, self.config.templates)
        if result.success:
            log.debug("parsed %r via %r", context.text, result.metadata.template.definition)
        else:
            log.debug("no template accepted %r (%d attempted)",
                      context.text, len(result.metadata.attempted_templates))
        return result

    def try_parse(self, text: str) -> Optional[ParseResult]:
        """Parse *text*, returning None instead of a failed result."""
        result = self.parse(text)
        return result if result.success else None


_default_parser: Optional[IngredientParser] = None


def _get_default_parser() -> IngredientParser:
    """Lazy-init the module-level parser built from default_config()."""
    global _default_parser
    if _default_parser is None:
        _default_parser = IngredientParser(default_config())
    return _default_parser


def parse_ingredient(text: str, config: Optional[ParserConfig] = None) -> ParseResult:
    """One-shot parse with *config*, or with the default configuration."""
    parser = IngredientParser(config) if config is not None else _get_default_parser()
    return parser.parse(text)
