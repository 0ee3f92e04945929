# tests/test_templates.py
"""
Template compilation and match classification.

Covers:
  - reader counts; empty literal segments are dropped
  - unknown placeholders fail at compile time
  - NO_MATCH / PARTIAL_MATCH / FULL_MATCH with matching token counts
  - compiled readers are reused across matches
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from ingredient_parser.errors import InvalidConfigurationError, TemplateCompileError
from ingredient_parser.input_buffer import ParserContext
from ingredient_parser.templates import (
    AMOUNT_NO_SPACE_UNIT_INGREDIENT,
    AMOUNT_UNIT_FORM_INGREDIENT,
    AMOUNT_UNIT_INGREDIENT,
    DEFAULT_TEMPLATE_DEFINITIONS,
    INGREDIENT,
    MatchKind,
    Template,
    compile_templates,
)
from ingredient_parser.token_readers import LiteralReader, default_reader_factory
from ingredient_parser.tokens import (
    FormToken,
    IngredientToken,
    LiteralToken,
    UnitKind,
    UnitToken,
    literal_amount as lit,
)


FACTORY = default_reader_factory()

READER_COUNTS = [
    # (definition, reader count)
    (AMOUNT_UNIT_INGREDIENT, 5),
    (AMOUNT_UNIT_FORM_INGREDIENT, 7),
    (AMOUNT_NO_SPACE_UNIT_INGREDIENT, 4),
    (INGREDIENT, 1),
    ("of {ingredient}", 2),
    ("no placeholders", 1),
]


def _match(definition: str, text: str):
    return Template(definition, FACTORY).match(ParserContext(text))


# ===========================================================================
# SECTION 1: Compilation
# ===========================================================================

class TestCompilation:
    @pytest.mark.parametrize("definition,count", READER_COUNTS)
    def test_reader_count(self, definition, count):
        assert len(Template(definition, FACTORY).readers) == count

    def test_segments_alternate(self):
        readers = Template(AMOUNT_UNIT_INGREDIENT, FACTORY).readers
        assert [r.token_type for r in readers] == [
            "amount", "literal", "unit", "literal", "ingredient",
        ]
        assert [r.value for r in readers if isinstance(r, LiteralReader)] == [" ", " "]

    def test_adjacent_placeholders_have_no_literal_between(self):
        readers = Template(AMOUNT_NO_SPACE_UNIT_INGREDIENT, FACTORY).readers
        assert [r.token_type for r in readers] == ["amount", "unit", "literal", "ingredient"]

    def test_placeholder_readers_come_from_factory(self):
        readers = Template(AMOUNT_UNIT_INGREDIENT, FACTORY).readers
        assert readers[0] is FACTORY.get("amount")

    def test_readers_cached(self):
        template = Template(AMOUNT_UNIT_INGREDIENT, FACTORY)
        assert template.readers is template.readers

    def test_unknown_placeholder_raises(self):
        template = Template("{amount} {colour}", FACTORY)
        with pytest.raises(TemplateCompileError):
            _ = template.readers

    def test_compile_error_is_configuration_error(self):
        assert issubclass(TemplateCompileError, InvalidConfigurationError)

    def test_compile_returns_template_with_readers_cached(self):
        template = Template(AMOUNT_UNIT_INGREDIENT, FACTORY)
        readers = template.compile().readers
        assert template.compile() is template
        assert template.readers is readers

    def test_compile_raises_for_unknown_placeholder(self):
        with pytest.raises(TemplateCompileError):
            Template("{amount} {colour}", FACTORY).compile()

    def test_compile_templates_is_eager(self):
        with pytest.raises(TemplateCompileError):
            compile_templates([AMOUNT_UNIT_INGREDIENT, "{bogus}"], FACTORY)

    def test_default_definitions_compile(self):
        templates = compile_templates(DEFAULT_TEMPLATE_DEFINITIONS, FACTORY)
        assert [t.definition for t in templates] == list(DEFAULT_TEMPLATE_DEFINITIONS)
        assert DEFAULT_TEMPLATE_DEFINITIONS[0] == "{amount} {unit} {form} {ingredient}"
        assert DEFAULT_TEMPLATE_DEFINITIONS[-1] == "{amount} {ingredient}"


# ===========================================================================
# SECTION 2: Match classification
# ===========================================================================

class TestMatch:
    def test_full_match(self):
        m = _match(AMOUNT_UNIT_INGREDIENT, "1 bag vegan sausages")
        assert m.kind is MatchKind.FULL_MATCH
        assert m.tokens == (
            lit("1"),
            LiteralToken(" "),
            UnitToken("bag", UnitKind.UNKNOWN),
            LiteralToken(" "),
            IngredientToken("vegan sausages"),
        )

    def test_full_match_token_count_equals_reader_count(self):
        template = Template(AMOUNT_UNIT_FORM_INGREDIENT, FACTORY)
        m = template.match(ParserContext("2 cups grated cheese"))
        assert m.kind is MatchKind.FULL_MATCH
        assert m.token_count == len(template.readers) == 7
        assert FormToken("grated") in m.tokens
        assert IngredientToken("cheese") in m.tokens

    def test_partial_match(self):
        m = _match(AMOUNT_UNIT_FORM_INGREDIENT, "2 cups cheese")
        assert m.kind is MatchKind.PARTIAL_MATCH
        assert 0 < m.token_count < 7

    def test_amount_first_template_without_amount_is_no_match(self):
        m = _match(AMOUNT_UNIT_INGREDIENT, "test cups carrot")
        assert m.kind is MatchKind.NO_MATCH
        assert m.tokens == ()

    @pytest.mark.parametrize("definition", DEFAULT_TEMPLATE_DEFINITIONS)
    def test_no_content_is_no_match_for_every_default(self, definition):
        m = _match(definition, "!!!")
        assert m.kind is MatchKind.NO_MATCH
        assert m.token_count == 0

    def test_no_match(self):
        m = _match("of {ingredient}", "cheese")
        assert m.kind is MatchKind.NO_MATCH
        assert m.token_count == 0

    def test_full_match_need_not_consume_everything(self):
        ctx = ParserContext("1 cup milk, warmed")
        m = Template(AMOUNT_UNIT_INGREDIENT, FACTORY).match(ctx)
        assert m.kind is MatchKind.FULL_MATCH
        assert ctx.buffer.remaining() == ", warmed"

    def test_match_does_not_rewind(self):
        ctx = ParserContext("2 cups cheese")
        Template(AMOUNT_UNIT_FORM_INGREDIENT, FACTORY).match(ctx)
        assert ctx.buffer.position > 0

    def test_template_reused_across_contexts(self):
        template = Template(AMOUNT_UNIT_INGREDIENT, FACTORY)
        first = template.match(ParserContext("1 cup milk"))
        second = template.match(ParserContext("2 cups sugar"))
        assert first.kind is second.kind is MatchKind.FULL_MATCH
        assert IngredientToken("sugar") in second.tokens
