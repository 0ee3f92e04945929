# ingredient_parser/config.py
"""
Parser configuration.

ParserConfig is validated once, at construction: every required piece must be
present and every template must compile against the reader factory. A config
that exists is a config that can parse.

Environment:
  INGREDIENT_PARSER_POLICY   first_full_match | best_full_match | best_partial_match
                             (default policy for default_config(); default first_full_match)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional, Sequence, Tuple

from .errors import InvalidConfigurationError
from .sanitization import DEFAULT_SANITIZATION_RULES, SanitizationRule
from .strategy import Heuristic, MatchPolicy, ParserStrategy, default_strategy_factory
from .templates import DEFAULT_TEMPLATE_DEFINITIONS, Template, compile_templates
from .token_readers import TokenReaderFactory, default_reader_factory

log = logging.getLogger(__name__)


POLICY_ENV_VAR = "INGREDIENT_PARSER_POLICY"


def policy_from_env(default: MatchPolicy = MatchPolicy.FIRST_FULL_MATCH) -> MatchPolicy:
    raw = (os.getenv(POLICY_ENV_VAR) or "").strip().lower()
    if not raw:
        return default
    try:
        return MatchPolicy(raw)
    except ValueError:
        log.warning("Ignoring %s=%r; expected one of %s", POLICY_ENV_VAR, raw,
                    ", ".join(p.value for p in MatchPolicy))
        return default


@dataclass(frozen=True)
class ParserConfig:
    template_definitions: Sequence[str]
    reader_factory: TokenReaderFactory
    strategy: ParserStrategy
    sanitization_rules: Sequence[SanitizationRule] = DEFAULT_SANITIZATION_RULES
    templates: Tuple[Template, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.template_definitions, str):
            raise InvalidConfigurationError(
                "template_definitions must be a sequence of definitions, not a single string"
            )
        if not self.template_definitions:
            raise InvalidConfigurationError("At least one template definition is required.")
        if not all(isinstance(d, str) and d for d in self.template_definitions):
            raise InvalidConfigurationError("Template definitions must be non-empty strings.")
        if not isinstance(self.reader_factory, TokenReaderFactory):
            raise InvalidConfigurationError(
                f"reader_factory must be a TokenReaderFactory, got {type(self.reader_factory).__name__}"
            )
        if not isinstance(self.strategy, ParserStrategy):
            raise InvalidConfigurationError(
                f"strategy must be a ParserStrategy, got {type(self.strategy).__name__}"
            )
        if self.sanitization_rules is None or not all(callable(r) for r in self.sanitization_rules):
            raise InvalidConfigurationError("sanitization_rules must be a sequence of callables.")

        object.__setattr__(self, "template_definitions", tuple(self.template_definitions))
        object.__setattr__(self, "sanitization_rules", tuple(self.sanitization_rules))
        object.__setattr__(
            self, "templates", tuple(compile_templates(self.template_definitions, self.reader_factory))
        )


def default_config(
    policy: Optional[MatchPolicy] = None,
    heuristic: Optional[Heuristic] = None,
    template_definitions: Sequence[str] = DEFAULT_TEMPLATE_DEFINITIONS,
) -> ParserConfig:
    """Default templates, readers and sanitization with a strategy for *policy*.

    *policy* falls back to INGREDIENT_PARSER_POLICY, then FIRST_FULL_MATCH.
    *heuristic* applies to the best-match policies (greatest token count if None).
    """
    policy = policy or policy_from_env()
    strategy = default_strategy_factory(heuristic).get_strategy(policy)
    return ParserConfig(
        template_definitions=template_definitions,
        reader_factory=default_reader_factory(),
        strategy=strategy,
    )
