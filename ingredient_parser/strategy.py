# ingredient_parser/strategy.py
"""
Parser Strategies: choosing among competing template matches.

Three match policies:

    FIRST_FULL_MATCH    templates in order, first full match wins
    BEST_FULL_MATCH     every full match is collected, a heuristic picks one
    BEST_PARTIAL_MATCH  first full match wins outright; otherwise a heuristic
                        picks among the partial matches

Each template attempt runs inside an uncommitted checkpoint, so the buffer is
back at its starting position before the next template is tried.

Heuristics score a list of candidate ParseMetadata and return the arg-max;
the first candidate wins ties.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union

from .errors import StrategyNotFoundError
from .input_buffer import ParserContext
from .projector import project_tokens
from .results import ParseMetadata, ParseResult
from .templates import MatchKind, Template, TemplateMatch
from .tokens import Token

log = logging.getLogger(__name__)


class MatchPolicy(Enum):
    FIRST_FULL_MATCH = "first_full_match"
    BEST_FULL_MATCH = "best_full_match"
    BEST_PARTIAL_MATCH = "best_partial_match"


# ── Heuristics ───────────────────────────────────────

Heuristic = Callable[[Sequence[ParseMetadata]], ParseMetadata]
Weight = Union[int, float, Decimal]


def _arg_max(candidates: Sequence[ParseMetadata], score) -> ParseMetadata:
    if not candidates:
        raise ValueError("heuristic needs at least one candidate match")
    best = candidates[0]
    best_score = score(best)
    for candidate in candidates[1:]:
        candidate_score = score(candidate)
        # strict '>' keeps the first-encountered candidate on ties
        if candidate_score > best_score:
            best, best_score = candidate, candidate_score
    return best


def greatest_token_count() -> Heuristic:
    """Prefer the match that produced the most tokens."""
    def heuristic(candidates: Sequence[ParseMetadata]) -> ParseMetadata:
        return _arg_max(candidates, lambda m: len(m.tokens))
    return heuristic


def weighted_token_sum(weight: Callable[[Token], Weight]) -> Heuristic:
    """Prefer the match whose tokens have the highest summed weight.

    *weight* scores a single token, e.g. a negative weight for a unit of
    kind UNKNOWN, more for an ingredient than for a literal.
    """
    def heuristic(candidates: Sequence[ParseMetadata]) -> ParseMetadata:
        return _arg_max(candidates, lambda m: sum(weight(t) for t in m.tokens))
    return heuristic


# ── Strategies ───────────────────────────────────────

class ParserStrategy:
    policy: MatchPolicy

    def handles(self, policy: MatchPolicy) -> bool:
        return policy is self.policy

    def parse(self, context: ParserContext, templates: Iterable[Template]) -> ParseResult:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    @staticmethod
    def _attempt(context: ParserContext, template: Template) -> TemplateMatch:
        # never committed: the buffer always rewinds for the next template
        with context.buffer.checkpoint():
            match = template.match(context)
        log.debug("template %r -> %s (%d tokens)", template.definition, match.kind.value, match.token_count)
        return match

    @staticmethod
    def _metadata(match: TemplateMatch) -> ParseMetadata:
        return ParseMetadata(
            template=match.template,
            tokens=match.tokens,
            match_kind=match.kind,
        )

    @staticmethod
    def _success(chosen: ParseMetadata, attempted: Sequence[Template]) -> ParseResult:
        metadata = ParseMetadata(
            template=chosen.template,
            tokens=chosen.tokens,
            match_kind=chosen.match_kind,
            attempted_templates=tuple(attempted),
        )
        return ParseResult(success=True, details=project_tokens(chosen.tokens), metadata=metadata)


class FirstFullMatchStrategy(ParserStrategy):
    policy = MatchPolicy.FIRST_FULL_MATCH

    def parse(self, context: ParserContext, templates: Iterable[Template]) -> ParseResult:
        attempted: List[Template] = []
        for template in templates:
            match = self._attempt(context, template)
            attempted.append(template)
            if match.kind is MatchKind.FULL_MATCH:
                return self._success(self._metadata(match), attempted)
        return ParseResult.failure(attempted)


class _HeuristicStrategy(ParserStrategy):
    def __init__(self, heuristic: Optional[Heuristic] = None):
        self.heuristic: Heuristic = heuristic or greatest_token_count()


class BestFullMatchStrategy(_HeuristicStrategy):
    policy = MatchPolicy.BEST_FULL_MATCH

    def parse(self, context: ParserContext, templates: Iterable[Template]) -> ParseResult:
        attempted: List[Template] = []
        full_matches: List[ParseMetadata] = []
        for template in templates:
            match = self._attempt(context, template)
            attempted.append(template)
            if match.kind is MatchKind.FULL_MATCH:
                full_matches.append(self._metadata(match))

        if not full_matches:
            return ParseResult.failure(attempted)
        return self._success(self.heuristic(full_matches), attempted)


class BestPartialMatchStrategy(_HeuristicStrategy):
    policy = MatchPolicy.BEST_PARTIAL_MATCH

    def parse(self, context: ParserContext, templates: Iterable[Template]) -> ParseResult:
        attempted: List[Template] = []
        partial_matches: List[ParseMetadata] = []
        for template in templates:
            match = self._attempt(context, template)
            attempted.append(template)
            if match.kind is MatchKind.FULL_MATCH:
                return self._success(self._metadata(match), attempted)
            if match.kind is MatchKind.PARTIAL_MATCH:
                partial_matches.append(self._metadata(match))

        if not partial_matches:
            return ParseResult.failure(attempted)
        return self._success(self.heuristic(partial_matches), attempted)


# ── Factory ──────────────────────────────────────────

class ParserStrategyFactory:
    def __init__(self, strategies: Iterable[ParserStrategy]):
        self._strategies: Tuple[ParserStrategy, ...] = tuple(strategies)

    def get_strategy(self, policy: MatchPolicy) -> ParserStrategy:
        for strategy in self._strategies:
            if strategy.handles(policy):
                return strategy
        raise StrategyNotFoundError(f"No parser strategy found that can handle {policy}.")


def default_strategy_factory(heuristic: Optional[Heuristic] = None) -> ParserStrategyFactory:
    return ParserStrategyFactory([
        FirstFullMatchStrategy(),
        BestFullMatchStrategy(heuristic),
        BestPartialMatchStrategy(heuristic),
    ])
