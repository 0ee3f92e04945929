# ingredient_parser/parser_rules.py
"""
Rule combinators for small recursive-descent grammars over an InputBuffer.

    ConditionRule   succeeds (no token) iff a predicate on the buffer holds
    TokenRule       delegates to a read function that returns a token or None
    SequenceRule    runs rules in order, fails on the first failure, hands the
                    collected tokens to a mapper

Sequences are assembled with RuleBuilder:

    rule = (
        RuleBuilder()
        .token(read_literal)
        .condition(lambda b: b.try_consume("/"))
        .token(read_literal)
        .map(lambda toks: RuleResult.success(FractionalAmount(toks[0], toks[1])))
        .build()
    )

A SequenceRule does not rewind on failure; callers that try alternatives use
first_successful(), which wraps each attempt in its own checkpoint.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence

from .errors import InvalidConfigurationError
from .input_buffer import InputBuffer


@dataclass(frozen=True)
class RuleResult:
    succeeded: bool
    token: Any = None

    @classmethod
    def success(cls, token: Any = None) -> "RuleResult":
        return cls(True, token)

    @classmethod
    def fail(cls) -> "RuleResult":
        return _FAILED


_FAILED = RuleResult(False, None)


Mapper = Callable[[List[Any]], RuleResult]


class ParserRule:
    """Base rule: run against the buffer, report success and an optional token."""

    def execute(self, buffer: InputBuffer) -> RuleResult:
        raise NotImplementedError


class ConditionRule(ParserRule):
    def __init__(self, predicate: Callable[[InputBuffer], bool]):
        self._predicate = predicate

    def execute(self, buffer: InputBuffer) -> RuleResult:
        return RuleResult.success() if self._predicate(buffer) else RuleResult.fail()


class TokenRule(ParserRule):
    def __init__(self, read: Callable[[InputBuffer], Any]):
        self._read = read

    def execute(self, buffer: InputBuffer) -> RuleResult:
        token = self._read(buffer)
        return RuleResult.success(token) if token is not None else RuleResult.fail()


class SequenceRule(ParserRule):
    def __init__(self, rules: Sequence[ParserRule], mapper: Mapper):
        self._rules = tuple(rules)
        self._mapper = mapper

    def execute(self, buffer: InputBuffer) -> RuleResult:
        tokens: List[Any] = []
        for rule in self._rules:
            result = rule.execute(buffer)
            # every rule must succeed before anything reaches the mapper
            if not result.succeeded:
                return RuleResult.fail()
            if result.token is not None:
                tokens.append(result.token)
        return self._mapper(tokens)


class RuleBuilder:
    """Fluent builder for a SequenceRule."""

    def __init__(self):
        self._rules: List[ParserRule] = []
        self._mapper: Optional[Mapper] = None

    def condition(self, predicate: Callable[[InputBuffer], bool]) -> "RuleBuilder":
        return self.rule(ConditionRule(predicate))

    def token(self, read: Callable[[InputBuffer], Any]) -> "RuleBuilder":
        return self.rule(TokenRule(read))

    def rule(self, rule: ParserRule) -> "RuleBuilder":
        self._rules.append(rule)
        return self

    def map(self, mapper: Mapper) -> "RuleBuilder":
        self._mapper = mapper
        return self

    def build(self) -> SequenceRule:
        if not self._rules:
            raise InvalidConfigurationError("One or more rules must be configured.")
        if self._mapper is None:
            raise InvalidConfigurationError("A mapper must be configured.")
        return SequenceRule(self._rules, self._mapper)


def first_successful(rules: Sequence[ParserRule], buffer: InputBuffer) -> RuleResult:
    """Try *rules* in order, backtracking between attempts.

    Returns the result of the first rule that succeeds (its consumption is
    kept), or a failed result with the buffer left where it started.
    """
    for rule in rules:
        with buffer.checkpoint() as cp:
            result = rule.execute(buffer)
            if result.succeeded:
                cp.commit()
                return result
    return RuleResult.fail()
