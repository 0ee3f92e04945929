# ingredient_parser/results.py
"""
Parse result types.

A ParseResult is returned for every parse call. success=False is a normal
outcome: details is None and metadata.attempted_templates lists every
template that was tried, for diagnostics.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

from .tokens import Token

if TYPE_CHECKING:
    from .templates import MatchKind, Template


@dataclass(frozen=True)
class IngredientDetails:
    """The four structured fields of an ingredient line."""
    amount: Optional[str] = None
    unit: Optional[str] = None
    form: Optional[str] = None
    ingredient: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "amount": self.amount,
            "unit": self.unit,
            "form": self.form,
            "ingredient": self.ingredient,
        }


@dataclass(frozen=True)
class ParseMetadata:
    """How a result was reached: winning template and tokens, plus what was tried."""
    template: Optional["Template"] = None
    tokens: Tuple[Token, ...] = ()
    match_kind: Optional["MatchKind"] = None
    attempted_templates: Tuple["Template", ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "template": self.template.definition if self.template is not None else None,
            "tokens": [repr(t) for t in self.tokens],
            "match_kind": self.match_kind.value if self.match_kind is not None else None,
            "attempted_templates": [t.definition for t in self.attempted_templates],
        }


@dataclass(frozen=True)
class ParseResult:
    success: bool
    details: Optional[IngredientDetails]
    metadata: ParseMetadata

    @classmethod
    def failure(cls, attempted_templates) -> "ParseResult":
        return cls(
            success=False,
            details=None,
            metadata=ParseMetadata(attempted_templates=tuple(attempted_templates)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "details": self.details.to_dict() if self.details is not None else None,
            "metadata": self.metadata.to_dict(),
        }
