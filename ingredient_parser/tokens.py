# ingredient_parser/tokens.py
"""
Token types produced by the token readers.

Tokens are small frozen dataclasses; the class *is* the tag. Consumers
dispatch on the class (see projector.py) rather than through a visitor.

    LiteralToken        template separator text, never projected
    LiteralAmount       2, 1.5, .25
    FractionalAmount    1/2, 1 1/2 (whole number optional)
    RangeAmount         1-2, 1/4-1/3 (bounds are both literal or both fractional)
    UnitToken           raw unit text + resolved UnitKind
    FormToken           grated, chopped, ...
    IngredientToken     free text ingredient name
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class UnitKind(Enum):
    TEASPOON = "teaspoon"
    TABLESPOON = "tablespoon"
    CUP = "cup"
    GRAM = "gram"
    KILOGRAM = "kilogram"
    MILLILITRE = "millilitre"
    LITRE = "litre"
    POUND = "pound"
    OUNCE = "ounce"
    HANDFUL = "handful"
    CAN = "can"
    PINCH = "pinch"
    UNKNOWN = "unknown"


# ── Template separator ───────────────────────────────

@dataclass(frozen=True, slots=True)
class LiteralToken:
    value: str


# ── Amounts ──────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class LiteralAmount:
    amount: Decimal


@dataclass(frozen=True, slots=True)
class FractionalAmount:
    """numerator/denominator, optionally with a whole number (mixed number)."""
    numerator: LiteralAmount
    denominator: LiteralAmount
    whole: Optional[LiteralAmount] = None

    @property
    def is_mixed(self) -> bool:
        return self.whole is not None


@dataclass(frozen=True, slots=True)
class RangeAmount:
    """lower-upper. Both bounds share one type: literal or fractional."""
    lower: Union[LiteralAmount, FractionalAmount]
    upper: Union[LiteralAmount, FractionalAmount]

    def __post_init__(self) -> None:
        if type(self.lower) is not type(self.upper):
            raise TypeError(
                f"Range bounds must be the same kind, got "
                f"{type(self.lower).__name__} and {type(self.upper).__name__}"
            )
        if not isinstance(self.lower, (LiteralAmount, FractionalAmount)):
            raise TypeError(f"Unsupported range bound: {type(self.lower).__name__}")


AmountToken = Union[LiteralAmount, FractionalAmount, RangeAmount]
AMOUNT_TOKEN_TYPES = (LiteralAmount, FractionalAmount, RangeAmount)


# ── Fields ───────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class UnitToken:
    unit: str
    kind: UnitKind = UnitKind.UNKNOWN

    @property
    def is_known(self) -> bool:
        return self.kind is not UnitKind.UNKNOWN


@dataclass(frozen=True, slots=True)
class FormToken:
    form: str


@dataclass(frozen=True, slots=True)
class IngredientToken:
    ingredient: str


Token = Union[
    LiteralToken,
    LiteralAmount,
    FractionalAmount,
    RangeAmount,
    UnitToken,
    FormToken,
    IngredientToken,
]


def literal_amount(value: Union[str, int, Decimal]) -> LiteralAmount:
    """Convenience constructor used by the grammar and tests."""
    return LiteralAmount(Decimal(value))
