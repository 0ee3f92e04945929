# ingredient_parser/projector.py
"""
Result projection: winning token list -> IngredientDetails.

Tokens are walked in order and each writes its own field; a later token of
the same kind overwrites an earlier one. Literal tokens are template
separators and never reach the output.

Amounts render to canonical strings:
    LiteralAmount     "2", "0.5"
    FractionalAmount  "1/2", "1 1/2"
    RangeAmount       "1-2", "1/4-1/3"
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .results import IngredientDetails
from .tokens import (
    AMOUNT_TOKEN_TYPES,
    FormToken,
    FractionalAmount,
    IngredientToken,
    LiteralAmount,
    LiteralToken,
    RangeAmount,
    Token,
    UnitToken,
)


def render_amount(token) -> str:
    if isinstance(token, LiteralAmount):
        # Decimal keeps trailing zeros as written ("1.50") and pads ".5" to "0.5"
        return str(token.amount)
    if isinstance(token, FractionalAmount):
        fraction = f"{token.numerator.amount}/{token.denominator.amount}"
        if token.is_mixed:
            return f"{token.whole.amount} {fraction}"
        return fraction
    if isinstance(token, RangeAmount):
        return f"{render_amount(token.lower)}-{render_amount(token.upper)}"
    raise TypeError(f"Not an amount token: {token!r}")


def project_tokens(tokens: Iterable[Token]) -> IngredientDetails:
    fields: Dict[str, Optional[str]] = {
        "amount": None,
        "unit": None,
        "form": None,
        "ingredient": None,
    }
    for token in tokens:
        if isinstance(token, LiteralToken):
            continue
        if isinstance(token, AMOUNT_TOKEN_TYPES):
            fields["amount"] = render_amount(token)
        elif isinstance(token, UnitToken):
            fields["unit"] = token.unit
        elif isinstance(token, FormToken):
            fields["form"] = token.form
        elif isinstance(token, IngredientToken):
            fields["ingredient"] = token.ingredient
        else:
            raise TypeError(f"Unsupported token type: {type(token).__name__}")
    return IngredientDetails(**fields)
