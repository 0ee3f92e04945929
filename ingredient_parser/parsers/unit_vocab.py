# ingredient_parser/parsers/unit_vocab.py
"""
Default Unit Vocabulary

Lowercase unit spelling -> UnitKind. Handed to UnitReader as configuration;
callers can pass their own mapping instead. Spellings not listed here still
read as a unit, with kind UnitKind.UNKNOWN.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..tokens import UnitKind


DEFAULT_UNITS: Mapping[str, UnitKind] = MappingProxyType({
    # Teaspoon
    "tsp": UnitKind.TEASPOON,
    "tsp.": UnitKind.TEASPOON,
    "t.": UnitKind.TEASPOON,
    "t": UnitKind.TEASPOON,
    "teaspoon": UnitKind.TEASPOON,
    "teaspoons": UnitKind.TEASPOON,
    # Tablespoon
    "tbl": UnitKind.TABLESPOON,
    "tbsp": UnitKind.TABLESPOON,
    "tbsp.": UnitKind.TABLESPOON,
    "tablespoon": UnitKind.TABLESPOON,
    "tablespoons": UnitKind.TABLESPOON,
    # Cup
    "cup": UnitKind.CUP,
    "cups": UnitKind.CUP,
    "c.": UnitKind.CUP,
    "c": UnitKind.CUP,
    # Weight
    "gram": UnitKind.GRAM,
    "grams": UnitKind.GRAM,
    "g.": UnitKind.GRAM,
    "g": UnitKind.GRAM,
    "kg": UnitKind.KILOGRAM,
    "kilogram": UnitKind.KILOGRAM,
    "kilograms": UnitKind.KILOGRAM,
    "ounce": UnitKind.OUNCE,
    "ounces": UnitKind.OUNCE,
    "oz": UnitKind.OUNCE,
    "oz.": UnitKind.OUNCE,
    "lb": UnitKind.POUND,
    "lb.": UnitKind.POUND,
    "lbs": UnitKind.POUND,
    "pound": UnitKind.POUND,
    "pounds": UnitKind.POUND,
    # Volume
    "ml": UnitKind.MILLILITRE,
    "millilitre": UnitKind.MILLILITRE,
    "millilitres": UnitKind.MILLILITRE,
    "milliliter": UnitKind.MILLILITRE,
    "milliliters": UnitKind.MILLILITRE,
    "l": UnitKind.LITRE,
    "litre": UnitKind.LITRE,
    "litres": UnitKind.LITRE,
    "liter": UnitKind.LITRE,
    "liters": UnitKind.LITRE,
    # Loose measures
    "handful": UnitKind.HANDFUL,
    "handfuls": UnitKind.HANDFUL,
    "pinch": UnitKind.PINCH,
    "pinches": UnitKind.PINCH,
    # Containers
    "can": UnitKind.CAN,
    "cans": UnitKind.CAN,
})


def unit_kind(raw: str, units: Mapping[str, UnitKind] = DEFAULT_UNITS) -> UnitKind:
    """Resolve a raw unit spelling, UNKNOWN when it is not in *units*.

    >>> unit_kind("tbsp")
    <UnitKind.TABLESPOON: 'tablespoon'>
    >>> unit_kind("bag")
    <UnitKind.UNKNOWN: 'unknown'>
    """
    return units.get(raw, UnitKind.UNKNOWN)
