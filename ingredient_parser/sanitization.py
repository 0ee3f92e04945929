# ingredient_parser/sanitization.py
"""
Input sanitization: runs before a parse context is created.

Each rule is a plain str -> str function; a pipeline is an ordered sequence
of rules. The template engine never normalizes text itself, so everything
the templates rely on (lower case, single spaces, ASCII fractions) is
established here.

Default order:
  1. collapse repeated spaces
  2. "1 to 2" -> "1-2"
  3. drop bracketed text        "(about 1 small red onion)"
  4. drop alternates            "... or 1 small head of cauliflower"
  5. unicode fractions          "1 ½" -> "1 1/2"
  6. collapse spaces again (steps 3-5 can leave doubles)
  7. lower case
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable, Tuple


SanitizationRule = Callable[[str], str]


_SPACES_RE = re.compile(r"[ ]{2,}")
_TO_RANGE_RE = re.compile(r"(?<=[0-9]) to (?=[0-9])")
_BRACKETED_RE = re.compile(r"\(.*?\)")
_ALTERNATE_RE = re.compile(r" or .*")

UNICODE_FRACTIONS: Dict[str, str] = {
    "¼": "1/4",
    "½": "1/2",
    "¾": "3/4",
    "⅐": "1/7",
    "⅑": "1/9",
    "⅒": "1/10",
    "⅓": "1/3",
    "⅔": "2/3",
    "⅕": "1/5",
    "⅖": "2/5",
    "⅗": "3/5",
    "⅘": "4/5",
    "⅙": "1/6",
    "⅚": "5/6",
    "⅛": "1/8",
    "⅜": "3/8",
    "⅝": "5/8",
    "⅞": "7/8",
    "↉": "0/3",
}

_UNICODE_FRACTION_RE = re.compile("|".join(re.escape(k) for k in UNICODE_FRACTIONS))


def collapse_spaces(text: str) -> str:
    """'1/3  cup milk' -> '1/3 cup milk'"""
    return _SPACES_RE.sub(" ", text)


def substitute_ranges(text: str) -> str:
    """'1 to 2 cups flour' -> '1-2 cups flour'"""
    return _TO_RANGE_RE.sub("-", text)


def strip_bracketed_text(text: str) -> str:
    """'1/3 cup milk (to adjust consistency)' -> '1/3 cup milk '"""
    return _BRACKETED_RE.sub("", text)


def strip_alternate_ingredients(text: str) -> str:
    """'1 white onion or two small shallots' -> '1 white onion'"""
    return _ALTERNATE_RE.sub("", text)


def replace_unicode_fractions(text: str) -> str:
    """'1 ½ cup flour' -> '1 1/2 cup flour'"""
    return _UNICODE_FRACTION_RE.sub(lambda m: UNICODE_FRACTIONS[m.group(0)], text)


def to_lower_case(text: str) -> str:
    return text.lower()


DEFAULT_SANITIZATION_RULES: Tuple[SanitizationRule, ...] = (
    collapse_spaces,
    substitute_ranges,
    strip_bracketed_text,
    strip_alternate_ingredients,
    replace_unicode_fractions,
    collapse_spaces,
    to_lower_case,
)


def sanitize(text: str, rules: Iterable[SanitizationRule] = DEFAULT_SANITIZATION_RULES) -> str:
    for rule in rules:
        text = rule(text)
    return text
