# ingredient_parser/parsers/form_vocab.py
"""
Default Form Vocabulary

Preparation words the FormReader recognizes. The reader stops at the first
prefix of the input found here, so keep entries that are strict prefixes of
other entries out of the set ("chop" would shadow "chopped").
"""

from __future__ import annotations

from typing import AbstractSet, FrozenSet


DEFAULT_FORMS: FrozenSet[str] = frozenset({
    "grated",
    "chopped",
    "drained",
    "shredded",
})


def is_known_form(token: str, forms: AbstractSet[str] = DEFAULT_FORMS) -> bool:
    """
    >>> is_known_form("grated")
    True
    >>> is_known_form("blah")
    False
    """
    return token in forms
