"""Rule-based English noun inflection.

Words are converted by scanning an ordered rule table and applying the first
rule whose pattern is found in the word. Uncountable words short-circuit the
scan and come back unchanged.

Examples:
  singularize("men")      -> man
  pluralize("child")      -> children
  inflect("pegs", 1)      -> peg
  inflect("pegs", 22)     -> pegs
"""

from __future__ import annotations

import logging
import numbers
from enum import Enum
from typing import Union

from .models import Number, RuleTable
from .rules import PLURAL_RULES, SINGULAR_RULES, UNCOUNTABLE

logger = logging.getLogger(__name__)

# A plain string, or a symbol-like enum member standing in for one.
Word = Union[str, Enum]

_TABLES = {
    Number.SINGULAR: SINGULAR_RULES,
    Number.PLURAL: PLURAL_RULES,
}


def is_uncountable(word: str) -> bool:
    """Exact, case-sensitive check against the uncountable words."""
    return word in UNCOUNTABLE


def resolve(table: RuleTable, word: str) -> str:
    """Apply the first matching rule in ``table`` to ``word``.

    Uncountable words are returned as-is regardless of the table. A word no
    rule matches is also returned unchanged.
    """
    if is_uncountable(word):
        return word

    for rule in table:
        if rule.matches(word):
            return rule.apply(word)

    logger.debug("No inflection rule matched %r; leaving it unchanged", word)
    return word


def _to_text(word: Word) -> str:
    if isinstance(word, Enum):
        value = word.value
        return value if isinstance(value, str) else word.name
    if isinstance(word, str):
        return str.__str__(word)
    raise TypeError(
        f"word must be a str or an Enum member, not {type(word).__name__!r}"
    )


def singularize(word: Word) -> str:
    """Convert a plural English noun to its singular form.

    Words that are already singular usually come back unchanged
    (``singularize("man") == "man"``).
    """
    return resolve(SINGULAR_RULES, _to_text(word))


def pluralize(word: Word) -> str:
    """Convert a singular English noun to its plural form.

    Regular words already ending in ``s`` are left alone, but irregular plurals
    are not recognised: ``pluralize("children")`` gives ``childrens``.
    """
    return resolve(PLURAL_RULES, _to_text(word))


def inflect(word: Word, n: numbers.Number) -> str:
    """Singular form of ``word`` when ``n == 1``, plural form for any other count."""
    if isinstance(n, bool) or not isinstance(n, numbers.Number):
        raise TypeError(f"n must be a number, not {type(n).__name__!r}")
    return resolve(_TABLES[Number.for_count(n)], _to_text(word))
