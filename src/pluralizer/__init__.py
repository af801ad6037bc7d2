"""English noun singularization and pluralization."""

from .inflection import inflect, is_uncountable, pluralize, resolve, singularize
from .models import Number, Rule, RuleTable
from .rules import PLURAL_RULES, SINGULAR_RULES, UNCOUNTABLE

__all__ = [
    "Number",
    "PLURAL_RULES",
    "Rule",
    "RuleTable",
    "SINGULAR_RULES",
    "UNCOUNTABLE",
    "inflect",
    "is_uncountable",
    "pluralize",
    "resolve",
    "singularize",
]
