"""Data structures for inflection rules."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


@dataclass(frozen=True)
class Rule:
    """A case-insensitive regex and the template that rewrites its matches.

    The template uses numbered backreferences (``\\1``, ``\\2``). A group that
    does not take part in a match expands to an empty string.
    """

    pattern: re.Pattern
    replacement: str

    @classmethod
    def of(cls, pattern: str, replacement: str) -> "Rule":
        return cls(re.compile(pattern, re.IGNORECASE), replacement)

    def matches(self, word: str) -> bool:
        # search, not fullmatch: anchoring is up to the pattern itself
        return self.pattern.search(word) is not None

    def apply(self, word: str) -> str:
        """Rewrite every match of the pattern in ``word``."""
        return self.pattern.sub(self.replacement, word)


# Ordered, first match wins.
RuleTable = Tuple[Rule, ...]


class Number(Enum):
    SINGULAR = "singular"
    PLURAL = "plural"

    @classmethod
    def for_count(cls, n) -> "Number":
        return cls.SINGULAR if n == 1 else cls.PLURAL
