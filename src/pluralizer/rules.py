"""English inflection rule tables.

Each table is an ordered sequence of (pattern, replacement) rules where the
first pattern found in a word wins. Irregular nouns come first so that the
generic suffix rules further down never see them.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Tuple

from .models import Rule, RuleTable

# Words whose singular and plural forms are the same. Matched exactly,
# case-sensitive.
UNCOUNTABLE: FrozenSet[str] = frozenset({
    "aircraft",
    "bellows",
    "bison",
    "deer",
    "equipment",
    "fish",
    "hovercraft",
    "information",
    "jeans",
    "means",
    "measles",
    "money",
    "moose",
    "news",
    "pants",
    "police",
    "rice",
    "series",
    "sheep",
    "spacecraft",
    "species",
    "swine",
    "tights",
    "tongs",
    "trousers",
})


def _table(pairs: Iterable[Tuple[str, str]]) -> RuleTable:
    return tuple(Rule.of(pattern, replacement) for pattern, replacement in pairs)


# Irregular nouns: plural -> singular
IRREGULAR_SINGULAR: Tuple[Tuple[str, str], ...] = (
    (r"(alumn|cact|fung|radi|stimul|syllab)i", r"\1us"),
    (r"(alg|antenn|amoeb|larv|vertebr)ae", r"\1a"),
    (r"^(gen)era$", r"\1us"),
    (r"(pe)ople", r"\1rson"),
    (r"^(zombie)s$", r"\1"),
    (r"(g)eese", r"\1oose"),
    (r"(criteri)a", r"\1on"),
    (r"^(m)en$", r"\1an"),
    (r"^(echo)es", r"\1"),
    (r"^(hero)es", r"\1"),
    (r"^(potato)es", r"\1"),
    (r"^(tomato)es", r"\1"),
    (r"^(t)eeth", r"\1ooth"),
    (r"^(l)ice$", r"\1ouse"),
    (r"^(addend|bacteri|curricul|dat|memorand|quant)a$", r"\1um"),
    (r"^(di)ce", r"\1e"),
    (r"^(f)eet", r"\1oot"),
    (r"^(phenomen)a", r"\1on"),
)

# Irregular nouns: singular -> plural. Mostly the inverse of the above, plus
# identity rules for forms that are already plural.
IRREGULAR_PLURAL: Tuple[Tuple[str, str], ...] = (
    (r"(alumn|cact|fung|radi|stimul|syllab)us", r"\1i"),
    (r"(alg|antenn|amoeb|larv|vertebr)a", r"\1ae"),
    (r"^(gen)us$", r"\1era"),
    (r"(pe)rson$", r"\1ople"),
    (r"^(zombie)s$", r"\1"),
    (r"(g)oose$", r"\1eese"),
    (r"(criteri)on", r"\1a"),
    (r"^(men)$", r"\1"),
    (r"^(women)", r"\1"),
    (r"^(echo)$", r"\1es"),
    (r"^(hero)$", r"\1es"),
    (r"^(potato)", r"\1es"),
    (r"^(tomato)", r"\1es"),
    (r"^(t)ooth$", r"\1eeth"),
    (r"^(l)ouse$", r"\1ice"),
    (r"^(addend|bacteri|curricul|dat|memorand|quant)um$", r"\1a"),
    (r"^(di)e$", r"\1ce"),
    (r"^(f)oot$", r"\1eet"),
    (r"^(phenomen)on", r"\1a"),
)

SINGULAR_RULES: RuleTable = _table(IRREGULAR_SINGULAR + (
    (r"(child)ren", r"\1"),
    (r"(wo|sea)men$", r"\1man"),
    (r"^(m|l)ice$", r"\1ouse"),
    (r"(bus|canvas|status|alias)(es)?$", r"\1"),
    (r"(ss)$", r"\1"),
    (r"(database)s$", r"\1"),
    (r"([ti])a$", r"\1um"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", r"\1sis"),
    (r"(analy)(sis|ses)$", r"\1sis"),
    (r"(octop|vir)i$", r"\1us"),
    (r"(hive)s$", r"\1"),
    (r"(tive)s$", r"\1"),
    (r"(er)ves$", r"\1ve"),
    (r"([lora])ves$", r"\1f"),
    (r"([^f])ves$", r"\1fe"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"s$", ""),
))

PLURAL_RULES: RuleTable = _table(IRREGULAR_PLURAL + (
    (r"(child)$", r"\1ren"),
    (r"(m)an$", r"\1en"),
    (r"(m|l)ouse", r"\1ice"),
    (r"(database)s$", r"\1"),
    (r"(quiz)$", r"\1zes"),
    (r"^(ox)$", r"\1en"),
    (r"(matr|vert|ind)ix|ex$", r"\1ices"),
    (r"(x|ch|ss|sh)$", r"\1es"),
    (r"([^aeiouy]|qu)y$", r"\1ies"),
    (r"(hive)$", r"\1s"),
    (r"(sc[au]rf)$", r"\1s"),
    # only one of \1 / \2 captures for any given word
    (r"(?:([^f])fe|((hoo)|([lra]))f)$", r"\2\1ves"),
    (r"sis$", "ses"),
    (r"([ti])um$", r"\1a"),
    (r"(buffal|tomat)o$", r"\1oes"),
    (r"(octop|vir)us$", r"\1i"),
    (r"(bus|alias|status|canvas)$", r"\1es"),
    (r"(ax|test)is$", r"\1es"),
    # Already ends in s: leave it alone rather than appending another
    (r"s$", "s"),
    (r"data$", "data"),
    (r"$", "s"),
))
