from __future__ import annotations
import re

"""
Rails inflection helpers for singularization and table → model conversions.

Implements the ActiveSupport::Inflector singular rules that matter for
schema.rb table names, plus the PascalCase conversion used for model,
enum namespace and enum type names.
"""

# Uncountable words (no plural/singular distinction)
UNCOUNTABLE_NOUNS = {
    "equipment", "information", "rice", "money", "species",
    "series", "fish", "sheep", "jeans", "police", "metadata",
    "data", "news"  # data and news can be both singular and plural
}

# Irregular mappings (plural -> singular)
IRREGULARS = {
    "people": "person",
    "men": "man",
    "children": "child",
    "sexes": "sex",
    "moves": "move",
    "zombies": "zombie",
}

# Singularization rules (pattern, replacement) - order matters!
SINGULARIZATION_RULES = [
    # Special database case
    (r"(database)s$", r"\1"),
    # quizzes -> quiz
    (r"(quiz)zes$", r"\1"),
    # matrices -> matrix, indices -> index
    (r"(matr)ices$", r"\1ix"),
    (r"(vert|ind)ices$", r"\1ex"),
    # oxen -> ox
    (r"^(ox)en$", r"\1"),
    # alias, status
    (r"(alias|status)(es)?$", r"\1"),
    # octopi -> octopus, viri -> virus
    (r"(octop|vir)i$", r"\1us"),
    # Already singular -us words
    (r"(octop|vir|cact|radi|fung|alumn|stimul|syllab)us$", r"\1us"),
    # axes -> axis, crises -> crisis, testes -> testis
    (r"^(a)xes$", r"\1xis"),
    (r"(cris|test)es$", r"\1is"),
    # Already singular -is words
    (r"(analys|bas|diagnos|ellips|hypothes|oas|paralys|parenthes|synops|thes|cris|test)is$", r"\1is"),
    (r"(shoe)s$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(bus)(es)?$", r"\1"),
    # mice -> mouse
    (r"^(m|l)ice$", r"\1ouse"),
    # x/ch/ss/sh + es
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(s)eries$", r"\1eries"),
    # consonant + ies -> y
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    # wolves -> wolf
    (r"([lr])ves$", r"\1f"),
    (r"(tive)s$", r"\1"),
    (r"(hive)s$", r"\1"),
    # knives -> knife
    (r"([^f])ves$", r"\1fe"),
    # analyses, bases, diagnoses ... (plural forms only)
    (r"(^analy)ses$", r"\1sis"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)ses$", r"\1sis"),
    # phenomena -> phenomenon
    (r"(phenomen)a$", r"\1on"),
    (r"^news$", r"news"),
    # criteria -> criterium, but not metadata
    (r"^([^m].*[ti])a$", r"\1um"),
    (r"^(d)ata$", r"\1atum"),
    (r"(ss)$", r"\1"),
    # Default plural removal
    (r"s$", r""),
]

_SEGMENT_SPLIT = re.compile(r"[_\s]+")


def singularize(word: str) -> str:
    """Convert a plural word to singular form using Rails inflection rules.

    Uncountable and irregular words are checked against the last
    underscore-separated segment, so ``company_people`` becomes
    ``company_person``. Words no rule matches pass through unchanged.
    """
    if not word:
        return word

    lower_word = word.lower()

    head, sep, last = lower_word.rpartition("_")
    if last in UNCOUNTABLE_NOUNS:
        return word

    if last in IRREGULARS:
        return f"{head}{sep}{IRREGULARS[last]}"

    for pattern, replacement in SINGULARIZATION_RULES:
        if re.search(pattern, lower_word, flags=re.IGNORECASE):
            return re.sub(pattern, replacement, lower_word, count=1, flags=re.IGNORECASE)

    return word


def to_pascal_case(identifier: str) -> str:
    """Convert ``snake_case`` (or space separated) text to ``PascalCase``.

    Only the first character of each segment is upper-cased; empty
    segments are dropped.
    """
    if not identifier:
        return ""
    return "".join(
        segment[0].upper() + segment[1:]
        for segment in _SEGMENT_SPLIT.split(identifier)
        if segment
    )


def table_to_model(table: str) -> str:
    """Convert a SQL table name to a Rails model name (CamelCase singular).

    Handles schema prefixes (e.g., "public.users" → "User").

    Examples:
        users -> User
        people -> Person
        company_branches -> CompanyBranch
        equipment -> Equipment (uncountable)
    """
    if not table:
        return ""

    base = table.split(".")[-1].lower()
    return to_pascal_case(singularize(base))
