"""
Deterministic case-conversion helpers for court acronyms.

Word boundaries:
    - any non-alphanumeric character (hyphen, underscore, space, ...) is a separator
    - lower -> upper            ("TreCe"  -> "Tre", "Ce")
    - letter <-> digit          ("TRT1"   -> "TRT", "1")
    - acronym before a word     ("ABCDef" -> "ABC", "Def")
"""

from typing import List


# Variant used when an acronym has no alphanumeric characters at all.
EMPTY_IDENTIFIER = "Unnamed"

# PascalCase words that are Rust keywords and cannot name a variant.
RESERVED_IDENTIFIERS = {"Self"}

# Inputs printed by --case-samples, with the casing applied to each.
CASE_SAMPLES = [
    ("TRT1", "pascal"),
    ("Trt1", "cobol"),
    ("TreCe", "cobol"),
]


def _is_boundary(prev: str, char: str, nxt: str) -> bool:
    if prev.isdigit() != char.isdigit():
        return True
    if prev.islower() and char.isupper():
        return True
    # "ABCDef": split before the "D" that starts "Def"
    if prev.isupper() and char.isupper() and nxt.islower():
        return True
    return False


def split_words(text: str) -> List[str]:
    """Split text into words using the boundaries listed in the module docstring."""
    words: List[str] = []
    current = ""
    for i, char in enumerate(text):
        if not char.isalnum():
            if current:
                words.append(current)
            current = ""
            continue
        nxt = text[i + 1] if i + 1 < len(text) else ""
        if current and _is_boundary(current[-1], char, nxt):
            words.append(current)
            current = ""
        current += char
    if current:
        words.append(current)
    return words


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_pascal_case(text: str) -> str:
    """'TJ-SP' -> 'TjSp', 'TRT1' -> 'Trt1'."""
    return "".join(_capitalize(word) for word in split_words(text))


def to_cobol_case(text: str) -> str:
    """'TreCe' -> 'TRE-CE', 'Trt1' -> 'TRT-1'."""
    return "-".join(word.upper() for word in split_words(text))


def to_identifier(acronym: str) -> str:
    """
    Enum variant identifier for an acronym.

    PascalCase of the acronym, prefixed with "_" when it would start with a digit
    and suffixed with "_" when it is a keyword ("SELF" -> "Self_"), so it stays
    a valid identifier. Distinct acronyms can still share an identifier
    ("TRT1" and "TRT-1" are both "Trt1"); render_rust_enum disambiguates those.
    """
    ident = to_pascal_case(acronym)
    if not ident:
        return EMPTY_IDENTIFIER
    if ident[0].isdigit():
        return "_" + ident
    if ident in RESERVED_IDENTIFIERS:
        return ident + "_"
    return ident


def needs_rename(acronym: str) -> bool:
    """
    True when the variant identifier does not serialize back to the acronym.

    The generated enum serializes variants in COBOL case (SCREAMING-KEBAB-CASE),
    so "TJ-SP" -> "TjSp" -> "TJ-SP" round-trips, while "TRT1" -> "Trt1" -> "TRT-1"
    does not and needs an explicit rename.
    """
    ident = to_identifier(acronym)
    if ident != to_pascal_case(acronym):
        return True
    return to_cobol_case(ident) != acronym


def case_samples() -> List[str]:
    converters = {"pascal": to_pascal_case, "cobol": to_cobol_case}
    return [converters[case](text) for text, case in CASE_SAMPLES]
