"""Per-word casing rules for releaser names.

Responsibilities:
- Decide the display form of one word from its position in a word list.
- Apply rules in a fixed precedence: stop words, abbreviations, affixes,
  first-word sequences, then default title casing.

Key public functions:
- `classify`: return the display form of a word.
- `hyphen`: classify each piece of a hyphenated compound.
"""

from __future__ import annotations

import re

from ..models.datatypes import WordPosition


_STOP_WORDS = frozenset(
    {
        "a", "as", "and", "at", "by", "el", "of", "for", "from", "in", "is", "or",
        "tha", "the", "to", "with",
    }
)
_ORDINALS = frozenset(
    {
        "1st", "2nd", "3rd", "4th", "5th", "6th", "7th", "8th", "9th",
        "10th", "11th", "12th", "13th",
    }
)
_ACRONYMS = frozenset(
    {
        "3d", "abc", "acdc", "ad", "am", "amf", "ansi", "asm", "au", "bbc", "bbs", "bc",
        "cd", "cgi", "diz", "dox", "eu", "faq", "fbi", "fm", "ftp", "fr", "fx", "fxp",
        "gbc", "gif", "hq", "id", "ii", "iii", "iso", "kgb", "mp3", "pc", "pcb", "pcp",
        "pda", "pm", "psx", "pwa", "rom", "rpm", "ssd", "st", "tnt", "tsr", "ufo", "uk",
        "us", "usa", "uss", "ussr", "vcd", "whq", "xxx",
    }
)
_LOWERCASE_WORDS = frozenset({"7of9"})

# (affix, is_suffix, numeric, stylized form); the first matching affix decides.
_AFFIXES: tuple[tuple[str, bool, bool, str], ...] = (
    ("ad", True, True, "AD"),
    ("bc", True, True, "BC"),
    ("am", True, True, "AM"),
    ("pm", True, True, "PM"),
    ("dox", True, False, "Dox"),
    ("fxp", True, False, "FXP"),
    ("iso", True, False, "ISO"),
    ("nfo", True, False, "NFO"),
    ("pc-", False, False, "PC-"),
    ("lsd", False, False, "LSD"),
)
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

HYPHEN = "-"


def title_case(word: str) -> str:
    """Uppercase the first letter of the word and lowercase everything after it.

    Leading digits are kept, so `"2tally"` becomes `"2Tally"`.
    """

    for index, character in enumerate(word):
        if character.isalpha():
            return word[:index] + character.upper() + word[index + 1:].lower()
    return word


def connect(position: WordPosition) -> str:
    """Lowercase a connecting stop word unless it opens or closes the list."""

    if not position.is_inner:
        return ""
    lowered = position.word.lower()
    if lowered in _STOP_WORDS:
        return lowered
    return ""


def abbreviation(word: str) -> str:
    """Apply fixed casing to ordinals and known acronyms.

    Example:
        `abbreviation("1sT") == "1st"`
        `abbreviation("iso") == "ISO"`
    """

    lowered = word.lower()
    if lowered in _ORDINALS or lowered in _LOWERCASE_WORDS:
        return lowered
    if lowered in _ACRONYMS:
        return word.upper()
    return ""


def affix(word: str) -> str:
    """Format a word carrying a known prefix or suffix.

    Numeric suffixes need an integer prefix (`"12am"` becomes `"12AM"`); when the
    prefix is not a number the rule does not apply.
    """

    lowered = word.lower()
    for token, is_suffix, numeric, stylized in _AFFIXES:
        if is_suffix and lowered.endswith(token):
            rest = lowered[: -len(token)]
            if not numeric:
                return title_case(rest) + stylized
            if _INTEGER_RE.fullmatch(rest) is None:
                return ""
            return f"{int(rest)}{stylized}"
        if not is_suffix and lowered.startswith(token):
            return stylized + title_case(lowered[len(token):])
    return ""


def sequence(position: WordPosition) -> str:
    """Format words that only get special casing as the first word."""

    if position.is_first and position.word == "inc":
        # short words are uppercased by the normalizer, longer lists need this
        return position.word.upper()
    return ""


def classify(word: str, index: int, last_index: int) -> str:
    """Return the display form of a word at `index` in a list ending at `last_index`."""

    position = WordPosition(word=word, index=index, last_index=last_index)
    fixed = (
        connect(position)
        or abbreviation(word)
        or affix(word)
        or sequence(position)
    )
    return fixed or title_case(word)


def hyphen(word: str) -> str:
    """Classify each piece of a hyphenated word as its own word list.

    Returns an empty string when the word has no hyphen.

    Example:
        `hyphen("members-of-2000ad") == "Members-of-2000AD"`
    """

    if HYPHEN not in word:
        return ""
    compounds = word.split(HYPHEN)
    last_index = len(compounds) - 1
    return HYPHEN.join(
        classify(compound, index, last_index) for index, compound in enumerate(compounds)
    )
