"""Predefined character sets, in the canonical pool order."""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class CharacterSet:
    """A named, fixed run of distinct characters selected by one letter."""

    letter: str
    name: str
    chars: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.chars)


DIGITS = CharacterSet("d", "decimal digits", tuple(string.digits))
LETTERS_LC = CharacterSet("l", "lowercase english alphabet", tuple(string.ascii_lowercase))
LETTERS_UC = CharacterSet("u", "uppercase english alphabet", tuple(string.ascii_uppercase))
SEPARATORS = CharacterSet("s", "separators", ("-", ".", "_"))
MISC_SYMBOLS = CharacterSet("m", "misc symbols", ("!", "*", "&", "#"))

DEFINED_SETS: Tuple[CharacterSet, ...] = (
    DIGITS,
    LETTERS_LC,
    LETTERS_UC,
    SEPARATORS,
    MISC_SYMBOLS,
)

SETS_BY_LETTER: Dict[str, CharacterSet] = {cs.letter: cs for cs in DEFINED_SETS}

# Clears every predefined set, whatever the entry's sign.
ALL_LETTER = "A"
CUSTOM_OPEN = "["
CUSTOM_CLOSE = "]"
