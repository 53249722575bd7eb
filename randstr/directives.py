"""Pool entry parsing: turn ``+d-m[xyz]`` style tokens into a PoolSpec."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Tuple, Union

from common.exceptions import InvalidPoolEntryError, InvalidPrefixError
from randstr.charsets import (
    ALL_LETTER,
    CUSTOM_CLOSE,
    CUSTOM_OPEN,
    DEFINED_SETS,
    SETS_BY_LETTER,
)

SIGN_CHARS = "+-"
VALID_ENTRIES_HINT = "can be one of: [d, l, u, s, m, A, [character, ...]]"


class Sign(Enum):
    INCLUDE = "+"
    EXCLUDE = "-"


@dataclass(frozen=True)
class PoolDirective:
    """One signed instruction from an entry token.

    ``target`` is a predefined set letter, ``ALL_LETTER``, or a tuple of
    custom characters.
    """

    sign: Sign
    target: Union[str, Tuple[str, ...]]


@dataclass
class PoolSpec:
    """Accumulated directive state that the pool builder resolves."""

    included: Dict[str, bool] = field(
        default_factory=lambda: {cs.letter: True for cs in DEFINED_SETS}
    )
    add_chars: List[str] = field(default_factory=list)
    remove_chars: List[str] = field(default_factory=list)

    def apply(self, directive: PoolDirective) -> None:
        state = directive.sign is Sign.INCLUDE
        target = directive.target
        if isinstance(target, tuple):
            (self.add_chars if state else self.remove_chars).extend(target)
        elif target == ALL_LETTER:
            for letter in self.included:
                self.included[letter] = False
        else:
            self.included[target] = state


def parse_entry(entry: str) -> List[PoolDirective]:
    """Split one entry token into directives, left to right.

    Args:
        entry: Token such as ``"-m"``, ``"+d[%$]"`` or ``"-A+[01]"``. A sign
            inside the token applies to everything after it.

    Returns:
        Directives in the order they appear. An empty token yields none.

    Raises:
        InvalidPrefixError: If the token does not start with ``+`` or ``-``
        InvalidPoolEntryError: If a character is not a set letter, ``A``
            or the start of a custom set
    """
    if not entry:
        return []

    prefix = entry[0]
    try:
        sign = Sign(prefix)
    except ValueError:
        raise InvalidPrefixError(f"invalid entry prefix: '{prefix}'") from None

    directives: List[PoolDirective] = []
    i = 1
    while i < len(entry):
        ch = entry[i]
        if ch in SIGN_CHARS:
            sign = Sign(ch)
            i += 1
        elif ch in SETS_BY_LETTER or ch == ALL_LETTER:
            directives.append(PoolDirective(sign, ch))
            i += 1
        elif ch == CUSTOM_OPEN:
            end = entry.find(CUSTOM_CLOSE, i + 1)
            if end == -1:
                end = len(entry)
            directives.append(PoolDirective(sign, tuple(entry[i + 1 : end])))
            i = end + 1
        else:
            raise InvalidPoolEntryError(
                f"invalid pool entry: '{ch}'", hint=VALID_ENTRIES_HINT
            )
    return directives


def parse_entries(entries: Iterable[str]) -> PoolSpec:
    """Parse every entry token and fold the directives into a PoolSpec.

    Later directives win for the same predefined set, so ``+d-d``
    leaves digits out and ``-d+d`` keeps them.
    """
    pool_spec = PoolSpec()
    for entry in entries:
        for directive in parse_entry(entry):
            pool_spec.apply(directive)
    return pool_spec
