"""Resolve a PoolSpec into the ordered character pool."""

from __future__ import annotations

import logging
from typing import List, Sequence

from common.exceptions import CharacterNotFoundError, DuplicateCharacterError
from randstr.charsets import DEFINED_SETS
from randstr.directives import PoolSpec

logger = logging.getLogger(__name__)


def format_pool(pool: Sequence[str]) -> str:
    """Render pool characters as a bracketed, quoted list."""
    return "[" + ", ".join(f"'{ch}'" for ch in pool) + "]"


def build_pool(pool_spec: PoolSpec) -> List[str]:
    """Build the pool: included sets in canonical order, then adds, then removes.

    Args:
        pool_spec: Set flags and custom characters collected from the entries

    Returns:
        Ordered list of distinct characters, possibly empty

    Raises:
        DuplicateCharacterError: If an added character is already in the pool
        CharacterNotFoundError: If a removed character is not in the pool
    """
    pool: List[str] = []
    for charset in DEFINED_SETS:
        if pool_spec.included.get(charset.letter, True):
            pool.extend(charset.chars)

    for ch in pool_spec.add_chars:
        if ch in pool:
            raise DuplicateCharacterError(
                f"can't add character to pool, already exists: '{ch}'",
                hint=f"characters in the set are: {format_pool(pool)}",
            )
        pool.append(ch)

    for ch in pool_spec.remove_chars:
        if ch not in pool:
            raise CharacterNotFoundError(
                f"can't remove character from pool, doesn't exist: '{ch}'",
                hint=f"characters in the set are: {format_pool(pool)}",
            )
        pool.remove(ch)

    logger.debug(f"Pool has {len(pool)} characters")
    return pool
