"""Map OS random bytes onto pool characters.

Each byte ``b`` (0-255) selects index ``round(b * (n - 1) / 255)`` of a
pool of size ``n``, rounding halves up. The mapping is only approximately
uniform: when 256 is not a multiple of ``n`` the first and last indices
get slightly smaller buckets than the rest.
"""

from __future__ import annotations

import logging
import secrets
from typing import Callable, List, Optional, Sequence

from common.exceptions import RandomSourceError

logger = logging.getLogger(__name__)

RandomBytes = Callable[[int], bytes]


def byte_to_index(value: int, pool_size: int) -> int:
    """Scale a byte onto ``range(pool_size)``, rounding half up.

    Integer arithmetic keeps the result exact at bucket boundaries.
    """
    if pool_size < 1:
        raise ValueError("pool_size must be >= 1")
    return (2 * value * (pool_size - 1) + 255) // 510


def index_table(pool_size: int) -> List[int]:
    """Pool index chosen for each of the 256 byte values."""
    return [byte_to_index(value, pool_size) for value in range(256)]


def sample(
    pool: Sequence[str],
    length: int,
    random_bytes: Optional[RandomBytes] = None,
) -> str:
    """Draw ``length`` characters from ``pool``.

    Args:
        pool: Characters to draw from
        length: Number of characters to generate
        random_bytes: Source returning ``n`` uniformly random bytes,
            ``secrets.token_bytes`` by default

    Returns:
        The generated string; empty when ``length`` is 0 or the pool is empty

    Raises:
        RandomSourceError: If the random source fails
    """
    if length == 0 or not pool:
        return ""

    try:
        data = (random_bytes or secrets.token_bytes)(length)
    except OSError as ex:
        raise RandomSourceError(
            f"failed to read random bytes: {ex}", hint="check the OS entropy source"
        ) from ex

    table = [pool[index] for index in index_table(len(pool))]
    logger.debug(f"Sampled {len(data)} bytes onto a pool of {len(pool)}")
    return "".join(table[b] for b in data)
