"""Random string generator CLI with a configurable character pool.

Builds a pool from pre-defined character sets (digits, lowercase,
uppercase, separators, misc symbols) and custom characters, then draws
each character from OS random bytes. Optionally copies the last string to
the clipboard with `pyperclip`.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import List, Optional, Sequence

from common.cli_helpers import report_error, setup_logging
from common.exceptions import RandStrError
from randstr.cli_parser import GenerationRequest, parse_arguments
from randstr.clipboard import copy_to_clipboard
from randstr.pool import build_pool, format_pool
from randstr.sampler import sample

logger = logging.getLogger(__name__)


def generate(request: GenerationRequest) -> List[str]:
    """Build the pool once and sample ``request.repeat`` strings from it."""
    pool_spec = request.pool_spec
    logger.debug(
        f"length={request.length} repeat={request.repeat} sets={pool_spec.included} "
        f"add={pool_spec.add_chars} remove={pool_spec.remove_chars}"
    )
    pool = build_pool(pool_spec)
    if request.show_pool:
        print(f"pool: {format_pool(pool)}")
    if not pool and request.length:
        logger.warning("Pool is empty; every generated string will be empty")
    return [sample(pool, request.length) for _ in range(request.repeat)]


def run(request: GenerationRequest) -> int:
    strings = generate(request)

    if request.json_output:
        print(json.dumps(strings, ensure_ascii=False))
    else:
        for value in strings:
            print(value)

    # Only the last string goes to the clipboard.
    if request.copy and strings:
        copy_to_clipboard(strings[-1])
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        request = parse_arguments(argv)
        setup_logging(request.log_level)
        return run(request)
    except RandStrError as ex:
        report_error(str(ex), ex.hint)
        return ex.exit_code


if __name__ == "__main__":
    sys.exit(main())
