"""Shared pytest fixtures for rand-str-gen tests."""

from __future__ import annotations

from typing import Callable, Iterator, List

import pyperclip
import pytest

from randstr.charsets import DEFINED_SETS


@pytest.fixture
def default_pool() -> List[str]:
    """Pool produced when no entries are given.

    Returns:
        Every pre-defined character in canonical order
    """
    return [ch for charset in DEFINED_SETS for ch in charset.chars]


@pytest.fixture
def fixed_bytes() -> Callable[[bytes], Callable[[int], bytes]]:
    """Build a fake random source that replays the given bytes.

    Returns:
        Factory taking the bytes to cycle through and returning a
        ``random_bytes(n)`` callable
    """

    def factory(data: bytes) -> Callable[[int], bytes]:
        def random_bytes(n: int) -> bytes:
            return bytes(data[i % len(data)] for i in range(n))

        return random_bytes

    return factory


@pytest.fixture
def clipboard(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[str]]:
    """Capture clipboard writes instead of touching the OS clipboard.

    Yields:
        List of every string passed to ``pyperclip.copy``
    """
    copied: List[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    yield copied
