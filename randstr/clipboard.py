"""Clipboard access through `pyperclip`."""

from __future__ import annotations

import logging

import pyperclip

from common.exceptions import ClipboardError

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str) -> None:
    """Put ``text`` in the OS clipboard.

    Raises:
        ClipboardError: If no clipboard backend is available or the write fails
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as ex:
        raise ClipboardError(
            f"failed to set OS clipboard contents: {ex}",
            hint="install a clipboard backend (xclip, xsel or wl-clipboard) or drop --copy",
        ) from ex
    logger.info(f"Copied {len(text)} characters to the clipboard")
