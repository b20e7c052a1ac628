"""Clipboard access for the paste / copy buttons (system clipboard via pyperclip)."""
import logging

import pyperclip

logger = logging.getLogger(__name__)

READ_FAILED = "Nie udało się odczytać schowka. Sprawdź uprawnienia."
WRITE_FAILED = "Nie udało się skopiować do schowka."


class ClipboardError(Exception):
    """Clipboard unavailable or access denied. str(exc) is the user notice."""


def read_clipboard() -> str:
    try:
        text = pyperclip.paste()
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to read clipboard: {e}")
        raise ClipboardError(READ_FAILED) from e
    return text or ""


def write_clipboard(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        logger.error(f"Failed to write clipboard: {e}")
        raise ClipboardError(WRITE_FAILED) from e
