"""Validators for text messages and character grids."""

import re
from typing import Any

from .constants import BOARD_COLS, BOARD_ROWS

# Unicode White_Space characters; Python's \s also matches \x1c-\x1f
WHITESPACE = r"\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000"

# Supported characters, or inline character codes such as {63}
TEXT_PATTERN = re.compile(
    r"(?:[A-Za-z0-9!@#$()\-+&=;:'\"%,./?°" + WHITESPACE + r"]|\{[0-9]{1,2}\})*"
)


def is_valid_text(text: Any) -> bool:
    """Check that text only uses characters the board can display.

    Inline character codes of one or two digits wrapped in braces (``{63}``)
    are passed through to the API untouched. Length is not checked.

    Args:
        text: Text message

    Returns:
        True if every character is supported, False otherwise
    """
    if not isinstance(text, str):
        return False
    return TEXT_PATTERN.fullmatch(text) is not None


def is_valid_characters(characters: Any) -> bool:
    """Check that a character grid is exactly 6 rows of 22 columns.

    Only the shape is checked; the API is authoritative on code values.

    Args:
        characters: Candidate grid of character codes

    Returns:
        True if the shape matches the board, False otherwise
    """
    if not isinstance(characters, (list, tuple)) or len(characters) != BOARD_ROWS:
        return False
    return all(
        isinstance(row, (list, tuple)) and len(row) == BOARD_COLS
        for row in characters
    )
