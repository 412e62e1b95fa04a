"""Text formatting into rows and grids of character codes."""

from enum import Enum
from typing import List, Union

from .codec import char_to_code
from .constants import BLANK, BOARD_COLS, BOARD_ROWS, PAD_CHAR
from .errors import ContentError
from .validators import is_valid_text


class Justify(Enum):
    """Horizontal alignment of text within a row."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    DEFAULT = "default"  # same as CENTER

    @classmethod
    def from_string(cls, value: str) -> 'Justify':
        """Parse justification from string.

        Args:
            value: 'left', 'right' or 'center' (case-insensitive)

        Returns:
            Justify enum member, DEFAULT for any other value

        Examples:
            >>> Justify.from_string("LEFT")
            <Justify.LEFT: 'left'>
            >>> Justify.from_string("middle")
            <Justify.DEFAULT: 'default'>
        """
        value_lower = value.lower().strip()

        for member in (cls.LEFT, cls.RIGHT, cls.CENTER):
            if member.value == value_lower:
                return member
        return cls.DEFAULT


def _coerce_justify(justify: Union[Justify, str]) -> Justify:
    if isinstance(justify, Justify):
        return justify
    if isinstance(justify, str):
        return Justify.from_string(justify)
    raise TypeError(f"justify must be a Justify or str, not {type(justify).__name__}")


def _pad(text: str, justify: Justify) -> str:
    if justify is Justify.LEFT:
        return text.ljust(BOARD_COLS, PAD_CHAR)
    if justify is Justify.RIGHT:
        return text.rjust(BOARD_COLS, PAD_CHAR)

    # Odd padding puts the extra filler on the right
    padding = BOARD_COLS - len(text)
    left = padding // 2
    return PAD_CHAR * left + text + PAD_CHAR * (padding - left)


def format_row(text: str, justify: Union[Justify, str] = Justify.DEFAULT) -> List[int]:
    """Convert text into a single 22-column row of character codes.

    Text longer than 22 characters is truncated. No validation is done here;
    unsupported characters become blanks.

    Args:
        text: Text line
        justify: Justify member or 'left', 'right', 'center'

    Returns:
        List of exactly 22 character codes

    Raises:
        TypeError: If justify is neither a Justify nor a string
    """
    padded = _pad(text[:BOARD_COLS], _coerce_justify(justify))
    return [BLANK if char == PAD_CHAR else char_to_code(char) for char in padded]


def convert_line(text: str, justify: Union[Justify, str] = Justify.CENTER) -> List[int]:
    """Validate text and convert it into a 22-column row of character codes.

    Args:
        text: Text line, truncated to 22 characters
        justify: Justify member or 'left', 'right', 'center'

    Returns:
        List of exactly 22 character codes

    Raises:
        ContentError: If text contains unsupported characters

    Examples:
        >>> convert_line("My text", "center")
        [0, 0, 0, 0, 0, 0, 0, 13, 25, 0, 20, 5, 24, 20, 0, 0, 0, 0, 0, 0, 0, 0]
    """
    if not is_valid_text(text):
        raise ContentError()
    return format_row(text, justify)


def text_to_layout(text: str, justify: Union[Justify, str] = Justify.CENTER) -> List[List[int]]:
    """Convert multi-line text into a full 6x22 grid.

    Lines are split on newlines; lines beyond the sixth are dropped and each
    line is truncated to 22 characters. The block of lines is centered
    vertically, with any extra blank row at the bottom. Inline character
    codes such as ``{63}`` are only understood by the text endpoint and are
    encoded here character by character.

    Args:
        text: Text, one board row per line
        justify: Horizontal alignment applied to every line

    Returns:
        6x22 grid of character codes

    Raises:
        ContentError: If text contains unsupported characters
    """
    if not is_valid_text(text):
        raise ContentError()

    justify = _coerce_justify(justify)
    lines = text.split("\n")[:BOARD_ROWS]
    top = (BOARD_ROWS - len(lines)) // 2

    layout = [[BLANK] * BOARD_COLS for _ in range(BOARD_ROWS)]
    for offset, line in enumerate(lines):
        layout[top + offset] = format_row(line, justify)
    return layout
