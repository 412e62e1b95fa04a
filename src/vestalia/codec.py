"""Character codec between supported text and Vestaboard character codes."""

from typing import List

from .constants import BLANK, CHAR_CODE_MAP, TEXT_TO_CODE_MAP


def char_to_code(char: str) -> int:
    """Map a single character to its Vestaboard character code.

    Lookup is case-insensitive. Characters outside the supported set map to
    blank (0); this never raises.

    Args:
        char: Single character

    Returns:
        Character code

    Examples:
        >>> char_to_code("M")
        13
        >>> char_to_code("*")
        0
    """
    return TEXT_TO_CODE_MAP.get(char.lower(), BLANK)


def code_to_char(code: int) -> str:
    """Map a character code back to a display glyph, or ``[code]`` if unknown."""
    return CHAR_CODE_MAP.get(code, f"[{code}]")


def encode(text: str) -> List[int]:
    """Encode every character of text, one code per character."""
    return [char_to_code(char) for char in text]
