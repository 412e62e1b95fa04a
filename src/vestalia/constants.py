"""Vestaboard character code mappings and constants."""

from types import MappingProxyType

# Board geometry (Flagship Vestaboard, 6 rows x 22 columns)
BOARD_ROWS = 6
BOARD_COLS = 22

BLANK = 0
PAD_CHAR = "*"  # filler used while justifying a row, always becomes BLANK

# Character codes from https://docs.vestaboard.com/characters
# Keys are lower-case; callers lower-case before lookup.
TEXT_TO_CODE_MAP = MappingProxyType({
    ' ': 0,
    **{chr(ord('a') + i): i + 1 for i in range(26)},  # a-z -> 1-26
    '1': 27, '2': 28, '3': 29, '4': 30, '5': 31,       # 1-9 -> 27-35
    '6': 32, '7': 33, '8': 34, '9': 35, '0': 36,       # 0 -> 36
    '!': 37, '@': 38, '#': 39, '$': 40, '(': 41, ')': 42,  # punctuation
    '-': 44, '+': 46, '&': 47, '=': 48, ';': 49, ':': 50,  # no 43, 45
    "'": 52, '"': 53, '%': 54, ',': 55, '.': 56, '/': 59,  # no 51, 57, 58
    '?': 60, '°': 62,  # no 61
})

# Display glyphs for previews
CHAR_CODE_MAP = MappingProxyType({
    **{code: char.upper() for char, code in TEXT_TO_CODE_MAP.items()},
    # Color codes
    63: '🟥', 64: '🟧', 65: '🟨', 66: '🟩', 67: '🟦', 68: '🟪',  # red, orange, yellow, green, blue, violet
    69: '⬜', 70: '⬛', 71: '■',  # white, black, filled
})

CHARACTER_REFERENCE_URL = "https://docs.vestaboard.com/characters"

# Platform API
DEFAULT_BASE_URL = "https://platform.vestaboard.com"
DEFAULT_TIMEOUT = 10  # seconds
API_KEY_HEADER = "X-Vestaboard-Api-Key"
API_SECRET_HEADER = "X-Vestaboard-Api-Secret"
