"""Vestaboard Platform API client library.

Formats and validates board content, resolves the destination subscription
and posts text or character grids to a Vestaboard.
"""

import logging

from .client import Vestaboard
from .codec import char_to_code, code_to_char, encode
from .constants import BOARD_COLS, BOARD_ROWS, CHAR_CODE_MAP, TEXT_TO_CODE_MAP
from .errors import ContentError, NoSubscriptionsError, ShapeError, TransportError, VestaboardError
from .factory import create_vestaboard_client
from .formatting import Justify, convert_line, format_row, text_to_layout
from .models import CharactersPayload, Credentials, Payload, TextPayload, UpdateResult
from .subscriptions import list_subscriptions, resolve_first
from .transport import PlatformTransport
from .validators import is_valid_characters, is_valid_text

__all__ = [
    # Client
    "Vestaboard",
    "PlatformTransport",
    "create_vestaboard_client",
    # Models
    "CharactersPayload",
    "Credentials",
    "Payload",
    "TextPayload",
    "UpdateResult",
    # Errors
    "VestaboardError",
    "ContentError",
    "ShapeError",
    "TransportError",
    "NoSubscriptionsError",
    # Formatting
    "Justify",
    "convert_line",
    "format_row",
    "text_to_layout",
    "char_to_code",
    "code_to_char",
    "encode",
    # Validation
    "is_valid_text",
    "is_valid_characters",
    # Subscriptions
    "list_subscriptions",
    "resolve_first",
    # Constants
    "BOARD_ROWS",
    "BOARD_COLS",
    "CHAR_CODE_MAP",
    "TEXT_TO_CODE_MAP",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
