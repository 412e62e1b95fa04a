"""Exceptions raised by the Vestaboard client."""

from typing import Optional

from .constants import BOARD_COLS, BOARD_ROWS, CHARACTER_REFERENCE_URL


class VestaboardError(Exception):
    """Base class for every error raised by this library."""


class ContentError(VestaboardError):
    """Text contains characters the board cannot display."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Invalid characters in text. Vestaboard only supports the following: "
            f"{CHARACTER_REFERENCE_URL}"
        )


class ShapeError(VestaboardError):
    """A character grid is not exactly 6 rows by 22 columns."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or f"Ensure the characters grid contains exactly {BOARD_ROWS} rows "
            f"and {BOARD_COLS} columns of int."
        )


class TransportError(VestaboardError):
    """Failure talking to the Vestaboard API.

    Wraps connectivity and DNS problems, non-success HTTP statuses and
    responses that do not match the expected JSON shape. The underlying
    exception is kept on ``cause`` for diagnostics.
    """

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.cause = cause
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.cause is not None:
            return f"{message}: {self.cause}"
        return message


class NoSubscriptionsError(TransportError):
    """The API returned an empty subscription list for the key pair."""

    def __init__(self, message: str = "No subscriptions available for this API key pair"):
        super().__init__(message)
