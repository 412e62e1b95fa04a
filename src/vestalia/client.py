"""Vestaboard Platform API client implementation."""

import copy
import logging
from typing import List, Optional, Sequence

from pydantic import ValidationError

from .codec import code_to_char
from .errors import ContentError, ShapeError, TransportError
from .models import CharactersPayload, Credentials, Payload, PostResponse, TextPayload, UpdateResult
from .subscriptions import list_subscriptions, resolve_first
from .transport import PlatformTransport
from .validators import is_valid_characters, is_valid_text


def message_path(subscription_id: str) -> str:
    return f"/subscriptions/{subscription_id}/message"


def _check_subscription_id(subscription_id: Optional[str]) -> Optional[str]:
    if subscription_id is not None and not subscription_id.strip():
        raise ValueError("subscription_id must not be blank")
    return subscription_id


class Vestaboard:
    """Client for posting messages to a Board on behalf of an installable.

    Any software publishing content to a Board is an installable with an
    API key pair and one or more subscriptions. If no subscription id is
    given, the first subscription for the key pair is looked up on every
    send.

    The client is immutable once built and may be shared between threads.

    Examples:
        >>> client = Vestaboard("key", "secret")
        >>> client.text("{63} Hello World! {63}")

        >>> client = Vestaboard("key", "secret").with_subscription(
        ...     "123456a1-1b2c-1b5d-d234-c123456789ab"
        ... )
        >>> client.characters([[63] * 22] * 6)
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        subscription_id: Optional[str] = None,
        transport: Optional[PlatformTransport] = None,
    ):
        """Initialize the Vestaboard client.

        Args:
            api_key: Installable API key from web.vestaboard.com
            api_secret: API secret paired with the key
            subscription_id: Subscription to post to, looked up per call if omitted
            transport: Platform API transport (default: PlatformTransport())

        Raises:
            ValueError: If subscription_id is given but blank
        """
        self._credentials = Credentials(api_key=api_key, api_secret=api_secret)
        self._subscription_id = _check_subscription_id(subscription_id)
        self._transport = transport or PlatformTransport()
        self.logger = logging.getLogger(__name__)

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    @property
    def subscription_id(self) -> Optional[str]:
        """Explicit subscription id, or None if it is resolved per call."""
        return self._subscription_id

    @property
    def transport(self) -> PlatformTransport:
        return self._transport

    def with_subscription(self, subscription_id: str) -> "Vestaboard":
        """Return a copy of this client bound to a known subscription id.

        Avoids the extra subscriptions request on every send.

        Args:
            subscription_id: Subscription id of the installation

        Returns:
            New Vestaboard client; this one is left unchanged

        Raises:
            ValueError: If subscription_id is blank
        """
        if subscription_id is None:
            raise ValueError("subscription_id is required")
        client = copy.copy(self)
        client._subscription_id = _check_subscription_id(subscription_id)
        return client

    def subscriptions(self) -> List[str]:
        """List the subscription ids available to this key pair.

        Raises:
            TransportError: If the request fails
        """
        return list_subscriptions(self._credentials, self._transport)

    def text(self, text: str) -> UpdateResult:
        """Send a text message to the Board.

        The API handles layout; messages too long for the board are truncated
        by it. Newlines and inline character codes such as ``{63}`` are supported.

        Args:
            text: Message text

        Returns:
            The accepted message

        Raises:
            ContentError: If text contains unsupported characters
            TransportError: If the API request fails
        """
        if not is_valid_text(text):
            raise ContentError()
        return self.send(TextPayload(text=text))

    def characters(self, characters: Sequence[Sequence[int]]) -> UpdateResult:
        """Send a 6x22 grid of character codes to the Board, mapped 1:1.

        Args:
            characters: Exactly 6 rows of 22 character codes

        Returns:
            The accepted message

        Raises:
            ShapeError: If the grid is not 6x22 or holds non-integer codes
            TransportError: If the API request fails
        """
        if not is_valid_characters(characters):
            raise ShapeError()
        try:
            payload = CharactersPayload(characters=characters)
        except ValidationError as e:
            raise ShapeError(f"Character codes must be integers: {e}") from e
        return self.send(payload)

    def send(self, payload: Payload) -> UpdateResult:
        """Validate a payload, resolve the subscription and post the message.

        Validation happens before any request is made.

        Args:
            payload: TextPayload or CharactersPayload

        Returns:
            The accepted message

        Raises:
            ContentError: If a text payload contains unsupported characters
            ShapeError: If a characters payload is not 6x22
            TransportError: If any API request fails or returns an unexpected body
        """
        if isinstance(payload, TextPayload):
            if not is_valid_text(payload.text):
                raise ContentError()
            self.logger.info(f"Writing text message to Vestaboard: '{payload.text}'")
        elif isinstance(payload, CharactersPayload):
            if not is_valid_characters(payload.characters):
                raise ShapeError()
            self.logger.info("Writing character grid to Vestaboard")
            self._log_characters_preview(payload.characters)
        else:
            raise TypeError(f"Unsupported payload type: {type(payload).__name__}")

        subscription_id = self._subscription_id
        if subscription_id is None:
            subscription_id = resolve_first(self._credentials, self._transport)

        body = self._transport.post(
            message_path(subscription_id), self._credentials.headers(), payload.to_body()
        )

        try:
            result = PostResponse.model_validate(body).message
        except ValidationError as e:
            self.logger.error(f"Unexpected message response: {e}")
            raise TransportError("Unexpected message response from Vestaboard API", cause=e) from e

        self.logger.info(f"Successfully wrote message to Vestaboard (ID: {result.id})")
        return result

    def _log_characters_preview(self, characters: Sequence[Sequence[int]]) -> None:
        """Log the grid as it will read on the board, one row per line."""
        if not self.logger.isEnabledFor(logging.DEBUG):
            return
        for row_idx, row in enumerate(characters, start=1):
            line = "".join(code_to_char(code) for code in row)
            self.logger.debug(f"Row {row_idx}: |{line}|")

    def __repr__(self) -> str:
        return f"Vestaboard(subscription_id={self._subscription_id!r})"
