"""Pydantic models for credentials, payloads and API responses."""

from typing import Any, Dict, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, StrictInt

from .constants import API_KEY_HEADER, API_SECRET_HEADER


class Credentials(BaseModel):
    """API key pair of an installable. Values are masked in repr and logs."""

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    api_secret: SecretStr

    def headers(self) -> Dict[str, str]:
        """Authentication headers for the Platform API."""
        return {
            API_KEY_HEADER: self.api_key.get_secret_value(),
            API_SECRET_HEADER: self.api_secret.get_secret_value(),
        }


class Board(BaseModel):
    """Board linked to a subscription."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"))


class Subscription(BaseModel):
    """Link between an installation and a board."""

    id: str = Field(validation_alias=AliasChoices("_id", "id"))
    created: Optional[str] = Field(None, validation_alias=AliasChoices("_created", "created"))
    title: Optional[str] = None
    icon: Optional[str] = None
    boards: List[Board] = Field(default_factory=list)

    @property
    def board_ids(self) -> List[str]:
        """Identifiers of the boards on this subscription."""
        return [board.id for board in self.boards]


class SubscriptionsResponse(BaseModel):
    """Body of ``GET /subscriptions``."""

    subscriptions: List[Subscription]


class UpdateResult(BaseModel):
    """Message accepted by the board."""

    id: str
    text: Optional[str] = None
    created: str


class PostResponse(BaseModel):
    """Body of ``POST /subscriptions/{id}/message``."""

    message: UpdateResult


class TextPayload(BaseModel):
    """Text message; the API handles line wrapping and inline codes."""

    model_config = ConfigDict(frozen=True)

    text: str

    def to_body(self) -> Dict[str, Any]:
        return {"text": self.text}


class CharactersPayload(BaseModel):
    """Explicit 6x22 grid of character codes."""

    model_config = ConfigDict(frozen=True)

    characters: List[List[StrictInt]]

    def to_body(self) -> Dict[str, Any]:
        return {"characters": [list(row) for row in self.characters]}


Payload = Union[TextPayload, CharactersPayload]
