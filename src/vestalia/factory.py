"""Factory function for creating Vestaboard clients."""

import logging
from typing import TYPE_CHECKING, Optional

from .client import Vestaboard
from .constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from .transport import PlatformTransport

if TYPE_CHECKING:
    from .config import VestaboardConfig


def create_vestaboard_client(
    api_key: Optional[str] = None,
    api_secret: Optional[str] = None,
    subscription_id: Optional[str] = None,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    config: Optional["VestaboardConfig"] = None,
) -> Vestaboard:
    """Factory function to create a Vestaboard client.

    All configuration is explicit - no environment variable reading.
    For environment-based configuration, use AppConfig.from_env() and pass
    config.vestaboard to this function.

    Args:
        api_key: Installable API key, required unless config is provided
        api_secret: Installable API secret, required unless config is provided
        subscription_id: Optional subscription id
        base_url: Platform API root URL
        timeout: Request timeout in seconds
        config: VestaboardConfig object (overrides other parameters if provided)

    Returns:
        Vestaboard client

    Raises:
        ValueError: If the API key pair is missing

    Examples:
        >>> client = create_vestaboard_client(api_key="...", api_secret="...")

        >>> from vestalia.config import AppConfig
        >>> app_config = AppConfig.from_env()
        >>> client = create_vestaboard_client(config=app_config.vestaboard)
    """
    logger = logging.getLogger(__name__)

    if config is not None:
        api_key = config.api_key.get_secret_value()
        api_secret = config.api_secret.get_secret_value()
        subscription_id = config.subscription_id
        base_url = config.base_url
        timeout = config.timeout

    if not api_key or not api_secret:
        raise ValueError("api_key and api_secret are required")

    if subscription_id:
        logger.info(f"Creating Vestaboard client for subscription {subscription_id}")
    else:
        logger.info("Creating Vestaboard client with subscription lookup")

    return Vestaboard(
        api_key=api_key,
        api_secret=api_secret,
        subscription_id=subscription_id,
        transport=PlatformTransport(base_url=base_url, timeout=timeout),
    )
