"""Subscription lookup for an installable's API key pair."""

import logging
from typing import List

from pydantic import ValidationError

from .errors import NoSubscriptionsError, TransportError
from .models import Credentials, SubscriptionsResponse
from .transport import PlatformTransport

SUBSCRIPTIONS_PATH = "/subscriptions"

logger = logging.getLogger(__name__)


def list_subscriptions(credentials: Credentials, transport: PlatformTransport) -> List[str]:
    """Fetch the subscription ids for a key pair, in API response order.

    Args:
        credentials: Installable API key pair
        transport: Platform API transport

    Returns:
        List of subscription ids (possibly empty)

    Raises:
        TransportError: If the request fails or the body has the wrong shape
    """
    body = transport.get(SUBSCRIPTIONS_PATH, credentials.headers())
    try:
        response = SubscriptionsResponse.model_validate(body)
    except ValidationError as e:
        logger.error(f"Unexpected subscriptions response: {e}")
        raise TransportError("Unexpected subscriptions response from Vestaboard API", cause=e) from e

    subscription_ids = [subscription.id for subscription in response.subscriptions]
    logger.debug(f"Found {len(subscription_ids)} subscription(s)")
    return subscription_ids


def resolve_first(credentials: Credentials, transport: PlatformTransport) -> str:
    """Return the first subscription id for a key pair.

    Every call issues a fresh request; nothing is cached.

    Raises:
        TransportError: If the request fails
        NoSubscriptionsError: If the key pair has no subscriptions
    """
    subscription_ids = list_subscriptions(credentials, transport)
    if not subscription_ids:
        logger.error("No subscriptions found for API key pair")
        raise NoSubscriptionsError()

    subscription_id = subscription_ids[0]
    logger.info(f"Resolved subscription {subscription_id}")
    return subscription_id
