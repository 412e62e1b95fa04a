"""Pytest configuration and fixtures for vestalia tests."""

from unittest.mock import Mock

import pytest
import requests

from vestalia.config import AppConfig, VestaboardConfig

SUBSCRIPTION_ID = "123456a1-1b2c-1b5d-d234-c123456789ab"
MESSAGE_ID = "12345678-abcd-0123-aaaa-bbbbccccdddd"

SUBSCRIPTIONS_BODY = {
    "subscriptions": [
        {
            "_id": SUBSCRIPTION_ID,
            "_created": "1649630799628",
            "title": None,
            "icon": None,
            "installation": {
                "_id": "abcdefgh-1234-5678-0000-123456789abc",
                "installable": {"_id": "01234567-abcd-0123-abcd-0123456789ab"},
            },
            "boards": [{"_id": "abcdefgh-0123-abcd-0123-abcdefghijkl"}],
        }
    ]
}

MESSAGE_BODY = {
    "message": {
        "id": MESSAGE_ID,
        "text": "Test!",
        "created": "1650168530618",
    }
}

# ============================================================================
# Helper Functions
# ============================================================================


def make_response(json_body=None, status_code: int = 200) -> Mock:
    """Create a mock requests.Response.

    Args:
        json_body: Value returned by response.json(); an Exception is raised instead
        status_code: HTTP status code; 4xx/5xx make raise_for_status() raise

    Returns:
        Mock response
    """
    response = Mock()
    response.status_code = status_code

    if isinstance(json_body, Exception):
        response.json.side_effect = json_body
    else:
        response.json.return_value = json_body

    if status_code >= 400:
        error = requests.HTTPError(f"{status_code} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None

    return response


def create_test_vestaboard_config(
    api_key: str = "test_api_key",
    api_secret: str = "test_api_secret",
    subscription_id: str = None,
    base_url: str = "https://platform.example.com",
    timeout: float = 10,
) -> VestaboardConfig:
    """Create a VestaboardConfig for testing with sensible defaults."""
    return VestaboardConfig(
        api_key=api_key,
        api_secret=api_secret,
        subscription_id=subscription_id,
        base_url=base_url,
        timeout=timeout,
    )


def create_test_app_config(log_level: str = "INFO", **vestaboard_kwargs) -> AppConfig:
    """Create an AppConfig for testing with sensible defaults."""
    return AppConfig(
        vestaboard=create_test_vestaboard_config(**vestaboard_kwargs),
        log_level=log_level,
    )


# ============================================================================
# Pytest Fixtures
# ============================================================================


@pytest.fixture
def test_vestaboard_config():
    """Fixture providing a standard VestaboardConfig for testing."""
    return create_test_vestaboard_config()


@pytest.fixture
def test_app_config():
    """Fixture providing a standard AppConfig for testing."""
    return create_test_app_config()


@pytest.fixture
def blank_grid():
    """Fixture providing an empty 6x22 grid."""
    return [[0] * 22 for _ in range(6)]
