"""
Pytest configuration and shared fixtures.
"""
import json
from unittest.mock import Mock

import pytest
import requests

from licenses.infrastructure.http import ProviderHttpClient
from licenses.infrastructure.providers.cpanel.configuration import (
    CPanelConfiguration,
)
from licenses.infrastructure.providers.cpanel.provider import CPanelProvider
from licenses.infrastructure.providers.example.configuration import (
    ExampleConfiguration,
)
from licenses.infrastructure.providers.example.provider import ExampleProvider


def make_response(body="", status_code=200, url="https://manage2.cpanel.net/"):
    """
    Build a real requests.Response with the given body.

    Dicts and lists are JSON encoded; strings are used as-is.
    """
    if not isinstance(body, str):
        body = json.dumps(body)

    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.url = url
    return response


@pytest.fixture
def cpanel_configuration():
    """Fixture for a cPanel configuration without a group."""
    return CPanelConfiguration(username="reseller", password="s3cret")


@pytest.fixture
def http_client():
    """Fixture for a mocked provider HTTP client."""
    client = Mock(spec=ProviderHttpClient)
    client.request.return_value = make_response({"status": 1})
    return client


@pytest.fixture
def cpanel_provider(cpanel_configuration, http_client):
    """Fixture for a cPanel provider talking to the mocked client."""
    provider = CPanelProvider(cpanel_configuration)
    provider._client = http_client
    return provider


@pytest.fixture
def example_configuration():
    """Fixture for an example provider configuration."""
    return ExampleConfiguration(
        api_url="https://licenses.example.com", api_token="token-123"
    )


@pytest.fixture
def example_provider(example_configuration):
    """Fixture for the example provider."""
    provider = ExampleProvider(example_configuration)
    yield provider
    provider.close()


@pytest.fixture
def response_factory():
    """Fixture returning the make_response helper."""
    return make_response
