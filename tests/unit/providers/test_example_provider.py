"""
Unit tests for ExampleProvider.
"""
import pytest

from core.domain.exceptions import UnsupportedOperationError
from licenses.application.dto.params import (
    ChangePackageParams,
    CreateParams,
    GetUsageParams,
    ReissueParams,
    SuspendParams,
    TerminateParams,
    UnsuspendParams,
)


class TestExampleProvider:
    """Tests for the demonstration provider."""

    def test_about_provider(self, example_provider):
        """Test about data."""
        about = example_provider.about_provider()

        assert about.name == "Example Provider"
        assert about.logo_url is None

    def test_get_usage_data(self, example_provider):
        """Test fixed demonstration usage."""
        result = example_provider.get_usage_data(GetUsageParams(license_key="any"))

        assert result.units_consumed == 100
        assert result.usage_data == {
            "active_websites": 100,
            "active_users": 40,
            "lives_saved": 1000,
        }

    @pytest.mark.parametrize(
        "operation, params",
        [
            ("create", CreateParams(package_identifier="P1")),
            ("reissue", ReissueParams(license_key="1")),
            ("suspend", SuspendParams(license_key="1")),
            ("unsuspend", UnsuspendParams(license_key="1")),
            ("terminate", TerminateParams(license_key="1")),
        ],
    )
    def test_not_implemented(self, example_provider, operation, params):
        """Test stub operations fail."""
        with pytest.raises(UnsupportedOperationError, match="Not implemented"):
            getattr(example_provider, operation)(params)

    def test_change_package_uses_default(self, example_provider):
        """Test the interface default rejects package changes."""
        with pytest.raises(UnsupportedOperationError, match="Operation not supported"):
            example_provider.change_package(
                ChangePackageParams(license_key="1", package_identifier="P2")
            )

    def test_client(self, example_provider):
        """Test the client targets the v1 API with the token header."""
        client = example_provider.client

        assert client.base_url == "https://licenses.example.com/api/v1/"
        assert client.headers["Authorization"] == "token-123"
        assert example_provider.client is client
