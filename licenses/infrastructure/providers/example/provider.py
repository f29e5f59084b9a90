"""
Empty provider for demonstration purposes.

Shows the shape of a provider: configuration, about data, a lazily
built HTTP client and the lifecycle operations.
"""
from typing import Optional

from core.domain.exceptions import UnsupportedOperationError
from core.domain.value_objects import AboutData
from licenses.application.dto.params import (
    CreateParams,
    GetUsageParams,
    ReissueParams,
    SuspendParams,
    TerminateParams,
    UnsuspendParams,
)
from licenses.application.dto.results import (
    CreateResult,
    EmptyResult,
    GetUsageResult,
    ReissueResult,
)
from licenses.infrastructure.http import ProviderHttpClient
from licenses.infrastructure.providers.example.configuration import (
    ExampleConfiguration,
)
from licenses.ports.software_license_provider import SoftwareLicenseProvider


class ExampleProvider(SoftwareLicenseProvider):
    """Empty provider for demonstration purposes."""

    def __init__(self, configuration: ExampleConfiguration):
        self.configuration = configuration
        self._client: Optional[ProviderHttpClient] = None

    @staticmethod
    def about_provider() -> AboutData:
        return AboutData(
            name="Example Provider",
            description="Empty provider for demonstration purposes",
        )

    def get_usage_data(self, params: GetUsageParams) -> GetUsageResult:
        return GetUsageResult(
            units_consumed=100,  # e.g., 100 websites provisioned
            usage_data={
                "active_websites": 100,
                "active_users": 40,
                "lives_saved": 1000,
            },
        )

    def create(self, params: CreateParams) -> CreateResult:
        raise UnsupportedOperationError("Not implemented")

    def reissue(self, params: ReissueParams) -> ReissueResult:
        raise UnsupportedOperationError("Not implemented")

    def suspend(self, params: SuspendParams) -> EmptyResult:
        raise UnsupportedOperationError("Not implemented")

    def unsuspend(self, params: UnsuspendParams) -> EmptyResult:
        raise UnsupportedOperationError("Not implemented")

    def terminate(self, params: TerminateParams) -> EmptyResult:
        raise UnsupportedOperationError("Not implemented")

    @property
    def client(self) -> ProviderHttpClient:
        """Get an HTTP client for the example API."""
        if self._client is None:
            self._client = ProviderHttpClient(
                base_url=self.configuration.api_url.rstrip("/") + "/api/v1/",
                headers={"Authorization": self.configuration.api_token},
                debug=bool(self.configuration.debug),
            )
        return self._client

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
