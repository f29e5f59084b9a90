"""
Software license provider port (interface).

This defines the contract every license vendor adapter implements.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod

from core.domain.exceptions import UnsupportedOperationError
from core.domain.value_objects import AboutData
from licenses.application.dto.params import (
    ChangePackageParams,
    CreateParams,
    GetUsageParams,
    ReissueParams,
    SuspendParams,
    TerminateParams,
    UnsuspendParams,
)
from licenses.application.dto.results import (
    ChangePackageResult,
    CreateResult,
    EmptyResult,
    GetUsageResult,
    ReissueResult,
)


class SoftwareLicenseProvider(ABC):
    """
    Abstract software license provider.

    This is a port in hexagonal architecture - it defines the
    lifecycle operations a vendor adapter offers, not how they
    reach the vendor. Operations raise ProvisionFunctionError
    subclasses on failure.
    """

    @staticmethod
    @abstractmethod
    def about_provider() -> AboutData:
        """
        Describe the provider.

        Returns:
            AboutData with name, logo and description
        """
        pass

    @abstractmethod
    def create(self, params: CreateParams) -> CreateResult:
        """
        Create a license.

        Args:
            params: CreateParams

        Returns:
            CreateResult with the new license key
        """
        pass

    @abstractmethod
    def get_usage_data(self, params: GetUsageParams) -> GetUsageResult:
        """
        Get usage data of a license.

        Args:
            params: GetUsageParams

        Returns:
            GetUsageResult with the provider usage payload
        """
        pass

    def change_package(self, params: ChangePackageParams) -> ChangePackageResult:
        """
        Move a license to another package.

        Providers without a package change operation keep this default.

        Args:
            params: ChangePackageParams

        Returns:
            ChangePackageResult

        Raises:
            UnsupportedOperationError: Always, unless overridden
        """
        raise UnsupportedOperationError()

    @abstractmethod
    def reissue(self, params: ReissueParams) -> ReissueResult:
        """
        Reissue a license.

        Args:
            params: ReissueParams

        Returns:
            ReissueResult
        """
        pass

    @abstractmethod
    def suspend(self, params: SuspendParams) -> EmptyResult:
        """
        Suspend a license.

        Args:
            params: SuspendParams

        Returns:
            EmptyResult
        """
        pass

    @abstractmethod
    def unsuspend(self, params: UnsuspendParams) -> EmptyResult:
        """
        Unsuspend a license.

        Args:
            params: UnsuspendParams

        Returns:
            EmptyResult
        """
        pass

    @abstractmethod
    def terminate(self, params: TerminateParams) -> EmptyResult:
        """
        Terminate a license.

        Args:
            params: TerminateParams

        Returns:
            EmptyResult
        """
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
