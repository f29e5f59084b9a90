"""
cPanel license provider.

Provisions and manages cPanel licenses through the Manage2 API.
Every command is a GET to /<Command>.cgi with its parameters in the
query string; failures are reported in the JSON body as status 0.
"""
import json
import logging
import time
from typing import Any, Dict, Optional

from core.domain.exceptions import (
    LicenseNotFoundError,
    RemoteOperationError,
    RemoteProtocolError,
    UnsupportedOperationError,
    ValidationError,
)
from core.domain.value_objects import AboutData
from core.metrics import (
    provider_request_duration_seconds,
    provider_requests_total,
)
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
from licenses.infrastructure.http import (
    ProviderHttpClient,
    TransportError,
    basic_auth_header,
)
from licenses.infrastructure.providers.cpanel.configuration import (
    CPanelConfiguration,
)
from licenses.ports.software_license_provider import SoftwareLicenseProvider

logger = logging.getLogger(__name__)

PROVIDER_NAME = "cpanel"
BASE_URL = "https://manage2.cpanel.net"
CONNECT_TIMEOUT = 10
TIMEOUT = 60

EMPTY_LICENSE_REASON = "Empty license."


class CPanelProvider(SoftwareLicenseProvider):
    """cPanel provider."""

    def __init__(self, configuration: CPanelConfiguration):
        """
        Initialize provider.

        Args:
            configuration: cPanel credentials and options
        """
        self.configuration = configuration
        self._client: Optional[ProviderHttpClient] = None

    @staticmethod
    def about_provider() -> AboutData:
        return AboutData(
            name="CPanel",
            logo_url="https://api.upmind.io/images/logos/provision/cpanel-logo.png",
            description="Resell, provision and manage CPanel licenses",
        )

    def get_usage_data(self, params: GetUsageParams) -> GetUsageResult:
        return GetUsageResult(usage_data=self.get_license(params.license_key) or {})

    def create(self, params: CreateParams) -> CreateResult:
        if not params.package_identifier:
            raise ValidationError("Package identifier is required!")

        query = {
            "packageid": params.package_identifier,
            "ip": params.ip,
        }

        if self.configuration.group_id:
            query["groupid"] = self.configuration.group_id

        response = self.make_request("XMLlicenseAdd", query)
        if not response or response.get("licenseid") is None:
            raise RemoteProtocolError(data={"response": response})
        license_key = str(response["licenseid"])

        logger.info(
            "cPanel license created: %s",
            license_key,
            extra={"provider": PROVIDER_NAME, "package_identifier": params.package_identifier},
        )
        return CreateResult(
            license_key=license_key,
            package_identifier=params.package_identifier,
            message="License created",
        )

    def get_license(self, license_key: str) -> Optional[Dict[str, Any]]:
        """
        Get license data by key.

        Args:
            license_key: cPanel license id

        Returns:
            Decoded XMLlicenseInfo payload, or None for an empty response
        """
        return self.make_request("XMLlicenseInfo", {"liscid": license_key})

    def change_package(self, params: ChangePackageParams) -> ChangePackageResult:
        if not params.package_identifier:
            raise ValidationError("Package identifier is required!")

        # The update command identifies the license by its IP address
        license_data = self.get_license(params.license_key)

        query = {
            "ip": _license_ip(license_data, params.license_key),
            "newpackageid": params.package_identifier,
        }
        self.make_request("XMLpackageUpdate", query)

        logger.info(
            "cPanel license package changed: %s",
            params.license_key,
            extra={"provider": PROVIDER_NAME, "package_identifier": params.package_identifier},
        )
        return ChangePackageResult(
            license_key=params.license_key,
            package_identifier=params.package_identifier,
            message="Package changed",
        )

    def reissue(self, params: ReissueParams) -> ReissueResult:
        raise UnsupportedOperationError("Operation not supported")

    def suspend(self, params: SuspendParams) -> EmptyResult:
        return self.expire_license(params.license_key)

    def unsuspend(self, params: UnsuspendParams) -> EmptyResult:
        raise UnsupportedOperationError("Operation not supported")

    def terminate(self, params: TerminateParams) -> EmptyResult:
        return self.expire_license(params.license_key)

    def expire_license(self, license_key: str) -> EmptyResult:
        """
        Expire a cPanel license.

        cPanel has no separate suspension, so suspend and terminate
        both end up here.
        """
        self.make_request("XMLlicenseExpire", {"liscid": license_key})

        logger.info(
            "cPanel license expired: %s", license_key, extra={"provider": PROVIDER_NAME}
        )
        return EmptyResult(message="License cancelled")

    @property
    def client(self) -> ProviderHttpClient:
        """Return the HTTP client, creating it on first use."""
        if self._client is None:
            self._client = ProviderHttpClient(
                base_url=BASE_URL,
                headers={
                    "Authorization": basic_auth_header(
                        self.configuration.username, self.configuration.password
                    ),
                },
                connect_timeout=CONNECT_TIMEOUT,
                timeout=TIMEOUT,
                debug=bool(self.configuration.debug),
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client if one was created."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def make_request(
        self,
        command: str,
        params: Optional[Dict[str, Any]] = None,
        method: str = "GET",
    ) -> Optional[Dict[str, Any]]:
        """
        Send a command to the Manage2 API.

        Args:
            command: Command name, e.g. "XMLlicenseAdd"
            params: Query parameters; None values are dropped
            method: HTTP method

        Returns:
            Decoded response payload, or None for an empty body

        Raises:
            RemoteProtocolError: If the body is not a JSON object
            RemoteOperationError: If the API reports status 0
            TransportError: If the request itself fails
        """
        query = dict(params or {})
        query["output"] = "json"

        outcome = "error"
        start_time = time.monotonic()
        try:
            response = self.client.request(method, f"/{command}.cgi", params=query)
            response.raise_for_status()
            body = response.text

            if body == "":
                outcome = "empty"
                return None

            payload = self.parse_response_data(body)
            outcome = "success"
            return payload
        except RemoteOperationError:
            outcome = "remote_error"
            raise
        except RemoteProtocolError:
            outcome = "protocol_error"
            raise
        except TransportError:
            outcome = "transport_error"
            raise
        finally:
            provider_request_duration_seconds.labels(
                provider=PROVIDER_NAME, command=command
            ).observe(time.monotonic() - start_time)
            provider_requests_total.labels(
                provider=PROVIDER_NAME, command=command, outcome=outcome
            ).inc()

    def parse_response_data(self, body: str) -> Dict[str, Any]:
        """
        Decode a response body and detect API errors.

        Args:
            body: Raw response body

        Returns:
            Decoded response payload

        Raises:
            RemoteProtocolError: If the body is not a non-empty JSON object
            RemoteOperationError: If the payload has status 0
        """
        try:
            payload = json.loads(body)
        except ValueError:
            payload = None

        if not payload or not isinstance(payload, dict):
            logger.warning(
                "Unexpected cPanel API response", extra={"provider": PROVIDER_NAME}
            )
            raise RemoteProtocolError(data={"response": body})

        error = self.get_response_error_message(payload)
        if error is not None:
            logger.warning(
                "cPanel API error: %s", error, extra={"provider": PROVIDER_NAME}
            )
            if payload.get("reason") == EMPTY_LICENSE_REASON:
                raise LicenseNotFoundError(error, data={"response": payload})
            raise RemoteOperationError(error, data={"response": payload})

        return payload

    @staticmethod
    def get_response_error_message(payload: Dict[str, Any]) -> Optional[str]:
        """
        Return the error message of a failed response, or None.

        A response has failed when its status is numerically zero, or
        when it has no status but carries a reason.
        """
        status = payload.get("status")
        reason = payload.get("reason")

        if status is None:
            if not reason:
                return None
        elif not _is_failure_status(status):
            return None

        if reason == EMPTY_LICENSE_REASON:
            return "License does not exist"
        return reason or RemoteOperationError.default_message


def _is_failure_status(status: Any) -> bool:
    if status is None:
        return False
    if isinstance(status, bool):
        return status is False
    try:
        return float(status) == 0
    except (TypeError, ValueError):
        return False


def _license_ip(license_data: Optional[Dict[str, Any]], license_key: str) -> Optional[str]:
    """Read licenses["L<key>"]["ip"] from an XMLlicenseInfo payload."""
    licenses = (license_data or {}).get("licenses")
    if not isinstance(licenses, dict):
        return None
    entry = licenses.get(f"L{license_key}")
    if not isinstance(entry, dict):
        return None
    return entry.get("ip")
