"""iControl REST client for LTM monitor objects.

This module implements the device client over the BIG-IP iControl REST API.
Monitors live under ``/mgmt/tm/ltm/monitor/<type>`` and individual objects are
addressed as ``/mgmt/tm/ltm/monitor/<type>/~<partition>~<name>``.
"""

from typing import Any, Final

from typing_extensions import override

import requests
from aws_lambda_powertools import Logger

from bigippg.client.base import DeviceClient
from bigippg.config import ProviderConfig
from bigippg.errors import APIError, ConnectionFailedError, NotFoundError
from bigippg.identifiers import ResourceIdentifier
from bigippg.version import BuildInfo

logger = Logger(service="bigippg")


class IControlRestClient(DeviceClient):
    """Device client speaking iControl REST with HTTP Basic credentials.

    Every request carries the configured credentials; no session token is
    negotiated. The User-Agent is taken from the injected BuildInfo.

    Example:
        >>> config = ProviderConfig(address="10.0.0.1", username="admin", password="secret")
        >>> client = IControlRestClient(config, BuildInfo.for_host("1.5.7"))
        >>> client.session.headers["User-Agent"]
        'Terraform/1.5.7/terraform-provider-bigip/1.0.0'
    """

    MONITOR_PATH: Final[str] = "/mgmt/tm/ltm/monitor"

    def __init__(
        self,
        config: ProviderConfig,
        build_info: BuildInfo | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the REST client.

        Args:
            config: Validated provider configuration
            build_info: Build metadata for the User-Agent header
            session: Optional pre-built requests session (for tests)
        """
        super().__init__(config, build_info)
        self.timeout: int = config.timeout_seconds
        self.session: requests.Session = session or requests.Session()
        self.session.auth = (config.username, config.password)
        self.session.verify = config.verify_tls
        self.session.headers.update(
            {
                "Content-Type": "application/json",
                "Accept": "application/json",
                "User-Agent": self.build_info.user_agent(),
            }
        )

    @override
    def get_monitor(
        self, monitor_type: str, identifier: ResourceIdentifier
    ) -> dict[str, Any]:
        return self._request("GET", self._monitor_url(monitor_type, identifier), identifier)

    @override
    def create_monitor(self, monitor_type: str, payload: dict[str, Any]) -> dict[str, Any]:
        identifier = ResourceIdentifier(payload.get("partition", ""), payload.get("name", ""))
        return self._request(
            "POST", self._monitor_url(monitor_type), identifier, payload=payload
        )

    @override
    def modify_monitor(
        self, monitor_type: str, identifier: ResourceIdentifier, payload: dict[str, Any]
    ) -> dict[str, Any]:
        return self._request(
            "PATCH",
            self._monitor_url(monitor_type, identifier),
            identifier,
            payload=payload,
        )

    @override
    def delete_monitor(self, monitor_type: str, identifier: ResourceIdentifier) -> None:
        self._request("DELETE", self._monitor_url(monitor_type, identifier), identifier)

    @override
    def get_client_name(self) -> str:
        return "icontrol_rest"

    def _monitor_url(
        self, monitor_type: str, identifier: ResourceIdentifier | None = None
    ) -> str:
        url = f"{self.config.base_url}{self.MONITOR_PATH}/{monitor_type}"
        if identifier is not None:
            url = f"{url}/{identifier.uri_name}"
        return url

    def _request(
        self,
        method: str,
        url: str,
        identifier: ResourceIdentifier,
        payload: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send one request and return the parsed JSON body.

        Raises:
            NotFoundError: On 404
            APIError: On any other non-2xx status or an unparseable body
            ConnectionFailedError: On timeouts and connection failures
        """
        try:
            response = self.session.request(
                method, url, json=payload, timeout=self.timeout
            )
        except requests.exceptions.Timeout as e:
            raise ConnectionFailedError(
                f"{method} {url} timed out after {self.timeout} seconds"
            ) from e
        except requests.exceptions.ConnectionError as e:
            raise ConnectionFailedError(details=str(e)) from e
        except requests.exceptions.RequestException as e:
            raise APIError(f"{method} {url} failed", details=str(e)) from e

        return self._process_response(response, method, identifier)

    def _process_response(
        self, response: requests.Response, method: str, identifier: ResourceIdentifier
    ) -> dict[str, Any]:
        if response.status_code == 404:
            raise NotFoundError("Monitor", identifier.full_path)

        if not response.ok:
            error_detail = self._extract_error_detail(response)
            logger.error(
                "iControl REST request failed",
                extra={
                    "method": method,
                    "monitor": identifier.full_path,
                    "status_code": response.status_code,
                    "error": error_detail,
                },
            )
            raise APIError(
                f"{method} monitor '{identifier.full_path}' failed",
                status_code=response.status_code,
                response_body=response.text,
                details=error_detail,
            )

        text = response.text.strip() if response.text else ""
        if not text:
            return {}
        try:
            return response.json()
        except ValueError as e:
            preview = text[:200]
            raise APIError(
                "Invalid JSON response",
                status_code=response.status_code,
                response_body=response.text,
                details=preview,
            ) from e

    def _extract_error_detail(self, response: requests.Response) -> str:
        """Pull the device's error message out of a failed response."""
        try:
            error_data: Any = response.json()
        except ValueError:
            error_data = None

        if isinstance(error_data, dict):
            if "message" in error_data:
                return str(error_data["message"])
            if error_data.get("errorStack"):
                return str(error_data["errorStack"][0])
            return str(error_data)[:200]

        # Non-object bodies (null, numbers, lists) fall back to the raw text
        return response.text[:200] if response.text else "no response body"
