"""Base device client interface for LTM monitor objects.

This module defines the abstract base class the resource layer talks to. The
resource layer only needs four verbs on monitor objects; how they reach the
device (REST, a test double, a recorded fixture) is up to the implementation.
"""

from abc import ABC, abstractmethod
from typing import Any

from bigippg.config import ProviderConfig
from bigippg.identifiers import ResourceIdentifier
from bigippg.version import BuildInfo


class DeviceClient(ABC):
    """Abstract base class for BIG-IP device clients.

    Monitors are addressed by their monitor type (the REST collection, e.g.
    "http") and their partitioned identifier. Payloads are REST attribute
    dictionaries as produced by ``EntityMapping.to_payload()``.

    Implementations raise ``NotFoundError`` when the object does not exist and
    ``APIError`` for any other device-side failure.
    """

    def __init__(self, config: ProviderConfig, build_info: BuildInfo | None = None):
        """Initialize the client.

        Args:
            config: Validated provider configuration
            build_info: Build metadata used to identify the client to the device
        """
        self.config: ProviderConfig = config
        self.build_info: BuildInfo = build_info or BuildInfo()

    @abstractmethod
    def get_monitor(
        self, monitor_type: str, identifier: ResourceIdentifier
    ) -> dict[str, Any]:
        """Fetch a monitor's REST attributes."""

    @abstractmethod
    def create_monitor(self, monitor_type: str, payload: dict[str, Any]) -> dict[str, Any]:
        """Create a monitor; the payload carries name and partition."""

    @abstractmethod
    def modify_monitor(
        self, monitor_type: str, identifier: ResourceIdentifier, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """Apply a partial update to an existing monitor."""

    @abstractmethod
    def delete_monitor(self, monitor_type: str, identifier: ResourceIdentifier) -> None:
        """Delete a monitor."""

    @abstractmethod
    def get_client_name(self) -> str:
        """Return the unique name of this client implementation."""
