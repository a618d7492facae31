"""Device clients for BIG-IP management APIs.

Use the `create_client()` factory function to instantiate the client named by
the client_type configuration.

Supported client types:
- icontrol_rest: iControl REST over HTTPS with HTTP Basic credentials

Example:
    >>> from bigippg.client import create_client
    >>> from bigippg.config import ProviderConfig
    >>> config = ProviderConfig(address="10.0.0.1", username="admin", password="secret")
    >>> client = create_client("icontrol_rest", config)
"""

from typing import Final

from bigippg.client.base import DeviceClient
from bigippg.client.icontrol_rest import IControlRestClient
from bigippg.config import ProviderConfig
from bigippg.version import BuildInfo

# Registry of available device clients
# Maps client_type string to client class
CLIENTS: Final[dict[str, type[DeviceClient]]] = {
    "icontrol_rest": IControlRestClient,
}


def create_client(
    client_type: str, config: ProviderConfig, build_info: BuildInfo | None = None
) -> DeviceClient:
    """Factory function to create device client instances.

    Args:
        client_type: Client type identifier. Must be one of:
            - "icontrol_rest": iControl REST client
        config: Validated provider configuration
        build_info: Build metadata used for the client's identification string

    Returns:
        Configured DeviceClient instance

    Raises:
        ValueError: If client_type is not recognized
    """
    if client_type not in CLIENTS:
        available_types: str = ", ".join(get_available_client_types())
        raise ValueError(
            f"Unknown client type: '{client_type}'. Available types: {available_types}"
        )

    client_class: type[DeviceClient] = CLIENTS[client_type]
    return client_class(config, build_info)


def get_available_client_types() -> list[str]:
    """Get a sorted list of all available client type identifiers."""
    return sorted(CLIENTS.keys())


__all__ = [
    # Base classes
    "DeviceClient",
    # Client implementations
    "IControlRestClient",
    # Factory functions
    "create_client",
    "get_available_client_types",
    # Registry
    "CLIENTS",
]
