"""Version and build information."""

from dataclasses import dataclass

__version__ = "1.0.0"

# Reported when the host does not say which version it is
DEFAULT_HOST_VERSION = "0.11+compatible"


@dataclass(frozen=True)
class BuildInfo:
    """Build metadata handed to components that identify themselves to the device."""

    version: str = __version__
    host_version: str = DEFAULT_HOST_VERSION

    @classmethod
    def for_host(cls, host_version: str | None) -> "BuildInfo":
        return cls(host_version=host_version or DEFAULT_HOST_VERSION)

    def user_agent(self) -> str:
        """User-Agent string for outbound REST calls."""
        return f"Terraform/{self.host_version}/terraform-provider-bigip/{self.version}"
