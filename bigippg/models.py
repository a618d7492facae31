"""Record types for LTM health monitors."""

from dataclasses import dataclass, field
from typing import Final

from bigippg.identifiers import ResourceIdentifier
from bigippg.mapper import EntityMapping

# Built-in monitors a custom monitor can inherit from
SUPPORTED_PARENTS: Final[frozenset[str]] = frozenset(
    {
        "http",
        "https",
        "icmp",
        "gateway-icmp",
        "tcp",
        "tcp-half-open",
        "ftp",
        "udp",
        "postgresql",
        "mysql",
        "mssql",
        "ldap",
    }
)


@dataclass
class Monitor:
    """An LTM health monitor as configured by the user.

    ``name`` and ``parent`` are full paths (``/Common/my-monitor``,
    ``/Common/http``). Unset attributes stay None and are not sent to the device.
    """

    name: str | None = None
    parent: str | None = None
    description: str | None = None
    interval: int | None = None
    up_interval: int | None = None
    timeout: int | None = None
    time_until_up: int | None = None
    send: str | None = None
    receive: str | None = None
    receive_disable: str | None = None
    reverse: bool | None = None
    transparent: bool | None = None
    manual_resume: bool | None = None
    ip_dscp: int | None = None
    destination: str | None = None
    compatibility: str | None = None
    filename: str | None = None
    mode: str | None = None
    adaptive: bool | None = None
    adaptive_limit: int | None = None
    username: str | None = None
    password: str | None = None
    database: str | None = None
    tags: list[str] = field(default_factory=list)


MONITOR_MAPPING: Final[EntityMapping] = EntityMapping.for_record(
    Monitor,
    wire_names={
        "parent": "defaultsFrom",
        "receive": "recv",
        "receive_disable": "recvDisable",
        "tags": "tags",
    },
    bool_words=("enabled", "disabled"),
)


def monitor_type(parent: str) -> str:
    """Return the REST monitor type for a parent path.

    Args:
        parent: Parent monitor, e.g. "/Common/http" or "http"

    Returns:
        The parent's name, which is also the REST collection (e.g. "http")

    Raises:
        MalformedIdentifier: If parent is not a valid path
        ValueError: If the parent is not a supported built-in monitor
    """
    kind = ResourceIdentifier.parse(parent).name
    if kind not in SUPPORTED_PARENTS:
        available: str = ", ".join(sorted(SUPPORTED_PARENTS))
        raise ValueError(
            f"Unsupported parent monitor: '{parent}'. Supported parents: {available}"
        )
    return kind
