"""Partitioned object identifiers.

BIG-IP organises named objects under partitions. Configuration refers to them
either by full path (``/Common/my-monitor``) or by bare name (``my-monitor``).
The REST API addresses the same object as ``~Common~my-monitor``.
"""

from dataclasses import dataclass
from typing import Final

from bigippg.errors import MalformedIdentifier

DEFAULT_PARTITION: Final[str] = "Common"
SEPARATOR: Final[str] = "/"


def parse_identifier(path: str) -> tuple[str, str]:
    """Break a ``/partition/name`` path into its partition and name.

    Only the first separator after the leading one splits; anything after it
    belongs to the name. A path without a leading separator has no explicit
    partition and is returned as ``("", path)``.

    Args:
        path: Identifier in the form ``/partition/name`` or ``name``

    Returns:
        Tuple of (partition, name); partition is "" when absent

    Raises:
        MalformedIdentifier: If the path starts with a separator but has no
            second segment

    Examples:
        >>> parse_identifier("/Common/my-monitor")
        ('Common', 'my-monitor')
        >>> parse_identifier("my-monitor")
        ('', 'my-monitor')
        >>> parse_identifier("/Common/folder/my-monitor")
        ('Common', 'folder/my-monitor')
    """
    if not path.startswith(SEPARATOR):
        return "", path

    parts = path[len(SEPARATOR):].split(SEPARATOR, 1)
    if len(parts) < 2:
        raise MalformedIdentifier(path)
    return parts[0], parts[1]


@dataclass(frozen=True)
class ResourceIdentifier:
    """A partition/name pair for a device object.

    Attributes:
        partition: Partition the object lives in ("" when not specified)
        name: Object name within the partition
    """

    partition: str
    name: str

    @classmethod
    def parse(
        cls, path: str, default_partition: str | None = None
    ) -> "ResourceIdentifier":
        """Parse a path, substituting ``default_partition`` when none is given."""
        partition, name = parse_identifier(path)
        if not partition and default_partition:
            partition = default_partition
        return cls(partition=partition, name=name)

    @property
    def has_partition(self) -> bool:
        return bool(self.partition)

    @property
    def full_path(self) -> str:
        """``/partition/name``, or the bare name when no partition is set."""
        if not self.partition:
            return self.name
        return f"{SEPARATOR}{self.partition}{SEPARATOR}{self.name}"

    @property
    def uri_name(self) -> str:
        """Name as it appears in iControl REST URLs (``~partition~name``)."""
        if not self.partition:
            return self.name
        return "~" + self.full_path[len(SEPARATOR):].replace(SEPARATOR, "~")

    def __str__(self) -> str:
        return self.full_path
