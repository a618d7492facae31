"""Tagged configuration values.

Raw configuration arrives from the host as a mapping of snake_case keys to
dynamically typed values. This module validates those values once, when the
configuration map is built, so that later mapping only ever compares tags.

Key Classes:
    ValueKind: Tag of a configuration value
    ConfigValue: A tagged, validated configuration value
    ConfigMap: Read-only mapping of configuration keys to ConfigValue
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from bigippg.collections_utils import list_to_string_slice
from bigippg.errors import TypeMismatch


class ValueKind(Enum):
    """Kind of value a configuration attribute can hold."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    STRING_LIST = "list[string]"


@dataclass(frozen=True)
class ConfigValue:
    """A configuration value together with its kind.

    Attributes:
        kind: Which variant the value is
        value: The Python value (str, bool, int or tuple of str)
    """

    kind: ValueKind
    value: Any

    @classmethod
    def of(cls, key: str, raw: Any) -> "ConfigValue":
        """Validate a raw host value and tag it.

        ``bool`` is checked before ``int`` since it is an ``int`` subclass.
        Lists, tuples, sets and frozensets become STRING_LIST; sets are sorted
        so the stored order is deterministic.

        Raises:
            TypeMismatch: If the value is not one of the supported kinds
        """
        if isinstance(raw, str):
            return cls(ValueKind.STRING, raw)
        if isinstance(raw, bool):
            return cls(ValueKind.BOOL, raw)
        if isinstance(raw, int):
            return cls(ValueKind.INT, raw)
        if isinstance(raw, (set, frozenset)):
            return cls(ValueKind.STRING_LIST, tuple(sorted(list_to_string_slice(raw, key))))
        if isinstance(raw, (list, tuple)):
            return cls(ValueKind.STRING_LIST, tuple(list_to_string_slice(raw, key)))
        raise TypeMismatch(
            key, "string, bool, int or list of strings", type(raw).__name__
        )

    def to_python(self) -> Any:
        """Return the plain value; lists come back as a new ``list``."""
        if self.kind is ValueKind.STRING_LIST:
            return list(self.value)
        return self.value


class ConfigMap(Mapping[str, ConfigValue]):
    """Read-only mapping of configuration keys to tagged values.

    Example:
        >>> config = ConfigMap.from_raw({"name": "/Common/m1", "interval": 5})
        >>> config["interval"].kind
        <ValueKind.INT: 'int'>
    """

    def __init__(self, values: Mapping[str, ConfigValue] | None = None):
        self._values: dict[str, ConfigValue] = dict(values or {})

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "ConfigMap":
        """Build a ConfigMap from a raw host mapping.

        Keys whose value is None are unset attributes and are left out.

        Raises:
            TypeMismatch: On the first key whose value is not a supported kind
        """
        return cls(
            {
                key: ConfigValue.of(key, value)
                for key, value in raw.items()
                if value is not None
            }
        )

    def __getitem__(self, key: str) -> ConfigValue:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConfigMap({self._values!r})"
