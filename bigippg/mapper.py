"""Declarative mapping of configuration maps onto typed records.

Each resource kind declares its record as a dataclass. At import time
``EntityMapping.for_record()`` turns the dataclass fields into an explicit field
table: one ``FieldBinding`` per attribute, carrying its CamelCase field name, its
value kind and the attribute name used in the iControl REST payload.

A configuration key is resolved against the table by CamelCase field name,
first in title form (``interval`` -> ``Interval``) and then in full CamelCase
form (``time_until_up`` -> ``TimeUntilUp``). Keys that match neither raise
``FieldNotFound``; values of the wrong kind raise ``TypeMismatch``.

Mapping is all-or-nothing: every key is resolved and checked before the first
attribute is written, so a failed ``map()`` leaves the target unchanged.

Example:
    >>> @dataclass
    ... class Probe:
    ...     name: str | None = None
    ...     interval: int | None = None
    ...     tags: list[str] = field(default_factory=list)
    >>> probe = Probe()
    >>> map_entity({"name": "m1", "interval": 5, "tags": ["a", "b"]}, probe)
    >>> probe
    Probe(name='m1', interval=5, tags=['a', 'b'])
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from aws_lambda_powertools import Logger

from bigippg.case_convert import lower_camel_case, title_case, to_camel_case, to_snake_case
from bigippg.errors import FieldNotFound, TypeMismatch
from bigippg.values import ConfigMap, ConfigValue, ValueKind

logger = Logger(service="bigippg")

# Annotation -> value kind for record fields
_KINDS: dict[Any, ValueKind] = {
    str: ValueKind.STRING,
    bool: ValueKind.BOOL,
    int: ValueKind.INT,
    list[str]: ValueKind.STRING_LIST,
}


@dataclass(frozen=True)
class FieldBinding:
    """Destination of one configuration key on a record.

    Attributes:
        config_key: snake_case configuration key
        attribute: Python attribute written on the record
        field_name: CamelCase record field name used for key lookup
        kind: Value kind the attribute accepts
        wire_name: Attribute name in the REST payload
    """

    config_key: str
    attribute: str
    field_name: str
    kind: ValueKind
    wire_name: str

    @property
    def is_sequence(self) -> bool:
        return self.kind is ValueKind.STRING_LIST


def _kind_for(record_type: type, attribute: str, annotation: Any) -> ValueKind:
    """Resolve a field annotation, unwrapping ``X | None``."""
    origin = typing.get_origin(annotation)
    if origin in (typing.Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            annotation = members[0]

    kind = _KINDS.get(annotation)
    if kind is None:
        raise TypeError(
            f"{record_type.__name__}.{attribute}: unsupported field type {annotation!r}"
        )
    return kind


class EntityMapping:
    """Explicit field table for one record type."""

    def __init__(
        self,
        record_type: type,
        bindings: list[FieldBinding],
        bool_words: tuple[str, str] | None = None,
    ):
        """Initialize the mapping.

        Args:
            record_type: Dataclass the table writes into
            bindings: One binding per mapped attribute, in declaration order
            bool_words: Optional (true, false) words used for BOOL values in
                REST payloads, e.g. ("enabled", "disabled")
        """
        self.record_type: type = record_type
        self.bindings: tuple[FieldBinding, ...] = tuple(bindings)
        self.bool_words: tuple[str, str] | None = bool_words

        self._by_field: dict[str, FieldBinding] = {}
        self._by_wire: dict[str, FieldBinding] = {}
        self._by_key: dict[str, FieldBinding] = {}
        for binding in self.bindings:
            if binding.field_name in self._by_field:
                raise ValueError(
                    f"{record_type.__name__}: duplicate field name {binding.field_name}"
                )
            self._by_field[binding.field_name] = binding
            self._by_wire[binding.wire_name] = binding
            self._by_key[binding.config_key] = binding

    @classmethod
    def for_record(
        cls,
        record_type: type,
        wire_names: Mapping[str, str] | None = None,
        bool_words: tuple[str, str] | None = None,
    ) -> EntityMapping:
        """Build the field table from a dataclass's declared fields.

        Args:
            record_type: Dataclass whose fields are all str, bool, int or
                list[str], optionally ``| None``
            wire_names: REST attribute names for fields whose name is not the
                lowerCamelCase form of the attribute
            bool_words: See ``__init__``

        Raises:
            TypeError: If record_type is not a dataclass or a field has an
                unsupported type
        """
        if not dataclasses.is_dataclass(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass")

        overrides = dict(wire_names or {})
        hints = typing.get_type_hints(record_type)
        bindings = [
            FieldBinding(
                config_key=f.name,
                attribute=f.name,
                field_name=to_camel_case(f.name),
                kind=_kind_for(record_type, f.name, hints[f.name]),
                wire_name=overrides.pop(f.name, lower_camel_case(f.name)),
            )
            for f in dataclasses.fields(record_type)
        ]
        if overrides:
            raise ValueError(
                f"{record_type.__name__}: wire names for unknown fields {sorted(overrides)}"
            )
        return cls(record_type, bindings, bool_words)

    def resolve(self, key: str) -> FieldBinding:
        """Find the binding for a configuration key.

        Raises:
            FieldNotFound: If neither CamelCase form of the key names a field
        """
        primary = title_case(key)
        binding = self._by_field.get(primary)
        if binding is not None:
            return binding

        secondary = to_camel_case(key)
        binding = self._by_field.get(secondary)
        if binding is not None:
            return binding

        candidates = (primary,) if primary == secondary else (primary, secondary)
        raise FieldNotFound(key, self.record_type.__name__, candidates)

    def map(self, config: ConfigMap | Mapping[str, Any], target: Any) -> None:
        """Copy every configuration value onto ``target``.

        Args:
            config: ConfigMap, or a raw mapping validated with ConfigMap.from_raw
            target: Instance of this mapping's record type; mutated in place

        Raises:
            FieldNotFound: If a key has no destination field
            TypeMismatch: If a value's kind differs from the field's kind
        """
        if not isinstance(target, self.record_type):
            raise TypeMismatch(
                "target", self.record_type.__name__, type(target).__name__
            )
        if not isinstance(config, ConfigMap):
            config = ConfigMap.from_raw(config)

        assignments: list[tuple[FieldBinding, Any]] = []
        for key, value in config.items():
            binding = self.resolve(key)
            assignments.append((binding, self._coerce(key, binding, value)))

        for binding, value in assignments:
            setattr(target, binding.attribute, value)

        logger.debug(
            "Mapped configuration onto record",
            extra={
                "record": self.record_type.__name__,
                "fields": [binding.field_name for binding, _ in assignments],
            },
        )

    def _coerce(self, key: str, binding: FieldBinding, value: ConfigValue) -> Any:
        if value.kind is not binding.kind:
            raise TypeMismatch(key, binding.kind.value, value.kind.value)
        if binding.is_sequence:
            # Fresh list so the record never shares storage with the config map
            return value.to_python()
        return value.value

    def to_payload(self, record: Any) -> dict[str, Any]:
        """Serialize a record to a REST payload keyed by wire names.

        Attributes that are None or empty lists are left out.
        """
        payload: dict[str, Any] = {}
        for binding in self.bindings:
            value = getattr(record, binding.attribute)
            if value is None or (binding.is_sequence and not value):
                continue
            if binding.is_sequence:
                value = list(value)
            elif binding.kind is ValueKind.BOOL and self.bool_words:
                value = self.bool_words[0] if value else self.bool_words[1]
            payload[binding.wire_name] = value
        return payload

    def to_state(self, payload: Mapping[str, Any]) -> dict[str, Any]:
        """Convert a REST payload back to configuration keys.

        Wire attributes are matched by declared wire name first and by their
        snake_case form second; attributes with no binding are skipped.
        """
        state: dict[str, Any] = {}
        for wire_name, value in payload.items():
            binding = self._by_wire.get(wire_name) or self._by_key.get(
                to_snake_case(wire_name)
            )
            if binding is None:
                continue
            state[binding.config_key] = self._decode(binding, value)
        return state

    def _decode(self, binding: FieldBinding, value: Any) -> Any:
        if binding.kind is ValueKind.BOOL and self.bool_words and isinstance(value, str):
            return value == self.bool_words[0]
        if binding.is_sequence and value is not None:
            return list(value)
        return value


@lru_cache(maxsize=32)
def mapping_for(record_type: type) -> EntityMapping:
    """Cached default field table for a record type."""
    return EntityMapping.for_record(record_type)


def map_entity(config: ConfigMap | Mapping[str, Any], target: Any) -> None:
    """Map a configuration map onto ``target`` using its type's default table."""
    mapping_for(type(target)).map(config, target)


__all__ = [
    "EntityMapping",
    "FieldBinding",
    "map_entity",
    "mapping_for",
]
