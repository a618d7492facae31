"""
LTM monitor resource operations.

This module implements create, read, update and delete for BIG-IP LTM health
monitors on top of the entity mapper and a device client:
1. Validates the raw configuration into a ConfigMap
2. Maps it onto a Monitor record through MONITOR_MAPPING
3. Serializes the record to an iControl REST payload
4. Sends it through the injected DeviceClient

Resource IDs are monitor full paths (``/Common/my-monitor``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from aws_lambda_powertools import Logger

from bigippg.client.base import DeviceClient
from bigippg.errors import NotFoundError
from bigippg.identifiers import DEFAULT_PARTITION, ResourceIdentifier
from bigippg.models import MONITOR_MAPPING, Monitor, monitor_type
from bigippg.values import ConfigMap

logger = Logger(service="bigippg")

# Attributes the device does not accept in a PATCH
IMMUTABLE_WIRE_NAMES = frozenset({"name", "defaultsFrom"})


class MonitorResource:
    """CRUD operations for LTM monitors.

    Example:
        >>> resource = MonitorResource(create_client("icontrol_rest", config))
        >>> resource_id = resource.create(
        ...     {"name": "/Common/web", "parent": "/Common/http", "interval": 5}
        ... )
        >>> resource.read(resource_id, "/Common/http")["interval"]
        5
    """

    def __init__(self, client: DeviceClient):
        self.client: DeviceClient = client

    def build_monitor(self, raw_config: Mapping[str, Any] | ConfigMap) -> Monitor:
        """Validate raw configuration and map it onto a new Monitor.

        Raises:
            TypeMismatch: If a value has an unsupported or wrong type
            FieldNotFound: If a key is not a monitor attribute
        """
        config = (
            raw_config
            if isinstance(raw_config, ConfigMap)
            else ConfigMap.from_raw(raw_config)
        )
        monitor = Monitor()
        MONITOR_MAPPING.map(config, monitor)
        return monitor

    def create(self, raw_config: Mapping[str, Any] | ConfigMap) -> str:
        """Create a monitor on the device.

        Returns:
            The monitor's full path, used as the resource ID

        Raises:
            ValueError: If name is not a full path or parent is missing/unsupported
            MappingError: If the configuration does not map onto a Monitor
            APIError: If the device rejects the request
        """
        monitor = self.build_monitor(raw_config)
        identifier = _require_full_path(monitor.name)
        kind = _require_type(monitor.parent)

        payload = MONITOR_MAPPING.to_payload(monitor)
        payload["name"] = identifier.name
        payload["partition"] = identifier.partition

        self.client.create_monitor(kind, payload)
        logger.info(
            "Created monitor",
            extra={
                "monitor": identifier.full_path,
                "parent": monitor.parent,
            },
        )
        return identifier.full_path

    def read(self, resource_id: str, parent: str) -> dict[str, Any] | None:
        """Read a monitor's current state from the device.

        Returns:
            Configuration-keyed state, or None if the monitor no longer exists
        """
        identifier = ResourceIdentifier.parse(resource_id, DEFAULT_PARTITION)
        kind = monitor_type(parent)

        try:
            payload = self.client.get_monitor(kind, identifier)
        except NotFoundError:
            logger.warning(
                "Monitor not found on device, removing from state",
                extra={"monitor": identifier.full_path, "parent": parent},
            )
            return None

        state = MONITOR_MAPPING.to_state(payload)
        state["name"] = identifier.full_path
        state.setdefault("parent", parent)
        logger.debug(
            "Read monitor",
            extra={"monitor": identifier.full_path, "fields": sorted(state)},
        )
        return state

    def update(self, resource_id: str, raw_config: Mapping[str, Any] | ConfigMap) -> None:
        """Apply the configured attributes to an existing monitor.

        Name and parent cannot change in place and are not sent.

        Raises:
            ValueError: If parent is missing or unsupported
            MappingError: If the configuration does not map onto a Monitor
            APIError: If the device rejects the request
        """
        monitor = self.build_monitor(raw_config)
        identifier = ResourceIdentifier.parse(resource_id, DEFAULT_PARTITION)
        kind = _require_type(monitor.parent)

        payload = {
            wire_name: value
            for wire_name, value in MONITOR_MAPPING.to_payload(monitor).items()
            if wire_name not in IMMUTABLE_WIRE_NAMES
        }
        self.client.modify_monitor(kind, identifier, payload)
        logger.info(
            "Updated monitor",
            extra={"monitor": identifier.full_path, "fields": sorted(payload)},
        )

    def delete(self, resource_id: str, parent: str) -> None:
        """Delete a monitor. A monitor that is already gone counts as deleted."""
        identifier = ResourceIdentifier.parse(resource_id, DEFAULT_PARTITION)
        kind = monitor_type(parent)

        try:
            self.client.delete_monitor(kind, identifier)
        except NotFoundError:
            logger.info(
                "Monitor already deleted",
                extra={"monitor": identifier.full_path},
            )
            return

        logger.info("Deleted monitor", extra={"monitor": identifier.full_path})

    def exists(self, resource_id: str, parent: str) -> bool:
        return self.read(resource_id, parent) is not None


def _require_full_path(name: str | None) -> ResourceIdentifier:
    identifier = ResourceIdentifier.parse(name or "")
    if not identifier.has_partition or not identifier.name:
        raise ValueError(
            f"Monitor name must be a full path such as '/Common/my-monitor', got '{name}'"
        )
    return identifier


def _require_type(parent: str | None) -> str:
    if not parent:
        raise ValueError("Monitor parent is required, e.g. '/Common/http'")
    return monitor_type(parent)
