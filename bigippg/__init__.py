"""BIG-IP LTM monitor client.

Maps declarative monitor configuration onto typed records and manages the
matching objects through the iControl REST API.
"""

from bigippg.errors import FieldNotFound, MalformedIdentifier, TypeMismatch
from bigippg.identifiers import DEFAULT_PARTITION, ResourceIdentifier, parse_identifier
from bigippg.mapper import EntityMapping, map_entity
from bigippg.models import MONITOR_MAPPING, Monitor
from bigippg.resource_monitor import MonitorResource
from bigippg.values import ConfigMap, ConfigValue, ValueKind
from bigippg.version import BuildInfo, __version__

__all__ = [
    "__version__",
    "BuildInfo",
    "ConfigMap",
    "ConfigValue",
    "ValueKind",
    "DEFAULT_PARTITION",
    "ResourceIdentifier",
    "parse_identifier",
    "EntityMapping",
    "map_entity",
    "Monitor",
    "MONITOR_MAPPING",
    "MonitorResource",
    "FieldNotFound",
    "MalformedIdentifier",
    "TypeMismatch",
]
