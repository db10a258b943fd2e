"""
I/O property catalog for codec 8 AVL records.

Maps numeric property IDs to a human-readable label, a unit and, for
enumerated properties, a table of value names. The table ships as the
``properties.json`` package resource and is loaded once per process. It is
used only to label decoded properties, never to drive parsing.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from functools import lru_cache
from importlib import resources
from types import MappingProxyType
from typing import Any, Mapping, Optional

# Property IDs with protocol meaning beyond labelling.
ODOMETER_PROPERTY_ID = 16
TRIP_EVENT_PROPERTY_ID = 250


@dataclass(frozen=True)
class PropertyDescriptor:
    """
    Metadata for a single I/O property.

    Attributes:
        id: The numeric property ID used on the wire.
        label: Human-readable property name.
        unit: Unit of measure, or ``""`` when unitless.
        values: Names of enumerated raw values (empty for continuous values).
    """
    id: int
    label: str
    unit: str = ""
    values: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))

    @property
    def is_enumerated(self) -> bool:
        return bool(self.values)

    def human_value(self, value: Any) -> str:
        """Return the enumerated name of ``value``, or ``""`` if it has none."""
        if not self.values or isinstance(value, bool) or not isinstance(value, int):
            return ""
        return self.values.get(value, "")


def _parse_descriptor(prop_id: int, data: dict[str, Any]) -> PropertyDescriptor:
    values = {int(k): str(v) for k, v in (data.get("values") or {}).items()}
    return PropertyDescriptor(
        id=prop_id,
        label=str(data.get("label", "")),
        unit=str(data.get("unit", "")),
        values=MappingProxyType(values),
    )


@lru_cache
def load_property_table() -> Mapping[int, PropertyDescriptor]:
    """Load the packaged property table. Cached, so every caller shares one table."""
    resource = resources.files("avldecode.catalog").joinpath("properties.json")
    with resource.open("r", encoding="utf-8") as f:
        raw = json.load(f)
    table = {int(key): _parse_descriptor(int(key), entry) for key, entry in raw.items()}
    return MappingProxyType(table)


class PropertyCatalog:
    """
    Read-only lookup of I/O property descriptors.

    Args:
        descriptors: Optional explicit table; defaults to the packaged one.
    """

    def __init__(self, descriptors: Optional[Mapping[int, PropertyDescriptor]] = None) -> None:
        if descriptors is None:
            descriptors = load_property_table()
        self._by_id: Mapping[int, PropertyDescriptor] = MappingProxyType(dict(descriptors))

    @classmethod
    def from_dict(cls, data: dict[Any, dict[str, Any]]) -> "PropertyCatalog":
        """Build a catalog from the same shape as ``properties.json``."""
        return cls({int(k): _parse_descriptor(int(k), v or {}) for k, v in data.items()})

    def get(self, prop_id: int) -> Optional[PropertyDescriptor]:
        """
        Look up a property by its numeric ID.

        Returns:
            The ``PropertyDescriptor`` if known, otherwise ``None``.
        """
        return self._by_id.get(prop_id)

    def describe(self, prop_id: int, value: Any) -> tuple[str, str, str]:
        """
        Resolve ``(label, unit, human_value)`` for a decoded property.

        Unknown IDs and unmapped values yield empty strings.
        """
        descriptor = self._by_id.get(prop_id)
        if descriptor is None:
            return "", "", ""
        return descriptor.label, descriptor.unit, descriptor.human_value(value)

    def all(self) -> list[PropertyDescriptor]:
        """Return all descriptors sorted by ID."""
        return sorted(self._by_id.values(), key=lambda d: d.id)

    def __len__(self) -> int:
        return len(self._by_id)

    def __contains__(self, prop_id: object) -> bool:
        return prop_id in self._by_id


@lru_cache
def default_catalog() -> PropertyCatalog:
    return PropertyCatalog()


__all__ = [
    "ODOMETER_PROPERTY_ID",
    "TRIP_EVENT_PROPERTY_ID",
    "PropertyCatalog",
    "PropertyDescriptor",
    "default_catalog",
    "load_property_table",
]
