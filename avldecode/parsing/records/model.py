from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Optional

from avldecode.catalog import ODOMETER_PROPERTY_ID, TRIP_EVENT_PROPERTY_ID
from avldecode.parsing.properties.model import Property

# Event ID of records generated by trip start/stop.
TRIP_EVENT_ID = 250
TRIP_EVENT_START = 1
TRIP_EVENT_END = 0


@dataclass(frozen=True)
class GeoPosition:
    longitude: float
    latitude: float
    altitude: int
    angle: int
    satellites: int
    speed: int

    def as_dict(self) -> dict[str, Any]:
        return {
            "longitude": self.longitude,
            "latitude": self.latitude,
            "altitude": self.altitude,
            "angle": self.angle,
            "satellites": self.satellites,
            "speed": self.speed,
        }


@dataclass(frozen=True)
class Record:
    """
    A single AVL sample.

    Attributes:
        timestamp: Milliseconds since the Unix epoch (UTC).
        priority: Record priority byte.
        position: GPS fix of the sample.
        event_id: ID of the property that triggered the record (0 if periodic).
        property_count: Total number of I/O elements declared by the record.
        properties: I/O elements in wire order.
    """
    timestamp: int
    priority: int
    position: GeoPosition
    event_id: int
    property_count: int
    properties: tuple[Property, ...] = field(default_factory=tuple)

    @property
    def received_at(self) -> Optional[dt.datetime]:
        """The timestamp as an aware UTC datetime, or ``None`` if it lies outside the datetime range."""
        try:
            return dt.datetime.fromtimestamp(self.timestamp / 1000, tz=dt.timezone.utc)
        except (OverflowError, ValueError, OSError):
            return None

    @property
    def io_elements(self) -> tuple[Property, ...]:
        return self.properties

    def get(self, prop_id: int) -> Optional[Property]:
        """Return the first property with ID ``prop_id``, or ``None``."""
        for prop in self.properties:
            if prop.id == prop_id:
                return prop
        return None

    @property
    def is_trip_event(self) -> bool:
        return self.event_id == TRIP_EVENT_ID

    @property
    def trip_state(self) -> Optional[str]:
        """``"start"`` or ``"end"`` for trip records, ``None`` otherwise."""
        if not self.is_trip_event:
            return None
        prop = self.get(TRIP_EVENT_PROPERTY_ID)
        if prop is None:
            return None
        if prop.value == TRIP_EVENT_START:
            return "start"
        if prop.value == TRIP_EVENT_END:
            return "end"
        return None

    @property
    def odometer(self) -> Optional[int]:
        prop = self.get(ODOMETER_PROPERTY_ID)
        return prop.value if prop else None

    def as_dict(self) -> dict[str, Any]:
        received_at = self.received_at
        return {
            "timestamp": self.timestamp,
            "received_at": received_at.isoformat() if received_at else None,
            "priority": self.priority,
            "position": self.position.as_dict(),
            "event_id": self.event_id,
            "property_count": self.property_count,
            "properties": [p.as_dict() for p in self.properties],
        }
