from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Property:
    """
    One decoded I/O element.

    Attributes:
        id: The property ID byte.
        value: The raw value read from the wire.
        size: Width in bytes of the run the value came from (1, 2, 4 or 8).
        label: Catalog label, ``""`` if unknown.
        unit: Catalog unit, ``""`` if unknown or unitless.
        human_value: Enumerated value name, ``""`` if not enumerated.
    """
    id: int
    value: int
    size: int
    label: str = ""
    unit: str = ""
    human_value: str = ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "value": self.value,
            "size": self.size,
            "label": self.label,
            "unit": self.unit,
            "human_value": self.human_value,
        }
