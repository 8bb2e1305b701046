"""Domain entities for geographic coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Mapping

from sunrise_alarm.domain.entities.errors import InvalidInputError

DRIFT_THRESHOLD_DEGREES = 0.01

# Absorbs binary rounding of decimal degrees, e.g. 1.01 - 1.0 > 0.01
_DRIFT_TOLERANCE = 1e-9


def _as_degrees(value: Any, name: str, limit: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(
            f"{name} must be numeric", details={name: repr(value)}
        )
    degrees = float(value)
    if not math.isfinite(degrees) or abs(degrees) > limit:
        raise InvalidInputError(
            f"{name} must be within +/-{limit:g} degrees", details={name: degrees}
        )
    return degrees


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, raw: Any) -> "Coordinate":
        """
        Build a validated coordinate from a ``Coordinate`` or a mapping.

        Raises:
            InvalidInputError: When the value is missing or not numeric.
        """
        if raw is None:
            raise InvalidInputError("Coordinate is missing")
        if isinstance(raw, Coordinate):
            latitude, longitude = raw.latitude, raw.longitude
        elif isinstance(raw, Mapping):
            latitude, longitude = raw.get("latitude"), raw.get("longitude")
        else:
            raise InvalidInputError(
                "Coordinate must provide latitude and longitude",
                details={"value": repr(raw)},
            )
        return cls(
            latitude=_as_degrees(latitude, "latitude", 90.0),
            longitude=_as_degrees(longitude, "longitude", 180.0),
        )

    def is_within(
        self, other: "Coordinate", threshold: float = DRIFT_THRESHOLD_DEGREES
    ) -> bool:
        """True when both axes differ by at most ``threshold`` degrees."""
        limit = threshold + _DRIFT_TOLERANCE
        return (
            abs(self.latitude - other.latitude) <= limit
            and abs(self.longitude - other.longitude) <= limit
        )

    def to_dict(self) -> Dict[str, float]:
        return {"latitude": self.latitude, "longitude": self.longitude}
