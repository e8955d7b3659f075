"""Winds aloft data models."""

from dataclasses import dataclass, field
from typing import Optional, List


# Altitude columns of the low-level FB bulletin, in feet MSL
ALTITUDES = (3000, 6000, 9000, 12000, 18000, 24000, 30000, 34000, 39000)


@dataclass(frozen=True)
class Wind:
    """
    Forecast wind at a single altitude.

    Attributes:
        direction: True direction in degrees (multiple of 10)
        speed: Speed in knots
        altitude: Altitude in feet, one of ALTITUDES
    """

    direction: int
    speed: int
    altitude: int

    def to_dict(self) -> dict:
        return {
            'direction': self.direction,
            'speed': self.speed,
            'altitude': self.altitude,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Wind':
        return cls(
            direction=data.get('direction', 0),
            speed=data.get('speed', 0),
            altitude=data.get('altitude', 0),
        )


@dataclass
class StationForecast:
    """
    Winds aloft for one reporting station.

    Winds are ordered by ascending altitude as they appear in the bulletin
    columns. Altitudes whose wind could not be read are absent, so a station
    near the tropopause or at high elevation usually has fewer than nine.

    Attributes:
        station: Station identifier as printed in the bulletin (e.g. "ABQ")
        winds: Parsed winds, at most one per altitude
    """

    station: str
    winds: List[Wind] = field(default_factory=list)

    def wind_at_altitude(self, altitude: int) -> Optional[Wind]:
        """
        Look up the wind at a given altitude.

        Args:
            altitude: Altitude in feet (e.g. 9000)

        Returns:
            Wind or None if the bulletin had no usable wind at that level
        """
        for wind in self.winds:
            if wind.altitude == altitude:
                return wind
        return None

    @property
    def altitudes(self) -> List[int]:
        """Altitudes with a parsed wind, in bulletin order."""
        return [w.altitude for w in self.winds]

    def to_dict(self) -> dict:
        return {
            'station': self.station,
            'winds': [w.to_dict() for w in self.winds],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'StationForecast':
        return cls(
            station=data.get('station', ''),
            winds=[Wind.from_dict(w) for w in data.get('winds', [])],
        )

    def __repr__(self) -> str:
        return f"StationForecast({self.station} {len(self.winds)} winds)"
