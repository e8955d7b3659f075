"""Parser for the plaintext FB winds aloft bulletin."""

import re
import logging
from typing import Optional, List

from winds_aloft.models import Wind, StationForecast, ALTITUDES

logger = logging.getLogger(__name__)

# One station line. Columns are fixed width, so each field is separated
# from the previous one by exactly one whitespace character. The last
# column may also end the body.
_STATION_LINE = re.compile(r"""
    (?P<station>\w+)\s          # Station identifier
    (?P<ft3000>.{4})\s          # 3000 ft (wind only)
    (?P<ft6000>.{7})\s          # 6000 ft
    (?P<ft9000>.{7})\s          # 9000 ft
    (?P<ft12000>.{7})\s         # 12000 ft
    (?P<ft18000>.{7})\s         # 18000 ft
    (?P<ft24000>.{7})\s         # 24000 ft
    (?P<ft30000>.{6})\s         # 30000 ft (temperature sign implied)
    (?P<ft34000>.{6})\s         # 34000 ft
    (?P<ft39000>.{6})(?:\s|\Z)  # 39000 ft, then line or body end
""", re.VERBOSE)

_TOKEN = re.compile(r'\w+')
_UNSIGNED_FIELD = re.compile(r"\+?[0-9]+")

# e.g. "DATA BASED ON 180000Z"
_DATA_TIME = re.compile(r'DATA BASED ON \d{2}(?P<hhmm>\d{4})Z')

_ALTITUDE_GROUPS = [(f"ft{altitude}", altitude) for altitude in ALTITUDES]


class WindsAloftParser:
    """
    Parse FB winds aloft bulletins into StationForecast objects.

    Parsing is best effort: a wind group that cannot be read is dropped and
    the rest of the station line is kept.

    Example:
        forecasts = WindsAloftParser.parse(body)
        issued = WindsAloftParser.parse_time(body)
    """

    @classmethod
    def parse_wind(cls, token: str, altitude: int) -> Optional[Wind]:
        """
        Parse a single "ddff" or "ddff+tt" wind group.

        The first two characters are the direction in tens of degrees and
        the next two the speed in knots. Anything after the fourth character
        (the temperature) is ignored. A leading "+" in either field is
        accepted, so "31+7" reads as 310 degrees at 7 knots.

        Args:
            token: Raw wind group from the bulletin column
            altitude: Altitude of the column in feet

        Returns:
            Wind or None if the group is blank or not numeric
        """
        if not token or not _TOKEN.search(token):
            return None

        direction = cls._parse_field(token[0:2])
        speed = cls._parse_field(token[2:4])
        if direction is None or speed is None:
            return None

        return Wind(direction=direction * 10, speed=speed, altitude=altitude)

    @classmethod
    def parse(cls, body: str) -> List[StationForecast]:
        """
        Extract every station line of a bulletin.

        Args:
            body: Full bulletin text

        Returns:
            One StationForecast per matching line, in bulletin order
        """
        forecasts = []
        dropped = 0

        for match in _STATION_LINE.finditer(body):
            station = match.group('station')
            if not station:
                continue

            winds = []
            for group, altitude in _ALTITUDE_GROUPS:
                raw = match.group(group)
                if raw is None:
                    continue
                wind = cls.parse_wind(raw, altitude)
                if wind is None:
                    dropped += 1
                    continue
                winds.append(wind)

            forecasts.append(StationForecast(station=station, winds=winds))

        logger.debug("Parsed %d stations (%d empty or unreadable wind groups)",
                     len(forecasts), dropped)
        return forecasts

    @classmethod
    def parse_time(cls, body: str) -> int:
        """
        Extract the issuance time from the "DATA BASED ON ddhhmmZ" header.

        When the header appears more than once the last one is used.

        Args:
            body: Full bulletin text

        Returns:
            Time as HHMM integer (e.g. 600 for 0600Z), or 0 if not found
        """
        hhmm = 0
        for match in _DATA_TIME.finditer(body):
            hhmm = int(match.group('hhmm'))
        return hhmm

    @staticmethod
    def _parse_field(text: str) -> Optional[int]:
        """Parse a two character unsigned field, optionally signed with "+"."""
        if len(text) != 2 or not _UNSIGNED_FIELD.fullmatch(text):
            return None
        return int(text)
