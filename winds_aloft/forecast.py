"""Winds aloft forecast aggregate and refresh policy."""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from winds_aloft.models import StationForecast
from winds_aloft.parser import WindsAloftParser

logger = logging.getLogger(__name__)

# Returns the bulletin text, or None when the fetch failed
FetchFunction = Callable[[], Optional[str]]

# Bulletins are issued every 6 hours (00Z, 06Z, 12Z, 18Z)
VALIDITY_HOURS = 6


def now_utc() -> Tuple[int, int]:
    """Current UTC time as (hour, minute)."""
    now = datetime.now(timezone.utc)
    return now.hour, now.minute


def _default_fetch() -> FetchFunction:
    from winds_aloft.sources.avwx import WindsAloftSource
    return WindsAloftSource().fetch_report


@dataclass
class WindsAloftForecast:
    """
    A retrieved winds aloft bulletin.

    Attributes:
        time_retrieved: UTC time the bulletin was fetched, as HHMM
        forecast_time: Issuance time stated in the bulletin, as HHMM
        forecasts: Station forecasts in bulletin order

    Example:
        forecast = WindsAloftForecast()
        if forecast.needs_refresh():
            forecast.refresh()
        abq = forecast.get_station_forecast("abq")
    """

    time_retrieved: int = 0
    forecast_time: int = 0
    forecasts: List[StationForecast] = field(default_factory=list)
    clock: Callable[[], Tuple[int, int]] = field(default=now_utc, repr=False, compare=False)

    @classmethod
    def build(cls, fetch: Optional[FetchFunction] = None) -> Optional['WindsAloftForecast']:
        """
        Fetch and parse a new forecast.

        Args:
            fetch: Function returning the bulletin text or None
                (defaults to WindsAloftSource().fetch_report)

        Returns:
            WindsAloftForecast or None if the fetch failed
        """
        forecast = cls()
        if not forecast.refresh(fetch):
            return None
        return forecast

    def refresh(self, fetch: Optional[FetchFunction] = None) -> bool:
        """
        Replace this forecast with a freshly fetched bulletin.

        On failure the current contents are kept.

        Args:
            fetch: Function returning the bulletin text or None
                (defaults to WindsAloftSource().fetch_report)

        Returns:
            True if the forecast was replaced
        """
        if fetch is None:
            fetch = _default_fetch()

        body = fetch()
        if body is None:
            logger.warning("Winds aloft refresh failed, keeping forecast from %04d", self.forecast_time)
            return False

        forecasts = WindsAloftParser.parse(body)
        forecast_time = WindsAloftParser.parse_time(body)
        hour, minute = self.clock()

        self.forecasts, self.forecast_time, self.time_retrieved = forecasts, forecast_time, hour * 100 + minute
        logger.info("Refreshed winds aloft: %d stations, data based on %04dZ",
                    len(forecasts), forecast_time)
        return True

    def get_station_forecast(self, station: str) -> Optional[StationForecast]:
        """
        Look up a station, ignoring case.

        If the bulletin lists a station more than once the first entry wins.

        Args:
            station: Station identifier (e.g. "abq")

        Returns:
            StationForecast or None if the station is not in the bulletin
        """
        station_upper = station.upper()
        for forecast in self.forecasts:
            if forecast.station == station_upper:
                return forecast
        return None

    def needs_refresh_time_given(self, time: int) -> bool:
        """
        Check whether the forecast is stale at a given time.

        Only hours are compared. The forecast is stale once more than
        VALIDITY_HOURS hours have passed since issuance, or when the hour is
        before the issuance hour, which also covers the day rollover.

        Args:
            time: UTC time as HHMM

        Returns:
            True if the forecast should be refreshed
        """
        hour = time // 100
        forecast_hour = self.forecast_time // 100
        return hour > forecast_hour + VALIDITY_HOURS or hour < forecast_hour

    def needs_refresh(self) -> bool:
        """Check whether the forecast is stale now."""
        hour, minute = self.clock()
        return self.needs_refresh_time_given(hour * 100 + minute)

    def to_dict(self) -> dict:
        return {
            'time_retrieved': self.time_retrieved,
            'forecast_time': self.forecast_time,
            'forecasts': [f.to_dict() for f in self.forecasts],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'WindsAloftForecast':
        return cls(
            time_retrieved=data.get('time_retrieved', 0),
            forecast_time=data.get('forecast_time', 0),
            forecasts=[StationForecast.from_dict(f) for f in data.get('forecasts', [])],
        )

    def __repr__(self) -> str:
        return f"WindsAloftForecast({self.forecast_time:04d}Z {len(self.forecasts)} stations)"


def all_winds_aloft(fetch: Optional[FetchFunction] = None) -> Optional[List[StationForecast]]:
    """
    Fetch the bulletin and return every station forecast.

    Returns:
        List of StationForecast or None if the fetch failed
    """
    forecast = WindsAloftForecast.build(fetch)
    if forecast is None:
        return None
    return forecast.forecasts


def winds_aloft_for_station(station: str, fetch: Optional[FetchFunction] = None) -> Optional[StationForecast]:
    """
    Fetch the bulletin and return the forecast for one station.

    Returns:
        StationForecast or None if the fetch failed or the station is absent
    """
    forecast = WindsAloftForecast.build(fetch)
    if forecast is None:
        return None
    return forecast.get_station_forecast(station)
