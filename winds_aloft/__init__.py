"""
Winds aloft forecast retrieval and parsing.

Fetches the plaintext FB winds aloft bulletin from aviationweather.gov and
parses it into per-station, per-altitude winds.

The main public API includes:
- Wind: Direction and speed at one altitude
- StationForecast: Winds for one station
- WindsAloftParser: Parse raw bulletin text
- WindsAloftForecast: Fetched bulletin with staleness check and station lookup
- WindsAloftSource: aviationweather.gov fetcher

Example:
    from winds_aloft import WindsAloftForecast

    forecast = WindsAloftForecast.build()
    if forecast is not None:
        abq = forecast.get_station_forecast("ABQ")
        print(abq.wind_at_altitude(9000))
"""

from winds_aloft.models import Wind, StationForecast, ALTITUDES
from winds_aloft.parser import WindsAloftParser
from winds_aloft.forecast import (
    WindsAloftForecast,
    all_winds_aloft,
    winds_aloft_for_station,
    now_utc,
)
from winds_aloft.sources.avwx import WindsAloftSource

__version__ = '0.1.0'
__all__ = [
    'Wind',
    'StationForecast',
    'ALTITUDES',
    'WindsAloftParser',
    'WindsAloftForecast',
    'WindsAloftSource',
    'all_winds_aloft',
    'winds_aloft_for_station',
    'now_utc',
]
