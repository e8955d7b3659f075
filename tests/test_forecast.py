"""Tests for WindsAloftForecast refresh, lookup and staleness."""

from unittest.mock import MagicMock
import pytest

from winds_aloft.forecast import (
    WindsAloftForecast,
    all_winds_aloft,
    winds_aloft_for_station,
    now_utc,
)
from winds_aloft.models import StationForecast, Wind


def failing_fetch():
    return None


class TestRefresh:
    """Test replacing the forecast from a fetch."""

    def test_refresh_success(self, bulletin, fixed_clock):
        forecast = WindsAloftForecast(clock=fixed_clock)

        assert forecast.refresh(lambda: bulletin) is True
        assert forecast.forecast_time == 1200
        assert forecast.time_retrieved == 1305
        assert len(forecast.forecasts) == 5

    def test_refresh_failure_keeps_previous(self, bulletin, fixed_clock):
        forecast = WindsAloftForecast(clock=fixed_clock)
        forecast.refresh(lambda: bulletin)
        previous = forecast.to_dict()

        assert forecast.refresh(failing_fetch) is False
        assert forecast.to_dict() == previous

    def test_refresh_failure_on_empty_forecast(self):
        forecast = WindsAloftForecast()

        assert forecast.refresh(failing_fetch) is False
        assert forecast.forecasts == []
        assert forecast.forecast_time == 0
        assert forecast.time_retrieved == 0

    def test_refresh_replaces_all_fields(self, bulletin):
        forecast = WindsAloftForecast(
            time_retrieved=100,
            forecast_time=0,
            forecasts=[StationForecast("XYZ")],
            clock=lambda: (0, 7),
        )

        forecast.refresh(lambda: bulletin)

        assert forecast.time_retrieved == 7
        assert forecast.forecast_time == 1200
        assert forecast.get_station_forecast("XYZ") is None

    def test_refresh_calls_fetch_once(self, bulletin):
        fetch = MagicMock(return_value=bulletin)
        WindsAloftForecast().refresh(fetch)
        fetch.assert_called_once_with()

    def test_build(self, bulletin):
        forecast = WindsAloftForecast.build(lambda: bulletin)

        assert forecast is not None
        assert forecast.forecast_time == 1200
        assert [f.station for f in forecast.forecasts] == ["ABI", "ABQ", "ALB", "AMA", "ATL"]

    def test_build_failure(self):
        assert WindsAloftForecast.build(failing_fetch) is None


class TestGetStationForecast:
    """Test station lookup."""

    def test_exact(self, bulletin):
        forecast = WindsAloftForecast.build(lambda: bulletin)

        abq = forecast.get_station_forecast("ABQ")
        assert abq is not None
        assert abq.station == "ABQ"

    def test_case_insensitive(self, bulletin):
        forecast = WindsAloftForecast.build(lambda: bulletin)

        assert forecast.get_station_forecast("abq") is forecast.get_station_forecast("ABQ")
        assert forecast.get_station_forecast("Atl").station == "ATL"

    def test_missing(self, bulletin):
        forecast = WindsAloftForecast.build(lambda: bulletin)
        assert forecast.get_station_forecast("ZZZ") is None

    def test_first_duplicate_wins(self):
        first = StationForecast("ABI", [Wind(170, 14, 3000)])
        second = StationForecast("ABI", [Wind(200, 11, 3000)])
        forecast = WindsAloftForecast(forecasts=[first, second])

        assert forecast.get_station_forecast("abi") is first

    def test_empty(self):
        assert WindsAloftForecast().get_station_forecast("ABI") is None


class TestNeedsRefresh:
    """Test the staleness policy."""

    @pytest.mark.parametrize("forecast_time,time,expected", [
        (0, 1200, True),
        (0, 1250, True),
        (1200, 1200, False),
        (1200, 1250, False),
        (1200, 1000, True),
        (1200, 1050, True),
        (1200, 0, True),
        (1200, 50, True),
        (1800, 0, True),
        (1800, 50, True),
    ])
    def test_time_given(self, forecast_time, time, expected):
        forecast = WindsAloftForecast(forecast_time=forecast_time)
        assert forecast.needs_refresh_time_given(time) is expected

    def test_validity_window_edge(self):
        forecast = WindsAloftForecast(forecast_time=600)

        assert forecast.needs_refresh_time_given(1200) is False
        assert forecast.needs_refresh_time_given(1259) is False
        assert forecast.needs_refresh_time_given(1300) is True

    def test_minutes_of_forecast_time_ignored(self):
        forecast = WindsAloftForecast(forecast_time=1259)
        assert forecast.needs_refresh_time_given(1200) is False

    def test_needs_refresh_uses_clock(self):
        forecast = WindsAloftForecast(forecast_time=1200, clock=lambda: (13, 5))
        assert forecast.needs_refresh() is False

        forecast.clock = lambda: (19, 0)
        assert forecast.needs_refresh() is True

    def test_now_utc_range(self):
        hour, minute = now_utc()
        assert 0 <= hour <= 23
        assert 0 <= minute <= 59


class TestSerialization:
    """Test dict round trip of the aggregate."""

    def test_to_dict_fields(self, bulletin, fixed_clock):
        forecast = WindsAloftForecast(clock=fixed_clock)
        forecast.refresh(lambda: bulletin)

        data = forecast.to_dict()

        assert set(data) == {'time_retrieved', 'forecast_time', 'forecasts'}
        assert data['time_retrieved'] == 1305
        assert data['forecasts'][0]['station'] == "ABI"
        assert data['forecasts'][0]['winds'][0] == {'direction': 170, 'speed': 14, 'altitude': 3000}

    def test_from_dict(self, bulletin):
        forecast = WindsAloftForecast.build(lambda: bulletin)

        restored = WindsAloftForecast.from_dict(forecast.to_dict())

        assert restored == forecast


class TestModuleHelpers:
    """Test the one-shot helpers."""

    def test_all_winds_aloft(self, bulletin):
        forecasts = all_winds_aloft(lambda: bulletin)
        assert len(forecasts) == 5

    def test_all_winds_aloft_failure(self):
        assert all_winds_aloft(failing_fetch) is None

    def test_winds_aloft_for_station(self, bulletin):
        alb = winds_aloft_for_station("alb", lambda: bulletin)

        assert alb.station == "ALB"
        assert alb.wind_at_altitude(6000) == Wind(220, 7, 6000)

    def test_winds_aloft_for_station_missing(self, bulletin):
        assert winds_aloft_for_station("ZZZ", lambda: bulletin) is None

    def test_winds_aloft_for_station_failure(self):
        assert winds_aloft_for_station("ALB", failing_fetch) is None
