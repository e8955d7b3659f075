import pytest
from pathlib import Path


@pytest.fixture
def test_assets_dir() -> Path:
    """Return the path to the test assets directory."""
    return Path(__file__).parent / 'assets'


@pytest.fixture
def bulletin(test_assets_dir) -> str:
    """Low level FB winds bulletin based on 1200Z data."""
    return (test_assets_dir / 'fb_winds_low.txt').read_text()


@pytest.fixture
def fixed_clock():
    """Clock returning 13:05 UTC."""
    return lambda: (13, 5)
