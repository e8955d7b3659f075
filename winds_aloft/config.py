"""
Runtime configuration for winds_aloft.

Values are read from the environment when the module is imported.
"""

import os
import logging

# Bulletin source
WINDS_ALOFT_URL = os.getenv(
    "WINDS_ALOFT_URL",
    "https://aviationweather.gov/api/data/windtemp?region=all&level=low&fcst=06",
)
WINDS_ALOFT_TIMEOUT = int(os.getenv("WINDS_ALOFT_TIMEOUT", "15"))
WINDS_ALOFT_USER_AGENT = os.getenv("WINDS_ALOFT_USER_AGENT", "winds-aloft/0.1 (aviation weather tool)")

# Logging Configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging for applications using the package."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
