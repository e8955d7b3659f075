"""Winds aloft bulletin sources."""

from winds_aloft.sources.avwx import WindsAloftSource

__all__ = ['WindsAloftSource']
