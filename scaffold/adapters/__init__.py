"""Adapter layer package for deployment verification boundaries."""

from .http_smoke_probe import HttpSmokeProbeAdapter
from .interfaces import SmokeProbePort, SmokeProbeResult

__all__ = ["HttpSmokeProbeAdapter", "SmokeProbePort", "SmokeProbeResult"]
