from __future__ import annotations

from typing import Optional, Protocol

from ..core.exceptions import LocationUnavailable
from .model import GeoPoint


class LocationProvider(Protocol):
    def current_position(self) -> GeoPoint:
        """Return the device position or raise ``LocationUnavailable``."""
        raise NotImplementedError


class FixedLocationProvider:
    """Returns a configured point; with none configured, location is unavailable.

    The HTTP layer uses the unconfigured form: positions come from the client,
    so a request without coordinates ends here.
    """

    def __init__(self, point: Optional[GeoPoint] = None):
        self._point = point

    def current_position(self) -> GeoPoint:
        if self._point is None:
            raise LocationUnavailable("Location unavailable: check location permissions")
        return self._point
