"""Public Transport widget - upcoming departures between station pairs."""

from .config import WIDGET_VERSION as __version__

from .models import (
    ConfigError,
    StationPairConfig,
    TransportResponse,
    WidgetConfig,
    WidgetResult,
)
from .formatter import render_departures
from .transport_client import TransportClient
from .widget import PublicTransportWidget, parse_config

__all__ = [
    "PublicTransportWidget",
    "TransportClient",
    "render_departures",
    "parse_config",
    "ConfigError",
    "StationPairConfig",
    "TransportResponse",
    "WidgetConfig",
    "WidgetResult",
]
