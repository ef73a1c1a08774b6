"""Host-facing entry points of the Public Transport widget."""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from . import config
from .models import ConfigError, WidgetConfig, WidgetResult, summarize_validation_error
from .transport_client import TransportClient

logger = logging.getLogger(__name__)

NO_CONFIG = "No config provided"


def parse_config(raw_config: str) -> WidgetConfig:
    """
    Decode the host-supplied configuration.

    Raises:
        ConfigError: If the JSON is malformed or not a WidgetConfig.
    """
    try:
        return WidgetConfig.model_validate_json(raw_config)
    except ValidationError as e:
        raise ConfigError(f"Failed to parse config: {summarize_validation_error(e)}") from e


def _inline_refs(node, definitions: dict):
    """Replace every {"$ref": "#/$defs/X"} with a copy of the definition."""
    if isinstance(node, dict):
        ref = node.get("$ref")
        if ref is not None and ref.startswith("#/$defs/"):
            return _inline_refs(definitions[ref.split("/")[-1]], definitions)
        return {
            key: _inline_refs(value, definitions)
            for key, value in node.items()
            if key != "$defs"
        }
    if isinstance(node, list):
        return [_inline_refs(item, definitions) for item in node]
    return node


def config_schema() -> dict:
    """JSON Schema of WidgetConfig with nested models written inline."""
    schema = WidgetConfig.model_json_schema()
    return _inline_refs(schema, schema.get("$defs", {}))


class PublicTransportWidget:
    """
    The widget as the host sees it.

    The host calls run() every get_run_update_cycle_seconds() seconds with the
    stored configuration and displays the returned text.
    """

    def __init__(self, client: Optional[TransportClient] = None):
        self.client = client if client is not None else TransportClient()

    def get_name(self) -> str:
        return config.WIDGET_NAME

    def get_version(self) -> str:
        return config.WIDGET_VERSION

    def get_run_update_cycle_seconds(self) -> int:
        return config.UPDATE_CYCLE_SECONDS

    def get_config_schema(self) -> str:
        return json.dumps(config_schema(), indent=2)

    def run(self, raw_config: str) -> WidgetResult:
        """
        Render departures for every configured station pair.

        Args:
            raw_config: Configuration JSON stored by the host.

        Returns:
            WidgetResult with the joined text. If the configuration could not
            be decoded, config_error is set and data holds its message.
        """
        if raw_config == config.EMPTY_CONFIG:
            return WidgetResult(data=NO_CONFIG)

        try:
            widget_config = parse_config(raw_config)
        except ConfigError as e:
            logger.error(str(e))
            return WidgetResult(data=str(e), config_error=e)

        logger.debug(f"Fetching {len(widget_config.connections)} connection(s)")
        text = "\n".join(
            self.client.fetch_connection(connection)
            for connection in widget_config.connections
        )
        return WidgetResult(data=text)
