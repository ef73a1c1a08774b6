"""transport.opendata.ch connections fetcher."""

import logging
from typing import Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from . import config
from .clock import Clock, system_now
from .formatter import render_departures
from .models import StationPairConfig, TransportResponse, summarize_validation_error

logger = logging.getLogger(__name__)

NETWORK_ERROR = "Failed to make network request"


class ResponseStatusError(ValueError):
    """The planner answered with a status other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"Response status != 200: {status_code}")
        self.status_code = status_code


class TransportClient:
    """Fetches connections for a station pair and renders them as text."""

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        clock: Clock = system_now,
    ):
        """
        Initialize the client.

        Args:
            session: HTTP session to issue requests with. A private one is
                created (and closed by close()) when omitted.
            base_url: Connections endpoint of the journey planner. Defaults
                to the api_url setting.
            timeout: Per-request timeout in seconds. Defaults to the timeout
                setting.
            clock: Callable returning the current aware datetime.
        """
        if base_url is None or timeout is None:
            settings = config.get_settings()
            base_url = settings.api_url if base_url is None else base_url
            timeout = settings.timeout if timeout is None else timeout

        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url
        self.timeout = timeout
        self.clock = clock

    def build_url(self, connection: StationPairConfig) -> str:
        """Request URL for a station pair, always asking for RAW_RESULT_LIMIT results."""
        return (
            f"{self.base_url}"
            f"?from={quote(connection.from_station, safe='')}"
            f"&to={quote(connection.to_station, safe='')}"
            f"&limit={config.RAW_RESULT_LIMIT}"
        )

    def fetch(self, connection: StationPairConfig) -> TransportResponse:
        """
        Fetch and decode connections for a station pair.

        Raises:
            requests.RequestException: If the request could not be made.
            ResponseStatusError: If the status is not 200.
            ValidationError: If the payload is not a connections response.
        """
        url = self.build_url(connection)
        logger.debug(f"Fetching {url}")

        response = self.session.get(url, timeout=self.timeout)
        if response.status_code != 200:
            raise ResponseStatusError(response.status_code)

        return TransportResponse.model_validate_json(response.content)

    def fetch_connection(self, connection: StationPairConfig) -> str:
        """
        Departure text for a station pair.

        Failures never raise; they are returned as the text to display.

        Args:
            connection: Configured station pair.

        Returns:
            Rendered departures, or a one-line error message.
        """
        try:
            data = self.fetch(connection)
        except requests.RequestException as e:
            logger.warning(
                f"Request for {connection.from_station} -> {connection.to_station} failed: {e}"
            )
            return NETWORK_ERROR
        except ValidationError as e:
            logger.warning(f"Failed to parse response for {connection.from_station}: {e}")
            return f"Failed to parse response: {summarize_validation_error(e)}"
        except ResponseStatusError as e:
            logger.warning(f"{connection.from_station} -> {connection.to_station}: {e}")
            return str(e)

        return render_departures(data, connection.num_connections, self.clock())

    def close(self) -> None:
        """Close the HTTP session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
