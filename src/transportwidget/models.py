"""Data models for the Public Transport widget."""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)

# transport.opendata.ch writes offsets as +0100
_COMPACT_OFFSET = re.compile(r"(T.*[+-]\d{2})(\d{2})$")


class ConfigError(ValueError):
    """Raised when the widget configuration cannot be decoded."""


def summarize_validation_error(error: ValidationError) -> str:
    """One-line description of a pydantic error, e.g. "to.name: Field required"."""
    parts = []
    for detail in error.errors(include_url=False):
        location = ".".join(str(part) for part in detail["loc"])
        message = " ".join(str(detail["msg"]).split())
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts)


# ==================== Widget configuration ====================


class StationPairConfig(BaseModel):
    """An origin/destination pair and how many departures to show for it."""

    model_config = ConfigDict(frozen=True)

    from_station: str
    to_station: str
    num_connections: int = Field(ge=0, le=255)


class WidgetConfig(BaseModel):
    """Configuration the host stores for the widget."""

    model_config = ConfigDict(frozen=True)

    connections: List[StationPairConfig]


# ==================== transport.opendata.ch payload ====================


class StationInfo(BaseModel):
    name: str


class DepartureInfo(BaseModel):
    departure: AwareDatetime

    @field_validator("departure", mode="before")
    @classmethod
    def _normalize_offset(cls, value):
        if isinstance(value, str):
            return _COMPACT_OFFSET.sub(r"\1:\2", value)
        return value


class ConnectionRecord(BaseModel):
    """One journey returned by the planner, reduced to its origin departure."""

    model_config = ConfigDict(populate_by_name=True)

    from_: DepartureInfo = Field(alias="from")

    @property
    def departure(self) -> datetime:
        return self.from_.departure


class TransportResponse(BaseModel):
    """Decoded response of the /v1/connections endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    from_: StationInfo = Field(alias="from")
    to: StationInfo
    connections: List[ConnectionRecord]


# ==================== Host-facing result ====================


@dataclass
class WidgetResult:
    """Text returned to the host for one invocation of run()."""
    data: str
    config_error: Optional[ConfigError] = None  # Set when the config could not be decoded

    @property
    def ok(self) -> bool:
        return self.config_error is None

    def raise_for_error(self) -> None:
        """Raise the configuration error, if any, instead of displaying it."""
        if self.config_error is not None:
            raise self.config_error
