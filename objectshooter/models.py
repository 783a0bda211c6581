"""Settings and result types shared by the worker, the seeder and the server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _take(data: Mapping[str, Any], key: str, kind: type, default: Any) -> Any:
    """Read one JSON field, enforcing the declared type; null means the default."""
    value = data.get(key)
    if value is None:
        return default
    if kind is bool:
        if isinstance(value, bool):
            return value
    elif kind is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    elif kind is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif kind is str:
        if isinstance(value, str):
            return value
    raise TypeError(
        f"field {key!r} must be of type {kind.__name__}, got {type(value).__name__}"
    )


@dataclass(frozen=True)
class ConsumerSettings:
    """Where requests are sent and which credentials obtain a token."""

    host: str = ""
    auth_model: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ConsumerSettings:
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise TypeError("consumer settings must be a JSON object")
        return cls(
            host=_take(data, "host", str, ""),
            auth_model=_take(data, "authModel", str, ""),
        )


@dataclass(frozen=True)
class BackgroundWorkerSettings:
    """Parameters of one sending worker, as accepted by the start endpoint."""

    table_name: str = ""
    timer: float = 0.0
    request_delay: int = 0
    random: bool = False
    writes_number_to_send: int = 0
    total_to_send: int = 0
    stop_when_table_ends: bool = False
    consumer_settings: ConsumerSettings = field(default_factory=ConsumerSettings)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> BackgroundWorkerSettings:
        """Build settings from a decoded JSON object using its wire field names."""
        if not isinstance(data, Mapping):
            raise TypeError("worker settings must be a JSON object")
        return cls(
            table_name=_take(data, "tableName", str, ""),
            timer=_take(data, "timer", float, 0.0),
            request_delay=_take(data, "requestDellay", int, 0),
            random=_take(data, "random", bool, False),
            writes_number_to_send=_take(data, "writesNumberToSend", int, 0),
            total_to_send=_take(data, "totalToSend", int, 0),
            stop_when_table_ends=_take(data, "stopWhenTableEnds", bool, False),
            consumer_settings=ConsumerSettings.from_dict(data.get("consumerSettings")),
        )


@dataclass(frozen=True)
class ResponseResult:
    """Status code and status line of a delivered request."""

    code: int = 0
    message: str = ""

    def __str__(self) -> str:
        return f"Code: {self.code} | Message {self.message}"