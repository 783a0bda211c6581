"""Delivery of payloads to the consumer over HTTP."""

from __future__ import annotations

import json
from typing import Any, Mapping

import requests

from .models import ResponseResult


class SendingService:
    """Posts payloads to a host and reports the response status."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session if session is not None else requests.Session()

    def send_request(
        self, host: str, obj: Any, headers: Mapping[str, str] | None = None
    ) -> ResponseResult:
        """POST obj to host; strings are sent as they are, anything else as JSON."""
        if isinstance(obj, str):
            body = obj
        else:
            body = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
        response = self._session.post(
            host, data=body.encode("utf-8"), headers=dict(headers or {})
        )
        return ResponseResult(
            code=response.status_code,
            message=f"{response.status_code} {response.reason}",
        )