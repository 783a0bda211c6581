"""Bearer tokens fetched from an authentication endpoint."""

from __future__ import annotations

from datetime import datetime

import requests


class TokenError(RuntimeError):
    """Raised when the authentication endpoint refuses to issue a token."""


class TokenService:
    """Fetches a token by posting the auth model, reusing it until it expires."""

    def __init__(
        self,
        auth_url: str = "",
        auth_model: str = "",
        token: str = "",
        expires: datetime = datetime.min,
    ) -> None:
        self.auth_url = auth_url
        self.auth_model = auth_model
        self.expires = expires
        self._token = token

    def get_token_from_url(self) -> str:
        """Request a new token; the response body is the token."""
        response = requests.post(
            self.auth_url,
            data=self.auth_model.encode("utf-8"),
            headers={"Content-Type": "application/json"},
        )
        if response.status_code != 200:
            raise TokenError(
                f"code: {response.status_code}. "
                f"message: {response.status_code} {response.reason}"
            )
        return response.text

    def token(self) -> str:
        """Return the current token, fetching a new one once it has expired."""
        if datetime.now() > self.expires:
            self._token = self.get_token_from_url()
        return self._token