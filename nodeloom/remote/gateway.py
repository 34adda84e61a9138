"""Gateway to the hosted REST store. The only component that knows the wire format."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import requests

from nodeloom.domain.errors import ConfigurationError, TransportError

logger = logging.getLogger(__name__)

REST_PREFIX = "rest/v1"
MUTATING_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


@dataclass(frozen=True)
class GatewayResponse:
    """Raw, uninterpreted answer from the remote store."""
    content: bytes
    status_code: int

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class RemoteStoreGateway:
    """Build and execute signed REST requests against the remote store.

    Every call is a single attempt with a fixed timeout. Non-2xx answers are
    handed back to the caller; deciding which status means success is the
    caller's job.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 10.0,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = (base_url or "").rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, resource_path: str) -> str:
        return f"{self._base_url}/{REST_PREFIX}/{resource_path.lstrip('/')}"

    def headers_for(self, method: str) -> dict[str, str]:
        headers = {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        if method.upper() in MUTATING_METHODS:
            headers["Prefer"] = "return=representation"
        return headers

    def execute(self, method: str, resource_path: str, body: Any = None) -> GatewayResponse:
        """
        Issue one request against the remote store.

        Args:
            method: HTTP method
            resource_path: Table name, optionally followed by filter expressions
            body: JSON-serialisable payload; omitted when empty

        Returns:
            The raw response body and status code

        Raises:
            ConfigurationError: the base URL is empty
            TransportError: the request timed out or could not be delivered
        """
        if not self._base_url:
            raise ConfigurationError("Remote store URL is empty")

        method = method.upper()
        url = self.url_for(resource_path)
        data = json.dumps(body) if body else None

        logger.debug(f"{method} {url}")
        try:
            response = self._session.request(
                method,
                url,
                headers=self.headers_for(method),
                data=data,
                timeout=self._timeout,
            )
        except requests.Timeout as exc:
            raise TransportError(f"Remote store timed out after {self._timeout}s: {method} {resource_path}") from exc
        except requests.RequestException as exc:
            raise TransportError(f"Remote store request failed: {method} {resource_path}: {exc}") from exc

        logger.debug(f"{method} {url} -> {response.status_code}")
        return GatewayResponse(content=response.content, status_code=response.status_code)

    def ping(self) -> int:
        """Hit the REST root and return the status code."""
        return self.execute("GET", "").status_code

    def close(self) -> None:
        self._session.close()
