from __future__ import annotations

import json
import logging
from typing import Any, Dict, List

from nodeloom.domain.errors import ConflictError, UpstreamError
from nodeloom.remote.gateway import GatewayResponse, RemoteStoreGateway

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class RemoteRepository:
    """Shared request/response plumbing for repositories backed by the remote store.

    Each helper calls the gateway, checks the status code the operation
    expects and decodes the JSON body into a list of rows.
    """

    #: Singular name used in error messages, e.g. "workspace".
    entity = "record"

    def __init__(self, gateway: RemoteStoreGateway) -> None:
        self._gateway = gateway

    def _insert(self, table: str, payload: Row) -> Row:
        response = self._gateway.execute("POST", table, payload)
        if response.status_code == 409:
            self._log_unexpected("insert", response)
            raise ConflictError(f"{self.entity.capitalize()} already exists")
        self._expect(response, "insert", 201)
        rows = self._decode(response, "insert")
        if not rows:
            raise UpstreamError(f"no {self.entity} was inserted", response.status_code, response.text)
        return rows[0]

    def _select(self, path: str) -> List[Row]:
        response = self._gateway.execute("GET", path)
        self._expect(response, "fetch", 200)
        return self._decode(response, "fetch")

    def _patch(self, path: str, fields: Row) -> List[Row]:
        response = self._gateway.execute("PATCH", path, fields)
        self._expect(response, "update", 200)
        return self._decode(response, "update")

    def _delete(self, path: str) -> List[Row]:
        """Delete matching rows and return the ones the store echoed back.

        A 204 carries no body, so it yields an empty list.
        """
        response = self._gateway.execute("DELETE", path)
        self._expect(response, "delete", 200, 204)
        return self._decode(response, "delete")

    def _expect(self, response: GatewayResponse, action: str, *codes: int) -> None:
        if response.status_code not in codes:
            self._log_unexpected(action, response)
            raise UpstreamError(
                f"Failed to {action} {self.entity}",
                status_code=response.status_code,
                body=response.text,
            )

    def _decode(self, response: GatewayResponse, action: str) -> List[Row]:
        if not response.content:
            return []
        try:
            decoded = json.loads(response.content)
        except ValueError as exc:
            raise UpstreamError(
                f"Failed to {action} {self.entity}: undecodable response",
                status_code=response.status_code,
                body=response.text,
            ) from exc
        if isinstance(decoded, dict):
            return [decoded]
        if not isinstance(decoded, list):
            raise UpstreamError(
                f"Failed to {action} {self.entity}: unexpected response shape",
                status_code=response.status_code,
                body=response.text,
            )
        return decoded

    def _log_unexpected(self, action: str, response: GatewayResponse) -> None:
        logger.warning(
            f"Remote store returned status {response.status_code} on {self.entity} {action}: {response.text}"
        )
