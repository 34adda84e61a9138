"""
Test configuration and fixtures for NodeLoom API tests.
"""
import json
import re
import uuid
from datetime import datetime, timezone
from unittest.mock import Mock
from urllib.parse import unquote

import pytest
from fastapi.testclient import TestClient

from nodeloom.config import Settings
from nodeloom.main import create_app
from nodeloom.remote.gateway import GatewayResponse


class FakeRemoteStore:
    """In-memory stand-in for the remote REST store, speaking the gateway contract.

    Understands ``col=eq.value`` filters joined with ``&`` and ``or=(...)``
    disjunctions, enforces unique usernames and assigns user ids.
    """

    def __init__(self):
        self.tables = {"users": [], "workspaces": [], "nodes": [], "edges": []}
        self.calls = []
        self.closed = False

    # Gateway interface
    def execute(self, method, resource_path, body=None):
        self.calls.append((method, resource_path, body))
        if not resource_path:
            return self._respond(200, {"paths": {}})

        table, _, query = resource_path.partition("?")
        if table not in self.tables:
            return self._respond(404, {"message": f"relation {table} does not exist"})
        rows = self.tables[table]
        matches = self._matcher(query)

        if method == "GET":
            return self._respond(200, [row for row in rows if matches(row)])
        if method == "POST":
            return self._insert(table, dict(body))
        if method == "PATCH":
            updated = []
            for row in rows:
                if matches(row):
                    row.update(body)
                    updated.append(row)
            return self._respond(200, updated)
        if method == "DELETE":
            deleted = [row for row in rows if matches(row)]
            self.tables[table] = [row for row in rows if not matches(row)]
            return self._respond(200, deleted)
        return self._respond(405, {"message": "method not allowed"})

    def ping(self):
        return self.execute("GET", "").status_code

    def close(self):
        self.closed = True

    # Helpers
    def _insert(self, table, row):
        if table == "users":
            if any(u["username"] == row["username"] for u in self.tables["users"]):
                return self._respond(409, {"message": "duplicate key value violates unique constraint"})
            row.setdefault("id", str(uuid.uuid4()))
            row.setdefault("email", None)
            row.setdefault("created_at", datetime.now(timezone.utc).isoformat())
        self.tables[table].append(row)
        return self._respond(201, [row])

    @staticmethod
    def _matcher(query):
        conditions = []
        for part in filter(None, query.split("&")):
            key, _, expr = part.partition("=")
            if key == "or":
                body = unquote(expr)
                if not (body.startswith("(") and body.endswith(")")):
                    raise AssertionError(f"malformed or filter: {body}")
                alternatives = []
                for alt in FakeRemoteStore._split_outside_quotes(body[1:-1]):
                    column, _, value = alt.partition(".eq.")
                    alternatives.append((column, FakeRemoteStore._literal(value)))
                conditions.append(alternatives)
            else:
                conditions.append([(key, unquote(expr[len("eq."):]))])

        def matches(row):
            return all(
                any(str(row.get(column)) == value for column, value in alternatives)
                for alternatives in conditions
            )

        return matches

    @staticmethod
    def _split_outside_quotes(text):
        """Split an ``or`` body on commas, as the store does after decoding."""
        parts, current, quoted, escaped = [], "", False, False
        for char in text:
            if escaped:
                escaped = False
            elif char == "\\" and quoted:
                escaped = True
            elif char == '"':
                quoted = not quoted
            elif char in "()" and not quoted:
                raise AssertionError(f"unexpected {char!r} in or filter: {text}")
            elif char == "," and not quoted:
                parts.append(current)
                current = ""
                continue
            current += char
        parts.append(current)
        return parts

    @staticmethod
    def _literal(value):
        if len(value) >= 2 and value[0] == value[-1] == '"':
            return re.sub(r"\\(.)", r"\1", value[1:-1])
        return value

    @staticmethod
    def _respond(status_code, payload):
        return GatewayResponse(content=json.dumps(payload).encode("utf-8"), status_code=status_code)

    def store_calls(self):
        """Calls that actually reached a table (health pings excluded)."""
        return [call for call in self.calls if call[1]]


@pytest.fixture
def test_settings():
    """Settings for testing, independent of any .env file."""
    return Settings(
        REMOTE_STORE_URL="https://store.test",
        REMOTE_STORE_KEY="test-key",
        TOKEN_SECRET="test-secret",
        MODE="test",
        _env_file=None,
    )


@pytest.fixture
def remote_store():
    return FakeRemoteStore()


@pytest.fixture
def app(test_settings, remote_store):
    return create_app(test_settings, gateway=remote_store)


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def services(app):
    return app.state.services


@pytest.fixture
def auth_headers(services):
    """Bearer header for an authenticated caller."""
    token = services.credentials.issue_token("user-1", "tester")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_workspace(client, auth_headers):
    """Create a sample workspace through the API."""
    response = client.post("/api/v1/workspaces", json={"name": "Test Workspace"}, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def mock_gateway():
    """Gateway mock; set ``execute.return_value`` per test."""
    return Mock()


@pytest.fixture
def gateway_response():
    """Build a raw gateway response from a status code and a JSON payload."""
    def build(status_code, payload=None):
        content = b"" if payload is None else json.dumps(payload).encode("utf-8")
        return GatewayResponse(content=content, status_code=status_code)
    return build
