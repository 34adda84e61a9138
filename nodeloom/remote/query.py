"""Helpers for the remote store's REST filter syntax.

Filters look like ``workspaces?id=eq.<uuid>``; disjunctions are written as
``users?or=(username.eq."alice",email.eq."alice")``.

Top-level values only need percent-encoding, since the query string is split
on ``&`` before it is decoded. Inside ``or=(...)`` the store decodes first and
then parses ``,``, ``(`` and ``)``, so values there are also wrapped in double
quotes with ``"`` and ``\\`` backslash-escaped.
"""
from __future__ import annotations

from urllib.parse import quote


def _encode(value: object) -> str:
    return quote(str(value), safe="@")


def _quote_literal(value: object) -> str:
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def eq(column: str, value: object) -> str:
    """``column=eq.value``: a top-level equality filter."""
    return f"{column}=eq.{_encode(value)}"


def cond(column: str, value: object) -> str:
    """``column.eq."value"``: an equality condition for use inside ``or_``."""
    return f"{column}.eq.{_encode(_quote_literal(value))}"


def or_(*conditions: str) -> str:
    return f"or=({','.join(conditions)})"


def resource(name: str, *filters: str) -> str:
    """Join a table name and its filters into a resource path."""
    if not filters:
        return name
    return f"{name}?{'&'.join(filters)}"
