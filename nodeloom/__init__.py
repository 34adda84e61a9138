"""
NodeLoom API Package

Directory Structure:
├── routers/           # FastAPI route handlers
├── schemas/           # Pydantic models for API requests/responses
│   └── api_schemas.py # HTTP request/response structures
├── application/       # Services composing repository calls
├── repositories/      # Users, workspaces, nodes and edges in the remote store
├── remote/            # Gateway to the hosted REST store and its filter syntax
├── infrastructure/    # Password hashing and bearer tokens
├── domain/            # Entities, errors and events
└── config.py          # Application configuration

Persistence Clarification:
Nothing is stored locally. Every read and write is a synchronous REST call
to the remote store; workspaces are assembled from their rows in the
workspaces, nodes and edges tables.
"""
