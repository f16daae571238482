"""
Noteful API — Application Package
=================================

What: REST API for notes organized into folders.
Who:  Imported by uvicorn (noteful.main:app), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP status codes, headers, 404/400
    ├─────────────────────────────────────┤
    │        Services (Stores)            │  ← CRUD queries per table
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never build SQL; stores never know about HTTP.
"""

__version__ = "1.0.0"
