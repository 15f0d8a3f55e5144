"""
Album Catalog Backend — Application Package Initializer
=======================================================

What: Marks the `album_catalog` directory as a Python package.
Who:  Imported by uvicorn (`album_catalog.main:app`), pytest, and `python -m album_catalog`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │        Services (Album Store)       │  ← Ordered in-memory collection
    ├─────────────────────────────────────┤
    │          Schemas (Album JSON)       │  ← Pydantic models
    └─────────────────────────────────────┘

    Routes never touch the collection directly; they receive the store
    through FastAPI's dependency injection.
"""

__version__ = "1.0.0"
