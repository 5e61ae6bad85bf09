"""CRUD module scaffolding for FastAPI + SQLAlchemy backends."""

__version__ = "0.1.0"
