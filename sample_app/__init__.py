"""Sample value objects and entity, with a SQLAlchemy repository and transaction helpers."""

__version__ = "0.1.0"
__all__ = ["value", "entity", "transaction", "repository"]