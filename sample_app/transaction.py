"""Connections and transactions over a SQLAlchemy engine."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from sqlalchemy.engine import Connection as _SAConnection
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

_T = TypeVar("_T")


class TransactionError(Exception):
    """Raised when a connection or transaction operation fails."""


class Transaction:
    """An open database transaction on its own connection."""

    def __init__(self, connection: _SAConnection) -> None:
        self.connection = connection
        self._handle = connection.begin()

    def rollback(self) -> None:
        """Roll the transaction back and release its connection."""
        try:
            self._handle.rollback()
        except SQLAlchemyError as exc:
            raise TransactionError("failed to roll back") from exc
        finally:
            self.connection.close()

    def commit(self) -> None:
        """Commit the transaction and release its connection."""
        try:
            self._handle.commit()
        except SQLAlchemyError as exc:
            raise TransactionError("failed to commit") from exc
        finally:
            self.connection.close()


class Connection:
    """A database connection able to start transactions."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine

    def begin(self) -> Transaction:
        """Start a new transaction."""
        try:
            return Transaction(self.engine.connect())
        except SQLAlchemyError as exc:
            raise TransactionError("failed to begin a transaction") from exc

    def transaction(self, func: Callable[[Transaction], _T]) -> _T:
        """Run func inside a transaction.

        The transaction is committed when func returns and rolled back
        when it raises; the failure is then raised as TransactionError.
        """
        tx = self.begin()
        try:
            result = func(tx)
        except Exception as exc:
            try:
                tx.rollback()
            except TransactionError as rollback_exc:
                raise TransactionError(
                    "transaction body failed and rollback failed"
                ) from rollback_exc
            raise TransactionError("transaction body failed; rolled back") from exc
        tx.commit()
        return result


def connection_engine(connection: Any) -> Engine | None:
    """Return the engine behind a connection, or None for no connection."""
    if connection is None:
        return None
    engine = getattr(connection, "engine", None)
    if not isinstance(engine, Engine):
        raise TransactionError("connection does not hold a SQLAlchemy engine")
    return engine


def con_with_tx(con: Any, tx: Any) -> Any:
    """Return what statements should run on: the transaction's connection, else con."""
    if tx is None:
        return con
    bind = getattr(tx, "connection", None)
    if not isinstance(bind, _SAConnection):
        raise TransactionError("transaction does not hold a SQLAlchemy connection")
    return bind