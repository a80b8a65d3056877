"""Persistence of Sample entities through SQLAlchemy."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

from sqlalchemy import String, create_engine, delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from .entity import Sample
from .transaction import con_with_tx, connection_engine
from .value import SampleID, SampleName, sample_ids_to_strings


class _Base(DeclarativeBase):
    pass


class SampleRecord(_Base):
    """Table row holding one sample."""

    __tablename__ = "sample_gorms"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    name: Mapped[str] = mapped_column(String)


def spanner_dsn(gcp_project_id: str, spanner_instance_id: str, spanner_database_id: str) -> str:
    """Build the Spanner database path for a project, instance and database."""
    return (
        f"projects/{gcp_project_id}/instances/{spanner_instance_id}"
        f"/databases/{spanner_database_id}"
    )


def setup(url: str) -> Engine:
    """Open the database at url and create the tables the repositories need."""
    engine = create_engine(url)
    try:
        _Base.metadata.create_all(engine)
    except Exception:
        engine.dispose()
        raise
    return engine


class SampleRepository:
    """Repository for the Sample aggregate."""

    def __init__(self, con: Engine | None) -> None:
        if con is None:
            raise ValueError("con is None")
        self.con = con

    @contextmanager
    def _bound(self, tx: Any) -> Iterator[Any]:
        bind = con_with_tx(self.con, tx)
        if isinstance(bind, Engine):
            with bind.begin() as conn:
                yield conn
        else:
            yield bind

    def save(self, sample: Sample | None, tx: Any = None) -> None:
        """Insert the sample, or update it if its id is already stored."""
        if sample is None:
            raise ValueError("sample is None")
        record = _to_record(sample)
        table = SampleRecord.__table__
        with self._bound(tx) as conn:
            found = conn.execute(
                select(table.c.id).where(table.c.id == record.id)
            ).first()
            if found is None:
                conn.execute(insert(table).values(id=record.id, name=record.name))
            else:
                conn.execute(
                    update(table).where(table.c.id == record.id).values(name=record.name)
                )

    def find_by_ids(self, ids: Sequence[SampleID], tx: Any = None) -> list[Sample]:
        """Return the stored samples whose ids are given; duplicates collapse."""
        if len(ids) == 0:
            raise ValueError("ids is empty")
        table = SampleRecord.__table__
        with self._bound(tx) as conn:
            rows = conn.execute(
                select(table.c.id, table.c.name).where(
                    table.c.id.in_(sample_ids_to_strings(ids))
                )
            ).all()
        return [_row_to_entity(row.id, row.name) for row in rows]

    def find_all(self, tx: Any = None) -> list[Sample]:
        """Return every stored sample."""
        table = SampleRecord.__table__
        with self._bound(tx) as conn:
            rows = conn.execute(select(table.c.id, table.c.name)).all()
        return [_row_to_entity(row.id, row.name) for row in rows]

    def delete(self, sample: Sample | None, tx: Any = None) -> None:
        """Remove the stored row for the sample."""
        if sample is None:
            raise ValueError("sample is None")
        table = SampleRecord.__table__
        with self._bound(tx) as conn:
            conn.execute(delete(table).where(table.c.id == str(sample.id)))


def create_sample_repository(connection: Any) -> SampleRepository:
    """Create a repository over the engine held by a connection."""
    return SampleRepository(connection_engine(connection))


def _to_record(sample: Sample) -> SampleRecord:
    return SampleRecord(id=str(sample.id), name=str(sample.name))


def _row_to_entity(record_id: str, record_name: str) -> Sample:
    return Sample(SampleID(record_id), SampleName(record_name))