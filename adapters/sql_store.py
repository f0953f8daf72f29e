"""SQL-backed workbook (``sql`` store backend).

Each sheet is a row in ``workbook_sheet``; each sheet row is a row in
``workbook_row`` holding its cells as a JSON array. Datetimes are stored as
ISO-8601 strings.
"""

from __future__ import annotations

import enum
import json
import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Iterator, List, Optional, Sequence

from sqlalchemy import (
    JSON,
    TIMESTAMP,
    Column,
    ForeignKey,
    Integer,
    Text,
    UniqueConstraint,
    create_engine,
    func,
)
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger("barbook.sql_store")

Base = declarative_base()


class SheetRecord(Base):
    """Named sheet"""

    __tablename__ = "workbook_sheet"

    sheet_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False, unique=True, index=True)
    created_at = Column(TIMESTAMP(timezone=True), server_default=func.now())

    def __repr__(self):
        return f"<SheetRecord(id={self.sheet_id}, name='{self.name}')>"


class SheetRowRecord(Base):
    """One row of a sheet; position 0 is the header row"""

    __tablename__ = "workbook_row"

    row_id = Column(Integer, primary_key=True, autoincrement=True)
    sheet_id = Column(
        Integer,
        ForeignKey("workbook_sheet.sheet_id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    position = Column(Integer, nullable=False)
    cells = Column(JSON, nullable=False)

    __table_args__ = (UniqueConstraint("sheet_id", "position", name="uq_sheet_position"),)


def _encode_cell(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    raise TypeError(f"Cell value of type {type(value).__name__} is not serializable")


def _json_serializer(obj: Any) -> str:
    return json.dumps(obj, default=_encode_cell)


class SqlSheet:
    """Sheet handle backed by workbook_row rows"""

    def __init__(self, workbook: "SqlWorkbook", sheet_id: int, name: str):
        self.workbook = workbook
        self.sheet_id = sheet_id
        self.name = name

    def _rows(self, session: Session):
        return (
            session.query(SheetRowRecord)
            .filter(SheetRowRecord.sheet_id == self.sheet_id)
            .order_by(SheetRowRecord.position)
        )

    def read_all(self) -> List[List[Any]]:
        with self.workbook.session() as session:
            return [list(row.cells) for row in self._rows(session).all()]

    def append_row(self, values: Sequence[Any]) -> None:
        with self.workbook.session() as session:
            last = (
                session.query(func.max(SheetRowRecord.position))
                .filter(SheetRowRecord.sheet_id == self.sheet_id)
                .scalar()
            )
            position = 0 if last is None else last + 1
            # Round-trip through the serializer so stored cells are plain JSON
            cells = json.loads(_json_serializer(list(values)))
            session.add(SheetRowRecord(sheet_id=self.sheet_id, position=position, cells=cells))

    def set_cell_value(self, row: int, col: int, value: Any) -> None:
        with self.workbook.session() as session:
            record = (
                self._rows(session).filter(SheetRowRecord.position == row).first()
            )
            if record is None:
                raise IndexError(f"Row {row} out of range for sheet {self.name}")
            cells = list(record.cells)
            if col >= len(cells):
                cells.extend([""] * (col + 1 - len(cells)))
            cells[col] = json.loads(_json_serializer(value))
            # Reassign so the JSON column is flagged dirty
            record.cells = cells

    def clear(self) -> None:
        with self.workbook.session() as session:
            session.query(SheetRowRecord).filter(
                SheetRowRecord.sheet_id == self.sheet_id
            ).delete(synchronize_session=False)


class SqlWorkbook:
    """Workbook persisted through SQLAlchemy"""

    def __init__(self, url: str = None, echo: bool = False, engine: Engine = None):
        if engine is None:
            engine = create_engine(url, echo=echo, future=True, json_serializer=_json_serializer)
        self.engine = engine
        self.SessionLocal = sessionmaker(bind=engine, future=True, expire_on_commit=False)
        Base.metadata.create_all(bind=engine)
        logger.info("Workbook tables ensured on %s", engine.url)

    @contextmanager
    def session(self) -> Iterator[Session]:
        session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_sheet(self, name: str) -> Optional[SqlSheet]:
        with self.session() as session:
            record = session.query(SheetRecord).filter(SheetRecord.name == name).first()
            if record is None:
                return None
            return SqlSheet(self, record.sheet_id, record.name)

    def insert_sheet(self, name: str) -> SqlSheet:
        with self.session() as session:
            record = SheetRecord(name=name)
            session.add(record)
            session.flush()
            sheet_id = record.sheet_id
        logger.info("Created sheet %s", name)
        return SqlSheet(self, sheet_id, name)

    def sheet_names(self) -> List[str]:
        with self.session() as session:
            return [record.name for record in session.query(SheetRecord).order_by(SheetRecord.sheet_id)]

    def dispose(self) -> None:
        self.engine.dispose()
