"""Small generic helpers over a SQLModel session."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from sqlalchemy import func, insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, SQLModel, col, select

ModelT = TypeVar("ModelT", bound=SQLModel)


class InsertOutcome(str, enum.Enum):
    INSERTED = "inserted"
    ALREADY_EXISTS = "already_exists"


@dataclass(frozen=True)
class InsertResult(Generic[ModelT]):
    outcome: InsertOutcome
    row: ModelT

    @property
    def inserted(self) -> bool:
        return self.outcome is InsertOutcome.INSERTED


def create(session: Session, model: type[ModelT], **values: Any) -> ModelT:
    obj = model(**values)
    return save(session, obj)


def save(session: Session, obj: ModelT) -> ModelT:
    session.add(obj)
    session.commit()
    session.refresh(obj)
    return obj


def get_by_id(session: Session, model: type[ModelT], obj_id: Any) -> ModelT | None:
    return session.get(model, obj_id)


def get_by_field(session: Session, model: type[ModelT], field: str, value: Any) -> ModelT | None:
    statement = select(model).where(col(getattr(model, field)) == value)
    return session.exec(statement).first()


def count(session: Session, model: type[SQLModel]) -> int:
    return session.exec(select(func.count()).select_from(model)).one()


def insert_if_absent(
    session: Session,
    model: type[ModelT],
    *,
    conflict_field: str,
    values: dict[str, Any],
) -> InsertResult[ModelT]:
    """Insert a row unless one with the same unique ``conflict_field`` exists.

    Uses ``ON CONFLICT DO NOTHING`` where the dialect supports it, so concurrent
    writers race on the unique index rather than on a read.
    """
    obj = model(**values)
    row = obj.model_dump(exclude_none=True)
    table = model.__table__  # type: ignore[attr-defined]
    dialect = session.get_bind().dialect.name

    if dialect == "postgresql":
        statement = pg_insert(table).values(**row).on_conflict_do_nothing(index_elements=[conflict_field])
    elif dialect == "sqlite":
        statement = sqlite_insert(table).values(**row).on_conflict_do_nothing(index_elements=[conflict_field])
    else:
        statement = None

    if statement is not None:
        result = session.execute(statement)
        inserted = result.rowcount == 1
    elif get_by_field(session, model, conflict_field, values[conflict_field]) is None:
        session.execute(insert(table).values(**row))
        inserted = True
    else:
        inserted = False
    session.commit()

    existing = get_by_field(session, model, conflict_field, values[conflict_field])
    if existing is None:
        raise LookupError(f"{model.__name__} row for {conflict_field} vanished after insert")
    outcome = InsertOutcome.INSERTED if inserted else InsertOutcome.ALREADY_EXISTS
    return InsertResult(outcome=outcome, row=existing)
