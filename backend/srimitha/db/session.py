from __future__ import annotations

from collections.abc import Generator

from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from srimitha import models  # noqa: F401  (registers tables on SQLModel.metadata)
from srimitha.core.config import settings
from srimitha.core.logging import get_logger

logger = get_logger(__name__)


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs: dict[str, object] = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url in {"sqlite://", "sqlite:///"}:
            # One shared connection, otherwise every checkout sees an empty database.
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)
    return create_engine(database_url, echo=echo, pool_pre_ping=True)


engine = build_engine(settings.database_url, echo=settings.db_echo)


def init_db(bind: Engine | None = None) -> None:
    target = bind or engine
    SQLModel.metadata.create_all(target)
    logger.info("db.init.create_all url=%s", target.url.render_as_string(hide_password=True))


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session
