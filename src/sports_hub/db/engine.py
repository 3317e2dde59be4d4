from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from sports_hub.db.base import Base


@dataclass(frozen=True)
class DatabaseConfig:
    database_url: str
    echo: bool = False


def create_db_engine(cfg: DatabaseConfig) -> Engine:
    if cfg.database_url.endswith(":memory:"):
        # One shared connection, otherwise each checkout sees an empty database.
        return create_engine(
            cfg.database_url,
            echo=cfg.echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(cfg.database_url, echo=cfg.echo, pool_pre_ping=True)


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


def open_storage(cfg: DatabaseConfig) -> Session:
    """Open a session on the local key-value database, creating the schema if needed."""

    import sports_hub.db.models  # noqa: F401

    engine = create_db_engine(cfg)
    Base.metadata.create_all(engine)
    return create_session_factory(engine)()
