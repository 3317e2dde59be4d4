from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from sqlalchemy.orm import Session

from sports_hub.core.config import settings
from sports_hub.core.logging import configure_logging
from sports_hub.db import DatabaseConfig, open_storage
from sports_hub.session import HubSession, build_session

T = TypeVar("T")


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Context-managed DB session for CLI commands.
    Ensures proper close and rolls back on exception.
    """
    configure_logging(settings.log_level)
    session = open_storage(
        DatabaseConfig(database_url=settings.database_url, echo=settings.db_echo)
    )
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def run_with_hub(db: Session, fn: Callable[[HubSession], Awaitable[T]]) -> T:
    """Build a hub inside a fresh event loop, run `fn`, close HTTP clients."""

    async def runner() -> T:
        hub = build_session(db, settings)
        try:
            return await fn(hub)
        finally:
            await hub.aclose()

    return asyncio.run(runner())
