from sports_hub.db.base import Base
from sports_hub.db.engine import (
    DatabaseConfig,
    create_db_engine,
    create_session_factory,
    open_storage,
)

__all__ = [
    "Base",
    "DatabaseConfig",
    "create_db_engine",
    "create_session_factory",
    "open_storage",
]
