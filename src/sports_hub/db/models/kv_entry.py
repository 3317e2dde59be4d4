from __future__ import annotations

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from sports_hub.db.base import Base, TimestampMixin


class KeyValueEntry(TimestampMixin, Base):
    """Durable local key-value medium shared by cache, quota and preferences."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(200), primary_key=True)
    # Stored verbatim; callers own the encoding (JSON for cache entries).
    value: Mapped[str] = mapped_column(Text, nullable=False)
