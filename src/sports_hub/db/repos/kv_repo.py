from __future__ import annotations

from sqlalchemy.orm import Session

from sports_hub.db.models.kv_entry import KeyValueEntry
from sports_hub.db.repos.base import BaseRepository


class KeyValueRepository(BaseRepository[KeyValueEntry]):
    """String key/value access. Every mutation is committed immediately."""

    def __init__(self, session: Session) -> None:
        super().__init__(session, KeyValueEntry)

    def get_value(self, key: str) -> str | None:
        row = self.get(key)
        return None if row is None else row.value

    def set_value(self, key: str, value: str) -> None:
        row = self.get(key)
        if row is None:
            self.add(KeyValueEntry(key=key, value=value), flush=False)
        else:
            row.value = value
        self.commit()

    def delete_key(self, key: str) -> bool:
        row = self.get(key)
        if row is None:
            return False
        self.delete(row, flush=False)
        self.commit()
        return True

    def keys_with_prefix(self, prefix: str) -> list[str]:
        rows = self.all_where(KeyValueEntry.key.startswith(prefix, autoescape=True))
        return sorted(r.key for r in rows)

    def delete_prefix(self, prefix: str) -> int:
        rows = self.all_where(KeyValueEntry.key.startswith(prefix, autoescape=True))
        for row in rows:
            self.delete(row, flush=False)
        self.commit()
        return len(rows)
