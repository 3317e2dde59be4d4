from sports_hub.db.models.kv_entry import KeyValueEntry

__all__ = ["KeyValueEntry"]
