from notekeeper.db.models import KeyValueEntry

__all__ = ["KeyValueEntry"]
