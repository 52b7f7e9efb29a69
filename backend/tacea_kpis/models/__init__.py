from tacea_kpis.models.kv import KeyValueEntry

__all__ = [
    "KeyValueEntry",
]
