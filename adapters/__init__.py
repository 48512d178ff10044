"""
Adapters package - External storage connections.
Key-value storage backing demo mode.
"""

from adapters.local_storage import KeyValueStorage, InMemoryStorage, JsonFileStorage

__all__ = [
    "KeyValueStorage",
    "InMemoryStorage",
    "JsonFileStorage",
]
