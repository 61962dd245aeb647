"""Storage infrastructure for tasktrack.

Provides the persistence layer behind the TaskRepository port.
"""

from tasktrack.infrastructure.storage.json_storage import JsonStorage, StorageError
from tasktrack.infrastructure.storage.repositories import JsonTaskRepository
from tasktrack.infrastructure.storage.seed import seed_data

__all__ = [
    "JsonStorage",
    "StorageError",
    "JsonTaskRepository",
    "seed_data",
]
