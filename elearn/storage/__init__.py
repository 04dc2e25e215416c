from elearn.storage.base import Storage, StorageBackend
from elearn.storage.database import DatabaseStorage
from elearn.storage.errors import UniqueViolationError
from elearn.storage.memory import MemoryStorage
from elearn.storage.seed import seed_defaults, seed_sample_data
from elearn.storage.selector import select_storage

__all__ = [
    "Storage",
    "StorageBackend",
    "DatabaseStorage",
    "MemoryStorage",
    "UniqueViolationError",
    "seed_defaults",
    "seed_sample_data",
    "select_storage",
]
