import pytest

from elearn.storage.database import DatabaseStorage
from elearn.storage.memory import MemoryStorage


@pytest.fixture
def memory_storage():
    return MemoryStorage(seed=False)


@pytest.fixture
def database_storage():
    storage = DatabaseStorage.from_url("sqlite://")
    storage.create_tables()
    yield storage
    storage.engine.dispose()


@pytest.fixture(params=["memory", "database"])
def storage(request):
    """Runs a test once per backend, each starting empty."""
    return request.getfixturevalue(f"{request.param}_storage")
