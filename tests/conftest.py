import pytest

from backing_store import BackingStore
from main_memory import Memory
from replacement import make_policy

STORE_SIZE = 256 * 256


def store_content():
    # every page differs, and plenty of bytes are > 127 so signed values show up
    return bytes((i * 7 + i // 256) % 256 for i in range(STORE_SIZE))


def addr(page_number, offset=0):
    return (page_number << 8) | offset


@pytest.fixture
def store_bytes():
    return store_content()


@pytest.fixture
def store_path(tmp_path, store_bytes):
    path = tmp_path / "BACKING_STORE.bin"
    path.write_bytes(store_bytes)
    return path


@pytest.fixture
def store(store_path):
    bs = BackingStore(str(store_path))
    yield bs
    bs.close()


@pytest.fixture
def make_memory(store):
    def factory(frames, pra="FIFO", addresses=None):
        pages = None
        if addresses is not None:
            pages = [(address >> 8) & 0xFF for address in addresses]
        return Memory(frames, store, make_policy(pra, pages))
    return factory
