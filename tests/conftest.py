import pytest

# 2023-11-14T22:13:20Z
NOW = 1_700_000_000_000


@pytest.fixture
def now() -> int:
    return NOW


@pytest.fixture
def clock():
    """A clock frozen at NOW that counts how often it is read."""

    def read() -> int:
        read.calls += 1
        return NOW

    read.calls = 0
    return read
