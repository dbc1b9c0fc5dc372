import pytest
from icq_protocol.crypto.addresses import encode_address


@pytest.fixture
def delegator():
    return encode_address("osmo", bytes(range(20)))


@pytest.fixture
def validators():
    """Three operator addresses with distinct 20-byte payloads."""
    return [encode_address("osmovaloper", bytes([i] * 20)) for i in (7, 8, 9)]
