import pytest
from icq_protocol.crypto.addresses import (
    decode_address, decode_address_with_prefix, encode_address, is_valid_address, length_prefix,
)
from icq_protocol.types.common import AddressFormatError, AddressTooLong


def test_decode_roundtrip():
    raw = bytes(range(20))
    addr = encode_address("cosmos", raw)
    assert addr.startswith("cosmos1")
    assert decode_address(addr) == raw
    assert decode_address_with_prefix(addr) == ("cosmos", raw)


def test_decode_is_deterministic():
    addr = encode_address("osmo", b"\x42" * 32)
    assert length_prefix(decode_address(addr)) == length_prefix(decode_address(addr))


def test_decode_real_chain_address():
    raw = decode_address("cosmosvaloper15fqjpj90ruhj57q3l6a5hda0rt77g6mcek2mtq")
    assert len(raw) == 20


def test_decode_bad_checksum():
    addr = encode_address("cosmos", bytes(range(20)))
    tampered = addr[:-1] + ("q" if addr[-1] != "q" else "p")
    with pytest.raises(AddressFormatError):
        decode_address(tampered)


@pytest.mark.parametrize("addr", [
    "",
    "cosmos",
    "cosmos1",
    "cosmos1bio",                      # 'b', 'i', 'o' are outside the charset
    "Cosmos1qqqsyqcyq5rqwzqfpg9scrgwpugpzysnkgg7wm",  # mixed case
])
def test_decode_malformed(addr):
    with pytest.raises(AddressFormatError):
        decode_address(addr)


def test_expected_prefix():
    addr = encode_address("osmo", bytes(range(20)))
    assert decode_address(addr, expected_prefix="osmo") == bytes(range(20))
    with pytest.raises(AddressFormatError):
        decode_address(addr, expected_prefix="cosmos")
    assert is_valid_address(addr, "osmo")
    assert not is_valid_address(addr, "cosmos")
    assert not is_valid_address("not-an-address")


def test_length_prefix():
    assert length_prefix(b"") == b""
    assert length_prefix(b"\x01\x02") == b"\x02\x01\x02"

    data = bytes(range(20))
    assert length_prefix(data) == bytes([20]) + data


def test_length_prefix_bounds():
    assert length_prefix(b"\xaa" * 255)[0] == 255

    with pytest.raises(AddressTooLong) as exc:
        length_prefix(b"\xaa" * 256)
    assert exc.value.max_len == 255
    assert exc.value.actual == 256
