import bech32 # type: ignore
from typing import Tuple, Optional
from ..config.params import MAX_ADDR_LEN
from ..types.common import AddressFormatError, AddressTooLong

def encode_address(prefix: str, data: bytes) -> str:
    """Creates Bech32 address from raw address bytes."""
    five_bit_r = bech32.convertbits(data, 8, 5)
    if five_bit_r is None:
        raise AddressFormatError("Error converting to bech32 words")

    return bech32.bech32_encode(prefix, five_bit_r)

def decode_address_with_prefix(addr: str) -> Tuple[str, bytes]:
    """Decodes Bech32 address to (prefix, address_bytes)."""
    hrp, data = bech32.bech32_decode(addr)
    if hrp is None or data is None:
        raise AddressFormatError(f"Invalid bech32 address: {addr!r}")

    decoded = bech32.convertbits(data, 5, 8, False)
    if decoded is None:
        raise AddressFormatError(f"Error converting from bech32 words: {addr!r}")

    return hrp, bytes(decoded)

def decode_address(addr: str, expected_prefix: Optional[str] = None) -> bytes:
    """Decodes Bech32 address to its raw bytes, optionally enforcing the prefix."""
    hrp, data = decode_address_with_prefix(addr)
    if expected_prefix and hrp != expected_prefix:
        raise AddressFormatError(f"Unexpected address prefix {hrp!r}, expected {expected_prefix!r}")
    return data

def is_valid_address(addr: str, expected_prefix: Optional[str] = None) -> bool:
    try:
        decode_address(addr, expected_prefix)
        return True
    except AddressFormatError:
        return False

def length_prefix(data: bytes) -> bytes:
    """
    Prefixes bytes with their length (one byte).
    Empty input stays empty, which is how global store keys omit the address.
    """
    if len(data) == 0:
        return b""

    if len(data) > MAX_ADDR_LEN:
        raise AddressTooLong(MAX_ADDR_LEN, len(data))

    return bytes([len(data)]) + bytes(data)
