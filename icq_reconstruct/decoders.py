# MIT License
# Copyright (c) 2025 Hashborn

"""
Value decoders for remote chain KV entries.

Numeric fields arrive as text. Integers are plain digit strings, fixed point
decimals are digit strings holding value * 10^18. Everything here is exact:
no float ever touches an amount.
"""

import json
import re
from decimal import Decimal
from typing import Optional, Type, TypeVar
from google.protobuf.message import DecodeError, Message
from icq_protocol.config.params import DECIMAL_PLACES, MAX_UINT128, MAX_UINT64
from icq_protocol.types.common import MalformedValue

M = TypeVar("M", bound=Message)

_DIGITS = re.compile(r"[0-9]+")
_DECIMAL = re.compile(r"([0-9]+)(?:\.([0-9]+))?")


def decode_message(message_cls: Type[M], raw: bytes, type_name: str) -> M:
    """Parses a protobuf message, mapping decode failures to MalformedValue."""
    message = message_cls()
    try:
        message.ParseFromString(bytes(raw))
    except DecodeError as e:
        raise MalformedValue(type_name, len(raw), str(e))
    return message


def decode_utf8(raw: bytes, type_name: str) -> str:
    try:
        return bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedValue(type_name, len(raw), f"not utf-8: {e}")


def parse_uint(text: str, type_name: str, max_value: int = MAX_UINT128) -> int:
    """Parses an unsigned integer digit string (no sign, spaces or separators)."""
    if not _DIGITS.fullmatch(text):
        raise MalformedValue(type_name, len(text), f"invalid unsigned integer {text!r}")
    value = int(text)
    if value > max_value:
        raise MalformedValue(type_name, len(text), f"integer {text} overflows")
    return value


def parse_uint128(text: str, type_name: str) -> int:
    return parse_uint(text, type_name, MAX_UINT128)


def decimal_from_atomics(text: str, type_name: str) -> Decimal:
    """
    Converts an 18-place fixed point digit string into a Decimal.

    "5000000000000000000" -> Decimal("5.000000000000000000")
    """
    atomics = parse_uint128(text, type_name)
    # Built from a string so no context precision applies
    return Decimal(f"{atomics}E-{DECIMAL_PLACES}")


def decimal_from_str(text: str, type_name: str) -> Decimal:
    """
    Parses a plain decimal string ("1", "0.5") with at most 18 fractional digits.
    An empty string is zero.
    """
    if text == "":
        return Decimal(0)

    match = _DECIMAL.fullmatch(text)
    if not match:
        raise MalformedValue(type_name, len(text), f"invalid decimal {text!r}")

    whole, fraction = match.group(1), match.group(2) or ""
    if len(fraction) > DECIMAL_PLACES:
        raise MalformedValue(type_name, len(text), f"more than {DECIMAL_PLACES} fractional digits in {text!r}")

    atomics = int(whole + fraction.ljust(DECIMAL_PLACES, "0"))
    if atomics > MAX_UINT128:
        raise MalformedValue(type_name, len(text), f"decimal {text} overflows")
    return Decimal(f"{atomics}E-{DECIMAL_PLACES}")


def floor_atomics(text: str, type_name: str) -> int:
    """Integer units of an 18-place fixed point digit string, remainder discarded."""
    return parse_uint128(text, type_name) // 10**DECIMAL_PLACES


def timestamp_seconds(message: Message, field: str) -> Optional[int]:
    """
    Seconds of an optional Timestamp field as unsigned 64-bit; nanos are dropped.

    Negative seconds (dates before 1970, e.g. the zero time 0001-01-01) wrap
    around the way the remote side's u64 cast does.
    """
    if not message.HasField(field):
        return None
    return getattr(message, field).seconds & MAX_UINT64


def to_uint64(value: int) -> int:
    """Two's complement reinterpretation of an int64 field."""
    return value & MAX_UINT64


def decode_bond_denom(raw: bytes) -> str:
    """The params store keeps the bond denom as a JSON string, e.g. b'"stake"'."""
    if len(raw) == 0:
        return ""
    try:
        denom = json.loads(decode_utf8(raw, "BondDenom"))
    except json.JSONDecodeError as e:
        raise MalformedValue("BondDenom", len(raw), str(e))
    if not isinstance(denom, str):
        raise MalformedValue("BondDenom", len(raw), "expected a JSON string")
    return denom
