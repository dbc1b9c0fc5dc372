# MIT License
# Copyright (c) 2025 Hashborn

"""
Remote chain store keys.

Builders reproduce the Cosmos SDK v0.45 key derivation byte for byte, parsers
split a key back into its identifier fragments.
"""

import struct
from typing import Tuple
from icq_protocol.config.params import (
    SUPPLY_PREFIX, BALANCES_PREFIX, VALIDATORS_KEY, DELEGATION_KEY, FEE_POOL_KEY,
    PROPOSALS_KEY_PREFIX, PARAMS_STORE_DELIMITER, MAX_UINT64,
)
from icq_protocol.crypto.addresses import length_prefix
from icq_protocol.types.common import MalformedValue


def create_account_balances_prefix(addr: bytes) -> bytes:
    """0x02 | lp(addr)"""
    return bytes([BALANCES_PREFIX]) + length_prefix(addr)


def create_account_denom_balance_key(addr: bytes, denom: str) -> bytes:
    """0x02 | lp(addr) | denom"""
    return create_account_balances_prefix(addr) + denom.encode()


def create_total_denom_key(denom: str) -> bytes:
    """0x00 | denom"""
    return bytes([SUPPLY_PREFIX]) + denom.encode()


def create_delegations_key(delegator: bytes) -> bytes:
    """0x31 | lp(delegator)"""
    return bytes([DELEGATION_KEY]) + length_prefix(delegator)


def create_delegation_key(delegator: bytes, validator: bytes) -> bytes:
    """0x31 | lp(delegator) | lp(validator)"""
    return create_delegations_key(delegator) + length_prefix(validator)


def create_validator_key(operator: bytes) -> bytes:
    """0x21 | lp(operator)"""
    return bytes([VALIDATORS_KEY]) + length_prefix(operator)


def create_fee_pool_key() -> bytes:
    return bytes([FEE_POOL_KEY])


def create_gov_proposal_key(proposal_id: int) -> bytes:
    """0x00 | uint64_be(proposal_id)"""
    if not isinstance(proposal_id, int) or proposal_id < 0 or proposal_id > MAX_UINT64:
        raise ValueError(f"Invalid uint64 proposal id: {proposal_id}")
    return bytes([PROPOSALS_KEY_PREFIX]) + struct.pack('>Q', proposal_id)


def create_params_store_key(module: str, key: str) -> bytes:
    """module/key, as the params subspace stores it."""
    return f"{module}{PARAMS_STORE_DELIMITER}{key}".encode()


# --- Parsers ---

def split_length_prefixed(data: bytes, type_name: str = "key") -> Tuple[bytes, bytes]:
    """
    Splits one length-prefixed fragment off the front of data.

    Returns:
        (fragment, remainder)
    """
    if len(data) == 0:
        raise MalformedValue(type_name, 0, "missing length prefix")

    size = data[0]
    if len(data) < 1 + size:
        raise MalformedValue(type_name, len(data), f"length prefix {size} exceeds remaining bytes")

    return data[1:1 + size], data[1 + size:]


def _expect_prefix(key: bytes, prefix: int, type_name: str) -> bytes:
    if len(key) == 0 or key[0] != prefix:
        raise MalformedValue(type_name, len(key), f"expected key prefix 0x{prefix:02x}")
    return key[1:]


def parse_balance_key(key: bytes) -> Tuple[bytes, str]:
    """Inverse of create_account_denom_balance_key: (addr, denom)."""
    rest = _expect_prefix(key, BALANCES_PREFIX, "BalanceKey")
    addr, denom = split_length_prefixed(rest, "BalanceKey")
    try:
        return addr, denom.decode()
    except UnicodeDecodeError as e:
        raise MalformedValue("BalanceKey", len(key), f"denom is not utf-8: {e}")


def parse_total_supply_key(key: bytes) -> str:
    """Inverse of create_total_denom_key."""
    denom = _expect_prefix(key, SUPPLY_PREFIX, "SupplyKey")
    try:
        return denom.decode()
    except UnicodeDecodeError as e:
        raise MalformedValue("SupplyKey", len(key), f"denom is not utf-8: {e}")


def parse_delegation_key(key: bytes) -> Tuple[bytes, bytes]:
    """Inverse of create_delegation_key: (delegator, validator)."""
    rest = _expect_prefix(key, DELEGATION_KEY, "DelegationKey")
    delegator, rest = split_length_prefixed(rest, "DelegationKey")
    validator, rest = split_length_prefixed(rest, "DelegationKey")
    if rest:
        raise MalformedValue("DelegationKey", len(key), f"{len(rest)} trailing bytes")
    return delegator, validator
