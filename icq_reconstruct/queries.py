# MIT License
# Copyright (c) 2025 Hashborn

"""
KV key sets a query registration asks the remote chain for.

Each builder returns keys in the order the results are delivered, which is
the order the reconstructors expect.
"""

from typing import Iterable, List
from pydantic import BaseModel, ConfigDict
from icq_protocol.config.params import (
    BANK_STORE_KEY, DISTRIBUTION_STORE_KEY, GOV_STORE_KEY, KEY_BOND_DENOM,
    PARAMS_STORE_KEY, STAKING_STORE_KEY,
)
from icq_protocol.crypto.addresses import decode_address
from .keys import (
    create_account_denom_balance_key, create_delegation_key, create_fee_pool_key,
    create_gov_proposal_key, create_params_store_key, create_total_denom_key,
    create_validator_key,
)


class KVKey(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str       # Store name on the remote chain
    key: bytes


def balance_query_keys(addr: str, denoms: Iterable[str]) -> List[KVKey]:
    addr_bytes = decode_address(addr)
    return [
        KVKey(path=BANK_STORE_KEY, key=create_account_denom_balance_key(addr_bytes, denom))
        for denom in denoms
    ]


def total_supply_query_keys(denoms: Iterable[str]) -> List[KVKey]:
    return [KVKey(path=BANK_STORE_KEY, key=create_total_denom_key(denom)) for denom in denoms]


def fee_pool_query_keys() -> List[KVKey]:
    return [KVKey(path=DISTRIBUTION_STORE_KEY, key=create_fee_pool_key())]


def validators_query_keys(validators: Iterable[str]) -> List[KVKey]:
    return [
        KVKey(path=STAKING_STORE_KEY, key=create_validator_key(decode_address(validator)))
        for validator in validators
    ]


def proposals_query_keys(proposal_ids: Iterable[int]) -> List[KVKey]:
    return [KVKey(path=GOV_STORE_KEY, key=create_gov_proposal_key(pid)) for pid in proposal_ids]


def delegator_delegations_query_keys(delegator: str, validators: Iterable[str]) -> List[KVKey]:
    """
    Bond denom first, then each delegation followed by its validator.

    This interleaving is what positional delegation pairing depends on.
    """
    delegator_bytes = decode_address(delegator)
    keys = [KVKey(path=PARAMS_STORE_KEY, key=create_params_store_key(STAKING_STORE_KEY, KEY_BOND_DENOM))]
    for validator in validators:
        validator_bytes = decode_address(validator)
        keys.append(KVKey(path=STAKING_STORE_KEY, key=create_delegation_key(delegator_bytes, validator_bytes)))
        keys.append(KVKey(path=STAKING_STORE_KEY, key=create_validator_key(validator_bytes)))
    return keys
