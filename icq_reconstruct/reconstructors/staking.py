# MIT License
# Copyright (c) 2025 Hashborn

from typing import Dict, List, Optional, Sequence
from icq_protocol.config.params import (
    DEFAULT_CONFIG, DELEGATION_KEY, KEY_BOND_DENOM, MAX_UINT128, STAKING_STORE_KEY,
    VALIDATORS_KEY, ReconstructionConfig,
)
from icq_protocol.crypto.addresses import decode_address
from icq_protocol.proto import cosmos
from icq_protocol.types.bank import Coin
from icq_protocol.types.common import DelegationPairing, InvalidResultFormat, QueryType
from icq_protocol.types.staking import DelegationRecord, Delegations, StakingValidators, Validator
from icq_protocol.types.storage import StorageEntry
from ..decoders import (
    decimal_from_atomics, decimal_from_str, decode_bond_denom, decode_message,
    parse_uint128, timestamp_seconds, to_uint64,
)
from ..keys import create_params_store_key, create_validator_key, parse_delegation_key
from .base import KVReconstruct, find_entry


def validator_from_proto(validator) -> Validator:
    """Maps a staking Validator message field by field; absent sub-messages stay None."""
    description = validator.description if validator.HasField("description") else None
    commission = validator.commission if validator.HasField("commission") else None
    rates = None
    if commission is not None and commission.HasField("commission_rates"):
        rates = commission.commission_rates

    return Validator(
        operator_address=validator.operator_address,
        status=validator.status,
        tokens=validator.tokens,
        delegator_shares=validator.delegator_shares,
        jailed=validator.jailed,
        moniker=description.moniker if description is not None else None,
        identity=description.identity if description is not None else None,
        website=description.website if description is not None else None,
        security_contact=description.security_contact if description is not None else None,
        details=description.details if description is not None else None,
        unbonding_height=to_uint64(validator.unbonding_height),
        unbonding_time=timestamp_seconds(validator, "unbonding_time"),
        rate=decimal_from_atomics(rates.rate, "CommissionRates") if rates is not None else None,
        max_rate=decimal_from_atomics(rates.max_rate, "CommissionRates") if rates is not None else None,
        max_change_rate=decimal_from_atomics(rates.max_change_rate, "CommissionRates") if rates is not None else None,
        update_time=timestamp_seconds(commission, "update_time") if commission is not None else None,
        # min_self_delegation is an integer amount, not fixed point; "" means unset
        min_self_delegation=decimal_from_str(validator.min_self_delegation, "Validator"),
    )


class StakingValidatorsReconstructor(KVReconstruct):
    query_type = QueryType.STAKING_VALIDATORS
    result_type = StakingValidators

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> StakingValidators:
        validators = []
        for entry in entries:
            validator = decode_message(cosmos.Validator, entry.value, "Validator")
            validators.append(validator_from_proto(validator))
        return StakingValidators(validators=validators)


def delegated_amount(shares: str, tokens: str, delegator_shares: str) -> int:
    """
    Tokens backing a delegation: shares * validator.tokens / validator.delegator_shares.

    shares and delegator_shares are both 18-place fixed point, so the scale
    cancels and the exact integer quotient is the truncated token amount.
    """
    shares_atomics = parse_uint128(shares, "Delegation")
    tokens_amount = parse_uint128(tokens, "Validator")
    total_shares_atomics = parse_uint128(delegator_shares, "Validator")
    if total_shares_atomics == 0:
        raise InvalidResultFormat("validator has no delegator shares")
    amount = shares_atomics * tokens_amount // total_shares_atomics
    if amount > MAX_UINT128:
        raise InvalidResultFormat(f"delegated amount {amount} overflows uint128")
    return amount


class DelegationsReconstructor(KVReconstruct):
    """
    Delegations of one delegator with their token amounts.

    A delegation stores shares only; the amount needs the validator's
    tokens/delegator_shares ratio and the chain's bond denom, each delivered
    as a separate entry:

        staking/BondDenom               -> JSON string denom
        0x31 | lp(delegator) | lp(val)  -> Delegation
        0x21 | lp(val)                  -> Validator

    Validators are matched by re-deriving their key from the delegation's
    validator address (DelegationPairing.BY_KEY), or by encounter order
    (DelegationPairing.POSITIONAL), which relies on the batch interleaving
    each delegation with its validator.
    """

    query_type = QueryType.DELEGATIONS
    result_type = Delegations

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> Delegations:
        config = config or DEFAULT_CONFIG

        denom_entry = find_entry(entries, create_params_store_key(STAKING_STORE_KEY, KEY_BOND_DENOM))
        denom = decode_bond_denom(denom_entry.value) if denom_entry is not None else ""
        if not denom:
            raise InvalidResultFormat("denom is empty")

        delegation_entries: List[StorageEntry] = []
        validator_entries: List[StorageEntry] = []
        for entry in entries:
            if entry is denom_entry or len(entry.key) == 0:
                continue
            if entry.key[0] == DELEGATION_KEY:
                parse_delegation_key(entry.key)
                delegation_entries.append(entry)
            elif entry.key[0] == VALIDATORS_KEY:
                validator_entries.append(entry)

        if config.delegation_pairing == DelegationPairing.POSITIONAL:
            pairs = cls._pair_by_position(delegation_entries, validator_entries)
        else:
            pairs = cls._pair_by_key(delegation_entries, validator_entries)

        delegations = []
        for delegation, validator_entry in pairs:
            if validator_entry is None:
                raise InvalidResultFormat("validator is empty")
            if config.account_prefix:
                decode_address(delegation.delegator_address, config.account_prefix)
            if config.validator_prefix:
                decode_address(delegation.validator_address, config.validator_prefix)
            validator = decode_message(cosmos.Validator, validator_entry.value, "Validator")
            amount = delegated_amount(delegation.shares, validator.tokens, validator.delegator_shares)
            delegations.append(DelegationRecord(
                delegator=delegation.delegator_address,
                validator=delegation.validator_address,
                amount=Coin(denom=denom, amount=amount),
            ))
        return Delegations(delegations=delegations)

    @staticmethod
    def _pair_by_position(delegation_entries: List[StorageEntry],
                          validator_entries: List[StorageEntry]) -> list:
        pairs = []
        for i, entry in enumerate(delegation_entries):
            # An empty value means the delegation does not exist on the remote chain
            if len(entry.value) == 0:
                continue
            delegation = decode_message(cosmos.Delegation, entry.value, "Delegation")
            validator_entry = validator_entries[i] if i < len(validator_entries) else None
            pairs.append((delegation, validator_entry))
        return pairs

    @staticmethod
    def _pair_by_key(delegation_entries: List[StorageEntry],
                     validator_entries: List[StorageEntry]) -> list:
        by_key: Dict[bytes, StorageEntry] = {}
        for entry in validator_entries:
            by_key.setdefault(entry.key, entry)

        pairs = []
        for entry in delegation_entries:
            if len(entry.value) == 0:
                continue
            delegation = decode_message(cosmos.Delegation, entry.value, "Delegation")
            validator_addr = decode_address(delegation.validator_address)
            pairs.append((delegation, by_key.get(create_validator_key(validator_addr))))
        return pairs
