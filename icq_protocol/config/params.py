# MIT License
# Copyright (c) 2025 Hashborn

from typing import Optional
from ..types.common import DelegationPairing

# Remote chain (Cosmos SDK v0.45) store layout
SUPPLY_PREFIX = 0x00            # x/bank total supply: 0x00 | denom
BALANCES_PREFIX = 0x02          # x/bank balances: 0x02 | lp(addr) | denom
VALIDATORS_KEY = 0x21           # x/staking validators: 0x21 | lp(operator)
DELEGATION_KEY = 0x31           # x/staking delegations: 0x31 | lp(delegator) | lp(validator)
FEE_POOL_KEY = 0x00             # x/distribution fee pool singleton
PROPOSALS_KEY_PREFIX = 0x00     # x/gov proposals: 0x00 | uint64_be(id)

MAX_ADDR_LEN = 255
DECIMAL_PLACES = 18
DECIMAL_FRACTIONAL = 10**DECIMAL_PLACES
MAX_UINT128 = 2**128 - 1
MAX_UINT64 = 2**64 - 1

# Store names (KV query paths)
BANK_STORE_KEY = "bank"
DISTRIBUTION_STORE_KEY = "distribution"
STAKING_STORE_KEY = "staking"
GOV_STORE_KEY = "gov"
PARAMS_STORE_KEY = "params"

PARAMS_STORE_DELIMITER = "/"
KEY_BOND_DENOM = "BondDenom"

class ReconstructionConfig:
    def __init__(self,
                 delegation_pairing: DelegationPairing = DelegationPairing.BY_KEY,
                 # Optional bech32 prefix checks (None = accept any prefix)
                 account_prefix: Optional[str] = None,
                 validator_prefix: Optional[str] = None):
        self.delegation_pairing = DelegationPairing(delegation_pairing)
        self.account_prefix = account_prefix
        self.validator_prefix = validator_prefix

    def __repr__(self) -> str:
        return (f"ReconstructionConfig(delegation_pairing={self.delegation_pairing.value}, "
                f"account_prefix={self.account_prefix}, validator_prefix={self.validator_prefix})")

DEFAULT_CONFIG = ReconstructionConfig()
