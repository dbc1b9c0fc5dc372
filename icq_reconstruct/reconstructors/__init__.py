# MIT License
# Copyright (c) 2025 Hashborn

"""
KV reconstructors, one per query result type.
"""

from .bank import BalancesReconstructor, TotalSupplyReconstructor
from .base import KVReconstruct
from .distribution import FeePoolReconstructor
from .gov import GovernmentProposalsReconstructor
from .staking import DelegationsReconstructor, StakingValidatorsReconstructor

__all__ = [
    "KVReconstruct",
    "BalancesReconstructor",
    "TotalSupplyReconstructor",
    "FeePoolReconstructor",
    "StakingValidatorsReconstructor",
    "DelegationsReconstructor",
    "GovernmentProposalsReconstructor",
]
