# MIT License
# Copyright (c) 2025 Hashborn

"""
Routes a KV query result to the reconstructor for its query type.
"""

import logging
from typing import Dict, Optional, Sequence, Type, Union
from pydantic import BaseModel
from icq_protocol.types.bank import Balances, FeePool, TotalSupply
from icq_protocol.types.gov import GovernmentProposals
from icq_protocol.types.staking import Delegations, StakingValidators
from icq_protocol.config.params import DEFAULT_CONFIG, ReconstructionConfig
from icq_protocol.types.common import QueryType, ReconstructError, UnsupportedQueryType
from icq_protocol.types.storage import StorageEntry
from .reconstructors import (
    BalancesReconstructor, DelegationsReconstructor, FeePoolReconstructor,
    GovernmentProposalsReconstructor, KVReconstruct, StakingValidatorsReconstructor,
    TotalSupplyReconstructor,
)

logger = logging.getLogger(__name__)

RECONSTRUCTORS: Dict[QueryType, Type[KVReconstruct]] = {
    cls.query_type: cls
    for cls in (
        BalancesReconstructor,
        TotalSupplyReconstructor,
        FeePoolReconstructor,
        StakingValidatorsReconstructor,
        DelegationsReconstructor,
        GovernmentProposalsReconstructor,
    )
}

_missing = set(QueryType) - set(RECONSTRUCTORS)
if _missing:
    raise RuntimeError(f"No reconstructor registered for: {sorted(q.value for q in _missing)}")


class QueryResult(BaseModel):
    query_type: QueryType
    result: Union[Balances, TotalSupply, FeePool, StakingValidators, Delegations, GovernmentProposals]

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(indent=indent)


def resolve_query_type(query_type: Union[QueryType, str]) -> QueryType:
    try:
        return QueryType(query_type)
    except ValueError:
        raise UnsupportedQueryType(str(query_type))


def get_reconstructor(query_type: Union[QueryType, str]) -> Type[KVReconstruct]:
    return RECONSTRUCTORS[resolve_query_type(query_type)]


def reconstruct(query_type: Union[QueryType, str],
                entries: Sequence[StorageEntry],
                config: Optional[ReconstructionConfig] = None) -> QueryResult:
    """
    Reconstructs a typed result from a KV batch.

    Args:
        query_type: Declared query type of the batch
        entries: Raw KV entries, already proof-verified
        config: Reconstruction settings (defaults to DEFAULT_CONFIG)

    Returns:
        QueryResult wrapping the typed result

    Raises:
        ReconstructError: If the batch cannot be reconstructed
    """
    qt = resolve_query_type(query_type)
    reconstructor = RECONSTRUCTORS[qt]
    logger.debug(f"Reconstructing {qt.value} from {len(entries)} entries with {reconstructor.__name__}")

    try:
        result = reconstructor.reconstruct(entries, config or DEFAULT_CONFIG)
    except ReconstructError as e:
        logger.warning(f"Failed to reconstruct {qt.value}: {e}")
        raise

    return QueryResult(query_type=qt, result=result)
