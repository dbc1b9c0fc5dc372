# MIT License
# Copyright (c) 2025 Hashborn

from typing import Optional, Sequence
from icq_protocol.config.params import ReconstructionConfig
from icq_protocol.proto import cosmos
from icq_protocol.types.bank import Coin, FeePool
from icq_protocol.types.common import MissingEntry, QueryType
from icq_protocol.types.storage import StorageEntry
from ..decoders import decode_message, floor_atomics
from ..keys import create_fee_pool_key
from .base import KVReconstruct, find_entry


class FeePoolReconstructor(KVReconstruct):
    query_type = QueryType.FEE_POOL
    result_type = FeePool

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> FeePool:
        entry = find_entry(entries, create_fee_pool_key())
        if entry is None:
            raise MissingEntry("FeePool")

        fee_pool = decode_message(cosmos.FeePool, entry.value, "FeePool")
        # DecCoin amounts are 18-place fixed point; keep whole units only
        coins = [
            Coin(denom=dec_coin.denom, amount=floor_atomics(dec_coin.amount, "DecCoin"))
            for dec_coin in fee_pool.community_pool
        ]
        return FeePool(coins=coins)
