# MIT License
# Copyright (c) 2025 Hashborn

from typing import Optional, Sequence
from icq_protocol.config.params import ReconstructionConfig
from icq_protocol.proto import cosmos
from icq_protocol.types.bank import Balances, Coin, TotalSupply
from icq_protocol.types.common import QueryType
from icq_protocol.types.storage import StorageEntry
from ..decoders import decode_message, decode_utf8, parse_uint128
from ..keys import parse_balance_key, parse_total_supply_key
from .base import KVReconstruct


class BalancesReconstructor(KVReconstruct):
    """
    One coin per entry, in entry order.

    Balance values are Coin messages. When the value carries no denom it is
    taken from the key: 0x02 | lp(addr) | denom.
    """

    query_type = QueryType.BALANCES
    result_type = Balances

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> Balances:
        coins = []
        for entry in entries:
            balance = decode_message(cosmos.Coin, entry.value, "Coin")
            denom = balance.denom
            if not denom:
                _, denom = parse_balance_key(entry.key)
            coins.append(Coin(denom=denom, amount=parse_uint128(balance.amount, "Coin")))
        return Balances(coins=coins)


class TotalSupplyReconstructor(KVReconstruct):
    """Supply values are bare digit strings, the denom lives in the key: 0x00 | denom."""

    query_type = QueryType.TOTAL_SUPPLY
    result_type = TotalSupply

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> TotalSupply:
        coins = []
        for entry in entries:
            denom = parse_total_supply_key(entry.key)
            amount = parse_uint128(decode_utf8(entry.value, "Supply"), "Supply")
            coins.append(Coin(denom=denom, amount=amount))
        return TotalSupply(coins=coins)
