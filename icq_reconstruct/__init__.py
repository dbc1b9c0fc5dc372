# MIT License
# Copyright (c) 2025 Hashborn

"""
Interchain KV query result reconstruction.

Turns proof-verified KV batches from a remote Cosmos SDK chain into typed
results (balances, supply, fee pool, validators, delegations, proposals).
"""

from .envelope import RECONSTRUCTORS, QueryResult, get_reconstructor, reconstruct

__all__ = ["RECONSTRUCTORS", "QueryResult", "get_reconstructor", "reconstruct"]
