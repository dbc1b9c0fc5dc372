# MIT License
# Copyright (c) 2025 Hashborn

from typing import ClassVar, Iterable, Optional, Sequence, Type
from pydantic import BaseModel
from icq_protocol.config.params import ReconstructionConfig
from icq_protocol.types.common import QueryType
from icq_protocol.types.storage import StorageEntry


class KVReconstruct:
    """
    Rebuilds one typed result from a batch of raw KV entries.

    Subclasses implement reconstruct() as a pure function of the entries: it
    returns a complete result or raises a ReconstructError, never a partially
    filled one.
    """

    query_type: ClassVar[QueryType]
    result_type: ClassVar[Type[BaseModel]]

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> BaseModel:
        raise NotImplementedError


def find_entry(entries: Iterable[StorageEntry], key: bytes) -> Optional[StorageEntry]:
    """First entry stored under exactly this key."""
    for entry in entries:
        if entry.key == key:
            return entry
    return None
