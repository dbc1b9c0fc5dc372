from pydantic import BaseModel, ConfigDict

class StorageEntry(BaseModel):
    """One raw KV record as delivered by the remote chain."""
    model_config = ConfigDict(frozen=True)

    storage_prefix: str = ""    # Store the entry came from (e.g. "staking"), may be empty
    key: bytes = b""
    value: bytes = b""
