from enum import Enum
from typing import Optional

class QueryType(str, Enum):
    # x/bank
    BALANCES = "x/bank/GetBalance"
    TOTAL_SUPPLY = "x/bank/TotalSupply"

    # x/distribution
    FEE_POOL = "x/distribution/FeePool"

    # x/staking
    STAKING_VALIDATORS = "x/staking/Validators"
    DELEGATIONS = "x/staking/DelegatorDelegations"

    # x/gov
    GOVERNMENT_PROPOSALS = "x/gov/Proposals"

class DelegationPairing(str, Enum):
    BY_KEY = "by-key"           # Look validators up by re-derived key
    POSITIONAL = "positional"   # Nth delegation entry <-> Nth validator entry

class ReconstructError(Exception):
    pass

class AddressFormatError(ReconstructError):
    pass

class AddressTooLong(ReconstructError):
    def __init__(self, max_len: int, actual: int):
        super().__init__(f"address length should be max {max_len} bytes, got {actual}")
        self.max_len = max_len
        self.actual = actual

class MalformedValue(ReconstructError):
    def __init__(self, type_name: str, length: int, reason: Optional[str] = None):
        message = f"failed to decode {type_name} from {length} bytes"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.type_name = type_name
        self.length = length
        self.reason = reason

class MissingEntry(ReconstructError):
    def __init__(self, type_name: str):
        super().__init__(f"no {type_name} entry found in query result")
        self.type_name = type_name

class InvalidResultFormat(ReconstructError):
    def __init__(self, reason: str):
        super().__init__(f"invalid query result format: {reason}")
        self.reason = reason

class UnsupportedQueryType(ReconstructError):
    def __init__(self, query_type: str):
        super().__init__(f"unsupported query type: {query_type}")
        self.query_type = query_type
