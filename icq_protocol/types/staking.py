from decimal import Decimal
from pydantic import BaseModel, Field
from typing import List, Optional
from .bank import Coin

class Validator(BaseModel):
    operator_address: str         # Bech32 operator address (...valoper1...)
    status: int                   # BondStatus enum value
    tokens: str                   # Integer as text, kept verbatim
    delegator_shares: str         # 18-place fixed point as text, kept verbatim
    jailed: bool = False

    # Description
    moniker: Optional[str] = None
    identity: Optional[str] = None
    website: Optional[str] = None
    security_contact: Optional[str] = None
    details: Optional[str] = None

    unbonding_height: int = 0
    unbonding_time: Optional[int] = None     # Unix seconds

    # Commission
    rate: Optional[Decimal] = None
    max_rate: Optional[Decimal] = None
    max_change_rate: Optional[Decimal] = None
    update_time: Optional[int] = None        # Unix seconds

    min_self_delegation: Decimal = Decimal(0)

class StakingValidators(BaseModel):
    validators: List[Validator] = Field(default_factory=list)

class DelegationRecord(BaseModel):
    """Represents a delegation from an account to a validator on the remote chain."""
    delegator: str          # Delegator's address
    validator: str          # Validator's operator address
    amount: Coin            # Delegated tokens in the bond denomination

class Delegations(BaseModel):
    delegations: List[DelegationRecord] = Field(default_factory=list)
