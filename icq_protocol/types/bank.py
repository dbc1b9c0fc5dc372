from pydantic import BaseModel, Field
from typing import List
from ..config.params import MAX_UINT128

class Coin(BaseModel):
    denom: str
    amount: int = Field(ge=0, le=MAX_UINT128)    # Integer units (uint128)

class Balances(BaseModel):
    coins: List[Coin] = Field(default_factory=list)

class TotalSupply(BaseModel):
    coins: List[Coin] = Field(default_factory=list)

class FeePool(BaseModel):
    """Community pool, floored to integer units."""
    coins: List[Coin] = Field(default_factory=list)
