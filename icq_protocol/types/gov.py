from pydantic import BaseModel, Field
from typing import List, Optional
from .bank import Coin

class TallyResult(BaseModel):
    # Vote tallies are plain integers as text and kept verbatim
    yes: str
    no: str
    abstain: str
    no_with_veto: str

class Proposal(BaseModel):
    proposal_id: int
    proposal_type: Optional[str] = None      # type_url of the proposal content
    total_deposit: List[Coin] = Field(default_factory=list)
    status: int = 0

    # Unix seconds
    submit_time: Optional[int] = None
    deposit_end_time: Optional[int] = None
    voting_start_time: Optional[int] = None
    voting_end_time: Optional[int] = None

    final_tally_result: Optional[TallyResult] = None

class GovernmentProposals(BaseModel):
    proposals: List[Proposal] = Field(default_factory=list)
