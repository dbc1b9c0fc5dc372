# MIT License
# Copyright (c) 2025 Hashborn

from typing import Optional, Sequence
from icq_protocol.config.params import ReconstructionConfig
from icq_protocol.proto import cosmos
from icq_protocol.types.bank import Coin
from icq_protocol.types.common import QueryType
from icq_protocol.types.gov import GovernmentProposals, Proposal, TallyResult
from icq_protocol.types.storage import StorageEntry
from ..decoders import decode_message, parse_uint128, timestamp_seconds
from .base import KVReconstruct


def proposal_from_proto(proposal) -> Proposal:
    tally = None
    if proposal.HasField("final_tally_result"):
        result = proposal.final_tally_result
        tally = TallyResult(
            yes=result.yes,
            no=result.no,
            abstain=result.abstain,
            no_with_veto=result.no_with_veto,
        )

    return Proposal(
        proposal_id=proposal.proposal_id,
        # Only the content's type_url is kept, not the payload
        proposal_type=proposal.content.type_url if proposal.HasField("content") else None,
        # Deposits are plain integer amounts, no fixed point scaling
        total_deposit=[
            Coin(denom=coin.denom, amount=parse_uint128(coin.amount, "Coin"))
            for coin in proposal.total_deposit
        ],
        status=proposal.status,
        submit_time=timestamp_seconds(proposal, "submit_time"),
        deposit_end_time=timestamp_seconds(proposal, "deposit_end_time"),
        voting_start_time=timestamp_seconds(proposal, "voting_start_time"),
        voting_end_time=timestamp_seconds(proposal, "voting_end_time"),
        final_tally_result=tally,
    )


class GovernmentProposalsReconstructor(KVReconstruct):
    query_type = QueryType.GOVERNMENT_PROPOSALS
    result_type = GovernmentProposals

    @classmethod
    def reconstruct(cls, entries: Sequence[StorageEntry],
                    config: Optional[ReconstructionConfig] = None) -> GovernmentProposals:
        proposals = []
        for entry in entries:
            proposal = decode_message(cosmos.Proposal, entry.value, "Proposal")
            proposals.append(proposal_from_proto(proposal))
        return GovernmentProposals(proposals=proposals)
