"""
Reconstruction of values captured from a live Cosmos SDK v0.45 chain.
"""

from decimal import Decimal

import pytest
from icq_protocol.config.params import KEY_BOND_DENOM, STAKING_STORE_KEY, ReconstructionConfig
from icq_protocol.crypto.addresses import decode_address
from icq_protocol.types.bank import Coin
from icq_protocol.types.common import DelegationPairing, QueryType
from icq_protocol.types.gov import Proposal, TallyResult
from icq_protocol.types.staking import DelegationRecord, Validator
from icq_protocol.types.storage import StorageEntry
from icq_reconstruct import reconstruct
from icq_reconstruct.keys import (
    create_delegation_key, create_fee_pool_key, create_params_store_key, create_total_denom_key,
    create_validator_key,
)

BALANCES_HEX = "0a057374616b6512083939393939303030"
TOTAL_SUPPLY_HEX = "333030303031303938"
FEE_POOL_HEX = "0a1d0a057374616b6512143231393630303030303030303030303030303030"
STAKING_DENOM_HEX = "227374616b6522"
GOV_PROPOSAL_HEX = (
    "0801129f010a202f636f736d6f732e676f762e763162657461312e5465787450726f706f73616c127b0a11416464"
    "204e65772056616c696461746f721266546869732070726f706f73616c20726571756573747320616464696e6720"
    "61206e65772076616c696461746f7220746f20746865206e6574776f726b20746f20696d70726f76652064656365"
    "6e7472616c697a6174696f6e20616e642073656375726974792e1801220c0a01301201301a01302201302a0c08c9"
    "fdd3a20610988990d103320c08c9c3dea20610988990d1033a0d0a057374616b65120431303030420b088092b8c3"
    "98feffffff014a0b088092b8c398feffffff01"
)
STAKING_VALIDATOR_HEX = (
    "0a34636f736d6f7376616c6f706572313566716a706a39307275686a353771336c366135686461307274373767366d"
    "63656b326d747112430a1d2f636f736d6f732e63727970746f2e656432353531392e5075624b657912220a20b20c07"
    "b3eb900df72b48c24e9a2e06ff4fe73bbd255e433af8eae3b1988e698820032a09313030303030303030321b313030"
    "3030303030303030303030303030303030303030303030303a080a066d796e6f64654a00524a0a3b0a123130303030"
    "3030303030303030303030303012123230303030303030303030303030303030301a11313030303030303030303030"
    "3030303030120b089cfcd3a20610e0dc890b5a0131"
)
DELEGATOR_DELEGATIONS_HEX = (
    "0a2d636f736d6f73313566716a706a39307275686a353771336c366135686461307274373767366d63757a3777386e"
    "1234636f736d6f7376616c6f706572313566716a706a39307275686a353771336c366135686461307274373767366d"
    "63656b326d74711a1b313030303030303030303030303030303030303030303030303030"
)

DELEGATOR = "cosmos15fqjpj90ruhj57q3l6a5hda0rt77g6mcuz7w8n"
VALIDATOR = "cosmosvaloper15fqjpj90ruhj57q3l6a5hda0rt77g6mcek2mtq"

# 0001-01-01T00:00:00Z seconds as an unsigned 64-bit value
ZERO_TIME = 18446744011573954816


def test_balance():
    result = reconstruct(QueryType.BALANCES, [StorageEntry(value=bytes.fromhex(BALANCES_HEX))])
    assert result.result.coins == [Coin(denom="stake", amount=99999000)]


def test_total_supply():
    entry = StorageEntry(key=create_total_denom_key("stake"), value=bytes.fromhex(TOTAL_SUPPLY_HEX))
    result = reconstruct(QueryType.TOTAL_SUPPLY, [entry])
    assert result.result.coins == [Coin(denom="stake", amount=300001098)]


def test_fee_pool():
    entry = StorageEntry(key=create_fee_pool_key(), value=bytes.fromhex(FEE_POOL_HEX))
    result = reconstruct(QueryType.FEE_POOL, [entry])
    assert result.result.coins == [Coin(denom="stake", amount=21)]


def test_staking_validator():
    result = reconstruct(QueryType.STAKING_VALIDATORS, [StorageEntry(value=bytes.fromhex(STAKING_VALIDATOR_HEX))])
    assert result.result.validators == [Validator(
        operator_address=VALIDATOR,
        status=3,
        tokens="100000000",
        delegator_shares="100000000000000000000000000",
        jailed=False,
        moniker="mynode",
        identity="",
        website="",
        security_contact="",
        details="",
        unbonding_height=0,
        unbonding_time=0,
        rate=Decimal("0.1"),
        max_rate=Decimal("0.2"),
        max_change_rate=Decimal("0.01"),
        update_time=1683291676,
        min_self_delegation=Decimal(1),
    )]


def test_government_proposal():
    result = reconstruct(QueryType.GOVERNMENT_PROPOSALS, [StorageEntry(value=bytes.fromhex(GOV_PROPOSAL_HEX))])
    assert result.result.proposals == [Proposal(
        proposal_id=1,
        proposal_type="/cosmos.gov.v1beta1.TextProposal",
        total_deposit=[Coin(denom="stake", amount=1000)],
        status=1,
        submit_time=1683291849,
        deposit_end_time=1683464649,
        voting_start_time=ZERO_TIME,
        voting_end_time=ZERO_TIME,
        final_tally_result=TallyResult(yes="0", no="0", abstain="0", no_with_veto="0"),
    )]


@pytest.mark.parametrize("pairing", list(DelegationPairing))
def test_delegations(pairing):
    entries = [
        StorageEntry(
            storage_prefix="params",
            key=create_params_store_key(STAKING_STORE_KEY, KEY_BOND_DENOM),
            value=bytes.fromhex(STAKING_DENOM_HEX),
        ),
        StorageEntry(
            storage_prefix="staking",
            key=create_delegation_key(decode_address(DELEGATOR), decode_address(VALIDATOR)),
            value=bytes.fromhex(DELEGATOR_DELEGATIONS_HEX),
        ),
        StorageEntry(
            storage_prefix="staking",
            key=create_validator_key(decode_address(VALIDATOR)),
            value=bytes.fromhex(STAKING_VALIDATOR_HEX),
        ),
    ]
    config = ReconstructionConfig(delegation_pairing=pairing, account_prefix="cosmos",
                                  validator_prefix="cosmosvaloper")

    result = reconstruct(QueryType.DELEGATIONS, entries, config)
    assert result.result.delegations == [DelegationRecord(
        delegator=DELEGATOR,
        validator=VALIDATOR,
        amount=Coin(denom="stake", amount=100000000),
    )]
