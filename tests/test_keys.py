import pytest
from icq_protocol.types.common import AddressTooLong, MalformedValue
from icq_reconstruct.keys import (
    create_account_balances_prefix, create_account_denom_balance_key, create_delegation_key,
    create_delegations_key, create_fee_pool_key, create_gov_proposal_key, create_params_store_key,
    create_total_denom_key, create_validator_key, parse_balance_key, parse_delegation_key,
    parse_total_supply_key, split_length_prefixed,
)

ADDR = bytes(range(1, 21))
VALOPER = bytes([9] * 20)


def test_balance_key_layout():
    key = create_account_denom_balance_key(ADDR, "uatom")
    assert key[0] == 0x02
    assert key[1] == len(ADDR)
    # Trimming the discriminator and the length byte leaves addr | denom
    assert key[2:] == ADDR + b"uatom"
    assert create_account_balances_prefix(ADDR) == b"\x02\x14" + ADDR


def test_balance_key_roundtrip():
    key = create_account_denom_balance_key(ADDR, "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E5EB2")
    assert parse_balance_key(key) == (ADDR, "ibc/27394FB092D2ECCD56123C74F36E4C1F926001CEADA9CA97EA622B25F41E5EB2")


def test_total_supply_key():
    key = create_total_denom_key("stake")
    assert key == b"\x00stake"
    assert parse_total_supply_key(key) == "stake"


def test_delegation_keys():
    assert create_delegations_key(ADDR) == b"\x31\x14" + ADDR
    key = create_delegation_key(ADDR, VALOPER)
    assert key == b"\x31\x14" + ADDR + b"\x14" + VALOPER
    assert parse_delegation_key(key) == (ADDR, VALOPER)


def test_validator_key():
    assert create_validator_key(VALOPER) == b"\x21\x14" + VALOPER


def test_empty_address_collapses():
    assert create_validator_key(b"") == b"\x21"
    assert create_account_balances_prefix(b"") == b"\x02"


def test_address_too_long():
    with pytest.raises(AddressTooLong):
        create_validator_key(b"\x01" * 256)
    with pytest.raises(AddressTooLong):
        create_delegation_key(ADDR, b"\x01" * 300)


def test_fee_pool_key():
    assert create_fee_pool_key() == b"\x00"


def test_gov_proposal_key():
    assert create_gov_proposal_key(1) == b"\x00" + (1).to_bytes(8, "big")
    assert create_gov_proposal_key(2**64 - 1) == b"\x00" + b"\xff" * 8

    with pytest.raises(ValueError):
        create_gov_proposal_key(-1)
    with pytest.raises(ValueError):
        create_gov_proposal_key(2**64)


def test_params_store_key():
    assert create_params_store_key("staking", "BondDenom") == b"staking/BondDenom"


def test_split_length_prefixed():
    assert split_length_prefixed(b"\x02abc") == (b"ab", b"c")
    with pytest.raises(MalformedValue):
        split_length_prefixed(b"")
    with pytest.raises(MalformedValue):
        split_length_prefixed(b"\x05ab")


@pytest.mark.parametrize("key", [
    b"",
    b"\x03\x01a",                                   # wrong discriminator
    b"\x02\x14" + b"\x01" * 5,                      # truncated address
])
def test_parse_balance_key_malformed(key):
    with pytest.raises(MalformedValue):
        parse_balance_key(key)


def test_parse_delegation_key_trailing_bytes():
    with pytest.raises(MalformedValue):
        parse_delegation_key(create_delegation_key(ADDR, VALOPER) + b"\x00")


def test_parse_total_supply_key_malformed():
    with pytest.raises(MalformedValue):
        parse_total_supply_key(b"")
    with pytest.raises(MalformedValue):
        parse_total_supply_key(b"\x00\xff\xfe")
