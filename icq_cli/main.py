# MIT License
# Copyright (c) 2025 Hashborn

import argparse
import base64
import binascii
import json
import logging
import sys
from typing import List
from icq_protocol.config.params import KEY_BOND_DENOM, STAKING_STORE_KEY, ReconstructionConfig
from icq_protocol.crypto.addresses import decode_address
from icq_protocol.types.common import DelegationPairing, QueryType, ReconstructError
from icq_protocol.types.storage import StorageEntry
from icq_reconstruct.envelope import reconstruct
from icq_reconstruct.keys import (
    create_account_denom_balance_key, create_delegation_key, create_fee_pool_key,
    create_gov_proposal_key, create_params_store_key, create_total_denom_key,
    create_validator_key,
)

logger = logging.getLogger(__name__)


def load_entries(path: str, use_hex: bool = False) -> List[StorageEntry]:
    """
    Loads KV entries from a JSON file: [{"storage_prefix": ..., "key": ..., "value": ...}].
    Bytes are base64 unless use_hex is set.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw_entries = json.load(f)

    if not isinstance(raw_entries, list):
        raise ValueError("Entries file must hold a JSON list")

    def to_bytes(text: str) -> bytes:
        if use_hex:
            return bytes.fromhex(text)
        return base64.b64decode(text, validate=True)

    entries = []
    for i, item in enumerate(raw_entries):
        try:
            entries.append(StorageEntry(
                storage_prefix=item.get("storage_prefix", ""),
                key=to_bytes(item.get("key", "")),
                value=to_bytes(item.get("value", "")),
            ))
        except (AttributeError, ValueError, binascii.Error) as e:
            raise ValueError(f"Invalid entry #{i}: {e}")
    return entries


# --- Decode ---
def cmd_decode(args):
    config = ReconstructionConfig(
        delegation_pairing=DelegationPairing(args.pairing),
        account_prefix=args.account_prefix,
        validator_prefix=args.validator_prefix,
    )
    try:
        entries = load_entries(args.file, use_hex=args.hex)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)
    logger.debug(f"Loaded {len(entries)} entries from {args.file}")

    try:
        result = reconstruct(args.query_type, entries, config)
    except ReconstructError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(result.to_json(indent=2))


# --- Keys ---
def cmd_keys(args):
    try:
        if args.subcommand == "balance":
            key = create_account_denom_balance_key(decode_address(args.address), args.denom)
        elif args.subcommand == "supply":
            key = create_total_denom_key(args.denom)
        elif args.subcommand == "delegation":
            key = create_delegation_key(decode_address(args.delegator), decode_address(args.validator))
        elif args.subcommand == "validator":
            key = create_validator_key(decode_address(args.validator))
        elif args.subcommand == "proposal":
            key = create_gov_proposal_key(args.proposal_id)
        elif args.subcommand == "fee-pool":
            key = create_fee_pool_key()
        elif args.subcommand == "bond-denom":
            key = create_params_store_key(STAKING_STORE_KEY, KEY_BOND_DENOM)
    except (ReconstructError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(key.hex())


def main(argv=None):
    parser = argparse.ArgumentParser(prog="icq-reconstruct", description="Interchain KV query result tools")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Sub-commands")

    # decode
    p_decode = subparsers.add_parser("decode", help="Reconstruct a typed result from KV entries")
    p_decode.add_argument("query_type", choices=[q.value for q in QueryType], help="Query type")
    p_decode.add_argument("file", help="JSON file with KV entries")
    p_decode.add_argument("--hex", action="store_true", help="Entry bytes are hex instead of base64")
    p_decode.add_argument("--pairing", choices=[p.value for p in DelegationPairing],
                          default=DelegationPairing.BY_KEY.value, help="Delegation/validator pairing")
    p_decode.add_argument("--account-prefix", help="Required bech32 prefix of delegator addresses")
    p_decode.add_argument("--validator-prefix", help="Required bech32 prefix of validator addresses")

    # keys
    p_keys = subparsers.add_parser("keys", help="Print remote store keys (hex)")
    sp_keys = p_keys.add_subparsers(dest="subcommand")

    pk_bal = sp_keys.add_parser("balance", help="Account balance key")
    pk_bal.add_argument("address", help="Account address (bech32)")
    pk_bal.add_argument("denom", help="Denom")

    pk_supply = sp_keys.add_parser("supply", help="Total supply key")
    pk_supply.add_argument("denom", help="Denom")

    pk_del = sp_keys.add_parser("delegation", help="Delegation key")
    pk_del.add_argument("delegator", help="Delegator address (bech32)")
    pk_del.add_argument("validator", help="Validator operator address (bech32)")

    pk_val = sp_keys.add_parser("validator", help="Validator key")
    pk_val.add_argument("validator", help="Validator operator address (bech32)")

    pk_prop = sp_keys.add_parser("proposal", help="Governance proposal key")
    pk_prop.add_argument("proposal_id", type=int, help="Proposal id")

    sp_keys.add_parser("fee-pool", help="Distribution fee pool key")
    sp_keys.add_parser("bond-denom", help="Staking bond denom params key")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s [%(levelname)s] %(message)s'
    )

    if args.command == "decode":
        cmd_decode(args)
    elif args.command == "keys":
        if args.subcommand is None:
            p_keys.print_help()
        else:
            cmd_keys(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
