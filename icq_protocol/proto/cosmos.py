# MIT License
# Copyright (c) 2025 Hashborn

"""
Cosmos SDK v0.45 protobuf messages used by KV query results.

Message classes are built from descriptors at import time, so no protoc step
is required. Only the fields the reconstructors read are declared; unknown
fields are preserved by the protobuf runtime and ignored. Field numbers must
match the remote chain's .proto definitions exactly.
"""

from typing import List
from google.protobuf import any_pb2, descriptor_pb2, descriptor_pool, message_factory, timestamp_pb2


_F = descriptor_pb2.FieldDescriptorProto

STRING = _F.TYPE_STRING
BOOL = _F.TYPE_BOOL
INT32 = _F.TYPE_INT32
INT64 = _F.TYPE_INT64
UINT64 = _F.TYPE_UINT64
MESSAGE = _F.TYPE_MESSAGE

TIMESTAMP = ".google.protobuf.Timestamp"
ANY = ".google.protobuf.Any"

REPEATED = "repeated"


def _message(name: str, fields: List[tuple]) -> descriptor_pb2.DescriptorProto:
    msg = descriptor_pb2.DescriptorProto(name=name)
    for field_def in fields:
        field_name, number, field_type = field_def[0], field_def[1], field_def[2]
        type_name = field_def[3] if len(field_def) > 3 else ""
        repeated = len(field_def) > 4 and field_def[4] == REPEATED
        field = msg.field.add(
            name=field_name,
            number=number,
            type=field_type,
            label=_F.LABEL_REPEATED if repeated else _F.LABEL_OPTIONAL,
        )
        if type_name:
            field.type_name = type_name
    return msg


def _file(name: str, package: str, messages: List[descriptor_pb2.DescriptorProto],
          dependencies: List[str] = ()) -> descriptor_pb2.FileDescriptorProto:
    file_proto = descriptor_pb2.FileDescriptorProto(name=name, package=package, syntax="proto3")
    file_proto.dependency.extend(dependencies)
    file_proto.message_type.extend(messages)
    return file_proto


_BASE = _file("cosmos/base/v1beta1/coin.proto", "cosmos.base.v1beta1", [
    _message("Coin", [
        ("denom", 1, STRING),
        ("amount", 2, STRING),
    ]),
    # amount is an 18-place fixed point integer as text
    _message("DecCoin", [
        ("denom", 1, STRING),
        ("amount", 2, STRING),
    ]),
])

_DISTRIBUTION = _file("cosmos/distribution/v1beta1/distribution.proto", "cosmos.distribution.v1beta1", [
    _message("FeePool", [
        ("community_pool", 1, MESSAGE, ".cosmos.base.v1beta1.DecCoin", REPEATED),
    ]),
], dependencies=[_BASE.name])

_STAKING = _file("cosmos/staking/v1beta1/staking.proto", "cosmos.staking.v1beta1", [
    _message("CommissionRates", [
        ("rate", 1, STRING),
        ("max_rate", 2, STRING),
        ("max_change_rate", 3, STRING),
    ]),
    _message("Commission", [
        ("commission_rates", 1, MESSAGE, ".cosmos.staking.v1beta1.CommissionRates"),
        ("update_time", 2, MESSAGE, TIMESTAMP),
    ]),
    _message("Description", [
        ("moniker", 1, STRING),
        ("identity", 2, STRING),
        ("website", 3, STRING),
        ("security_contact", 4, STRING),
        ("details", 5, STRING),
    ]),
    _message("Validator", [
        ("operator_address", 1, STRING),
        ("consensus_pubkey", 2, MESSAGE, ANY),
        ("jailed", 3, BOOL),
        ("status", 4, INT32),  # BondStatus enum, same wire format
        ("tokens", 5, STRING),
        ("delegator_shares", 6, STRING),
        ("description", 7, MESSAGE, ".cosmos.staking.v1beta1.Description"),
        ("unbonding_height", 8, INT64),
        ("unbonding_time", 9, MESSAGE, TIMESTAMP),
        ("commission", 10, MESSAGE, ".cosmos.staking.v1beta1.Commission"),
        ("min_self_delegation", 11, STRING),
    ]),
    _message("Delegation", [
        ("delegator_address", 1, STRING),
        ("validator_address", 2, STRING),
        ("shares", 3, STRING),
    ]),
], dependencies=[any_pb2.DESCRIPTOR.name, timestamp_pb2.DESCRIPTOR.name])

_GOV = _file("cosmos/gov/v1beta1/gov.proto", "cosmos.gov.v1beta1", [
    _message("TallyResult", [
        ("yes", 1, STRING),
        ("abstain", 2, STRING),
        ("no", 3, STRING),
        ("no_with_veto", 4, STRING),
    ]),
    _message("Proposal", [
        ("proposal_id", 1, UINT64),
        ("content", 2, MESSAGE, ANY),
        ("status", 3, INT32),  # ProposalStatus enum, same wire format
        ("final_tally_result", 4, MESSAGE, ".cosmos.gov.v1beta1.TallyResult"),
        ("submit_time", 5, MESSAGE, TIMESTAMP),
        ("deposit_end_time", 6, MESSAGE, TIMESTAMP),
        ("total_deposit", 7, MESSAGE, ".cosmos.base.v1beta1.Coin", REPEATED),
        ("voting_start_time", 8, MESSAGE, TIMESTAMP),
        ("voting_end_time", 9, MESSAGE, TIMESTAMP),
    ]),
], dependencies=[_BASE.name, any_pb2.DESCRIPTOR.name, timestamp_pb2.DESCRIPTOR.name])


def _build_pool() -> descriptor_pool.DescriptorPool:
    pool = descriptor_pool.DescriptorPool()
    for well_known in (any_pb2.DESCRIPTOR, timestamp_pb2.DESCRIPTOR):
        pool.AddSerializedFile(well_known.serialized_pb)
    for file_proto in (_BASE, _DISTRIBUTION, _STAKING, _GOV):
        pool.AddSerializedFile(file_proto.SerializeToString())
    return pool


_POOL = _build_pool()


def _message_class(full_name: str):
    return message_factory.GetMessageClass(_POOL.FindMessageTypeByName(full_name))


Coin = _message_class("cosmos.base.v1beta1.Coin")
DecCoin = _message_class("cosmos.base.v1beta1.DecCoin")
FeePool = _message_class("cosmos.distribution.v1beta1.FeePool")
CommissionRates = _message_class("cosmos.staking.v1beta1.CommissionRates")
Commission = _message_class("cosmos.staking.v1beta1.Commission")
Description = _message_class("cosmos.staking.v1beta1.Description")
Validator = _message_class("cosmos.staking.v1beta1.Validator")
Delegation = _message_class("cosmos.staking.v1beta1.Delegation")
TallyResult = _message_class("cosmos.gov.v1beta1.TallyResult")
Proposal = _message_class("cosmos.gov.v1beta1.Proposal")
Timestamp = _message_class("google.protobuf.Timestamp")
Any = _message_class("google.protobuf.Any")

__all__ = [
    "Coin",
    "DecCoin",
    "FeePool",
    "CommissionRates",
    "Commission",
    "Description",
    "Validator",
    "Delegation",
    "TallyResult",
    "Proposal",
    "Timestamp",
    "Any",
]
