# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from uuid import RFC_4122, UUID

import pytest

from sora.core.primitives import (
    ContractId,
    RealOfficeId,
    SubdivisionId,
    UserId,
    parse_identifier,
    uuid7,
)


def test_uuid7_version_and_variant():
    value = uuid7()
    assert value.version == 7
    assert value.variant == RFC_4122


def test_uuid7_is_strictly_increasing():
    values = [uuid7() for _ in range(2000)]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_identifiers_sort_in_creation_order():
    ids = [UserId() for _ in range(50)]
    assert sorted(reversed(ids)) == ids


@pytest.mark.parametrize(
    "kind, prefix",
    [(UserId, "usr"), (RealOfficeId, "ofc"), (SubdivisionId, "spl"), (ContractId, "agr")],
)
def test_display_prefix(kind, prefix):
    identifier = kind()
    assert str(identifier) == f"{prefix}-{identifier.uuid}"


def test_kinds_never_compare_equal():
    uuid = uuid7()
    assert RealOfficeId(uuid=uuid) != SubdivisionId(uuid=uuid)
    assert UserId(uuid=uuid) == UserId(uuid=uuid)


def test_identifiers_are_hashable():
    user_id = UserId()
    assert {user_id: 1}[UserId(uuid=user_id.uuid)] == 1


def test_parse_identifier_round_trip():
    for identifier in (UserId(), RealOfficeId(), SubdivisionId(), ContractId()):
        parsed = parse_identifier(str(identifier))
        assert parsed == identifier
        assert type(parsed) is type(identifier)


def test_parse_for_a_given_kind():
    uuid = UUID("0190c3e2-7b1a-7c3d-8e4f-0123456789ab")
    assert ContractId.parse(f"agr-{uuid}") == ContractId(uuid=uuid)
    with pytest.raises(ValueError):
        ContractId.parse(f"usr-{uuid}")


@pytest.mark.parametrize("value", ["abc-0190c3e2-7b1a-7c3d-8e4f-0123456789ab", "usr-", "usr-nope", ""])
def test_parse_identifier_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_identifier(value)


def test_identifiers_use_the_library_uuid7_generator():
    from uuid_utils.compat import uuid7 as library_uuid7

    assert uuid7 is library_uuid7
    identifier = ContractId()
    assert isinstance(identifier.uuid, UUID)
    assert identifier.uuid.version == 7
