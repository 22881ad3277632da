#  Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
#  SPDX-License-Identifier: Apache-2.0

import pytest

from hermes import Field, Fields, tuples_to_fields
from hermes.interfaces import FieldPosition


def test_field_as_tuples() -> None:
    field = Field(name="Set-Cookie", values=["a=1", "b=2"])
    assert field.kind is FieldPosition.HEADER
    assert field.as_tuples() == [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")]


def test_field_equality_includes_kind() -> None:
    assert Field(name="a", values=["1"]) == Field(name="a", values=["1"])
    assert Field(name="a") != Field(name="a", kind=FieldPosition.TRAILER)


def test_fields_lookup_ignores_case() -> None:
    fields = Fields([Field(name="Content-Type", values=["application/json"])])
    assert "content-type" in fields
    assert fields["CONTENT-TYPE"].values == ["application/json"]
    assert fields.get("missing") is None


def test_fields_rejects_duplicate_initial_names() -> None:
    with pytest.raises(ValueError, match="user-agent"):
        Fields([Field(name="User-Agent"), Field(name="user-agent")])


def test_set_field_replaces_regardless_of_case() -> None:
    fields = Fields(
        [Field(name="User-Agent", values=["default"]), Field(name="Accept")]
    )
    fields.set_field(Field(name="user-agent", values=["custom"]))

    assert len(fields) == 2
    assert [fld.name for fld in fields] == ["Accept", "user-agent"]
    assert fields["User-Agent"].values == ["custom"]


def test_setitem_rejects_mismatched_name() -> None:
    with pytest.raises(ValueError):
        Fields()["accept"] = Field(name="connection")


def test_get_by_type() -> None:
    header = Field(name="h")
    trailer = Field(name="t", kind=FieldPosition.TRAILER)
    fields = Fields([header, trailer])
    assert fields.get_by_type(FieldPosition.HEADER) == [header]
    assert fields.get_by_type(FieldPosition.TRAILER) == [trailer]


def test_tuples_to_fields_groups_repeated_names() -> None:
    fields = tuples_to_fields([("Set-Cookie", "a=1"), ("set-cookie", "b=2")])
    assert len(fields) == 1
    assert fields["set-cookie"].name == "Set-Cookie"
    assert fields["set-cookie"].values == ["a=1", "b=2"]
