"""Unit tests for record value conversion."""
from __future__ import annotations

import dataclasses
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

from fluenthook.kernel import Level
from fluenthook.pipeline import convert_to_value


class Color(Enum):
    RED = "red"


@dataclasses.dataclass
class Request:
    path: str = dataclasses.field(metadata={"fluent": "request_path"})
    token: str = dataclasses.field(default="", metadata={"fluent": "-"})
    retries: int = dataclasses.field(default=0, metadata={"fluent": ",omitempty"})
    method: str = "GET"


@dataclasses.dataclass
class Wrapper:
    request: Request
    tags: tuple[str, ...] = ()


class Dumpable:
    def model_dump(self) -> dict[str, Any]:
        return {"kind": "pydantic-like", "when": date(2026, 1, 1)}


class HasToDict:
    def to_dict(self) -> dict[str, Any]:
        return {"code": "x"}


class Opaque:
    def __str__(self) -> str:
        return "opaque!"


class TestScalars:
    def test_scalars_pass_through(self) -> None:
        for value in (None, True, 1, 1.5, "s", b"raw"):
            assert convert_to_value(value) == value

    def test_level_becomes_canonical_string(self) -> None:
        assert convert_to_value(Level.WARN) == "warning"

    def test_enum_uses_value(self) -> None:
        assert convert_to_value(Color.RED) == "red"

    def test_datetime_iso(self) -> None:
        moment = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
        assert convert_to_value(moment) == "2026-01-01T12:00:00+00:00"

    def test_exception_stringified(self) -> None:
        assert convert_to_value(ValueError("bad")) == "bad"

    def test_unknown_object_stringified(self) -> None:
        assert convert_to_value(Opaque()) == "opaque!"


class TestContainers:
    def test_mapping_keys_stringified(self) -> None:
        assert convert_to_value({1: "a", "b": {2: "c"}}) == {"1": "a", "b": {"2": "c"}}

    def test_sequences_become_lists(self) -> None:
        assert convert_to_value((1, [2, (3,)])) == [1, [2, [3]]]

    def test_set_becomes_list(self) -> None:
        assert convert_to_value({"x"}) == ["x"]


class TestDataclasses:
    def test_rename_omit_and_omitempty(self) -> None:
        out = convert_to_value(Request(path="/orders", token="secret"))
        assert out == {"request_path": "/orders", "method": "GET"}

    def test_omitempty_keeps_truthy(self) -> None:
        out = convert_to_value(Request(path="/", retries=3))
        assert out["retries"] == 3

    def test_nested(self) -> None:
        out = convert_to_value(Wrapper(Request(path="/"), tags=("a", "b")))
        assert out == {"request": {"request_path": "/", "method": "GET"}, "tags": ["a", "b"]}

    def test_custom_tag_name(self) -> None:
        @dataclasses.dataclass
        class Item:
            sku: str = dataclasses.field(metadata={"log": "id"})

        assert convert_to_value(Item("abc"), tag_name="log") == {"id": "abc"}
        assert convert_to_value(Item("abc")) == {"sku": "abc"}

    def test_dataclass_type_is_not_expanded(self) -> None:
        assert isinstance(convert_to_value(Request), str)


class TestObjectProtocols:
    def test_model_dump(self) -> None:
        assert convert_to_value(Dumpable()) == {"kind": "pydantic-like", "when": "2026-01-01"}

    def test_to_dict(self) -> None:
        assert convert_to_value(HasToDict()) == {"code": "x"}
