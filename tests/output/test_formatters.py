"""Tests for format_result."""

import json

from typedconf.output.formatters import format_result
from typedconf.output.result import CommandError, CommandResult


def _ok(op: str = "test", **data: object) -> CommandResult:
    return CommandResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail", **data: object) -> CommandResult:
    return CommandResult(
        ok=False,
        op=op,
        data=dict(data),
        error=CommandError(code="ERR", message=msg),
    )


class TestFormatResultJSON:
    def test_json_mode_returns_valid_json(self) -> None:
        output = format_result(_ok("check", file="c.yml"), json_output=True)
        data = json.loads(output)
        assert data["ok"] is True
        assert data["op"] == "check"
        assert data["data"]["file"] == "c.yml"

    def test_json_mode_error(self) -> None:
        data = json.loads(format_result(_err("check", "Bad"), json_output=True))
        assert data["ok"] is False
        assert data["error"]["code"] == "ERR"
        assert data["error"]["message"] == "Bad"


class TestFormatResultHuman:
    def test_success(self) -> None:
        output = format_result(_ok("migrate", rewritten=True))
        assert output.splitlines() == ["OK: migrate", "  rewritten: True"]

    def test_lists_one_per_line(self) -> None:
        output = format_result(_err("check", "2 bad", needs_rewrite=["a.b", "c"]))
        assert output.splitlines() == [
            "ERROR: check: 2 bad",
            "  needs_rewrite:",
            "    - a.b",
            "    - c",
        ]

    def test_dict_values_inline(self) -> None:
        assert "  counts: {\"a\":1}" in format_result(_ok(counts={"a": 1}))

    def test_quiet_drops_data(self) -> None:
        assert format_result(_ok("check", file="x"), quiet=True) == "OK: check"

    def test_error_without_payload(self) -> None:
        result = CommandResult(ok=False, op="check")
        assert format_result(result) == "ERROR: check: Unknown error"
