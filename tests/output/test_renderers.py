"""Tests for operation-specific Rich renderers."""

from __future__ import annotations

from typing import Any

import pytest

from gunghap.output.renderers import render_quiet, render_result
from gunghap.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


@pytest.fixture
def destiny_data() -> dict[str, Any]:
    return {
        "name1": "철수",
        "name2": "영희",
        "combined_sequence": ["철", "영", "수", "희"],
        "stroke_totals": [11, 5, 4, 5],
        "trace": [[6, 9, 9]],
        "result": [5, 8],
        "score": 58,
        "percentage": "58%",
    }


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("destiny", "NAME_TOO_SHORT", "name1 is too short"))
        assert "ERROR" in output
        assert "destiny" in output
        assert "name1 is too short" in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("destiny", "NAME_TOO_SHORT", "Bad", min_length=2)
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "min_length: 2" in output

    def test_single_line_layout(self) -> None:
        output = render_result(_err("destiny", "NAME_TOO_SHORT", "name1 is too short"))
        assert output.splitlines()[0] == "ERROR  destiny — name1 is too short"

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="destiny"))
        assert "Unknown error" in output


class TestDestinyRenderer:
    def test_full_render(self, destiny_data: dict[str, Any]) -> None:
        output = render_result(_ok("destiny", **destiny_data))
        assert output.startswith("OK")
        assert "name1: 철수" in output
        assert "name2: 영희" in output
        assert "strokes:" in output
        assert "11" in output
        assert "6   9   9" in output
        assert "5   8" in output
        assert "result: 5 8" in output
        assert "score: 58%" in output

    def test_fields_are_single_spaced(self, destiny_data: dict[str, Any]) -> None:
        lines = render_result(_ok("destiny", **destiny_data)).splitlines()
        assert lines[0] == "OK  destiny"
        assert "  name1: 철수" in lines
        assert "  score: 58%" in lines

    def test_process_rows_form_pyramid(self, destiny_data: dict[str, Any]) -> None:
        lines = render_result(_ok("destiny", **destiny_data)).splitlines()
        first = next(line for line in lines if "6   9   9" in line)
        last = next(line for line in lines if line.strip() == "5   8")
        assert len(last) - len(last.lstrip()) > len(first) - len(first.lstrip())

    def test_hide_strokes(self, destiny_data: dict[str, Any]) -> None:
        output = render_result(_ok("destiny", **destiny_data), show_strokes=False)
        assert "strokes:" not in output
        assert "score: 58%" in output

    def test_hide_process(self, destiny_data: dict[str, Any]) -> None:
        output = render_result(_ok("destiny", **destiny_data), show_process=False)
        assert "process:" not in output
        assert "6   9   9" not in output
        assert "score: 58%" in output

    def test_verbose_renders_telemetry(self, destiny_data: dict[str, Any]) -> None:
        result = ServiceResult(
            ok=True,
            op="destiny",
            data=destiny_data,
            meta={
                "telemetry": {
                    "name": "DestinyService.compute",
                    "duration_ms": 0.5,
                    "children": [
                        {"name": "validate", "duration_ms": 0.1},
                        {
                            "name": "compute_destiny",
                            "duration_ms": 0.3,
                            "annotations": {"rows": 1},
                        },
                    ],
                }
            },
        )
        output = render_result(result, verbose=True)
        assert "meta:" in output
        assert "DestinyService.compute" in output
        assert "compute_destiny" in output
        assert "rows=1" in output


class TestDestinyBothRenderer:
    def test_both_sections(self, destiny_data: dict[str, Any]) -> None:
        reverse = {**destiny_data, "name1": "영희", "name2": "철수", "percentage": "25%"}
        output = render_result(_ok("destiny_both", forward=destiny_data, reverse=reverse))
        assert "[forward] 철수 + 영희" in output
        assert "[reverse] 영희 + 철수" in output
        assert "58%" in output
        assert "25%" in output


class TestStrokesRenderer:
    def test_table(self) -> None:
        result = _ok(
            "strokes",
            text="철수",
            characters=[
                {"char": "철", "units": ["ㅊ", "ㅓ", "ㄹ"], "strokes": 11, "digit": 1},
                {"char": "수", "units": ["ㅅ", "ㅜ"], "strokes": 4, "digit": 4},
            ],
            total=15,
            digit=5,
        )
        output = render_result(result)
        assert "Jamo" in output
        assert "ㅊ ㅓ ㄹ" in output
        assert "total: 15" in output
        assert "digit: 5" in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("other", key="value"))
        assert "OK" in output
        assert "key: value" in output


class TestRenderQuiet:
    def test_destiny(self, destiny_data: dict[str, Any]) -> None:
        assert render_quiet(_ok("destiny", **destiny_data)) == "58%"

    def test_destiny_both(self, destiny_data: dict[str, Any]) -> None:
        reverse = {**destiny_data, "percentage": "25%"}
        assert render_quiet(_ok("destiny_both", forward=destiny_data, reverse=reverse)) == (
            "58%\n25%"
        )

    def test_strokes(self) -> None:
        assert render_quiet(_ok("strokes", total=15)) == "15"

    def test_error(self) -> None:
        output = render_quiet(_err("destiny", "NAME_TOO_SHORT", "too short"))
        assert output == "ERROR: destiny — too short"

    def test_unknown_op(self) -> None:
        assert render_quiet(_ok("other")) == "OK: other"
