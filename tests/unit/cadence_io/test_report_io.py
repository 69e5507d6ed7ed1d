# tests/unit/cadence_io/test_report_io.py
# Unit tests for report export/import & JSON helpers

import json
from datetime import datetime

import pytest

from cadence.cadence_io.generics import read_json_safe, write_json_safe
from cadence.cadence_io.report_io import (
    default_report_path,
    load_report,
    report_payload,
    write_report,
)
from cadence.core.exceptions import FileReadError, JSONParsingError, ReportError
from cadence.core.report import build_report


@pytest.fixture
def report(three_section_plan):
    return build_report(three_section_plan.sections, [200, 250, 130])


def test_default_report_path(tmp_path):
    path = default_report_path(tmp_path, datetime(2026, 3, 1, 9, 5, 7))
    assert path == tmp_path / "report-20260301-090507.json"


def test_payload_shape(three_section_plan, report):
    payload = report_payload(three_section_plan, report)
    assert set(payload) == {"generated_at", "plan", "history", "report"}
    assert payload["history"] == [200, 250, 130]
    assert payload["report"]["totals"]["total_deviation"] == -20


# * a saved report rebuilds to the same numbers from its embedded plan
def test_saved_report_reloads(tmp_path, three_section_plan, report):
    path = tmp_path / "out" / "report.json"
    write_report(path, three_section_plan, report)

    plan, rebuilt = load_report(path)
    assert plan == three_section_plan
    assert rebuilt == report


def test_bare_history_needs_plan(tmp_path, three_section_plan):
    path = tmp_path / "history.json"
    path.write_text(json.dumps([180, 300]))

    with pytest.raises(ReportError, match="--plan"):
        load_report(path)

    _, rebuilt = load_report(path, three_section_plan)
    assert rebuilt.totals.total_actual == 480
    assert rebuilt.rows[2].actual_sec == 0


@pytest.mark.parametrize("content", ['{"rows": []}', '"text"', '{"history": "x"}'])
def test_unrecognized_input(tmp_path, content):
    path = tmp_path / "r.json"
    path.write_text(content)
    with pytest.raises(ReportError):
        load_report(path)


def test_invalid_embedded_plan(tmp_path):
    path = tmp_path / "r.json"
    path.write_text(json.dumps({"history": [1], "plan": {"sections": 3}}))
    with pytest.raises(ReportError, match="Embedded plan"):
        load_report(path)


def test_json_helpers(tmp_path):
    path = tmp_path / "a" / "b.json"
    write_json_safe({"x": 1}, path)
    assert read_json_safe(path) == {"x": 1}

    with pytest.raises(FileReadError) as exc:
        read_json_safe(tmp_path / "missing.json")
    assert exc.value.path == tmp_path / "missing.json"


# * bytes that are not UTF-8 surface as a parsing error, not a decode traceback
def test_non_utf8_file_is_parsing_error(tmp_path):
    path = tmp_path / "plan.json"
    path.write_bytes(b'{"sections":[{"name":"\xff\xfe"}]}')

    with pytest.raises(JSONParsingError, match="not valid UTF-8"):
        read_json_safe(path)
