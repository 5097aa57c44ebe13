from datetime import datetime
from pathlib import Path
import json
import logging

import pytest

from bdd_reports.core.errors import LogReadError, MalformedLogError
from bdd_reports.reporting.models import ScenarioStatus
from bdd_reports.reporting.parser import ExecutionLogParser


def _step(name: str, status: str = "passed", duration_ns: int = 0, **result) -> dict:
    return {
        "keyword": "Given ",
        "name": name,
        "result": {"status": status, "duration": duration_ns, **result},
    }


def _scenario(name: str, steps: list, tags: list | None = None, element_type: str = "scenario") -> dict:
    element = {"type": element_type, "name": name, "steps": steps}
    if tags is not None:
        element["tags"] = [{"name": tag} for tag in tags]
    return element


def test_counts_add_up_and_durations_sum():
    features = [
        {"name": "Login", "elements": [
            _scenario("ok", [_step("a", duration_ns=100_000_000)]),
            _scenario("ko", [_step("b", "failed", 200_000_000, error_message="boom")]),
        ]},
        {"name": "Search", "elements": [
            _scenario("quick", [_step("c", duration_ns=50_000_000)]),
        ]},
    ]
    report = ExecutionLogParser().parse(features)

    assert report.total_tests == 3
    assert report.passed_tests == 2
    assert report.failed_tests == 1
    assert report.total_tests == report.passed_tests + report.failed_tests
    assert report.total_tests == len(report.scenarios)
    assert report.total_duration_ms == 350
    assert [s.feature_name for s in report.scenarios] == ["Login", "Login", "Search"]


def test_nanoseconds_are_truncated_to_milliseconds():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [_step("x", duration_ns=1_999_999)])]},
    ])
    assert report.scenarios[0].steps[0].duration_ms == 1
    assert report.scenarios[0].duration_ms == 1


def test_scenario_without_steps_is_passed_with_zero_duration():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [{"type": "scenario", "name": "empty"}]},
    ])
    scenario = report.scenarios[0]
    assert scenario.steps == []
    assert scenario.duration_ms == 0
    assert scenario.status == ScenarioStatus.PASSED
    assert scenario.tags == []


@pytest.mark.parametrize("failed_index", [0, 1, 2, 3])
def test_any_failed_step_fails_the_scenario(failed_index):
    steps = [_step(f"step {i}") for i in range(4)]
    steps[failed_index] = _step(f"step {failed_index}", "failed")
    report = ExecutionLogParser().parse([{"name": "F", "elements": [_scenario("s", steps)]}])
    assert report.scenarios[0].status == ScenarioStatus.FAILED
    assert report.failed_tests == 1


def test_failure_is_sticky_and_later_steps_are_kept():
    steps = [
        _step("one"),
        _step("two", "failed", error_message="expected true"),
        _step("three"),
        _step("four", "skipped"),
    ]
    report = ExecutionLogParser().parse([{"name": "F", "elements": [_scenario("s", steps)]}])
    scenario = report.scenarios[0]
    assert scenario.status == ScenarioStatus.FAILED
    assert [step.name for step in scenario.steps] == ["one", "two", "three", "four"]
    assert scenario.steps[3].status == "skipped"


def test_missing_result_defaults_to_passed_and_zero_duration():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [{"name": "no result"}])]},
    ])
    step = report.scenarios[0].steps[0]
    assert step.status == "passed"
    assert step.duration_ms == 0
    assert step.keyword == ""
    assert step.error_message is None


def test_missing_duration_or_status_in_result_uses_defaults():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [
            {"name": "a", "result": {"status": "pending"}},
            {"name": "b", "result": {"duration": 3_000_000}},
        ])]},
    ])
    a, b = report.scenarios[0].steps
    assert (a.status, a.duration_ms) == ("pending", 0)
    assert (b.status, b.duration_ms) == ("passed", 3)


def test_error_message_only_kept_for_failed_steps():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [
            _step("a", "skipped", error_message="ignored"),
            _step("b", "failed", error_message="AssertionError"),
            _step("c", "failed"),
        ])]},
    ])
    a, b, c = report.scenarios[0].steps
    assert a.error_message is None
    assert b.error_message == "AssertionError"
    assert c.error_message is None


def test_status_taxonomy_is_open():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [_step("a", "ambiguous")])]},
    ])
    assert report.scenarios[0].steps[0].status == "ambiguous"
    assert report.scenarios[0].status == ScenarioStatus.PASSED


def test_non_scenario_elements_are_skipped():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [
            _scenario("setup", [_step("bg", "failed")], element_type="background"),
            _scenario("real", [_step("x")]),
        ]},
        {"name": "No elements"},
    ])
    assert report.total_tests == 1
    assert report.scenarios[0].name == "real"


def test_unknown_element_types_warn_when_enabled(caplog):
    features = [{"name": "F", "elements": [_scenario("odd", [], element_type="scenario_outline")]}]
    with caplog.at_level(logging.WARNING, logger="bdd_reports"):
        ExecutionLogParser(warn_unknown_elements=True).parse(features)
    assert "scenario_outline" in caplog.text

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger="bdd_reports"):
        ExecutionLogParser().parse(features)
    assert caplog.text == ""


def test_tags_are_collected_without_duplicates():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [], tags=["@smoke", "@login", "@smoke"])]},
    ])
    assert report.scenarios[0].tags == ["@smoke", "@login"]


def test_empty_log_yields_empty_report():
    stamp = datetime(2024, 5, 1, 12, 30, 0)
    report = ExecutionLogParser().parse([], generated_at=stamp)
    assert report.total_tests == 0
    assert report.total_duration_ms == 0
    assert report.generated_at == stamp


@pytest.mark.parametrize("root", [{"name": "F"}, "text", 42, None])
def test_root_that_is_not_an_array_is_malformed(root):
    with pytest.raises(MalformedLogError):
        ExecutionLogParser().parse(root)


@pytest.mark.parametrize("features", [
    ["not a feature"],
    [{"name": "F", "elements": {"type": "scenario"}}],
    [{"name": "F", "elements": [_scenario("s", [_step("a", duration_ns="fast")])]}],
    [{"name": "F", "elements": [{"type": "scenario", "name": "s", "steps": "none"}]}],
])
def test_wrong_shapes_are_malformed(features):
    with pytest.raises(MalformedLogError):
        ExecutionLogParser().parse(features)


def test_parse_file_reports_offending_path(tmp_path: Path):
    log = tmp_path / "cucumber.json"
    log.write_text("{not json")
    with pytest.raises(MalformedLogError) as exc_info:
        ExecutionLogParser().parse_file(log)
    assert exc_info.value.path == log
    assert str(log) in str(exc_info.value)


def test_parse_file_shape_error_reports_path(tmp_path: Path):
    log = tmp_path / "cucumber.json"
    log.write_text(json.dumps({"features": []}))
    with pytest.raises(MalformedLogError) as exc_info:
        ExecutionLogParser().parse_file(log)
    assert exc_info.value.path == log


def test_parse_file_reads_valid_log(tmp_path: Path):
    log = tmp_path / "cucumber.json"
    log.write_text(json.dumps([{"name": "F", "elements": [_scenario("s", [_step("a", duration_ns=5_000_000)])]}]))
    report = ExecutionLogParser().parse_file(log)
    assert report.total_tests == 1
    assert report.total_duration_ms == 5


def test_negative_durations_truncate_toward_zero():
    report = ExecutionLogParser().parse([
        {"name": "F", "elements": [_scenario("s", [
            _step("a", duration_ns=-1),
            _step("b", duration_ns=-1_999_999),
        ])]},
    ])
    assert [step.duration_ms for step in report.scenarios[0].steps] == [0, -1]


@pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_duration_is_malformed(tmp_path: Path, literal: str):
    log = tmp_path / "cucumber.json"
    log.write_text(
        '[{"name": "F", "elements": [{"type": "scenario", "name": "s", "steps": ['
        '{"name": "x", "result": {"status": "passed", "duration": ' + literal + '}}]}]}]'
    )
    with pytest.raises(MalformedLogError) as exc_info:
        ExecutionLogParser().parse_file(log)
    assert exc_info.value.path == log
    assert "non-finite duration" in str(exc_info.value)


def test_unreadable_log_raises_read_error(tmp_path: Path, monkeypatch):
    log = tmp_path / "cucumber.json"
    log.write_text("[]")

    def _deny(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "read_text", _deny)
    with pytest.raises(LogReadError) as exc_info:
        ExecutionLogParser().parse_file(log)
    assert exc_info.value.path == log
    assert "Permission denied" in str(exc_info.value)
