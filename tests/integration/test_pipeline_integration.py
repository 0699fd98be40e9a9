from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

from studyplan.cli import main, run_countdown_command, run_plan_command
from studyplan.clock import FixedClock

CLOCK = FixedClock(datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc))


def _write(path: Path, payload: dict) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def _base_files(tmp_path: Path, **request_overrides: object) -> tuple[Path, Path]:
    request = tmp_path / "plan_request.json"
    topics = tmp_path / "topics.json"

    _write(
        topics,
        {
            "topics": [
                {"id": "graphs", "difficulty_weight": 3, "exam_importance": 3},
                {"id": "sorting", "difficulty_weight": 5, "exam_importance": 5},
                {"id": "hashing", "difficulty_weight": 1, "exam_importance": 1},
                {"id": "heaps", "difficulty_weight": 4, "exam_importance": 4},
                {"id": "tries", "difficulty_weight": 2, "exam_importance": 2},
            ]
        },
    )
    payload = {
        "exam_date": "2025-01-04",
        "start_date": "2025-01-01",
        "topics_path": topics.name,
    }
    payload.update(request_overrides)
    _write(request, payload)
    return request, topics


def _run(tmp_path: Path, request: Path) -> tuple[int, dict]:
    output = tmp_path / "plan_output.json"
    code = run_plan_command(str(request), str(output), clock=CLOCK)
    return code, json.loads(output.read_text(encoding="utf-8"))


def test_end_to_end_plan_request_to_plan_output(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path)

    code, payload = _run(tmp_path, request)

    assert code == 0
    assert payload["status"] == "ok"
    output = payload["plan_output"]
    assert output["plan"] == [
        {"date": "2025-01-01", "topics": ["sorting", "heaps"]},
        {"date": "2025-01-02", "topics": ["graphs", "tries"]},
        {"date": "2025-01-03", "topics": ["hashing"]},
    ]
    assert output["generated_at"] == "2025-01-01T09:00:00Z"
    assert output["plan_id"] == "plan-20250101-090000"
    assert output["validation_report"]["errors"] == []
    assert output["metrics"]["study_days"] == 3
    assert output["countdown"]["tier"] == "warning"
    assert len(output["decision_trace"]) == 3
    assert "progress" not in output


def test_inline_topics_and_progress(tmp_path: Path) -> None:
    request = tmp_path / "plan_request.json"
    _write(
        request,
        {
            "exam_date": "2025-01-03T18:00:00Z",
            "start_date": "2025-01-01",
            "topics": [
                {"id": "a", "difficulty_weight": 1, "exam_importance": 1},
                {"id": "b", "difficulty_weight": 2, "exam_importance": 2},
            ],
            "completed_topic_ids": ["b"],
        },
    )

    code, payload = _run(tmp_path, request)

    assert code == 0
    output = payload["plan_output"]
    assert output["plan"] == [
        {"date": "2025-01-01", "topics": ["b"]},
        {"date": "2025-01-02", "topics": ["a"]},
    ]
    assert output["progress"]["overall_percentage"] == 50


def test_missing_exam_date_is_a_request_error(tmp_path: Path) -> None:
    request = tmp_path / "plan_request.json"
    _write(request, {"topics": []})

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["status"] == "error"
    assert payload["error"]["code"] == "validation_error"
    assert any(item["path"] == "$.exam_date" for item in payload["error"]["details"])


def test_invalid_date_is_rejected_not_planned(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path, exam_date="2025-13-45")

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert "plan_output" not in payload
    codes = {item["code"] for item in payload["validation_report"]["errors"]}
    assert codes == {"INVALID_DATE_FORMAT"}


def test_invalid_topics_are_all_reported(tmp_path: Path) -> None:
    request, topics = _base_files(tmp_path)
    _write(
        topics,
        {
            "topics": [
                {"id": "x", "difficulty_weight": 0, "exam_importance": 3},
                {"id": "x", "difficulty_weight": 2, "exam_importance": 9},
            ]
        },
    )

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["error"]["count"] == 3
    codes = [item["code"] for item in payload["error"]["details"]]
    assert codes.count("INVALID_TOPIC_WEIGHT") == 2
    assert "DUPLICATE_TOPIC_ID" in codes


def test_missing_topics_file_is_a_load_error(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path, topics_path="missing.json")

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["error"]["code"] == "input_load_error"
    assert payload["error"]["details"][0]["code"] == "file_not_found"


def test_unreadable_request_is_reported(tmp_path: Path) -> None:
    request = tmp_path / "plan_request.json"
    request.write_text("{not json", encoding="utf-8")

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["error"]["code"] == "request_read_error"


def test_same_request_same_clock_same_output(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path)

    _, first = _run(tmp_path, request)
    _, second = _run(tmp_path, request)

    assert first == second


def test_countdown_command_prints_breakdown(capsys) -> None:
    code = run_countdown_command("2025-01-02T10:30:00Z", clock=CLOCK)
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert (payload["days"], payload["hours"], payload["minutes"], payload["seconds"]) == (1, 1, 30, 0)
    assert payload["tier"] == "urgent"


def test_countdown_command_rejects_bad_target(capsys) -> None:
    code = run_countdown_command("tomorrow", clock=CLOCK)
    payload = json.loads(capsys.readouterr().out)

    assert code == 2
    assert payload["error"]["code"] == "INVALID_DATE_FORMAT"


def test_main_plan_with_pinned_now(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path)
    output = tmp_path / "out.json"

    code = main(["--now", "2025-01-01T09:00:00Z", "plan", "--request", str(request), "--output", str(output)])

    assert code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["plan_output"]["plan_id"] == "plan-20250101-090000"


def test_topics_path_that_is_a_directory_is_a_load_error(tmp_path: Path) -> None:
    (tmp_path / "topics_dir").mkdir()
    request, _ = _base_files(tmp_path, topics_path="topics_dir")

    code, payload = _run(tmp_path, request)

    assert code == 2
    assert payload["error"]["code"] == "input_load_error"
    assert payload["error"]["details"][0]["code"] == "file_unreadable"
    assert payload["error"]["details"][0]["path"] == "$.topics_path"


def _reject_constant(token: str) -> None:
    raise ValueError(f"non-standard JSON constant {token}")


def test_non_finite_config_is_rejected_and_report_is_strict_json(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path, config={"urgency_steepness": float("nan")})
    assert "NaN" in request.read_text(encoding="utf-8")
    output = tmp_path / "plan_output.json"

    code = run_plan_command(str(request), str(output), clock=CLOCK)
    payload = json.loads(output.read_text(encoding="utf-8"), parse_constant=_reject_constant)

    assert code == 2
    assert payload["error"]["code"] == "validation_error"
    details = payload["error"]["details"]
    assert [item["code"] for item in details] == ["INVALID_CONFIG_VALUE"]


def test_main_countdown_accepts_options_after_the_subcommand(capsys) -> None:
    code = main(
        ["countdown", "--target", "2025-01-02T10:30:00Z", "--now", "2025-01-01T09:00:00Z", "--log-level", "DEBUG"]
    )
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert (payload["days"], payload["hours"], payload["minutes"]) == (1, 1, 30)
    assert payload["tier"] == "urgent"


def test_main_countdown_accepts_options_before_the_subcommand(capsys) -> None:
    code = main(["--now", "2025-01-01T09:00:00Z", "countdown", "--target", "2025-01-02"])
    payload = json.loads(capsys.readouterr().out)

    assert code == 0
    assert (payload["days"], payload["hours"]) == (0, 15)
    assert payload["tier"] == "critical"


def test_main_plan_accepts_now_after_the_subcommand(tmp_path: Path) -> None:
    request, _ = _base_files(tmp_path)
    output = tmp_path / "out.json"

    code = main(["plan", "--request", str(request), "--output", str(output), "--now", "2025-01-01T09:00:00Z"])

    assert code == 0
    assert json.loads(output.read_text(encoding="utf-8"))["plan_output"]["plan_id"] == "plan-20250101-090000"
