"""Scenario-style integration tests against a real git repository."""

from __future__ import annotations

import json
import shutil
import subprocess
from pathlib import Path

import pytest
from click.testing import CliRunner
from eventdiff.cli import cli

pytestmark = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")

ORDER_FILE = Path("schemas") / "order_created.json"


def _git(repo: Path, *arguments: str) -> str:
    completed = subprocess.run(
        [
            "git",
            "-c",
            "user.name=eventdiff tests",
            "-c",
            "user.email=eventdiff@example.com",
            "-c",
            "commit.gpgsign=false",
            *arguments,
        ],
        cwd=repo,
        check=True,
        capture_output=True,
        text=True,
    )
    return completed.stdout.strip()


def _order_schema(
    *, total_type: str = "number", required: tuple[str, ...] = ("order_id", "payment_method")
) -> dict:
    return {
        "type": "object",
        "properties": {
            "order_id": {"type": "string"},
            "total_amount": {"type": total_type},
            "payment_method": {"type": "string", "enum": ["card", "invoice"]},
        },
        "required": list(required),
    }


def _commit(repo: Path, files: dict[Path, dict | str | None], message: str) -> str:
    for relative_path, content in files.items():
        target = repo / relative_path
        if content is None:
            target.unlink()
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        text = content if isinstance(content, str) else json.dumps(content, indent=2)
        target.write_text(text, encoding="utf-8")
    _git(repo, "add", "--all")
    _git(repo, "commit", "--quiet", "--allow-empty", "-m", message)
    return _git(repo, "rev-parse", "HEAD")


@pytest.fixture()
def repo(tmp_path: Path) -> Path:
    _git(tmp_path, "init", "--quiet")
    return tmp_path


def _run_gate(repo: Path, base: str, head: str):
    result = CliRunner().invoke(cli, [f"--base={base}", f"--head={head}", f"--repo={repo}"])
    output = result.output
    return result.exit_code, output.splitlines(), json.loads(output[output.index("\n{") :])


def test_given_total_amount_type_change_when_gated_then_run_fails(repo: Path) -> None:
    base = _commit(repo, {ORDER_FILE: _order_schema()}, "base")
    head = _commit(repo, {ORDER_FILE: _order_schema(total_type="string")}, "head")

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 1
    assert lines[0] == "EventDiff: FAIL | blocks=1 warns=0 passes=0"
    changes = report["reports"][0]["changes"]
    assert changes == [
        {
            "severity": "block",
            "kind": "TYPE_CHANGED",
            "path": "total_amount",
            "message": "Type changed 'total_amount': number → string",
        }
    ]
    assert report["base"] == base
    assert report["head"] == head


def test_given_required_field_made_optional_when_gated_then_run_warns(repo: Path) -> None:
    base = _commit(repo, {ORDER_FILE: _order_schema()}, "base")
    head = _commit(repo, {ORDER_FILE: _order_schema(required=("order_id",))}, "head")

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 0
    assert lines[0] == "EventDiff: WARN | blocks=0 warns=1 passes=0"
    assert report["summary"]["decision"] == "PASS"
    assert report["reports"][0]["changes"][0]["kind"] == "REQUIRED_BECOMES_OPTIONAL"


def test_given_optional_field_added_when_gated_then_run_passes(repo: Path) -> None:
    schema = _order_schema()
    base = _commit(repo, {ORDER_FILE: schema}, "base")
    schema["properties"]["coupon_code"] = {"type": "string"}
    head = _commit(repo, {ORDER_FILE: schema}, "head")

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 0
    assert lines[0] == "EventDiff: PASS | blocks=0 warns=0 passes=1"
    assert report["reports"][0]["changes"][0]["kind"] == "FIELD_ADDED"
    assert report["reports"][0]["changes"][0]["severity"] == "pass"


def test_given_schema_file_deleted_when_gated_then_run_fails(repo: Path) -> None:
    base = _commit(repo, {ORDER_FILE: _order_schema()}, "base")
    head = _commit(repo, {ORDER_FILE: None}, "head")

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 1
    assert "BLOCK: FILE_REMOVED - Schema file removed: schemas/order_created.json" in lines
    assert report["reports"][0]["summary"]["decision"] == "FAIL"


def test_given_broken_and_valid_files_when_gated_then_every_file_is_reported(repo: Path) -> None:
    refund_file = Path("schemas") / "refund_issued.json"
    base = _commit(repo, {ORDER_FILE: _order_schema(), refund_file: _order_schema()}, "base")
    head = _commit(
        repo,
        {ORDER_FILE: "{not json", refund_file: _order_schema(total_type="integer")},
        "head",
    )

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 1
    assert [item["file"] for item in report["reports"]] == [
        "schemas/order_created.json",
        "schemas/refund_issued.json",
    ]
    assert "BLOCK: INVALID_JSON - Invalid JSON in head version of schemas/order_created.json." in (
        lines
    )
    assert report["summary"]["blocks"] == 2


def test_given_non_ascii_schema_filename_when_gated_then_file_is_diffed(repo: Path) -> None:
    umlaut_file = Path("schemas") / "bestellung_änderung.json"
    base = _commit(repo, {umlaut_file: _order_schema()}, "base")
    head = _commit(repo, {umlaut_file: _order_schema(total_type="integer")}, "head")

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 1
    assert report["reports"][0]["file"] == "schemas/bestellung_änderung.json"
    assert [change["kind"] for change in report["reports"][0]["changes"]] == ["TYPE_CHANGED"]
    assert not any("INVALID_JSON" in line for line in lines)


def test_given_no_schema_changes_when_gated_then_run_passes(repo: Path) -> None:
    base = _commit(repo, {ORDER_FILE: _order_schema()}, "base")
    head = _commit(repo, {Path("README.md"): "docs only\n"}, "head")

    exit_code, lines, report = _run_gate(repo, base, head)

    assert exit_code == 0
    assert lines[2] == "ACTION: No schema changes detected"
    assert report["reports"] == []
