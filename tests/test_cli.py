from __future__ import annotations

import json
from pathlib import Path

import pytest

from embedcode.cli import main
from embedcode.exit_codes import ERR_CONFIG, ERR_DRIFT, OK
from tests.helpers import doc_lines, fenced_block, run_embed_code

ROOT_FLAGS = ("--code-path", "code", "--docs-path", "docs")


def test_check_exits_non_zero_on_drift(workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(workspace)
    code = main(["--mode", "check", *ROOT_FLAGS, "--quiet"])
    assert code == ERR_DRIFT
    err = capsys.readouterr().err
    assert "documentation is out of date" in err
    assert "- whole-file-fragment.md" in err


def test_embed_then_check(workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(workspace)
    assert main(["--mode", "embed", *ROOT_FLAGS]) == OK
    out = capsys.readouterr().out
    assert "embed: 5 documentation files processed, 4 updated, 0 out of date" in out
    assert (workspace / "build/fragments/org/example/Hello.java").is_file()
    block = fenced_block(doc_lines(workspace / "docs/whole-file-fragment.md"), 'fragment="Hello class"')
    assert len(block) == 28
    assert main(["--mode", "check", *ROOT_FLAGS]) == OK


def test_json_summary(workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(workspace)
    code = main(["--mode", "check", *ROOT_FLAGS, "--json", "--quiet", "--run-id", "cli-test"])
    assert code == ERR_DRIFT
    captured = capsys.readouterr()
    payload = json.loads(captured.out)
    assert payload["schema_version"] == 1
    assert payload["tool"] == "embed-code"
    assert payload["status"] == "fail"
    assert payload["run_id"] == "cli-test"
    assert payload["report"]["mode"] == "check"
    error = json.loads(captured.err.strip().splitlines()[-1])
    assert error["errors"][0]["code"] == ERR_DRIFT
    assert error["errors"][0]["kind"] == "unexpected_diff"


def test_analyze_uses_configured_analytics_dir(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(workspace)
    code = main(["--mode", "analyze", *ROOT_FLAGS, "--analytics-dir", "reports", "--quiet"])
    assert code == ERR_DRIFT
    assert (workspace / "reports/embeddings-changed-files.txt").is_file()
    assert (workspace / "reports/embeddings-not-found-files.txt").is_file()
    assert not (workspace / "build/fragments").exists()


def test_config_file_run(workspace: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(workspace)
    (workspace / "embed-code.yml").write_text("code-path: code\ndocs-path: docs\n", encoding="utf-8")
    assert main(["--mode", "embed", "--config-file-path", "embed-code.yml", "--quiet"]) == OK


def test_validation_failure_touches_nothing(workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(workspace)
    code = main(["--mode", "embed", "--code-path", "code"])
    assert code == ERR_CONFIG
    assert "must both be set" in capsys.readouterr().err
    assert not (workspace / "build").exists()


def test_missing_mode(workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(workspace)
    assert main(list(ROOT_FLAGS)) == ERR_CONFIG
    assert "mode must be set" in capsys.readouterr().err


def test_verbose_and_quiet_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        main(["--mode", "check", "--verbose", "--quiet"])


def test_json_logs(workspace: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.chdir(workspace)
    main(["--mode", "embed", *ROOT_FLAGS, "--log-format", "json", "--run-id", "log-test"])
    events = [json.loads(line) for line in capsys.readouterr().err.splitlines() if line.startswith("{")]
    actions = {(event["component"], event["action"]) for event in events}
    assert ("fragmentation", "start") in actions
    assert ("embed", "updated") in actions
    assert all(event["run_id"] == "log-test" for event in events)


@pytest.mark.integration
def test_module_entrypoint(workspace: Path) -> None:
    proc = run_embed_code("--mode", "check", *ROOT_FLAGS, "--quiet", cwd=workspace)
    assert proc.returncode == ERR_DRIFT
    proc = run_embed_code("--mode", "embed", *ROOT_FLAGS, "--quiet", cwd=workspace)
    assert proc.returncode == OK, proc.stderr
    proc = run_embed_code("--version", cwd=workspace)
    assert proc.stdout.startswith("embed-code ")
