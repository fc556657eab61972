from __future__ import annotations

from pathlib import Path

import pytest

from ketodot import cli

TUPLES = "a:o1#r1@x\nb:o2#r2@(a:o1#r1)\n"


@pytest.fixture(autouse=True)
def _quiet_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli, "configure_logging", lambda **kwargs: None)


def test_prints_dot_to_stdout(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    assert cli.main([str(source)]) == 0
    out = capsys.readouterr().out
    assert out == (
        "digraph {\n"
        '  "a:o1" -> "x" [ label="r1", color="sienna4"];\n'
        '  "b:o2" -> "a:o1" [ label="r2", color="sienna4"];\n'
        "}\n"
    )


def test_writes_output_file(tmp_path: Path) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    target = tmp_path / "graph.dot"
    assert cli.main([str(source), "-o", str(target)]) == 0
    assert target.read_text(encoding="utf-8").startswith("digraph {\n")


def test_profile_palette_is_used(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    profile = tmp_path / "profile.yaml"
    profile.write_text("palette: [navy, teal]\n", encoding="utf-8")
    assert cli.main([str(source), "--profile", str(profile)]) == 0
    out = capsys.readouterr().out
    assert out.count('color="navy"') == 2


def test_image_to_stdout_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    assert cli.main([str(source), "-f", "png"]) == 1
    assert capsys.readouterr().out == ""


def test_parse_error_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "acl.keto"
    source.write_text("noseparator\n", encoding="utf-8")
    assert cli.main([str(source)]) == 1
    assert capsys.readouterr().out == ""


def test_watch_runs_once_then_polls(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")

    def _interrupt(self, max_polls=None) -> None:
        raise KeyboardInterrupt

    monkeypatch.setattr(cli.SourceWatcher, "run_forever", _interrupt)
    assert cli.main([str(source), "-w"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Watching {source}\n")
    assert out.count("digraph {") == 1


def test_unwritable_output_exits_with_error(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "acl.keto"
    source.write_text(TUPLES, encoding="utf-8")
    target = tmp_path / "missing" / "graph.dot"
    assert cli.main([str(source), "-o", str(target)]) == 1
    assert not target.exists()
