"""CLI parser behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from doctoc.cli import _build_parser, main
from doctoc.platforms import Platform


def test_cli_defaults() -> None:
    args = _build_parser().parse_args(["README.md"])
    assert args.paths == ["README.md"]
    assert args.platform is None
    assert args.maxlevel is None
    assert args.main is None


def test_cli_platform_flags() -> None:
    parser = _build_parser()
    assert parser.parse_args(["--gitlab", "."]).platform is Platform.GITLAB
    assert parser.parse_args(["--bitbucket", "."]).platform is Platform.BITBUCKET


def test_cli_rejects_two_platforms() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["--gitlab", "--github", "."])


def test_cli_rejects_title_with_notitle() -> None:
    with pytest.raises(SystemExit):
        _build_parser().parse_args(["-t", "X", "-T", "."])


def test_cli_accepts_short_options() -> None:
    args = _build_parser().parse_args(["-s", "-m", "2", "--entryprefix", "*", "-v", "."])
    assert args.stdout is True
    assert args.maxlevel == "2"
    assert args.entryprefix == "*"
    assert args.verbose is True


@pytest.mark.parametrize("level", ["-1", "abc"])
def test_main_rejects_invalid_maxlevel(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, level: str
) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["-m", level, "README.md"])
    assert excinfo.value.code == 2


def test_main_updates_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "README.md"
    target.write_text("# Install\n\n## Configure\n", encoding="utf-8")

    main(["-q", str(target)])

    assert "- [Install](#install)" in target.read_text(encoding="utf-8")


def test_main_stdout_prints_toc_without_writing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    target = tmp_path / "README.md"
    target.write_text("# Install\n", encoding="utf-8")

    main(["-s", "-q", "--gitlab", str(target)])

    out = capsys.readouterr().out
    assert "- [Install](#install)" in out
    assert "should be updated" in out
    assert target.read_text(encoding="utf-8") == "# Install\n"


def test_main_reads_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".doctoc.yml").write_text("notitle: true\nentryprefix: '*'\n", encoding="utf-8")
    target = tmp_path / "README.md"
    target.write_text("# Install\n", encoding="utf-8")

    main(["-q", str(target)])

    content = target.read_text(encoding="utf-8")
    assert "* [Install](#install)" in content
    assert "Table of Contents" not in content


def test_main_exits_nonzero_when_a_file_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["-q", str(tmp_path / "missing.md")])
    assert excinfo.value.code == 1
