"""CLI behaviour tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sidedoc.cli import _apply_overrides, _build_parser, main
from sidedoc.config import SidedocConfig


def test_cli_accepts_sources_and_flags() -> None:
    parser = _build_parser()
    args = parser.parse_args(["-v", "-o", "out", "--highlighter", "pygments", "--fail-fast", "-j", "2", "a.go", "b.py"])

    assert args.verbose is True
    assert args.output == Path("out")
    assert args.highlighter == "pygments"
    assert args.fail_fast is True
    assert args.jobs == 2
    assert args.sources == ["a.go", "b.py"]


def test_cli_overrides_config_values(tmp_path: Path) -> None:
    args = _build_parser().parse_args(["-o", "out", "--highlighter", "pygments", "-j", "4", "--fail-fast"])

    config = _apply_overrides(SidedocConfig(root=tmp_path), args)

    assert config.output_dir == Path("out")
    assert config.highlighter.backend == "pygments"
    assert config.highlighter.executable == "pygmentize"
    assert config.max_workers == 4
    assert config.fail_fast is True


def test_cli_without_overrides_keeps_config(tmp_path: Path) -> None:
    original = SidedocConfig(root=tmp_path, fail_fast=True, max_workers=3)

    config = _apply_overrides(original, _build_parser().parse_args([]))

    assert config == original


def test_main_without_sources_writes_nothing(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)

    main([])

    assert list(tmp_path.iterdir()) == []


def test_main_generates_pages(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "hello.go").write_text("// Say hello.\nfunc hello() {}\n", encoding="utf-8")

    main(["--highlighter", "pygments", "hello.go"])

    page = tmp_path / "docs" / "hello.html"
    assert page.exists()
    assert "Say hello." in page.read_text(encoding="utf-8")
    assert (tmp_path / "docs" / "sidedoc.css").exists()


def test_main_exits_nonzero_on_failure(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "notes.xyz").write_text("text\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--highlighter", "pygments", "-o", "out", "notes.xyz"])

    assert excinfo.value.code == 1
    assert "notes.xyz" in capsys.readouterr().err
    assert not (tmp_path / "out" / "notes.html").exists()


def test_main_rejects_unknown_backend(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "hello.go").write_text("x\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["--highlighter", "chroma", "hello.go"])

    assert excinfo.value.code == 2


def test_main_reports_unreadable_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".sidedoc.yml").write_bytes(b"output_dir: \xff\n")
    (tmp_path / "hello.go").write_text("x\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["hello.go"])

    assert excinfo.value.code == 2
    assert "configuration error" in capsys.readouterr().err


def test_main_reads_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".sidedoc.yml").write_text(
        "output_dir: site\nhighlighter:\n  backend: pygments\n", encoding="utf-8"
    )
    (tmp_path / "tool.py").write_text("# A tool.\nprint('hi')\n", encoding="utf-8")

    main(["tool.py"])

    assert (tmp_path / "site" / "tool.html").exists()
