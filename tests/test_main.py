"""Tests for the command-line runner (no GUI)."""

import json
from pathlib import Path

import pytest

import main
from config.settings import AppSettings
from models.enums import SourceFormat


@pytest.fixture
def vocab_file(tmp_path):
    path = tmp_path / "vocab.txt"
    path.write_text(
        "дОм\nhouse\n\nкнИга\nbook\n\nкОтка\ncat\n\nсестрА\nsister\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _quiet(monkeypatch, tmp_path):
    monkeypatch.setattr(main, "setup_logging", lambda level: None)
    monkeypatch.delenv("BGVOCAB_FONTS", raising=False)
    monkeypatch.chdir(tmp_path)


def base_args(*extra):
    return main.build_arg_parser().parse_args(list(extra))


def test_cli_overrides_settings():
    settings = main.apply_cli_overrides(
        AppSettings(), base_args("--batch-size", "7", "--quiz", "--skip", "3", "--on-malformed", "skip")
    )
    assert settings.batch.size == 7
    assert settings.session.quiz is True
    assert settings.source.skip_entries == 3
    assert settings.source.on_malformed == "skip"


def test_resolve_source_flags():
    settings = AppSettings()
    assert main.resolve_source(settings, base_args("--en")) == (Path("bg-en.xml"), SourceFormat.TAGGED)
    assert main.resolve_source(settings, base_args("--small")) == (Path("vocab_small.txt"), SourceFormat.PAIRED)
    assert main.resolve_source(settings, base_args("--source", "x.xml")) == (Path("x.xml"), None)


def test_named_vocabulary_ignores_configured_format():
    settings = AppSettings()
    settings.source.format = "paired"
    assert main.resolve_source(settings, base_args("--en")) == (Path("bg-en.xml"), SourceFormat.TAGGED)
    assert main.resolve_source(settings, base_args("--en", "--format", "paired")) == (
        Path("bg-en.xml"),
        SourceFormat.PAIRED,
    )


def test_summary_and_json_export(vocab_file, tmp_path, capsys):
    out = tmp_path / "batch.json"
    code = main.run([
        "--source", str(vocab_file), "--config", str(tmp_path / "none.yaml"),
        "--batch-size", "3", "--batch-number", "1", "--export", "json", "--output", str(out),
    ])
    assert code == 0
    assert "Words in the dictionary: 4" in capsys.readouterr().out
    assert [e["key"] for e in json.loads(out.read_text(encoding="utf-8"))] == ["сестра"]


def test_empty_batch_exits_cleanly(vocab_file, tmp_path, capsys):
    code = main.run([
        "--source", str(vocab_file), "--config", str(tmp_path / "none.yaml"),
        "--batch-size", "3", "--batch-number", "9", "--export", "csv",
    ])
    assert code == 0
    assert "no words in vocabulary in this range" in capsys.readouterr().err


def test_small_batch_size_fails(vocab_file, tmp_path):
    code = main.run([
        "--source", str(vocab_file), "--config", str(tmp_path / "none.yaml"), "--batch-size", "2",
    ])
    assert code == 1


def test_missing_source_fails(tmp_path):
    code = main.run([
        "--source", str(tmp_path / "gone.txt"), "--config", str(tmp_path / "none.yaml"),
        "--batch-size", "3", "--export", "json",
    ])
    assert code == 1


def test_pdf_without_fonts_is_skipped(vocab_file, tmp_path, capsys):
    code = main.run([
        "--source", str(vocab_file), "--config", str(tmp_path / "none.yaml"),
        "--batch-size", "3", "--pdf",
    ])
    assert code == 0
    assert "Font directory not found" in capsys.readouterr().out
    assert not list(tmp_path.glob("*.pdf"))
