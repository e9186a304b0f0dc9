# SPDX-License-Identifier: MIT
"""Tests for configuration and vector file loading."""

from pathlib import Path

import pytest

from schrottid import SchrottId
from schrottid.alphabet import BASE58
from schrottid.error_handler import ErrorHandler, LoggingErrorHandler
from schrottid.loader import iter_vectors, load_app_config, load_vectors, write_vectors


class _RecordingHandler(ErrorHandler):
    def __init__(self) -> None:
        self.messages: list[str] = []

    def handle(self, message: str, exc: Exception | None = None) -> None:
        self.messages.append(message)


def test_iter_vectors_skips_comments_and_blanks() -> None:
    text = "# header\n\npAJ\n  \n# note\ng5B\n"
    assert list(iter_vectors(text)) == ["pAJ", "g5B"]


def test_write_then_load_vectors(
    encoder: SchrottId, tmp_path: Path, published_key: str
) -> None:
    path = tmp_path / "out" / "vectors.txt"
    write_vectors(encoder, path, count=50)
    text = path.read_text(encoding="utf-8")
    assert text.startswith("#")
    assert published_key not in text
    assert load_vectors(path) == encoder.encode_many(range(50))


def test_load_vectors_missing_file(tmp_path: Path) -> None:
    handler = _RecordingHandler()
    with pytest.raises(FileNotFoundError):
        load_vectors(tmp_path / "missing.txt", handler)
    assert handler.messages and "missing.txt" in handler.messages[0]


def test_load_app_config(tmp_path: Path) -> None:
    (tmp_path / "app.yaml").write_text(
        "alphabet: base58\nmin_length: 6\nround_formula: length_times_three\n",
        encoding="utf-8",
    )
    config = load_app_config(tmp_path, "app.yaml")
    assert config.alphabet == BASE58
    assert config.min_length == 6
    assert config.round_formula == "length_times_three"
    assert config.permutation is None


def test_load_app_config_rejects_invalid_values(tmp_path: Path) -> None:
    (tmp_path / "app.yaml").write_text("min_length: 0\n", encoding="utf-8")
    handler = _RecordingHandler()
    with pytest.raises(RuntimeError):
        load_app_config(tmp_path, "app.yaml", handler)
    assert handler.messages


def test_load_app_config_rejects_unknown_keys(tmp_path: Path) -> None:
    (tmp_path / "app.yaml").write_text("salt: pepper\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_app_config(tmp_path, "app.yaml")


def test_load_app_config_rejects_bad_yaml(tmp_path: Path) -> None:
    (tmp_path / "app.yaml").write_text("alphabet: [unclosed\n", encoding="utf-8")
    with pytest.raises(RuntimeError):
        load_app_config(tmp_path, "app.yaml")


def test_logging_error_handler_uses_logfire(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr(
        "schrottid.error_handler.logfire.error",
        lambda *args, **kwargs: calls.append((args, kwargs)),
    )
    LoggingErrorHandler().handle("boom", ValueError("bad"))
    LoggingErrorHandler().handle("plain")
    assert calls[0][1]["message"] == "boom"
    assert calls[0][1]["error_type"] == "ValueError"
    assert calls[1][1] == {"message": "plain"}


def test_write_vectors_reports_write_errors(
    encoder: SchrottId, tmp_path: Path
) -> None:
    handler = _RecordingHandler()
    with pytest.raises(RuntimeError, match="writing"):
        write_vectors(encoder, tmp_path, count=3, error_handler=handler)
    assert handler.messages and str(tmp_path) in handler.messages[0]
