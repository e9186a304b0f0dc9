# SPDX-License-Identifier: MIT
"""Loading of configuration files and conformance vectors.

Conformance vectors are plain text files with one encoded identifier per
line, for the integers ``0, 1, 2, ...`` in order. Lines starting with ``#``
and blank lines are ignored so files can carry a descriptive header.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterator

import logfire
import yaml
from pydantic import ValidationError

from .encoder import SchrottId
from .error_handler import ErrorHandler, LoggingErrorHandler
from .models import AppConfig

DEFAULT_CONFIG_DIR = Path("config")
DEFAULT_CONFIG_FILE = Path("app.yaml")


def _read_file(path: Path, error_handler: ErrorHandler | None = None) -> str:
    """Return the contents of ``path``.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file cannot be read.
    """
    handler = error_handler or LoggingErrorHandler()
    with logfire.span("fs.read_text", attributes={"path": str(path)}):
        try:
            with path.open("r", encoding="utf-8") as file:
                text = file.read()
                logfire.debug("Read text file", path=str(path), bytes=len(text))
                return text
        except FileNotFoundError as exc:
            handler.handle(f"File not found: {path}", exc)
            raise
        except OSError as exc:
            handler.handle(f"Error reading file {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading {path}: {exc}"
            ) from exc


def load_app_config(
    base_dir: Path | str = DEFAULT_CONFIG_DIR,
    filename: Path | str = DEFAULT_CONFIG_FILE,
    error_handler: ErrorHandler | None = None,
) -> AppConfig:
    """Return application configuration read from ``base_dir/filename``.

    Raises:
        FileNotFoundError: If the file does not exist.
        RuntimeError: If the file is not valid YAML or fails validation.
    """
    handler = error_handler or LoggingErrorHandler()
    path = Path(base_dir) / Path(filename)
    with logfire.span("loader.load_app_config", attributes={"path": str(path)}):
        text = _read_file(path, handler)
        try:
            data = yaml.safe_load(text) or {}
            return AppConfig.model_validate(data)
        except (yaml.YAMLError, ValidationError) as exc:
            handler.handle(f"Invalid configuration in {path}", exc)
            raise RuntimeError(
                f"An error occurred while reading the configuration file: {exc}"
            ) from exc


def iter_vectors(text: str) -> Iterator[str]:
    """Yield identifiers from vector file ``text``, skipping comments."""
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        yield line


def load_vectors(
    path: Path | str, error_handler: ErrorHandler | None = None
) -> list[str]:
    """Return the expected identifiers listed in the vector file at ``path``."""
    path = Path(path)
    with logfire.span("loader.load_vectors", attributes={"path": str(path)}):
        vectors = list(iter_vectors(_read_file(path, error_handler)))
        logfire.debug("Loaded conformance vectors", path=str(path), count=len(vectors))
        return vectors


def write_vectors(
    encoder: SchrottId,
    path: Path | str,
    count: int = 10000,
    error_handler: ErrorHandler | None = None,
) -> None:
    """Write identifiers for ``0 .. count - 1`` to ``path``.

    The header records the configuration shape but never the key.

    Raises:
        RuntimeError: If the file cannot be written.
    """
    handler = error_handler or LoggingErrorHandler()
    path = Path(path)
    with logfire.span(
        "loader.write_vectors", attributes={"path": str(path), "count": count}
    ):
        lines = [
            f"# Encoded values for 0 to {count - 1}",
            f"# alphabet size {len(encoder.alphabet)}, min length "
            f"{encoder.min_length}, rounds {encoder.round_formula}",
        ]
        lines.extend(encoder.encode(value) for value in range(count))
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        except OSError as exc:
            handler.handle(f"Error writing file {path}", exc)
            raise RuntimeError(
                f"An error occurred while writing {path}: {exc}"
            ) from exc


__all__ = [
    "DEFAULT_CONFIG_DIR",
    "DEFAULT_CONFIG_FILE",
    "iter_vectors",
    "load_app_config",
    "load_vectors",
    "write_vectors",
]
