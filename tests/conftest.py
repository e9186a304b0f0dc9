# SPDX-License-Identifier: MIT
"""Test configuration for schrottid.

Puts ``src`` on the import path, keeps logfire output local and provides the
published base64 test configuration.
"""

from __future__ import annotations

import sys
from pathlib import Path

import logfire
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from schrottid.alphabet import BASE64  # noqa: E402
from schrottid.encoder import SchrottId  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

DATA_DIR = Path(__file__).resolve().parent / "data"

TEST_PERMUTATION = (
    "HwEMFAcAMAYEPxc4Dy4RAxAkEgstJggbGSMiKB0yHgk7OSsNMxoYKRMWNg49LzEFFTQKPDUhHAIs"
    "ICclOio+Nw=="
)


@pytest.fixture(autouse=True)
def _clear_schrottid_env(monkeypatch):
    """Ensure ambient ``SCHROTTID_*`` variables do not leak into tests."""
    for name in (
        "ALPHABET",
        "PERMUTATION",
        "MIN_LENGTH",
        "ROUND_FORMULA",
        "LOG_LEVEL",
        "LOGFIRE_TOKEN",
    ):
        monkeypatch.delenv(f"SCHROTTID_{name}", raising=False)


@pytest.fixture
def published_key() -> str:
    return TEST_PERMUTATION


@pytest.fixture
def encoder() -> SchrottId:
    """Encoder for the published base64 configuration."""
    return SchrottId(BASE64, TEST_PERMUTATION, 3)


@pytest.fixture
def control_file() -> Path:
    return DATA_DIR / "control.txt"
