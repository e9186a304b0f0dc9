# SPDX-License-Identifier: MIT
"""Pydantic models describing encoder configuration files.

:class:`AppConfig` mirrors ``config/app.yaml``. It checks shapes and simple
bounds; the encoder itself performs the alphabet and key validation when it
is built from the configuration.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .alphabet import BASE64, resolve_alphabet
from .diffusion import DEFAULT_ROUND_FORMULA, RoundFormula


class StrictModel(BaseModel):
    """Base model with strict settings to prevent shape drift."""

    model_config = ConfigDict(extra="forbid", str_strip_whitespace=False)


class AppConfig(StrictModel):
    """Top-level application configuration for the encoder and CLI."""

    alphabet: Annotated[
        str,
        Field(
            min_length=1,
            description="Alphabet symbols or a named alphabet such as 'base58'.",
        ),
    ] = BASE64
    permutation: str | None = Field(
        None, description="Base64 permutation key for the alphabet.", repr=False
    )
    min_length: int = Field(
        3, gt=0, description="Minimum length of encoded identifiers."
    )
    round_formula: RoundFormula = Field(
        DEFAULT_ROUND_FORMULA, description="Round-count formula for the transform."
    )
    log_level: Annotated[
        str, Field(min_length=1, description="Logging verbosity level.")
    ] = "warn"

    @field_validator("alphabet")
    @classmethod
    def _resolve_named_alphabet(cls, value: str) -> str:
        """Expand named alphabets to their symbols."""
        return resolve_alphabet(value)


__all__ = ["AppConfig", "StrictModel"]
