# SPDX-License-Identifier: MIT
"""Centralised application configuration management.

This module exposes :class:`Settings`, a ``pydantic-settings`` model that
combines values sourced from the YAML configuration file and environment
variables. Environment variables (including a ``.env`` file) take precedence
over file-based values and the merged configuration is validated before use.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .alphabet import BASE64, resolve_alphabet
from .diffusion import DEFAULT_ROUND_FORMULA, RoundFormula
from .encoder import SchrottId
from .loader import DEFAULT_CONFIG_DIR, DEFAULT_CONFIG_FILE, load_app_config
from .models import AppConfig


class Settings(BaseSettings):
    """Encoder settings combining file-based and environment configuration."""

    alphabet: str = Field(BASE64, min_length=1, description="Alphabet symbols.")
    permutation: str | None = Field(
        None, description="Base64 permutation key.", repr=False
    )
    min_length: int = Field(3, gt=0, description="Minimum identifier length.")
    round_formula: RoundFormula = Field(
        DEFAULT_ROUND_FORMULA, description="Round-count formula for the transform."
    )
    log_level: str = Field("warn", description="Logging verbosity level.")
    logfire_token: str | None = Field(
        None, description="Logfire authentication token, if available.", repr=False
    )

    model_config = SettingsConfigDict(
        env_prefix="SCHROTTID_", env_file=".env", extra="ignore"
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File values arrive as init kwargs; the environment overrides them.
        return env_settings, dotenv_settings, init_settings, file_secret_settings

    @field_validator("alphabet")
    @classmethod
    def _resolve_named_alphabet(cls, value: str) -> str:
        return resolve_alphabet(value)

    def encoder(self) -> SchrottId:
        """Return an encoder built from these settings.

        Raises:
            RuntimeError: No permutation key is configured.
            SchrottIdError: The configured values are rejected by the encoder.
        """
        if not self.permutation:
            raise RuntimeError(
                "No permutation key configured. Generate one with "
                "'schrottid generate' and set SCHROTTID_PERMUTATION."
            )
        return SchrottId(
            self.alphabet, self.permutation, self.min_length, self.round_formula
        )


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load and validate application settings.

    Configuration values are read from ``config_path`` when given, otherwise
    from ``config/app.yaml`` if that file exists, and then merged with
    environment variables. When a value is provided in both sources the
    environment variable wins.

    Args:
        config_path: Optional path to a YAML configuration file.

    Returns:
        Settings: Fully validated application configuration.

    Raises:
        FileNotFoundError: ``config_path`` was given but does not exist.
        RuntimeError: If configuration values are invalid.
    """
    if config_path:
        cfg_path = Path(config_path)
        config = load_app_config(cfg_path.parent, cfg_path.name)
    elif (DEFAULT_CONFIG_DIR / DEFAULT_CONFIG_FILE).exists():
        config = load_app_config()
    else:
        config = AppConfig()
    try:
        return Settings(**config.model_dump())
    except ValidationError as exc:
        # Summarise validation issues so the caller receives clear feedback.
        details = "; ".join(
            f"{'.'.join(map(str, error['loc']))}: {error['msg']}"
            for error in exc.errors()
        )
        raise RuntimeError(f"Invalid configuration: {details}") from exc


__all__ = ["Settings", "load_settings"]
