"""Configuration models and helpers for the crypto profit calculator."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

STORAGE_KEY = "crypto_calculator_inputs"


class PriceApiConfig(BaseModel):
    """Public price lookup API settings."""

    model_config = ConfigDict(extra="forbid")

    base_url: str = "https://api.coingecko.com/api/v3"
    vs_currency: str = "usd"
    timeout_seconds: float = Field(default=10.0, gt=0)


class WalletConfig(BaseModel):
    """Wallet provider settings.

    With no ``provider_url`` the wallet provider is treated as missing.
    """

    model_config = ConfigDict(extra="forbid")

    provider_url: str | None = None
    timeout_seconds: float = Field(default=30.0, gt=0)


class StorageConfig(BaseModel):
    """Local persistence settings for calculator inputs."""

    model_config = ConfigDict(extra="forbid")

    path: str = "~/.crypto_profit/storage.json"
    key: str = STORAGE_KEY

    @property
    def resolved_path(self) -> Path:
        return Path(self.path).expanduser()


class AppConfig(BaseModel):
    """Top-level package configuration."""

    model_config = ConfigDict(extra="forbid")

    price_api: PriceApiConfig = Field(default_factory=PriceApiConfig)
    wallet: WalletConfig = Field(default_factory=WalletConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load raw YAML config into a dictionary."""
    with Path(path).open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}
    if not isinstance(data, dict):
        raise ValueError("YAML configuration must decode to a mapping object.")
    return data


def build_config(config_path: str | Path | None = None, overrides: dict[str, Any] | None = None) -> AppConfig:
    """Build application config with precedence: overrides > YAML > defaults."""
    merged: dict[str, Any] = {}
    if config_path is not None:
        merged.update(load_yaml_config(config_path))
    if overrides:
        merged = deep_merge(merged, overrides)
    return AppConfig.model_validate(merged)


def merge_config(config: AppConfig, overrides: dict[str, Any]) -> AppConfig:
    """Return a new config with nested overrides applied on top of ``config``."""
    merged = deep_merge(config.model_dump(), overrides)
    return AppConfig.model_validate(merged)


def deep_merge(base: dict[str, Any], patch: dict[str, Any]) -> dict[str, Any]:
    """Merge nested dictionaries recursively."""
    out = dict(base)
    for key, value in patch.items():
        if isinstance(value, dict) and isinstance(out.get(key), dict):
            out[key] = deep_merge(out[key], value)
        else:
            out[key] = value
    return out
