"""UI helper utilities (pure logic, testable without Streamlit)."""

from __future__ import annotations

import os
from pathlib import Path

import pandas as pd

from crypto_profit.calculator.inputs import CalculationResult
from crypto_profit.calculator.profit import result_frame
from crypto_profit.config import AppConfig, build_config

CONFIG_ENV_VAR = "CRYPTO_PROFIT_CONFIG"

# Widget key -> CalculatorInputs field.
FIELD_WIDGETS = {
    "token-name": "token_name",
    "holdings": "holdings",
    "current-price": "current_price",
    "target-price": "target_price",
}



def load_page_config(environ: dict[str, str] | None = None) -> AppConfig:
    """Build config from the YAML file named by ``CRYPTO_PROFIT_CONFIG``, if any."""
    env = os.environ if environ is None else environ
    path = env.get(CONFIG_ENV_VAR)
    if not path:
        return AppConfig()
    if not Path(path).expanduser().exists():
        raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {path}")
    return build_config(config_path=Path(path).expanduser())



def result_cards(result: CalculationResult) -> list[dict[str, str]]:
    """Turn a result into card specs: label, formatted value and tone."""
    cards = []
    for row in result_frame(result).itertuples(index=False):
        if pd.isna(row.gain):
            tone = "neutral"
        else:
            tone = "gain" if row.gain else "loss"
        cards.append({"label": row.metric, "value": row.value, "tone": tone})
    return cards
