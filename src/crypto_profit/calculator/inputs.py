"""Raw form inputs and their validated numeric counterpart."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any

# Field name -> key used in the persisted JSON object.
STORAGE_FIELDS = {
    "token_name": "tokenName",
    "holdings": "holdings",
    "current_price": "currentPrice",
    "target_price": "targetPrice",
}


@dataclass(frozen=True)
class CalculatorInputs:
    """Form fields exactly as typed by the user."""

    token_name: str = ""
    holdings: str = ""
    current_price: str = ""
    target_price: str = ""

    def replace(self, **changes: str) -> "CalculatorInputs":
        unknown = set(changes) - {f.name for f in fields(self)}
        if unknown:
            raise ValueError(f"Unknown calculator fields: {sorted(unknown)}")
        return CalculatorInputs(**{**asdict(self), **changes})

    def to_storage(self) -> dict[str, str]:
        return {key: getattr(self, name) for name, key in STORAGE_FIELDS.items()}

    @classmethod
    def from_storage(cls, data: Any) -> "CalculatorInputs":
        """Build inputs from a persisted object; missing or empty keys become ``""``."""
        if not isinstance(data, dict):
            raise ValueError("stored calculator inputs must be a JSON object")
        values: dict[str, str] = {}
        for name, key in STORAGE_FIELDS.items():
            value = data.get(key) or ""
            if not isinstance(value, str):
                raise ValueError(f"stored field '{key}' must be a string")
            values[name] = value
        return cls(**values)


@dataclass(frozen=True)
class ParsedInputs:
    """Inputs that passed validation; produced only by ``validate_inputs``."""

    token_name: str
    holdings: float
    current_price: float
    target_price: float


@dataclass(frozen=True)
class CalculationResult:
    """Derived values at full float precision."""

    current_value: float
    future_value: float
    profit: float
    percentage_gain: float

    @property
    def is_gain(self) -> bool:
        return self.profit >= 0
