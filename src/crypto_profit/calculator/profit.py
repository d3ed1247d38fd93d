"""Input validation, the profit formula and result formatting."""

from __future__ import annotations

import math

import pandas as pd

from crypto_profit.calculator.inputs import CalculationResult, CalculatorInputs, ParsedInputs
from crypto_profit.errors import (
    InvalidCurrentPrice,
    InvalidHoldings,
    InvalidTargetPrice,
    MissingTokenName,
)


def parse_positive(raw: str) -> float | None:
    """Parse a decimal string; return ``None`` unless it is finite and > 0."""
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    return value


def validate_inputs(inputs: CalculatorInputs) -> ParsedInputs:
    """Validate raw inputs in fixed order, raising on the first failure."""
    if not inputs.token_name.strip():
        raise MissingTokenName()

    holdings = parse_positive(inputs.holdings)
    if holdings is None:
        raise InvalidHoldings()

    current_price = parse_positive(inputs.current_price)
    if current_price is None:
        raise InvalidCurrentPrice()

    target_price = parse_positive(inputs.target_price)
    if target_price is None:
        raise InvalidTargetPrice()

    return ParsedInputs(
        token_name=inputs.token_name,
        holdings=holdings,
        current_price=current_price,
        target_price=target_price,
    )


def compute_profit(parsed: ParsedInputs) -> CalculationResult:
    """Apply the holding-period profit formula."""
    current_value = parsed.holdings * parsed.current_price
    future_value = parsed.holdings * parsed.target_price
    profit = future_value - current_value
    percentage_gain = profit / current_value * 100
    return CalculationResult(
        current_value=current_value,
        future_value=future_value,
        profit=profit,
        percentage_gain=percentage_gain,
    )


def format_usd(value: float) -> str:
    if value < 0:
        return f"-${abs(value):.2f}"
    return f"${value:.2f}"


def format_percent(value: float) -> str:
    return f"{value:.2f}%"


def summary_sentence(inputs: CalculatorInputs, result: CalculationResult) -> str:
    return (
        f"If {inputs.token_name} reaches ${inputs.target_price}, your "
        f"{inputs.holdings} tokens will be worth {format_usd(result.future_value)}."
    )


def result_frame(result: CalculationResult) -> pd.DataFrame:
    """Tabulate a result as display rows: metric, formatted value, gain flag."""
    rows = [
        ("Current Value", format_usd(result.current_value), None),
        ("Future Value", format_usd(result.future_value), None),
        ("Profit/Loss", format_usd(result.profit), result.profit >= 0),
        ("Percentage Gain", format_percent(result.percentage_gain), result.percentage_gain >= 0),
    ]
    return pd.DataFrame(rows, columns=["metric", "value", "gain"])
