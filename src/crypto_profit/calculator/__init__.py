"""Profit calculator subpackage."""

from crypto_profit.calculator.form import ProfitForm
from crypto_profit.calculator.inputs import CalculationResult, CalculatorInputs, ParsedInputs
from crypto_profit.calculator.prices import PriceClient, format_price
from crypto_profit.calculator.profit import (
    compute_profit,
    format_percent,
    format_usd,
    parse_positive,
    result_frame,
    summary_sentence,
    validate_inputs,
)
from crypto_profit.calculator.storage import (
    JsonFileStore,
    LoadOutcome,
    MemoryStore,
    clear_inputs,
    load_inputs,
    save_inputs,
)

__all__ = [
    "ProfitForm",
    "CalculationResult",
    "CalculatorInputs",
    "ParsedInputs",
    "PriceClient",
    "format_price",
    "compute_profit",
    "format_percent",
    "format_usd",
    "parse_positive",
    "result_frame",
    "summary_sentence",
    "validate_inputs",
    "JsonFileStore",
    "LoadOutcome",
    "MemoryStore",
    "clear_inputs",
    "load_inputs",
    "save_inputs",
]
