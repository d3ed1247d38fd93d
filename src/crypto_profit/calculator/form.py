"""Stateful profit form: raw fields, persistence, price lookup and results."""

from __future__ import annotations

import logging

from crypto_profit.calculator.inputs import CalculationResult, CalculatorInputs
from crypto_profit.calculator.prices import PriceClient, format_price
from crypto_profit.calculator.profit import compute_profit, validate_inputs
from crypto_profit.calculator.storage import (
    KeyValueStore,
    LoadOutcome,
    clear_inputs,
    load_inputs,
    save_inputs,
)
from crypto_profit.config import STORAGE_KEY
from crypto_profit.errors import CalculatorError

LOGGER = logging.getLogger(__name__)


class ProfitForm:
    """Holds the calculator draft and exposes the page actions on it.

    Every field change is written straight through to ``store``. Errors from
    validation and price lookup never escape; they land in ``self.error``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        price_client: PriceClient | None = None,
        storage_key: str = STORAGE_KEY,
    ) -> None:
        self.store = store
        self.price_client = price_client or PriceClient()
        self.storage_key = storage_key
        self.inputs = CalculatorInputs()
        self.result: CalculationResult | None = None
        self.error: str | None = None
        self.is_loading_price = False

    def load_persisted_inputs(self) -> LoadOutcome:
        outcome = load_inputs(self.store, self.storage_key)
        if outcome.ok:
            self.inputs = outcome.inputs
        return outcome

    def persist_inputs(self) -> None:
        try:
            save_inputs(self.store, self.storage_key, self.inputs)
        except OSError as exc:
            LOGGER.error("Error saving calculator inputs: %s", exc)

    def set_field(self, name: str, value: str) -> None:
        self.set_inputs(self.inputs.replace(**{name: value}))

    def set_inputs(self, inputs: CalculatorInputs) -> None:
        if inputs == self.inputs:
            return
        self.inputs = inputs
        self.persist_inputs()

    def fetch_live_price(self) -> float | None:
        """Look up the token's live price and adopt it as the current price."""
        self.error = None
        self.is_loading_price = True
        try:
            price = self.price_client.fetch_price(self.inputs.token_name)
        except CalculatorError as exc:
            self.error = exc.message
            return None
        finally:
            self.is_loading_price = False
        self.set_field("current_price", format_price(price))
        return price

    def calculate(self) -> CalculationResult | None:
        self.error = None
        self.result = None
        try:
            parsed = validate_inputs(self.inputs)
        except CalculatorError as exc:
            self.error = exc.message
            return None
        self.result = compute_profit(parsed)
        LOGGER.debug("Calculated %s", self.result)
        return self.result

    def reset(self) -> None:
        self.inputs = CalculatorInputs()
        self.result = None
        self.error = None
        try:
            clear_inputs(self.store, self.storage_key)
        except OSError as exc:
            LOGGER.error("Error clearing saved calculator inputs: %s", exc)
