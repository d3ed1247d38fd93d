"""Live token price lookup against a CoinGecko-style ``/simple/price`` API."""

from __future__ import annotations

import logging
import math
from decimal import Decimal
from typing import Any

import requests

from crypto_profit.config import PriceApiConfig
from crypto_profit.errors import FetchFailed, MissingTokenName, TokenNotFound

LOGGER = logging.getLogger(__name__)


class PriceClient:
    """Thin HTTP client for the simple price endpoint."""

    def __init__(
        self,
        config: PriceApiConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.config = config or PriceApiConfig()
        self._session = session or requests.Session()

    def fetch_price(self, token_name: str) -> float:
        """Return the quote for ``token_name``.

        Raises MissingTokenName, TokenNotFound or FetchFailed.
        """
        if not token_name.strip():
            raise MissingTokenName()

        token_id = token_name.lower()
        currency = self.config.vs_currency.lower()
        url = f"{self.config.base_url.rstrip('/')}/simple/price"
        LOGGER.info("Fetching %s price for '%s'", currency, token_id)
        try:
            response = self._session.get(
                url,
                params={"ids": token_id, "vs_currencies": currency},
                timeout=self.config.timeout_seconds,
            )
            response.raise_for_status()
            data: Any = response.json()
        except (requests.RequestException, ValueError) as exc:
            LOGGER.error("Price fetch error: %s", exc)
            raise FetchFailed() from exc

        if not isinstance(data, dict):
            LOGGER.error("Price fetch error: unexpected payload %r", data)
            raise FetchFailed()

        entry = data.get(token_id)
        price = entry.get(currency) if isinstance(entry, dict) else None
        if not price:
            raise TokenNotFound(token_name)
        try:
            value = float(price)
        except (TypeError, ValueError) as exc:
            LOGGER.error("Price fetch error: non-numeric quote %r", price)
            raise FetchFailed() from exc
        if not math.isfinite(value):
            LOGGER.error("Price fetch error: non-finite quote %r", price)
            raise FetchFailed()
        return value


def format_price(price: float) -> str:
    """Render a quote the way it is entered into the current-price field.

    Positional notation between 1e-6 and 1e21, exponent notation outside it.
    """
    magnitude = abs(price)
    if magnitude < 1e-6 or magnitude >= 1e21:
        return repr(price)
    if price == int(price):
        return str(int(price))
    return format(Decimal(repr(price)), "f")
