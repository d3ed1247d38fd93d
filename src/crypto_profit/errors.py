"""User-facing error taxonomy.

Every error carries the short message shown on the page. Library functions
raise these; the stateful components catch them at the external-call boundary
and keep ``exc.message`` as their current error.
"""

from __future__ import annotations


class CalculatorError(Exception):
    """Base class for recoverable, user-facing failures."""

    default_message = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ProviderMissing(CalculatorError):
    default_message = "MetaMask or Web3 wallet not detected. Please install one."


class UserRejected(CalculatorError):
    default_message = "Connection rejected by user"


class ConnectionFailed(CalculatorError):
    default_message = "Failed to connect wallet"


class MissingTokenName(CalculatorError):
    default_message = "Please enter a token name"


class InvalidHoldings(CalculatorError):
    default_message = "Please enter a valid holdings amount"


class InvalidCurrentPrice(CalculatorError):
    default_message = "Please enter a valid current price"


class InvalidTargetPrice(CalculatorError):
    default_message = "Please enter a valid target price"


class TokenNotFound(CalculatorError):
    def __init__(self, token_name: str) -> None:
        self.token_name = token_name
        super().__init__(f'Token "{token_name}" not found. Please check the name.')


class FetchFailed(CalculatorError):
    default_message = "Failed to fetch token price. Please try again."
