"""Wallet session state machine."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from crypto_profit.errors import (
    CalculatorError,
    ConnectionFailed,
    ProviderMissing,
    UserRejected,
)
from crypto_profit.wallet.provider import (
    USER_REJECTED_CODE,
    ProviderRpcError,
    WalletProvider,
)

LOGGER = logging.getLogger(__name__)


@dataclass
class WalletSession:
    """Connection state exposed to the rest of the page."""

    connected: bool = False
    address: str | None = None
    error: str | None = None
    is_loading: bool = False


def _noop_connect(address: str) -> None:
    return None


def _noop_disconnect() -> None:
    return None


class WalletConnector:
    """Connects to a wallet provider and tracks the active account.

    The provider is injected; ``None`` means no wallet is available.
    """

    def __init__(
        self,
        provider: WalletProvider | None,
        on_connect: Callable[[str], None] = _noop_connect,
        on_disconnect: Callable[[], None] = _noop_disconnect,
    ) -> None:
        self.provider = provider
        self.on_connect = on_connect
        self.on_disconnect = on_disconnect
        self.session = WalletSession()

    @property
    def is_connected(self) -> bool:
        return self.session.connected

    @property
    def address(self) -> str | None:
        return self.session.address

    def check_existing_connection(self) -> bool:
        """Adopt an already-authorized account without prompting the user."""
        if self.provider is None:
            return False
        try:
            accounts = self.provider.request("eth_accounts")
            if not isinstance(accounts, list) or not accounts:
                return False
            self._adopt(str(accounts[0]))
        except Exception as exc:
            LOGGER.warning("Error checking wallet connection: %s", exc)
            self.session.address = None
            self.session.connected = False
            return False
        return True

    def connect(self) -> bool:
        """Request account access; failures end up in ``session.error``."""
        self.session.is_loading = True
        self.session.error = None
        try:
            accounts = self._request_accounts()
            if accounts:
                self._adopt(str(accounts[0]))
        except CalculatorError as exc:
            LOGGER.error("Wallet connection error: %s", exc)
            self.session.error = exc.message
        finally:
            self.session.is_loading = False
        return self.session.connected

    def disconnect(self) -> None:
        """Forget the active account locally; provider authorization is kept."""
        self.session.address = None
        self.session.connected = False
        self.session.error = None
        self.on_disconnect()

    def _request_accounts(self) -> list[str]:
        if self.provider is None:
            raise ProviderMissing()
        try:
            accounts = self.provider.request("eth_requestAccounts")
        except ProviderRpcError as exc:
            if exc.code == USER_REJECTED_CODE:
                raise UserRejected() from exc
            raise ConnectionFailed() from exc
        except Exception as exc:
            raise ConnectionFailed() from exc
        if accounts is None:
            return []
        if not isinstance(accounts, list):
            raise ConnectionFailed()
        return accounts

    def _adopt(self, address: str) -> None:
        self.session.address = address
        self.session.connected = True
        self.on_connect(address)
