"""Wallet provider boundary and concrete providers."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence
from typing import Any, Protocol

import requests

from crypto_profit.config import WalletConfig

LOGGER = logging.getLogger(__name__)

USER_REJECTED_CODE = 4001
INTERNAL_ERROR_CODE = -32603


class ProviderRpcError(Exception):
    """Error reported by a wallet provider, identified by its RPC code."""

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"[{code}] {message}")


class WalletProvider(Protocol):
    """Request-style wallet API (``eth_accounts``, ``eth_requestAccounts``)."""

    def request(self, method: str, params: Sequence[Any] | None = None) -> Any:
        ...


class JsonRpcWalletProvider:
    """Wallet provider backed by a JSON-RPC 2.0 HTTP endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self._session = session or requests.Session()
        self._ids = itertools.count(1)

    def request(self, method: str, params: Sequence[Any] | None = None) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": list(params or []),
        }
        LOGGER.debug("JSON-RPC %s -> %s", method, self.url)
        try:
            response = self._session.post(self.url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            body = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise ProviderRpcError(INTERNAL_ERROR_CODE, f"transport error: {exc}") from exc

        if not isinstance(body, dict):
            raise ProviderRpcError(INTERNAL_ERROR_CODE, "malformed JSON-RPC response")
        error = body.get("error")
        if error:
            raise ProviderRpcError(
                int(error.get("code", INTERNAL_ERROR_CODE)),
                str(error.get("message", "unknown error")),
            )
        return body.get("result")


class StaticWalletProvider:
    """In-memory provider with a fixed account list.

    ``eth_accounts`` only reports accounts once they have been authorized
    through ``eth_requestAccounts``; ``reject=True`` simulates the user
    declining the prompt.
    """

    def __init__(
        self,
        accounts: Sequence[str],
        authorized: bool = False,
        reject: bool = False,
    ) -> None:
        self.accounts = list(accounts)
        self.authorized = authorized
        self.reject = reject
        self.calls: list[str] = []

    def request(self, method: str, params: Sequence[Any] | None = None) -> Any:
        self.calls.append(method)
        if method == "eth_accounts":
            return list(self.accounts) if self.authorized else []
        if method == "eth_requestAccounts":
            if self.reject:
                raise ProviderRpcError(USER_REJECTED_CODE, "User rejected the request.")
            self.authorized = True
            return list(self.accounts)
        raise ProviderRpcError(-32601, f"method not supported: {method}")


def resolve_provider(config: WalletConfig) -> WalletProvider | None:
    """Return the configured wallet provider, or ``None`` when none is set up."""
    if not config.provider_url:
        return None
    return JsonRpcWalletProvider(config.provider_url, timeout=config.timeout_seconds)
