"""Wallet provider boundary and session subpackage."""

from crypto_profit.wallet.provider import (
    JsonRpcWalletProvider,
    ProviderRpcError,
    StaticWalletProvider,
    WalletProvider,
    resolve_provider,
)
from crypto_profit.wallet.session import WalletConnector, WalletSession

__all__ = [
    "JsonRpcWalletProvider",
    "ProviderRpcError",
    "StaticWalletProvider",
    "WalletProvider",
    "resolve_provider",
    "WalletConnector",
    "WalletSession",
]
