"""Page shell: gates the profit form behind a connected wallet."""

from __future__ import annotations

from crypto_profit.calculator.form import ProfitForm
from crypto_profit.calculator.prices import PriceClient
from crypto_profit.calculator.storage import JsonFileStore, KeyValueStore, LoadOutcome
from crypto_profit.config import STORAGE_KEY, AppConfig
from crypto_profit.wallet.provider import WalletProvider, resolve_provider
from crypto_profit.wallet.session import WalletConnector


class PageShell:
    """Composes the wallet connector and the profit form.

    The shell only mirrors the connector's connected flag and address; the
    form never sees the address.
    """

    def __init__(
        self,
        provider: WalletProvider | None,
        store: KeyValueStore,
        price_client: PriceClient | None = None,
        storage_key: str = STORAGE_KEY,
    ) -> None:
        self.connected = False
        self.wallet_address: str | None = None
        self.wallet = WalletConnector(
            provider,
            on_connect=self._handle_connect,
            on_disconnect=self._handle_disconnect,
        )
        self.form = ProfitForm(store, price_client, storage_key=storage_key)

    @classmethod
    def from_config(cls, config: AppConfig) -> "PageShell":
        return cls(
            provider=resolve_provider(config.wallet),
            store=JsonFileStore(config.storage.resolved_path),
            price_client=PriceClient(config.price_api),
            storage_key=config.storage.key,
        )

    @property
    def show_calculator(self) -> bool:
        return self.connected and bool(self.wallet_address)

    def mount(self) -> LoadOutcome:
        """Run the silent reconnect and restore the saved draft."""
        self.wallet.check_existing_connection()
        return self.form.load_persisted_inputs()

    def _handle_connect(self, address: str) -> None:
        self.wallet_address = address
        self.connected = True

    def _handle_disconnect(self) -> None:
        self.wallet_address = None
        self.connected = False
