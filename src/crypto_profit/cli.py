"""Command line interface for the crypto profit calculator."""

from __future__ import annotations

import json
import logging
import subprocess
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any

import typer

from crypto_profit.calculator.form import ProfitForm
from crypto_profit.calculator.prices import PriceClient
from crypto_profit.calculator.profit import result_frame, summary_sentence
from crypto_profit.calculator.storage import JsonFileStore
from crypto_profit.config import AppConfig, build_config, merge_config
from crypto_profit.wallet.provider import resolve_provider
from crypto_profit.wallet.session import WalletConnector

app = typer.Typer(help="Crypto profit calculator")
LOGGER = logging.getLogger(__name__)



def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.INFO
    if verbose:
        level = logging.DEBUG
    if quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")



def _load_config(config_path: str | None) -> AppConfig:
    return build_config(config_path=config_path) if config_path else AppConfig()



def _build_form(cfg: AppConfig) -> ProfitForm:
    return ProfitForm(
        JsonFileStore(cfg.storage.resolved_path),
        PriceClient(cfg.price_api),
        storage_key=cfg.storage.key,
    )



def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)



def _emit(payload: Any, out_format: str) -> None:
    if out_format == "json":
        typer.echo(json.dumps(payload, indent=2))
    else:
        if isinstance(payload, dict):
            for key, value in payload.items():
                typer.echo(f"{key}: {value}")
        else:
            typer.echo(str(payload))


@app.command("calculate")
def calculate(
    token: str | None = typer.Option(None, help="Token identifier, e.g. ethereum."),
    holdings: str | None = typer.Option(None, help="Amount of the token held."),
    current_price: str | None = typer.Option(None, help="Current price in USD."),
    target_price: str | None = typer.Option(None, help="Target price in USD."),
    fetch_price: bool = typer.Option(
        False,
        "--fetch-price",
        help="Look up the live price and use it as the current price.",
    ),
    out_format: str = typer.Option("text", "--format", help="text|json"),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Compute profit/loss; omitted fields are taken from the saved draft."""
    _configure_logging(verbose, quiet)
    cfg = _load_config(config)
    form = _build_form(cfg)
    form.load_persisted_inputs()

    changes = {
        "token_name": token,
        "holdings": holdings,
        "current_price": current_price,
        "target_price": target_price,
    }
    form.set_inputs(form.inputs.replace(**{k: v for k, v in changes.items() if v is not None}))

    if fetch_price and form.fetch_live_price() is None:
        _fail(form.error or "price lookup failed")

    result = form.calculate()
    if result is None:
        _fail(form.error or "calculation failed")

    if out_format == "json":
        _emit({"inputs": asdict(form.inputs), "result": asdict(result)}, out_format)
        return
    for row in result_frame(result).itertuples(index=False):
        typer.echo(f"{row.metric}: {row.value}")
    typer.echo(summary_sentence(form.inputs, result))


@app.command("fetch-price")
def fetch_price_cmd(
    token: str = typer.Argument(..., help="Token identifier, e.g. bitcoin."),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Print the live USD price of a token and save it into the draft."""
    _configure_logging(verbose, quiet)
    cfg = _load_config(config)
    form = _build_form(cfg)
    form.load_persisted_inputs()
    form.set_field("token_name", token)

    price = form.fetch_live_price()
    if price is None:
        _fail(form.error or "price lookup failed")
    typer.echo(f"{token}: {form.inputs.current_price}")


@app.command("connect")
def connect(
    provider_url: str | None = typer.Option(None, help="Wallet JSON-RPC endpoint."),
    out_format: str = typer.Option("text", "--format", help="text|json"),
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Request account access from the wallet provider and print the address."""
    _configure_logging(verbose, quiet)
    cfg = _load_config(config)
    if provider_url:
        cfg = merge_config(cfg, {"wallet": {"provider_url": provider_url}})

    connector = WalletConnector(resolve_provider(cfg.wallet))
    if not connector.check_existing_connection():
        connector.connect()
    if not connector.is_connected:
        _fail(connector.session.error or "No accounts returned by the wallet provider.")
    _emit({"connected": True, "address": connector.address}, out_format)


@app.command("reset")
def reset(
    config: str | None = typer.Option(None, help="Path to YAML config."),
    verbose: bool = typer.Option(False, "--verbose"),
    quiet: bool = typer.Option(False, "--quiet"),
) -> None:
    """Clear the saved calculator draft."""
    _configure_logging(verbose, quiet)
    cfg = _load_config(config)
    _build_form(cfg).reset()
    typer.echo(f"Cleared saved inputs in {cfg.storage.resolved_path}")


@app.command("ui")
def launch_ui(
    port: int = typer.Option(8501, help="Port for Streamlit app."),
    server_headless: str = typer.Option(
        "true",
        help="Run Streamlit in headless mode (true|false).",
    ),
    streamlit_args: list[str] | None = typer.Argument(
        None,
        help="Additional args forwarded to Streamlit (e.g. --browser.gatherUsageStats false).",
    ),
) -> None:
    """Launch the calculator page in Streamlit."""
    if server_headless.lower() not in {"true", "false"}:
        raise typer.BadParameter("--server-headless must be true or false.")
    repo_root = Path(__file__).resolve().parents[2]
    app_path = repo_root / "ui" / "streamlit_app.py"
    if not app_path.exists():
        raise typer.BadParameter(f"Streamlit app not found at: {app_path}")

    cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(app_path),
        "--server.port",
        str(port),
        "--server.headless",
        server_headless.lower(),
    ]
    cmd.extend(streamlit_args or [])
    raise typer.Exit(subprocess.call(cmd))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
