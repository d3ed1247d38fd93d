"""Minimal offline walk through the page flow: connect, fill in, calculate."""

from crypto_profit.calculator.profit import result_frame, summary_sentence
from crypto_profit.calculator.storage import MemoryStore
from crypto_profit.shell import PageShell
from crypto_profit.wallet.provider import StaticWalletProvider


def main() -> None:
    provider = StaticWalletProvider(["0x52908400098527886E0F7030069857D2E4169EE7"])
    shell = PageShell(provider=provider, store=MemoryStore())
    shell.mount()

    shell.wallet.connect()
    print("connected:", shell.wallet_address)

    form = shell.form
    form.set_field("token_name", "ethereum")
    form.set_field("holdings", "0.6514")
    form.set_field("current_price", "187.41")
    form.set_field("target_price", "200")

    result = form.calculate()
    if result is None:
        print("error:", form.error)
        return
    print(result_frame(result).to_string(index=False))
    print(summary_sentence(form.inputs, result))


if __name__ == "__main__":
    main()
