"""Crypto Profit Calculator Streamlit UI."""

from __future__ import annotations

import streamlit as st

from crypto_profit.calculator.form import ProfitForm
from crypto_profit.calculator.inputs import CalculatorInputs
from crypto_profit.calculator.profit import summary_sentence
from crypto_profit.shell import PageShell
try:
    from ui.state import UIState
    from ui.utils import FIELD_WIDGETS, load_page_config, result_cards
except ModuleNotFoundError:
    # Supports direct execution via: streamlit run ui/streamlit_app.py
    from state import UIState  # type: ignore
    from utils import FIELD_WIDGETS, load_page_config, result_cards  # type: ignore

STATE_KEY = "crypto_profit_ui_state"
TONE_COLORS = {"gain": "green", "loss": "red"}


def get_state() -> UIState:
    if STATE_KEY not in st.session_state:
        st.session_state[STATE_KEY] = UIState(shell=PageShell.from_config(load_page_config()))
    state: UIState = st.session_state[STATE_KEY]
    if not state.mounted:
        state.load_outcome = state.shell.mount()
        _sync_widgets(state.shell.form)
        state.mounted = True
    return state


def _sync_widgets(form: ProfitForm) -> None:
    for widget_key, field_name in FIELD_WIDGETS.items():
        st.session_state[widget_key] = getattr(form.inputs, field_name)


def _on_field_change(form: ProfitForm) -> None:
    values = {
        field_name: st.session_state.get(widget_key, "")
        for widget_key, field_name in FIELD_WIDGETS.items()
    }
    form.set_inputs(CalculatorInputs(**values))


def _on_fetch_price(form: ProfitForm) -> None:
    _on_field_change(form)
    if form.fetch_live_price() is not None:
        st.session_state["current-price"] = form.inputs.current_price


def _on_calculate(form: ProfitForm) -> None:
    _on_field_change(form)
    form.calculate()


def _on_reset(form: ProfitForm) -> None:
    form.reset()
    _sync_widgets(form)


def _render_wallet_panel(shell: PageShell) -> None:
    wallet = shell.wallet
    with st.container(border=True):
        if wallet.is_connected and wallet.address:
            st.success("✓ Wallet Connected")
            st.code(wallet.address, language=None)
            st.button(
                "Disconnect Wallet",
                on_click=wallet.disconnect,
                use_container_width=True,
            )
            return

        if wallet.session.error:
            st.error(wallet.session.error)
        st.button(
            "Connecting..." if wallet.session.is_loading else "Connect Wallet",
            on_click=wallet.connect,
            disabled=wallet.session.is_loading,
            type="primary",
            use_container_width=True,
        )
        st.caption("Supports MetaMask and Web3-compatible wallets")


def _render_calculator(form: ProfitForm) -> None:
    # Streamlit drops widget state while the calculator is hidden.
    if any(key not in st.session_state for key in FIELD_WIDGETS):
        _sync_widgets(form)

    token_col, fetch_col = st.columns([4, 1], vertical_alignment="bottom")
    with token_col:
        st.text_input(
            "Token Name",
            key="token-name",
            placeholder="e.g., ethereum, bitcoin",
            on_change=_on_field_change,
            args=(form,),
        )
    with fetch_col:
        st.button(
            "Loading..." if form.is_loading_price else "Fetch Price",
            on_click=_on_fetch_price,
            args=(form,),
            disabled=form.is_loading_price,
        )

    st.text_input(
        "Holdings (Amount)",
        key="holdings",
        placeholder="e.g., 0.6514",
        on_change=_on_field_change,
        args=(form,),
    )
    current_col, target_col = st.columns(2)
    with current_col:
        st.text_input(
            "Current Price ($)",
            key="current-price",
            placeholder="e.g., 187.41",
            on_change=_on_field_change,
            args=(form,),
        )
    with target_col:
        st.text_input(
            "Target Price ($)",
            key="target-price",
            placeholder="e.g., 200",
            on_change=_on_field_change,
            args=(form,),
        )

    if form.error:
        st.error(form.error)

    calc_col, reset_col = st.columns([4, 1])
    with calc_col:
        st.button(
            "Calculate Profit 🚀",
            on_click=_on_calculate,
            args=(form,),
            type="primary",
            use_container_width=True,
        )
    with reset_col:
        st.button("Reset", on_click=_on_reset, args=(form,), use_container_width=True)

    if form.result is None:
        return

    with st.container(border=True):
        st.subheader("📈 Calculation Results")
        cards = result_cards(form.result)
        for row_start in range(0, len(cards), 2):
            for column, card in zip(st.columns(2), cards[row_start : row_start + 2]):
                with column:
                    st.caption(card["label"])
                    color = TONE_COLORS.get(card["tone"])
                    value = card["value"].replace("$", "\\$")
                    st.markdown(f"**:{color}[{value}]**" if color else f"**{value}**")
        st.info(summary_sentence(form.inputs, form.result).replace("$", "\\$"))


def main() -> None:
    st.set_page_config(page_title="Crypto Profit Calculator", layout="centered")
    state = get_state()
    shell = state.shell

    st.title("Crypto Profit Calculator")
    st.caption("Estimate your potential profits with precision")

    _render_wallet_panel(shell)

    if not shell.show_calculator:
        with st.container(border=True):
            st.write("Connect your wallet to start calculating profits")
            st.markdown("## 🔐")
        return

    with st.container(border=True):
        st.caption("Connected Wallet")
        st.code(shell.wallet_address, language=None)
        _render_calculator(shell.form)


if __name__ == "__main__":
    main()
