"""Typed Streamlit session state models for the calculator page."""

from __future__ import annotations

from dataclasses import dataclass

from crypto_profit.calculator.storage import LoadOutcome
from crypto_profit.shell import PageShell


@dataclass
class UIState:
    """Session-backed state container for the page."""

    shell: PageShell
    mounted: bool = False
    load_outcome: LoadOutcome | None = None
