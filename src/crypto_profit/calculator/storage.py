"""Keyed local storage for calculator drafts.

The store mirrors browser local storage: string keys map to JSON-encoded
strings. ``JsonFileStore`` keeps all keys in one JSON file on disk.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Protocol

from crypto_profit.calculator.inputs import CalculatorInputs

LOGGER = logging.getLogger(__name__)

LoadStatus = Literal["loaded", "missing", "corrupt"]


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...

    def remove_item(self, key: str) -> None:
        ...


@dataclass
class MemoryStore:
    """Process-local store, used by tests and throwaway sessions."""

    items: dict[str, str] = field(default_factory=dict)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class JsonFileStore:
    """File-backed store; the whole file is rewritten on every change."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path).expanduser()

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

    def _read_all(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            LOGGER.warning("Ignoring unreadable storage file %s: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def _write_all(self, items: dict[str, object]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(items, indent=2), encoding="utf-8")


@dataclass(frozen=True)
class LoadOutcome:
    """Result of reading persisted inputs; callers fall back to ``inputs``."""

    status: LoadStatus
    inputs: CalculatorInputs = field(default_factory=CalculatorInputs)
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "loaded"


def load_inputs(store: KeyValueStore, key: str) -> LoadOutcome:
    raw = store.get_item(key)
    if raw is None:
        return LoadOutcome(status="missing")
    try:
        inputs = CalculatorInputs.from_storage(json.loads(raw))
    except ValueError as exc:
        LOGGER.error("Error loading saved data: %s", exc)
        return LoadOutcome(status="corrupt", detail=str(exc))
    return LoadOutcome(status="loaded", inputs=inputs)


def save_inputs(store: KeyValueStore, key: str, inputs: CalculatorInputs) -> None:
    store.set_item(key, json.dumps(inputs.to_storage()))


def clear_inputs(store: KeyValueStore, key: str) -> None:
    store.remove_item(key)
