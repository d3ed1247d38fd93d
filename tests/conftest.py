from pathlib import Path
from typing import Any

import pytest
import requests

from crypto_profit.calculator.storage import MemoryStore

ADDRESS = "0x52908400098527886E0F7030069857D2E4169EE7"


class FakeResponse:
    def __init__(self, payload: Any = None, status_code: int = 200, body_error: bool = False):
        self.payload = payload
        self.status_code = status_code
        self.body_error = body_error

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        if self.body_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Records requests and replays a canned response or exception."""

    def __init__(self, response: FakeResponse | None = None, exc: Exception | None = None):
        self.response = response or FakeResponse({})
        self.exc = exc
        self.calls: list[dict[str, Any]] = []

    def _handle(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.exc is not None:
            raise self.exc
        return self.response

    def get(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._handle("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> FakeResponse:
        return self._handle("POST", url, **kwargs)


@pytest.fixture()
def memory_store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def address() -> str:
    return ADDRESS


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        f"""
storage:
  path: {tmp_path / "storage.json"}
""".strip()
        + "\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture()
def make_session():
    def _make(
        payload: Any = None,
        status_code: int = 200,
        body_error: bool = False,
        exc: Exception | None = None,
    ) -> FakeSession:
        return FakeSession(FakeResponse(payload, status_code, body_error), exc)

    return _make
