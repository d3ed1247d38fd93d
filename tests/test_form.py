import json

import requests

from crypto_profit.calculator.form import ProfitForm
from crypto_profit.calculator.inputs import CalculatorInputs
from crypto_profit.calculator.prices import PriceClient
from crypto_profit.calculator.storage import MemoryStore
from crypto_profit.config import STORAGE_KEY


def _form(store, session=None) -> ProfitForm:
    return ProfitForm(store, PriceClient(session=session))


def _fill(form: ProfitForm) -> None:
    form.set_field("token_name", "ethereum")
    form.set_field("holdings", "0.6514")
    form.set_field("current_price", "187.41")
    form.set_field("target_price", "200")


def test_every_field_change_is_persisted(memory_store):
    form = _form(memory_store)
    form.set_field("holdings", "abc")
    saved = json.loads(memory_store.get_item(STORAGE_KEY))
    assert saved["holdings"] == "abc"
    assert saved["tokenName"] == ""


def test_reload_restores_the_draft(memory_store):
    _fill(_form(memory_store))

    reloaded = _form(memory_store)
    outcome = reloaded.load_persisted_inputs()
    assert outcome.status == "loaded"
    assert reloaded.inputs == CalculatorInputs("ethereum", "0.6514", "187.41", "200")


def test_corrupt_storage_leaves_defaults(memory_store):
    memory_store.set_item(STORAGE_KEY, "][")
    form = _form(memory_store)
    assert form.load_persisted_inputs().status == "corrupt"
    assert form.inputs == CalculatorInputs()
    assert form.error is None


def test_calculate_stores_result(memory_store):
    form = _form(memory_store)
    _fill(form)
    result = form.calculate()
    assert result is form.result
    assert round(result.future_value, 2) == 130.28
    assert form.error is None


def test_failed_calculation_clears_previous_result(memory_store):
    form = _form(memory_store)
    _fill(form)
    form.calculate()
    form.set_field("target_price", "")

    assert form.calculate() is None
    assert form.result is None
    assert form.error == "Please enter a valid target price"


def test_reset_then_reload_yields_empty_fields(memory_store):
    form = _form(memory_store)
    _fill(form)
    form.calculate()
    form.reset()

    assert form.inputs == CalculatorInputs()
    assert form.result is None
    assert memory_store.get_item(STORAGE_KEY) is None

    reloaded = _form(memory_store)
    assert reloaded.load_persisted_inputs().status == "missing"
    assert reloaded.inputs == CalculatorInputs()


def test_fetch_live_price_adopts_quote_and_persists(memory_store, make_session):
    form = _form(memory_store, make_session({"ethereum": {"usd": 3120.5}}))
    form.set_field("token_name", "Ethereum")

    assert form.fetch_live_price() == 3120.5
    assert form.inputs.current_price == "3120.5"
    assert form.is_loading_price is False
    assert json.loads(memory_store.get_item(STORAGE_KEY))["currentPrice"] == "3120.5"


def test_fetch_live_price_not_found_clears_loading(memory_store, make_session):
    form = _form(memory_store, make_session({}))
    form.set_field("token_name", "Shibz")
    form.set_field("current_price", "1.5")

    assert form.fetch_live_price() is None
    assert form.error == 'Token "Shibz" not found. Please check the name.'
    assert form.is_loading_price is False
    assert form.inputs.current_price == "1.5"


def test_fetch_live_price_network_failure_clears_loading(memory_store, make_session):
    form = _form(memory_store, make_session(exc=requests.ConnectionError("down")))
    form.set_field("token_name", "bitcoin")

    assert form.fetch_live_price() is None
    assert form.error == "Failed to fetch token price. Please try again."
    assert form.is_loading_price is False


def test_fetch_live_price_requires_token_name(memory_store, make_session):
    session = make_session({})
    form = _form(memory_store, session)
    assert form.fetch_live_price() is None
    assert form.error == "Please enter a token name"
    assert session.calls == []


class _ObservedSession:
    """Records the form's loading flag at the moment the request goes out."""

    def __init__(self, form_ref: list, outcome):
        self.form_ref = form_ref
        self.outcome = outcome
        self.seen: list[bool] = []

    def get(self, url, **kwargs):
        self.seen.append(self.form_ref[0].is_loading_price)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome


def test_loading_flag_is_held_during_price_fetch(memory_store, make_session):
    holder: list = []
    response = make_session({"bitcoin": {"usd": 64000}}).response
    session = _ObservedSession(holder, response)
    form = _form(memory_store, session)
    holder.append(form)
    form.set_field("token_name", "bitcoin")

    form.fetch_live_price()
    assert session.seen == [True]
    assert form.is_loading_price is False
    assert form.inputs.current_price == "64000"


def test_loading_flag_is_held_during_failed_price_fetch(memory_store):
    holder: list = []
    session = _ObservedSession(holder, requests.Timeout("slow"))
    form = _form(memory_store, session)
    holder.append(form)
    form.set_field("token_name", "bitcoin")

    form.fetch_live_price()
    assert session.seen == [True]
    assert form.is_loading_price is False
    assert form.error == "Failed to fetch token price. Please try again."


def test_micro_cap_quote_lands_in_positional_notation(memory_store, make_session):
    form = _form(memory_store, make_session({"shiba-inu": {"usd": 1.234e-05}}))
    form.set_field("token_name", "shiba-inu")
    form.fetch_live_price()
    assert form.inputs.current_price == "0.00001234"


class _ReadOnlyStore(MemoryStore):
    def set_item(self, key, value):
        raise OSError(30, "Read-only file system")

    def remove_item(self, key):
        raise OSError(30, "Read-only file system")


def test_storage_write_failure_does_not_escape(make_session):
    form = _form(_ReadOnlyStore(), make_session({"ethereum": {"usd": 187.41}}))
    form.set_field("token_name", "ethereum")
    assert form.inputs.token_name == "ethereum"

    assert form.fetch_live_price() == 187.41
    assert form.inputs.current_price == "187.41"

    form.reset()
    assert form.inputs == CalculatorInputs()
