import pytest

from crypto_profit.calculator.inputs import CalculatorInputs, ParsedInputs
from crypto_profit.calculator.profit import (
    compute_profit,
    format_percent,
    format_usd,
    parse_positive,
    result_frame,
    summary_sentence,
    validate_inputs,
)
from crypto_profit.errors import (
    InvalidCurrentPrice,
    InvalidHoldings,
    InvalidTargetPrice,
    MissingTokenName,
)


def _inputs(**overrides: str) -> CalculatorInputs:
    base = CalculatorInputs(
        token_name="ethereum",
        holdings="0.6514",
        current_price="187.41",
        target_price="200",
    )
    return base.replace(**overrides)


def test_worked_example_formats_to_two_decimals():
    result = compute_profit(validate_inputs(_inputs()))
    assert result.current_value == pytest.approx(122.078874)
    assert format_usd(result.current_value) == "$122.08"
    assert format_usd(result.future_value) == "$130.28"
    assert format_usd(result.profit) == "$8.20"
    assert format_percent(result.percentage_gain) == "6.72%"


def test_loss_has_negative_profit_and_gain():
    result = compute_profit(ParsedInputs("bitcoin", 2.0, 100.0, 75.0))
    assert result.profit == pytest.approx(-50.0)
    assert result.percentage_gain == pytest.approx(-25.0)
    assert not result.is_gain
    assert format_usd(result.profit) == "-$50.00"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1.0),
        (" 0.25 ", 0.25),
        ("1e3", 1000.0),
        ("0", None),
        ("-3", None),
        ("", None),
        ("abc", None),
        ("nan", None),
        ("inf", None),
    ],
)
def test_parse_positive(raw, expected):
    assert parse_positive(raw) == expected


@pytest.mark.parametrize(
    ("overrides", "error"),
    [
        ({"token_name": "   "}, MissingTokenName),
        ({"holdings": "0"}, InvalidHoldings),
        ({"current_price": "-1"}, InvalidCurrentPrice),
        ({"target_price": "x"}, InvalidTargetPrice),
    ],
)
def test_each_field_is_validated(overrides, error):
    with pytest.raises(error):
        validate_inputs(_inputs(**overrides))


def test_only_first_failure_in_order_is_reported():
    everything_wrong = CalculatorInputs("", "0", "abc", "-1")
    with pytest.raises(MissingTokenName):
        validate_inputs(everything_wrong)
    with pytest.raises(InvalidHoldings):
        validate_inputs(everything_wrong.replace(token_name="eth"))
    with pytest.raises(InvalidCurrentPrice):
        validate_inputs(everything_wrong.replace(token_name="eth", holdings="1"))


def test_validation_keeps_token_name_as_typed():
    parsed = validate_inputs(_inputs(token_name="Ethereum"))
    assert parsed.token_name == "Ethereum"


def test_result_frame_and_summary():
    inputs = _inputs()
    result = compute_profit(validate_inputs(inputs))
    frame = result_frame(result)
    assert list(frame["metric"]) == [
        "Current Value",
        "Future Value",
        "Profit/Loss",
        "Percentage Gain",
    ]
    assert list(frame["value"]) == ["$122.08", "$130.28", "$8.20", "6.72%"]
    assert bool(frame.loc[2, "gain"]) is True
    assert summary_sentence(inputs, result) == (
        "If ethereum reaches $200, your 0.6514 tokens will be worth $130.28."
    )
