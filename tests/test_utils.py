from decimal import Decimal

import pytest

from loan_calc.errors import InvalidParameter
from loan_calc.utils import decimal_from_str, int_from_str, parse_amount, round_money


def test_decimal_from_str_strips_thousands_separators():
    assert decimal_from_str("10,000") == Decimal("10000")
    assert decimal_from_str(" 1,234,567.89 ") == Decimal("1234567.89")


@pytest.mark.parametrize("text", ["", "   ", "abc", "1.2.3"])
def test_decimal_from_str_rejects_garbage(text):
    with pytest.raises(InvalidParameter) as excinfo:
        decimal_from_str(text, "annual_rate")
    assert excinfo.value.field == "annual_rate"


def test_int_from_str():
    assert int_from_str("1,200") == 1200
    assert int_from_str(" 60 ") == 60
    with pytest.raises(InvalidParameter):
        int_from_str("60.5", "term_months")
    with pytest.raises(InvalidParameter):
        int_from_str("", "term_months")


def test_parse_amount_suffixes():
    assert parse_amount("500k") == Decimal("500000")
    assert parse_amount("1.5M") == Decimal("1500000")
    assert parse_amount("12,500") == Decimal("12500")
    with pytest.raises(InvalidParameter) as excinfo:
        parse_amount("k")
    assert excinfo.value.field == "principal"


def test_round_money_rounds_half_away_from_zero():
    assert round_money(Decimal("2.675")) == Decimal("2.68")
    assert round_money(Decimal("2.665")) == Decimal("2.67")
    assert round_money(Decimal("-2.675")) == Decimal("-2.68")
    assert round_money(Decimal("41.666666")) == Decimal("41.67")


def test_round_money_handles_more_digits_than_the_context():
    value = Decimal("123456789012345678901234567890.125")
    assert round_money(value) == Decimal("123456789012345678901234567890.13")
