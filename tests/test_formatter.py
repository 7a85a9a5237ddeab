from decimal import Decimal

from loan_calc.data_models import LoanParameters
from loan_calc.engine import compute_amortization
from loan_calc.formatter import format_money, schedule_to_rows, summary_to_dict


def test_format_money_groups_thousands():
    assert format_money(Decimal("10000")) == "₱10,000.00"
    assert format_money(Decimal("1234567.891"), "$") == "$1,234,567.89"
    assert format_money(Decimal("0")) == "₱0.00"


def test_format_money_negative_sign_precedes_symbol():
    assert format_money(Decimal("-5"), "$") == "-$5.00"


def test_rows_are_plain_json_values():
    summary, schedule = compute_amortization(LoanParameters(10000, 5, 60))
    rows = schedule_to_rows(schedule)
    assert len(rows) == 60
    assert rows[0] == {
        "month": 1,
        "payment": 188.71,
        "interest": 41.67,
        "principal": float(schedule[0].principal),
        "balance": float(schedule[0].balance),
    }
    assert summary_to_dict(summary)["total_interest"] == 1322.6


def test_format_money_large_amount():
    assert format_money(Decimal("1e27")) == "₱1,000,000,000,000,000,000,000,000,000.00"
