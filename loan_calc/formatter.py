"""Output helpers for the loan calculator.

This module renders payment summaries and amortization schedules as text
tables and converts them to plain dictionaries for export. Amounts are shown
with a single currency symbol, thousands separators and two decimals; none of
this affects the values computed by the engine.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Iterable, List

import click

from .data_models import PaymentSummary, ScheduleEntry
from .utils import round_money

DEFAULT_CURRENCY_SYMBOL = "₱"  # Philippine peso sign


def format_money(value: Decimal, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> str:
    """Format ``value`` as e.g. ``"₱10,000.00"``.

    Negative amounts put the sign before the symbol (``"-₱5.00"``).
    """
    rounded = round_money(Decimal(value))
    sign = "-" if rounded < 0 else ""
    return f"{sign}{symbol}{rounded.copy_abs():,.2f}"


def summary_to_dict(summary: PaymentSummary) -> Dict[str, Any]:
    """Convert a summary into a JSON-serialisable dictionary."""
    return {
        "principal": float(summary.principal),
        "term_months": summary.term_months,
        "monthly_payment": float(summary.monthly_payment),
        "total_interest": float(summary.total_interest),
        "total_paid": float(summary.total_paid),
    }


def schedule_to_rows(schedule: Iterable[ScheduleEntry]) -> List[Dict[str, Any]]:
    """Convert schedule entries into JSON-serialisable dictionaries."""
    return [
        {
            "month": entry.month,
            "payment": float(entry.payment),
            "interest": float(entry.interest),
            "principal": float(entry.principal),
            "balance": float(entry.balance),
        }
        for entry in schedule
    ]


def print_summary(summary: PaymentSummary, symbol: str = DEFAULT_CURRENCY_SYMBOL) -> None:
    """Print a summary of loan metrics in a human-readable format."""
    click.echo("Summary")
    click.echo("-" * 72)
    click.echo(f"Loan amount        : {format_money(summary.principal, symbol)}")
    click.echo(f"Term               : {summary.term_months} months")
    click.echo(f"Monthly payment    : {format_money(summary.monthly_payment, symbol)}")
    click.echo(f"Total interest     : {format_money(summary.total_interest, symbol)}")
    click.echo(f"Total paid         : {format_money(summary.total_paid, symbol)}")
    click.echo("-" * 72)


def print_schedule(schedule: Iterable[ScheduleEntry], symbol: str = DEFAULT_CURRENCY_SYMBOL) -> None:
    """Print the amortization schedule as a simple table."""
    headers = ["Month", "Payment", "Interest", "Principal", "Balance"]
    click.echo("\t".join(headers))
    for entry in schedule:
        row = [
            str(entry.month),
            format_money(entry.payment, symbol),
            format_money(entry.interest, symbol),
            format_money(entry.principal, symbol),
            format_money(entry.balance, symbol),
        ]
        click.echo("\t".join(row))
