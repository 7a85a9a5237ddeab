"""Command-line interface for the loan calculator.

This module uses the ``click`` library to implement a multi-command
interface. Users can compute full amortization schedules or view summaries.
Results can be printed to the terminal or exported to JSON/CSV files.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import click

from .data_models import LoanParameters, PaymentSummary, ScheduleEntry
from .engine import compute_amortization
from .errors import InvalidParameter
from .formatter import (
    DEFAULT_CURRENCY_SYMBOL,
    print_schedule,
    print_summary,
    schedule_to_rows,
    summary_to_dict,
)
from .utils import decimal_from_str, int_from_str, parse_amount

# Engine field name -> CLI option, for error messages
OPTION_NAMES = {
    "principal": "--principal",
    "annual_rate": "--rate",
    "term_months": "--term",
}


def build_parameters_from_options(principal: str, rate: str, term: str) -> LoanParameters:
    """Turn raw text inputs into ``LoanParameters``.

    Thousands separators are stripped from every field; the principal also
    accepts ``k``/``m`` suffixes. Range checks are left to the engine.
    """
    rate_text = str(rate).strip()
    if rate_text.endswith("%"):
        rate_text = rate_text[:-1]
    return LoanParameters(
        principal=parse_amount(str(principal), "principal"),
        annual_rate=decimal_from_str(rate_text, "annual_rate"),
        term_months=int_from_str(str(term), "term_months"),
    )


def _run(principal: str, rate: str, term: str) -> Tuple[PaymentSummary, List[ScheduleEntry]]:
    try:
        params = build_parameters_from_options(principal, rate, term)
        return compute_amortization(params)
    except InvalidParameter as exc:
        raise click.BadParameter(exc.reason, param_hint=OPTION_NAMES.get(exc.field, exc.field))


def export_to_json(path: Path, summary: PaymentSummary, schedule: Optional[List[ScheduleEntry]] = None) -> None:
    """Export the summary, and the schedule when given, to a JSON file."""
    data: Dict[str, Any] = {"summary": summary_to_dict(summary)}
    if schedule is not None:
        data["schedule"] = schedule_to_rows(schedule)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def export_to_csv(path: Path, schedule: List[ScheduleEntry]) -> None:
    """Export schedule to a CSV file."""
    header = ["Month", "Payment", "Interest", "Principal", "Balance"]
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(header)
        for e in schedule:
            writer.writerow([e.month, e.payment, e.interest, e.principal, e.balance])


def loan_options(func):
    """Attach the shared loan options to a command."""
    func = click.option(
        "--currency",
        "currency",
        envvar="LOAN_CALC_CURRENCY_SYMBOL",
        default=DEFAULT_CURRENCY_SYMBOL,
        show_default=True,
        help="Display currency symbol",
    )(func)
    func = click.option("--term", "-t", "term", required=True, help="Loan term in months")(func)
    func = click.option("--rate", "-r", "rate", required=True, help="Annual interest rate (percent)")(func)
    func = click.option("--principal", "-p", "principal", required=True, help="Loan amount, e.g. 10,000 or 10k")(func)
    return func


@click.group()
def cli() -> None:
    """A command-line fixed-rate loan calculator."""
    pass


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json or .csv)")
def schedule(principal: str, rate: str, term: str, currency: str, output: Optional[str]) -> None:
    """Compute and print the full amortization schedule."""
    summary_data, entries = _run(principal, rate, term)
    if output:
        path = Path(output)
        if path.suffix.lower() == ".json":
            export_to_json(path, summary_data, entries)
        elif path.suffix.lower() == ".csv":
            export_to_csv(path, entries)
        else:
            raise click.BadParameter("Unsupported output format; use .json or .csv", param_hint="--output")
        click.echo(f"Schedule exported to {path}")
    else:
        print_summary(summary_data, currency)
        print_schedule(entries, currency)


@cli.command()
@loan_options
@click.option("--output", "output", type=str, help="Output file path (.json)")
def summary(principal: str, rate: str, term: str, currency: str, output: Optional[str]) -> None:
    """Compute and print only the summary metrics for a loan."""
    summary_data, _ = _run(principal, rate, term)
    if output:
        path = Path(output)
        if path.suffix.lower() != ".json":
            raise click.BadParameter("Summary export must use .json extension", param_hint="--output")
        export_to_json(path, summary_data)
        click.echo(f"Summary exported to {path}")
    else:
        print_summary(summary_data, currency)


if __name__ == "__main__":
    cli()
