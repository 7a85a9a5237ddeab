"""Core calculation engine for the loan calculator.

This module implements the financial logic required to build the amortization
schedule of a fixed-rate annuity (equal installment) loan. Results are
returned as a ``PaymentSummary`` along with the list of ``ScheduleEntry``
objects, one per month.

All arithmetic is carried out on unrounded ``Decimal`` values; figures are
rounded to cents only when the summary and entries are built.
"""

from __future__ import annotations

import logging
from decimal import Decimal, getcontext, localcontext
from typing import List, Tuple

from .data_models import AmortizationSchedule, LoanParameters, PaymentSummary, ScheduleEntry
from .errors import InvalidParameter
from .utils import decimal_from_str, round_money

BASE_PRECISION = 28
getcontext().prec = BASE_PRECISION  # increase precision for financial calculations

logger = logging.getLogger(__name__)

# Balances closer to zero than half a cent are treated as fully repaid.
RESIDUAL_THRESHOLD = Decimal("0.005")

# Upper bounds on the inputs; they keep (1 + i)^n within the decimal exponent range.
MAX_PRINCIPAL = 10**30
MAX_ANNUAL_RATE = 1000
MAX_TERM_MONTHS = 12000

# Past this many leading zeros a monthly rate cannot move any cent.
MAX_RATE_DIGITS = 100


def _to_decimal(field: str, value: object) -> Decimal:
    if isinstance(value, bool):
        raise InvalidParameter(field, "must be a number, not a boolean")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, int):
        result = Decimal(value)
    elif isinstance(value, float):
        # str() keeps the value the user typed (5.1 rather than 5.0999...)
        result = Decimal(str(value))
    elif isinstance(value, str):
        result = decimal_from_str(value, field)
    else:
        raise InvalidParameter(field, f"must be a number, got {type(value).__name__}")
    if not result.is_finite():
        raise InvalidParameter(field, "must be a finite number")
    return result


def validate_parameters(params: LoanParameters) -> Tuple[Decimal, Decimal, int]:
    """Check ``params`` and return ``(principal, annual_rate, term_months)``.

    Raises
    ------
    InvalidParameter
        If the principal is not positive, the rate is negative, the term is
        not a positive integer, or any of them exceeds its upper bound.
    """
    principal = _to_decimal("principal", params.principal)
    if principal <= 0:
        raise InvalidParameter("principal", "must be greater than zero")
    if principal > MAX_PRINCIPAL:
        raise InvalidParameter("principal", f"must not exceed {MAX_PRINCIPAL:,}")

    annual_rate = _to_decimal("annual_rate", params.annual_rate)
    if annual_rate < 0:
        raise InvalidParameter("annual_rate", "must not be negative")
    if annual_rate > MAX_ANNUAL_RATE:
        raise InvalidParameter("annual_rate", f"must not exceed {MAX_ANNUAL_RATE} percent")

    term = params.term_months
    if isinstance(term, bool) or not isinstance(term, int):
        raise InvalidParameter("term_months", "must be a whole number of months")
    if term < 1:
        raise InvalidParameter("term_months", "must be at least 1")
    if term > MAX_TERM_MONTHS:
        raise InvalidParameter("term_months", f"must not exceed {MAX_TERM_MONTHS:,}")

    return principal, annual_rate, term


def _calculate_annuity_payment(principal: Decimal, rate_per_month: Decimal, term: int) -> Decimal:
    """Return the annuity (equal installment) monthly payment for a loan.

    The formula is:

        payment = P * (i * (1 + i)^n) / ((1 + i)^n - 1)

    where ``P`` is the principal, ``i`` is the monthly interest rate and
    ``n`` is the number of payments. When the interest rate is zero, the
    payment simplifies to ``P / n``.
    """
    if rate_per_month == 0:
        return principal / Decimal(term)
    factor = (1 + rate_per_month) ** term
    if factor == 1:
        # rate too small to register at this precision
        return principal / Decimal(term)
    return principal * (rate_per_month * factor) / (factor - 1)


def _working_precision(principal: Decimal, rate_per_month: Decimal, term: int) -> int:
    """Digits needed to carry the schedule to the cent.

    Rounding error in the running balance grows like ``(1 + i)^n``, so the
    context is widened by that many digits on top of the principal's size.
    Small rates also need room for ``1 + i`` to keep every digit of ``i``,
    otherwise ``(1 + i)^n - 1`` cancels away.
    """
    growth_digits = int((1 + rate_per_month).log10() * term) + 1
    rate_digits = min(max(-rate_per_month.adjusted(), 0), MAX_RATE_DIGITS)
    return BASE_PRECISION + max(principal.adjusted(), 0) + growth_digits + rate_digits


def compute_amortization(params: LoanParameters) -> Tuple[PaymentSummary, AmortizationSchedule]:
    """Compute the payment summary and amortization schedule for a loan.

    Parameters
    ----------
    params: LoanParameters
        Principal, annual rate in percent and term in months.

    Returns
    -------
    summary: PaymentSummary
        Monthly payment, total paid and total interest. The totals are based
        on the rounded installment, i.e. on what the borrower actually pays.
    schedule: List[ScheduleEntry]
        One entry per month, ``term_months`` entries in total, numbered from 1.

    Raises
    ------
    InvalidParameter
        If any parameter is out of range. Nothing is computed in that case.
    """
    principal, annual_rate, term = validate_parameters(params)

    # Convert annual rate from percent to monthly decimal
    rate_per_month = (annual_rate / Decimal(100)) / Decimal(12)

    with localcontext() as ctx:
        ctx.prec = _working_precision(principal, rate_per_month, term)
        payment = _calculate_annuity_payment(principal, rate_per_month, term)

        monthly_payment = round_money(payment)
        total_paid = round_money(monthly_payment * term)
        summary = PaymentSummary(
            principal=round_money(principal),
            term_months=term,
            monthly_payment=monthly_payment,
            total_interest=total_paid - round_money(principal),
            total_paid=total_paid,
        )

        schedule: List[ScheduleEntry] = []
        balance = principal
        for month in range(1, term + 1):
            interest = balance * rate_per_month
            principal_payment = payment - interest
            balance -= principal_payment
            # Drop floating residue so the last row reads 0.00 rather than -0.00.
            if balance.copy_abs() < RESIDUAL_THRESHOLD:
                balance = Decimal("0")
            schedule.append(
                ScheduleEntry(
                    month=month,
                    payment=monthly_payment,
                    interest=round_money(interest),
                    principal=round_money(principal_payment),
                    balance=round_money(balance),
                )
            )

    logger.debug(
        "Amortized %s at %s%% over %d months: payment=%s total_interest=%s",
        principal,
        annual_rate,
        term,
        summary.monthly_payment,
        summary.total_interest,
    )
    return summary, schedule
