"""Data models for the loan calculator.

This module defines dataclasses representing the entities used by the
calculator: the loan parameters supplied by the caller, the payment summary
derived from them and the individual schedule entries. All of them are frozen
value objects: every calculation builds new instances and nothing is mutated
after construction.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Union

Number = Union[Decimal, int, float, str]


@dataclass(frozen=True)
class LoanParameters:
    """Inputs of a fixed-rate loan.

    Attributes
    ----------
    principal: Decimal
        The amount borrowed. Must be positive.
    annual_rate: Decimal
        The annual nominal interest rate in percent, e.g. ``Decimal("5")``
        means 5 %. Must be zero or positive.
    term_months: int
        Number of monthly payments. Must be at least one.

    The engine coerces ``principal`` and ``annual_rate`` to ``Decimal`` and
    validates all three fields, so callers may pass plain ints, floats or
    numeric strings.
    """

    principal: Number
    annual_rate: Number
    term_months: int


@dataclass(frozen=True)
class PaymentSummary:
    """Aggregate figures for a loan, rounded to cents."""

    principal: Decimal
    term_months: int
    monthly_payment: Decimal
    total_interest: Decimal
    total_paid: Decimal


@dataclass(frozen=True)
class ScheduleEntry:
    """An entry in the amortization schedule.

    ``balance`` is the principal still owed after this month's payment.
    """

    month: int
    payment: Decimal
    interest: Decimal
    principal: Decimal
    balance: Decimal


AmortizationSchedule = List[ScheduleEntry]
