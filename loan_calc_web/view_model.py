"""View-model for the calculator page.

The page state (raw form text, last computed result, whether the schedule is
visible and any error message) lives here instead of in the engine. Views are
immutable; transitions return a new ``CalculatorView``.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional

from loan_calc.data_models import PaymentSummary, ScheduleEntry

DEFAULT_FORM = {
    "principal": "10,000",
    "rate": "5",
    "term": "60",
}


def group_thousands(text: str) -> str:
    """Re-insert thousands separators into a plain number typed by the user.

    Text that is not a plain number is returned unchanged so the user can see
    and correct it.
    """
    cleaned = text.strip().replace(",", "")
    whole, dot, fraction = cleaned.partition(".")
    if not whole.isdigit() or (fraction and not fraction.isdigit()):
        return text
    return f"{int(whole):,}{dot}{fraction}"


@dataclass(frozen=True)
class CalculatorView:
    principal_text: str = DEFAULT_FORM["principal"]
    rate_text: str = DEFAULT_FORM["rate"]
    term_text: str = DEFAULT_FORM["term"]
    summary: Optional[PaymentSummary] = None
    schedule: List[ScheduleEntry] = field(default_factory=list)
    show_schedule: bool = False
    error: Optional[str] = None

    @classmethod
    def from_form(cls, form) -> "CalculatorView":
        return cls(
            principal_text=group_thousands(form.get("principal", "")),
            rate_text=form.get("rate", "").strip(),
            term_text=form.get("term", "").strip(),
            show_schedule=form.get("show_schedule") == "1",
        )

    @property
    def toggle_label(self) -> str:
        return "Hide" if self.show_schedule else "Show"

    def toggled(self) -> "CalculatorView":
        return replace(self, show_schedule=not self.show_schedule)

    def with_result(self, summary: PaymentSummary, schedule: List[ScheduleEntry]) -> "CalculatorView":
        return replace(self, summary=summary, schedule=list(schedule), error=None)

    def with_error(self, message: str) -> "CalculatorView":
        return replace(self, summary=None, schedule=[], error=message)
