"""Errors raised by the loan calculator."""

from __future__ import annotations


class InvalidParameter(ValueError):
    """A loan parameter violates its constraint.

    ``field`` names the offending parameter (``principal``, ``annual_rate``
    or ``term_months``) and ``reason`` says what is wrong with it.
    """

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason
