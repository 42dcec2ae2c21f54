"""
measurand.core.errors
=====================

Exception hierarchy for conversion and parsing failures.

Every error derives from `MeasurandError`, itself a `ValueError`, so callers
that only care about "bad input" can catch one type. Diagnostic data (the raw
input, the culture that was active, the offending token) travels as plain
attributes rather than being folded into the message.
"""

from __future__ import annotations

from typing import Any, Optional


class MeasurandError(ValueError):
    """Base class for all errors raised by measurand."""


class UnsupportedUnitKind(MeasurandError):
    """A unit outside the kind's closed set (or the UNDEFINED sentinel) was used."""

    def __init__(self, unit: Any, kind: str) -> None:
        self.unit = unit
        self.kind = kind
        super().__init__(f"Unit {unit!r} is not a supported {kind} unit")


class QuantityParseError(MeasurandError):
    """Common base for the three text-parsing failures."""

    def __init__(self, message: str, text: str, context_name: Optional[str]) -> None:
        self.text = text
        self.context_name = context_name
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        return f"{base} (input={self.text!r}, context={self.context_name!r})"


class MalformedQuantityString(QuantityParseError):
    def __init__(self, text: str, context_name: Optional[str]) -> None:
        super().__init__(
            "Expected valid quantity and unit. Input string needs to be in the "
            'format "<quantity><unit>" or "<quantity> <unit>"',
            text,
            context_name,
        )


class InvalidNumericLiteral(QuantityParseError):
    def __init__(self, token: str, text: str, context_name: Optional[str]) -> None:
        self.token = token
        super().__init__(
            f"Numeric literal {token!r} is not valid for this format context",
            text,
            context_name,
        )


class UnrecognizedUnit(QuantityParseError):
    def __init__(self, token: str, kind: str, text: str, context_name: Optional[str]) -> None:
        self.token = token
        self.kind = kind
        super().__init__(
            f"The unit {token!r} is not a recognized {kind} unit",
            text,
            context_name,
        )


__all__ = [
    "MeasurandError",
    "UnsupportedUnitKind",
    "QuantityParseError",
    "MalformedQuantityString",
    "InvalidNumericLiteral",
    "UnrecognizedUnit",
]
