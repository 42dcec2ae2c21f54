"""
measurand.units.parser
======================

Text parsing for quantities: "<number><optional whitespace><unit>".

Parsing runs in two phases:

1. Tokenize: split the trimmed input into a numeric literal and a unit token
   with a pattern built from the active context's separators.
2. Interpret: turn the numeric literal into a float under the context's
   rules, and resolve the unit token through the kind's `UnitTable`.

Both phases are synchronous and side-effect free; compiled patterns are cached
per separator pair.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Optional, Pattern, Tuple, TypeVar

from measurand.core.errors import (
    InvalidNumericLiteral,
    MalformedQuantityString,
    UnrecognizedUnit,
)
from measurand.units.context import ContextLike, FormatContext, get_format_context

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measurand.core.quantity import Quantity
    from measurand.core.unit_table import UnitTable

    Q = TypeVar("Q", bound=Quantity[Any])

logger = logging.getLogger(__name__)

_EXPONENT_RE: Pattern[str] = re.compile(r"[eE](?P<exp>[-+]?\d+)$")
_DIGITS_RE: Pattern[str] = re.compile(r"\d*")


# ---------------- Phase 1: tokenize ----------------
@lru_cache(maxsize=64)
def _compile_quantity_pattern(decimal_separator: str, group_separator: str) -> Pattern[str]:
    """
    Grammar (full match over the trimmed input):
      value := [+-]? (digit | '.' | ',' | ' ' | SEP)* digit exponent?
      exponent := ('e' | 'E') [+-]? digit+
      unit  := not(ws | digit | sign | '.' | ',' | SEP) non-ws*
      input := value ws* unit
    """
    seps = re.escape(decimal_separator + group_separator)
    value = rf"[-+]?[\d., {seps}]*\d(?:[eE][-+]?\d+)?"
    unit = rf"[^\s\d.,+\-{seps}]\S*"
    return re.compile(rf"(?P<value>{value})\s*(?P<unit>{unit})")


def tokenize(text: str, context: ContextLike = None) -> Tuple[str, str]:
    """Split ``text`` into ``(numeric_token, unit_token)``.

    Raises `MalformedQuantityString` when either part is missing.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    ctx = get_format_context(context)
    pattern = _compile_quantity_pattern(ctx.decimal_separator, ctx.group_separator)
    match = pattern.fullmatch(text.strip())
    if match is None or not match.group("value") or not match.group("unit"):
        logger.debug("Malformed quantity string %r (context=%s)", text, ctx)
        raise MalformedQuantityString(text, str(ctx))
    return match.group("value"), match.group("unit")


# ---------------- Phase 2: interpret ----------------
def _group_separators(ctx: FormatContext) -> Tuple[str, ...]:
    # Cultures grouping with a no-break space also accept a plain space.
    if ctx.group_separator.isspace() and ctx.group_separator != " ":
        return (ctx.group_separator, " ")
    return (ctx.group_separator,)


def parse_number(token: str, context: ContextLike = None, *, text: Optional[str] = None) -> float:
    """
    Parse a numeric literal under the context's separator rules.

    Group separators are allowed only in the integer part, at most one decimal
    separator is allowed, and the exponent (if any) is a plain signed integer.
    ``text`` is the full original input, used for diagnostics.
    """
    ctx = get_format_context(context)
    source = token if text is None else text

    def _invalid() -> InvalidNumericLiteral:
        logger.debug("Invalid numeric literal %r (context=%s)", token, ctx)
        return InvalidNumericLiteral(token, source, str(ctx))

    s = token.strip()
    sign = ""
    if s[:1] in ("+", "-"):
        sign, s = s[0], s[1:]

    exponent = ""
    m = _EXPONENT_RE.search(s)
    if m:
        exponent = m.group("exp")
        s = s[: m.start()]

    integer, _, fraction = s.partition(ctx.decimal_separator)
    groups = _group_separators(ctx)
    if any(g in fraction for g in groups) or integer.startswith(groups):
        raise _invalid()
    for g in groups:
        integer = integer.replace(g, "")

    if not _DIGITS_RE.fullmatch(integer) or not _DIGITS_RE.fullmatch(fraction):
        raise _invalid()
    if not integer and not fraction:
        raise _invalid()

    literal = f"{sign}{integer or '0'}.{fraction or '0'}"
    if exponent:
        literal += f"e{exponent}"
    try:
        return float(literal)
    except ValueError:
        raise _invalid() from None


def parse_unit(table: "UnitTable[Any]", text: str, context: ContextLike = None) -> Any:
    """Resolve a bare unit token; raises `UnrecognizedUnit` for unknown tokens."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    ctx = get_format_context(context)
    unit = table.resolve(text, ctx)
    if unit is table.undefined:
        logger.debug("Unrecognized %s unit %r (context=%s)", table.kind, text, ctx)
        raise UnrecognizedUnit(text.strip(), table.kind, text, str(ctx))
    return unit


def parse_quantity(cls: "type[Q]", text: str, context: ContextLike = None) -> "Q":
    """
    Parse ``text`` into an instance of the quantity kind ``cls``.

    >>> parse_quantity(ElectricResistance, "5.5 Ω")   # doctest: +SKIP
    ElectricResistance(5.5 Ω)
    """
    ctx = get_format_context(context)
    value_token, unit_token = tokenize(text, ctx)
    value = parse_number(value_token, ctx, text=text)

    table = cls.unit_table()
    unit = table.resolve(unit_token, ctx)
    if unit is table.undefined:
        logger.debug("Unrecognized %s unit %r in %r (context=%s)", table.kind, unit_token, text, ctx)
        raise UnrecognizedUnit(unit_token, table.kind, text, str(ctx))
    return cls.from_unit(value, unit)


__all__ = ["tokenize", "parse_number", "parse_unit", "parse_quantity"]
