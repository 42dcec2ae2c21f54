"""
measurand.core.quantity
=======================

Defines the generic `Quantity` value type.

A quantity kind (electrical resistance, length, ...) is a subclass of
`Quantity` that binds a `UnitTable` through the ``_table`` class attribute.
Instances store a single float: the magnitude expressed in the kind's base
unit. Everything else (conversion, formatting, parsing) projects that number
through the table.

The module provides:
- Construction from any unit of the kind (`from_unit`, `from_base`, and one
  generated ``from_<plural>`` classmethod per unit).
- Conversion to any unit (`as_unit`, and one generated ``<plural>`` property
  per unit).
- Arithmetic and ordering restricted to operands of the same kind.
- Text formatting and culture-aware parsing.

Equality is exact floating-point equality on the base magnitude. Two values
that reach the same magnitude through different conversion paths may differ
in the last bit and then compare unequal; compare with ``math.isclose`` on
`base_value` when that matters.
"""

from __future__ import annotations

from numbers import Real
from typing import Any, ClassVar, Generic, Optional, Tuple, TypeVar

from measurand.core.unit_table import ConversionEntry, U, UnitTable
from measurand.core.utils import format_magnitude
from measurand.units.context import ContextLike, get_format_context

Q = TypeVar("Q", bound="Quantity[Any]")

# Marks "value is already in the base unit"; any other unit goes through the table.
_BASE: Any = object()


def _install_unit_accessors(cls: type, entry: ConversionEntry[Any]) -> None:
    """Attach ``from_<plural>`` and ``<plural>`` for one unit to a kind class."""
    unit = entry.unit
    plural = entry.plural
    ctor_name = f"from_{plural}"

    if ctor_name not in cls.__dict__:
        def _from(klass: type, value: float) -> Any:
            return klass.from_unit(value, unit)

        _from.__name__ = ctor_name
        _from.__qualname__ = f"{cls.__name__}.{ctor_name}"
        _from.__doc__ = f"Get {cls.__name__} from {plural}."
        setattr(cls, ctor_name, classmethod(_from))

    if plural not in cls.__dict__:
        def _get(self: Quantity[Any]) -> float:
            return self.as_unit(unit)

        _get.__name__ = plural
        _get.__doc__ = f"Get {cls.__name__} in {plural}."
        setattr(cls, plural, property(_get))


class Quantity(Generic[U]):
    """
    An immutable magnitude of one quantity kind, stored in the base unit.

    Subclasses set ``_table`` to the kind's `UnitTable` and declare
    ``__slots__ = ()``.

    Attributes
    ----------
    _value : float
        The magnitude expressed in the kind's base unit.
    """
    __slots__ = ("_value",)

    _table: ClassVar[UnitTable[Any]]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        table = cls.__dict__.get("_table")
        if table is None:
            return
        for entry in table:
            _install_unit_accessors(cls, entry)

    def __init__(self, value: float = 0.0, unit: U = _BASE) -> None:
        if isinstance(value, bool) or not isinstance(value, Real):
            raise TypeError(
                f"{type(self).__name__} value must be a real number, got {type(value).__name__}"
            )
        table = type(self).unit_table()
        factor = 1.0 if unit is _BASE else table.factor(unit)
        object.__setattr__(self, "_value", float(value) * factor)

    # --- immutability ---
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> Tuple[type, Tuple[float]]:
        return (type(self), (self._value,))

    # --- construction ---
    @classmethod
    def unit_table(cls) -> UnitTable[Any]:
        try:
            return cls._table
        except AttributeError:
            raise TypeError(
                f"{cls.__name__} does not define a unit table; use a concrete quantity kind"
            ) from None

    @classmethod
    def from_unit(cls: type[Q], value: float, unit: U) -> Q:
        """Create a quantity from ``value`` expressed in ``unit``."""
        return cls(value, unit)

    @classmethod
    def from_base(cls: type[Q], value: float) -> Q:
        """Create a quantity from a magnitude already in the base unit."""
        return cls(value)

    @classmethod
    def zero(cls: type[Q]) -> Q:
        return cls(0.0)

    @classmethod
    def base_unit(cls) -> Any:
        return cls.unit_table().base_unit

    @classmethod
    def units(cls) -> Tuple[Any, ...]:
        return cls.unit_table().units

    # --- conversion ---
    @property
    def base_value(self) -> float:
        return self._value

    def as_unit(self, unit: U) -> float:
        """Return the magnitude expressed in ``unit``."""
        return self._value / type(self).unit_table().factor(unit)

    # --- equality / ordering ---
    def _same_kind(self, other: object) -> bool:
        return type(other) is type(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quantity):
            return NotImplemented
        if not self._same_kind(other):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    def __lt__(self: Q, other: Q) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._value < other._value

    def __le__(self: Q, other: Q) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self: Q, other: Q) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._value > other._value

    def __ge__(self: Q, other: Q) -> bool:
        if not self._same_kind(other):
            return NotImplemented
        return self._value >= other._value

    # --- arithmetic ---
    def __neg__(self: Q) -> Q:
        return type(self).from_base(-self._value)

    def __pos__(self: Q) -> Q:
        return self

    def __abs__(self: Q) -> Q:
        return type(self).from_base(abs(self._value))

    def __add__(self: Q, other: Q) -> Q:
        if not self._same_kind(other):
            return NotImplemented
        return type(self).from_base(self._value + other._value)

    def __sub__(self: Q, other: Q) -> Q:
        if not self._same_kind(other):
            return NotImplemented
        return type(self).from_base(self._value - other._value)

    def __mul__(self: Q, other: float) -> Q:
        if isinstance(other, bool) or not isinstance(other, Real):
            return NotImplemented
        return type(self).from_base(self._value * float(other))

    def __rmul__(self: Q, other: float) -> Q:
        # allows 3 * r
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Any:
        # same kind -> dimensionless ratio
        if self._same_kind(other):
            return self._value / other._value
        if isinstance(other, bool) or not isinstance(other, Real):
            return NotImplemented
        return type(self).from_base(self._value / float(other))

    # --- text ---
    @classmethod
    def get_abbreviation(cls, unit: U, context: ContextLike = None) -> str:
        """Display abbreviation of ``unit`` for the given format context."""
        return cls.unit_table().abbreviation(unit, context)

    @classmethod
    def parse(cls: type[Q], text: str, context: ContextLike = None) -> Q:
        """
        Parse a string of the form "<quantity> <unit>" or "<quantity><unit>".

        >>> ElectricResistance.parse("5.5 kΩ")        # doctest: +SKIP
        >>> ElectricResistance.parse("1,5 кОм", "ru-RU")  # doctest: +SKIP

        Raises
        ------
        MalformedQuantityString
            No separable number and unit.
        InvalidNumericLiteral
            The number does not follow the context's separator rules.
        UnrecognizedUnit
            The unit token is not a unit of this kind.
        """
        from measurand.units.parser import parse_quantity

        return parse_quantity(cls, text, context)

    @classmethod
    def parse_unit(cls, text: str, context: ContextLike = None) -> Any:
        """Parse a bare unit token, e.g. "kΩ"; raises `UnrecognizedUnit`."""
        from measurand.units.parser import parse_unit

        return parse_unit(cls.unit_table(), text, context)

    def to_string(
        self,
        unit: Optional[U] = None,
        context: ContextLike = None,
        significant_digits_after_radix: int = 2,
    ) -> str:
        """
        Render the quantity in ``unit`` (base unit by default).

        The magnitude goes through `format_magnitude` with the context's
        separators, then the context's pattern joins it with the unit
        abbreviation ("{value} {unit}" by default).
        """
        table = type(self).unit_table()
        ctx = get_format_context(context)
        target = table.base_unit if unit is None else unit
        magnitude = format_magnitude(self.as_unit(target), significant_digits_after_radix, ctx)
        return ctx.pattern.format(value=magnitude, unit=table.abbreviation(target, ctx))

    def format_with(self, unit: U, context: ContextLike, template: str, *args: Any) -> str:
        """
        Render with a custom ``str.format`` template.

        ``{0}`` is the raw float in ``unit`` and ``{1}`` its abbreviation in
        the context; extra ``args`` follow as ``{2}``, ``{3}``, ... Number
        formatting inside the template uses Python's format mini-language.

        >>> r.format_with(ElectricResistanceUnit.KILOOHM, None, "{0:.3f} {1}")  # doctest: +SKIP
        '1.500 kΩ'
        """
        abbreviation = type(self).unit_table().abbreviation(unit, context)
        return template.format(self.as_unit(unit), abbreviation, *args)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        table = type(self).unit_table()
        return f"{type(self).__name__}({self._value!r} {table.abbreviation(table.base_unit, '')})"

    def __format__(self, spec: str) -> str:
        """
        Custom string formatting for quantities.

        Supported specifiers
        --------------------
        "" (empty)
            Same as ``str(q)``.
        "<unit>"
            Render in the unit named by the token, e.g. ``f"{r:kΩ}"``.
        "<unit>.<digits>" or ".<digits>"
            Same, with the given number of digits after the radix point,
            e.g. ``f"{r:MΩ.4}"``; the unit defaults to the base unit.

        Raises
        ------
        ValueError
            If the unit token is not a unit of this kind.
        """
        spec = (spec or "").strip()
        if not spec:
            return str(self)

        token, digits = spec, 2
        head, sep, tail = spec.rpartition(".")
        if sep and tail.isdigit():
            token, digits = head, int(tail)

        table = type(self).unit_table()
        if not token:
            return self.to_string(None, None, digits)
        unit = table.resolve(token)
        if unit is table.undefined:
            raise ValueError(f"Unknown format spec {spec!r} for {type(self).__name__}")
        return self.to_string(unit, None, digits)


__all__ = ["Quantity"]
