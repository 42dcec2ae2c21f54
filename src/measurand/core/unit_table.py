"""
measurand.core.unit_table
=========================

Static, per-kind unit configuration.

A `UnitTable` binds a unit `Enum` to one `ConversionEntry` per member. Every
operation that needs unit data (construction, conversion, abbreviation lookup,
text resolution) goes through the same table, so a kind's units are described
exactly once.

Tables are built at import time and exposed read-only; they are safe to share
between threads without locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from types import MappingProxyType
from typing import Dict, Generic, Iterable, List, Mapping, Optional, Set, Tuple, Type, TypeVar

from measurand.core.errors import UnsupportedUnitKind
from measurand.core.utils import normalize_token
from measurand.units.context import ContextLike, FormatContext, get_format_context

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=Enum)


@dataclass(frozen=True, slots=True)
class ConversionEntry(Generic[U]):
    """
    Conversion data for one unit.

    Attributes
    ----------
    unit : Enum
        The unit variant this entry describes.
    factor : float
        Multiplicative factor taking a value in ``unit`` to the base unit.
    abbreviations : tuple[str, ...]
        Invariant spellings; the first one is the default display token.
    plural : str
        Identifier used for the generated accessors (``from_<plural>``,
        ``<plural>``), e.g. "kiloohms".
    localized : Mapping[str, tuple[str, ...]]
        Culture name ("ru-RU" or just "ru") to localized spellings, default first.
    """

    unit: U
    factor: float
    abbreviations: Tuple[str, ...]
    plural: str
    localized: Mapping[str, Tuple[str, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if not (self.factor > 0 and isfinite(self.factor)):
            raise ValueError("factor must be a positive, finite number")
        if not self.abbreviations:
            raise ValueError(f"{self.unit!r} needs at least one abbreviation")
        if not self.plural.isidentifier():
            raise ValueError(f"plural {self.plural!r} must be a valid identifier")
        object.__setattr__(
            self, "abbreviations", tuple(normalize_token(a) for a in self.abbreviations)
        )
        object.__setattr__(
            self,
            "localized",
            MappingProxyType(
                {culture: tuple(normalize_token(a) for a in abbrs)
                 for culture, abbrs in self.localized.items()}
            ),
        )

    @property
    def default_abbreviation(self) -> str:
        return self.abbreviations[0]


class UnitTable(Generic[U]):
    """Read-only registry of the units of one quantity kind."""

    def __init__(
        self,
        kind: str,
        unit_type: Type[U],
        entries: Iterable[ConversionEntry[U]],
        *,
        undefined: Optional[U] = None,
        case_insensitive_aliases: bool = False,
    ) -> None:
        self.kind = kind
        self.unit_type = unit_type
        self.case_insensitive_aliases = case_insensitive_aliases

        if undefined is None:
            undefined = unit_type.__members__.get("UNDEFINED")
        if undefined is None:
            raise ValueError(f"{unit_type.__name__} must declare an UNDEFINED sentinel")
        self.undefined: U = undefined

        table: Dict[U, ConversionEntry[U]] = {}
        for entry in entries:
            if not isinstance(entry.unit, unit_type):
                raise ValueError(f"{entry.unit!r} is not a member of {unit_type.__name__}")
            if entry.unit is undefined:
                raise ValueError("The UNDEFINED sentinel cannot carry a conversion entry")
            if entry.unit in table:
                raise ValueError(f"Duplicate conversion entry for {entry.unit!r}")
            table[entry.unit] = entry

        base = [e.unit for e in table.values() if e.factor == 1.0]
        if len(base) != 1:
            raise ValueError(
                f"{kind} must have exactly one base unit with factor 1.0, found {len(base)}"
            )

        self._entries: Mapping[U, ConversionEntry[U]] = MappingProxyType(table)
        self.base_unit: U = base[0]

        self._invariant: Dict[str, U] = {}
        for entry in table.values():
            for abbr in entry.abbreviations:
                self._claim(self._invariant, abbr, entry.unit)

        # Localized spellings may repeat their own unit's invariant spelling,
        # never another unit's.
        self._localized: Dict[str, Dict[str, U]] = {}
        for entry in table.values():
            for culture, abbrs in entry.localized.items():
                by_culture = self._localized.setdefault(culture, {})
                for abbr in abbrs:
                    self._claim(self._invariant, abbr, entry.unit, register=False)
                    self._claim(by_culture, abbr, entry.unit)

        # Casefolded lookups mirror the exact ones: one map per culture (its
        # own spellings plus the invariant ones) and one invariant map.
        self._folded: Dict[str, U] = self._fold(self._invariant)
        self._folded_localized: Dict[str, Dict[str, U]] = {
            culture: self._fold(self._invariant, by_culture)
            for culture, by_culture in self._localized.items()
        }

        logger.debug(
            "Built unit table for %s: base=%s, %d units, cultures=%s",
            kind, self.base_unit.name, len(table), sorted(self._localized),
        )

    def _claim(self, lookup: Dict[str, U], abbr: str, unit: U, register: bool = True) -> None:
        owner = lookup.get(abbr)
        if owner is not None and owner is not unit:
            raise ValueError(
                f"Abbreviation {abbr!r} is claimed by both {owner!r} and {unit!r}"
            )
        if register:
            lookup[abbr] = unit

    @staticmethod
    def _fold(*lookups: Mapping[str, U]) -> Dict[str, U]:
        folded: Dict[str, Set[U]] = {}
        for lookup in lookups:
            for abbr, unit in lookup.items():
                folded.setdefault(abbr.casefold(), set()).add(unit)
        # Only unambiguous casefolded spellings are usable ("mm" vs "Mm").
        return {key: next(iter(units)) for key, units in folded.items() if len(units) == 1}

    # -------------------------- public API ---------------------------------
    @property
    def units(self) -> Tuple[U, ...]:
        """Defined units (UNDEFINED excluded), in declaration order."""
        return tuple(self._entries)

    def __contains__(self, unit: object) -> bool:
        try:
            return unit in self._entries
        except TypeError:
            return False

    def __iter__(self):
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def entry(self, unit: U) -> ConversionEntry[U]:
        try:
            return self._entries[unit]
        except (KeyError, TypeError):
            raise UnsupportedUnitKind(unit, self.kind) from None

    def factor(self, unit: U) -> float:
        """Factor converting a value in ``unit`` to the base unit."""
        return self.entry(unit).factor

    def abbreviations(self, unit: U, context: ContextLike = None) -> Tuple[str, ...]:
        """All accepted spellings of ``unit`` for the context, localized first."""
        entry = self.entry(unit)
        ctx = get_format_context(context)
        seen: List[str] = list(self._localized_abbreviations(entry, ctx))
        for abbr in entry.abbreviations:
            if abbr not in seen:
                seen.append(abbr)
        return tuple(seen)

    def abbreviation(self, unit: U, context: ContextLike = None) -> str:
        """Display token for ``unit``; falls back to the invariant default."""
        return self.abbreviations(unit, context)[0]

    def resolve(self, text: str, context: ContextLike = None) -> U:
        """Map a free-text unit token to a unit, or return the UNDEFINED sentinel."""
        token = normalize_token(text)
        if not token:
            return self.undefined

        ctx = get_format_context(context)
        for culture in self._cultures(ctx):
            unit = self._localized.get(culture, {}).get(token)
            if unit is not None:
                return unit

        unit = self._invariant.get(token)
        if unit is not None:
            return unit

        if self.case_insensitive_aliases:
            folded = self._folded
            for culture in self._cultures(ctx):
                if culture in self._folded_localized:
                    folded = self._folded_localized[culture]
                    break
            unit = folded.get(token.casefold())
            if unit is not None:
                return unit

        return self.undefined

    # ------------------------- internals -----------------------------------
    @staticmethod
    def _cultures(ctx: FormatContext) -> Tuple[str, ...]:
        if not ctx.name:
            return ()
        if ctx.language == ctx.name:
            return (ctx.name,)
        return (ctx.name, ctx.language)

    def _localized_abbreviations(
        self, entry: ConversionEntry[U], ctx: FormatContext
    ) -> Tuple[str, ...]:
        for culture in self._cultures(ctx):
            abbrs = entry.localized.get(culture)
            if abbrs:
                return abbrs
        return ()

    def __repr__(self) -> str:
        names = ", ".join(u.name for u in self._entries)
        return f"UnitTable({self.kind!r}, base={self.base_unit.name}, units=[{names}])"


__all__ = ["ConversionEntry", "UnitTable"]
