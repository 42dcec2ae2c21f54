"""
measurand.units.context
=======================

Format contexts (culture data) and a thread-safe registry of named contexts.

A `FormatContext` carries the number separators and output pattern used when
parsing and formatting quantities. It is read-only: the core never mutates
one. `FormatContextRegistry` owns a set of named contexts, resolves culture
names leniently ("de_de", "DE-de" and "de" all reach "de-DE"), and keeps the
process-wide default context.
"""
from __future__ import annotations

import logging
import threading
import unicodedata
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatContext:
    """Culture data consumed by the parser and formatter.

    Attributes
    ----------
    name : str
        Culture name, e.g. "en-US". The empty string is the invariant culture.
    decimal_separator : str
        Radix character, e.g. "." or ",".
    group_separator : str
        Thousands separator, e.g. "," or a (narrow) no-break space.
    pattern : str
        Output template with ``{value}`` and ``{unit}`` placeholders.
    """

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    pattern: str = "{value} {unit}"

    def __post_init__(self) -> None:
        if len(self.decimal_separator) != 1:
            raise ValueError("decimal_separator must be a single character")
        if len(self.group_separator) != 1:
            raise ValueError("group_separator must be a single character")
        if self.decimal_separator == self.group_separator:
            raise ValueError("decimal_separator and group_separator must differ")
        if self.decimal_separator.isdigit() or self.group_separator.isdigit():
            raise ValueError("separators cannot be digits")
        if "{value}" not in self.pattern or "{unit}" not in self.pattern:
            raise ValueError("pattern must contain '{value}' and '{unit}' placeholders")

    @property
    def language(self) -> str:
        """Language part of the culture name ("ru" for "ru-RU")."""
        return self.name.split("-", 1)[0]

    def __str__(self) -> str:
        return self.name or "invariant"


ContextLike = Union[FormatContext, str, None]


def normalize_culture_name(name: str) -> str:
    """Canonicalise a culture name: 'en_us' -> 'en-US', 'DE' -> 'de'."""
    s = unicodedata.normalize("NFC", name.strip()).replace("_", "-")
    if not s or s.casefold() == "invariant":
        return ""
    parts = s.split("-")
    parts[0] = parts[0].lower()
    if len(parts) > 1 and len(parts[-1]) == 2:
        parts[-1] = parts[-1].upper()
    return "-".join(parts)


INVARIANT = FormatContext("", ".", ",")


class FormatContextRegistry:
    """Thread-safe registry of `FormatContext` objects keyed by culture name."""

    def __init__(self, default: FormatContext = INVARIANT) -> None:
        self._lock = threading.RLock()
        self._contexts: Dict[str, FormatContext] = {}
        self._aliases: Dict[str, str] = {}
        self._default = default
        self.register(default)

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    # -------------------------- public API ---------------------------------
    def register(self, context: FormatContext, replace: bool = False) -> None:
        key = normalize_culture_name(context.name)
        with self._lock:
            if not replace and key in self._contexts:
                raise ValueError(
                    f"Cannot register format context '{context}': "
                    "a context with this name already exists."
                )
            self._contexts[key] = context
        logger.debug("Registered format context %r", str(context))

    def register_alias(self, alias: str, canonical: str) -> None:
        key = normalize_culture_name(alias)
        target = normalize_culture_name(canonical)
        with self._lock:
            if target not in self._contexts:
                raise ValueError(f"Cannot alias '{alias}': unknown format context '{canonical}'")
            if key in self._contexts:
                raise ValueError(
                    f"Cannot register alias '{alias}': a context with this name already exists."
                )
            self._aliases[key] = target

    def has(self, name: str) -> bool:
        try:
            self.get(name)
            return True
        except ValueError:
            return False

    def get(self, name: str) -> FormatContext:
        """Lookup a context by culture name.

        Falls back from "xx-YY" to the language-only "xx" and then to any
        registered "xx-*" context. Raises `ValueError` if nothing matches.
        """
        key = normalize_culture_name(name)
        with self._lock:
            key = self._aliases.get(key, key)
            ctx = self._contexts.get(key)
            if ctx is not None:
                return ctx

            language = key.split("-", 1)[0]
            ctx = self._contexts.get(language)
            if ctx is None and language:
                for candidate, value in self._contexts.items():
                    if candidate.split("-", 1)[0] == language:
                        ctx = value
                        break
            if ctx is not None:
                return ctx

        raise ValueError(f"Unknown format context: {name!r}")

    def all(self) -> Mapping[str, FormatContext]:
        with self._lock:
            return dict(self._contexts)

    @property
    def default(self) -> FormatContext:
        with self._lock:
            return self._default

    @default.setter
    def default(self, context: ContextLike) -> None:
        ctx = self.resolve(context) if context is not None else INVARIANT
        with self._lock:
            self._default = ctx

    def resolve(self, context: ContextLike) -> FormatContext:
        """Accept a context, a culture name, or None (the default context)."""
        if context is None:
            return self.default
        if isinstance(context, FormatContext):
            return context
        if isinstance(context, str):
            return self.get(context)
        raise TypeError(
            f"Expected FormatContext, culture name or None, got {type(context).__name__}"
        )


# ---------------------------------------------------------------------------
# Bootstrap the default registry with a few common cultures
# ---------------------------------------------------------------------------

def _bootstrap_default_contexts() -> FormatContextRegistry:
    reg = FormatContextRegistry(INVARIANT)

    cultures: Iterable[FormatContext] = (
        FormatContext("en-US", ".", ","),
        FormatContext("en-GB", ".", ","),
        FormatContext("de-DE", ",", "."),
        FormatContext("fr-FR", ",", "\u202f"),   # narrow no-break space
        FormatContext("nb-NO", ",", "\u00a0"),   # no-break space
        FormatContext("ru-RU", ",", "\u00a0"),
    )
    for ctx in cultures:
        reg.register(ctx)

    reg.register_alias("en", "en-US")
    reg.register_alias("no", "nb-NO")
    return reg


# Public, shared default registry
DEFAULT_CONTEXTS: FormatContextRegistry = _bootstrap_default_contexts()


def get_format_context(context: ContextLike = None) -> FormatContext:
    """Resolve ``context`` against the default registry."""
    return DEFAULT_CONTEXTS.resolve(context)


def set_default_format_context(context: ContextLike) -> None:
    """Set the context used when callers pass ``None``."""
    DEFAULT_CONTEXTS.default = context


__all__ = [
    "FormatContext",
    "FormatContextRegistry",
    "ContextLike",
    "INVARIANT",
    "DEFAULT_CONTEXTS",
    "get_format_context",
    "set_default_format_context",
    "normalize_culture_name",
]
