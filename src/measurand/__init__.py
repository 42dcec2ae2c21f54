"""
Measurand: immutable, unit-safe physical quantities for Python.

Each quantity kind (e.g. electrical resistance) is a value type stored in its
base unit, with table-driven conversion between units, same-kind arithmetic and
ordering, and culture-aware parsing and formatting. This module exposes a
minimal, stable public API; the concrete kinds are imported lazily.
"""

import logging
from importlib import metadata as _metadata


__author__ = "Measurand contributors"
__license__ = "MIT"

# Library logging stays silent unless the application configures it.
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Try to read the installed package version first; fall back to a default for local dev.
try:
    __version__ = _metadata.version("measurand")
except _metadata.PackageNotFoundError:
    import tomllib
    with open("pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public names exposed by the package. Keep this minimal and stable.
__all__ = ["__version__", "__author__", "__license__"]

from typing import Any

_LAZY = {
    "ElectricResistance": "measurand.quantities",
    "ElectricResistanceUnit": "measurand.quantities",
    "Quantity": "measurand.core.quantity",
    "FormatContext": "measurand.units.context",
    "get_format_context": "measurand.units.context",
    "set_default_format_context": "measurand.units.context",
}

# Lazy access helpers -------------------------------------------------------

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing e.g. 'ElectricResistance' imports the
    defining module on first use.
    """
    module_name = _LAZY.get(name)
    if module_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    import importlib
    return getattr(importlib.import_module(module_name), name)

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + list(_LAZY))
