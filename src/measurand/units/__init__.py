from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover - typing aid only
    from measurand.units.context import FormatContextRegistry
# Lazy access helpers -------------------------------------------------------

def _get_default_contexts() -> "FormatContextRegistry":
    # Import here to avoid import-time side-effects / circular imports.
    from measurand.units.context import DEFAULT_CONTEXTS  # local import
    return DEFAULT_CONTEXTS

def __getattr__(name: str) -> Any:
    """
    Lazy attribute access. Accessing 'contexts' returns the package's default
    format-context registry.
    """
    if name == "contexts":
        return _get_default_contexts()
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

def __dir__() -> list[str]:
    # Improve discoverability in REPL / autocomplete.
    return sorted(list(globals().keys()) + ["contexts"])
