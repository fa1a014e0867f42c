"""Optional Litestar wiring for the lending service.

The core package works without any web framework. The names exported here
(the plugin that injects a LibraryService into route handlers, the Book and
LendingEvent DTOs, and the provider helpers) need Litestar, which ships as
an extra:

    pip install litestar-library[litestar]

Names are resolved on first access, so ``import litestar_library.contrib``
always succeeds and only touching one of them without Litestar raises an
ImportError explaining how to install it.
"""

from __future__ import annotations

from importlib import import_module

try:
    import litestar  # noqa: F401

    LITESTAR_AVAILABLE = True
except ImportError:
    LITESTAR_AVAILABLE = False

_EXPORTS = {
    "LibraryPlugin": "litestar_library.contrib.plugin",
    "BookDTO": "litestar_library.contrib.dto",
    "LendingEventDTO": "litestar_library.contrib.dto",
    "LibraryServiceDependency": "litestar_library.contrib.dependencies",
    "provide_library_service": "litestar_library.contrib.dependencies",
}


def _raise_litestar_not_installed(name: str) -> None:
    msg = (
        f"{name} requires Litestar, which is not installed. Install the extra:\n\n"
        "    pip install litestar-library[litestar]\n\n"
        "or install Litestar directly:\n\n"
        "    pip install litestar"
    )
    raise ImportError(msg)


def __getattr__(name: str) -> object:
    """Resolve exported names lazily."""
    if name == "LITESTAR_AVAILABLE":
        return LITESTAR_AVAILABLE

    module_name = _EXPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    if not LITESTAR_AVAILABLE:
        _raise_litestar_not_installed(name)

    return getattr(import_module(module_name), name)


__all__ = [
    "LITESTAR_AVAILABLE",
    # DTOs
    "BookDTO",
    "LendingEventDTO",
    # Dependencies
    "LibraryServiceDependency",
    "provide_library_service",
    # Plugin
    "LibraryPlugin",
]
