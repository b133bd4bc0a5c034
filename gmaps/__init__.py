# gmaps/__init__.py
"""gmaps: generalized maps (darts, orbits, cells, sewing)."""

from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "core": "gmaps.core",
    "algorithms": "gmaps.algorithms",
    "adapters": "gmaps.adapters",
    "dataframe": "gmaps.adapters.dataframe_adapter",
    "networkx": "gmaps.adapters.networkx_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "Dart": ("gmaps.core.dart", "Dart"),
    "NULL_INDEX": ("gmaps.core.dart", "NULL_INDEX"),
    "Orbit": ("gmaps.core.orbit", "Orbit"),
    "GeneralizedMap": ("gmaps.core.gmap", "GeneralizedMap"),
    "MapDiff": ("gmaps.core._MapDiff", "MapDiff"),
    "SewMismatchError": ("gmaps.algorithms.sewing", "SewMismatchError"),
    "ValidationReport": ("gmaps.algorithms.validation", "ValidationReport"),
    # DataFrame adapter
    "to_dataframe": ("gmaps.adapters.dataframe_adapter", "to_dataframe"),
    "from_dataframe": ("gmaps.adapters.dataframe_adapter", "from_dataframe"),
    # NetworkX adapter (optional dependency)
    "to_nx": ("gmaps.adapters.networkx_adapter", "to_nx"),
    "from_nx": ("gmaps.adapters.networkx_adapter", "from_nx"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("gmaps")
except PackageNotFoundError:
    __version__ = "0.0.0"
