"""Darts, orbits and the GeneralizedMap container."""

from importlib import import_module

# Lazy, so algorithm mixins can import .dart/.orbit without pulling in .gmap
_lazy_symbols = {
    "NULL_INDEX": ("gmaps.core.dart", "NULL_INDEX"),
    "Dart": ("gmaps.core.dart", "Dart"),
    "Orbit": ("gmaps.core.orbit", "Orbit"),
    "GeneralizedMap": ("gmaps.core.gmap", "GeneralizedMap"),
    "MapDiff": ("gmaps.core._MapDiff", "MapDiff"),
}

__all__ = sorted(_lazy_symbols)


def __getattr__(name):
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)
