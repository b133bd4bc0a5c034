from __future__ import annotations

from typing import Any

NULL_INDEX = 0  # reserved index: "no dart"


class Dart:
    """Atomic element of a generalized map.

    Parameters
    --
    dimension : int
        Ambient dimension ``D`` of the map the dart will live in. Every
        per-dimension sequence gets ``D + 1`` slots.

    Attributes
    --
    index : int
        Position (1-based) in the owning map, assigned on insertion.
        ``0`` until the dart is inserted.
    alphas : list[int]
        ``alphas[i]`` is the index of ``alpha_i(self)``, or ``0`` when free.
    globalembed : list
        ``globalembed[i]`` is the value of the i-cell containing this dart.
    iskey : list[bool]
        ``iskey[i]`` flags this dart as the canonical storage of its i-cell.
    ismarked : bool
        Traversal mark. Must be False between traversals.

    Notes
    -
    Equality and hashing are by identity. Two all-zero darts are *not* equal,
    which keeps the null sentinel distinguishable from a fresh dart.

    """

    __slots__ = ("index", "alphas", "globalembed", "iskey", "ismarked")

    def __init__(self, dimension: int = 0):
        dimension = int(dimension)
        if dimension < 0:
            raise ValueError(f"dimension must be >= 0, got {dimension}")
        n = dimension + 1
        self.index = NULL_INDEX
        self.alphas = [NULL_INDEX] * n
        self.globalembed: list[Any] = [None] * n
        self.iskey = [False] * n
        self.ismarked = False

    @property
    def dimension(self) -> int:
        return len(self.alphas) - 1

    def is_null(self) -> bool:
        """True for the sentinel / a dart never inserted into a map."""
        return self.index == NULL_INDEX

    def is_free(self, i: int) -> bool:
        """True if ``alpha_i`` is unset on this dart."""
        return self.alphas[i] == NULL_INDEX

    def mark(self):
        self.ismarked = True

    def unmark(self):
        self.ismarked = False

    def __repr__(self):
        return f"Dart({self.index}, alphas={self.alphas})"
