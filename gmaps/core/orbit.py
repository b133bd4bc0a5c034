from __future__ import annotations

from collections.abc import Iterable


class Orbit:
    """Ordered set of involution indices that parameterizes a traversal.

    Parameters
    --
    indices : iterable of int, optional
        Involutions to follow, in order. Duplicates are dropped, keeping the
        first occurrence. Empty by default (the orbit of a single dart).

    See Also

    Orbit.excluding, Orbit.cell

    """

    def __init__(self, indices: Iterable[int] = ()):
        self.indices: list[int] = []
        for j in indices:
            j = int(j)
            if j not in self.indices:
                self.indices.append(j)

    @classmethod
    def excluding(cls, dim: int, exclude: Iterable[int] = ()) -> Orbit:
        """All dimensions ``0..=dim`` except those in ``exclude``.

        Parameters
        --
        dim : int
            Highest involution index to include.
        exclude : iterable of int
            Dimensions to skip.

        Returns
        ---
        Orbit

        """
        skip = set(exclude)
        return cls(j for j in range(int(dim) + 1) if j not in skip)

    @classmethod
    def cell(cls, k: int, dim: int) -> Orbit:
        """Orbit of the k-cell in a map of dimension ``dim``."""
        return cls.excluding(dim, [k])

    def __iter__(self):
        return iter(self.indices)

    def __len__(self):
        return len(self.indices)

    def __contains__(self, j):
        return j in self.indices

    def __eq__(self, other):
        if not isinstance(other, Orbit):
            return NotImplemented
        return self.indices == other.indices

    def __hash__(self):
        return hash(tuple(self.indices))

    def __repr__(self):
        return f"Orbit({self.indices})"
