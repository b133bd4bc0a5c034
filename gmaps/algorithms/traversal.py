from ..core.orbit import Orbit


# Traversal (orbits and cells)
class Traversal:
    def traverse(self, orbit, start, visit):
        """Depth-first walk of the darts reachable from ``start`` through ``orbit``.

        Parameters
        --
        orbit : Orbit | iterable of int
            Involution indices to follow from each dart.
        start : Dart
            Seed dart. Must be unmarked.
        visit : callable
            Called once per reached dart, in LIFO discovery order. Its return
            value is ignored.

        Notes
        -
        Uses an explicit stack. Every visited dart is left **marked**; callers
        that need a clean state unmark afterwards (see
        :meth:`collect_cell_darts`).

        """
        indices = list(orbit)
        start.mark()
        stack = [start]
        while stack:
            d = stack.pop()
            visit(d)
            for j in indices:
                if not self.is_null_alpha(d, j):
                    nxt = self.alpha(d, j)
                    if not nxt.ismarked:
                        nxt.mark()
                        stack.append(nxt)

    def collect_cell_darts(self, d, k):
        """Darts of the k-cell containing ``d``.

        Parameters
        --
        d : Dart
        k : int
            Cell dimension. The orbit followed is every involution of the
            dart's dimension except ``alpha_k``.

        Returns
        ---
        list[Dart]
            Distinct darts in visit order, ``d`` first. All are unmarked on
            return.

        """
        darts = []
        orbit = Orbit.excluding(d.dimension, [k])
        self.traverse(orbit, d, darts.append)
        for dp in darts:
            dp.unmark()
        return darts

    def orbit_darts(self, d, orbit):
        """Like :meth:`collect_cell_darts` for an arbitrary orbit."""
        darts = []
        self.traverse(orbit, d, darts.append)
        for dp in darts:
            dp.unmark()
        return darts

    def cells(self, k):
        """One representative dart per k-cell.

        Representatives are the lowest-index dart of each cell, yielded in
        index order.
        """
        seen = set()
        for d in self.darts:
            if d.index in seen:
                continue
            yield d
            seen.update(dp.index for dp in self.collect_cell_darts(d, k))

    def count_cells(self, k) -> int:
        """Number of k-cells."""
        return sum(1 for _ in self.cells(k))

    def components(self):
        """One representative dart per connected component."""
        seen = set()
        everything = Orbit.excluding(self.dimension)
        for d in self.darts:
            if d.index in seen:
                continue
            yield d
            seen.update(dp.index for dp in self.orbit_darts(d, everything))

    def characteristic(self) -> int:
        """Euler characteristic ``sum((-1)**k * #k-cells)``."""
        return sum((-1) ** k * self.count_cells(k) for k in range(self.dimension + 1))
