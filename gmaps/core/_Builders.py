class Builders:
    # Build darts and small cells

    def add_darts(self, n: int):
        """Create and insert ``n`` free darts.

        Returns
        ---
        list[Dart]
            The new darts, in index order.

        """
        return [self.new_dart() for _ in range(int(n))]

    def make_edge(self):
        """Two darts joined by ``alpha_0``. Returns the first one."""
        d, e = self.add_darts(2)
        self.link(d, e, 0)
        return d

    def make_polygon(self, n: int):
        """Closed polygon of ``n`` edges (``2n`` darts).

        Edges are joined end to start by ``alpha_1``. The returned dart sits
        on the first edge; ``alpha(d, 0)`` is the other end of that edge and
        ``alpha(d, 1)`` the last edge.

        Parameters
        --
        n : int
            Number of sides, at least 1.

        Returns
        ---
        Dart

        """
        n = int(n)
        if n < 1:
            raise ValueError(f"polygon needs at least 1 side, got {n}")
        if self.dimension < 1:
            raise ValueError("a polygon needs dimension >= 1")
        start = self.make_edge()
        prev = self.alpha(start, 0)
        for _ in range(n - 1):
            c = self.make_edge()
            self.link(c, prev, 1)
            prev = self.alpha(c, 0)
        self.link(start, prev, 1)
        return start

    def al(self, dart, *ii):
        """Follow ``alpha_i`` for each ``i`` in order (``al(d, 0, 1)``)."""
        for i in ii:
            if dart.is_null():
                return dart
            dart = self.alpha(dart, i)
        return dart
