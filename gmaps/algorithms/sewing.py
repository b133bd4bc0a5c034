from ..core.dart import NULL_INDEX


class SewMismatchError(ValueError):
    """Boundary cells passed to a strict sew differ in size."""

    def __init__(self, dim, n1, n2):
        self.dim = dim
        self.sizes = (n1, n2)
        super().__init__(
            f"cannot sew at dimension {dim}: boundary cells have {n1} and {n2} darts"
        )


# Sewing (gluing cells along their boundary)
class Sewing:
    def sew(self, d1, d2, dim, strict: bool = False):
        """Glue the dim-cells of ``d1`` and ``d2`` by linking them with ``alpha_dim``.

        The darts of the (dim-1)-cells of ``d1`` and ``d2`` are paired in
        traversal order. For each pair, every i-cell (``i < dim``) that the
        link merges takes the embedding of the first side's key, and the
        second side's key is retired. Then both ends get ``alpha_dim``.

        Parameters
        --
        d1, d2 : Dart
        dim : int
            Involution to link, ``0 <= dim <= self.dimension``.
        strict : bool, default False
            If True, refuse boundary cells of different sizes. Otherwise the
            pairing stops at the shorter side.

        Returns
        ---
        list[tuple[Dart, Dart]]
            The linked pairs.

        Raises
        --
        SewMismatchError
            ``strict`` and the boundaries differ in size. Nothing is modified.
        ValueError
            ``dim`` is out of range.

        Notes
        -
        Compatibility of the two boundaries is not otherwise checked; an
        incompatible sew leaves a map that :meth:`validate` rejects.

        """
        self._check_dim(dim)
        side1 = self.collect_cell_darts(d1, dim - 1)
        side2 = self.collect_cell_darts(d2, dim - 1)
        if strict and len(side1) != len(side2):
            raise SewMismatchError(dim, len(side1), len(side2))

        pairs = []
        for dp1, dp2 in zip(side1, side2):
            for i in range(dim):
                k1 = self.find_cell_key(dp1, i)
                k2 = self.find_cell_key(dp2, i)
                if k1 is k2:
                    continue
                if k2 is self.null_dart:
                    # keyless second cell still takes the first side's value
                    self.dispatch_embedding(dp2, i, k1.globalembed[i])
                else:
                    k2.iskey[i] = False
                    self.dispatch_embedding(k2, i, k1.globalembed[i])
            dp1.alphas[dim] = dp2.index
            dp2.alphas[dim] = dp1.index
            pairs.append((dp1, dp2))
        return pairs

    def unsew(self, d, dim):
        """Free ``alpha_dim`` across the boundary (dim-1)-cell of ``d``.

        Embeddings and key flags are left untouched.

        Returns
        ---
        list[tuple[Dart, Dart]]
            The pairs that were unlinked.

        """
        self._check_dim(dim)
        pairs = []
        for dp in self.collect_cell_darts(d, dim - 1):
            if self.is_null_alpha(dp, dim):
                continue
            other = self.alpha(dp, dim)
            dp.alphas[dim] = NULL_INDEX
            if other.alphas[dim] == dp.index:
                other.alphas[dim] = NULL_INDEX
            pairs.append((dp, other))
        return pairs
