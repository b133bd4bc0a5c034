# Embeddings: one value per cell, stored on every dart of the cell
class Embedding:
    def find_cell_key(self, start, dim):
        """Key dart of the ``dim``-cell containing ``start``.

        Returns
        ---
        Dart
            The first dart of the cell (in traversal order) with
            ``iskey[dim]`` set, or ``self.null_dart`` when the cell has no key.

        """
        for d in self.collect_cell_darts(start, dim):
            if d.iskey[dim]:
                return d
        return self.null_dart

    def dispatch_embedding(self, start, dim, data):
        """Set ``globalembed[dim] = data`` on every dart of ``start``'s dim-cell."""
        for d in self.collect_cell_darts(start, dim):
            d.globalembed[dim] = data

    def share_copy_embedding(self, d1, d2, dim):
        """Give the dim-cells of ``d1`` and ``d2`` one shared embedding.

        If the cell of ``d1`` already has a key, it takes ``d2``'s value and
        ``d1`` becomes its key. Otherwise the cell of ``d2`` takes ``d1``'s
        value and ``d2`` becomes its key. A previous key of the rewritten
        cell is retired, so each cell keeps at most one key.

        Notes
        -
        The branch tests cell 1's key but copies from the opposite side. This
        is the established behavior and is kept as is.

        """
        k1 = self.find_cell_key(d1, dim)
        k2 = self.find_cell_key(d2, dim)
        if k1 is not self.null_dart:
            new_em = d2.globalembed[dim]
            k1.iskey[dim] = False
            d1.iskey[dim] = True
            self.dispatch_embedding(d1, dim, new_em)
        else:
            new_em = d1.globalembed[dim]
            if k2 is not self.null_dart:
                k2.iskey[dim] = False
            d2.iskey[dim] = True
            self.dispatch_embedding(d2, dim, new_em)

    def set_cell_embedding(self, d, dim, data):
        """Store ``data`` on the dim-cell of ``d`` and make ``d`` its key."""
        for dp in self.collect_cell_darts(d, dim):
            dp.iskey[dim] = False
            dp.globalembed[dim] = data
        d.iskey[dim] = True

    def cell_embedding(self, d, dim):
        """Embedding of the dim-cell of ``d``.

        Read from the cell's key dart when there is one, else from ``d``.
        """
        key = self.find_cell_key(d, dim)
        if key is self.null_dart:
            return d.globalembed[dim]
        return key.globalembed[dim]
