import numpy as np
import scipy.sparse as sp


class CacheManager:
    """Cache manager for materialized involution matrices (CSR)."""

    def __init__(self, gmap):
        self._M = gmap
        self._alpha = {}  # i -> csr_matrix
        self._alpha_version = {}  # i -> map version the matrix was built at

    def involution(self, i):
        """``alpha_i`` as CSR. Builds and caches on first access."""
        if self._alpha.get(i) is None or self._alpha_version.get(i) != self._M._version:
            self._alpha[i] = self._build(i)
            self._alpha_version[i] = self._M._version
        return self._alpha[i]

    def _build(self, i):
        n = len(self._M.darts)
        rows = np.arange(n, dtype=np.int64)
        cols = np.fromiter((d.alphas[i] for d in self._M.darts), dtype=np.int64, count=n) - 1
        # free slot -> fixed point
        free = cols < 0
        cols[free] = rows[free]
        data = np.ones(n, dtype=np.int8)
        return sp.csr_matrix((data, (rows, cols)), shape=(n, n))

    def has_involution(self, i) -> bool:
        """True if the alpha_i matrix exists and matches the current map version."""
        return self._alpha.get(i) is not None and self._alpha_version.get(i) == self._M._version

    # ==================== Cache Management ====================

    def invalidate(self, dims=None):
        """Invalidate cached matrices.

        Parameters
        --
        dims : list[int], optional
            Involution indices to invalidate. If None, invalidate all.

        """
        if dims is None:
            self._alpha.clear()
            self._alpha_version.clear()
            return
        for i in dims:
            self._alpha.pop(i, None)
            self._alpha_version.pop(i, None)

    def info(self):
        """Get cache status and memory usage.

        Returns
        ---
        dict
            Per dimension: whether cached, its nnz and bytes.

        """
        out = {}
        for i, m in self._alpha.items():
            size = m.data.nbytes + m.indices.nbytes + m.indptr.nbytes
            out[i] = {"cached": self.has_involution(i), "nnz": m.nnz, "size_bytes": size}
        return out
