import numpy as np

from ..core.dart import NULL_INDEX


class ValidationReport:
    """Structural problems found by :meth:`Validation.validate`.

    Attributes
    --
    errors : list[tuple[str, str]]
        ``(kind, message)`` pairs. Kinds: 'dimension', 'index', 'dangling',
        'involution', 'commutation', 'key', 'mark'.

    """

    def __init__(self):
        self.errors = []

    def add(self, kind, message):
        self.errors.append((kind, message))

    @property
    def ok(self):
        return not self.errors

    def kinds(self):
        return {k for k, _ in self.errors}

    def __bool__(self):
        return self.ok

    def __repr__(self):
        if self.ok:
            return "ValidationReport(ok)"
        lines = [f"ValidationReport({len(self.errors)} errors)"]
        lines.extend(f"  [{k}] {m}" for k, m in self.errors)
        return "\n".join(lines)


class Validation:
    # Validation (read-only)

    def validate(self, check_keys: bool = True) -> ValidationReport:
        """Check the map's structural invariants without modifying it.

        Checks, in order: dart dimensions, index/position agreement, link
        targets in range, each ``alpha_i`` an involution (free slots count
        as fixed points), ``alpha_i o alpha_j`` an involution for
        ``|i - j| >= 2``, at most one key per cell, and no stray traversal
        marks.

        Parameters
        --
        check_keys : bool, default True
            Also check key uniqueness per cell (one traversal per cell and
            dimension).

        Returns
        ---
        ValidationReport

        """
        report = ValidationReport()
        n = len(self.darts)
        dangling = False
        for pos, d in enumerate(self.darts, start=1):
            if d.dimension != self.dimension:
                report.add("dimension", f"dart {d.index} has dimension {d.dimension}")
                dangling = True
                continue
            if d.index != pos:
                report.add("index", f"dart at position {pos} has index {d.index}")
            for i, j in enumerate(d.alphas):
                if j != NULL_INDEX and not 0 < j <= n:
                    report.add("dangling", f"alpha_{i} of dart {d.index} points to {j}")
                    dangling = True
            if d.ismarked:
                report.add("mark", f"dart {d.index} is left marked")
        if dangling:
            # matrices and traversals need in-range links
            return report

        self._cache.invalidate()
        mats = [self.involution_matrix(i) for i in range(self.dimension + 1)]
        for i, a in enumerate(mats):
            bad = np.unique((a != a.T).nonzero()[0])
            for r in bad:
                report.add("involution", f"alpha_{i} is not an involution at dart {r + 1}")
        for i in range(self.dimension - 1):
            for j in range(i + 2, self.dimension + 1):
                bad = np.unique(((mats[i] @ mats[j]) != (mats[j] @ mats[i])).nonzero()[0])
                for r in bad:
                    report.add(
                        "commutation",
                        f"alpha_{i} alpha_{j} is not an involution at dart {r + 1}",
                    )
        if check_keys and report.ok:
            for k in range(self.dimension + 1):
                for rep in self.cells(k):
                    keys = [d.index for d in self.collect_cell_darts(rep, k) if d.iskey[k]]
                    if len(keys) > 1:
                        report.add("key", f"{k}-cell of dart {rep.index} has keys {keys}")
        return report

    def is_valid(self, check_keys: bool = True) -> bool:
        return self.validate(check_keys=check_keys).ok
