import copy
import time

from ..algorithms.embedding import Embedding
from ..algorithms.sewing import Sewing
from ..algorithms.traversal import Traversal
from ..algorithms.validation import Validation
from ._Builders import Builders
from ._CacheManager import CacheManager
from ._History import History
from .dart import NULL_INDEX, Dart


class GeneralizedMap(Traversal, Embedding, Sewing, Validation, Builders, History):
    """Insertion-ordered owning collection of darts.

    A generalized map of dimension ``D`` represents a cellular complex as
    darts linked by involutions ``alpha_0 .. alpha_D``. Links are stored on
    the darts as indices into this collection; index ``0`` means "free".

    Parameters
    --
    dimension : int
        Ambient dimension ``D``. All inserted darts must share it.
    history : bool, default True
        Record mutations in the in-memory history (see :meth:`history`).

    Notes
    -
    - Dart indices are 1-based positions, assigned by :meth:`insert`,
      monotonically increasing and never reused.
    - ``null_dart`` is the map's sentinel (index 0). :meth:`alpha` on a free
      slot and :meth:`find_cell_key` on a keyless cell return this exact
      object; compare with ``is``.
    - Traversal marks live on the darts. Operations on one map must not be
      interleaved from several threads.

    See Also

    insert, alpha, traverse, collect_cell_darts, sew

    """

    def __init__(self, dimension: int, history: bool = True):
        dimension = int(dimension)
        if dimension < 0:
            raise ValueError(f"dimension must be >= 0, got {dimension}")
        self.dimension = dimension
        self.darts: list[Dart] = []
        self.null_dart = Dart(dimension)

        # Involution matrices
        self._cache = CacheManager(self)

        # History and Timeline
        self._version = 0
        self._history_enabled = bool(history)
        self._history = []  # list[dict]
        self._history_depth = 0
        self._history_clock0 = time.perf_counter_ns()
        self._snapshots = []
        self._install_history_hooks()  # wrap mutating methods

    # Darts

    def insert(self, dart: Dart) -> int:
        """Append ``dart`` and assign it the next index.

        Parameters
        --
        dart : Dart
            A dart of the map's dimension, not yet owned by this map.

        Returns
        ---
        int
            The assigned index (``len(self)`` after insertion).

        Raises
        --
        ValueError
            If the dart has another dimension, is the sentinel, or is
            already owned by this map.

        """
        if dart is self.null_dart:
            raise ValueError("cannot insert the null dart")
        if dart.dimension != self.dimension:
            raise ValueError(
                f"dart has dimension {dart.dimension}, map has dimension {self.dimension}"
            )
        if self.owns(dart):
            raise ValueError(f"dart {dart.index} is already in this map")
        dart.index = len(self.darts) + 1
        self.darts.append(dart)
        return dart.index

    def new_dart(self) -> Dart:
        """Create a dart of the map's dimension and insert it."""
        d = Dart(self.dimension)
        self.insert(d)
        return d

    def dart(self, index: int) -> Dart:
        """Dart with the given index; ``0`` gives the null dart."""
        if index == NULL_INDEX:
            return self.null_dart
        if not 0 < index <= len(self.darts):
            raise KeyError(f"Dart {index} not found")
        return self.darts[index - 1]

    def owns(self, dart: Dart) -> bool:
        """True if ``dart`` (by identity) belongs to this map."""
        i = dart.index
        return 0 < i <= len(self.darts) and self.darts[i - 1] is dart

    def alpha(self, dart: Dart, i: int) -> Dart:
        """Dart reached from ``dart`` by ``alpha_i``; the null dart if free."""
        j = dart.alphas[i]
        if j == NULL_INDEX:
            return self.null_dart
        return self.darts[j - 1]

    def is_null_alpha(self, dart: Dart, i: int) -> bool:
        return dart.alphas[i] == NULL_INDEX

    def link(self, d1: Dart, d2: Dart, i: int):
        """Set ``alpha_i`` both ways between ``d1`` and ``d2``.

        No check is made that either slot was free; existing links are
        overwritten.
        """
        self._check_dim(i)
        d1.alphas[i] = d2.index
        d2.alphas[i] = d1.index

    def _check_dim(self, i):
        if not 0 <= i <= self.dimension:
            raise ValueError(f"dimension {i} out of range 0..{self.dimension}")

    # Copy

    def copy(self, history: bool = False):
        """Deep copy of the map: darts, links, embeddings and key flags.

        Parameters
        --
        history : bool, default False
            If True, copy the mutation history and snapshots too. Otherwise
            the new map starts with a clean history.

        Returns
        ---
        GeneralizedMap
            An independent map. Its mutators act on the copy only.

        Notes
        -
        Embedding values are deep-copied.

        """
        new = type(self)(self.dimension, history=self._history_enabled)
        for d in self.darts:
            c = Dart(self.dimension)
            c.index = d.index
            c.alphas = list(d.alphas)
            c.globalembed = copy.deepcopy(d.globalembed)
            c.iskey = list(d.iskey)
            new.darts.append(c)
        new.null_dart.globalembed = copy.deepcopy(self.null_dart.globalembed)
        new._version = self._version
        if history:
            new._history = copy.deepcopy(self._history)
            new._snapshots = copy.deepcopy(self._snapshots)
        return new

    def __copy__(self):
        return self.copy(history=True)

    def __deepcopy__(self, memo):
        new = self.copy(history=True)
        memo[id(self)] = new
        return new

    # Involution matrices

    @property
    def cache(self):
        return self._cache

    def involution_matrix(self, i: int):
        """``alpha_i`` as a sparse (n x n) 0/1 matrix over dart positions.

        Row ``r`` has a single 1 at column ``alpha_i(r)``; free darts map to
        themselves. Cached per map version.

        Notes
        -
        Writing ``Dart.alphas`` directly does not bump the version; call
        ``cache.invalidate()`` afterwards.

        """
        self._check_dim(i)
        return self._cache.involution(i)

    # Dunder

    def __len__(self):
        return len(self.darts)

    def __iter__(self):
        return iter(self.darts)

    def __contains__(self, dart):
        return isinstance(dart, Dart) and self.owns(dart)

    def __repr__(self):
        return f"GeneralizedMap(dimension={self.dimension}, darts={len(self.darts)})"
