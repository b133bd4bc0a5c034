import inspect
import json
import time
from datetime import UTC, datetime
from functools import wraps

import numpy as np

from ._MapDiff import MapDiff
from .dart import Dart


class History:
    # History and Timeline

    # Mutating methods to wrap. Add here if you add new mutators.
    _MUTATORS = (
        "insert",
        "link",
        "sew",
        "unsew",
        "dispatch_embedding",
        "share_copy_embedding",
        "set_cell_embedding",
    )
    _EVENT_META = {"version", "ts_utc", "mono_ns", "op"}

    def _utcnow_iso(self) -> str:
        return datetime.now(UTC).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _jsonify(self, x):
        # Make args/return JSON-safe & compact.

        if x is None or isinstance(x, (bool, int, float, str)):
            return x
        # Darts are recorded by index
        if isinstance(x, Dart):
            return x.index
        if isinstance(x, (set, frozenset)):
            return sorted((self._jsonify(v) for v in x), key=repr)
        if isinstance(x, (list, tuple)):
            return [self._jsonify(v) for v in x]
        if isinstance(x, dict):
            return {str(k): self._jsonify(v) for k, v in x.items()}
        if isinstance(x, (np.generic,)):
            return x.item()
        t = type(x).__name__
        return f"<<{t}>>"

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),  # ISO-8601 with Z
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        for k, v in fields.items():
            evt[k] = self._jsonify(v)
        self._history.append(evt)

    def _log_mutation(self, name=None):
        def deco(fn):
            op = name or fn.__name__
            sig = inspect.signature(fn)

            @wraps(fn)
            def wrapper(*args, **kwargs):
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                # nested mutators (sew -> dispatch_embedding) log once, at the top
                self._history_depth += 1
                try:
                    result = fn(*args, **kwargs)
                finally:
                    self._history_depth -= 1
                self._version += 1
                if self._history_depth == 0:
                    payload = {k: v for k, v in bound.arguments.items() if k != "self"}
                    payload["result"] = result
                    self._log_event(op, **payload)
                return result

            return wrapper

        return deco

    def _install_history_hooks(self):
        for name in self._MUTATORS:
            if hasattr(self, name):
                fn = getattr(self, name)
                # Avoid double-wrapping
                if getattr(fn, "__wrapped__", None) is None:
                    setattr(self, name, self._log_mutation(name)(fn))

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        --
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise return a list of dicts.

        Returns
        ---
        list[dict] or polars.DataFrame
            Each event includes: 'version', 'ts_utc' (UTC ISO-8601), 'mono_ns'
            (monotonic nanoseconds since the map was created), 'op', the call
            arguments (darts by index) and 'result'.

        Notes
        -
        Only the outermost mutator of a nested call is recorded: a ``sew``
        appears once, not once per embedding dispatch it performs.

        """
        if as_df:
            try:
                import polars as pl
            except ImportError as e:
                raise RuntimeError(
                    "Cannot return history as DataFrame: install polars."
                ) from e
            # call fields differ per op and per type: store them as JSON text
            rows = [
                {k: v if k in self._EVENT_META else json.dumps(v) for k, v in evt.items()}
                for evt in self._history
            ]
            return pl.DataFrame(rows, infer_schema_length=None)
        return list(self._history)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging.

        The map version keeps advancing while logging is paused.
        """
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log."""
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker into the mutation history.

        Parameters
        --
        label : str
            Human-readable tag for the marker event.

        Notes
        -
        Unrelated to :meth:`Dart.mark`, which flags darts during traversal.

        """
        self._log_event("mark", label=label)

    # Snapshots

    def _state(self, label):
        links = set()
        keys = set()
        for d in self.darts:
            for i, j in enumerate(d.alphas):
                if j:
                    links.add((i, min(d.index, j), max(d.index, j)))
            for i, k in enumerate(d.iskey):
                if k:
                    keys.add((i, d.index))
        return {
            "label": label,
            "version": self._version,
            "dart_ids": {d.index for d in self.darts},
            "links": links,
            "keys": keys,
        }

    def snapshot(self, label=None):
        """Record the current darts, links and key flags under ``label``.

        Parameters
        --
        label : str, optional
            Auto-generated from the snapshot count if None.

        Returns
        ---
        dict
            Snapshot with 'label', 'version', 'timestamp', 'counts' and the
            state sets used by :meth:`diff`.

        """
        if label is None:
            label = f"snapshot_{len(self._snapshots)}"
        snap = self._state(label)
        snap["timestamp"] = self._utcnow_iso()
        snap["counts"] = {"darts": len(snap["dart_ids"]), "links": len(snap["links"])}
        self._snapshots.append(snap)
        return snap

    def diff(self, a, b=None):
        """Compare two snapshots, or a snapshot with the current state.

        Parameters
        --
        a : str | dict
            Snapshot label or snapshot dict.
        b : str | dict | None
            Second snapshot. If None, compare with the current state.

        Returns
        ---
        MapDiff

        """
        snap_a = self._resolve_snapshot(a)
        snap_b = self._resolve_snapshot(b) if b is not None else self._state("current")
        return MapDiff(snap_a, snap_b)

    def _resolve_snapshot(self, ref):
        if isinstance(ref, dict):
            return ref
        if isinstance(ref, str):
            for snap in self._snapshots:
                if snap["label"] == ref:
                    return snap
            raise ValueError(f"Snapshot '{ref}' not found")
        raise TypeError(f"Invalid snapshot reference: {type(ref)}")

    def list_snapshots(self):
        """List snapshot metadata (label, timestamp, version, counts)."""
        return [
            {
                "label": snap["label"],
                "timestamp": snap["timestamp"],
                "version": snap["version"],
                "counts": snap["counts"],
            }
            for snap in self._snapshots
        ]
