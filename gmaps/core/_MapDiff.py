class MapDiff:
    """Represents the difference between two map states.

    Attributes
    --
    darts_added : set[int]
        Dart indices in b but not in a
    links_added : set[tuple[int, int, int]]
        ``(i, lo, hi)`` alpha_i links present in b but not in a
    links_removed : set[tuple[int, int, int]]
        Links present in a but not in b
    keys_added : set[tuple[int, int]]
        ``(dim, index)`` key flags set in b but not in a
    keys_removed : set[tuple[int, int]]
        Key flags set in a but not in b

    Notes
    -
    Darts are never removed from a map, so there is no ``darts_removed``.

    """

    def __init__(self, snapshot_a, snapshot_b):
        self.snapshot_a = snapshot_a
        self.snapshot_b = snapshot_b

        self.darts_added = snapshot_b["dart_ids"] - snapshot_a["dart_ids"]
        self.links_added = snapshot_b["links"] - snapshot_a["links"]
        self.links_removed = snapshot_a["links"] - snapshot_b["links"]
        self.keys_added = snapshot_b["keys"] - snapshot_a["keys"]
        self.keys_removed = snapshot_a["keys"] - snapshot_b["keys"]

    def summary(self):
        """Human-readable summary of differences."""
        lines = [
            f"Diff: {self.snapshot_a['label']} - {self.snapshot_b['label']}",
            "",
            f"Darts: {len(self.darts_added):+d} added",
            f"Links: {len(self.links_added):+d} added, {len(self.links_removed)} removed",
            f"Keys: {len(self.keys_added):+d} added, {len(self.keys_removed)} removed",
        ]
        return "\n".join(lines)

    def is_empty(self):
        """Check if there are no differences."""
        return (
            not self.darts_added
            and not self.links_added
            and not self.links_removed
            and not self.keys_added
            and not self.keys_removed
        )

    def __repr__(self):
        return self.summary()

    def to_dict(self):
        """Convert to dictionary for serialization."""
        return {
            "snapshot_a": self.snapshot_a["label"],
            "snapshot_b": self.snapshot_b["label"],
            "darts_added": sorted(self.darts_added),
            "links_added": sorted(self.links_added),
            "links_removed": sorted(self.links_removed),
            "keys_added": sorted(self.keys_added),
            "keys_removed": sorted(self.keys_removed),
        }
