# test_history.py
import os
import sys
import unittest

import polars as pl

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from gmaps.core.gmap import GeneralizedMap


class TestHistory(unittest.TestCase):
    def setUp(self):
        self.g = GeneralizedMap(2)

    def test_insert_is_logged_with_index(self):
        self.g.new_dart()
        h = self.g.history()
        self.assertEqual(len(h), 1)
        self.assertEqual(h[0]["op"], "insert")
        self.assertEqual(h[0]["dart"], 1)
        self.assertEqual(h[0]["result"], 1)
        self.assertEqual(h[0]["version"], 1)

    def test_nested_mutators_logged_once(self):
        t1 = self.g.make_polygon(3)
        t2 = self.g.make_polygon(3)
        self.g.set_cell_embedding(t1, 1, "A")
        self.g.set_cell_embedding(t2, 1, "B")
        self.g.clear_history()
        self.g.sew(t1, t2, 2)
        ops = [e["op"] for e in self.g.history()]
        self.assertEqual(ops, ["sew"])
        evt = self.g.history()[0]
        self.assertEqual(evt["d1"], t1.index)
        self.assertEqual(evt["dim"], 2)
        self.assertEqual(evt["result"], [[t1.index, t2.index], [t1.index + 1, t2.index + 1]])

    def test_versions_increase(self):
        self.g.make_polygon(2)
        versions = [e["version"] for e in self.g.history()]
        self.assertEqual(versions, sorted(versions))
        self.assertEqual(len(set(versions)), len(versions))

    def test_disable_keeps_versioning(self):
        self.g.enable_history(False)
        v0 = self.g._version
        self.g.make_edge()
        self.assertEqual(self.g.history(), [])
        self.assertGreater(self.g._version, v0)
        self.g.enable_history(True)
        self.g.new_dart()
        self.assertEqual(len(self.g.history()), 1)

    def test_constructor_flag(self):
        g = GeneralizedMap(1, history=False)
        g.make_edge()
        self.assertEqual(g.history(), [])

    def test_mark_event(self):
        self.g.mark("checkpoint")
        h = self.g.history()
        self.assertEqual(h[-1]["op"], "mark")
        self.assertEqual(h[-1]["label"], "checkpoint")

    def test_history_as_dataframe(self):
        d = self.g.make_polygon(3)
        self.g.dispatch_embedding(d, 2, {"name": "face"})
        df = self.g.history(as_df=True)
        self.assertIsInstance(df, pl.DataFrame)
        self.assertIn("op", df.columns)
        self.assertEqual(df.height, len(self.g.history()))
        self.assertEqual(df["op"].to_list()[-1], "dispatch_embedding")


class TestSnapshots(unittest.TestCase):
    def setUp(self):
        self.g = GeneralizedMap(2)
        self.t1 = self.g.make_polygon(3)
        self.t2 = self.g.make_polygon(3)

    def test_diff_after_sew(self):
        self.g.snapshot("before")
        self.g.sew(self.t1, self.t2, 2)
        diff = self.g.diff("before")
        self.assertEqual(len(diff.links_added), 2)
        self.assertIn((2, self.t1.index, self.t2.index), diff.links_added)
        self.assertFalse(diff.links_removed)
        self.assertFalse(diff.darts_added)
        self.assertFalse(diff.is_empty())

    def test_diff_between_snapshots(self):
        self.g.snapshot("a")
        self.g.new_dart()
        self.g.set_cell_embedding(self.t1, 2, "x")
        self.g.snapshot("b")
        diff = self.g.diff("a", "b")
        self.assertEqual(diff.darts_added, {13})
        self.assertEqual(diff.keys_added, {(2, self.t1.index)})
        self.assertIn("Darts: +1 added", diff.summary())
        self.assertEqual(diff.to_dict()["keys_added"], [(2, self.t1.index)])

    def test_unsew_shows_removed_links(self):
        self.g.sew(self.t1, self.t2, 2)
        self.g.snapshot("sewn")
        self.g.unsew(self.t1, 2)
        self.assertEqual(len(self.g.diff("sewn").links_removed), 2)

    def test_list_and_resolve(self):
        self.g.snapshot()
        self.g.snapshot("named")
        labels = [s["label"] for s in self.g.list_snapshots()]
        self.assertEqual(labels, ["snapshot_0", "named"])
        with self.assertRaises(ValueError):
            self.g.diff("missing")
        with self.assertRaises(TypeError):
            self.g.diff(3)


if __name__ == "__main__":
    unittest.main()
