import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from conftest import assert_no_marks, keys_in_cell  # noqa: E402


class TestFindCellKey:
    def test_absent_key_returns_null_dart(self, two_triangles):
        g, t1, _ = two_triangles
        key = g.find_cell_key(t1, 2)
        assert key is g.null_dart
        assert key.is_null()
        assert_no_marks(g)

    def test_finds_key_anywhere_in_cell(self, two_triangles):
        g, t1, _ = two_triangles
        other = g.al(t1, 0, 1, 0)
        other.iskey[2] = True
        assert g.find_cell_key(t1, 2) is other

    def test_key_of_other_dimension_ignored(self, two_triangles):
        g, t1, _ = two_triangles
        t1.iskey[1] = True
        assert g.find_cell_key(t1, 2) is g.null_dart
        assert g.find_cell_key(t1, 1) is t1

    def test_key_in_other_cell_ignored(self, two_triangles):
        g, t1, t2 = two_triangles
        t2.iskey[2] = True
        assert g.find_cell_key(t1, 2) is g.null_dart


class TestDispatchEmbedding:
    def test_propagates_to_whole_cell(self, two_triangles):
        g, t1, t2 = two_triangles
        g.dispatch_embedding(t1, 2, {"color": "red"})
        for d in g.collect_cell_darts(t1, 2):
            assert d.globalembed[2] == {"color": "red"}
        assert t2.globalembed[2] is None
        # other dimensions untouched
        assert t1.globalembed[1] is None
        assert_no_marks(g)

    def test_edge_embedding(self, two_triangles):
        g, t1, _ = two_triangles
        g.dispatch_embedding(t1, 1, 3.5)
        assert t1.globalembed[1] == 3.5
        assert g.alpha(t1, 0).globalembed[1] == 3.5
        assert g.alpha(t1, 1).globalembed[1] is None

    def test_does_not_touch_keys(self, two_triangles):
        g, t1, _ = two_triangles
        g.dispatch_embedding(t1, 2, "x")
        assert keys_in_cell(g, t1, 2) == []


class TestShareCopyEmbedding:
    def test_keyed_first_cell_takes_second_value(self, two_triangles):
        g, t1, t2 = two_triangles
        p = g.alpha(t1, 0)
        g.set_cell_embedding(p, 2, "X")
        g.set_cell_embedding(t2, 2, "Y")

        g.share_copy_embedding(t1, t2, 2)

        assert all(d.globalembed[2] == "Y" for d in g.collect_cell_darts(t1, 2))
        assert keys_in_cell(g, t1, 2) == [t1]
        # second cell keeps its value and key
        assert all(d.globalembed[2] == "Y" for d in g.collect_cell_darts(t2, 2))
        assert keys_in_cell(g, t2, 2) == [t2]

    def test_unkeyed_first_cell_gives_its_value(self, two_triangles):
        g, t1, t2 = two_triangles
        g.dispatch_embedding(t1, 2, "X")
        q = g.alpha(t2, 1)
        g.set_cell_embedding(q, 2, "Y")

        g.share_copy_embedding(t1, t2, 2)

        assert all(d.globalembed[2] == "X" for d in g.collect_cell_darts(t2, 2))
        assert keys_in_cell(g, t2, 2) == [t2]
        assert not q.iskey[2]
        assert keys_in_cell(g, t1, 2) == []

    def test_no_keys_at_all(self, two_triangles):
        g, t1, t2 = two_triangles
        g.dispatch_embedding(t1, 2, "X")
        g.share_copy_embedding(t1, t2, 2)
        assert g.cell_embedding(t2, 2) == "X"
        assert g.find_cell_key(t2, 2) is t2

    def test_at_most_one_key_per_cell(self, two_triangles):
        g, t1, t2 = two_triangles
        g.set_cell_embedding(t1, 2, 1)
        g.set_cell_embedding(t2, 2, 2)
        for _ in range(3):
            g.share_copy_embedding(g.alpha(t1, 0), t2, 2)
            g.share_copy_embedding(t2, t1, 2)
        assert len(keys_in_cell(g, t1, 2)) <= 1
        assert len(keys_in_cell(g, t2, 2)) <= 1
        assert_no_marks(g)


class TestCellEmbedding:
    def test_set_makes_single_key(self, two_triangles):
        g, t1, _ = two_triangles
        g.set_cell_embedding(t1, 2, "A")
        g.set_cell_embedding(g.alpha(t1, 0), 2, "B")
        assert keys_in_cell(g, t1, 2) == [g.alpha(t1, 0)]
        assert g.cell_embedding(t1, 2) == "B"

    def test_reads_key_over_stale_slot(self, two_triangles):
        g, t1, _ = two_triangles
        g.set_cell_embedding(t1, 2, "A")
        g.alpha(t1, 0).globalembed[2] = "stale"
        assert g.cell_embedding(g.alpha(t1, 0), 2) == "A"

    def test_without_key_reads_own_slot(self, two_triangles):
        g, t1, _ = two_triangles
        t1.globalembed[1] = 7
        assert g.cell_embedding(t1, 1) == 7
