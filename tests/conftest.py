"""Shared fixtures and helpers for map tests."""

import pathlib
import sys

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from gmaps.core.gmap import GeneralizedMap  # noqa: E402

# ======================================================================
# BUILDERS
# ======================================================================


def make_tetrahedron(gmap):
    """Closed tetrahedron surface from four triangles (24 darts)."""
    d0 = gmap.make_polygon(3)
    d1 = gmap.make_polygon(3)
    d2 = gmap.make_polygon(3)
    d3 = gmap.make_polygon(3)

    gmap.sew(d0, d1, 2)
    gmap.sew(gmap.al(d0, 0, 1), d2, 2)
    gmap.sew(gmap.al(d0, 1, 0), d3, 2)

    gmap.sew(gmap.al(d1, 0, 1), gmap.al(d2, 1), 2)
    gmap.sew(gmap.al(d2, 0, 1), gmap.al(d3, 1), 2)
    gmap.sew(gmap.al(d3, 0, 1), gmap.al(d1, 1), 2)
    return d0


# ======================================================================
# FIXTURES
# ======================================================================


@pytest.fixture
def gmap2():
    """Empty 2-dimensional map."""
    return GeneralizedMap(2)


@pytest.fixture
def two_triangles(gmap2):
    """Two free triangles; returns (map, first dart of each)."""
    t1 = gmap2.make_polygon(3)
    t2 = gmap2.make_polygon(3)
    return gmap2, t1, t2


@pytest.fixture
def tetrahedron(gmap2):
    d0 = make_tetrahedron(gmap2)
    return gmap2, d0


# ======================================================================
# HELPERS
# ======================================================================


def assert_no_marks(gmap):
    """Assert every dart of the map is unmarked."""
    marked = [d.index for d in gmap.darts if d.ismarked]
    assert not marked, f"darts left marked: {marked}"


def keys_in_cell(gmap, d, k):
    return [dp for dp in gmap.collect_cell_darts(d, k) if dp.iskey[k]]


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
