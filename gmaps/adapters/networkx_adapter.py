from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install gmaps[networkx]"
    ) from e

from ..core.dart import Dart
from ..core.gmap import GeneralizedMap


def to_nx(gmap: GeneralizedMap, *, include_embeddings: bool = True) -> nx.MultiGraph:
    """Export the dart graph of a map to a NetworkX MultiGraph.

    Parameters
    ----------
    gmap : GeneralizedMap
        Source map.
    include_embeddings : bool
        If True, store 'globalembed' on each node.

    Returns
    -------
    networkx.MultiGraph
        One node per dart (keyed by index) carrying 'iskey' (and
        'globalembed'); one edge per alpha_i link with edge key ``i`` and
        attribute ``alpha=i``. A dart linked to itself gives a self-loop;
        free slots give no edge. ``G.graph['dimension']`` holds the map
        dimension.

    """
    G = nx.MultiGraph(dimension=gmap.dimension)
    for d in gmap.darts:
        attrs = {"iskey": list(d.iskey)}
        if include_embeddings:
            attrs["globalembed"] = list(d.globalembed)
        G.add_node(d.index, **attrs)
    for d in gmap.darts:
        for i, j in enumerate(d.alphas):
            # each link once, from its lower end
            if j and d.index <= j:
                G.add_edge(d.index, j, key=i, alpha=i)
            elif j and gmap.dart(j).alphas[i] != d.index:
                # one-sided link
                G.add_edge(d.index, j, key=i, alpha=i)
    return G


def from_nx(G: nx.MultiGraph, dimension: int | None = None, *, history: bool = True) -> GeneralizedMap:
    """Rebuild a map from a graph produced by :func:`to_nx`.

    Nodes must be the integers 1..N. Every edge needs an 'alpha' attribute
    and is linked both ways.

    Raises
    ------
    ValueError
        If the nodes are not 1..N or the dimension cannot be determined.

    """
    if dimension is None:
        dimension = G.graph.get("dimension")
    if dimension is None:
        alphas = [a for _, _, a in G.edges(data="alpha")]
        if not alphas:
            raise ValueError("cannot infer dimension: pass dimension=")
        dimension = max(alphas)
    nodes = sorted(G.nodes)
    if nodes != list(range(1, len(nodes) + 1)):
        raise ValueError("graph nodes must be exactly 1..N")

    gmap = GeneralizedMap(dimension, history=history)
    for n in nodes:
        d = Dart(dimension)
        data = G.nodes[n]
        for i, v in enumerate(data.get("globalembed", ())[: dimension + 1]):
            d.globalembed[i] = v
        for i, v in enumerate(data.get("iskey", ())[: dimension + 1]):
            d.iskey[i] = bool(v)
        gmap.insert(d)
    for u, v, i in G.edges(data="alpha"):
        gmap.dart(u).alphas[i] = v
        gmap.dart(v).alphas[i] = u
    return gmap
