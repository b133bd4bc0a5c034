from __future__ import annotations

from typing import Any

import narwhals as nw
import polars as pl
from narwhals.typing import IntoDataFrame

from ..core.dart import Dart
from ..core.gmap import GeneralizedMap


def to_dataframe(
    gmap: GeneralizedMap,
    *,
    include_embeddings: bool = True,
    include_keys: bool = True,
) -> pl.DataFrame:
    """Export the darts of a map to a Polars DataFrame, one row per dart.

    Columns:
    - 'dart': dart index (1-based)
    - 'alpha_<i>': index of alpha_i, 0 when free
    - 'embed_<i>': embedding slot i (if include_embeddings)
    - 'key_<i>': key flag for dimension i (if include_keys)

    Note: embedding columns have dtype pl.Object and hold the Python values
    as stored, so a dimension may mix types (e.g. str and int) and tuples
    stay tuples.

    Args:
        gmap: map to export
        include_embeddings: include the per-dimension embedding columns
        include_keys: include the per-dimension key flag columns

    Returns:
        Polars DataFrame ordered by dart index

    """
    dims = range(gmap.dimension + 1)
    data: dict[str, list[Any]] = {"dart": [d.index for d in gmap.darts]}
    for i in dims:
        data[f"alpha_{i}"] = [d.alphas[i] for d in gmap.darts]
    if include_embeddings:
        for i in dims:
            data[f"embed_{i}"] = [d.globalembed[i] for d in gmap.darts]
    if include_keys:
        for i in dims:
            data[f"key_{i}"] = [d.iskey[i] for d in gmap.darts]

    schema: dict[str, Any] = {"dart": pl.Int64}
    schema.update({f"alpha_{i}": pl.Int64 for i in dims})
    if include_embeddings:
        schema.update({f"embed_{i}": pl.Object for i in dims})
    if include_keys:
        schema.update({f"key_{i}": pl.Boolean for i in dims})
    df = pl.DataFrame(data, schema_overrides=schema)
    return df


def _alpha_columns(columns: list[str]) -> list[int]:
    dims = []
    for c in columns:
        if c.startswith("alpha_"):
            try:
                dims.append(int(c[len("alpha_"):]))
            except ValueError:
                continue
    return sorted(dims)


def from_dataframe(
    darts: IntoDataFrame,
    *,
    dimension: int | None = None,
    history: bool = True,
) -> GeneralizedMap:
    """Build a map from any DataFrame (Pandas, Polars, PyArrow, etc.).

    Accepts the layout produced by to_dataframe(): a 'dart' column and one
    'alpha_<i>' column per dimension; 'embed_<i>' and 'key_<i>' are optional.

    Args:
        darts: DataFrame with one row per dart
        dimension: map dimension (default: highest alpha column)
        history: passed to GeneralizedMap

    Returns:
        GeneralizedMap whose dart indices match the 'dart' column

    Raises:
        ValueError: missing columns, or dart indices that are not exactly
            1..N

    """
    df = nw.from_native(darts, eager_only=True)
    if "dart" not in df.columns:
        raise ValueError("darts DataFrame must have 'dart' column")
    alpha_dims = _alpha_columns(df.columns)
    if dimension is None:
        if not alpha_dims:
            raise ValueError("darts DataFrame has no 'alpha_<i>' columns")
        dimension = alpha_dims[-1]
    missing = [i for i in range(dimension + 1) if i not in alpha_dims]
    if missing:
        raise ValueError(f"missing alpha columns for dimensions {missing}")

    # sorted in Python: object columns are carried through untouched
    rows = sorted(
        (dict(zip(df.columns, r)) for r in df.rows()), key=lambda r: int(r["dart"])
    )
    indices = [int(r["dart"]) for r in rows]
    if indices != list(range(1, len(rows) + 1)):
        raise ValueError("dart indices must be exactly 1..N")

    gmap = GeneralizedMap(dimension, history=history)
    for r in rows:
        d = Dart(dimension)
        for i in range(dimension + 1):
            d.alphas[i] = int(r[f"alpha_{i}"] or 0)
            if f"embed_{i}" in r:
                d.globalembed[i] = r[f"embed_{i}"]
            if f"key_{i}" in r:
                d.iskey[i] = bool(r[f"key_{i}"])
        gmap.insert(d)
    return gmap
