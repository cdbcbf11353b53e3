# src/curves.py
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from .data import round_half_up

K_VALUES = (1, 3, 5, 7, 10, 15)
RADIUS_VALUES = (0.5, 1.0, 1.5, 2.0, 2.5, 3.0)
X_MIN, X_MAX = 0.3, 9.7
NUM_STEPS = 120


@dataclass(frozen=True)
class CurvePoint:
    x: float
    y: Optional[float]
    count: Optional[int] = None

    @property
    def is_gap(self):
        return self.y is None

    def to_dict(self):
        out = {"x": self.x, "y": self.y}
        if self.count is not None:
            out["count"] = self.count
        return out


Curves = Mapping[float, Tuple[CurvePoint, ...]]


def query_grid(x_min=X_MIN, x_max=X_MAX, num_steps=NUM_STEPS) -> List[float]:
    """num_steps + 1 query locations from x_min to x_max inclusive."""
    return [x_min + (s / num_steps) * (x_max - x_min) for s in range(num_steps + 1)]


def knn_prediction_curves(model, k_values: Sequence[int] = K_VALUES, grid=None) -> Curves:
    grid = query_grid() if grid is None else grid
    curves = {}
    for k in k_values:
        curves[k] = tuple(
            CurvePoint(round_half_up(xq), round_half_up(model.predict(xq, k)))
            for xq in grid
        )
    return MappingProxyType(curves)


def radius_prediction_curves(model, radius_values: Sequence[float] = RADIUS_VALUES, grid=None) -> Curves:
    """Like knn_prediction_curves, but each sample also carries its neighbor count.

    Where nothing lies within the radius the sample is a gap: y is None and
    count is 0. Renderers must break the line there.
    """
    grid = query_grid() if grid is None else grid
    curves = {}
    for r in radius_values:
        samples = []
        for xq in grid:
            yq = model.predict(xq, r)
            if yq is None:
                samples.append(CurvePoint(round_half_up(xq), None, 0))
            else:
                samples.append(CurvePoint(round_half_up(xq), round_half_up(yq), model.neighbor_count(xq, r)))
        curves[r] = tuple(samples)
    return MappingProxyType(curves)


def curves_to_frame(curves: Curves, param_name="k") -> pd.DataFrame:
    """Long-format table: one row per (hyperparameter, sample). Gaps become NaN."""
    rows = []
    for value, samples in curves.items():
        for cp in samples:
            row = {param_name: value, "x": cp.x, "y": cp.y}
            if cp.count is not None:
                row["count"] = cp.count
            rows.append(row)
    df = pd.DataFrame(rows)
    df["y"] = pd.to_numeric(df["y"])
    return df
