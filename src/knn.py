import math
from dataclasses import dataclass

import numpy as np


class InvalidParameterError(ValueError):
    """Raised for a non-positive k, a negative radius, or an unfitted model."""


@dataclass(frozen=True)
class NeighborRecord:
    index: int
    x: float
    y: float
    distance: float

    def to_dict(self):
        return {"idx": self.index, "x": self.x, "y": self.y, "d": self.distance}


def check_k(k):
    if isinstance(k, bool) or not isinstance(k, (int, np.integer)) or k <= 0:
        raise InvalidParameterError(f"k must be a positive integer, got {k!r}")
    return int(k)


def check_radius(radius):
    try:
        r = float(radius)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"radius must be a number, got {radius!r}") from exc
    if not math.isfinite(r) or r < 0:
        raise InvalidParameterError(f"radius must be finite and >= 0, got {radius!r}")
    return r


class _NeighborsBase:
    def __init__(self, distance="euclidean"):
        if distance != "euclidean":
            raise ValueError("Only euclidean distance implemented in this simple version.")
        self.distance = distance
        self.x_ = None
        self.y_ = None

    def fit(self, points):
        self.x_ = np.asarray([p.x for p in points], dtype=float)
        self.y_ = np.asarray([p.y for p in points], dtype=float)
        return self

    def _distances(self, query_x):
        if self.x_ is None:
            raise InvalidParameterError("model is not fitted; call fit(points) first")
        # 1D euclidean == |q - x|
        return np.abs(float(query_x) - self.x_)

    def _records(self, idx, d):
        return [
            NeighborRecord(int(i), float(self.x_[i]), float(self.y_[i]), float(d[i]))
            for i in idx
        ]


class KNNRegressor(_NeighborsBase):
    def __init__(self, k=5, distance="euclidean"):
        super().__init__(distance)
        self.k = check_k(k)

    def _ranked(self, query_x, k):
        k = self.k if k is None else check_k(k)
        d = self._distances(query_x)
        # stable: equal distances keep dataset order
        order = np.argsort(d, kind="stable")
        return k, order[:k], d

    def kneighbors(self, query_x, k=None):
        _, nn_idx, d = self._ranked(query_x, k)
        return self._records(nn_idx, d)

    def predict(self, query_x, k=None):
        # Divides by k even when fewer than k points exist (kept as-is).
        k, nn_idx, _ = self._ranked(query_x, k)
        return sum(self.y_[nn_idx].tolist()) / k


class RadiusNeighborsRegressor(_NeighborsBase):
    def __init__(self, radius=1.5, distance="euclidean"):
        super().__init__(distance)
        self.radius = check_radius(radius)

    def _within(self, query_x, radius):
        r = self.radius if radius is None else check_radius(radius)
        d = self._distances(query_x)
        return np.flatnonzero(d <= r), d

    def radius_neighbors(self, query_x, radius=None):
        idx, d = self._within(query_x, radius)
        order = np.argsort(d[idx], kind="stable")
        return self._records(idx[order], d)

    def neighbor_count(self, query_x, radius=None):
        idx, _ = self._within(query_x, radius)
        return int(idx.size)

    def predict(self, query_x, radius=None):
        """Mean y of the points within radius, or None when there are none."""
        idx, _ = self._within(query_x, radius)
        if idx.size == 0:
            return None
        return sum(self.y_[idx].tolist()) / idx.size
