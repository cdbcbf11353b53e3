# src/model_data.py
"""Precomputed, read-only bundles consumed by the diagram layer.

Each builder synthesizes its dataset from an explicit seed, fits the
regressor, samples prediction curves for every hyperparameter candidate and
evaluates the default query. Nothing is computed lazily; the returned bundle
is frozen, and its methods can be re-invoked with any query without touching
the dataset.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .curves import (
    K_VALUES,
    RADIUS_VALUES,
    Curves,
    knn_prediction_curves,
    radius_prediction_curves,
)
from .data import KNN_SEED, RADIUS_SEED, DiagramConfig, Point, make_knn_points, make_radius_points, round_half_up
from .knn import KNNRegressor, NeighborRecord, RadiusNeighborsRegressor
from .validation import loo_rmse_knn, loo_rmse_radius


@dataclass(frozen=True)
class ModelStats:
    n: int
    hyperparameter: float
    rmse: float
    key: str

    def to_dict(self):
        return {"n": self.n, self.key: self.rmse}


def _curves_payload(curves):
    return {str(v): [cp.to_dict() for cp in samples] for v, samples in curves.items()}


@dataclass(frozen=True)
class KNNModelData:
    config: DiagramConfig
    points: Tuple[Point, ...]
    k_values: Tuple[int, ...]
    prediction_curves: Curves
    default_k: int
    default_query_x: float
    default_query_y: float
    default_neighbors: Tuple[NeighborRecord, ...]
    stats: ModelStats
    model: KNNRegressor

    param_name = "k"

    @property
    def hyperparameter_values(self):
        return self.k_values

    def knn_predict(self, query_x, k):
        return self.model.predict(query_x, k)

    def get_neighbors(self, query_x, k):
        return self.model.kneighbors(query_x, k)

    def compute_rmse(self, k):
        return loo_rmse_knn(self.points, k)

    def to_payload(self):
        return {
            "config": self.config.to_dict(),
            "points": [{"x": p.x, "y": p.y} for p in self.points],
            "kValues": list(self.k_values),
            "predictionCurves": _curves_payload(self.prediction_curves),
            "defaultK": self.default_k,
            "defaultQueryX": self.default_query_x,
            "defaultQueryY": self.default_query_y,
            "defaultNeighbors": [nb.to_dict() for nb in self.default_neighbors],
            "stats": self.stats.to_dict(),
        }


@dataclass(frozen=True)
class RadiusModelData:
    config: DiagramConfig
    points: Tuple[Point, ...]
    radius_values: Tuple[float, ...]
    prediction_curves: Curves
    default_radius: float
    default_query_x: float
    default_query_y: Optional[float]
    default_neighbors: Tuple[NeighborRecord, ...]
    stats: ModelStats
    model: RadiusNeighborsRegressor

    param_name = "radius"

    @property
    def hyperparameter_values(self):
        return self.radius_values

    def radius_predict(self, query_x, radius):
        return self.model.predict(query_x, radius)

    def get_radius_neighbors(self, query_x, radius):
        return self.model.radius_neighbors(query_x, radius)

    def neighbor_count(self, query_x, radius):
        return self.model.neighbor_count(query_x, radius)

    def compute_rmse(self, radius):
        return loo_rmse_radius(self.points, radius)

    def to_payload(self):
        return {
            "config": self.config.to_dict(),
            "points": [{"x": p.x, "y": p.y} for p in self.points],
            "radiusValues": list(self.radius_values),
            "predictionCurves": _curves_payload(self.prediction_curves),
            "defaultRadius": self.default_radius,
            "defaultQueryX": self.default_query_x,
            "defaultQueryY": self.default_query_y,
            "defaultNeighbors": [nb.to_dict() for nb in self.default_neighbors],
            "stats": self.stats.to_dict(),
        }


def _stat_key(prefix, value):
    # 5 -> "rmse_k5", 1.5 -> "rmse_r1_5"
    return f"rmse_{prefix}{value:g}".replace(".", "_")


def build_knn_model_data(seed=KNN_SEED, n=30, k_values=K_VALUES, default_k=5,
                         default_query_x=5.0, config=None) -> KNNModelData:
    points = make_knn_points(seed, n)
    model = KNNRegressor(k=default_k).fit(points)
    rmse = loo_rmse_knn(points, default_k)
    return KNNModelData(
        config=config or DiagramConfig(),
        points=points,
        k_values=tuple(k_values),
        prediction_curves=knn_prediction_curves(model, k_values),
        default_k=default_k,
        default_query_x=default_query_x,
        default_query_y=model.predict(default_query_x),
        default_neighbors=tuple(model.kneighbors(default_query_x)),
        stats=ModelStats(len(points), default_k, round_half_up(rmse, 3), _stat_key("k", default_k)),
        model=model,
    )


def build_radius_model_data(seed=RADIUS_SEED, radius_values=RADIUS_VALUES, default_radius=1.5,
                            default_query_x=3.0, config=None) -> RadiusModelData:
    points = make_radius_points(seed)
    model = RadiusNeighborsRegressor(radius=default_radius).fit(points)
    rmse = loo_rmse_radius(points, default_radius)
    return RadiusModelData(
        config=config or DiagramConfig(),
        points=points,
        radius_values=tuple(radius_values),
        prediction_curves=radius_prediction_curves(model, radius_values),
        default_radius=default_radius,
        default_query_x=default_query_x,
        default_query_y=model.predict(default_query_x),
        default_neighbors=tuple(model.radius_neighbors(default_query_x)),
        stats=ModelStats(len(points), default_radius, round_half_up(rmse, 3), _stat_key("r", default_radius)),
        model=model,
    )


BUILDERS = {"knn": build_knn_model_data, "radius": build_radius_model_data}
