"""Precomputed diagram bundles."""

import dataclasses
import json
import math

import pytest

from src.model_data import build_knn_model_data, build_radius_model_data


@pytest.fixture(scope="module")
def knn_data():
    return build_knn_model_data()


@pytest.fixture(scope="module")
def radius_data():
    return build_radius_model_data()


class TestKnnModelData:
    def test_regeneration_is_identical(self):
        first, second = build_knn_model_data(seed=73), build_knn_model_data(seed=73)
        assert first.points == second.points
        assert first.knn_predict(5.0, 5) == second.knn_predict(5.0, 5)
        assert dict(first.prediction_curves) == dict(second.prediction_curves)

    def test_defaults(self, knn_data):
        assert knn_data.default_k == 5
        assert knn_data.default_query_x == 5.0
        assert knn_data.default_query_y == knn_data.knn_predict(5.0, 5)
        assert len(knn_data.default_neighbors) == 5
        assert list(knn_data.default_neighbors) == knn_data.get_neighbors(5.0, 5)

    def test_prediction_is_mean_of_neighbors(self, knn_data):
        for k in knn_data.k_values:
            neighbors = knn_data.get_neighbors(5.0, k)
            assert knn_data.knn_predict(5.0, k) == pytest.approx(sum(nb.y for nb in neighbors) / k)

    def test_stats(self, knn_data):
        assert knn_data.stats.n == 30
        assert knn_data.stats.to_dict() == {"n": 30, "rmse_k5": knn_data.stats.rmse}
        assert knn_data.stats.rmse == pytest.approx(knn_data.compute_rmse(5), abs=5e-4)

    def test_frozen(self, knn_data):
        with pytest.raises(dataclasses.FrozenInstanceError):
            knn_data.points = ()
        with pytest.raises(TypeError):
            knn_data.prediction_curves[2] = ()

    def test_prediction_does_not_touch_dataset(self, knn_data):
        before = knn_data.points
        knn_data.knn_predict(1.234, 7)
        knn_data.get_neighbors(8.8, 15)
        assert knn_data.points == before

    def test_payload(self, knn_data):
        payload = knn_data.to_payload()
        assert payload["config"]["accentColor"] == "#f778ba"
        assert payload["kValues"] == [1, 3, 5, 7, 10, 15]
        assert len(payload["predictionCurves"]["5"]) == 121
        assert payload["defaultNeighbors"][0].keys() == {"idx", "x", "y", "d"}
        json.dumps(payload)


class TestRadiusModelData:
    def test_default_query_has_neighbors(self, radius_data):
        assert radius_data.default_query_x == 3.0
        assert radius_data.default_radius == 1.5
        assert radius_data.default_query_y is not None
        assert radius_data.radius_predict(3.0, 1.5) == radius_data.default_query_y
        assert radius_data.default_neighbors
        assert max(nb.distance for nb in radius_data.default_neighbors) <= 1.5

    def test_neighbor_count_matches(self, radius_data):
        for qx in (0.3, 3.0, 4.5, 7.25, 9.7, 15.0):
            for r in radius_data.radius_values:
                neighbors = radius_data.get_radius_neighbors(qx, r)
                assert len(neighbors) == radius_data.neighbor_count(qx, r)
                assert (radius_data.radius_predict(qx, r) is None) == (len(neighbors) == 0)

    def test_far_query_has_no_prediction(self, radius_data):
        assert radius_data.radius_predict(15.0, 0.5) is None

    def test_stats(self, radius_data):
        assert radius_data.stats.n == 35
        assert set(radius_data.stats.to_dict()) == {"n", "rmse_r1_5"}
        assert math.isfinite(radius_data.stats.rmse)

    def test_payload_keeps_sentinels(self):
        data = build_radius_model_data(default_radius=0.05, default_query_x=4.5)
        payload = data.to_payload()
        assert payload["defaultQueryY"] is None
        assert payload["defaultNeighbors"] == []
        assert payload["stats"]["rmse_r0_05"] == math.inf
