"""Tests for side-by-side model comparison."""

import pytest

from thresholdlab.data.classification import ALL_MODEL_TYPES, ModelType, generate_all_datasets
from thresholdlab.evaluation.comparison import (
    MODEL_METADATA,
    best_values,
    compare_models,
    comparison_frame,
)
from thresholdlab.evaluation.confusion import confusion_counts
from thresholdlab.evaluation.curves import roc_auc, threshold_curve
from thresholdlab.evaluation.metrics import derive_metrics


@pytest.fixture(scope="module")
def datasets():
    return generate_all_datasets()


@pytest.fixture(scope="module")
def aucs(datasets):
    return {mt: roc_auc(threshold_curve(ds)) for mt, ds in datasets.items()}


def test_rows_follow_requested_order(datasets, aucs) -> None:
    order = [ModelType.CONSERVATIVE, ModelType.HIGH_PERFORMANCE]
    rows = compare_models(datasets, aucs, 0.5, order)
    assert [r.model_type for r in rows] == order


def test_row_values(datasets, aucs) -> None:
    (row,) = compare_models(datasets, aucs, 0.6, ["balanced"])
    m = derive_metrics(confusion_counts(datasets[ModelType.BALANCED], 0.6))
    assert row.accuracy == m.accuracy
    assert row.f1 == m.f1
    assert row.auc == aucs[ModelType.BALANCED]


def test_missing_auc_is_zero(datasets) -> None:
    (row,) = compare_models(datasets, {}, 0.5, [ModelType.BALANCED])
    assert row.auc == 0.0


def test_best_values(datasets, aucs) -> None:
    rows = compare_models(datasets, aucs, 0.5, ALL_MODEL_TYPES)
    best = best_values(rows)
    assert best["auc"] == max(aucs.values())
    assert best["accuracy"] == max(r.accuracy for r in rows)
    assert best_values([]) == {}


def test_comparison_frame(datasets, aucs) -> None:
    rows = compare_models(datasets, aucs, 0.5, ALL_MODEL_TYPES)
    df = comparison_frame(rows)
    assert df.index.tolist() == ["High Performance", "Balanced", "Conservative"]
    assert df.loc["Balanced", "model_type"] == "balanced"
    assert df.loc["Balanced", "auc"] == pytest.approx(aucs[ModelType.BALANCED])


def test_metadata_covers_every_model() -> None:
    assert set(MODEL_METADATA) == set(ALL_MODEL_TYPES)
