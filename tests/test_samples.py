"""Tests for the per-sample outcome table."""

import pytest

from thresholdlab.evaluation.confusion import confusion_counts
from thresholdlab.evaluation.samples import (
    FRAME_COLUMNS,
    filter_samples,
    is_borderline,
    sample_status,
    samples_frame,
    status_counts,
)


@pytest.fixture()
def frame(four_samples):
    return samples_frame(four_samples, 0.5)


def test_frame_columns_and_status(frame) -> None:
    assert list(frame.columns) == FRAME_COLUMNS
    assert frame["predicted"].tolist() == [1, 0, 0, 1]
    assert frame["status"].tolist() == ["TP", "FN", "TN", "FP"]


def test_status_counts_match_confusion(balanced_samples) -> None:
    df = samples_frame(balanced_samples, 0.42)
    assert status_counts(df) == confusion_counts(balanced_samples, 0.42).as_dict()


def test_status_counts_include_absent_outcomes(make_samples) -> None:
    df = samples_frame(make_samples([(1, 0.9)]), 0.5)
    assert status_counts(df) == {"tp": 1, "fp": 0, "fn": 0, "tn": 0}


def test_sample_status() -> None:
    assert sample_status(1, 1) == "TP"
    assert sample_status(0, 1) == "FP"
    assert sample_status(1, 0) == "FN"
    assert sample_status(0, 0) == "TN"


def test_filter_by_status(frame) -> None:
    out = filter_samples(frame, status="fp")
    assert out["id"].tolist() == [3]
    assert len(filter_samples(frame, status="ALL")) == 4


def test_sort_orders(frame) -> None:
    assert filter_samples(frame)["prediction_score"].tolist() == [0.9, 0.6, 0.4, 0.2]
    assert filter_samples(frame, sort="score_asc")["prediction_score"].tolist() == [0.2, 0.4, 0.6, 0.9]
    # |score - 0.5|: 0.4, 0.1, 0.3, 0.1 -> ties keep table order
    assert filter_samples(frame, sort="uncertain")["id"].tolist() == [1, 3, 2, 0]


def test_near_threshold_window(frame) -> None:
    out = filter_samples(frame, near_threshold=0.5, window=0.1)
    assert sorted(out["id"].tolist()) == [1, 3]


def test_invalid_options(frame) -> None:
    with pytest.raises(ValueError):
        filter_samples(frame, status="maybe")
    with pytest.raises(ValueError):
        filter_samples(frame, sort="random")


def test_borderline() -> None:
    assert is_borderline(0.45)
    assert is_borderline(0.55)
    assert not is_borderline(0.56)
