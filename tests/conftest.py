"""Shared pytest fixtures for thresholdlab tests."""

import pytest

from thresholdlab.data.classification import ClassificationSample, ModelType, generate_dataset


def _make_samples(pairs):
    return tuple(
        ClassificationSample(id=i, ground_truth=gt, prediction_score=score)
        for i, (gt, score) in enumerate(pairs)
    )


@pytest.fixture()
def make_samples():
    """Factory building samples from (ground_truth, score) pairs, ids in order."""
    return _make_samples


@pytest.fixture()
def four_samples():
    """Two positives (0.9, 0.4), two negatives (0.2, 0.6)."""
    return _make_samples([(1, 0.9), (1, 0.4), (0, 0.2), (0, 0.6)])


@pytest.fixture(scope="session")
def balanced_samples():
    return generate_dataset(ModelType.BALANCED)


@pytest.fixture(scope="session")
def high_perf_samples():
    return generate_dataset(ModelType.HIGH_PERFORMANCE)
