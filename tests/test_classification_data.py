"""Tests for the synthetic classification datasets."""

import numpy as np
import pytest

from thresholdlab.data.classification import (
    ALL_MODEL_TYPES,
    ARCHETYPES,
    ModelType,
    archetypes_from_config,
    generate_all_datasets,
    generate_dataset,
    samples_to_arrays,
)
from thresholdlab.data.rng import GaussianSampler, SeededRandom


@pytest.mark.parametrize("model_type", ALL_MODEL_TYPES)
def test_dataset_shape(model_type: ModelType) -> None:
    samples = generate_dataset(model_type)
    assert len(samples) == 200
    assert [s.id for s in samples] == list(range(200))
    assert {s.ground_truth for s in samples} <= {0, 1}
    assert all(0.0 <= s.prediction_score <= 1.0 for s in samples)


def test_generation_is_deterministic() -> None:
    first = generate_dataset("high-performance")
    second = generate_dataset("high-performance")
    assert first == second


def test_string_and_enum_agree() -> None:
    assert generate_dataset("balanced") == generate_dataset(ModelType.BALANCED)


def test_archetypes_are_distinct() -> None:
    datasets = generate_all_datasets()
    assert set(datasets) == set(ALL_MODEL_TYPES)
    scores = {mt: tuple(s.prediction_score for s in ds) for mt, ds in datasets.items()}
    assert len(set(scores.values())) == 3


def test_first_sample_follows_stream_order() -> None:
    params = ARCHETYPES[ModelType.HIGH_PERFORMANCE]
    rng = SeededRandom(params.seed)
    gt = 1 if rng() > 0.5 else 0
    score = GaussianSampler(rng).next(params.mean_for(gt), params.std_dev)
    score = max(0.0, min(1.0, score))

    first = generate_dataset(ModelType.HIGH_PERFORMANCE)[0]
    assert first.ground_truth == gt
    assert first.prediction_score == score


def test_high_performance_is_well_separated(high_perf_samples) -> None:
    y, s = samples_to_arrays(high_perf_samples)
    assert s[y == 1].mean() > 0.8
    assert s[y == 0].mean() < 0.2


def test_seed_table() -> None:
    assert ARCHETYPES[ModelType.HIGH_PERFORMANCE].seed == 12345
    assert ARCHETYPES[ModelType.BALANCED].seed == 67890
    assert ARCHETYPES[ModelType.CONSERVATIVE].seed == 13579


def test_unknown_model_type() -> None:
    with pytest.raises(ValueError, match="Unknown model type"):
        generate_dataset("optimistic")


def test_custom_size() -> None:
    samples = generate_dataset(ModelType.CONSERVATIVE, n_samples=10)
    assert len(samples) == 10
    assert samples == generate_dataset(ModelType.CONSERVATIVE)[:10]


def test_samples_to_arrays(balanced_samples) -> None:
    y, s = samples_to_arrays(balanced_samples)
    assert y.shape == s.shape == (200,)
    assert y.dtype.kind == "i"
    assert np.isclose(s[3], balanced_samples[3].prediction_score)


# ------------------------------------------------------------------
# Config overrides
# ------------------------------------------------------------------


def test_archetypes_from_config_overrides_fields() -> None:
    table = archetypes_from_config({"archetypes": {"balanced": {"seed": 1, "std_dev": 0.3}}})
    assert table[ModelType.BALANCED].seed == 1
    assert table[ModelType.BALANCED].std_dev == 0.3
    assert table[ModelType.BALANCED].positive_mean == 0.75
    assert table[ModelType.CONSERVATIVE] == ARCHETYPES[ModelType.CONSERVATIVE]

    samples = generate_dataset(ModelType.BALANCED, archetypes=table)
    assert samples != generate_dataset(ModelType.BALANCED)


def test_archetypes_from_config_empty() -> None:
    assert archetypes_from_config({}) == ARCHETYPES


def test_archetypes_from_config_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unknown keys"):
        archetypes_from_config({"archetypes": {"balanced": {"variance": 1.0}}})
    with pytest.raises(ValueError, match="Unknown model type"):
        archetypes_from_config({"archetypes": {"reckless": {"seed": 1}}})
