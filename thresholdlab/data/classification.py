# thresholdlab/data/classification.py
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

import numpy as np

from ..utils.config import get_section
from ..utils.logging import get_logger
from .rng import GaussianSampler, SeededRandom


DEFAULT_N_SAMPLES = 200

logger = get_logger(__name__)


class ModelType(str, Enum):
    """Synthetic model archetypes. Values are the names used by the UI layer."""

    HIGH_PERFORMANCE = "high-performance"
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"

    def __str__(self) -> str:
        return self.value


ModelTypeLike = Union[ModelType, str]

ALL_MODEL_TYPES: Tuple[ModelType, ...] = (
    ModelType.HIGH_PERFORMANCE,
    ModelType.BALANCED,
    ModelType.CONSERVATIVE,
)


@dataclass(frozen=True)
class ArchetypeParams:
    """
    Score distribution of one archetype.

    Positive samples draw from N(positive_mean, std_dev), negatives from
    N(negative_mean, std_dev), both streams fed by an LCG seeded with `seed`.
    """
    seed: int
    positive_mean: float
    negative_mean: float
    std_dev: float

    def mean_for(self, ground_truth: int) -> float:
        return self.positive_mean if ground_truth == 1 else self.negative_mean


ARCHETYPES: Dict[ModelType, ArchetypeParams] = {
    # well separated, low noise
    ModelType.HIGH_PERFORMANCE: ArchetypeParams(seed=12345, positive_mean=0.9, negative_mean=0.1, std_dev=0.08),
    # separated with realistic overlap
    ModelType.BALANCED: ArchetypeParams(seed=67890, positive_mean=0.75, negative_mean=0.25, std_dev=0.2),
    # heavy overlap around the middle
    ModelType.CONSERVATIVE: ArchetypeParams(seed=13579, positive_mean=0.6, negative_mean=0.4, std_dev=0.1),
}


@dataclass(frozen=True)
class ClassificationSample:
    """One labelled prediction. ground_truth is 0 or 1, prediction_score in [0, 1]."""
    id: int
    ground_truth: int
    prediction_score: float


def resolve_model_type(model_type: ModelTypeLike) -> ModelType:
    """Parse a model type name ("balanced", ...) or pass an enum member through."""
    if isinstance(model_type, ModelType):
        return model_type
    try:
        return ModelType(str(model_type))
    except ValueError:
        valid = ", ".join(m.value for m in ModelType)
        raise ValueError(f"Unknown model type {model_type!r}. Expected one of: {valid}.") from None


def generate_dataset(
    model_type: ModelTypeLike,
    n_samples: int = DEFAULT_N_SAMPLES,
    archetypes: Optional[Mapping[ModelType, ArchetypeParams]] = None,
) -> Tuple[ClassificationSample, ...]:
    """
    Build the fixed synthetic sample set of one archetype.

    For each index i:
        ground_truth     = 1 if uniform() > 0.5 else 0
        prediction_score = clamp(gaussian(mean[ground_truth], std), 0, 1)

    Both draws come from the same seeded stream, so the label of sample i+1
    depends on how many uniforms the Gaussian of sample i consumed. A fresh
    generator is created per call: calling twice gives identical tuples.

    Args:
        model_type: archetype (enum member or its string value)
        n_samples: dataset size (200 by default)
        archetypes: optional override of the archetype table

    Returns:
        tuple of ClassificationSample, ids 0..n_samples-1
    """
    mt = resolve_model_type(model_type)
    table = ARCHETYPES if archetypes is None else archetypes
    params = table[mt]
    if n_samples < 0:
        raise ValueError(f"n_samples must be non-negative, got {n_samples}")

    uniform = SeededRandom(params.seed)
    gaussian = GaussianSampler(uniform)

    samples = []
    for i in range(int(n_samples)):
        ground_truth = 1 if uniform() > 0.5 else 0
        score = gaussian.next(params.mean_for(ground_truth), params.std_dev)
        score = max(0.0, min(1.0, score))
        samples.append(ClassificationSample(id=i, ground_truth=ground_truth, prediction_score=score))

    logger.debug(
        "Generated %d samples for %s (seed=%d, positives=%d)",
        len(samples), mt.value, params.seed, sum(s.ground_truth for s in samples),
    )
    return tuple(samples)


def generate_all_datasets(
    n_samples: int = DEFAULT_N_SAMPLES,
    archetypes: Optional[Mapping[ModelType, ArchetypeParams]] = None,
) -> Dict[ModelType, Tuple[ClassificationSample, ...]]:
    """Generate the sample set of every archetype, keyed by ModelType."""
    return {mt: generate_dataset(mt, n_samples=n_samples, archetypes=archetypes) for mt in ALL_MODEL_TYPES}


def samples_to_arrays(samples: Sequence[ClassificationSample]) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split samples into parallel arrays.

    Returns:
        y_true: (N,) int array of ground-truth labels
        scores: (N,) float array of prediction scores
    """
    y_true = np.fromiter((s.ground_truth for s in samples), dtype=int, count=len(samples))
    scores = np.fromiter((s.prediction_score for s in samples), dtype=float, count=len(samples))
    return y_true, scores


def archetypes_from_config(cfg: Mapping[str, Any]) -> Dict[ModelType, ArchetypeParams]:
    """
    Build an archetype table from a config mapping.

    Expected layout (all keys optional, missing values keep the defaults):

        archetypes:
          balanced:
            seed: 67890
            positive_mean: 0.75
            negative_mean: 0.25
            std_dev: 0.2
    """
    section = get_section(dict(cfg), "archetypes")
    table = dict(ARCHETYPES)
    fields = ("seed", "positive_mean", "negative_mean", "std_dev")

    for name, overrides in section.items():
        mt = resolve_model_type(name)
        if overrides is None:
            continue
        if not isinstance(overrides, dict):
            raise ValueError(f"Config section archetypes.{name} must be a dict")
        unknown = set(overrides) - set(fields)
        if unknown:
            raise ValueError(f"Unknown keys in archetypes.{name}: {sorted(unknown)}")

        values: Dict[str, Any] = {}
        for key, val in overrides.items():
            values[key] = int(val) if key == "seed" else float(val)
        table[mt] = replace(table[mt], **values)

    return table
