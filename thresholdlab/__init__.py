# thresholdlab/__init__.py
"""
thresholdlab: threshold-dependent evaluation metrics over fixed synthetic data.

Subpackages:
- data:       seeded generators, model archetypes, synthetic segmentation masks
- evaluation: confusion counts, derived metrics, curves, AUC, optimal thresholds,
              pixel-level segmentation metrics
- utils:      logging and config helpers

session.py holds caller-owned state (current model, threshold, caches).
"""

from .data import ModelType, ClassificationSample, generate_dataset
from .evaluation import (
    ConfusionCounts,
    CurvePoint,
    confusion_counts,
    derive_metrics,
    optimal_thresholds,
    reduce_pixels,
    roc_auc,
    segmentation_metrics,
    threshold_curve,
)
from .session import EvaluationSession, SegmentationSession

__version__ = "0.1.0"

__all__ = [
    "ModelType",
    "ClassificationSample",
    "generate_dataset",
    "ConfusionCounts",
    "CurvePoint",
    "confusion_counts",
    "derive_metrics",
    "optimal_thresholds",
    "reduce_pixels",
    "roc_auc",
    "segmentation_metrics",
    "threshold_curve",
    "EvaluationSession",
    "SegmentationSession",
]
