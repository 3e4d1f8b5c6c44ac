# thresholdlab/evaluation/__init__.py
"""
Evaluation subpackage.

Contains:
- confusion:    tp/fp/fn/tn counting at a threshold, 2x2 matrix shares and log tables
- metrics:      precision/recall/F1/accuracy/specificity/FPR with zero-safe ratios
- curves:       threshold sweeps (ROC, PR, metric trends) and trapezoidal ROC AUC
- thresholding: max-F1 / max-accuracy / Youden's J threshold search
- segmentation: pixel confusion, IoU and Dice for mask pairs
- samples:      per-sample outcome table with filtering and sorting
- comparison:   side-by-side metrics of several model archetypes
"""

from .confusion import (
    ConfusionCounts,
    binary_confusion,
    scores_confusion,
    confusion_counts,
    normalize_confusion,
    count_shares,
    format_confusion_matrix,
    format_counts,
)
from .metrics import (
    ThresholdMetrics,
    derive_metrics,
    f1_from,
    metric_deltas,
    safe_div,
)
from .curves import (
    CurvePoint,
    candidate_thresholds,
    f1_iso_lines,
    pr_points,
    roc_auc,
    roc_points,
    threshold_curve,
    trend_points,
)
from .thresholding import OptimalThresholds, optimal_thresholds, youdens_j
from .segmentation import (
    PixelCounts,
    SegmentationMetrics,
    classify_pixel,
    classify_pixels,
    evaluate_masks,
    pixel_fractions,
    reduce_pixels,
    segmentation_metrics,
)
from .samples import filter_samples, is_borderline, sample_status, samples_frame, status_counts
from .comparison import (
    MODEL_METADATA,
    ModelComparisonRow,
    best_values,
    compare_models,
    comparison_frame,
)

__all__ = [
    # confusion
    "ConfusionCounts",
    "binary_confusion",
    "scores_confusion",
    "confusion_counts",
    "normalize_confusion",
    "count_shares",
    "format_confusion_matrix",
    "format_counts",
    # metrics
    "ThresholdMetrics",
    "derive_metrics",
    "f1_from",
    "metric_deltas",
    "safe_div",
    # curves
    "CurvePoint",
    "candidate_thresholds",
    "f1_iso_lines",
    "pr_points",
    "roc_auc",
    "roc_points",
    "threshold_curve",
    "trend_points",
    # thresholding
    "OptimalThresholds",
    "optimal_thresholds",
    "youdens_j",
    # segmentation
    "PixelCounts",
    "SegmentationMetrics",
    "classify_pixel",
    "classify_pixels",
    "evaluate_masks",
    "pixel_fractions",
    "reduce_pixels",
    "segmentation_metrics",
    # samples
    "filter_samples",
    "is_borderline",
    "sample_status",
    "samples_frame",
    "status_counts",
    # comparison
    "MODEL_METADATA",
    "ModelComparisonRow",
    "best_values",
    "compare_models",
    "comparison_frame",
]
