# thresholdlab/evaluation/metrics.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

from .confusion import ConfusionCounts


# Metrics tracked for threshold-to-threshold changes
DELTA_KEYS = ("accuracy", "precision", "recall", "f1", "specificity")


def safe_div(num: float, den: float) -> float:
    """num / den, or 0.0 when den == 0. Shared zero-denominator convention."""
    return float(num) / float(den) if den else 0.0


def f1_from(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall; 0.0 when both are 0."""
    return safe_div(2.0 * precision * recall, precision + recall)


@dataclass(frozen=True)
class ThresholdMetrics:
    """Metrics derived from one set of confusion counts."""
    precision: float
    recall: float
    f1: float
    accuracy: float
    specificity: float
    fpr: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def derive_metrics(counts: ConfusionCounts) -> ThresholdMetrics:
    """
    Derive the threshold metrics from confusion counts.

    Definitions:
        precision   = TP / (TP + FP)
        recall      = TP / (TP + FN)
        specificity = TN / (TN + FP)
        fpr         = FP / (FP + TN)
        f1          = 2 * precision * recall / (precision + recall)
        accuracy    = (TP + TN) / total

    Every ratio with a zero denominator is 0, so the result never holds NaN,
    all-zero counts included.
    """
    tp, fp, fn, tn = counts.tp, counts.fp, counts.fn, counts.tn
    precision = safe_div(tp, tp + fp)
    recall = safe_div(tp, tp + fn)
    return ThresholdMetrics(
        precision=precision,
        recall=recall,
        f1=f1_from(precision, recall),
        accuracy=safe_div(tp + tn, counts.total),
        specificity=safe_div(tn, tn + fp),
        fpr=safe_div(fp, fp + tn),
    )


def metric_deltas(current: ThresholdMetrics, previous: ThresholdMetrics) -> Dict[str, float]:
    """Per-metric change current - previous, for the keys in DELTA_KEYS."""
    return {k: getattr(current, k) - getattr(previous, k) for k in DELTA_KEYS}


def zero_deltas() -> Dict[str, float]:
    return {k: 0.0 for k in DELTA_KEYS}
