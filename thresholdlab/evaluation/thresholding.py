# thresholdlab/evaluation/thresholding.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Sequence

from ..data.classification import ClassificationSample, samples_to_arrays
from .confusion import scores_confusion
from .curves import CurvePoint
from .metrics import f1_from, safe_div


DEFAULT_THRESHOLD = 0.5


@dataclass(frozen=True)
class OptimalThresholds:
    """
    Thresholds maximizing F1, accuracy and Youden's J on one curve.

    details holds the maximized values (f1, accuracy, youdens_j) and the
    number of scanned points.
    """
    max_f1: float = DEFAULT_THRESHOLD
    max_accuracy: float = DEFAULT_THRESHOLD
    max_youdens: float = DEFAULT_THRESHOLD
    details: Dict[str, float] = field(default_factory=dict, compare=False)

    def as_dict(self) -> Dict[str, float]:
        return {"max_f1": self.max_f1, "max_accuracy": self.max_accuracy, "max_youdens": self.max_youdens}


def youdens_j(point: CurvePoint) -> float:
    """Youden's J statistic, tpr - fpr (= sensitivity + specificity - 1)."""
    return point.tpr - point.fpr


def optimal_thresholds(
    curve: Sequence[CurvePoint],
    samples: Sequence[ClassificationSample],
) -> OptimalThresholds:
    """
    Scan a threshold_curve() sweep for the best operating points.

    The first and last points (the 1.01 / -0.01 sentinels) are skipped. The
    rest are scanned in curve order (descending threshold):

        f1        from the point's precision/recall, strict '>' (first wins ties)
        youden's  tpr - fpr, strict '>' (first wins ties)
        accuracy  (tp + tn) / len(samples) recomputed at the threshold,
                  '>=' so ties go to the later, lower threshold

    Curves with fewer than 3 points return 0.5 for all three.
    """
    if len(curve) <= 2:
        return OptimalThresholds(details={"n_points": 0.0})

    y_true, scores = samples_to_arrays(samples)
    n = len(samples)

    best_f1, t_f1 = -1.0, DEFAULT_THRESHOLD
    best_acc, t_acc = -1.0, DEFAULT_THRESHOLD
    best_j, t_j = -1.0, DEFAULT_THRESHOLD

    scanned = curve[1:-1]
    for point in scanned:
        f1 = f1_from(point.precision, point.recall)
        if f1 > best_f1:
            best_f1, t_f1 = f1, point.threshold

        j = youdens_j(point)
        if j > best_j:
            best_j, t_j = j, point.threshold

        c = scores_confusion(y_true, scores, point.threshold)
        acc = safe_div(c.tp + c.tn, n)
        # TODO: confirm whether the '>=' tie-break for accuracy is intended; the
        # F1/Youden scans keep the first (higher) threshold instead.
        if acc >= best_acc:
            best_acc, t_acc = acc, point.threshold

    details = {
        "f1": float(best_f1),
        "accuracy": float(best_acc),
        "youdens_j": float(best_j),
        "n_points": float(len(scanned)),
    }
    return OptimalThresholds(max_f1=t_f1, max_accuracy=t_acc, max_youdens=t_j, details=details)
