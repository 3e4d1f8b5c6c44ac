# thresholdlab/evaluation/curves.py
"""
Threshold sweeps: ROC / PR / metric-trend curves and ROC AUC.

One sweep feeds every view. Candidate thresholds are all distinct scores
plus the anchors 1.0 / 0.0 (so the trend view covers the full [0, 1] axis)
and the sentinels 1.01 / -0.01 (so ROC and PR curves reach the plot corners
even when no score is exactly 0 or 1).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..data.classification import ClassificationSample, samples_to_arrays
from .confusion import scores_confusion
from .metrics import safe_div


UPPER_SENTINEL = 1.01
LOWER_SENTINEL = -0.01
BOUNDARY_ANCHORS = (1.0, 0.0)

DEFAULT_F1_ISO_LEVELS = (0.2, 0.5, 0.8)


@dataclass(frozen=True)
class CurvePoint:
    """
    Rates at one candidate threshold.

    recall duplicates tpr: ROC consumers read tpr, PR consumers read recall.
    """
    threshold: float
    tpr: float
    fpr: float
    precision: float
    recall: float
    specificity: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def candidate_thresholds(scores: Sequence[float]) -> List[float]:
    """Distinct scores, anchors and sentinels, sorted descending."""
    cands = {float(s) for s in scores}
    cands.update((UPPER_SENTINEL, LOWER_SENTINEL))
    cands.update(BOUNDARY_ANCHORS)
    return sorted(cands, reverse=True)


def threshold_curve(samples: Sequence[ClassificationSample]) -> Tuple[CurvePoint, ...]:
    """
    Sweep every candidate threshold of a sample set.

    For each threshold t (descending):
        P = tp + fn, N = fp + tn
        tpr = tp / P, fpr = fp / N, precision = tp / (tp + fp), specificity = tn / N
    with 0 for zero denominators.

    Returns:
        tuple of CurvePoint; first threshold is 1.01 and last is -0.01.
        Complexity O(k * n) for k candidate thresholds.
    """
    y_true, scores = samples_to_arrays(samples)

    points = []
    for t in candidate_thresholds(scores.tolist()):
        c = scores_confusion(y_true, scores, t)
        tpr = safe_div(c.tp, c.actual_positive)
        points.append(
            CurvePoint(
                threshold=t,
                tpr=tpr,
                fpr=safe_div(c.fp, c.actual_negative),
                precision=safe_div(c.tp, c.predicted_positive),
                recall=tpr,
                specificity=safe_div(c.tn, c.actual_negative),
            )
        )
    return tuple(points)


def roc_points(curve: Sequence[CurvePoint]) -> List[Tuple[float, float]]:
    """(fpr, tpr) pairs sorted by ascending fpr. Ties keep curve order."""
    return sorted(((p.fpr, p.tpr) for p in curve), key=lambda xy: xy[0])


def pr_points(curve: Sequence[CurvePoint]) -> List[Tuple[float, float]]:
    """(recall, precision) pairs in curve order."""
    return [(p.recall, p.precision) for p in curve]


def trend_points(curve: Sequence[CurvePoint]) -> List[CurvePoint]:
    """Points with a threshold inside [0, 1]; drops the sentinels."""
    return [p for p in curve if 0.0 <= p.threshold <= 1.0]


def roc_auc(curve: Sequence[CurvePoint]) -> float:
    """
    Area under the ROC curve by the trapezoidal rule.

        auc = sum((fpr[i] - fpr[i-1]) * (tpr[i] + tpr[i-1]) / 2)

    over points sorted by ascending fpr. Expects a full sweep from
    threshold_curve() so that fpr spans [0, 1]. Fewer than two points give 0.
    """
    pts = roc_points(curve)
    auc = 0.0
    for (x0, y0), (x1, y1) in zip(pts, pts[1:]):
        auc += (x1 - x0) * (y1 + y0) / 2.0
    return auc


def f1_iso_lines(levels: Sequence[float] = DEFAULT_F1_ISO_LEVELS) -> Dict[float, List[Tuple[float, float]]]:
    """
    Iso-F1 reference lines on the PR plane.

    For recall r in 0.01..0.99 (step 0.01): precision p = f*r / (2r - f),
    kept when 2r - f > 0 and 0.01 <= p <= 1.

    Returns:
        dict: level -> list of (recall, precision)
    """
    recalls = np.arange(1, 100) / 100.0
    lines: Dict[float, List[Tuple[float, float]]] = {}
    for f in levels:
        pts = []
        for r in recalls:
            den = 2.0 * r - f
            if den <= 0:
                continue
            p = f * r / den
            if 0.01 <= p <= 1.0:
                pts.append((float(r), float(p)))
        lines[float(f)] = pts
    return lines
