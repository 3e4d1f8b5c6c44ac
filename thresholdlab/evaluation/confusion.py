# thresholdlab/evaluation/confusion.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Sequence

import numpy as np

from ..data.classification import ClassificationSample, samples_to_arrays


@dataclass(frozen=True)
class ConfusionCounts:
    """
    Binary confusion counts under one decision threshold.

    Used for samples (classification) and for pixels (segmentation); in both
    cases tp + fp + fn + tn equals the number of items counted.
    """
    tp: int
    fp: int
    fn: int
    tn: int

    @property
    def total(self) -> int:
        return self.tp + self.fp + self.fn + self.tn

    @property
    def actual_positive(self) -> int:
        return self.tp + self.fn

    @property
    def actual_negative(self) -> int:
        return self.fp + self.tn

    @property
    def predicted_positive(self) -> int:
        return self.tp + self.fp

    @property
    def predicted_negative(self) -> int:
        return self.fn + self.tn

    def as_dict(self) -> Dict[str, int]:
        return {"tp": self.tp, "fp": self.fp, "fn": self.fn, "tn": self.tn}

    def as_matrix(self) -> np.ndarray:
        """2x2 matrix in the rows=true / cols=predicted layout, labels [0, 1]."""
        return np.array([[self.tn, self.fp], [self.fn, self.tp]], dtype=int)


def binary_confusion(y_true: np.ndarray, y_pred: np.ndarray) -> ConfusionCounts:
    """
    Count tp/fp/fn/tn from boolean (or 0/1) truth and prediction arrays.
    """
    t = np.asarray(y_true).astype(bool)
    p = np.asarray(y_pred).astype(bool)
    if t.shape != p.shape:
        raise ValueError(f"Shape mismatch: y_true={t.shape} vs y_pred={p.shape}")

    tp = int(np.count_nonzero(t & p))
    fp = int(np.count_nonzero(~t & p))
    fn = int(np.count_nonzero(t & ~p))
    tn = int(t.size - tp - fp - fn)
    return ConfusionCounts(tp=tp, fp=fp, fn=fn, tn=tn)


def scores_confusion(y_true: Sequence[int], scores: Sequence[float], threshold: float) -> ConfusionCounts:
    """
    Confusion counts for scores thresholded at `threshold`.

    A score equal to the threshold is predicted positive (score >= threshold).
    """
    y_true = np.asarray(y_true, dtype=int)
    scores = np.asarray(scores, dtype=float)
    if y_true.shape != scores.shape:
        raise ValueError("y_true and scores must have the same shape.")
    return binary_confusion(y_true == 1, scores >= float(threshold))


def confusion_counts(samples: Sequence[ClassificationSample], threshold: float) -> ConfusionCounts:
    """
    Confusion counts of a sample set at one threshold.

    Args:
        samples: ClassificationSample sequence
        threshold: decision cutoff, inclusive

    Returns:
        ConfusionCounts with total == len(samples)
    """
    y_true, scores = samples_to_arrays(samples)
    return scores_confusion(y_true, scores, threshold)


def normalize_confusion(cm: np.ndarray, mode: str = "true") -> np.ndarray:
    """
    Normalize a confusion matrix. Empty rows/columns normalize to 0.

    Args:
        cm: (K, K)
        mode:
            - "true": row-normalized => per-true-class distribution
            - "pred": col-normalized => per-pred-class distribution
            - "all": global normalization (sum to 1)
    """
    cm = np.asarray(cm, dtype=float)
    if cm.ndim != 2 or cm.shape[0] != cm.shape[1]:
        raise ValueError("cm must be a square (K,K) matrix.")

    if mode == "true":
        denom = cm.sum(axis=1, keepdims=True)
    elif mode == "pred":
        denom = cm.sum(axis=0, keepdims=True)
    elif mode == "all":
        denom = np.full_like(cm, cm.sum())
    else:
        raise ValueError("mode must be one of: 'true', 'pred', 'all'.")

    denom = np.broadcast_to(denom, cm.shape)
    return np.divide(cm, denom, out=np.zeros_like(cm), where=denom > 0)


def count_shares(counts: ConfusionCounts, mode: str = "all") -> Dict[str, float]:
    """
    Shares of tp/fp/fn/tn, normalized like normalize_confusion().

    mode="all" gives each cell's share of the total (the percentage shown in
    a confusion-matrix cell). Zero totals give 0 everywhere.
    """
    norm = normalize_confusion(counts.as_matrix(), mode)
    (tn, fp), (fn, tp) = norm.tolist()
    return {"tp": tp, "fp": fp, "fn": fn, "tn": tn}


def format_confusion_matrix(
    cm: np.ndarray,
    labels: Sequence[int],
    label_names: Optional[Dict[int, str]] = None,
) -> str:
    """
    Create a simple aligned string representation for logs.

    Args:
        cm: (K,K)
        labels: list of label ids (length K)
        label_names: optional mapping label -> string
    """
    cm = np.asarray(cm)
    labels = list(labels)
    names = [label_names.get(l, str(l)) if label_names else str(l) for l in labels]

    max_name = max(len(n) for n in names)
    max_val = max(len(str(int(v))) for v in cm.flatten()) if cm.size else 1
    cell_w = max(max_val, max(len(n) for n in names) + 1, 5)

    header = " " * (max_name + 2) + "".join([f"{n:>{cell_w}s}" for n in names])
    rows = [header]
    for i, n in enumerate(names):
        row = f"{n:<{max_name}s}  " + "".join([f"{int(cm[i, j]):>{cell_w}d}" for j in range(len(names))])
        rows.append(row)
    return "\n".join(rows)


def format_counts(counts: ConfusionCounts) -> str:
    """2x2 log rendering of binary counts (rows=true, cols=predicted)."""
    return format_confusion_matrix(counts.as_matrix(), [0, 1], label_names={0: "Negative", 1: "Positive"})
