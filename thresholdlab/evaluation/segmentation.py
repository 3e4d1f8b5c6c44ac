# thresholdlab/evaluation/segmentation.py
"""
Pixel-level confusion for segmentation masks.

Ground truth pixels are positive above a fixed intensity cut (> 128 of 255);
predicted pixels are positive when intensity / 255 >= threshold, the same
inclusive tie-break the sample path uses. Zero denominators give 0.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Sequence, Tuple, Union

import numpy as np

from .confusion import ConfusionCounts, binary_confusion, count_shares
from .metrics import derive_metrics, safe_div


GT_POSITIVE_CUT = 128
MAX_INTENSITY = 255.0

# Per-pixel labels of classify_pixels()
PIXEL_TP, PIXEL_FP, PIXEL_FN, PIXEL_TN = 0, 1, 2, 3

PIXEL_CLASS_NAMES = {
    PIXEL_TP: "True Positive",
    PIXEL_FP: "False Positive",
    PIXEL_FN: "False Negative",
    PIXEL_TN: "True Negative",
}

# Pixel counts share the sample-count container
PixelCounts = ConfusionCounts

ArrayLike = Union[np.ndarray, Sequence[int]]


@dataclass(frozen=True)
class SegmentationMetrics:
    iou: float
    dice: float
    accuracy: float
    precision: float
    recall: float
    f1: float
    specificity: float

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def _channel(buf: ArrayLike, channel_stride: int) -> np.ndarray:
    """
    Flatten an intensity buffer to one value per pixel.

    Accepts:
        - flat buffers, read every `channel_stride` values (4 for RGBA bytes)
        - (H, W) arrays
        - (H, W, C) arrays, channel 0 only
    """
    if channel_stride < 1:
        raise ValueError(f"channel_stride must be a positive integer, got {channel_stride}")
    a = np.asarray(buf)
    if a.ndim == 3:
        a = a[..., 0]
    a = a.reshape(-1)
    return a[::channel_stride].astype(float)


def _positives(
    gt: ArrayLike,
    pred: ArrayLike,
    threshold: float,
    channel_stride: int,
) -> Tuple[np.ndarray, np.ndarray, Tuple[int, ...]]:
    g_raw = np.asarray(gt)
    p_raw = np.asarray(pred)
    if g_raw.shape != p_raw.shape:
        raise ValueError(f"Shape mismatch: gt={g_raw.shape} vs pred={p_raw.shape}")

    g = _channel(g_raw, channel_stride)
    p = _channel(p_raw, channel_stride)
    gt_pos = g > GT_POSITIVE_CUT
    pred_pos = (p / MAX_INTENSITY) >= float(threshold)

    shape = g_raw.shape[:2] if g_raw.ndim >= 2 and channel_stride == 1 else (g.size,)
    return gt_pos, pred_pos, shape


def reduce_pixels(
    gt: ArrayLike,
    pred: ArrayLike,
    threshold: float,
    channel_stride: int = 1,
) -> ConfusionCounts:
    """
    Reduce two intensity buffers to pixel confusion counts.

    Args:
        gt: ground-truth intensities (0-255)
        pred: predicted intensities (0-255, probability * 255)
        threshold: probability cutoff, inclusive
        channel_stride: stride over flat interleaved buffers (4 for RGBA)

    Returns:
        ConfusionCounts with total == pixel count

    Raises:
        ValueError: when the buffers differ in shape
    """
    gt_pos, pred_pos, _ = _positives(gt, pred, threshold, channel_stride)
    return binary_confusion(gt_pos, pred_pos)


def segmentation_metrics(counts: ConfusionCounts) -> SegmentationMetrics:
    """
    IoU / Dice plus the classification metrics of the pixel counts.

        iou  = TP / (TP + FP + FN)
        dice = 2TP / (2TP + FP + FN)
    """
    tp, fp, fn = counts.tp, counts.fp, counts.fn
    m = derive_metrics(counts)
    return SegmentationMetrics(
        iou=safe_div(tp, tp + fp + fn),
        dice=safe_div(2 * tp, 2 * tp + fp + fn),
        accuracy=m.accuracy,
        precision=m.precision,
        recall=m.recall,
        f1=m.f1,
        specificity=m.specificity,
    )


def evaluate_masks(
    gt: ArrayLike,
    pred: ArrayLike,
    threshold: float,
    channel_stride: int = 1,
) -> Tuple[ConfusionCounts, SegmentationMetrics]:
    counts = reduce_pixels(gt, pred, threshold, channel_stride=channel_stride)
    return counts, segmentation_metrics(counts)


def classify_pixels(
    gt: ArrayLike,
    pred: ArrayLike,
    threshold: float,
    channel_stride: int = 1,
) -> np.ndarray:
    """
    Per-pixel outcome map (PIXEL_TP / PIXEL_FP / PIXEL_FN / PIXEL_TN).

    Returns an int8 array shaped like the input image for (H, W) and
    (H, W, C) inputs with stride 1, else a flat array.
    """
    gt_pos, pred_pos, shape = _positives(gt, pred, threshold, channel_stride)
    out = np.full(gt_pos.shape, PIXEL_TN, dtype=np.int8)
    out[gt_pos & pred_pos] = PIXEL_TP
    out[~gt_pos & pred_pos] = PIXEL_FP
    out[gt_pos & ~pred_pos] = PIXEL_FN
    return out.reshape(shape)


def classify_pixel(gt_intensity: float, pred_intensity: float, threshold: float) -> str:
    """Outcome name of a single pixel ("True Positive", ...)."""
    gt_pos = gt_intensity > GT_POSITIVE_CUT
    pred_pos = pred_intensity / MAX_INTENSITY >= threshold
    if gt_pos and pred_pos:
        return PIXEL_CLASS_NAMES[PIXEL_TP]
    if pred_pos:
        return PIXEL_CLASS_NAMES[PIXEL_FP]
    if gt_pos:
        return PIXEL_CLASS_NAMES[PIXEL_FN]
    return PIXEL_CLASS_NAMES[PIXEL_TN]


def pixel_fractions(counts: ConfusionCounts) -> Dict[str, float]:
    """Share of each outcome in the pixel total; all 0 for an empty image."""
    return count_shares(counts, "all")
