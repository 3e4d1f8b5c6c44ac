# thresholdlab/data/masks.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import numpy as np


Shape = Literal["circle", "square"]

DEFAULT_MASK_SIZE = 256

# Radial gradient stops of the prediction mask: (position, rgb level, alpha).
# Painted over black, the visible intensity at a stop is level * alpha.
_GRADIENT_STOPS = (
    (0.0, 255.0, 0.95),
    (0.5, 200.0, 0.8),
    (0.8, 100.0, 0.5),
    (1.0, 0.0, 0.1),
)


def _grid(size: int, offset: Tuple[float, float]) -> Tuple[np.ndarray, np.ndarray, float, float]:
    """Pixel-centre coordinates plus the (offset) shape centre."""
    if size <= 0:
        raise ValueError(f"size must be a positive integer, got {size}")
    ys, xs = np.mgrid[0:size, 0:size].astype(float)
    xs += 0.5
    ys += 0.5
    cx = size / 2.0 + offset[0]
    cy = size / 2.0 + offset[1]
    return xs, ys, cx, cy


def _square_region(xs: np.ndarray, ys: np.ndarray, x0: float, y0: float, side: float) -> np.ndarray:
    return (xs >= x0) & (xs < x0 + side) & (ys >= y0) & (ys < y0 + side)


def gt_mask(shape: Shape, size: int = DEFAULT_MASK_SIZE, offset: Tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """
    Binary ground-truth mask: white (255) shape on black (0).

    circle: radius size/3 around the (offset) centre
    square: side size/2 with its top-left corner at size/4 (+ offset)

    Returns:
        (size, size) uint8 array
    """
    xs, ys, cx, cy = _grid(size, offset)
    if shape == "circle":
        region = (xs - cx) ** 2 + (ys - cy) ** 2 <= (size / 3.0) ** 2
    elif shape == "square":
        region = _square_region(xs, ys, size / 4.0 + offset[0], size / 4.0 + offset[1], size / 2.0)
    else:
        raise ValueError("shape must be one of: 'circle', 'square'.")
    return np.where(region, 255, 0).astype(np.uint8)


def prediction_mask(
    shape: Shape,
    size: int = DEFAULT_MASK_SIZE,
    offset: Tuple[float, float] = (0.0, 0.0),
) -> np.ndarray:
    """
    Soft prediction mask: a radial probability gradient clipped to a shape.

    The gradient runs from the (offset) centre out to radius size/2 and is
    visible only inside a circle of radius size/2.5 or a square of side
    0.6*size with its corner at size/5. Everything else is 0.

    Returns:
        (size, size) uint8 array of intensities (probability * 255)
    """
    xs, ys, cx, cy = _grid(size, offset)
    dist = np.sqrt((xs - cx) ** 2 + (ys - cy) ** 2) / (size / 2.0)

    positions = np.array([s[0] for s in _GRADIENT_STOPS])
    levels = np.array([s[1] * s[2] for s in _GRADIENT_STOPS])
    intensity = np.interp(np.clip(dist, 0.0, 1.0), positions, levels)

    if shape == "circle":
        region = (xs - cx) ** 2 + (ys - cy) ** 2 <= (size / 2.5) ** 2
    elif shape == "square":
        region = _square_region(xs, ys, size / 5.0 + offset[0], size / 5.0 + offset[1], size * 0.6)
    else:
        raise ValueError("shape must be one of: 'circle', 'square'.")

    return np.where(region, np.round(intensity), 0).astype(np.uint8)


@dataclass(frozen=True)
class MaskSpec:
    shape: Shape
    offset: Tuple[float, float] = (0.0, 0.0)


@dataclass(frozen=True)
class SegmentationSample:
    """
    One synthetic segmentation example.

    hausdorff_distance and boundary_f1 are the reported boundary scores of
    the example; they are not recomputed from the masks.
    """
    id: str
    name: str
    gt: MaskSpec
    prediction: MaskSpec
    task_description: str
    hausdorff_distance: Optional[float] = None
    boundary_f1: Optional[float] = None
    size: int = DEFAULT_MASK_SIZE


SEGMENTATION_SAMPLES: Tuple[SegmentationSample, ...] = (
    SegmentationSample(
        id="perfect_circle",
        name="Perfect Circle Example",
        gt=MaskSpec("circle"),
        prediction=MaskSpec("circle"),
        task_description="Simple circle segmentation task.",
        hausdorff_distance=4.8,
        boundary_f1=0.96,
    ),
    SegmentationSample(
        id="offset_square",
        name="Offset Square Example",
        gt=MaskSpec("square"),
        prediction=MaskSpec("square", offset=(15.0, -10.0)),
        task_description="Prediction slightly misaligned with the ground truth.",
        hausdorff_distance=18.0,
        boundary_f1=0.72,
    ),
    SegmentationSample(
        id="missed_shape",
        name="Mismatched Shape Example",
        gt=MaskSpec("circle", offset=(40.0, 40.0)),
        prediction=MaskSpec("square"),
        task_description="Model predicts the wrong shape (a square instead of a circle).",
        hausdorff_distance=62.5,
        boundary_f1=0.18,
    ),
)


def get_segmentation_sample(sample_id: str) -> SegmentationSample:
    for s in SEGMENTATION_SAMPLES:
        if s.id == sample_id:
            return s
    raise ValueError(f"Unknown segmentation sample {sample_id!r}")


def load_masks(sample: SegmentationSample) -> Tuple[np.ndarray, np.ndarray]:
    """
    Rasterize a sample's masks.

    Returns:
        gt: (size, size) uint8 ground-truth intensities
        pred: (size, size) uint8 prediction intensities
    """
    gt = gt_mask(sample.gt.shape, size=sample.size, offset=sample.gt.offset)
    pred = prediction_mask(sample.prediction.shape, size=sample.size, offset=sample.prediction.offset)
    return gt, pred
