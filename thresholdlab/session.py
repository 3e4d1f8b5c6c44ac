# thresholdlab/session.py
"""
Caller-owned session state over the pure evaluation core.

The core functions take every input explicitly and hold no state. A UI keeps
its "current model", "current threshold" and memoized results here instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .data.classification import (
    ArchetypeParams,
    ClassificationSample,
    ModelType,
    ModelTypeLike,
    generate_dataset,
    resolve_model_type,
)
from .data.masks import SEGMENTATION_SAMPLES, SegmentationSample, load_masks
from .evaluation.comparison import ModelComparisonRow, compare_models
from .evaluation.confusion import ConfusionCounts, confusion_counts
from .evaluation.curves import CurvePoint, roc_auc, threshold_curve
from .evaluation.metrics import derive_metrics, metric_deltas, zero_deltas
from .evaluation.samples import filter_samples, samples_frame
from .evaluation.segmentation import SegmentationMetrics, classify_pixels, evaluate_masks
from .evaluation.thresholding import OptimalThresholds, optimal_thresholds
from .utils.config import EvaluationSettings
from .utils.logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class QuickThreshold:
    id: str
    label: str
    value: float


class EvaluationSession:
    """
    Classification view state: selected models, threshold, history, caches.

    The first selected model is the primary one; detailed metrics, history
    and deltas follow it.
    """

    def __init__(
        self,
        settings: EvaluationSettings = EvaluationSettings(),
        archetypes: Optional[Mapping[ModelType, ArchetypeParams]] = None,
        selected_models: Optional[Sequence[ModelTypeLike]] = None,
    ) -> None:
        self.settings = settings
        self.archetypes = archetypes
        models = selected_models if selected_models else [ModelType.BALANCED]
        self.selected_models: List[ModelType] = []
        for m in map(resolve_model_type, models):
            if m not in self.selected_models:
                self.selected_models.append(m)

        self.threshold = float(settings.default_threshold)
        self.threshold_history: List[float] = []
        self.metric_changes: Dict[str, float] = zero_deltas()

        self._datasets: Dict[ModelType, Tuple[ClassificationSample, ...]] = {}
        self._curves: Dict[ModelType, Tuple[CurvePoint, ...]] = {}
        self._aucs: Dict[ModelType, float] = {}
        self._optimal: Dict[ModelType, OptimalThresholds] = {}
        self._counts: Dict[Tuple[ModelType, float], ConfusionCounts] = {}

    # ------------------------------------------------------------------
    # Memoized core results
    # ------------------------------------------------------------------

    def dataset(self, model_type: ModelTypeLike) -> Tuple[ClassificationSample, ...]:
        mt = resolve_model_type(model_type)
        if mt not in self._datasets:
            logger.debug("Dataset cache miss: %s", mt.value)
            self._datasets[mt] = generate_dataset(mt, n_samples=self.settings.n_samples, archetypes=self.archetypes)
        return self._datasets[mt]

    def curve(self, model_type: ModelTypeLike) -> Tuple[CurvePoint, ...]:
        mt = resolve_model_type(model_type)
        if mt not in self._curves:
            self._curves[mt] = threshold_curve(self.dataset(mt))
        return self._curves[mt]

    def auc(self, model_type: ModelTypeLike) -> float:
        mt = resolve_model_type(model_type)
        if mt not in self._aucs:
            self._aucs[mt] = roc_auc(self.curve(mt))
        return self._aucs[mt]

    def optimal(self, model_type: ModelTypeLike) -> OptimalThresholds:
        mt = resolve_model_type(model_type)
        if mt not in self._optimal:
            self._optimal[mt] = optimal_thresholds(self.curve(mt), self.dataset(mt))
        return self._optimal[mt]

    def counts(self, model_type: ModelTypeLike, threshold: Optional[float] = None) -> ConfusionCounts:
        mt = resolve_model_type(model_type)
        t = self.threshold if threshold is None else float(threshold)
        key = (mt, t)
        if key not in self._counts:
            self._counts[key] = confusion_counts(self.dataset(mt), t)
        return self._counts[key]

    def _prune_counts(self) -> None:
        """Drop counts for thresholds that are neither current nor in the history."""
        live = {self.threshold, *self.threshold_history}
        self._counts = {k: v for k, v in self._counts.items() if k[1] in live}

    # ------------------------------------------------------------------
    # State changes
    # ------------------------------------------------------------------

    @property
    def primary_model(self) -> ModelType:
        return self.selected_models[0]

    def toggle_model(self, model_type: ModelTypeLike) -> List[ModelType]:
        """
        Select or deselect a model. The last selected model cannot be removed.

        Changing the primary model resets threshold history and metric changes.
        """
        mt = resolve_model_type(model_type)
        previous_primary = self.primary_model

        if mt in self.selected_models:
            if len(self.selected_models) > 1:
                self.selected_models.remove(mt)
        else:
            self.selected_models.append(mt)

        if self.primary_model != previous_primary:
            logger.info("Primary model changed: %s -> %s", previous_primary.value, self.primary_model.value)
            self.metric_changes = zero_deltas()
            self.threshold_history = []
            self._prune_counts()
        return list(self.selected_models)

    def set_threshold(self, threshold: float) -> None:
        """
        Move the decision threshold.

        Records the old value in threshold_history (most recent first, unique,
        capped at settings.history_length) and stores the metric deltas of the
        primary model. Re-setting the current value does nothing.
        """
        t = float(threshold)
        if t == self.threshold:
            return

        previous = self.threshold
        self.threshold = t

        current_m = derive_metrics(self.counts(self.primary_model, t))
        previous_m = derive_metrics(self.counts(self.primary_model, previous))
        self.metric_changes = metric_deltas(current_m, previous_m)

        history = [previous] + [h for h in self.threshold_history if h != previous]
        self.threshold_history = history[: self.settings.history_length]
        self._prune_counts()
        logger.info("Threshold %.4f -> %.4f (%s)", previous, t, self.primary_model.value)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def primary_metrics(self) -> Dict[str, float]:
        """Threshold metrics of the primary model plus its AUC."""
        out = derive_metrics(self.counts(self.primary_model)).as_dict()
        out["auc"] = self.auc(self.primary_model)
        return out

    def previous_counts(self) -> Optional[ConfusionCounts]:
        """Counts of the primary model at the last threshold, None before the first move."""
        if not self.threshold_history:
            return None
        return self.counts(self.primary_model, self.threshold_history[0])

    def operating_point(self) -> Dict[str, Tuple[float, float]]:
        """Current threshold as ROC (fpr, tpr) and PR (recall, precision) coordinates."""
        m = derive_metrics(self.counts(self.primary_model))
        return {"roc": (m.fpr, m.recall), "pr": (m.recall, m.precision)}

    def quick_thresholds(self) -> List[QuickThreshold]:
        opt = self.optimal(self.primary_model)
        return [
            QuickThreshold("default", "Default", float(self.settings.default_threshold)),
            QuickThreshold("maxF1", "Max F1-Score", opt.max_f1),
            QuickThreshold("maxAccuracy", "Max Accuracy", opt.max_accuracy),
            QuickThreshold("maxYoudens", "Youden's Index", opt.max_youdens),
        ]

    def comparison(self) -> List[ModelComparisonRow]:
        datasets = {m: self.dataset(m) for m in self.selected_models}
        aucs = {m: self.auc(m) for m in self.selected_models}
        return compare_models(datasets, aucs, self.threshold, self.selected_models)

    def samples_table(self) -> pd.DataFrame:
        return samples_frame(self.dataset(self.primary_model), self.threshold)

    def filtered_samples(
        self,
        status: str = "all",
        sort: str = "score_desc",
        near_threshold: bool = False,
    ) -> pd.DataFrame:
        """
        Sample table of the primary model, filtered and sorted.

        near_threshold keeps samples within settings.near_threshold_window of
        the current threshold.
        """
        return filter_samples(
            self.samples_table(),
            status=status,
            sort=sort,
            near_threshold=self.threshold if near_threshold else None,
            window=self.settings.near_threshold_window,
        )


class SegmentationSession:
    """
    Segmentation view state: current image, threshold and a result cache
    keyed by (image id, threshold).
    """

    def __init__(
        self,
        samples: Sequence[SegmentationSample] = SEGMENTATION_SAMPLES,
        threshold: float = 0.5,
    ) -> None:
        if not samples:
            raise ValueError("SegmentationSession needs at least one sample.")
        self.samples = tuple(samples)
        self.index = 0
        self.threshold = float(threshold)
        self._masks: Dict[str, Tuple[np.ndarray, np.ndarray]] = {}
        self._results: Dict[Tuple[str, float], Tuple[ConfusionCounts, SegmentationMetrics]] = {}

    @property
    def current_sample(self) -> SegmentationSample:
        return self.samples[self.index]

    def select(self, index: int) -> SegmentationSample:
        self.index = int(index) % len(self.samples)
        return self.current_sample

    def next_image(self) -> SegmentationSample:
        return self.select(self.index + 1)

    def previous_image(self) -> SegmentationSample:
        return self.select(self.index - 1)

    def set_threshold(self, threshold: float) -> None:
        self.threshold = float(threshold)
        self._results = {k: v for k, v in self._results.items() if k[1] == self.threshold}

    def masks(self) -> Tuple[np.ndarray, np.ndarray]:
        sample = self.current_sample
        if sample.id not in self._masks:
            logger.debug("Rasterizing masks for %s", sample.id)
            self._masks[sample.id] = load_masks(sample)
        return self._masks[sample.id]

    def evaluate(self) -> Tuple[ConfusionCounts, SegmentationMetrics]:
        key = (self.current_sample.id, self.threshold)
        if key not in self._results:
            gt, pred = self.masks()
            self._results[key] = evaluate_masks(gt, pred, self.threshold)
        return self._results[key]

    def pixel_map(self) -> np.ndarray:
        gt, pred = self.masks()
        return classify_pixels(gt, pred, self.threshold)
