# thresholdlab/evaluation/comparison.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, List, Mapping, Sequence

import pandas as pd

from ..data.classification import ClassificationSample, ModelType, resolve_model_type
from .confusion import confusion_counts
from .metrics import derive_metrics


COMPARISON_KEYS = ("accuracy", "precision", "recall", "f1", "auc")


@dataclass(frozen=True)
class ModelInfo:
    name: str
    description: str
    strategy: str
    use_case: str


MODEL_METADATA: Dict[ModelType, ModelInfo] = {
    ModelType.HIGH_PERFORMANCE: ModelInfo(
        name="High Performance",
        description="Highly confident model that excels at finding positive cases.",
        strategy="Prioritizes recall (sensitivity)",
        use_case="Critical screenings where missing a positive is very costly.",
    ),
    ModelType.BALANCED: ModelInfo(
        name="Balanced",
        description="All-around model with a good trade-off between precision and recall.",
        strategy="Aims for a balanced F1-score",
        use_case="General tasks where false positives and false negatives cost about the same.",
    ),
    ModelType.CONSERVATIVE: ModelInfo(
        name="Conservative",
        description="Cautious model that predicts positive only when highly certain.",
        strategy="Prioritizes precision",
        use_case="Spam filtering, where a false positive is highly undesirable.",
    ),
}


@dataclass(frozen=True)
class ModelComparisonRow:
    model_type: ModelType
    accuracy: float
    precision: float
    recall: float
    f1: float
    auc: float

    def as_dict(self) -> Dict[str, object]:
        d = asdict(self)
        d["model_type"] = self.model_type.value
        return d


def compare_models(
    datasets: Mapping[ModelType, Sequence[ClassificationSample]],
    aucs: Mapping[ModelType, float],
    threshold: float,
    model_types: Sequence[ModelType],
) -> List[ModelComparisonRow]:
    """
    Threshold metrics plus AUC for each model, in the order given.

    A model missing from `aucs` reports an AUC of 0.
    """
    rows = []
    for mt in map(resolve_model_type, model_types):
        m = derive_metrics(confusion_counts(datasets[mt], threshold))
        rows.append(
            ModelComparisonRow(
                model_type=mt,
                accuracy=m.accuracy,
                precision=m.precision,
                recall=m.recall,
                f1=m.f1,
                auc=float(aucs.get(mt, 0.0)),
            )
        )
    return rows


def best_values(rows: Sequence[ModelComparisonRow]) -> Dict[str, float]:
    """Maximum of each comparison metric across rows ({} for no rows)."""
    if not rows:
        return {}
    return {k: max(getattr(r, k) for r in rows) for k in COMPARISON_KEYS}


def comparison_frame(rows: Sequence[ModelComparisonRow]) -> pd.DataFrame:
    """One row per model, indexed by display name."""
    df = pd.DataFrame([r.as_dict() for r in rows], columns=["model_type", *COMPARISON_KEYS])
    df.insert(0, "model", [MODEL_METADATA[r.model_type].name for r in rows])
    return df.set_index("model")
