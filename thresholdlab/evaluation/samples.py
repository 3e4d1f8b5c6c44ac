# thresholdlab/evaluation/samples.py
from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np
import pandas as pd

from ..data.classification import ClassificationSample


STATUSES = ("TP", "FP", "FN", "TN")
SORT_ORDERS = ("score_desc", "score_asc", "uncertain")

BORDERLINE_LOW = 0.45
BORDERLINE_HIGH = 0.55

FRAME_COLUMNS = ["id", "ground_truth", "prediction_score", "predicted", "status"]


def sample_status(ground_truth: int, predicted: int) -> str:
    if predicted == 1:
        return "TP" if ground_truth == 1 else "FP"
    return "FN" if ground_truth == 1 else "TN"


def is_borderline(score: float) -> bool:
    return BORDERLINE_LOW <= score <= BORDERLINE_HIGH


def samples_frame(samples: Sequence[ClassificationSample], threshold: float) -> pd.DataFrame:
    """
    Tabulate samples with their prediction and outcome at `threshold`.

    Columns: id, ground_truth, prediction_score, predicted (0/1), status.
    """
    df = pd.DataFrame(
        {
            "id": [s.id for s in samples],
            "ground_truth": [s.ground_truth for s in samples],
            "prediction_score": [s.prediction_score for s in samples],
        },
        columns=FRAME_COLUMNS[:3],
    )
    df["id"] = df["id"].astype(int)
    df["ground_truth"] = df["ground_truth"].astype(int)
    df["prediction_score"] = df["prediction_score"].astype(float)
    df["predicted"] = (df["prediction_score"] >= float(threshold)).astype(int)
    df["status"] = [sample_status(g, p) for g, p in zip(df["ground_truth"], df["predicted"])]
    return df


def status_counts(frame: pd.DataFrame) -> Dict[str, int]:
    """Outcome counts keyed tp/fp/fn/tn; absent outcomes count 0."""
    vc = frame["status"].value_counts()
    return {s.lower(): int(vc.get(s, 0)) for s in STATUSES}


def filter_samples(
    frame: pd.DataFrame,
    status: str = "all",
    sort: str = "score_desc",
    near_threshold: Optional[float] = None,
    window: float = 0.1,
) -> pd.DataFrame:
    """
    Filter and order a samples_frame() table.

    Args:
        frame: output of samples_frame()
        status: "all" or one of tp/fp/fn/tn (case-insensitive)
        sort: "score_desc", "score_asc" or "uncertain" (closest to 0.5 first)
        near_threshold: if set, keep only |score - near_threshold| <= window
        window: half-width of the near-threshold band
    """
    status = status.upper()
    if status != "ALL" and status not in STATUSES:
        raise ValueError(f"status must be 'all' or one of {[s.lower() for s in STATUSES]}.")
    if sort not in SORT_ORDERS:
        raise ValueError(f"sort must be one of: {', '.join(SORT_ORDERS)}.")

    out = frame
    if near_threshold is not None:
        out = out[np.abs(out["prediction_score"] - near_threshold) <= window]
    if status != "ALL":
        out = out[out["status"] == status]

    if sort == "score_desc":
        out = out.sort_values("prediction_score", ascending=False, kind="stable")
    elif sort == "score_asc":
        out = out.sort_values("prediction_score", ascending=True, kind="stable")
    else:
        key = np.abs(out["prediction_score"] - 0.5)
        out = out.iloc[np.argsort(key.to_numpy(), kind="stable")]

    return out.reset_index(drop=True)
