# thresholdlab/utils/config.py
from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Union

import yaml


PathLike = Union[str, Path]


@dataclass(frozen=True)
class EvaluationSettings:
    """
    Tunable knobs of the evaluation session.
    """
    n_samples: int = 200
    default_threshold: float = 0.5
    history_length: int = 5          # unique previous thresholds kept
    near_threshold_window: float = 0.1

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "EvaluationSettings":
        known = {f.name for f in fields(EvaluationSettings)}
        unknown = set(d) - known
        if unknown:
            raise ValueError(f"Unknown evaluation settings: {sorted(unknown)}")
        return EvaluationSettings(**d)


def load_yaml(path: PathLike) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {p}")
    with p.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping/dict, got {type(data)}")
    return data


def get_section(cfg: Dict[str, Any], *keys: str) -> Dict[str, Any]:
    out: Dict[str, Any] = cfg
    for k in keys:
        v = out.get(k, {})
        if v is None:
            v = {}
        if not isinstance(v, dict):
            raise ValueError(f"Config section {'.'.join(keys)} must be a dict")
        out = v
    return out


def settings_from_config(cfg: Dict[str, Any]) -> EvaluationSettings:
    """Read the optional `evaluation:` section into EvaluationSettings."""
    return EvaluationSettings.from_dict(get_section(cfg, "evaluation"))
