# thresholdlab/data/__init__.py
"""
Data subpackage: deterministic synthetic inputs for the evaluation core.

Contains:
- rng:            seeded LCG uniform stream and Box-Muller Gaussian sampler
- classification: model archetypes and the fixed 200-sample datasets
- masks:          numpy rasterization of the synthetic segmentation examples
"""

from .rng import SeededRandom, GaussianSampler
from .classification import (
    ALL_MODEL_TYPES,
    ARCHETYPES,
    DEFAULT_N_SAMPLES,
    ArchetypeParams,
    ClassificationSample,
    ModelType,
    archetypes_from_config,
    generate_all_datasets,
    generate_dataset,
    resolve_model_type,
    samples_to_arrays,
)
from .masks import (
    SEGMENTATION_SAMPLES,
    MaskSpec,
    SegmentationSample,
    get_segmentation_sample,
    gt_mask,
    load_masks,
    prediction_mask,
)

__all__ = [
    # rng
    "SeededRandom",
    "GaussianSampler",
    # classification
    "ALL_MODEL_TYPES",
    "ARCHETYPES",
    "DEFAULT_N_SAMPLES",
    "ArchetypeParams",
    "ClassificationSample",
    "ModelType",
    "archetypes_from_config",
    "generate_all_datasets",
    "generate_dataset",
    "resolve_model_type",
    "samples_to_arrays",
    # masks
    "SEGMENTATION_SAMPLES",
    "MaskSpec",
    "SegmentationSample",
    "get_segmentation_sample",
    "gt_mask",
    "load_masks",
    "prediction_mask",
]
