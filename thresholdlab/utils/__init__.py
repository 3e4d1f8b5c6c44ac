# thresholdlab/utils/__init__.py
"""
Utility subpackage.

Includes:
- logging: consistent logging to console and optionally to file
- config:  YAML config loading and session settings
"""

from .logging import get_logger, configure_logging, log_run_header
from .config import EvaluationSettings, load_yaml, get_section, settings_from_config

__all__ = [
    "get_logger",
    "configure_logging",
    "log_run_header",
    "EvaluationSettings",
    "load_yaml",
    "get_section",
    "settings_from_config",
]
