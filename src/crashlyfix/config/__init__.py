"""Configuration loading and validation."""

from .loader import load_config
from .schema import CrashlyfixConfig, FormatConfig, LoggingConfig, TraceConfig

__all__ = [
    # Loader
    "load_config",
    # Root config
    "CrashlyfixConfig",
    # Sections
    "TraceConfig",
    "FormatConfig",
    "LoggingConfig",
]
