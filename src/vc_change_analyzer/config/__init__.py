"""
Configuration loading for vc_change_analyzer.

Provides the exclusion list and the default commit message style. See
:mod:`vc_change_analyzer.config.loader` for implementation details.
"""

from .loader import (  # noqa: F401
    DEFAULT_CONFIG,
    DEFAULT_EXCLUDES,
    AnalyzerConfig,
    ConfigError,
    load_config,
)
