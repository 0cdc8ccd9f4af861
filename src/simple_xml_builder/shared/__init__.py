"""Shared utilities for the XML builder.

This module provides configuration, diagnostics, error types, and logging
helpers used by the tree and api layers.
"""

from .config import (
    AmbiguousBlockPolicy,
    BuilderConfig,
    ConfigError,
    ConfigValidationError,
)
from .errors import (
    AmbiguousBlockError,
    BuilderError,
    BuildInProgressError,
    EmptyBuildError,
    InvalidArgumentShapeError,
    MaxDepthExceededError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import (
    BuildMetrics,
    DiagnosticEntry,
    DiagnosticSeverity,
)

__all__ = [
    "AmbiguousBlockPolicy",
    "BuilderConfig",
    "ConfigError",
    "ConfigValidationError",
    "AmbiguousBlockError",
    "BuilderError",
    "BuildInProgressError",
    "EmptyBuildError",
    "InvalidArgumentShapeError",
    "MaxDepthExceededError",
    "CorrelationLogger",
    "get_logger",
    "BuildMetrics",
    "DiagnosticEntry",
    "DiagnosticSeverity",
]
