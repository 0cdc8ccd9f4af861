"""Diagnostic and metrics types reported by the XML builder."""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, Optional


class DiagnosticSeverity(Enum):
    """Severity levels for diagnostic entries."""

    DEBUG = auto()
    INFO = auto()
    WARNING = auto()     # Build succeeded but input was questionable
    ERROR = auto()


@dataclass
class DiagnosticEntry:
    """Single diagnostic entry with context information."""

    severity: DiagnosticSeverity
    message: str
    component: str
    details: Optional[Dict[str, Any]] = None
    timestamp: float = field(default_factory=time.time)
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate diagnostic entry."""
        if not self.message:
            raise ValueError("Diagnostic message cannot be empty")
        if not self.component:
            raise ValueError("Diagnostic component cannot be empty")


@dataclass
class BuildMetrics:
    """Counters collected over a single build session."""

    processing_time_ms: float = 0.0
    elements_created: int = 0
    blocks_entered: int = 0
    scalar_blocks: int = 0
    max_depth_reached: int = 0

    @property
    def elements_per_block(self) -> float:
        """Average number of elements created per nested block."""
        if self.blocks_entered == 0:
            return 0.0
        return self.elements_created / self.blocks_entered
