"""Configuration classes for the XML builder.

This module provides the immutable configuration object that controls how tag
calls are interpreted, how ambiguous blocks are reported and how finished trees
are rendered.
"""

import json
from dataclasses import asdict, dataclass, fields, replace
from enum import Enum, auto
from typing import Any, Dict, List, Optional


class AmbiguousBlockPolicy(Enum):
    """How to treat a block that returns a value and also creates elements."""

    SILENT = auto()       # Keep the children, drop the value quietly
    DIAGNOSTIC = auto()   # Keep the children, record a warning diagnostic
    STRICT = auto()       # Raise AmbiguousBlockError


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class BuilderConfig:
    """Configuration for XMLTreeBuilder.

    Frozen so a single instance can be shared between builders safely.
    """

    indent_width: int = 2
    ambiguous_block_policy: AmbiguousBlockPolicy = AmbiguousBlockPolicy.DIAGNOSTIC
    strip_keyword_underscore: bool = True
    max_depth: Optional[int] = 200
    enable_diagnostics: bool = True
    correlation_id: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate builder configuration."""
        if not isinstance(self.indent_width, int) or self.indent_width < 0:
            raise ConfigValidationError(
                "indent_width must be >= 0", field_name="indent_width"
            )
        if not isinstance(self.ambiguous_block_policy, AmbiguousBlockPolicy):
            raise ConfigValidationError(
                "ambiguous_block_policy must be an AmbiguousBlockPolicy",
                field_name="ambiguous_block_policy",
                suggestions=[policy.name for policy in AmbiguousBlockPolicy],
            )
        if self.max_depth is not None and self.max_depth <= 0:
            raise ConfigValidationError(
                "max_depth must be > 0 or None",
                field_name="max_depth",
                suggestions=["Use None for unbounded nesting"],
            )

    def override(self, **kwargs: Any) -> "BuilderConfig":
        """Create a new configuration with specific overrides.

        Example:
            >>> config = BuilderConfig()
            >>> config.override(indent_width=4).indent_width
            4
        """
        unknown = set(kwargs) - {f.name for f in fields(self)}
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}"
            )
        return replace(self, **kwargs)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        result = asdict(self)
        result["ambiguous_block_policy"] = self.ambiguous_block_policy.name
        return result

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BuilderConfig":
        """Create configuration from dictionary.

        Unknown keys are rejected; enum values may be given by name.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration fields: {sorted(unknown)}"
            )

        values = dict(data)
        policy = values.get("ambiguous_block_policy")
        if isinstance(policy, str):
            try:
                values["ambiguous_block_policy"] = AmbiguousBlockPolicy[policy.upper()]
            except KeyError as e:
                raise ConfigValidationError(
                    f"Unknown ambiguous_block_policy: {policy}",
                    field_name="ambiguous_block_policy",
                    suggestions=[p.name for p in AmbiguousBlockPolicy],
                ) from e

        return cls(**values)

    @classmethod
    def from_json(cls, json_str: str) -> "BuilderConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration JSON must be an object")
        return cls.from_dict(data)

    # Preset factory methods
    @classmethod
    def strict(cls) -> "BuilderConfig":
        """Preset that rejects ambiguous blocks."""
        return cls(ambiguous_block_policy=AmbiguousBlockPolicy.STRICT)

    @classmethod
    def lenient(cls) -> "BuilderConfig":
        """Preset with silent precedence and no nesting limit."""
        return cls(
            ambiguous_block_policy=AmbiguousBlockPolicy.SILENT,
            max_depth=None,
            enable_diagnostics=False,
        )
