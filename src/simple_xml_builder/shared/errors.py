"""Exception classes raised while building element trees."""

from typing import Any, Tuple


class BuilderError(Exception):
    """Base exception for all builder errors."""


class InvalidArgumentShapeError(BuilderError, TypeError):
    """A tag call received an argument combination it cannot interpret."""

    def __init__(self, tag: str, args: Tuple[Any, ...], reason: str) -> None:
        self.tag = tag
        self.args_received = args
        self.reason = reason
        shapes = ", ".join(type(arg).__name__ for arg in args)
        super().__init__(f"Invalid arguments for <{tag}> ({shapes}): {reason}")


class EmptyBuildError(BuilderError):
    """Raised when a build produced no root element."""

    def __init__(self, message: str = "no root element") -> None:
        super().__init__(message)


class AmbiguousBlockError(BuilderError):
    """A block both returned a value and created nested elements."""

    def __init__(self, tag: str, value: Any) -> None:
        self.tag = tag
        self.value = value
        super().__init__(
            f"Block for <{tag}> created nested elements and also returned {value!r}"
        )


class BuildInProgressError(BuilderError):
    """Raised when build() is re-entered on a builder that is already building."""


class MaxDepthExceededError(BuilderError):
    """Raised when blocks nest deeper than the configured limit."""

    def __init__(self, tag: str, max_depth: int) -> None:
        self.tag = tag
        self.max_depth = max_depth
        super().__init__(f"Nesting for <{tag}> exceeds max_depth={max_depth}")
