"""Core tree building implementation for the XML builder DSL.

Callers describe a tree with nested blocks instead of constructing elements by
hand. Every tag call made through a ``TagHandle`` creates an element and appends
it, together with the current nesting depth, to an append-only session log.
When a nested block returns, the elements it logged at exactly one level below
its owner become that owner's children; deeper entries already belong to their
own immediate parents. A block that logs nothing contributes its return value
as scalar text instead.

Example:
    >>> def report(xml):
    ...     xml.name("X")
    ...     xml.amounts({"month": 1}, lambda xml: (xml.expenses(5), xml.revenue(9)))
    >>> root = XMLTreeBuilder().build(lambda xml: xml.report(report))
    >>> print(root.render())  # doctest: +SKIP
"""

import keyword
import time
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from simple_xml_builder.shared import (
    AmbiguousBlockError,
    AmbiguousBlockPolicy,
    BuilderConfig,
    BuilderError,
    BuildInProgressError,
    BuildMetrics,
    DiagnosticEntry,
    DiagnosticSeverity,
    EmptyBuildError,
    InvalidArgumentShapeError,
    MaxDepthExceededError,
    get_logger,
)
from simple_xml_builder.tree.element import XMLElement

Block = Callable[["TagHandle"], Any]

_COMPONENT = "xml_tree_builder"


@dataclass
class BuildSession:
    """State owned by a single build() call."""

    root: Optional[XMLElement] = None
    log: List[Tuple[int, XMLElement]] = field(default_factory=list)
    depth: int = 0
    diagnostics: List[DiagnosticEntry] = field(default_factory=list)
    metrics: BuildMetrics = field(default_factory=BuildMetrics)


class TagHandle:
    """Call-interception surface handed to every block.

    Any public attribute looked up on the handle is a tag factory:
    ``xml.title("Hi")`` creates ``<title>``. Names that clash with Python
    keywords or with ``tag`` itself go through the explicit form
    ``xml.tag("class", "Class of 94")``; a keyword followed by a single
    underscore (``xml.class_(...)``) is accepted as well.
    """

    __slots__ = ("_builder",)

    def __init__(self, builder: "XMLTreeBuilder") -> None:
        self._builder = builder

    def tag(self, name: str, /, *args: Any, **attributes: Any) -> XMLElement:
        """Create an element named ``name`` verbatim."""
        return self._builder._invoke(name, args, attributes)

    def __getattr__(self, name: str) -> Callable[..., XMLElement]:
        # Private and dunder lookups from copy, pickle or IPython stay normal
        if name.startswith("_"):
            raise AttributeError(name)

        tag_name = self._builder._resolve_tag_name(name)
        builder = self._builder

        def invoke(*args: Any, **attributes: Any) -> XMLElement:
            return builder._invoke(tag_name, args, attributes)

        invoke.__name__ = name
        return invoke

    def __repr__(self) -> str:
        return f"<TagHandle of {self._builder!r}>"


class XMLTreeBuilder:
    """Builds XMLElement trees from nested blocks.

    One builder may run any number of builds one after another; each build is
    an independent session. Concurrent builds need separate builder instances.
    """

    def __init__(
        self,
        block: Optional[Block] = None,
        config: Optional[BuilderConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize tree builder.

        Args:
            block: Optional block to build immediately
            config: Builder configuration (defaults to ``BuilderConfig()``)
            correlation_id: Optional correlation ID for build tracking;
                falls back to ``config.correlation_id``
        """
        self.config = config or BuilderConfig()
        self.correlation_id = correlation_id or self.config.correlation_id
        self.logger = get_logger(__name__, self.correlation_id, _COMPONENT)

        self._handle = TagHandle(self)
        self._session: Optional[BuildSession] = None
        self._root: Optional[XMLElement] = None
        self._diagnostics: List[DiagnosticEntry] = []
        self._metrics = BuildMetrics()

        if block is not None:
            self.build(block)

    @property
    def root(self) -> Optional[XMLElement]:
        """Root element of the last successful build, if any."""
        return self._root

    @property
    def diagnostics(self) -> List[DiagnosticEntry]:
        """Diagnostics recorded during the last build."""
        return list(self._diagnostics)

    @property
    def metrics(self) -> BuildMetrics:
        return self._metrics

    @property
    def is_building(self) -> bool:
        return self._session is not None

    def build(self, block: Block) -> XMLElement:
        """Run ``block`` with a fresh session and return the root element.

        Args:
            block: Callable receiving the TagHandle; its return value is ignored

        Returns:
            The first element created by the block

        Raises:
            BuildInProgressError: If called from inside a running build
            EmptyBuildError: If the block created no elements
        """
        if self._session is not None:
            raise BuildInProgressError(
                "build() is already running on this builder; use a separate instance"
            )
        if not callable(block):
            raise TypeError("build() requires a callable block")

        session = BuildSession()
        self._session = session
        self._root = None
        self._diagnostics = session.diagnostics
        self._metrics = session.metrics
        start_time = time.time()

        self.logger.info("Starting build")

        try:
            block(self._handle)

            if session.root is None:
                raise EmptyBuildError()

            self._check_orphaned_top_level(session)
            self._root = session.root
        except Exception:
            self.logger.exception(
                "Build failed",
                extra={"element_count": session.metrics.elements_created},
            )
            raise
        finally:
            session.metrics.processing_time_ms = (time.time() - start_time) * 1000
            self._session = None

        self.logger.info(
            "Build completed",
            extra={
                "root_tag": session.root.tag,
                "element_count": session.metrics.elements_created,
                "max_depth": session.metrics.max_depth_reached,
                "processing_time_ms": session.metrics.processing_time_ms,
            },
        )
        return session.root

    def render(self) -> str:
        """Render the last built tree.

        Raises:
            EmptyBuildError: If no tree has been built
        """
        if self._root is None:
            raise EmptyBuildError()
        return self._root.render(indent_width=self.config.indent_width)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        root = self._root.tag if self._root is not None else None
        return f"XMLTreeBuilder(root={root!r}, building={self.is_building})"

    # Dynamic tag dispatch

    def _resolve_tag_name(self, name: str) -> str:
        if (
            self.config.strip_keyword_underscore
            and name.endswith("_")
            and keyword.iskeyword(name[:-1])
        ):
            return name[:-1]
        return name

    def _invoke(
        self,
        name: str,
        args: Tuple[Any, ...],
        attributes: Dict[str, Any],
    ) -> XMLElement:
        """Create an element for a tag call and run its block, if any."""
        session = self._session
        if session is None:
            raise BuilderError(f"<{name}> was called outside of build()")

        # class_="x" spells the reserved attribute name, like tag names do
        attributes = {self._resolve_tag_name(key): value for key, value in attributes.items()}
        attrs, content, block = self._resolve_arguments(name, args, attributes)

        max_depth = self.config.max_depth
        if block is not None and max_depth is not None and session.depth >= max_depth:
            raise MaxDepthExceededError(name, max_depth)

        element = XMLElement(name, attrs)
        if content is not None:
            element._attach_text(content)
        session.log.append((session.depth, element))
        if session.root is None:
            session.root = element
        session.metrics.elements_created += 1

        self.logger.debug(
            "Element created",
            extra={"tag": name, "depth": session.depth, "has_block": block is not None},
        )

        if block is None:
            return element

        with self._nested(session) as start:
            result = block(self._handle)
            added = session.log[start:]

            if added:
                # Deeper entries were already claimed by their own parents
                children = [child for depth, child in added if depth == session.depth]
                element._attach_children(children)
                if result is not None and not _is_logged(result, added):
                    self._report_ambiguous_block(element, result)
            elif result is not None:
                element._attach_text(result)
                session.metrics.scalar_blocks += 1

        return element

    @staticmethod
    def _resolve_arguments(
        name: str,
        args: Tuple[Any, ...],
        attributes: Dict[str, Any],
    ) -> Tuple[Optional[Dict[str, Any]], Any, Optional[Block]]:
        """Classify positional arguments as (attributes, content, block).

        Shapes, first match wins: ``(block)``, ``(mapping[, block])``,
        ``(scalar[, mapping])`` and ``()``. Keyword arguments are extra
        attributes applied after a positional mapping.
        """
        if len(args) > 2:
            raise InvalidArgumentShapeError(
                name, args, "expected at most two positional arguments"
            )

        if not args:
            return _merge_attributes(None, attributes), None, None

        first = args[0]
        has_second = len(args) == 2
        second = args[1] if has_second else None

        if callable(first):
            if has_second:
                raise InvalidArgumentShapeError(
                    name, args, "a block must be the only positional argument"
                )
            return _merge_attributes(None, attributes), None, first

        if isinstance(first, Mapping):
            if has_second and not callable(second):
                raise InvalidArgumentShapeError(
                    name, args, "only a block may follow an attribute mapping"
                )
            return _merge_attributes(first, attributes), None, second

        if has_second and not isinstance(second, Mapping):
            raise InvalidArgumentShapeError(
                name, args, "only an attribute mapping may follow text content"
            )
        return _merge_attributes(second, attributes), first, None

    # Session bookkeeping

    @contextmanager
    def _nested(self, session: BuildSession) -> Iterator[int]:
        """Enter one nesting level; yields the log length at entry."""
        session.depth += 1
        session.metrics.blocks_entered += 1
        session.metrics.max_depth_reached = max(
            session.metrics.max_depth_reached, session.depth
        )
        try:
            yield len(session.log)
        finally:
            session.depth -= 1

    def _report_ambiguous_block(self, element: XMLElement, value: Any) -> None:
        policy = self.config.ambiguous_block_policy
        if policy is AmbiguousBlockPolicy.STRICT:
            raise AmbiguousBlockError(element.tag, value)
        if policy is AmbiguousBlockPolicy.SILENT:
            return

        message = (
            f"Block for <{element.tag}> returned a value and created elements; "
            "the value was discarded"
        )
        self.logger.warning(message, extra={"tag": element.tag})
        self._add_diagnostic(
            DiagnosticSeverity.WARNING,
            message,
            details={"tag": element.tag, "discarded_value": repr(value)},
        )

    def _check_orphaned_top_level(self, session: BuildSession) -> None:
        orphans = [
            element for depth, element in session.log
            if depth == 0 and element is not session.root
        ]
        if not orphans:
            return

        message = (
            f"{len(orphans)} top-level element(s) after <{session.root.tag}> "
            "are not part of the tree"
        )
        self.logger.warning(message, extra={"orphan_count": len(orphans)})
        self._add_diagnostic(
            DiagnosticSeverity.WARNING,
            message,
            details={"orphan_tags": [element.tag for element in orphans]},
        )

    def _add_diagnostic(
        self,
        severity: DiagnosticSeverity,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        if not self.config.enable_diagnostics or self._session is None:
            return
        self._session.diagnostics.append(
            DiagnosticEntry(
                severity=severity,
                message=message,
                component=_COMPONENT,
                details=details,
                correlation_id=self.correlation_id,
            )
        )


def _merge_attributes(
    positional: Optional[Mapping], keywords: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    if positional is None and not keywords:
        return None
    merged = dict(positional) if positional is not None else {}
    merged.update(keywords)
    return merged


def _is_logged(value: Any, entries: List[Tuple[int, XMLElement]]) -> bool:
    """True when ``value`` is an element, or a tuple/list of elements, from ``entries``."""
    logged = {id(element) for _, element in entries}
    if isinstance(value, XMLElement):
        return id(value) in logged
    if isinstance(value, (list, tuple)) and value:
        return all(isinstance(item, XMLElement) and id(item) in logged for item in value)
    return False
