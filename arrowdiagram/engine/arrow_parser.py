"""Arrow notation parser: builds a DiagramGraph from line-oriented text.

Supported syntax::

    Start --> Process           solid arrow
    Process --- End             solid line, no arrow
    Decision <--> Both          bidirectional
    Maybe -.-> Perhaps          dashed arrow
    Important ==> Critical      thick arrow
    Decision --> End : yes      labeled edge
    // a comment

Every call is independent: a fresh NodeRegistry is built per parse and no
module-level state is touched.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from arrowdiagram.engine.edge_matcher import EdgeMatch, match_edge
from arrowdiagram.engine.line_classifier import LineKind, classify_line
from arrowdiagram.engine.node_registry import NodeRegistry
from arrowdiagram.models.graph import DiagramEdge, DiagramGraph

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\n"


class DiagramError(ValueError):
    """Base class for strict-parse failures."""


class DiagramSyntaxError(DiagramError):
    """Raised by :func:`parse_strict` for the first line that does not parse."""

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"Syntax error on line {line_number}: {line}")


class EmptyDiagramError(DiagramError):
    """Raised by :func:`parse_strict` when the text defines no nodes."""

    def __init__(self) -> None:
        super().__init__("No diagram elements found.")


# ------------------------------------------------------------------
# Line-level helpers
# ------------------------------------------------------------------

def split_lines(text: str) -> list[str]:
    """Split on line feeds only; carriage returns are left for trimming."""
    return text.split(LINE_SEPARATOR)


def _scan_line(line: str) -> tuple[LineKind, Optional[EdgeMatch]]:
    kind = classify_line(line)
    if kind is not LineKind.CANDIDATE:
        return kind, None
    return kind, match_edge(line.strip())


def _iter_lines(text: str) -> Iterator[tuple[int, str, LineKind, Optional[EdgeMatch]]]:
    """Yield ``(line_number, raw_line, kind, match)`` with 1-based line numbers."""
    for number, raw in enumerate(split_lines(text), start=1):
        kind, match = _scan_line(raw)
        yield number, raw, kind, match


def is_valid_line(line: str) -> bool:
    """Return True for blank lines, comments, and lines matching the edge grammar."""
    kind, match = _scan_line(line)
    return kind is not LineKind.CANDIDATE or match is not None


# ------------------------------------------------------------------
# Graph assembly
# ------------------------------------------------------------------

def parse(text: str) -> DiagramGraph:
    """Parse arrow notation *text* into a :class:`DiagramGraph`.

    Unrecognized lines are skipped; this function never raises for string
    input. Empty text yields an empty graph.
    """
    registry = NodeRegistry()
    edges: list[DiagramEdge] = []

    for number, raw, kind, match in _iter_lines(text):
        if kind is not LineKind.CANDIDATE:
            continue
        if match is None:
            logger.debug("Skipping unrecognized line %d: %r", number, raw.strip())
            continue

        source_id = registry.ensure(match.source_id)
        target_id = registry.ensure(match.target_id)
        edges.append(
            DiagramEdge(
                source_id=source_id,
                target_id=target_id,
                connector_type=match.connector_type,
                label=match.label,
            )
        )

    graph = DiagramGraph(nodes=registry.nodes(), edges=tuple(edges))
    logger.debug("Parsed diagram: %d nodes, %d edges", len(graph.nodes), len(graph.edges))
    return graph


def parse_strict(text: str) -> DiagramGraph:
    """Parse *text*, raising on the first invalid line or on an empty diagram.

    Raises:
        DiagramSyntaxError: a candidate line does not match the edge grammar.
        EmptyDiagramError: the text contains no edges, so no nodes.
    """
    for number, raw, kind, match in _iter_lines(text):
        if kind is LineKind.CANDIDATE and match is None:
            raise DiagramSyntaxError(number, raw.strip())

    graph = parse(text)
    if graph.is_empty:
        raise EmptyDiagramError()
    return graph
