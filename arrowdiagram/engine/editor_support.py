"""Editor-facing helpers built on the parser: diagnostics, completions, hover."""

from __future__ import annotations

import networkx as nx

from arrowdiagram.engine.arrow_parser import is_valid_line, parse, split_lines
from arrowdiagram.models.api import Completion, Diagnostic, HoverInfo
from arrowdiagram.models.graph import ConnectorType

DEFAULT_DIAGRAM = "// Define your flowchart\nStart --> Process\nProcess --> End"


def diagnose(text: str) -> list[Diagnostic]:
    """Return one error diagnostic per line that fails :func:`is_valid_line`.

    Line numbers are 0-based; the range spans the line without trailing
    whitespace.
    """
    diagnostics: list[Diagnostic] = []
    for index, line in enumerate(split_lines(text)):
        if is_valid_line(line):
            continue
        diagnostics.append(
            Diagnostic(
                severity="error",
                message=f"Invalid arrow notation: '{line.strip()}'. Use format: Source --> Target",
                line=index,
                start_column=0,
                end_column=len(line.rstrip()),
            )
        )
    return diagnostics


def connector_completions() -> list[Completion]:
    return [
        Completion(
            label=connector.value,
            insert_text=connector.value,
            kind="Snippet",
            description=connector.description,
        )
        for connector in ConnectorType
    ]


def hover_summary(text: str) -> HoverInfo | None:
    """Summarize the diagram in *text*, or ``None`` when it has no nodes."""
    graph = parse(text)
    if graph.is_empty:
        return None

    components = nx.number_weakly_connected_components(graph.to_networkx())
    return HoverInfo(
        text=f"Diagram: {len(graph.nodes)} nodes, {len(graph.edges)} edges",
        node_count=len(graph.nodes),
        edge_count=len(graph.edges),
        component_count=components,
    )
