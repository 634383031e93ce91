from __future__ import annotations

from enum import Enum
from typing import Optional

import networkx as nx
from pydantic import BaseModel, ConfigDict


class ConnectorType(str, Enum):
    """Edge-drawing tokens recognized by the arrow notation."""

    SOLID_ARROW = "-->"
    SOLID_LINE = "---"
    BIDIRECTIONAL = "<-->"
    DASHED_ARROW = "-.->"
    THICK_ARROW = "==>"

    @classmethod
    def from_token(cls, token: str) -> "ConnectorType":
        return _TOKEN_TO_CONNECTOR[token]

    @classmethod
    def tokens(cls) -> list[str]:
        return [member.value for member in cls]

    @property
    def description(self) -> str:
        return CONNECTOR_DESCRIPTIONS[self]


_TOKEN_TO_CONNECTOR: dict[str, ConnectorType] = {c.value: c for c in ConnectorType}

CONNECTOR_DESCRIPTIONS: dict[ConnectorType, str] = {
    ConnectorType.SOLID_ARROW: "Solid arrow",
    ConnectorType.SOLID_LINE: "Solid line (no arrow)",
    ConnectorType.BIDIRECTIONAL: "Bidirectional arrow",
    ConnectorType.DASHED_ARROW: "Dashed arrow",
    ConnectorType.THICK_ARROW: "Thick arrow",
}


class DiagramNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str


class DiagramEdge(BaseModel):
    model_config = ConfigDict(frozen=True)

    source_id: str
    target_id: str
    connector_type: ConnectorType
    label: Optional[str] = None


class DiagramGraph(BaseModel):
    """Parsed diagram: nodes in first-seen order, edges in line order."""

    model_config = ConfigDict(frozen=True)

    nodes: tuple[DiagramNode, ...] = ()
    edges: tuple[DiagramEdge, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.nodes

    def get_node(self, node_id: str) -> DiagramNode | None:
        """Look up a node by id, ignoring case."""
        key = node_id.lower()
        for node in self.nodes:
            if node.id.lower() == key:
                return node
        return None

    def to_networkx(self) -> nx.MultiDiGraph:
        """Export as a ``MultiDiGraph`` keyed by node id.

        Parallel edges are kept; each edge carries ``connector_type`` (the
        token string) and ``label``.
        """
        graph = nx.MultiDiGraph()
        for node in self.nodes:
            graph.add_node(node.id, label=node.label)
        for edge in self.edges:
            graph.add_edge(
                edge.source_id,
                edge.target_id,
                connector_type=edge.connector_type.value,
                label=edge.label,
            )
        return graph
