from __future__ import annotations

from arrowdiagram.models.graph import DiagramNode


class NodeRegistry:
    """Case-insensitive node registry that preserves first-seen order.

    Lookup goes through a case-folded index; iteration order comes from a
    separate append-only list.
    """

    def __init__(self) -> None:
        self._index: dict[str, DiagramNode] = {}
        self._nodes: list[DiagramNode] = []

    @staticmethod
    def _key(node_id: str) -> str:
        return node_id.lower()

    def ensure(self, node_id: str) -> str:
        """Register *node_id* if unseen and return its canonical id."""
        key = self._key(node_id)
        node = self._index.get(key)
        if node is None:
            node = DiagramNode(id=node_id, label=node_id)
            self._index[key] = node
            self._nodes.append(node)
        return node.id

    def get(self, node_id: str) -> DiagramNode | None:
        return self._index.get(self._key(node_id))

    def nodes(self) -> tuple[DiagramNode, ...]:
        return tuple(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, str) and self._key(node_id) in self._index

    def __len__(self) -> int:
        return len(self._nodes)
