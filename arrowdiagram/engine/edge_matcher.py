"""Edge pattern matching: ``Source <connector> Target [: label]``."""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass
from typing import Optional

from arrowdiagram.models.graph import ConnectorType


def _connector_alternation() -> str:
    # Longest token first; every token is escaped so "-.->" only matches a literal dot.
    tokens = sorted(ConnectorType.tokens(), key=len, reverse=True)
    return "|".join(re.escape(token) for token in tokens)


EDGE_PATTERN = re.compile(
    r"(?P<source>\w+)\s*"
    rf"(?P<connector>{_connector_alternation()})"
    r"\s*(?P<target>\w+)"
    r"(?:\s*:\s*(?P<label>.*))?"
)


@dataclass(frozen=True)
class EdgeMatch:
    """A successfully matched edge line."""

    source_id: str
    connector_type: ConnectorType
    target_id: str
    label: Optional[str] = None


def match_edge(line: str) -> EdgeMatch | None:
    """Match a trimmed candidate line against the edge grammar.

    The line is NFC-normalized first so decomposed accents still count as
    word characters. Returns ``None`` when the line does not match. A label
    that is empty after trimming (``A --> B :``) is reported as ``None``.
    """
    m = EDGE_PATTERN.fullmatch(unicodedata.normalize("NFC", line))
    if m is None:
        return None

    label = m.group("label")
    if label is not None:
        label = label.strip() or None

    return EdgeMatch(
        source_id=m.group("source"),
        connector_type=ConnectorType.from_token(m.group("connector")),
        target_id=m.group("target"),
        label=label,
    )
