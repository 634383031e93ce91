"""Line classification for arrow notation: blank, comment, or edge candidate."""

from enum import Enum

COMMENT_MARKER = "//"


class LineKind(str, Enum):
    BLANK = "blank"
    COMMENT = "comment"
    CANDIDATE = "candidate"


def classify_line(line: str) -> LineKind:
    """Classify one line of input after trimming surrounding whitespace."""
    trimmed = line.strip()
    if not trimmed:
        return LineKind.BLANK
    if trimmed.startswith(COMMENT_MARKER):
        return LineKind.COMMENT
    return LineKind.CANDIDATE
