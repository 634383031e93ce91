import logging
import os
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load .env from the working directory (or a parent)
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent

SAMPLES_DIR = Path(os.getenv("ARROWDIAGRAM_SAMPLES_DIR", str(PROJECT_ROOT / "samples")))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("ARROWDIAGRAM_CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

DEFAULT_LOG_LEVEL = "INFO"


def _resolve_log_level(raw: str) -> str:
    """Return *raw* upper-cased if it names a logging level, else the default."""
    level = raw.strip().upper()
    if level not in logging.getLevelNamesMapping():
        logger.warning(
            "Unknown ARROWDIAGRAM_LOG_LEVEL %r, falling back to %s", raw, DEFAULT_LOG_LEVEL
        )
        return DEFAULT_LOG_LEVEL
    return level


LOG_LEVEL = _resolve_log_level(os.getenv("ARROWDIAGRAM_LOG_LEVEL", DEFAULT_LOG_LEVEL))

SAMPLE_SUFFIX = ".diagram"
