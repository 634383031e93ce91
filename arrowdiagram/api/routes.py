"""REST API routes for the diagram language service — parse, validate, diagnostics, samples."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException

from arrowdiagram import config
from arrowdiagram.engine.arrow_parser import (
    DiagramError,
    DiagramSyntaxError,
    is_valid_line,
    parse,
    parse_strict,
    split_lines,
)
from arrowdiagram.engine.editor_support import (
    DEFAULT_DIAGRAM,
    connector_completions,
    diagnose,
    hover_summary,
)
from arrowdiagram.engine.line_classifier import COMMENT_MARKER, LineKind, classify_line
from arrowdiagram.models.api import (
    Completion,
    Diagnostic,
    HoverInfo,
    LineRequest,
    LineValidity,
    ParseRequest,
    SampleDiagram,
    SampleInfo,
    SyntaxErrorDetail,
    TemplateResponse,
)
from arrowdiagram.models.graph import DiagramGraph

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/diagram")


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _samples_dir() -> Path:
    return config.SAMPLES_DIR


def _sample_paths() -> list[Path]:
    samples_dir = _samples_dir()
    if not samples_dir.is_dir():
        return []
    return sorted(samples_dir.glob(f"*{config.SAMPLE_SUFFIX}"))


def _sample_description(content: str) -> str:
    """Use the first comment line of a sample as its description."""
    for line in split_lines(content):
        if classify_line(line) is LineKind.COMMENT:
            return line.strip()[len(COMMENT_MARKER):].strip()
    return ""


def _load_sample_text(sample_name: str) -> str:
    """Read a bundled ``.diagram`` sample by name (without extension)."""
    sample_path = _samples_dir() / f"{sample_name}{config.SAMPLE_SUFFIX}"
    # Reject names that escape the samples directory
    if sample_path.resolve().parent != _samples_dir().resolve() or not sample_path.is_file():
        raise HTTPException(
            status_code=404,
            detail=f"Sample '{sample_name}' not found. Available samples: "
                   f"{[p.stem for p in _sample_paths()]}",
        )
    return sample_path.read_text(encoding="utf-8")


# ------------------------------------------------------------------
# Parsing
# ------------------------------------------------------------------

@router.post("/parse", response_model=DiagramGraph)
async def parse_diagram(request: ParseRequest) -> DiagramGraph:
    """Parse arrow notation; unrecognized lines are skipped."""
    return parse(request.text)


@router.post("/parse/strict", response_model=DiagramGraph)
async def parse_diagram_strict(request: ParseRequest) -> DiagramGraph:
    """Parse arrow notation, failing with 400 on the first invalid line or an empty diagram."""
    try:
        return parse_strict(request.text)
    except DiagramSyntaxError as exc:
        detail = SyntaxErrorDetail(message=str(exc), line_number=exc.line_number, line=exc.line)
        raise HTTPException(status_code=400, detail=detail.model_dump()) from exc
    except DiagramError as exc:
        raise HTTPException(status_code=400, detail=SyntaxErrorDetail(message=str(exc)).model_dump()) from exc


@router.post("/validate-line", response_model=LineValidity)
async def validate_line(request: LineRequest) -> LineValidity:
    return LineValidity(line=request.line, valid=is_valid_line(request.line))


# ------------------------------------------------------------------
# Editor support
# ------------------------------------------------------------------

@router.post("/diagnostics", response_model=list[Diagnostic])
async def get_diagnostics(request: ParseRequest) -> list[Diagnostic]:
    return diagnose(request.text)


@router.post("/hover", response_model=Optional[HoverInfo])
async def get_hover(request: ParseRequest) -> Optional[HoverInfo]:
    return hover_summary(request.text)


@router.get("/completions", response_model=list[Completion])
async def get_completions() -> list[Completion]:
    return connector_completions()


@router.get("/template", response_model=TemplateResponse)
async def get_template() -> TemplateResponse:
    return TemplateResponse(content=DEFAULT_DIAGRAM)


# ------------------------------------------------------------------
# Samples
# ------------------------------------------------------------------

@router.get("/samples", response_model=list[SampleInfo])
async def list_samples() -> list[SampleInfo]:
    """Return the bundled ``.diagram`` samples with their descriptions."""
    results = []
    for path in _sample_paths():
        try:
            description = _sample_description(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Failed to read sample %s: %s", path, exc)
            description = ""
        results.append(SampleInfo(name=path.stem, description=description))
    return results


@router.get("/samples/{sample_name}", response_model=SampleDiagram)
async def get_sample(sample_name: str) -> SampleDiagram:
    content = _load_sample_text(sample_name)
    return SampleDiagram(name=sample_name, content=content, graph=parse(content))
