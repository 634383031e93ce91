from pydantic import BaseModel
from typing import Optional

from .graph import DiagramGraph


class ParseRequest(BaseModel):
    text: str


class LineRequest(BaseModel):
    line: str


class LineValidity(BaseModel):
    line: str
    valid: bool


class Diagnostic(BaseModel):
    severity: str = "error"
    message: str
    line: int
    start_column: int = 0
    end_column: int = 0


class Completion(BaseModel):
    label: str
    insert_text: str
    kind: str = "Snippet"
    description: Optional[str] = None


class HoverInfo(BaseModel):
    text: str
    node_count: int
    edge_count: int
    component_count: int


class SyntaxErrorDetail(BaseModel):
    message: str
    line_number: Optional[int] = None
    line: Optional[str] = None


class SampleInfo(BaseModel):
    name: str
    description: str = ""


class SampleDiagram(BaseModel):
    name: str
    content: str
    graph: DiagramGraph


class TemplateResponse(BaseModel):
    content: str
