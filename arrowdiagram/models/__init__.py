from .graph import CONNECTOR_DESCRIPTIONS, ConnectorType, DiagramNode, DiagramEdge, DiagramGraph
from .api import (
    ParseRequest,
    LineRequest,
    LineValidity,
    Diagnostic,
    Completion,
    HoverInfo,
    SyntaxErrorDetail,
    SampleInfo,
    SampleDiagram,
    TemplateResponse,
)
