"""Tests for the bundled .diagram samples.

Every sample must parse strictly (no invalid lines) and produce the expected
node and edge counts.
"""

from pathlib import Path

import pytest

from arrowdiagram.engine.arrow_parser import parse_strict
from arrowdiagram.engine.editor_support import diagnose, hover_summary


SAMPLES_DIR = Path(__file__).resolve().parent.parent / "samples"


def _read(name: str) -> str:
    return (SAMPLES_DIR / f"{name}.diagram").read_text(encoding="utf-8")


class TestSampleFiles:
    def test_samples_present(self):
        names = sorted(p.stem for p in SAMPLES_DIR.glob("*.diagram"))
        assert names == ["flowchart", "order_pipeline"]

    @pytest.mark.parametrize("name", ["flowchart", "order_pipeline"])
    def test_no_diagnostics(self, name):
        assert diagnose(_read(name)) == []


class TestFlowchartSample:
    def test_counts(self):
        graph = parse_strict(_read("flowchart"))
        assert len(graph.nodes) == 9
        assert len(graph.edges) == 6
        assert graph.edges[5].label == "yes"


class TestOrderPipelineSample:
    def test_counts(self):
        graph = parse_strict(_read("order_pipeline"))
        assert [n.id for n in graph.nodes] == [
            "Cart", "Checkout", "Payment", "Fulfilment",
            "Shipping", "Delivered", "Warehouse", "Notify",
        ]
        assert len(graph.edges) == 8

    def test_labels(self):
        graph = parse_strict(_read("order_pipeline"))
        labels = [e.label for e in graph.edges if e.label is not None]
        assert labels == ["approved", "declined"]

    def test_single_component(self):
        info = hover_summary(_read("order_pipeline"))
        assert info.component_count == 1
