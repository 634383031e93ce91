"""Tests for the FastAPI routes — /parse, /validate-line, /diagnostics, /hover, /samples."""

import pytest
from fastapi.testclient import TestClient

from arrowdiagram import config
from arrowdiagram.main import app


API = "/api/v1/diagram"


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def samples_dir(tmp_path, monkeypatch):
    """Point the service at a temporary samples directory."""
    (tmp_path / "alpha.diagram").write_text("// First sample\nA --> B\n", encoding="utf-8")
    (tmp_path / "beta.diagram").write_text("X ==> Y : go\n", encoding="utf-8")
    (tmp_path / "ignored.txt").write_text("A --> B", encoding="utf-8")
    monkeypatch.setattr(config, "SAMPLES_DIR", tmp_path)
    return tmp_path


# ===========================================================================
# /parse
# ===========================================================================


class TestParse:
    def test_parse_success(self, client):
        resp = client.post(f"{API}/parse", json={"text": "Decision --> End : yes\nbad line"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["nodes"] == [
            {"id": "Decision", "label": "Decision"},
            {"id": "End", "label": "End"},
        ]
        assert body["edges"] == [
            {"source_id": "Decision", "target_id": "End", "connector_type": "-->", "label": "yes"},
        ]

    def test_parse_empty(self, client):
        resp = client.post(f"{API}/parse", json={"text": ""})
        assert resp.status_code == 200
        assert resp.json() == {"nodes": [], "edges": []}

    def test_parse_missing_text_returns_422(self, client):
        resp = client.post(f"{API}/parse", json={})
        assert resp.status_code == 422


class TestParseStrict:
    def test_strict_success(self, client):
        resp = client.post(f"{API}/parse/strict", json={"text": "A --> B\nB -.-> C"})
        assert resp.status_code == 200
        assert len(resp.json()["edges"]) == 2

    def test_strict_syntax_error(self, client):
        resp = client.post(f"{API}/parse/strict", json={"text": "A --> B\nA -> C"})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["line_number"] == 2
        assert detail["line"] == "A -> C"
        assert detail["message"] == "Syntax error on line 2: A -> C"

    def test_strict_empty_diagram(self, client):
        resp = client.post(f"{API}/parse/strict", json={"text": "// nothing here"})
        assert resp.status_code == 400
        detail = resp.json()["detail"]
        assert detail["message"] == "No diagram elements found."
        assert detail["line_number"] is None


# ===========================================================================
# /validate-line
# ===========================================================================


class TestValidateLine:
    @pytest.mark.parametrize(
        "line,valid",
        [("A --> B", True), ("// note", True), ("", True), ("A -> B", False)],
    )
    def test_validate_line(self, client, line, valid):
        resp = client.post(f"{API}/validate-line", json={"line": line})
        assert resp.status_code == 200
        assert resp.json() == {"line": line, "valid": valid}


# ===========================================================================
# Editor support
# ===========================================================================


class TestEditorRoutes:
    def test_diagnostics(self, client):
        resp = client.post(f"{API}/diagnostics", json={"text": "A --> B\nwhat"})
        assert resp.status_code == 200
        diags = resp.json()
        assert len(diags) == 1
        assert diags[0]["line"] == 1
        assert diags[0]["severity"] == "error"
        assert diags[0]["end_column"] == 4

    def test_hover(self, client):
        resp = client.post(f"{API}/hover", json={"text": "A --> B"})
        assert resp.status_code == 200
        assert resp.json()["text"] == "Diagram: 2 nodes, 1 edges"

    def test_hover_empty_is_null(self, client):
        resp = client.post(f"{API}/hover", json={"text": ""})
        assert resp.status_code == 200
        assert resp.json() is None

    def test_completions(self, client):
        resp = client.get(f"{API}/completions")
        assert resp.status_code == 200
        assert [c["label"] for c in resp.json()] == ["-->", "---", "<-->", "-.->", "==>"]

    def test_template(self, client):
        resp = client.get(f"{API}/template")
        assert resp.status_code == 200
        assert resp.json()["content"].startswith("// Define your flowchart")


# ===========================================================================
# /samples
# ===========================================================================


class TestSamples:
    def test_list_samples(self, client, samples_dir):
        resp = client.get(f"{API}/samples")
        assert resp.status_code == 200
        assert resp.json() == [
            {"name": "alpha", "description": "First sample"},
            {"name": "beta", "description": ""},
        ]

    def test_sample_description_uses_comment_lines_only(self, client, tmp_path, monkeypatch):
        (tmp_path / "gamma.diagram").write_text(
            "\nA --> B : see // here\n   // Indented title  \n// Later note\n", encoding="utf-8"
        )
        monkeypatch.setattr(config, "SAMPLES_DIR", tmp_path)
        resp = client.get(f"{API}/samples")
        assert resp.json() == [{"name": "gamma", "description": "Indented title"}]

    def test_list_samples_missing_dir(self, client, tmp_path, monkeypatch):
        monkeypatch.setattr(config, "SAMPLES_DIR", tmp_path / "does-not-exist")
        resp = client.get(f"{API}/samples")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_get_sample(self, client, samples_dir):
        resp = client.get(f"{API}/samples/beta")
        assert resp.status_code == 200
        body = resp.json()
        assert body["name"] == "beta"
        assert body["content"] == "X ==> Y : go\n"
        assert body["graph"]["edges"][0]["label"] == "go"

    def test_get_unknown_sample_returns_404(self, client, samples_dir):
        resp = client.get(f"{API}/samples/nope")
        assert resp.status_code == 404
        assert "alpha" in resp.json()["detail"]


class TestHealth:
    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
