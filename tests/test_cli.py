"""
Tests for the CLI module.
"""

import json

import pytest
from figflow.cli import export_flow_graph, main


@pytest.fixture
def snapshot_file(tmp_path, shop_document):
    path = tmp_path / "shop.json"
    path.write_text(json.dumps(shop_document), encoding="utf-8")
    return path


class TestExportFlowGraph:

    def test_export_json(self, tmp_path, shop_graph):
        output = export_flow_graph(shop_graph, tmp_path, "json")

        assert output.name == "shop_app_checkout.json"
        assert json.loads(output.read_text())["documentName"] == "Shop App"

    def test_export_markdown(self, tmp_path, shop_graph):
        output = export_flow_graph(shop_graph, tmp_path, "markdown")

        assert output.suffix == ".md"
        assert output.read_text().startswith("# Shop App - Checkout")

    def test_export_mermaid(self, tmp_path, shop_graph):
        output = export_flow_graph(shop_graph, tmp_path, "mermaid")

        assert output.suffix == ".mmd"
        assert output.read_text().startswith("flowchart TD")

    def test_export_dot(self, tmp_path, shop_graph):
        output = export_flow_graph(shop_graph, tmp_path, "dot")

        assert output.suffix == ".dot"
        assert "->" in output.read_text()

    def test_unknown_format(self, tmp_path, shop_graph):
        with pytest.raises(ValueError, match="Unknown format"):
            export_flow_graph(shop_graph, tmp_path, "pdf")


class TestMain:

    def test_default_export(self, tmp_path, snapshot_file, capsys):
        out_dir = tmp_path / "build"

        code = main([str(snapshot_file), "-o", str(out_dir)])

        assert code == 0
        written = out_dir / "shop_app_checkout.json"
        assert written.exists()
        assert str(written) in capsys.readouterr().out

    def test_format_and_page(self, tmp_path, snapshot_file):
        code = main([str(snapshot_file), "-o", str(tmp_path), "-f", "markdown", "--page", "Archive"])

        assert code == 0
        report = (tmp_path / "shop_app_archive.md").read_text()
        assert "## Screens (1)" in report

    def test_selection(self, tmp_path, snapshot_file):
        code = main([str(snapshot_file), "-o", str(tmp_path), "--selection"])

        assert code == 0
        data = json.loads((tmp_path / "shop_app_checkout.json").read_text())
        assert [s["name"] for s in data["screens"]] == ["Cart"]

    def test_list(self, snapshot_file, capsys):
        code = main([str(snapshot_file), "--list"])

        out = capsys.readouterr().out
        assert code == 0
        assert "Shop App - Checkout: 4 screens, 3 connections" in out
        assert '1:1: "Home" (1 interactions)' in out
        assert "Promo Dialog" not in out

    def test_verbose(self, tmp_path, snapshot_file, capsys):
        code = main([str(snapshot_file), "-o", str(tmp_path), "-f", "mermaid", "-v"])

        assert code == 0
        assert "Exported 'Shop App_Checkout' ->" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        code = main([str(tmp_path / "missing.json")])

        assert code == 1
        assert "File not found" in capsys.readouterr().err

    def test_directory_input(self, tmp_path, capsys):
        code = main([str(tmp_path)])

        assert code == 1
        assert "Not a file" in capsys.readouterr().err

    def test_invalid_snapshot(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        path.write_text("[]", encoding="utf-8")

        code = main([str(path)])

        assert code == 1
        assert "Error loading file" in capsys.readouterr().err

    def test_unknown_page(self, snapshot_file, capsys):
        code = main([str(snapshot_file), "--page", "Nowhere"])

        assert code == 1
        assert "Page not found" in capsys.readouterr().err
