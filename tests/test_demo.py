"""
Tests for the web-app demo runner, its console rendering and its CLI.
"""

import json

import pytest
import yaml

import demo_web_app
from monoutils.config import DemoConfig
from monoutils.demo import DemoReport, format_report, run_demo
from monoutils.errors import InvalidArgumentError


class TestRunDemo:
    """Test results computed from the default inputs."""

    def test_sum(self):
        report = run_demo()
        assert report.sum_args == [1, 10]
        assert report.sum_result == 11

    def test_capitalized(self):
        report = run_demo()
        assert report.capitalized[0] == ("john doe", "John doe")
        assert [out for _, out in report.capitalized] == [
            "John doe", "Jane smith", "Bob johnson", "Alice brown",
        ]

    def test_kebab_cased(self):
        report = run_demo()
        assert [out for _, out in report.kebab_cased] == [
            "john-doe", "jane-smith", "bob-johnson", "alice-brown",
        ]

    def test_chunks(self):
        report = run_demo()
        assert report.chunk_size == 2
        assert report.chunks == [["john doe", "jane smith"], ["bob johnson", "alice brown"]]

    def test_unique(self):
        report = run_demo()
        assert report.original_numbers == [1, 2, 2, 3, 4, 4, 5]
        assert report.unique_numbers == [1, 2, 3, 4, 5]

    def test_custom_config(self):
        config = DemoConfig(names=["ada lovelace"], numbers=[3, 3], sum_args=[], chunk_size=5)
        report = run_demo(config)
        assert report.sum_result == 0
        assert report.chunks == [["ada lovelace"]]
        assert report.unique_numbers == [3]

    def test_bad_chunk_size_propagates(self):
        with pytest.raises(InvalidArgumentError):
            run_demo(DemoConfig(chunk_size=0))


class TestFormatReport:
    """Test console rendering."""

    def test_sections_in_order(self):
        text = format_report(run_demo())
        headings = [
            "=== Web App Demo ===",
            "Sum 11",
            "Capitalized names:",
            "Kebab case names:",
            "Chunked names (size 2):",
            "Unique numbers:",
            "=== Demo Complete ===",
        ]
        positions = [text.index(h) for h in headings]
        assert positions == sorted(positions)

    def test_lines(self):
        lines = format_report(run_demo()).splitlines()
        assert "john doe -> John doe" in lines
        assert "bob johnson -> bob-johnson" in lines
        assert "Chunk 1: ['john doe', 'jane smith']" in lines
        assert "Chunk 2: ['bob johnson', 'alice brown']" in lines
        assert "Original: [1, 2, 2, 3, 4, 4, 5]" in lines
        assert "Unique: [1, 2, 3, 4, 5]" in lines

    def test_empty_report(self):
        text = format_report(DemoReport())
        assert text.startswith("=== Web App Demo ===")
        assert "Chunk 1" not in text


class TestCli:
    """Test the demo_web_app.py entry point."""

    def test_default_run(self, capsys):
        assert demo_web_app.main([]) == 0
        out = capsys.readouterr().out
        assert "Sum 11" in out
        assert "alice brown -> alice-brown" in out

    def test_config_and_json_export(self, tmp_path, capsys):
        config_path = tmp_path / "demo.yaml"
        config_path.write_text("names: [grace hopper]\nsum_args: [2, 2]\n")
        export_path = tmp_path / "report.json"

        assert demo_web_app.main(["--config", str(config_path), "--export", str(export_path)]) == 0
        assert "grace hopper -> Grace hopper" in capsys.readouterr().out

        data = json.loads(export_path.read_text())
        assert data["sum"]["result"] == 4
        assert data["kebab_cased"] == [{"input": "grace hopper", "output": "grace-hopper"}]

    def test_yaml_export(self, tmp_path):
        export_path = tmp_path / "report.yaml"
        assert demo_web_app.main(["--export", str(export_path)]) == 0
        data = yaml.safe_load(export_path.read_text())
        assert data["unique"]["result"] == [1, 2, 3, 4, 5]

    def test_config_error_exit_code(self, tmp_path, capsys):
        assert demo_web_app.main(["--config", str(tmp_path / "missing.yaml")]) == 1
        assert "Config file not found" in capsys.readouterr().err

    def test_invalid_chunk_size_exit_code(self, tmp_path, capsys):
        config_path = tmp_path / "demo.yaml"
        config_path.write_text("chunk_size: 0\n")
        assert demo_web_app.main(["--config", str(config_path)]) == 1
        assert "chunk size must be positive" in capsys.readouterr().err

    def test_non_utf8_config_exit_code(self, tmp_path, capsys):
        config_path = tmp_path / "demo.yaml"
        config_path.write_bytes(b"names: [\xff\xfe]\n")
        assert demo_web_app.main(["--config", str(config_path)]) == 1
        assert "not valid UTF-8" in capsys.readouterr().err

    def test_export_to_missing_directory(self, tmp_path, capsys):
        export_path = tmp_path / "no-such-dir" / "report.json"
        assert demo_web_app.main(["--export", str(export_path)]) == 1
        captured = capsys.readouterr()
        assert "Sum 11" in captured.out
        assert "cannot write" in captured.err
        assert not export_path.exists()

    def test_export_is_utf8(self, tmp_path):
        config_path = tmp_path / "demo.yaml"
        config_path.write_text("names: [zoë café]\n", encoding="utf-8")
        export_path = tmp_path / "report.yaml"
        assert demo_web_app.main(["--config", str(config_path), "--export", str(export_path)]) == 0
        data = yaml.safe_load(export_path.read_text(encoding="utf-8"))
        assert data["capitalized"] == [{"input": "zoë café", "output": "Zoë café"}]
