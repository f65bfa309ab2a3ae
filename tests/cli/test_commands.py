"""
Tests for CLI app structure and sub-commands.
"""

from __future__ import annotations

import json

from typer.testing import CliRunner

import mesostic.cli.serve as serve_module
from mesostic.cli.app import app

runner = CliRunner()


class TestRootApp:
    def test_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "compose" in result.output
        assert "serve" in result.output

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.strip() == "mesostic 0.1.0"

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert result.exit_code == 0
        assert "Usage" in result.output
        assert "compose" in result.output


class TestCompose:
    def test_from_stdin(self):
        result = runner.invoke(app, ["compose", "PA"], input="parallel\n")
        assert result.exit_code == 0
        assert result.output == "PArallel\n"

    def test_dash_reads_stdin(self):
        result = runner.invoke(app, ["compose", "PA", "-"], input="parallel\n")
        assert result.exit_code == 0
        assert result.output == "PArallel\n"

    def test_undecodable_bytes_are_replaced(self, tmp_path):
        source = tmp_path / "latin1.txt"
        source.write_bytes(b"par\xffallel\n")

        result = runner.invoke(app, ["compose", "PA", str(source)])

        assert result.exit_code == 0
        assert result.output == "PAr\ufffdallel\n"

    def test_from_file(self, tmp_path):
        source = tmp_path / "poem.txt"
        source.write_text("x cab\nand\nton", encoding="utf-8")

        result = runner.invoke(app, ["compose", "CAT", str(source)])

        assert result.exit_code == 0
        assert result.output == "x CAb\n  Ton\n"

    def test_no_align(self, tmp_path):
        source = tmp_path / "poem.txt"
        source.write_text("x cab\nand\nton", encoding="utf-8")

        result = runner.invoke(app, ["compose", "CAT", str(source), "--no-align"])

        assert result.exit_code == 0
        assert result.output == "x CAb\nTon\n"

    def test_json(self):
        result = runner.invoke(app, ["compose", "PA", "--json"], input="parallel")

        assert result.exit_code == 0
        body = json.loads(result.output)
        assert body["spine"] == "PA"
        assert [m["column"] for m in body["matches"]] == [0, 1]

    def test_failure_exits_nonzero(self):
        result = runner.invoke(app, ["compose", "z"], input="abc\n")
        assert result.exit_code == 1
        assert "SPINE_EXHAUSTS_SOURCE" in result.output

    def test_failure_json(self):
        result = runner.invoke(app, ["compose", "z", "--json"], input="abc\n")
        assert result.exit_code == 1
        assert json.loads(result.output)["code"] == "SPINE_EXHAUSTS_SOURCE"

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["compose", "PA", str(tmp_path / "nope.txt")])
        assert result.exit_code == 2


class TestServe:
    def test_uses_settings_defaults(self, monkeypatch):
        calls = []
        monkeypatch.setattr(serve_module.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))

        result = runner.invoke(app, ["serve"])

        assert result.exit_code == 0
        [(args, kwargs)] = calls
        assert args == ("mesostic.api:create_app",)
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9999

    def test_port_override(self, monkeypatch):
        calls = []
        monkeypatch.setattr(serve_module.uvicorn, "run", lambda *a, **kw: calls.append((a, kw)))

        result = runner.invoke(app, ["serve", "--port", "8123", "--host", "127.0.0.1"])

        assert result.exit_code == 0
        assert calls[0][1]["port"] == 8123
        assert calls[0][1]["host"] == "127.0.0.1"
