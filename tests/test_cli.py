"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from variantinput.cli import app
from variantinput.utils.logging_config import reset_logger

runner = CliRunner()


@pytest.fixture(autouse=True)
def fresh_logger():
    reset_logger()
    yield
    reset_logger()


class TestParseCommand:
    """Tests for the parse command."""

    def test_parse_valid(self):
        result = runner.invoke(app, ["parse", "NC_000021.9:g.25891796C>T"])

        assert result.exit_code == 0
        assert "genomic / HGVS-genomic: valid" in result.stdout
        assert '"chromosome": "21"' in result.stdout

    def test_parse_invalid(self):
        result = runner.invoke(app, ["parse", "23 25891796 C/T"])

        assert result.exit_code == 0
        assert "invalid (invalid chromosome|invalid position" in result.stdout

    def test_parse_with_format(self):
        result = runner.invoke(app, ["parse", "21-25891796-C-T", "--format", "gnomAD"])

        assert result.exit_code == 0
        assert "genomic / gnomAD: valid" in result.stdout

    def test_parse_untrimmed(self):
        result = runner.invoke(app, ["parse", " rs1042522"])

        assert result.exit_code == 0
        assert "id / dbSNP: valid" in result.stdout

    def test_parse_empty(self):
        result = runner.invoke(app, ["parse", "   "])

        assert result.exit_code == 1
        assert "Empty input" in result.stdout


class TestBatchCommand:
    """Tests for the batch command."""

    def test_batch(self, tmp_path):
        input_file = tmp_path / "inputs.txt"
        input_file.write_text("# header\n21 25891796 C/T\n\nrs1042522\n23 25891796 C/T\n")
        output_file = tmp_path / "results.json"

        result = runner.invoke(app, ["batch", str(input_file), "--output", str(output_file), "--no-log"])

        assert result.exit_code == 0
        assert "Processed 3 inputs (1 genomic, 1 ID)" in result.stdout
        assert "1 input is not valid" in result.stdout

        with open(output_file) as f:
            saved = json.load(f)
        assert [record["format"] for record in saved] == ["Custom-genomic", "dbSNP", "Custom-genomic"]
        assert saved[2]["valid"] is False

    def test_batch_writes_diagnostics(self, tmp_path):
        input_file = tmp_path / "inputs.txt"
        input_file.write_text("foo\n")
        log_dir = tmp_path / "logs"

        result = runner.invoke(app, ["batch", str(input_file), "--log-dir", str(log_dir)])

        assert result.exit_code == 0
        log_files = list(log_dir.glob("parse_diagnostics_*.jsonl"))
        assert len(log_files) == 1

    def test_batch_log_dir_from_environment(self, tmp_path, monkeypatch):
        input_file = tmp_path / "inputs.txt"
        input_file.write_text("rs1\n")
        log_dir = tmp_path / "env_logs"
        monkeypatch.setenv("VARIANTINPUT_LOG_DIR", str(log_dir))

        result = runner.invoke(app, ["batch", str(input_file)])

        assert result.exit_code == 0
        assert log_dir.exists()

    def test_batch_missing_file(self, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.txt"), "--no-log"])

        assert result.exit_code == 1
        assert "Input file not found" in result.stdout


class TestValidateCommand:
    """Tests for the validate command."""

    def test_validate(self, tmp_path, sample_gold_standard):
        gold_standard_path = tmp_path / "gold_standard.json"
        with open(gold_standard_path, "w") as f:
            json.dump(sample_gold_standard, f)
        output_file = tmp_path / "results.json"

        result = runner.invoke(app, ["validate", str(gold_standard_path), "--output", str(output_file)])

        assert result.exit_code == 0
        assert "Loaded 4 gold standard entries" in result.stdout
        assert "Overall Accuracy: 100.00%" in result.stdout
        assert output_file.exists()

    def test_validate_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])

        assert result.exit_code == 1


def test_version():
    from variantinput import __version__

    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert f"variantinput version {__version__}" in result.stdout
