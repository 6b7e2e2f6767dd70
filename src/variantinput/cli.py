"""Command-line interface for variantinput.

ARCHITECTURE:
    CLI Commands → InputProcessor/Validator → JSON Output

Three workflows: parse (single line), batch (text file), validate (benchmarking)

Key Design:
- Typer framework for auto-help and type validation
- Flexible I/O: stdout or JSON file output
- Diagnostics JSONL logging of invalid inputs, directory configurable via
  VARIANTINPUT_LOG_DIR (a .env file is honoured)
"""

import json
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from variantinput.models.variant import InputFormat
from variantinput.processor import InputProcessor
from variantinput.utils.logging_config import get_logger
from variantinput.validation.validator import Validator

load_dotenv()

app = typer.Typer(
    name="variantinput",
    help="Classify and parse variant inputs (VCF, HGVS, dbSNP/ClinVar/COSMIC IDs, gnomAD, protein)",
    add_completion=False,
)


@app.command()
def parse(
    line: str = typer.Argument(..., help="Variant input (e.g., 'NC_000021.9:g.25891796C>T')"),
    input_format: Optional[InputFormat] = typer.Option(
        None, "--format", "-f", help="Parse with this format instead of classifying"
    ),
) -> None:
    """Parse a single variant input."""
    processor = InputProcessor()
    if input_format:
        user_input = processor.parse_as(line, input_format)
    else:
        user_input = processor.parse_one(line)

    if user_input is None:
        print("Error: Empty input")
        raise typer.Exit(1)

    status = "valid" if user_input.is_valid else f"invalid ({user_input.invalid_reason})"
    print(f"\n{user_input.type.value} / {user_input.format.value}: {status}")
    print(json.dumps(user_input.to_dict(), indent=2))


@app.command()
def batch(
    input_file: Path = typer.Argument(..., help="Text file with one variant input per line"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output JSON file"),
    log: bool = typer.Option(True, "--log/--no-log", help="Enable diagnostics file logging"),
    log_dir: Path = typer.Option(
        Path("logs"), "--log-dir", envvar="VARIANTINPUT_LOG_DIR", help="Diagnostics log directory"
    ),
) -> None:
    """Parse every line of a file and summarize the batch."""

    if not input_file.exists():
        print(f"Error: Input file not found: {input_file}")
        raise typer.Exit(1)

    with open(input_file, "r") as f:
        lines = f.read().splitlines()

    processor = InputProcessor()
    user_inputs = processor.parse(lines)

    get_logger(log_dir=log_dir, enable_file_logging=log).log_batch(str(input_file), user_inputs)

    if output:
        output_data = [user_input.to_dict() for user_input in user_inputs]
        with open(output, "w") as f:
            json.dump(output_data, f, indent=2)
        print(f"Results saved to {output}")

    print(processor.summary(user_inputs))


@app.command()
def validate(
    gold_standard: Path = typer.Argument(..., help="Gold standard JSON file"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output file"),
) -> None:
    """Benchmark classification against a gold standard."""

    if not gold_standard.exists():
        print(f"Error: Gold standard file not found: {gold_standard}")
        raise typer.Exit(1)

    validator = Validator()
    entries = validator.load_gold_standard(gold_standard)
    print(f"\nLoaded {len(entries)} gold standard entries")

    metrics = validator.validate_dataset(entries)
    print(metrics.to_report())

    if output:
        validator.save_results(metrics, validator.last_results, output)
        print(f"\nDetailed results saved to {output}")


@app.command()
def version() -> None:
    """Show version information."""
    from variantinput import __version__
    print(f"variantinput version {__version__}")


if __name__ == "__main__":
    app()
