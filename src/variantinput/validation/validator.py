"""Validator for benchmarking input classification against a gold standard.

ARCHITECTURE:
    Gold Standard (JSON) → Validator → InputProcessor → ValidationMetrics

Key Design:
- Flexible input: list or dict-wrapped JSON
- Malformed entries are skipped with a warning, never abort the run
- Per-format confusion matrix + overall statistics
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from variantinput.models.validation import GoldStandardEntry, ValidationMetrics, ValidationResult
from variantinput.processor import InputProcessor

logger = logging.getLogger(__name__)


class Validator:
    """Validator for benchmarking classification against a gold standard dataset."""

    def __init__(self, processor: InputProcessor | None = None) -> None:
        """Initialize the validator.

        Args:
            processor: Input processor to benchmark. Defaults to a new InputProcessor.
        """
        self.processor = processor or InputProcessor()
        self.last_results: list[ValidationResult] = []

    def load_gold_standard(self, path: str | Path) -> list[GoldStandardEntry]:
        """Load gold standard dataset from JSON file.

        Args:
            path: Path to gold standard JSON file

        Returns:
            List of gold standard entries

        Raises:
            FileNotFoundError: If file does not exist
            ValueError: If JSON is invalid
        """
        path = Path(path)

        if not path.exists():
            raise FileNotFoundError(f"Gold standard file not found: {path}")

        logger.info(f"Loading gold standard from {path}")

        try:
            with open(path, "r") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in gold standard file: {str(e)}")

        # Handle both list and dict with "entries" key
        if isinstance(data, dict) and "entries" in data:
            entries_data = data["entries"]
        elif isinstance(data, list):
            entries_data = data
        else:
            raise ValueError("Invalid gold standard format")

        entries = []
        skipped = 0
        for idx, entry_data in enumerate(entries_data):
            try:
                entries.append(GoldStandardEntry(**entry_data))
            except (TypeError, ValidationError) as e:
                skipped += 1
                logger.warning(f"Skipping entry {idx}: {e}")

        if skipped:
            logger.warning(f"Skipped {skipped} invalid entries out of {len(entries_data)}")
        logger.info(f"Loaded {len(entries)} valid gold standard entries")

        return entries

    def validate_single(self, entry: GoldStandardEntry) -> ValidationResult:
        """Classify a single gold standard entry and compare with the expectation."""
        user_input = self.processor.parse_one(entry.input)
        if user_input is None:
            raise ValueError(f"Gold standard input is blank: {entry.input!r}")
        return ValidationResult.from_user_input(entry, user_input)

    def validate_dataset(self, gold_standard: list[GoldStandardEntry]) -> ValidationMetrics:
        """Validate all entries in a gold standard dataset.

        Args:
            gold_standard: List of gold standard entries

        Returns:
            Overall validation metrics
        """
        logger.info(f"Starting validation of {len(gold_standard)} entries")

        results = []
        for idx, entry in enumerate(gold_standard):
            try:
                results.append(self.validate_single(entry))
            except ValueError as e:
                logger.error(f"Validation failed for entry {idx}: {e}")

        self.last_results = results

        metrics = ValidationMetrics()
        metrics.calculate(results)

        logger.info(
            f"Validation complete: {metrics.correct_predictions}/{metrics.total_cases} "
            f"correct ({metrics.accuracy:.1%})"
        )

        return metrics

    def validate_from_file(self, gold_standard_path: str | Path) -> ValidationMetrics:
        """Load gold standard from file and validate."""
        gold_standard = self.load_gold_standard(gold_standard_path)
        return self.validate_dataset(gold_standard)

    def save_results(
        self,
        metrics: ValidationMetrics,
        results: list[ValidationResult],
        output_path: str | Path,
    ) -> None:
        """Save validation results to JSON file.

        Args:
            metrics: Validation metrics
            results: List of validation results
            output_path: Path to save results
        """
        output_path = Path(output_path)

        output_data = {
            "metrics": metrics.model_dump(mode="json"),
            "results": [result.model_dump(mode="json") for result in results],
        }

        with open(output_path, "w") as f:
            json.dump(output_data, f, indent=2)

        logger.info(f"Saved validation results to {output_path}")
