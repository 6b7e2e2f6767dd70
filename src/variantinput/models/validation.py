"""Classification benchmark models.

CONCEPTUAL OVERVIEW:
===================

The classifier is checked against a curated gold standard of input lines whose
notation is known. Each entry states the format the line should be routed to
and whether it should parse cleanly.

1. EXACT ROUTING
   - An entry is correct when both the format and the validity match
   - Format is the fine-grained grammar, so a VCF line parsed as custom
     genomic counts as an error even though both are genomic

2. PER-FORMAT CONFUSION TRACKING
   - True positives, false positives and false negatives per format
   - Precision: of the lines routed to a format, how many belong there?
   - Recall: of the lines of a format, how many were routed there?

3. FAILURE ANALYSIS
   - Misrouted and wrongly (in)valid lines are kept with their errors
"""

from pydantic import BaseModel, Field

from variantinput.models.variant import InputFormat, UserInput


class GoldStandardEntry(BaseModel):
    """Gold standard entry: an input line with its expected classification."""

    input: str
    expected_format: InputFormat
    expected_valid: bool = True
    notes: str | None = None


class ValidationResult(BaseModel):
    """Result of classifying a single gold standard entry."""

    input: str
    expected_format: InputFormat
    predicted_format: InputFormat
    expected_valid: bool
    predicted_valid: bool
    errors: list[str] = Field(default_factory=list)

    @property
    def format_correct(self) -> bool:
        return self.expected_format == self.predicted_format

    @property
    def is_correct(self) -> bool:
        return self.format_correct and self.expected_valid == self.predicted_valid

    @classmethod
    def from_user_input(cls, entry: GoldStandardEntry, user_input: UserInput) -> "ValidationResult":
        return cls(
            input=entry.input,
            expected_format=entry.expected_format,
            predicted_format=user_input.format,
            expected_valid=entry.expected_valid,
            predicted_valid=user_input.is_valid,
            errors=user_input.errors,
        )


class FormatMetrics(BaseModel):
    """Routing metrics for a single format."""

    format: InputFormat
    true_positives: int = 0
    false_positives: int = 0
    false_negatives: int = 0
    precision: float = 0.0
    recall: float = 0.0
    f1_score: float = 0.0

    def calculate(self) -> None:
        """Calculate precision, recall, and F1 score."""
        if self.true_positives + self.false_positives > 0:
            self.precision = self.true_positives / (self.true_positives + self.false_positives)
        else:
            self.precision = 0.0

        if self.true_positives + self.false_negatives > 0:
            self.recall = self.true_positives / (self.true_positives + self.false_negatives)
        else:
            self.recall = 0.0

        if self.precision + self.recall > 0:
            self.f1_score = 2 * (self.precision * self.recall) / (self.precision + self.recall)
        else:
            self.f1_score = 0.0


class ValidationMetrics(BaseModel):
    """Overall benchmark metrics."""

    total_cases: int = 0
    correct_predictions: int = 0
    accuracy: float = 0.0
    format_metrics: dict[str, FormatMetrics] = Field(default_factory=dict)
    failure_analysis: list[dict[str, str]] = Field(default_factory=list)

    def add_result(self, result: ValidationResult) -> None:
        """Add a validation result and update the confusion counts."""
        self.total_cases += 1

        if result.is_correct:
            self.correct_predictions += 1

        for input_format in (result.expected_format, result.predicted_format):
            if input_format.value not in self.format_metrics:
                self.format_metrics[input_format.value] = FormatMetrics(format=input_format)

        # Routing is scored on format alone; validity mismatches only show up as failures
        if result.format_correct:
            self.format_metrics[result.expected_format.value].true_positives += 1
        else:
            self.format_metrics[result.expected_format.value].false_negatives += 1
            self.format_metrics[result.predicted_format.value].false_positives += 1

        if not result.is_correct:
            self.failure_analysis.append(
                {
                    "input": result.input,
                    "expected": f"{result.expected_format.value} ({_validity(result.expected_valid)})",
                    "predicted": f"{result.predicted_format.value} ({_validity(result.predicted_valid)})",
                    "errors": "|".join(result.errors),
                }
            )

    def calculate(self, results: list[ValidationResult]) -> None:
        """Calculate overall metrics from results."""
        if not results:
            return

        for result in results:
            self.add_result(result)

        if self.total_cases > 0:
            self.accuracy = self.correct_predictions / self.total_cases

        for metrics in self.format_metrics.values():
            metrics.calculate()

    def to_report(self) -> str:
        """Generate a formatted benchmark report."""
        lines = [
            "=" * 80,
            "CLASSIFICATION REPORT",
            "=" * 80,
            f"\nTotal Cases: {self.total_cases}",
            f"Correct Predictions: {self.correct_predictions}",
            f"Overall Accuracy: {self.accuracy:.2%}",
            f"\n{'-' * 80}",
            "PER-FORMAT METRICS",
            f"{'-' * 80}",
        ]

        for input_format in InputFormat:
            if input_format.value in self.format_metrics:
                metrics = self.format_metrics[input_format.value]
                lines.append(f"\n{input_format.value}:")
                lines.append(f"  Precision: {metrics.precision:.2%}")
                lines.append(f"  Recall: {metrics.recall:.2%}")
                lines.append(f"  F1 Score: {metrics.f1_score:.2%}")
                lines.append(
                    f"  TP: {metrics.true_positives}, "
                    f"FP: {metrics.false_positives}, "
                    f"FN: {metrics.false_negatives}"
                )

        if self.failure_analysis:
            lines.append(f"\n{'-' * 80}")
            lines.append(f"FAILURE ANALYSIS ({len(self.failure_analysis)} errors)")
            lines.append(f"{'-' * 80}")
            for idx, failure in enumerate(self.failure_analysis[:10], 1):  # Show top 10
                lines.append(f"\n{idx}. {failure['input']}")
                lines.append(f"   Expected: {failure['expected']} | Predicted: {failure['predicted']}")
                if failure['errors']:
                    lines.append(f"   Errors: {failure['errors']}")

            if len(self.failure_analysis) > 10:
                lines.append(f"\n... and {len(self.failure_analysis) - 10} more errors")

        lines.append(f"\n{'=' * 80}")
        return "\n".join(lines)


def _validity(valid: bool) -> str:
    return "valid" if valid else "invalid"
