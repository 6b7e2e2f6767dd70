"""Input classification and batch processing.

ARCHITECTURE:
    raw line → prechecks in priority order → first match's parser → UserInput

Key Design:
- Level 1: cheap shape prechecks decide which grammar owns a line
- Level 2: that grammar's full parse extracts and validates the fields
- A line is never dropped once classified: malformed input becomes an
  invalid record carrying ERROR messages
- Pure and stateless: the same line always yields an identical record
"""

import logging
from collections import Counter
from typing import Iterable

from variantinput.constants import TYPE_LABELS
from variantinput.models.variant import InputFormat, InputType, UserInput
from variantinput.parsers import (
    HGVS,
    VCF,
    ClinVarID,
    CosmicID,
    DbsnpID,
    GenomicParser,
    Gnomad,
    Grammar,
    HGVSc,
    HGVSg,
    HGVSp,
    ProteinParser,
)
from variantinput.parsers.common import is_or_are, pluralise

logger = logging.getLogger(__name__)

COMMENT_PREFIX = "#"

# Grammar for each specific format
GRAMMARS: dict[InputFormat, type[Grammar]] = {
    InputFormat.DBSNP: DbsnpID,
    InputFormat.CLINVAR: ClinVarID,
    InputFormat.COSMIC: CosmicID,
    InputFormat.HGVS_GENOMIC: HGVSg,
    InputFormat.HGVS_CODING: HGVSc,
    InputFormat.HGVS_PROTEIN: HGVSp,
    InputFormat.GNOMAD: Gnomad,
    InputFormat.CUSTOM_PROTEIN: ProteinParser,
    InputFormat.VCF: VCF,
    InputFormat.CUSTOM_GENOMIC: GenomicParser,
}

# Precheck order. IDs are single-word inputs and must be tried before anything
# positional; HGVS sub-grammars are chosen inside HGVS once the general
# REFSEQ:DESCRIPTION shape matched; strict VCF wins over custom genomic.
DISPATCH_ORDER: list[type[Grammar]] = [
    DbsnpID,
    ClinVarID,
    CosmicID,
    HGVS,
    Gnomad,
    ProteinParser,
    VCF,
    GenomicParser,
]


class InputProcessor:
    """Classifies and parses variant input lines."""

    def __init__(self, grammars: list[type[Grammar]] | None = None) -> None:
        """Initialize the processor.

        Args:
            grammars: Precheck order to use. Defaults to DISPATCH_ORDER.
        """
        self.grammars = grammars if grammars is not None else DISPATCH_ORDER

    def parse_one(self, input_str: str | None) -> UserInput | None:
        """Parse one input line.

        The line is trimmed before classification. Comment lines are expected
        to be filtered before this call.

        Args:
            input_str: Input line

        Returns:
            The parsed record, or None for None/empty input
        """
        if input_str is None or not input_str.strip():
            return None
        input_str = input_str.strip()

        for grammar in self.grammars:
            if grammar.matches(input_str):
                return grammar.parse(input_str)

        # Unrecognized input is assumed to be genomic
        return GenomicParser.invalid_input(input_str)

    def parse_as(self, input_str: str, input_format: InputFormat) -> UserInput:
        """Parse a line with the grammar of a given format, skipping classification."""
        return GRAMMARS[input_format].parse(input_str)

    def parse(self, inputs: Iterable[str]) -> list[UserInput]:
        """Parse a batch of input lines, keeping input order.

        Lines are trimmed; blank lines and lines starting with "#" are skipped.
        """
        user_inputs = []
        for line in inputs:
            line = line.strip()
            if not line or line.startswith(COMMENT_PREFIX):
                continue
            user_inputs.append(self.parse_one(line))

        logger.info(f"Parsed {len(user_inputs)} input{pluralise(len(user_inputs))}")
        return user_inputs

    def summary(self, user_inputs: list[UserInput]) -> str:
        """Human-readable summary of a parsed batch.

        Valid inputs are tallied per type; every invalid input is listed with
        its errors.

        Example:
            Processed 3 inputs (1 genomic, 1 ID)
            1 input is not valid
            Invalid input (23 123 A/G): [invalid chromosome, ...]
        """
        counts = Counter(user_input.type for user_input in user_inputs if user_input.is_valid)

        invalid_inputs = []
        for user_input in user_inputs:
            if not user_input.is_valid:
                invalid_msg = f"Invalid input ({user_input.input_str}): [{', '.join(user_input.errors)}]"
                invalid_inputs.append(invalid_msg)
                logger.warning(invalid_msg)

        total = len(user_inputs)
        input_summary = f"Processed {total} input{pluralise(total)}"

        input_types = [
            f"{counts[input_type]} {TYPE_LABELS[input_type.value]}"
            for input_type in InputType
            if counts[input_type] > 0
        ]
        if input_types:
            input_summary += f" ({', '.join(input_types)})"

        lines = [input_summary]
        if invalid_inputs:
            n_invalid = len(invalid_inputs)
            lines.append(f"{n_invalid} input{pluralise(n_invalid)} {is_or_are(n_invalid)} not valid")
            lines.extend(invalid_inputs)

        return "\n".join(lines)
