"""Positional and compact genomic grammars.

- gnomAD compact IDs: ``21-25891796-C-T``
- Strict VCF records: ``CHROM POS ID REF ALT [QUAL FILTER INFO ...]``
- Custom genomic inputs: ``chr pos [...] ref/alt`` or ``chr pos [...] ref alt``,
  whitespace or punctuation separated, extra fields ignored
"""

from variantinput.constants import NA
from variantinput.models.message import Message, ParseError
from variantinput.models.variant import GenomicInput, InputFormat
from variantinput.parsers.common import (
    Grammar,
    convert_chromosome,
    is_allele,
    is_position,
    split_tokens,
)
from variantinput.parsers.hgvs import IDENTICAL_ALLELES_WARNING

GNOMAD_SEPARATOR = "-"
GNOMAD_FIELDS = 4
VCF_MIN_FIELDS = 5
VCF_MISSING_ID = "."
PAIR_SEPARATOR = "/"


def build_genomic_input(
    line: str,
    input_format: InputFormat,
    chromosome: str | None,
    position: str | None,
    ref: str | None,
    alt: str | None,
    variant_id: str | None = None,
) -> GenomicInput:
    """Validate raw genomic components and build the record.

    Each invalid component is replaced by its sentinel and reported with its
    own ERROR message, in chromosome, position, reference, alternate order.
    """
    messages = []

    chromosome = convert_chromosome(chromosome)
    if chromosome == NA:
        messages.append(Message.error(ParseError.INVALID_CHROMOSOME))

    start = int(position) if is_position(position) else None
    if start is None:
        messages.append(Message.error(ParseError.INVALID_POSITION))

    ref = ref.strip().upper() if is_allele(ref) else NA
    if ref == NA:
        messages.append(Message.error(ParseError.INVALID_REFERENCE))

    alt = alt.strip().upper() if is_allele(alt) else NA
    if alt == NA:
        messages.append(Message.error(ParseError.INVALID_ALTERNATE))

    if ref != NA and ref == alt:
        messages.append(Message.warning(IDENTICAL_ALLELES_WARNING))

    return GenomicInput(
        input_str=line,
        format=input_format,
        chromosome=chromosome,
        position=start,
        id=variant_id,
        ref=ref,
        alt=alt,
        messages=tuple(messages),
    )


class Gnomad(Grammar):
    """gnomAD variant ID: four dash-separated fields, e.g. 21-25891796-C-T."""

    @classmethod
    def matches(cls, line: str) -> bool:
        value = line.strip()
        return bool(value) and len(value.split()) == 1 and len(value.split(GNOMAD_SEPARATOR)) == GNOMAD_FIELDS

    @classmethod
    def parse(cls, line: str) -> GenomicInput:
        fields = line.strip().split(GNOMAD_SEPARATOR)
        fields += [None] * (GNOMAD_FIELDS - len(fields))
        chromosome, position, ref, alt = fields[:GNOMAD_FIELDS]
        return build_genomic_input(line, InputFormat.GNOMAD, chromosome, position, ref, alt)


class VCF(Grammar):
    """Strict VCF data line: CHROM POS ID REF ALT, extra columns allowed."""

    @staticmethod
    def is_valid(line: str) -> bool:
        fields = line.split()
        if len(fields) < VCF_MIN_FIELDS:
            return False
        chromosome, position, _, ref, alt = fields[:VCF_MIN_FIELDS]
        return (
            convert_chromosome(chromosome) != NA
            and is_position(position)
            and is_allele(ref)
            and is_allele(alt)
        )

    @classmethod
    def matches(cls, line: str) -> bool:
        return GenomicParser.starts_with_chromosome(line) and cls.is_valid(line)

    @classmethod
    def parse(cls, line: str) -> GenomicInput:
        fields = line.split()
        fields += [None] * (VCF_MIN_FIELDS - len(fields))
        chromosome, position, variant_id, ref, alt = fields[:VCF_MIN_FIELDS]
        if variant_id == VCF_MISSING_ID:
            variant_id = None
        return build_genomic_input(line, InputFormat.VCF, chromosome, position, ref, alt, variant_id)


class GenomicParser(Grammar):
    """Custom genomic input: chromosome and position followed by the alleles.

    Alleles are read at fixed positions after the position: either one
    ``REF/ALT`` field or a REF field followed by an ALT field. One optional
    column (end position, ID or ".") may come first. Trailing fields are
    ignored.
    """

    @staticmethod
    def starts_with_chromosome(line: str) -> bool:
        tokens = split_tokens(line)
        return bool(tokens) and convert_chromosome(tokens[0]) != NA

    @classmethod
    def matches(cls, line: str) -> bool:
        return cls.starts_with_chromosome(line)

    @classmethod
    def parse(cls, line: str) -> GenomicInput:
        tokens = split_tokens(line)
        chromosome = tokens[0] if tokens else None
        position = tokens[1] if len(tokens) > 1 else None
        rest = tokens[2:]
        if rest and cls.is_extra_column(rest[0]):
            rest = rest[1:]

        ref = alt = None
        if rest and PAIR_SEPARATOR in rest[0]:
            ref, _, alt = rest[0].partition(PAIR_SEPARATOR)
        elif rest:
            ref = rest[0]
            alt = rest[1] if len(rest) > 1 else None

        return build_genomic_input(line, InputFormat.CUSTOM_GENOMIC, chromosome, position, ref, alt)

    @staticmethod
    def is_extra_column(token: str) -> bool:
        """End position, variant ID or "." between the position and the alleles."""
        return token == VCF_MISSING_ID or any(char.isdigit() for char in token)

    @staticmethod
    def invalid_input(line: str) -> GenomicInput:
        """Fallback record for a line no grammar recognized.

        Unrecognized input is assumed to be genomic, the most common input
        kind, so it is reported as an invalid genomic input.
        """
        return GenomicInput(
            input_str=line,
            format=InputFormat.CUSTOM_GENOMIC,
            messages=(
                Message.error(ParseError.INVALID_CHROMOSOME),
                Message.error(ParseError.INVALID_POSITION),
                Message.error(ParseError.INVALID_REFERENCE),
                Message.error(ParseError.INVALID_ALTERNATE),
            ),
        )
