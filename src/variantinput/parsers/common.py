"""Shared helpers for the input grammars.

Every grammar exposes the same two operations:

- ``matches(line)``: a cheap shape test used only to route a line. It may
  accept lines that later fail to parse.
- ``parse(line)``: the full parse. It always returns a record of the grammar's
  format; malformed components become ERROR messages on that record.
"""

import re

from variantinput.constants import (
    AUTOSOMES,
    BASES,
    CHROMOSOME_PREFIX,
    MT_CHROMOSOME,
    MT_SYNONYMS,
    NA,
)
from variantinput.models.variant import UserInput

# Separators of compact positional inputs ("21:123,C,T") and of a leading "chr21:123" field
TOKEN_SEPARATOR_PATTERN = re.compile(r'[,;:]+')
POSITION_PATTERN = re.compile(r'^[1-9]\d*$')
REF_ALT_PAIR_PATTERN = re.compile(r'^([A-Z])/([A-Z])$', re.IGNORECASE)


class Grammar:
    """Recognizer and parser pair for one input notation."""

    @classmethod
    def matches(cls, line: str) -> bool:
        raise NotImplementedError

    @classmethod
    def parse(cls, line: str) -> UserInput:
        raise NotImplementedError


def convert_chromosome(chromosome: str | None) -> str:
    """Normalize a chromosome name.

    Args:
        chromosome: Raw chromosome token

    Returns:
        "1".."22", "X", "Y", "MT", or NA for anything else

    Examples:
        >>> convert_chromosome(" x ")
        'X'
        >>> convert_chromosome("mtDNA")
        'MT'
        >>> convert_chromosome("23")
        'NA'
    """
    if chromosome is None:
        return NA
    value = chromosome.strip()
    lowered = value.lower()

    if lowered in MT_SYNONYMS:
        return MT_CHROMOSOME

    if lowered.startswith(CHROMOSOME_PREFIX):
        value = value[len(CHROMOSOME_PREFIX):]
        lowered = value.lower()

    if value in AUTOSOMES:
        return value
    if lowered in MT_SYNONYMS:
        return MT_CHROMOSOME
    if lowered in ("x", "y"):
        return value.upper()
    return NA


def is_allele(allele: str | None) -> bool:
    """Check for a single base (A, C, G or T, any case)."""
    if allele is None:
        return False
    return allele.strip().upper() in BASES


def is_ref_alt_pair(value: str | None) -> bool:
    """Check for a ``REF/ALT`` pair of single bases, e.g. "C/T"."""
    if value is None:
        return False
    match = REF_ALT_PAIR_PATTERN.match(value.strip())
    return bool(match) and is_allele(match.group(1)) and is_allele(match.group(2))


def is_position(value: str | None) -> bool:
    """Check for a positive integer position."""
    return value is not None and bool(POSITION_PATTERN.match(value.strip()))


def split_tokens(line: str) -> list[str]:
    """Split a positional input into fields.

    Whitespace separates fields. A line without whitespace is split on
    punctuation instead, and so is a leading ``chr:pos`` field. Later fields
    keep their commas, so a multi-allelic ``T,G`` stays one field.

    Examples:
        >>> split_tokens("chr21:25891796 C/T")
        ['chr21', '25891796', 'C/T']
        >>> split_tokens("21 25891796 . C T,G")
        ['21', '25891796', '.', 'C', 'T,G']
    """
    fields = line.split()
    if not fields:
        return []
    head = [token for token in TOKEN_SEPARATOR_PATTERN.split(fields[0]) if token]
    return head + fields[1:]


def pluralise(count: int) -> str:
    return "" if count == 1 else "s"


def is_or_are(count: int) -> str:
    return "is" if count == 1 else "are"
