"""Custom protein input grammar.

Accepted shapes, always starting with a UniProt accession:

- ``P22304 A479G``
- ``P22304 Ala479Gly`` / ``P22304 p.A479G``
- ``P22304 479 A G``
- ``P22304 A 479 G``
"""

import re

from variantinput.constants import AMINO_ACID_3TO1, AMINO_ACIDS_1, NA
from variantinput.models.message import Message, ParseError
from variantinput.models.variant import InputFormat, ProteinInput
from variantinput.parsers.common import Grammar, is_position

UNIPROT_ACCESSION_PATTERN = re.compile(
    r'^(?:[OPQ][0-9][A-Z0-9]{3}[0-9]|[A-NR-Z][0-9](?:[A-Z][A-Z0-9]{2}[0-9]){1,2})(?:-\d+)?$'
)

# Lenient split of a compact change (V600E, Val600Glu, V600=); components are checked separately
PROTEIN_CHANGE_PATTERN = re.compile(r'^(?:p\.)?\(?(?P<ref>[A-Za-z*]*)(?P<pos>\d*)(?P<alt>[A-Za-z*=]*)\)?$')

SYNONYMOUS = "="
SYNONYMOUS_INFO = "synonymous variant"


def amino_acid_one_letter(code: str | None) -> str | None:
    """Convert a 1- or 3-letter amino acid code to its one-letter form.

    Examples:
        >>> amino_acid_one_letter("Val")
        'V'
        >>> amino_acid_one_letter("Ter")
        '*'
        >>> amino_acid_one_letter("Xyz") is None
        True
    """
    if not code:
        return None
    code = code.strip().upper()
    if len(code) == 1 and code in AMINO_ACIDS_1:
        return code
    return AMINO_ACID_3TO1.get(code)


def parse_protein_change(
    ref: str | None,
    position: str | None,
    alt: str | None,
) -> tuple[str, int | None, str, list[Message]]:
    """Validate the components of a protein change.

    Returns:
        Tuple of (ref_aa, position, alt_aa, messages). Invalid components are
        returned as NA / None with one ERROR message each.
    """
    messages = []

    ref_aa = amino_acid_one_letter(ref)
    if ref_aa is None:
        messages.append(Message.error(ParseError.INVALID_REFERENCE_AA))

    aa_position = int(position) if is_position(position) else None
    if aa_position is None:
        messages.append(Message.error(ParseError.INVALID_POSITION))

    if alt == SYNONYMOUS and ref_aa is not None:
        alt_aa = ref_aa
        messages.append(Message.info(SYNONYMOUS_INFO))
    else:
        alt_aa = amino_acid_one_letter(alt)
        if alt_aa is None:
            messages.append(Message.error(ParseError.INVALID_ALTERNATE_AA))

    return ref_aa or NA, aa_position, alt_aa or NA, messages


class ProteinParser(Grammar):
    """Accession followed by a protein change."""

    @staticmethod
    def starts_with_accession(line: str) -> bool:
        tokens = line.split(maxsplit=1)
        return bool(tokens) and bool(UNIPROT_ACCESSION_PATTERN.match(tokens[0]))

    @classmethod
    def matches(cls, line: str) -> bool:
        return cls.starts_with_accession(line)

    @classmethod
    def parse(cls, line: str) -> ProteinInput:
        tokens = line.split()
        accession = tokens[0] if tokens else NA
        change = tokens[1:]
        messages = []

        if not UNIPROT_ACCESSION_PATTERN.match(accession):
            messages.append(Message.error(ParseError.INVALID_ACCESSION))

        ref = position = alt = None
        if len(change) == 1:
            match = PROTEIN_CHANGE_PATTERN.match(change[0])
            if match:
                ref, position, alt = match.group('ref'), match.group('pos'), match.group('alt')
        elif len(change) == 3:
            if is_position(change[0]):
                position, ref, alt = change
            else:
                ref, position, alt = change

        ref_aa, aa_position, alt_aa, change_messages = parse_protein_change(ref, position, alt)
        messages.extend(change_messages)

        return ProteinInput(
            input_str=line,
            format=InputFormat.CUSTOM_PROTEIN,
            accession=accession,
            position=aa_position,
            ref_aa=ref_aa,
            alt_aa=alt_aa,
            messages=tuple(messages),
        )
