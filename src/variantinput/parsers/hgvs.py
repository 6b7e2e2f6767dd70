"""HGVS grammars.

All HGVS inputs share the general shape ``REFSEQ:DESCRIPTION``::

                 _:_
                /   \\
          REF_SEQ   VAR_DESC

The general shape is checked first; the description prefix (g., c., p.) then
selects the genomic, coding or protein sub-grammar. A line with the general
shape that none of them recognizes becomes an invalid record of the family
suggested by its reference sequence.
"""

import re

from variantinput.constants import NA, REFSEQ_CHROMOSOMES
from variantinput.models.message import Message, ParseError
from variantinput.models.variant import (
    CodingInput,
    GenomicInput,
    InputFormat,
    ProteinInput,
    UserInput,
)
from variantinput.parsers.common import Grammar, convert_chromosome, is_allele
from variantinput.parsers.protein import UNIPROT_ACCESSION_PATTERN, parse_protein_change

GENERAL_PATTERN = re.compile(r'^[^\s:]+:[^\s:]+$')

REFSEQ_CHROMOSOME_PATTERN = re.compile(r'^(NC_\d{6})(?:\.\d+)?$')
TRANSCRIPT_PATTERN = re.compile(
    r'^(?P<acc>[NX][MR]_\d+(?:\.\d+)?|ENST\d+(?:\.\d+)?)(?:\((?P<gene>[A-Za-z0-9\-]+)\))?$'
)
PROTEIN_ACCESSION_PATTERN = re.compile(r'^(?:[NX]P_\d+(?:\.\d+)?|ENSP\d+(?:\.\d+)?)$')

GENOMIC_POSITION_PATTERN = re.compile(r'^g\.(?P<start>\d+)(?:_(?P<end>\d+))?')
CODING_POSITION_PATTERN = re.compile(r'^c\.(?P<pos>[-*]?\d+)(?P<offset>[+-]\d+)?')

SUBSTITUTION_PATTERN = re.compile(r'^(?P<ref>[A-Za-z]+)>(?P<alt>[A-Za-z]+)$')
INDEL_PATTERNS = [
    ('delins', re.compile(r'^delins(?P<bases>[ACGT]+)$', re.IGNORECASE)),
    ('del', re.compile(r'^del(?P<bases>[ACGT]*)$', re.IGNORECASE)),
    ('ins', re.compile(r'^ins(?P<bases>[ACGT]+)$', re.IGNORECASE)),
    ('dup', re.compile(r'^dup(?P<bases>[ACGT]*)$', re.IGNORECASE)),
]

# Empty side of an insertion or deletion
EMPTY_ALLELE = "-"
IDENTICAL_ALLELES_WARNING = "reference and alternate alleles are identical"


def split_hgvs(line: str) -> tuple[str, str]:
    ref_seq, _, description = line.strip().partition(':')
    return ref_seq, description


def substitution(edit: str) -> tuple[str, str, list[Message]]:
    """Read a single-base ``REF>ALT`` substitution, checking each side."""
    messages = []
    match = SUBSTITUTION_PATTERN.match(edit)
    ref = match.group('ref') if match else None
    alt = match.group('alt') if match else None

    if not is_allele(ref):
        messages.append(Message.error(ParseError.INVALID_REFERENCE))
    if not is_allele(alt):
        messages.append(Message.error(ParseError.INVALID_ALTERNATE))
    if is_allele(ref) and is_allele(alt) and ref.upper() == alt.upper():
        messages.append(Message.warning(IDENTICAL_ALLELES_WARNING))

    return (
        ref.upper() if is_allele(ref) else NA,
        alt.upper() if is_allele(alt) else NA,
        messages,
    )


class HGVS(Grammar):
    """General ``REFSEQ:DESCRIPTION`` shape."""

    @classmethod
    def matches(cls, line: str) -> bool:
        return bool(GENERAL_PATTERN.match(line.strip()))

    @classmethod
    def parse(cls, line: str) -> UserInput:
        for grammar in (HGVSg, HGVSc, HGVSp):
            if grammar.matches(line):
                return grammar.parse(line)
        return cls.invalid(line)

    @staticmethod
    def invalid(line: str) -> UserInput:
        """Record for an HGVS-shaped line with an unrecognized description.

        The family is guessed from the reference sequence and defaults to
        genomic.
        """
        ref_seq, _ = split_hgvs(line)
        messages = (Message.error(ParseError.INVALID_HGVS_DESCRIPTION),)

        transcript = TRANSCRIPT_PATTERN.match(ref_seq)
        if transcript:
            return CodingInput(
                input_str=line,
                accession=transcript.group('acc'),
                gene=transcript.group('gene'),
                messages=messages,
            )
        if PROTEIN_ACCESSION_PATTERN.match(ref_seq) or UNIPROT_ACCESSION_PATTERN.match(ref_seq):
            return ProteinInput(
                input_str=line,
                format=InputFormat.HGVS_PROTEIN,
                accession=ref_seq,
                messages=messages,
            )
        return GenomicInput(
            input_str=line,
            format=InputFormat.HGVS_GENOMIC,
            chromosome=HGVSg.chromosome(ref_seq),
            messages=messages,
        )


class HGVSg(Grammar):
    """HGVS genomic, e.g. NC_000021.9:g.25891796C>T."""

    PREFIX = "g."

    @classmethod
    def matches(cls, line: str) -> bool:
        return split_hgvs(line)[1].startswith(cls.PREFIX)

    @staticmethod
    def chromosome(ref_seq: str) -> str:
        """Chromosome for a RefSeq chromosome accession or a plain chromosome name."""
        match = REFSEQ_CHROMOSOME_PATTERN.match(ref_seq)
        if match:
            return REFSEQ_CHROMOSOMES.get(match.group(1), NA)
        return convert_chromosome(ref_seq)

    @classmethod
    def parse(cls, line: str) -> GenomicInput:
        ref_seq, description = split_hgvs(line)
        messages = []

        chromosome = cls.chromosome(ref_seq)
        if chromosome == NA:
            messages.append(Message.error(ParseError.INVALID_CHROMOSOME))

        position = end = None
        match = GENOMIC_POSITION_PATTERN.match(description)
        if match:
            position = int(match.group('start')) or None
            end = int(match.group('end')) if match.group('end') else None
            if end is not None and position is not None and end <= position:
                position = None
            edit = description[match.end():]
        else:
            edit = description[len(cls.PREFIX):]
        if position is None:
            messages.append(Message.error(ParseError.INVALID_POSITION))

        edit_kind, ref, alt, edit_messages = cls._edit(edit, end)
        messages.extend(edit_messages)

        return GenomicInput(
            input_str=line,
            format=InputFormat.HGVS_GENOMIC,
            chromosome=chromosome,
            position=position,
            end=end,
            ref=ref,
            alt=alt,
            edit=edit_kind,
            messages=tuple(messages),
        )

    @staticmethod
    def _edit(edit: str, end: int | None) -> tuple[str | None, str, str, list[Message]]:
        """Decode the edit part of the description.

        Returns:
            Tuple of (edit kind, ref, alt, messages)
        """
        if end is None and SUBSTITUTION_PATTERN.match(edit):
            ref, alt, messages = substitution(edit)
            return 'sub', ref, alt, messages

        for kind, pattern in INDEL_PATTERNS:
            match = pattern.match(edit)
            if not match:
                continue
            bases = match.group('bases').upper()
            if kind == 'del':
                return kind, bases or NA, EMPTY_ALLELE, []
            if kind == 'ins':
                return kind, EMPTY_ALLELE, bases, []
            if kind == 'dup':
                return kind, bases or NA, bases * 2 if bases else NA, []
            return kind, NA, bases, []

        return None, NA, NA, [
            Message.error(ParseError.INVALID_REFERENCE),
            Message.error(ParseError.INVALID_ALTERNATE),
        ]


class HGVSc(Grammar):
    """HGVS coding, e.g. NM_000546.6(TP53):c.215C>G or ENST00000269305.9:c.375+5G>A."""

    PREFIX = "c."

    @classmethod
    def matches(cls, line: str) -> bool:
        return split_hgvs(line)[1].startswith(cls.PREFIX)

    @classmethod
    def parse(cls, line: str) -> CodingInput:
        ref_seq, description = split_hgvs(line)
        messages = []

        accession, gene = ref_seq, None
        transcript = TRANSCRIPT_PATTERN.match(ref_seq)
        if transcript:
            accession, gene = transcript.group('acc'), transcript.group('gene')
        else:
            messages.append(Message.error(ParseError.INVALID_ACCESSION))

        position = offset = None
        match = CODING_POSITION_PATTERN.match(description)
        if match:
            position = match.group('pos')
            offset = int(match.group('offset')) if match.group('offset') else None
            edit = description[match.end():]
        else:
            messages.append(Message.error(ParseError.INVALID_POSITION))
            edit = description[len(cls.PREFIX):]

        ref, alt, edit_messages = substitution(edit)
        messages.extend(edit_messages)

        return CodingInput(
            input_str=line,
            accession=accession,
            gene=gene,
            position=position,
            offset=offset,
            ref=ref,
            alt=alt,
            messages=tuple(messages),
        )


class HGVSp(Grammar):
    """HGVS protein, e.g. NP_004324.2:p.Val600Glu, P15056:p.V600E or NP_000537.3:p.(Arg175=)."""

    PREFIX = "p."
    CHANGE_PATTERN = re.compile(r'^p\.\(?(?P<ref>[A-Za-z*]*)(?P<pos>\d*)(?P<alt>[A-Za-z*=]*)\)?$')

    @classmethod
    def matches(cls, line: str) -> bool:
        return split_hgvs(line)[1].startswith(cls.PREFIX)

    @classmethod
    def parse(cls, line: str) -> ProteinInput:
        ref_seq, description = split_hgvs(line)
        messages = []

        if not (PROTEIN_ACCESSION_PATTERN.match(ref_seq) or UNIPROT_ACCESSION_PATTERN.match(ref_seq)):
            messages.append(Message.error(ParseError.INVALID_ACCESSION))

        match = cls.CHANGE_PATTERN.match(description)
        ref = position = alt = None
        if match:
            ref, position, alt = match.group('ref'), match.group('pos'), match.group('alt')
        ref_aa, aa_position, alt_aa, change_messages = parse_protein_change(ref, position, alt)
        messages.extend(change_messages)

        return ProteinInput(
            input_str=line,
            format=InputFormat.HGVS_PROTEIN,
            accession=ref_seq,
            position=aa_position,
            ref_aa=ref_aa,
            alt_aa=alt_aa,
            messages=tuple(messages),
        )
