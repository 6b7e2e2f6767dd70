"""Database identifier grammars (dbSNP, ClinVar, COSMIC).

Identifiers are single-word inputs recognized by a fixed prefix. A line that
carries the prefix but not the full identifier shape still becomes an
``IDInput`` of that format, flagged with ``invalid identifier``.
"""

import re

from variantinput.constants import CLINVAR_PREFIXES, COSMIC_PREFIXES, DBSNP_PREFIX
from variantinput.models.message import Message, ParseError
from variantinput.models.variant import IDInput, InputFormat
from variantinput.parsers.common import Grammar


class IDGrammar(Grammar):
    """Prefix-recognized identifier."""

    FORMAT: InputFormat
    PREFIXES: tuple[str, ...] = ()
    PATTERN: re.Pattern

    @classmethod
    def matches(cls, line: str) -> bool:
        return line.startswith(cls.PREFIXES)

    @classmethod
    def parse(cls, line: str) -> IDInput:
        identifier = line.strip()
        messages = []
        if not cls.PATTERN.match(identifier):
            messages.append(Message.error(ParseError.INVALID_IDENTIFIER))
        return IDInput(
            input_str=line,
            format=cls.FORMAT,
            id=identifier,
            messages=tuple(messages),
        )


class DbsnpID(IDGrammar):
    """dbSNP reference SNP identifier, e.g. rs1042522."""

    FORMAT = InputFormat.DBSNP
    PREFIXES = (DBSNP_PREFIX,)
    PATTERN = re.compile(r'^rs\d+$')


class ClinVarID(IDGrammar):
    """ClinVar record or variation accession, e.g. RCV000012345.6, VCV000012345."""

    FORMAT = InputFormat.CLINVAR
    PREFIXES = CLINVAR_PREFIXES
    PATTERN = re.compile(r'^(?:RCV|VCV)\d+(?:\.\d+)?$')


class CosmicID(IDGrammar):
    """COSMIC genomic, legacy or non-coding mutation identifier, e.g. COSV53071390."""

    FORMAT = InputFormat.COSMIC
    PREFIXES = COSMIC_PREFIXES
    PATTERN = re.compile(r'^COS[VMN]\d+$')
