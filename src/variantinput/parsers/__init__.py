"""Input grammars, one recognizer/parser pair per supported notation."""

from variantinput.parsers.common import (
    Grammar,
    convert_chromosome,
    is_allele,
    is_position,
    is_ref_alt_pair,
)
from variantinput.parsers.genomic import VCF, GenomicParser, Gnomad
from variantinput.parsers.hgvs import HGVS, HGVSc, HGVSg, HGVSp
from variantinput.parsers.identifiers import ClinVarID, CosmicID, DbsnpID
from variantinput.parsers.protein import ProteinParser

__all__ = [
    "Grammar",
    "convert_chromosome",
    "is_allele",
    "is_position",
    "is_ref_alt_pair",
    "DbsnpID",
    "ClinVarID",
    "CosmicID",
    "HGVS",
    "HGVSg",
    "HGVSc",
    "HGVSp",
    "Gnomad",
    "ProteinParser",
    "VCF",
    "GenomicParser",
]
