"""Centralized constants and lookup tables for variantinput.

This module consolidates the fixed tables used by the grammars:
- Chromosome names and their accepted synonyms
- RefSeq chromosome accessions
- Identifier prefixes (dbSNP, ClinVar, COSMIC)
- Amino acid codes
- Summary labels

Centralizing these keeps every grammar reading from the same tables.
"""

# =============================================================================
# SENTINELS
# =============================================================================

# "Not applicable" value for chromosome and allele fields that could not be parsed
NA = "NA"

# Trailer used when a positional input is rebuilt from its fields
INPUT_END_STRING = "..."


# =============================================================================
# CHROMOSOMES
# =============================================================================

AUTOSOMES: frozenset[str] = frozenset(str(n) for n in range(1, 23))

# Canonical symbol for the mitochondrial chromosome
MT_CHROMOSOME = "MT"

# Lower-cased synonyms normalized to MT_CHROMOSOME
MT_SYNONYMS: frozenset[str] = frozenset({
    "chrm",
    "mitochondria",
    "mitochondrion",
    "mt",
    "mtdna",
    "mit",
})

CHROMOSOME_PREFIX = "chr"

# GRCh RefSeq accessions (any version) -> chromosome
REFSEQ_CHROMOSOMES: dict[str, str] = {
    **{f"NC_{n:06d}": str(n) for n in range(1, 23)},
    "NC_000023": "X",
    "NC_000024": "Y",
    "NC_012920": MT_CHROMOSOME,
}


# =============================================================================
# ALLELES
# =============================================================================

BASES: frozenset[str] = frozenset("ACGT")


# =============================================================================
# IDENTIFIERS
# =============================================================================

DBSNP_PREFIX = "rs"
DBSNP_PREFIX_LEN = 2

CLINVAR_PREFIXES: tuple[str, ...] = ("RCV", "VCV")
CLINVAR_PREFIX_LEN = 3

COSMIC_PREFIXES: tuple[str, ...] = ("COSV", "COSM", "COSN")
COSMIC_PREFIX_LEN = 4


# =============================================================================
# AMINO ACID CODES
# =============================================================================
# Standard amino acid code conversions (3-letter to 1-letter and vice versa)

AMINO_ACID_3TO1: dict[str, str] = {
    'ALA': 'A', 'CYS': 'C', 'ASP': 'D', 'GLU': 'E', 'PHE': 'F',
    'GLY': 'G', 'HIS': 'H', 'ILE': 'I', 'LYS': 'K', 'LEU': 'L',
    'MET': 'M', 'ASN': 'N', 'PRO': 'P', 'GLN': 'Q', 'ARG': 'R',
    'SER': 'S', 'THR': 'T', 'VAL': 'V', 'TRP': 'W', 'TYR': 'Y',
    'TER': '*',  # Stop codon
    'SEC': 'U',  # Selenocysteine (rare)
    'PYL': 'O',  # Pyrrolysine (rare)
}

AMINO_ACID_1TO3: dict[str, str] = {v: k for k, v in AMINO_ACID_3TO1.items()}

# One-letter codes accepted as amino acids, stop included
AMINO_ACIDS_1: frozenset[str] = frozenset(AMINO_ACID_1TO3)


# =============================================================================
# SUMMARY LABELS
# =============================================================================
# Order and wording of the per-type tally in batch summaries

TYPE_LABELS: dict[str, str] = {
    "genomic": "genomic",
    "coding": "cDNA",
    "protein": "protein",
    "id": "ID",
}
