"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def processor():
    """Input processor with the default grammar order."""
    from variantinput.processor import InputProcessor

    return InputProcessor()


@pytest.fixture
def sample_lines():
    """One input line per supported format."""
    return {
        "custom_genomic": "21 25891796 25891797 C/T . . .",
        "vcf": "21\t25891796\trs1042522\tC\tT\t.\tPASS\t.",
        "hgvs_genomic": "NC_000021.9:g.25891796C>T",
        "hgvs_coding": "NM_000546.6(TP53):c.215C>G",
        "hgvs_protein": "NP_000537.3:p.Arg72Pro",
        "custom_protein": "P22304 A479G",
        "gnomad": "21-25891796-C-T",
        "dbsnp": "rs1042522",
        "clinvar": "RCV000012345.6",
        "cosmic": "COSV53071390",
    }


@pytest.fixture
def sample_gold_standard():
    """Gold standard entries as they appear in a JSON file."""
    return [
        {"input": "21 25891796 C/T", "expected_format": "Custom-genomic", "expected_valid": True},
        {"input": "rs1042522", "expected_format": "dbSNP", "expected_valid": True},
        {"input": "NC_000021.9:g.25891796C>T", "expected_format": "HGVS-genomic"},
        {"input": "23 25891796 C/T", "expected_format": "Custom-genomic", "expected_valid": False},
    ]
