"""Tests for shared parsing helpers."""

import pytest

from variantinput.constants import MT_CHROMOSOME, NA
from variantinput.parsers.common import (
    convert_chromosome,
    is_allele,
    is_or_are,
    is_position,
    is_ref_alt_pair,
    pluralise,
    split_tokens,
)


class TestConvertChromosome:
    """Tests for chromosome normalization."""

    @pytest.mark.parametrize("chromosome", [str(n) for n in range(1, 23)])
    def test_autosomes_pass_through(self, chromosome):
        assert convert_chromosome(chromosome) == chromosome

    @pytest.mark.parametrize("chromosome", ["x", "X", " x", "x ", " X "])
    def test_x_chromosome(self, chromosome):
        assert convert_chromosome(chromosome) == "X"

    @pytest.mark.parametrize("chromosome", ["y", "Y", " y", "Y ", " Y "])
    def test_y_chromosome(self, chromosome):
        assert convert_chromosome(chromosome) == "Y"

    @pytest.mark.parametrize(
        "chromosome",
        ["chrM", "CHRM", "mitochondria", " mitoCHondria", "mitochondrion", "MITOchondrion ", "MT ", "mtDNA", "mit"],
    )
    def test_mitochondrial_synonyms(self, chromosome):
        assert convert_chromosome(chromosome) == MT_CHROMOSOME

    @pytest.mark.parametrize("chromosome", ["23", "24", "a", "b", " ", "", "01", "chr", "1.5"])
    def test_invalid_chromosomes(self, chromosome):
        assert convert_chromosome(chromosome) == NA

    def test_none_chromosome(self):
        assert convert_chromosome(None) == NA

    @pytest.mark.parametrize("chromosome,expected", [("chr21", "21"), ("chrX", "X"), ("CHRy", "Y"), ("chrMT", "MT")])
    def test_chr_prefix_accepted(self, chromosome, expected):
        assert convert_chromosome(chromosome) == expected


class TestAlleles:
    """Tests for allele and REF/ALT pair checks."""

    @pytest.mark.parametrize("allele", ["A", "C", "G", "T", "a", "c", " g", "t "])
    def test_valid_alleles(self, allele):
        assert is_allele(allele) is True

    @pytest.mark.parametrize("allele", ["B", "D", "H", "K", "z", "x", " e", "m ", "AC", "N"])
    def test_invalid_alleles(self, allele):
        assert is_allele(allele) is False

    @pytest.mark.parametrize("allele", [None, ""])
    def test_empty_alleles(self, allele):
        assert is_allele(allele) is False

    @pytest.mark.parametrize("pair", ["A/C", "C/G", "G/T", "T/A", " a/g ", "c/t", " g/a", "t/t "])
    def test_valid_pairs(self, pair):
        assert is_ref_alt_pair(pair) is True

    @pytest.mark.parametrize("pair", ["A", "AC", "ACG", "K/B", "a / c", "s\\d", " e$d", "m a", "N/A", "A/", "/C"])
    def test_invalid_pairs(self, pair):
        assert is_ref_alt_pair(pair) is False

    @pytest.mark.parametrize("pair", [None, ""])
    def test_empty_pairs(self, pair):
        assert is_ref_alt_pair(pair) is False


class TestHelpers:
    """Tests for small tokenizing and wording helpers."""

    def test_is_position(self):
        assert is_position("25891796")
        assert is_position(" 1 ")
        assert not is_position("0")
        assert not is_position("-5")
        assert not is_position("12a")
        assert not is_position(None)

    def test_split_tokens(self):
        assert split_tokens("21\t25891796  C/T") == ["21", "25891796", "C/T"]
        assert split_tokens("chr21:25891796,C,T") == ["chr21", "25891796", "C", "T"]
        assert split_tokens("chr21:25891796 c/t") == ["chr21", "25891796", "c/t"]
        assert split_tokens("   ") == []

    def test_split_tokens_keeps_allele_lists(self):
        """Commas after the first field belong to the field, e.g. multi-allelic ALT."""
        assert split_tokens("21 25891796 . C T,G") == ["21", "25891796", ".", "C", "T,G"]

    def test_pluralise(self):
        assert pluralise(1) == ""
        assert pluralise(0) == "s"
        assert pluralise(2) == "s"

    def test_is_or_are(self):
        assert is_or_are(1) == "is"
        assert is_or_are(3) == "are"
