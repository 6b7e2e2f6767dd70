"""Tests for the custom protein grammar."""

import pytest

from variantinput.constants import NA
from variantinput.models.message import ParseError
from variantinput.models.variant import InputFormat, InputType
from variantinput.parsers.protein import ProteinParser, amino_acid_one_letter


class TestAminoAcids:
    """Tests for amino acid code conversion."""

    @pytest.mark.parametrize("code,expected", [
        ("V", "V"),
        ("v", "V"),
        ("Val", "V"),
        ("GLU", "E"),
        ("Ter", "*"),
        ("*", "*"),
    ])
    def test_valid_codes(self, code, expected):
        assert amino_acid_one_letter(code) == expected

    @pytest.mark.parametrize("code", ["Xyz", "B", "", None, "Va"])
    def test_invalid_codes(self, code):
        assert amino_acid_one_letter(code) is None


class TestProteinParser:
    """Tests for accession-based protein inputs."""

    @pytest.mark.parametrize("line", [
        "P22304 A479G",
        "P22304 Ala479Gly",
        "P22304 p.A479G",
        "P22304 479 A G",
        "P22304 A 479 G",
        "P22304 479 Ala Gly",
    ])
    def test_shapes(self, line):
        result = ProteinParser.parse(line)

        assert result.type == InputType.PROTEIN
        assert result.format == InputFormat.CUSTOM_PROTEIN
        assert result.accession == "P22304"
        assert result.position == 479
        assert result.ref_aa == "A"
        assert result.alt_aa == "G"
        assert result.is_valid

    def test_isoform_accession(self):
        result = ProteinParser.parse("P22304-2 A479G")

        assert result.accession == "P22304-2"
        assert result.is_valid

    def test_accession_only(self):
        result = ProteinParser.parse("P22304")

        assert result.errors == [
            ParseError.INVALID_REFERENCE_AA.value,
            ParseError.INVALID_POSITION.value,
            ParseError.INVALID_ALTERNATE_AA.value,
        ]
        assert result.position is None
        assert result.ref_aa == NA

    def test_invalid_alternate(self):
        result = ProteinParser.parse("P22304 A479Xyz")

        assert result.errors == [ParseError.INVALID_ALTERNATE_AA.value]

    def test_starts_with_accession(self):
        assert ProteinParser.starts_with_accession("P22304 A479G")
        assert ProteinParser.starts_with_accession("A0A024R161 K12E")
        assert not ProteinParser.starts_with_accession("21 25891796 C/T")
        assert not ProteinParser.starts_with_accession("X 100 A/G")
        assert not ProteinParser.starts_with_accession("")

    def test_no_derived_coordinates_until_mapped(self):
        assert ProteinParser.parse("P22304 A479G").derive_genomic_coordinates() == []
