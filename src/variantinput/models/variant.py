r"""Variant input models.

Every parsed line becomes one of these records, valid or not::

                         UserInput
          ______________/  |   |  \______________
         |                 |   |                 |
    GenomicInput    CodingInput  ProteinInput   IDInput
    chr, pos, ref,  accession,   accession,     id
    alt             pos, ref,    pos, ref_aa,
                    alt          alt_aa
         |                 \   |                /
    Custom, VCF,        derived_genomic_inputs
    HGVSg, gnomAD

Records are frozen: grammars collect messages while reading a line and pass
them to the constructor. Coding, protein and ID records carry genomic anchors
only once a downstream mapper attaches them via ``with_derived_genomic_inputs``.
"""

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, ConfigDict, Field

from variantinput.constants import (
    CLINVAR_PREFIX_LEN,
    COSMIC_PREFIX_LEN,
    DBSNP_PREFIX_LEN,
    INPUT_END_STRING,
    NA,
)
from variantinput.models.message import Message, MessageType


class InputType(str, Enum):
    """Coarse notation family."""

    GENOMIC = "genomic"
    CODING = "coding"
    PROTEIN = "protein"
    ID = "id"


class InputFormat(str, Enum):
    """Specific grammar that produced a record."""

    CUSTOM_GENOMIC = "Custom-genomic"
    VCF = "VCF"
    HGVS_GENOMIC = "HGVS-genomic"
    HGVS_CODING = "HGVS-coding"
    HGVS_PROTEIN = "HGVS-protein"
    CUSTOM_PROTEIN = "Custom-protein"
    DBSNP = "dbSNP"
    CLINVAR = "ClinVar"
    COSMIC = "COSMIC"
    GNOMAD = "gnomAD"


class UserInput(BaseModel):
    """Base record for a single parsed input line."""

    model_config = ConfigDict(frozen=True)

    input_str: str = Field("", description="Original input line, verbatim")
    type: InputType
    format: InputFormat
    messages: tuple[Message, ...] = Field(default_factory=tuple, description="Diagnostics in insertion order")

    @property
    def is_valid(self) -> bool:
        return not any(m.type == MessageType.ERROR for m in self.messages)

    @property
    def errors(self) -> list[str]:
        return self._texts(MessageType.ERROR)

    @property
    def warnings(self) -> list[str]:
        return self._texts(MessageType.WARN)

    @property
    def infos(self) -> list[str]:
        return self._texts(MessageType.INFO)

    @property
    def invalid_reason(self) -> str:
        return "|".join(self.errors)

    def get_errors(self) -> list[str]:
        """Ordered ERROR texts."""
        return self.errors

    def genomic_inputs(self) -> list["GenomicInput"]:
        """Genomic anchors for this record, possibly empty."""
        return []

    def derive_genomic_coordinates(self) -> list[tuple[str, int]]:
        """Ordered (chromosome, position) pairs usable for coordinate mapping.

        Anchors with an unknown chromosome or position are skipped. A record
        with a valid chromosome and position still yields its coordinate when
        only its alleles are invalid.
        """
        coordinates = []
        for genomic_input in self.genomic_inputs():
            if genomic_input.chromosome != NA and genomic_input.position is not None:
                coordinates.append((genomic_input.chromosome, genomic_input.position))
        return coordinates

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        data = self.model_dump(mode="json")
        data["valid"] = self.is_valid
        data["errors"] = self.errors
        return data

    def _texts(self, message_type: MessageType) -> list[str]:
        return [m.text for m in self.messages if m.type == message_type]


class GenomicInput(UserInput):
    """Chromosome/position based input (custom, VCF, HGVS genomic, gnomAD)."""

    type: InputType = InputType.GENOMIC
    format: InputFormat = InputFormat.CUSTOM_GENOMIC
    chromosome: str = Field(NA, description="Normalized chromosome or NA")
    position: int | None = Field(None, description="1-based start position")
    end: int | None = Field(None, description="End position of a ranged HGVS edit")
    id: str | None = Field(None, description="VCF ID column")
    ref: str = Field(NA, description="Reference allele")
    alt: str = Field(NA, description="Alternate allele")
    edit: str | None = Field(None, description="HGVS edit kind (sub, del, ins, dup, delins)")

    @property
    def formatted_input_string(self) -> str:
        if self.input_str:
            return self.input_str
        return f"{self.chromosome} {self.position} {self.ref}/{self.alt} {INPUT_END_STRING}"

    @property
    def group_by(self) -> str:
        return f"{self.chromosome}-{self.position}"

    def genomic_inputs(self) -> list["GenomicInput"]:
        return [self]


class _DerivedInput(UserInput):
    """Input whose genomic anchors are supplied by a downstream mapper."""

    derived_genomic_inputs: tuple[GenomicInput, ...] = Field(default_factory=tuple)

    def genomic_inputs(self) -> list[GenomicInput]:
        return list(self.derived_genomic_inputs)

    def with_derived_genomic_inputs(self, genomic_inputs: Iterable[GenomicInput]):
        """Return a copy carrying the given genomic anchors."""
        return self.model_copy(update={"derived_genomic_inputs": tuple(genomic_inputs)})


class CodingInput(_DerivedInput):
    """HGVS coding (c.) input."""

    type: InputType = InputType.CODING
    format: InputFormat = InputFormat.HGVS_CODING
    accession: str = Field(NA, description="Transcript accession")
    gene: str | None = Field(None, description="Gene symbol given in parentheses")
    position: str | None = Field(None, description="Coding position descriptor (123, -14, *37)")
    offset: int | None = Field(None, description="Intron offset")
    ref: str = NA
    alt: str = NA


class ProteinInput(_DerivedInput):
    """Protein change on an accession (custom or HGVS p.)."""

    type: InputType = InputType.PROTEIN
    format: InputFormat = InputFormat.CUSTOM_PROTEIN
    accession: str = Field(NA, description="Protein accession")
    position: int | None = Field(None, description="Amino acid position")
    ref_aa: str = Field(NA, description="Reference amino acid, one-letter")
    alt_aa: str = Field(NA, description="Alternate amino acid, one-letter")

    @property
    def is_synonymous(self) -> bool:
        return self.is_valid and self.ref_aa == self.alt_aa


ID_PREFIX_LENGTHS: dict[InputFormat, int] = {
    InputFormat.DBSNP: DBSNP_PREFIX_LEN,
    InputFormat.CLINVAR: CLINVAR_PREFIX_LEN,
    InputFormat.COSMIC: COSMIC_PREFIX_LEN,
}


class IDInput(_DerivedInput):
    """Database identifier (dbSNP, ClinVar, COSMIC)."""

    type: InputType = InputType.ID
    format: InputFormat = InputFormat.DBSNP
    id: str = Field(..., description="Identifier as given")

    @property
    def id_prefix(self) -> str:
        prefix_len = ID_PREFIX_LENGTHS.get(self.format, 0)
        if self.id and len(self.id) > prefix_len:
            return self.id[:prefix_len]
        return ""
