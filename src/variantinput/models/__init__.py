"""Data models for variantinput."""

from variantinput.models.message import Message, MessageType, ParseError
from variantinput.models.validation import (
    FormatMetrics,
    GoldStandardEntry,
    ValidationMetrics,
    ValidationResult,
)
from variantinput.models.variant import (
    CodingInput,
    GenomicInput,
    IDInput,
    InputFormat,
    InputType,
    ProteinInput,
    UserInput,
)

__all__ = [
    "Message",
    "MessageType",
    "ParseError",
    "UserInput",
    "InputType",
    "InputFormat",
    "GenomicInput",
    "CodingInput",
    "ProteinInput",
    "IDInput",
    "GoldStandardEntry",
    "ValidationResult",
    "FormatMetrics",
    "ValidationMetrics",
]
