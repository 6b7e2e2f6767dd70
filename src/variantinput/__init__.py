"""Classification and parsing of free-text variant inputs."""

from variantinput.models.variant import (
    CodingInput,
    GenomicInput,
    IDInput,
    InputFormat,
    InputType,
    ProteinInput,
    UserInput,
)
from variantinput.processor import InputProcessor

__version__ = "0.1.0"

__all__ = [
    "InputProcessor",
    "UserInput",
    "InputType",
    "InputFormat",
    "GenomicInput",
    "CodingInput",
    "ProteinInput",
    "IDInput",
]
