"""Diagnostic message models attached to parsed inputs."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class MessageType(str, Enum):
    """Severity of a diagnostic message."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"


class ParseError(str, Enum):
    """Fixed error texts reported by the grammars.

    Malformed content is reported as data, never raised. Each value is the
    exact text of the ERROR message added to the record.
    """

    INVALID_CHROMOSOME = "invalid chromosome"
    INVALID_POSITION = "invalid position"
    INVALID_REFERENCE = "invalid reference allele"
    INVALID_ALTERNATE = "invalid alternate allele"
    INVALID_HGVS_DESCRIPTION = "unrecognized HGVS description"
    INVALID_IDENTIFIER = "invalid identifier"
    INVALID_ACCESSION = "invalid accession"
    INVALID_REFERENCE_AA = "invalid reference amino acid"
    INVALID_ALTERNATE_AA = "invalid alternate amino acid"


class Message(BaseModel):
    """A single diagnostic entry."""

    model_config = ConfigDict(frozen=True)

    type: MessageType = Field(..., description="Message severity")
    text: str = Field(..., description="Human-readable message text")

    @classmethod
    def error(cls, text: str | ParseError) -> "Message":
        return cls(type=MessageType.ERROR, text=_text(text))

    @classmethod
    def warning(cls, text: str) -> "Message":
        return cls(type=MessageType.WARN, text=text)

    @classmethod
    def info(cls, text: str) -> "Message":
        return cls(type=MessageType.INFO, text=text)


def _text(text: str | ParseError) -> str:
    return text.value if isinstance(text, ParseError) else text
