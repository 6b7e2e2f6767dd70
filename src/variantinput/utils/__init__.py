"""Utility functions."""

from variantinput.utils.logging_config import (
    InputDiagnosticsLogger,
    get_logger,
    reset_logger,
)

__all__ = [
    'InputDiagnosticsLogger',
    'get_logger',
    'reset_logger',
]
