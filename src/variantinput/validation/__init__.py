"""Classification benchmarking."""

from variantinput.validation.validator import Validator

__all__ = ["Validator"]
