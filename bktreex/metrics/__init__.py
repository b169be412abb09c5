"""Reference distance functions for BK-trees."""

from .hamming import (
    HAMMING_VALUE_TYPES,
    hamming_bits,
    hamming_distance,
    hamming_text,
    validate_hamming_operand,
)
from .levenshtein import (
    LEVENSHTEIN_VALUE_TYPES,
    levenshtein_distance,
    validate_levenshtein_operand,
)

__all__ = [
    "HAMMING_VALUE_TYPES",
    "LEVENSHTEIN_VALUE_TYPES",
    "hamming_bits",
    "hamming_distance",
    "hamming_text",
    "levenshtein_distance",
    "validate_hamming_operand",
    "validate_levenshtein_operand",
]
