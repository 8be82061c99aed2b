"""Serialization helpers for stoichio."""

from stoichio.serialization.files import (
    read_elements,
    read_substances,
    write_elements,
    write_substances,
)
from stoichio.serialization.text_io import element_from_text, element_to_text, formula_from_text

__all__ = [
    "element_from_text",
    "element_to_text",
    "formula_from_text",
    "read_elements",
    "read_substances",
    "write_elements",
    "write_substances",
]
