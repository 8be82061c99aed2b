"""stoichio: chemical formulas, elements and substances."""

from stoichio.elements import Element, Elements, default_elements
from stoichio.errors import (
    ElementNotFoundError,
    FormulaError,
    StoichioError,
    SubstanceNotFoundError,
)
from stoichio.formula import Formula, equivalent, parse_charge, parse_formula
from stoichio.substances import Substance, SubstanceAttributes, Substances

__all__ = [
    "Element",
    "Elements",
    "default_elements",
    "ElementNotFoundError",
    "FormulaError",
    "StoichioError",
    "SubstanceNotFoundError",
    "Formula",
    "equivalent",
    "parse_charge",
    "parse_formula",
    "Substance",
    "SubstanceAttributes",
    "Substances",
]
