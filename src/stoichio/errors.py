"""Exception types raised by stoichio."""

from __future__ import annotations


class StoichioError(Exception):
    """Base class for all stoichio errors."""


class FormulaError(StoichioError, ValueError):
    """A chemical formula could not be parsed."""

    def __init__(self, formula: str, reason: str):
        super().__init__(f"Invalid chemical formula `{formula}`: {reason}")
        self.formula = formula
        self.reason = reason


class ElementNotFoundError(StoichioError, KeyError):
    """No element with the requested symbol exists in the database."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class SubstanceNotFoundError(StoichioError, KeyError):
    """No substance matches the requested name or formula."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""
