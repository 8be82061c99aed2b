"""Whitespace-separated text form of elements and formulas."""

from __future__ import annotations

from stoichio.elements import Element
from stoichio.formula import Formula


def element_from_text(text: str) -> Element:
    """Read an element from ``"symbol name number weight electronegativity"``.

    >>> element_from_text("H Hydrogen 1 0.00100794 2.2").name
    'Hydrogen'
    """
    fields = text.split()
    if len(fields) != 5:
        raise ValueError(f"Expected 5 fields describing an element, got {len(fields)}: {text!r}")
    symbol, name, number, weight, electronegativity = fields
    return Element(symbol, name, int(number), float(weight), float(electronegativity))


def element_to_text(element: Element) -> str:
    return (
        f"{element.symbol} {element.name} {element.atomic_number} "
        f"{element.atomic_weight!r} {element.electronegativity!r}"
    )


def formula_from_text(text: str) -> Formula:
    """Parse the first whitespace-separated token of ``text`` as a formula."""
    tokens = text.split()
    return Formula.parse(tokens[0] if tokens else "")
