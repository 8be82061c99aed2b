"""Conversion between domain objects and plain mapping records.

Records use the keys of the element and substance data files::

    symbol: H
    name: Hydrogen
    atomicNumber: 1
    atomicWeight: 0.001007940
    electronegativity: 2.20
    tags: [group1]

    formula: CaCO3
    name: Calcite
    type: solid
    tags: [mineral]
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from stoichio.elements import Element, Elements
from stoichio.substances import Substance, SubstanceAttributes


def element_to_record(element: Element) -> Dict[str, Any]:
    return {
        "symbol": element.symbol,
        "name": element.name,
        "atomicNumber": element.atomic_number,
        "atomicWeight": element.atomic_weight,
        "electronegativity": element.electronegativity,
        "tags": list(element.tags),
    }


def element_from_record(record: Mapping[str, Any]) -> Element:
    if not isinstance(record, Mapping):
        raise ValueError(f"Expected a mapping describing an element, got {record!r}")
    return Element(
        symbol=str(record.get("symbol", "")),
        name=str(record.get("name", "")),
        atomic_number=int(record.get("atomicNumber", 0)),
        atomic_weight=float(record.get("atomicWeight", 0.0)),
        electronegativity=float(record.get("electronegativity", 0.0)),
        tags=tuple(str(tag) for tag in record.get("tags") or ()),
    )


def substance_to_record(substance: Substance) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "formula": substance.formula.label,
        "name": substance.name,
    }
    if substance.type:
        record["type"] = substance.type
    record["tags"] = list(substance.tags)
    return record


def substance_from_record(
    record: Mapping[str, Any], elements: Optional[Elements] = None
) -> Substance:
    if not isinstance(record, Mapping) or "formula" not in record:
        raise ValueError(f"Expected a mapping with a `formula` key, got {record!r}")
    attributes = SubstanceAttributes(
        formula=str(record["formula"]),
        name=str(record.get("name") or ""),
        type=str(record.get("type") or ""),
        tags=tuple(str(tag) for tag in record.get("tags") or ()),
    )
    return Substance(attributes, elements=elements)
