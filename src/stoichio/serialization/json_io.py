"""JSON adapters for elements and substances."""

from __future__ import annotations

import json
from typing import IO, Any, Optional, Union

from stoichio.elements import Element, Elements
from stoichio.serialization.records import (
    element_from_record,
    element_to_record,
    substance_from_record,
    substance_to_record,
)
from stoichio.substances import Substance, Substances

Source = Union[str, IO[str]]


def _load(source: Source) -> Any:
    if isinstance(source, str):
        return json.loads(source)
    return json.load(source)


def _json_dumps(payload: Any) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


def load_element(source: Source) -> Element:
    return element_from_record(_load(source))


def load_elements(source: Source) -> Elements:
    return Elements(element_from_record(record) for record in _load(source))


def load_substance(source: Source, elements: Optional[Elements] = None) -> Substance:
    return substance_from_record(_load(source), elements)


def load_substances(source: Source, elements: Optional[Elements] = None) -> Substances:
    return Substances(substance_from_record(record, elements) for record in _load(source))


def dump_element(element: Element) -> str:
    return _json_dumps(element_to_record(element))


def dump_elements(elements: Elements) -> str:
    return _json_dumps([element_to_record(element) for element in elements])


def dump_substance(substance: Substance) -> str:
    return _json_dumps(substance_to_record(substance))


def dump_substances(substances: Substances) -> str:
    return _json_dumps([substance_to_record(substance) for substance in substances])
