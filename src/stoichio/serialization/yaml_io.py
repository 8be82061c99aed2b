"""YAML adapters for elements and substances."""

from __future__ import annotations

from typing import IO, Optional, Union

import yaml

from stoichio.elements import Element, Elements
from stoichio.serialization.records import (
    element_from_record,
    element_to_record,
    substance_from_record,
    substance_to_record,
)
from stoichio.substances import Substance, Substances

Source = Union[str, IO[str]]


class _Loader(yaml.SafeLoader):
    """Safe loader that keeps ``NO``, ``No`` and ``ON`` as strings.

    YAML 1.1 reads those as booleans, which turns formulas such as nitric
    oxide into ``False``.
    """


_Loader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != "tag:yaml.org,2002:bool"]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _load(source: Source):
    return yaml.load(source, Loader=_Loader)


def _dump(payload) -> str:
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


def load_element(source: Source) -> Element:
    return element_from_record(_load(source))


def load_elements(source: Source) -> Elements:
    return Elements(element_from_record(record) for record in _load(source) or ())


def load_substance(source: Source, elements: Optional[Elements] = None) -> Substance:
    return substance_from_record(_load(source), elements)


def load_substances(source: Source, elements: Optional[Elements] = None) -> Substances:
    return Substances(substance_from_record(record, elements) for record in _load(source) or ())


def dump_element(element: Element) -> str:
    return _dump(element_to_record(element))


def dump_elements(elements: Elements) -> str:
    return _dump([element_to_record(element) for element in elements])


def dump_substance(substance: Substance) -> str:
    return _dump(substance_to_record(substance))


def dump_substances(substances: Substances) -> str:
    return _dump([substance_to_record(substance) for substance in substances])
