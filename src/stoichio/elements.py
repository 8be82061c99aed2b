"""Chemical elements and element databases."""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from stoichio import extract
from stoichio.errors import ElementNotFoundError
from stoichio.periodic_table import PERIODIC_TABLE


@dataclass(frozen=True)
class Element:
    """A chemical element.

    Attributes:
        symbol: Element symbol, e.g. ``"Na"``.
        name: Element name, e.g. ``"Sodium"``.
        atomic_number: Number of protons.
        atomic_weight: Atomic weight (kg/mol).
        electronegativity: Pauling electronegativity.
        tags: Free-form labels used for filtering.
    """

    symbol: str = ""
    name: str = ""
    atomic_number: int = 0
    atomic_weight: float = 0.0
    electronegativity: float = 0.0
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))

    @property
    def molar_mass(self) -> float:
        """Molar mass of the element (kg/mol)."""
        return self.atomic_weight

    def replace_symbol(self, symbol: str) -> Element:
        return replace(self, symbol=symbol)

    def replace_name(self, name: str) -> Element:
        return replace(self, name=name)

    def replace_atomic_number(self, atomic_number: int) -> Element:
        return replace(self, atomic_number=atomic_number)

    def replace_atomic_weight(self, atomic_weight: float) -> Element:
        return replace(self, atomic_weight=atomic_weight)

    def replace_electronegativity(self, electronegativity: float) -> Element:
        return replace(self, electronegativity=electronegativity)

    def replace_tags(self, tags: Iterable[str]) -> Element:
        return replace(self, tags=tuple(tags))

    def __lt__(self, other: Element) -> bool:
        return self.atomic_number < other.atomic_number


class Elements:
    """Immutable, ordered collection of elements looked up by symbol.

    Methods that change the collection return a new instance, so a single
    database can be shared between any number of substances.
    """

    def __init__(self, elements: Iterable[Element] = ()):
        self._elements: Tuple[Element, ...] = tuple(elements)

    @classmethod
    def periodic_table(cls) -> Elements:
        """Return the 118 elements of the periodic table."""
        return cls(
            Element(symbol, name, number, weight, electronegativity)
            for symbol, name, number, weight, electronegativity in PERIODIC_TABLE
        )

    @property
    def data(self) -> Tuple[Element, ...]:
        return self._elements

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)

    def __getitem__(self, index: int) -> Element:
        return self._elements[index]

    def __contains__(self, symbol: object) -> bool:
        return any(element.symbol == symbol for element in self._elements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Elements):
            return NotImplemented
        return self._elements == other._elements

    def __repr__(self) -> str:
        return f"Elements({[element.symbol for element in self._elements]!r})"

    def index_with_symbol(self, symbol: str) -> int:
        """Return the index of the element with ``symbol``, or ``len(self)``."""
        for index, element in enumerate(self._elements):
            if element.symbol == symbol:
                return index
        return len(self)

    def index_with_name(self, name: str) -> int:
        """Return the index of the element named ``name``, or ``len(self)``."""
        for index, element in enumerate(self._elements):
            if element.name == name:
                return index
        return len(self)

    def index(self, attribute: str) -> int:
        """Return the index of the element with a given symbol or name."""
        index = self.index_with_symbol(attribute)
        if index < len(self):
            return index
        return self.index_with_name(attribute)

    def get(self, symbol: str) -> Element:
        """Return the element with ``symbol``.

        Raises:
            ElementNotFoundError: If no element has that symbol.
        """
        index = self.index_with_symbol(symbol)
        if index >= len(self):
            raise ElementNotFoundError(f"Could not find an element with symbol `{symbol}`.")
        return self._elements[index]

    __call__ = get

    def with_element(self, element: Element) -> Elements:
        """Return a copy with ``element`` added, replacing one with the same symbol."""
        index = self.index_with_symbol(element.symbol)
        elements = list(self._elements)
        if index < len(elements):
            elements[index] = element
        else:
            elements.append(element)
        return Elements(elements)

    def filter(self, attribute: str) -> Elements:
        """Return the elements whose symbol, name or one of whose tags is ``attribute``."""
        return Elements(e for e in self._elements if _matches(e, attribute))

    def remove(self, attribute: str) -> Elements:
        """Return the elements whose symbol, name and tags all differ from ``attribute``."""
        return Elements(e for e in self._elements if not _matches(e, attribute))

    def symbols(self) -> List[str]:
        return extract.symbols(self._elements)

    def molar_masses(self) -> np.ndarray:
        return extract.molar_masses(self._elements)

    def select(self, symbols: Sequence[str]) -> Elements:
        """Return the elements with the given symbols, in that order."""
        return Elements(self.get(symbol) for symbol in symbols)


def _matches(element: Element, attribute: str) -> bool:
    return attribute in (element.symbol, element.name) or attribute in element.tags


@functools.lru_cache(maxsize=None)
def default_elements() -> Elements:
    """Return the shared periodic-table database, built on first use."""
    return Elements.periodic_table()
