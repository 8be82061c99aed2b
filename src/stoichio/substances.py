"""Chemical substances and collections of them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from stoichio.elements import Elements, default_elements
from stoichio.errors import SubstanceNotFoundError
from stoichio.formula import Formula, as_formula

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubstanceAttributes:
    """User-supplied attributes of a substance.

    Attributes:
        formula: Chemical formula, e.g. ``"CaCO3"`` or ``"CO3--"``.
        name: Unique name; defaults to the formula.
        type: Category such as ``"aqueous"`` or ``"gaseous"``.
        tags: Free-form labels used for filtering.
    """

    formula: str
    name: str = ""
    type: str = ""
    tags: Tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", tuple(self.tags))
        if not self.name:
            object.__setattr__(self, "name", self.formula)


class Substance:
    """A chemical substance with its elements and molar mass.

    The formula is parsed once on construction and the elements it names are
    resolved against an element database, the periodic table by default.
    Substances are immutable; the ``replace_*`` methods return new ones.
    """

    def __init__(
        self,
        formula: Union[str, SubstanceAttributes],
        name: str = "",
        type: str = "",
        tags: Iterable[str] = (),
        elements: Optional[Elements] = None,
    ):
        if isinstance(formula, SubstanceAttributes):
            attributes = formula
        else:
            attributes = SubstanceAttributes(formula, name, type, tuple(tags))
        self._attributes = attributes
        self._database = elements if elements is not None else default_elements()
        self._formula = Formula.parse(attributes.formula)

        composition = self._formula.elements
        self._elements = self._database.select(list(composition))
        coefficients = np.array(list(composition.values()), dtype=float)
        self._molar_mass = float(np.dot(coefficients, self._elements.molar_masses()))
        logger.debug("Substance %s has molar mass %g kg/mol", attributes.name, self._molar_mass)

    @property
    def attributes(self) -> SubstanceAttributes:
        return self._attributes

    @property
    def name(self) -> str:
        return self._attributes.name

    @property
    def formula(self) -> Formula:
        return self._formula

    @property
    def type(self) -> str:
        return self._attributes.type

    @property
    def tags(self) -> Tuple[str, ...]:
        return self._attributes.tags

    @property
    def elements(self) -> Elements:
        """Elements composing the substance, charge excluded."""
        return self._elements

    @property
    def symbols(self) -> Tuple[str, ...]:
        return self._formula.symbols

    @property
    def coefficients(self) -> Tuple[float, ...]:
        return self._formula.coefficients

    def coefficient(self, symbol: str) -> float:
        return self._formula.coefficient(symbol)

    @property
    def charge(self) -> float:
        return self._formula.charge

    @property
    def molar_mass(self) -> float:
        """Molar mass of the substance (kg/mol)."""
        return self._molar_mass

    def _replace(self, **changes: object) -> Substance:
        values = {
            "formula": self._attributes.formula,
            "name": self._attributes.name,
            "type": self._attributes.type,
            "tags": self._attributes.tags,
        }
        values.update(changes)
        return Substance(SubstanceAttributes(**values), elements=self._database)

    def replace_formula(self, formula: str) -> Substance:
        return self._replace(formula=formula)

    def replace_name(self, name: str) -> Substance:
        return self._replace(name=name)

    def replace_type(self, type: str) -> Substance:
        return self._replace(type=type)

    def replace_tags(self, tags: Iterable[str]) -> Substance:
        return self._replace(tags=tuple(tags))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Substance):
            return NotImplemented
        return self.name == other.name and self._formula == other._formula

    def __hash__(self) -> int:
        return hash((self.name, self._formula.label))

    def __lt__(self, other: Substance) -> bool:
        return self.name < other.name

    def __repr__(self) -> str:
        return f"Substance(formula={self._formula.label!r}, name={self.name!r})"


def _as_list(values: Union[str, Iterable[str]]) -> List[str]:
    # Plain strings are whitespace-separated lists, e.g. "H+(aq) OH-(aq)".
    if isinstance(values, str):
        return values.split()
    return list(values)


class Substances:
    """Ordered collection of substances with lookup and filtering helpers."""

    def __init__(self, substances: Iterable[Union[Substance, str]] = ()):
        self._substances: List[Substance] = [
            item if isinstance(item, Substance) else Substance(item)
            for item in substances
        ]

    @property
    def data(self) -> List[Substance]:
        return self._substances

    def __len__(self) -> int:
        return len(self._substances)

    def __iter__(self) -> Iterator[Substance]:
        return iter(self._substances)

    def __getitem__(self, index: int) -> Substance:
        return self._substances[index]

    def __repr__(self) -> str:
        return f"Substances({[s.name for s in self._substances]!r})"

    def append(self, substance: Substance) -> None:
        self._substances.append(substance)

    def index_with_name(self, name: str) -> int:
        """Return the index of the first substance named ``name``, or ``len(self)``."""
        for index, substance in enumerate(self._substances):
            if substance.name == name:
                return index
        return len(self)

    def index_with_formula(self, formula: Union[str, Formula]) -> int:
        """Return the index of the first substance with ``formula``, or ``len(self)``.

        Formulas match when they are equivalent, so ``CO3--`` finds a
        substance written as ``CO3-2``.
        """
        target = as_formula(formula)
        for index, substance in enumerate(self._substances):
            if substance.formula.equivalent(target):
                return index
        return len(self)

    def get_with_name(self, name: str) -> Substance:
        index = self.index_with_name(name)
        if index >= len(self):
            raise SubstanceNotFoundError(f"Could not find a substance with the given name `{name}`.")
        return self._substances[index]

    def get_with_formula(self, formula: Union[str, Formula]) -> Substance:
        index = self.index_with_formula(formula)
        if index >= len(self):
            raise SubstanceNotFoundError(
                f"Could not find a substance with the given formula `{formula}`."
            )
        return self._substances[index]

    def with_names(self, names: Union[str, Iterable[str]]) -> Substances:
        return Substances(self.get_with_name(name) for name in _as_list(names))

    def with_formulas(self, formulas: Union[str, Iterable[str]]) -> Substances:
        return Substances(self.get_with_formula(formula) for formula in _as_list(formulas))

    def with_type(self, type: str) -> Substances:
        return Substances(s for s in self._substances if s.type == type)

    def with_tag(self, tag: str) -> Substances:
        return Substances(s for s in self._substances if tag in s.tags)

    def without_tag(self, tag: str) -> Substances:
        return Substances(s for s in self._substances if tag not in s.tags)

    def with_tags(self, tags: Union[str, Iterable[str]]) -> Substances:
        """Return the substances carrying every one of ``tags``."""
        wanted = set(_as_list(tags))
        return Substances(s for s in self._substances if wanted.issubset(s.tags))

    def without_tags(self, tags: Union[str, Iterable[str]]) -> Substances:
        """Return the substances not carrying all of ``tags``."""
        wanted = set(_as_list(tags))
        return Substances(s for s in self._substances if not wanted.issubset(s.tags))

    def with_elements(self, symbols: Union[str, Iterable[str]]) -> Substances:
        """Return the substances made only of elements in ``symbols``."""
        allowed = set(_as_list(symbols))
        return Substances(s for s in self._substances if allowed.issuperset(s.formula.elements))

    def with_elements_of(self, formulas: Union[str, Iterable[str]]) -> Substances:
        """Return the substances made only of elements found in ``formulas``."""
        symbols: List[str] = []
        for formula in _as_list(formulas):
            for symbol in Formula.parse(formula).elements:
                if symbol not in symbols:
                    symbols.append(symbol)
        return self.with_elements(symbols)
