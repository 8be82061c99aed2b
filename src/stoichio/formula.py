"""Chemical formula parsing.

Formulas follow the convention that every element atom starts with an
uppercase letter followed by zero or more lowercase letters, so even
``AaBbb`` or ``(Aa2Bbb4)Cc6`` are accepted. Parentheses group atoms under a
trailing multiplier and a ``.`` starts a multiplied adduct group that runs
to the end of the enclosing group, as in ``.5H2O``.

Coefficients are decimal numbers made of digits and at most one decimal
point, so ``Al2.5Si0.5O4.75`` is valid. A dot right after an atom or a
group is read as the start of its coefficient: ``MgSO4.7H2O`` gives
``O4.7``, so write hydrates of that kind as ``MgSO4(H2O)7``.

Electric charge is written as a suffix in one of three notations, tried in
this order:

1. repeated signs: ``Fe+++``, ``Ca++``, ``CO3--``
2. magnitude and sign in parentheses: ``Fe(3+)``, ``CO3(2-)``, ``H(+)``
3. sign followed by a magnitude: ``Fe+3``, ``Na+``, ``Cl-1``, ``CO3-2``,
   ``Ca+2(aq)``

The first notation that yields a nonzero value wins.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Tuple, Union

from stoichio.constants import CHARGE_SYMBOL
from stoichio.errors import FormulaError

logger = logging.getLogger(__name__)

_MAGNITUDE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower(char: str) -> bool:
    return "a" <= char <= "z"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _parse_number(formula: str, start: int, end: int) -> Tuple[float, int]:
    """Read a coefficient starting at ``start``.

    Returns the value and the index just past it. Without a digit or a
    decimal point at ``start`` the value is 1.0 and the index is unchanged.
    """
    if start >= end or not (_is_digit(formula[start]) or formula[start] == "."):
        return 1.0, start

    stop = start
    seen_point = False
    while stop < end:
        char = formula[stop]
        if char == ".":
            if seen_point:
                break
            seen_point = True
        elif not _is_digit(char):
            break
        stop += 1

    text = formula[start:stop]
    # A bare "." carries no digits at all.
    value = float(text) if text != "." else 0.0
    return value, stop


def _find_closing_parenthesis(formula: str, start: int, end: int) -> int:
    """Return the index of the ``)`` closing the ``(`` at ``start``.

    An unmatched parenthesis extends to ``end``.
    """
    depth = 0
    for index in range(start + 1, end):
        char = formula[index]
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == -1:
                return index
    return end


def _accumulate(
    formula: str,
    start: int,
    end: int,
    scalar: float,
    result: Dict[str, float],
) -> None:
    """Add the element coefficients of ``formula[start:end]`` into ``result``."""
    while start < end:
        char = formula[start]
        if char == "(":
            close = _find_closing_parenthesis(formula, start, end)
            multiplier, after = _parse_number(formula, close + 1, end)
            _accumulate(formula, start + 1, close, scalar * multiplier, result)
            start = after
        elif char == ".":
            multiplier, start = _parse_number(formula, start + 1, end)
            scalar *= multiplier
        elif _is_upper(char):
            stop = start + 1
            while stop < end and _is_lower(formula[stop]):
                stop += 1
            symbol = formula[start:stop]
            count, start = _parse_number(formula, stop, end)
            result[symbol] = result.get(symbol, 0.0) + scalar * count
        else:
            # Charge signs, closing parentheses and other filler.
            start += 1


def _parse_magnitude(formula: str, text: str) -> float:
    if not text:
        return 1.0
    # Only the leading number counts, so a phase tag may follow it.
    match = _MAGNITUDE.match(text)
    if match is None:
        raise FormulaError(formula, f"charge magnitude `{text}` is not a number")
    return float(match.group())


def _charge_from_repeated_signs(formula: str) -> float:
    sign = formula[-1:]
    if sign not in ("+", "-"):
        return 0.0
    count = len(formula) - len(formula.rstrip(sign))
    return float(count) if sign == "+" else -float(count)


def _charge_from_parenthesized_sign(formula: str) -> float:
    if not formula.endswith(")"):
        return 0.0
    opening = formula.rfind("(")
    if opening == -1:
        return 0.0
    sign_index = len(formula) - 2
    sign = formula[sign_index]
    if sign not in ("+", "-"):
        return 0.0
    magnitude = _parse_magnitude(formula, formula[opening + 1:sign_index])
    return magnitude if sign == "+" else -magnitude


def _charge_from_sign_number(formula: str) -> float:
    position = max(formula.rfind("+"), formula.rfind("-"))
    if position == -1:
        return 0.0
    magnitude = _parse_magnitude(formula, formula[position + 1:])
    return magnitude if formula[position] == "+" else -magnitude


_CHARGE_NOTATIONS: Tuple[Callable[[str], float], ...] = (
    _charge_from_repeated_signs,
    _charge_from_parenthesized_sign,
    _charge_from_sign_number,
)


def parse_charge(formula: str) -> float:
    """Return the electric charge encoded in the suffix of ``formula``.

    A formula without a charge suffix has charge 0.0.

    Raises:
        FormulaError: If a charge magnitude is present but not a number.
    """
    for notation in _CHARGE_NOTATIONS:
        charge = notation(formula)
        if charge != 0.0:
            return charge
    return 0.0


def parse_formula(formula: str) -> Dict[str, float]:
    """Return the element coefficients of ``formula``.

    Keys are element symbols in the order they first appear. When the
    formula carries a nonzero charge it is stored last under ``"Z"``.

    >>> parse_formula("(CaMg)(CO3)2")
    {'Ca': 1.0, 'Mg': 1.0, 'C': 2.0, 'O': 6.0}
    >>> parse_formula("HCO3-")
    {'H': 1.0, 'C': 1.0, 'O': 3.0, 'Z': -1.0}

    Raises:
        FormulaError: If the formula does not start with an element atom, a
            group, or an adduct separator, or if its charge is malformed.
    """
    if formula and not (_is_upper(formula[0]) or formula[0] in "(."):
        raise FormulaError(formula, "the first character must be an uppercase letter")

    result: Dict[str, float] = {}
    _accumulate(formula, 0, len(formula), 1.0, result)

    charge = parse_charge(formula)
    if charge != 0.0:
        result[CHARGE_SYMBOL] = charge

    logger.debug("Parsed formula %s -> %s", formula, result)
    return result


@dataclass(frozen=True)
class Formula:
    """Parsed chemical formula.

    Attributes:
        label: The formula as written, e.g. ``"CO3--"``.
        symbols: Distinct symbols in first-seen order. Includes ``"Z"`` last
            when the formula is charged.
        coefficients: Coefficients parallel to ``symbols``.
    """

    label: str = ""
    symbols: Tuple[str, ...] = ()
    coefficients: Tuple[float, ...] = ()

    def __post_init__(self) -> None:
        if len(self.symbols) != len(self.coefficients):
            raise ValueError(
                f"Formula `{self.label}` has {len(self.symbols)} symbols "
                f"but {len(self.coefficients)} coefficients"
            )

    @classmethod
    def parse(cls, formula: str) -> Formula:
        pairs = parse_formula(formula)
        return cls(formula, tuple(pairs), tuple(pairs.values()))

    def coefficient(self, symbol: str) -> float:
        """Return the coefficient of ``symbol``, or 0.0 if it is absent."""
        if symbol not in self.symbols:
            return 0.0
        return self.coefficients[self.symbols.index(symbol)]

    @property
    def charge(self) -> float:
        return self.coefficient(CHARGE_SYMBOL)

    @property
    def elements(self) -> Dict[str, float]:
        """Element coefficients without the charge entry."""
        return {
            symbol: coefficient
            for symbol, coefficient in zip(self.symbols, self.coefficients)
            if symbol != CHARGE_SYMBOL
        }

    def as_dict(self) -> Dict[str, float]:
        return dict(zip(self.symbols, self.coefficients))

    def equivalent(self, other: Union[str, Formula]) -> bool:
        """Return True if ``other`` has the same composition and charge.

        ``Ca++`` and ``Ca+2`` are equivalent, as are ``CaCO3`` and ``Ca(CO3)``.
        """
        return self.as_dict() == as_formula(other).as_dict()

    def __str__(self) -> str:
        return self.label

    def __lt__(self, other: Formula) -> bool:
        return self.label < other.label


def as_formula(value: Union[str, Formula]) -> Formula:
    if isinstance(value, Formula):
        return value
    return Formula.parse(value)


def equivalent(lhs: Union[str, Formula], rhs: Union[str, Formula]) -> bool:
    return as_formula(lhs).equivalent(rhs)
