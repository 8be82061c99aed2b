"""Helpers that pull one attribute out of a collection of items."""

from __future__ import annotations

from typing import Any, Callable, Iterable, List

import numpy as np


def values(items: Iterable[Any], getter: Callable[[Any], float]) -> np.ndarray:
    return np.array([getter(item) for item in items], dtype=float)


def strings(items: Iterable[Any], getter: Callable[[Any], str]) -> List[str]:
    return [getter(item) for item in items]


def molar_masses(items: Iterable[Any]) -> np.ndarray:
    """Molar masses (kg/mol) of items exposing ``molar_mass``."""
    return values(items, lambda item: item.molar_mass)


def charges(items: Iterable[Any]) -> np.ndarray:
    return values(items, lambda item: item.charge)


def symbols(items: Iterable[Any]) -> List[str]:
    return strings(items, lambda item: item.symbol)


def names(items: Iterable[Any]) -> List[str]:
    return strings(items, lambda item: item.name)
