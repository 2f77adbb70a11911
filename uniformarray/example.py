"""Example uniform-array types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from .derive import uniform_array

__all__ = ["FEATURES", "NamedGeneric", "Named", "Newtype", "Tuple", "Unit"]

FEATURES = frozenset({"unsafe"})
"""The features enabled for the example types."""

T = TypeVar("T")


@uniform_array(safety_gate="unsafest", features=FEATURES)
@dataclass
class NamedGeneric(Generic[T]):
    """An example type with four fields of one generic type."""

    a: T
    b: T
    c: T
    d: T


@uniform_array(safety_gate="unsafe", features=FEATURES)
@dataclass
class Named:
    """An example type with four float fields."""

    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0


@uniform_array(features=FEATURES)
@dataclass
class Newtype:
    """An example type wrapping a single integer."""

    _0: int = 0


@uniform_array(features=FEATURES)
@dataclass
class Tuple:
    """An example type holding two integers."""

    _0: int = 0
    _1: int = 0


@uniform_array(features=FEATURES)
@dataclass
class Unit:
    """An example type without fields."""