"""Physical properties of chemical elements.

Every lookup here is a total function over strings: a symbol that is not
one of the 110 known elements yields ``0`` / ``0.0`` together with a
diagnostic naming the symbol and the requested property.

Symbols are matched exactly (upper-case, no surrounding whitespace), as
they appear in the element column of PDB and mmCIF records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Union

import numpy as np

from pdbelements.constants.elements import (
    ATOMIC_MASSES,
    ATOMIC_NUMBERS,
    COVALENT_RADII,
    VDW_RADII,
)
from pdbelements.diagnostics import DiagnosticSink, LookupResult, defaulting


class Property(Enum):
    """Tabulated element properties."""
    ATOMIC_NUMBER = "atomic number"
    ATOMIC_MASS = "atomic mass"
    COVALENT_RADIUS = "covalent radius"
    VAN_DER_WAALS_RADIUS = "van der Waals radius"

    @property
    def table(self) -> Mapping[str, Union[int, float]]:
        return _TABLES[self]

    @property
    def default(self) -> Union[int, float]:
        return 0 if self is Property.ATOMIC_NUMBER else 0.0


_TABLES = {
    Property.ATOMIC_NUMBER: ATOMIC_NUMBERS,
    Property.ATOMIC_MASS: ATOMIC_MASSES,
    Property.COVALENT_RADIUS: COVALENT_RADII,
    Property.VAN_DER_WAALS_RADIUS: VDW_RADII,
}


def unknown_element_message(prop: Property, symbol: str) -> str:
    return f"Unknown {prop.value} for element: {symbol!r}"


def lookup(prop: Property, symbol: str) -> LookupResult:
    """Look up a property without reporting anything.

    Returns the tabulated value with ``known=True``, or the property's
    default with ``known=False``.
    """
    value = prop.table.get(symbol)
    if value is None:
        return LookupResult(prop.default, False)
    return LookupResult(value, True)


def _get(prop: Property, symbol: str, sink: Optional[DiagnosticSink]):
    value, known = lookup(prop, symbol)
    if known:
        return value
    return defaulting(unknown_element_message(prop, symbol), value, sink)


def atomic_number(symbol: str, sink: Optional[DiagnosticSink] = None) -> int:
    """Atomic number of a given element."""
    return _get(Property.ATOMIC_NUMBER, symbol, sink)


def atomic_mass(symbol: str, sink: Optional[DiagnosticSink] = None) -> float:
    """Atomic mass of a given element in g/mol."""
    return _get(Property.ATOMIC_MASS, symbol, sink)


def covalent_radius(symbol: str, sink: Optional[DiagnosticSink] = None) -> float:
    """Covalent radius of a given element in Å."""
    return _get(Property.COVALENT_RADIUS, symbol, sink)


def van_der_waals_radius(symbol: str, sink: Optional[DiagnosticSink] = None) -> float:
    """Van der Waals radius of a given element in Å."""
    return _get(Property.VAN_DER_WAALS_RADIUS, symbol, sink)


# Upper bounds of the radius tables, fixed to the entries known to be largest
MAX_COVALENT_RADIUS: float = COVALENT_RADII["FR"]
MAX_VAN_DER_WAALS_RADIUS: float = VDW_RADII["K"]


def is_known_element(symbol: str) -> bool:
    """Check if ``symbol`` is one of the tabulated elements."""
    return symbol in ATOMIC_NUMBERS


@dataclass(frozen=True)
class ElementProperties:
    """All tabulated properties of one element.

    Attributes:
        symbol: Upper-case element symbol (e.g., 'FE')
        atomic_number: Number of protons
        atomic_mass: Standard atomic mass in g/mol
        covalent_radius: Covalent radius in Å
        van_der_waals_radius: Van der Waals radius in Å
    """
    symbol: str
    atomic_number: int
    atomic_mass: float
    covalent_radius: float
    van_der_waals_radius: float

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "atomic_number": self.atomic_number,
            "atomic_mass": self.atomic_mass,
            "covalent_radius": self.covalent_radius,
            "van_der_waals_radius": self.van_der_waals_radius,
        }


def element_properties(symbol: str) -> Optional[ElementProperties]:
    """Get all properties of an element, or None if the symbol is unknown."""
    if not is_known_element(symbol):
        return None
    return ElementProperties(
        symbol=symbol,
        atomic_number=ATOMIC_NUMBERS[symbol],
        atomic_mass=ATOMIC_MASSES[symbol],
        covalent_radius=COVALENT_RADII[symbol],
        van_der_waals_radius=VDW_RADII[symbol],
    )


# =============================================================================
# Array Lookups
# =============================================================================


def _as_array(
    prop: Property,
    symbols: Iterable[str],
    sink: Optional[DiagnosticSink],
) -> np.ndarray:
    return np.array(
        [_get(prop, symbol, sink) for symbol in symbols], dtype=np.float64
    )


def atomic_masses(
    symbols: Iterable[str], sink: Optional[DiagnosticSink] = None
) -> np.ndarray:
    """Atomic masses for a sequence of elements, shape (N,)."""
    return _as_array(Property.ATOMIC_MASS, symbols, sink)


def covalent_radii(
    symbols: Iterable[str], sink: Optional[DiagnosticSink] = None
) -> np.ndarray:
    """Covalent radii for a sequence of elements, shape (N,)."""
    return _as_array(Property.COVALENT_RADIUS, symbols, sink)


def van_der_waals_radii(
    symbols: Iterable[str], sink: Optional[DiagnosticSink] = None
) -> np.ndarray:
    """Van der Waals radii for a sequence of elements, shape (N,)."""
    return _as_array(Property.VAN_DER_WAALS_RADIUS, symbols, sink)
