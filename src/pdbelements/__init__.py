"""pdbelements: chemical element properties for macromolecular structures.

This package provides:
- Atomic numbers, masses, covalent and van der Waals radii of 110 elements
- Element guessing from standard protein and nucleic-acid atom names
- Element assignment for atoms with missing element annotation
- Bond and clash detection built on the radius tables
"""

from pdbelements.assignment import (
    UNKNOWN_ELEMENT,
    AtomLike,
    assign_element,
    assign_elements,
    guess_element,
)
from pdbelements.config import Settings, get_settings
from pdbelements.diagnostics import DiagnosticCollector, LookupResult, defaulting
from pdbelements.properties import (
    MAX_COVALENT_RADIUS,
    MAX_VAN_DER_WAALS_RADIUS,
    ElementProperties,
    Property,
    atomic_mass,
    atomic_masses,
    atomic_number,
    covalent_radii,
    covalent_radius,
    element_properties,
    is_known_element,
    lookup,
    van_der_waals_radii,
    van_der_waals_radius,
)

__version__ = "0.1.0"
__all__ = [
    "MAX_COVALENT_RADIUS",
    "MAX_VAN_DER_WAALS_RADIUS",
    "UNKNOWN_ELEMENT",
    "AtomLike",
    "DiagnosticCollector",
    "ElementProperties",
    "LookupResult",
    "Property",
    "Settings",
    "assign_element",
    "assign_elements",
    "atomic_mass",
    "atomic_masses",
    "atomic_number",
    "covalent_radii",
    "covalent_radius",
    "defaulting",
    "element_properties",
    "get_settings",
    "guess_element",
    "is_known_element",
    "lookup",
    "van_der_waals_radii",
    "van_der_waals_radius",
    "__version__",
]
