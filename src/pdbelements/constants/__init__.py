"""Static element and atom-name tables."""

from pdbelements.constants.atoms import (
    NUCLEIC_BACKBONE_ATOMS,
    PROTEIN_BACKBONE_ATOMS,
    STANDARD_ATOM_ELEMENTS,
)
from pdbelements.constants.elements import (
    ATOMIC_MASSES,
    ATOMIC_NUMBERS,
    COVALENT_RADII,
    ELEMENTS,
    NUM_ELEMENTS,
    PLACEHOLDER_VDW_ELEMENTS,
    PLACEHOLDER_VDW_RADIUS,
    VDW_RADII,
)

__all__ = [
    "ATOMIC_MASSES",
    "ATOMIC_NUMBERS",
    "COVALENT_RADII",
    "ELEMENTS",
    "NUCLEIC_BACKBONE_ATOMS",
    "NUM_ELEMENTS",
    "PLACEHOLDER_VDW_ELEMENTS",
    "PLACEHOLDER_VDW_RADIUS",
    "PROTEIN_BACKBONE_ATOMS",
    "STANDARD_ATOM_ELEMENTS",
    "VDW_RADII",
]
