"""
Standard atom names of proteins and nucleic acids.

Used to guess the element of an atom when its record carries no explicit
element symbol. Hydrogen names are not covered, and neither is any atom
specific to ligands or modified residues.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

# =============================================================================
# Backbone Atoms
# =============================================================================

# Protein backbone atoms (N-terminus to C-terminus)
PROTEIN_BACKBONE_ATOMS: Final[tuple[str, ...]] = ("N", "CA", "C", "O")

# Nucleic acid backbone atoms (5' to 3'), O2' only in RNA
NUCLEIC_BACKBONE_ATOMS: Final[tuple[str, ...]] = (
    "P", "OP1", "OP2", "O5'", "C5'", "C4'", "O4'",
    "C3'", "O3'", "C2'", "O2'", "C1'",
)

# =============================================================================
# Atom Name -> Element
# =============================================================================

_CARBON_ATOMS: Final[tuple[str, ...]] = (
    # Protein
    "C", "CA", "CB", "CD", "CD1", "CD2", "CE", "CE1", "CE2", "CE3",
    "CG", "CG1", "CG2", "CH2", "CZ", "CZ2", "CZ3",
    # Nucleic acid sugar
    "C1'", "C2'", "C3'", "C4'", "C5'",
    # Nucleic acid bases
    "C2", "C4", "C5", "C6", "C8",
)

_NITROGEN_ATOMS: Final[tuple[str, ...]] = (
    # Protein
    "N", "ND1", "ND2", "NE", "NE1", "NE2", "NH1", "NH2", "NZ",
    # Nucleic acid bases
    "N1", "N2", "N3", "N4", "N6", "N7", "N9",
)

_OXYGEN_ATOMS: Final[tuple[str, ...]] = (
    # Protein
    "O", "OXT", "OD1", "OD2", "OE1", "OE2", "OG", "OG1", "OH",
    # Nucleic acid backbone
    "OP1", "OP2", "O2'", "O3'", "O4'", "O5'",
    # Nucleic acid bases
    "O2", "O4", "O6",
)

_PHOSPHORUS_ATOMS: Final[tuple[str, ...]] = ("P",)

_SULFUR_ATOMS: Final[tuple[str, ...]] = ("SD", "SG")

STANDARD_ATOM_ELEMENTS: Final[Mapping[str, str]] = MappingProxyType({
    **{name: "C" for name in _CARBON_ATOMS},
    **{name: "N" for name in _NITROGEN_ATOMS},
    **{name: "O" for name in _OXYGEN_ATOMS},
    **{name: "P" for name in _PHOSPHORUS_ATOMS},
    **{name: "S" for name in _SULFUR_ATOMS},
})
