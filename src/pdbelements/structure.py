"""Minimal structure records consumed by element assignment.

Parsers of PDB or mmCIF files produce these records; this package only
reads them. The element field may be empty for legacy files, in which case
the element is guessed from the atom name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from pdbelements.assignment import assign_element
from pdbelements.diagnostics import DiagnosticSink
from pdbelements.properties import atomic_masses


@dataclass
class Atom:
    """Represents a single atom in a structure.

    Attributes:
        name: Atom name (e.g., 'CA', 'N', "O5'")
        element: Element symbol (e.g., 'C', 'FE'), empty if not recorded
        coords: 3D coordinates in Angstroms
        occupancy: Occupancy factor (0-1)
        b_factor: Temperature factor
        is_hetero: Whether this is a HETATM
        serial: Atom serial number
    """
    name: str
    element: str
    coords: np.ndarray  # Shape (3,)
    occupancy: float = 1.0
    b_factor: float = 0.0
    is_hetero: bool = False
    serial: int = 0

    def __post_init__(self):
        if not isinstance(self.coords, np.ndarray):
            self.coords = np.array(self.coords, dtype=np.float32)
        if self.coords.shape != (3,):
            raise ValueError(f"Coords must be shape (3,), got {self.coords.shape}")

    @property
    def assigned_element(self) -> str:
        """Recorded element, or the one guessed from the atom name."""
        return assign_element(self)

    @property
    def is_hydrogen(self) -> bool:
        """Check if this is a hydrogen atom."""
        return self.assigned_element == "H"

    def distance_to(self, other: "Atom") -> float:
        """Calculate Euclidean distance to another atom."""
        return float(np.linalg.norm(self.coords - other.coords))


@dataclass
class Residue:
    """Represents a residue (amino acid, nucleotide, or ligand).

    Attributes:
        name: Residue name (3-letter code, e.g., 'ALA', 'DA')
        seq_id: Sequence position (residue number)
        atoms: Dictionary of atom name to Atom
    """
    name: str
    seq_id: int
    atoms: Dict[str, Atom] = field(default_factory=dict)

    @property
    def num_atoms(self) -> int:
        """Number of atoms in this residue."""
        return len(self.atoms)

    @property
    def elements(self) -> List[str]:
        """Assigned element of every atom, in insertion order."""
        return [atom.assigned_element for atom in self.atoms.values()]

    @property
    def coords(self) -> np.ndarray:
        """Coordinates of all atoms as Nx3 array."""
        if not self.atoms:
            return np.zeros((0, 3), dtype=np.float32)
        return np.stack([atom.coords for atom in self.atoms.values()])

    def get_atom(self, name: str) -> Optional[Atom]:
        """Get an atom by name."""
        return self.atoms.get(name)

    def mass(self, sink: Optional[DiagnosticSink] = None) -> float:
        """Total mass in g/mol; atoms of unknown element count as 0."""
        return float(atomic_masses(self.elements, sink).sum())

    def center_of_mass(self, sink: Optional[DiagnosticSink] = None) -> np.ndarray:
        """Mass-weighted centroid of the residue's atoms."""
        masses = atomic_masses(self.elements, sink)
        total = masses.sum()
        if total == 0.0:
            return np.zeros(3, dtype=np.float64)
        return (self.coords * masses[:, None]).sum(axis=0) / total
