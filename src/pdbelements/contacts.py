"""Bond and clash detection from element radii.

Covalent bonds are inferred when two atoms are closer than the sum of their
covalent radii plus a tolerance. Clashes are pairs more than two bonds apart
whose van der Waals spheres overlap by more than an allowed amount. Default
tolerances come from the ``bond_tolerance`` and ``clash_overlap`` settings.

Candidate pairs are found with a KD-tree whose search radius is derived
from the largest radius in each table, so no pair can be missed.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Set, Tuple

import numpy as np
from scipy.spatial import cKDTree

from pdbelements.config import get_settings
from pdbelements.diagnostics import DiagnosticSink
from pdbelements.properties import (
    MAX_COVALENT_RADIUS,
    MAX_VAN_DER_WAALS_RADIUS,
    covalent_radii,
    covalent_radius,
    is_known_element,
    van_der_waals_radii,
)
from pdbelements.structure import Atom

logger = logging.getLogger(__name__)



def bond_cutoff(
    element1: str,
    element2: str,
    tolerance: Optional[float] = None,
    sink: Optional[DiagnosticSink] = None,
) -> float:
    """Maximum distance at which two atoms are considered bonded."""
    if tolerance is None:
        tolerance = get_settings().bond_tolerance
    return covalent_radius(element1, sink) + covalent_radius(element2, sink) + tolerance


def _known_atoms(atoms: Sequence[Atom]) -> Tuple[np.ndarray, List[str]]:
    """Indices and elements of atoms whose assigned element is tabulated."""
    indices = []
    elements = []
    for i, atom in enumerate(atoms):
        element = atom.assigned_element
        if is_known_element(element):
            indices.append(i)
            elements.append(element)
        else:
            logger.debug(
                f"Skipping atom {atom.serial} ({atom.name!r}): "
                f"no usable element {element!r}"
            )
    return np.asarray(indices, dtype=np.int64), elements


def _candidate_pairs(coords: np.ndarray, radius: float) -> np.ndarray:
    """All (i, j), i < j, within ``radius`` of each other, shape (P, 2)."""
    if len(coords) < 2:
        return np.zeros((0, 2), dtype=np.int64)
    tree = cKDTree(coords)
    return tree.query_pairs(radius, output_type="ndarray")


def detect_covalent_bonds(
    atoms: Sequence[Atom],
    tolerance: Optional[float] = None,
) -> List[Tuple[int, int]]:
    """Infer covalent bonds from interatomic distances.

    Args:
        atoms: Atoms of a structure.
        tolerance: Slack added to the sum of covalent radii (Å). Defaults to
            the ``bond_tolerance`` setting.

    Returns:
        Sorted list of (i, j) atom index pairs with i < j.
    """
    if tolerance is None:
        tolerance = get_settings().bond_tolerance

    indices, elements = _known_atoms(atoms)
    if len(indices) < 2:
        return []

    coords = np.stack([atoms[i].coords for i in indices]).astype(np.float64)
    radii = covalent_radii(elements)

    pairs = _candidate_pairs(coords, 2.0 * MAX_COVALENT_RADIUS + tolerance)
    if len(pairs) == 0:
        return []

    a, b = pairs[:, 0], pairs[:, 1]
    distances = np.linalg.norm(coords[a] - coords[b], axis=1)
    bonded = distances <= radii[a] + radii[b] + tolerance

    bonds = sorted(
        (int(indices[i]), int(indices[j])) for i, j in pairs[bonded]
    )
    logger.debug(f"Detected {len(bonds)} covalent bonds among {len(atoms)} atoms")
    return bonds


def _bonded_or_geminal(bonds: List[Tuple[int, int]]) -> Set[Tuple[int, int]]:
    """Pairs separated by one or two covalent bonds (1-2 and 1-3 pairs)."""
    neighbors: Dict[int, Set[int]] = defaultdict(set)
    for i, j in bonds:
        neighbors[i].add(j)
        neighbors[j].add(i)

    excluded = set(bonds)
    for partners in neighbors.values():
        for i in partners:
            for j in partners:
                if i < j:
                    excluded.add((i, j))
    return excluded


def detect_clashes(
    atoms: Sequence[Atom],
    overlap: Optional[float] = None,
    bond_tolerance: Optional[float] = None,
) -> List[Tuple[int, int]]:
    """Find atom pairs with overlapping van der Waals spheres.

    Pairs connected through one or two covalent bonds are not clashes.

    Args:
        atoms: Atoms of a structure.
        overlap: Allowed overlap of the van der Waals spheres (Å). Defaults
            to the ``clash_overlap`` setting. A negative value demands a gap
            between the spheres.
        bond_tolerance: Tolerance used to detect the covalent bonds.

    Returns:
        Sorted list of (i, j) atom index pairs with i < j.
    """
    if overlap is None:
        overlap = get_settings().clash_overlap

    indices, elements = _known_atoms(atoms)
    if len(indices) < 2:
        return []

    coords = np.stack([atoms[i].coords for i in indices]).astype(np.float64)
    radii = van_der_waals_radii(elements)

    # A clashing pair is closer than the largest radius sum minus the overlap
    search_radius = 2.0 * MAX_VAN_DER_WAALS_RADIUS - overlap
    if search_radius <= 0.0:
        return []

    pairs = _candidate_pairs(coords, search_radius)
    if len(pairs) == 0:
        return []

    a, b = pairs[:, 0], pairs[:, 1]
    distances = np.linalg.norm(coords[a] - coords[b], axis=1)
    close = distances < radii[a] + radii[b] - overlap

    excluded = _bonded_or_geminal(detect_covalent_bonds(atoms, bond_tolerance))
    clashes = sorted(
        pair
        for pair in ((int(indices[i]), int(indices[j])) for i, j in pairs[close])
        if pair not in excluded
    )
    if clashes:
        logger.info(f"Found {len(clashes)} clashing atom pairs")
    return clashes
