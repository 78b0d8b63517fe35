"""Pytest configuration and fixtures for pdbelements tests."""

from __future__ import annotations

import logging
from typing import Dict, Generator, List, Tuple

import numpy as np
import pytest

from pdbelements.config import reset_settings
from pdbelements.diagnostics import DiagnosticCollector
from pdbelements.structure import Atom, Residue


# =============================================================================
# Standard Residue Fixtures
# =============================================================================


@pytest.fixture
def protein_residue_atoms() -> Dict[str, Tuple[str, ...]]:
    """Heavy atoms of the 20 standard amino acids."""
    return {
        "ALA": ("N", "CA", "C", "O", "CB"),
        "ARG": ("N", "CA", "C", "O", "CB", "CG", "CD", "NE", "CZ", "NH1", "NH2"),
        "ASN": ("N", "CA", "C", "O", "CB", "CG", "OD1", "ND2"),
        "ASP": ("N", "CA", "C", "O", "CB", "CG", "OD1", "OD2"),
        "CYS": ("N", "CA", "C", "O", "CB", "SG"),
        "GLN": ("N", "CA", "C", "O", "CB", "CG", "CD", "OE1", "NE2"),
        "GLU": ("N", "CA", "C", "O", "CB", "CG", "CD", "OE1", "OE2"),
        "GLY": ("N", "CA", "C", "O"),
        "HIS": ("N", "CA", "C", "O", "CB", "CG", "ND1", "CD2", "CE1", "NE2"),
        "ILE": ("N", "CA", "C", "O", "CB", "CG1", "CG2", "CD1"),
        "LEU": ("N", "CA", "C", "O", "CB", "CG", "CD1", "CD2"),
        "LYS": ("N", "CA", "C", "O", "CB", "CG", "CD", "CE", "NZ"),
        "MET": ("N", "CA", "C", "O", "CB", "CG", "SD", "CE"),
        "PHE": ("N", "CA", "C", "O", "CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ"),
        "PRO": ("N", "CA", "C", "O", "CB", "CG", "CD"),
        "SER": ("N", "CA", "C", "O", "CB", "OG"),
        "THR": ("N", "CA", "C", "O", "CB", "OG1", "CG2"),
        "TRP": ("N", "CA", "C", "O", "CB", "CG", "CD1", "CD2", "NE1", "CE2",
                "CE3", "CZ2", "CZ3", "CH2"),
        "TYR": ("N", "CA", "C", "O", "CB", "CG", "CD1", "CD2", "CE1", "CE2",
                "CZ", "OH"),
        "VAL": ("N", "CA", "C", "O", "CB", "CG1", "CG2"),
    }


@pytest.fixture
def rna_residue_atoms() -> Dict[str, Tuple[str, ...]]:
    """Heavy atoms of the four standard ribonucleotides."""
    backbone = (
        "P", "OP1", "OP2", "O5'", "C5'", "C4'", "O4'", "C3'", "O3'", "C2'", "O2'", "C1'",
    )
    return {
        "A": backbone + ("N9", "C8", "N7", "C5", "C6", "N6", "N1", "C2", "N3", "C4"),
        "C": backbone + ("N1", "C2", "O2", "N3", "C4", "N4", "C5", "C6"),
        "G": backbone + ("N9", "C8", "N7", "C5", "C6", "O6", "N1", "C2", "N2", "N3", "C4"),
        "U": backbone + ("N1", "C2", "O2", "N3", "C4", "O4", "C5", "C6"),
    }


@pytest.fixture
def alanine() -> Residue:
    """Alanine from a legacy PDB file, element column left blank."""
    coords = {
        "N": [0.000, 0.000, 0.000],
        "CA": [1.458, 0.000, 0.000],
        "C": [2.009, 1.420, 0.000],
        "O": [1.246, 2.380, 0.000],
        "CB": [1.986, -0.728, -1.232],
    }
    atoms = {
        name: Atom(name=name, element="", coords=np.array(xyz), serial=i + 1)
        for i, (name, xyz) in enumerate(coords.items())
    }
    return Residue(name="ALA", seq_id=1, atoms=atoms)


@pytest.fixture
def alanine_atoms(alanine: Residue) -> List[Atom]:
    """Atoms of the alanine fixture in file order (N, CA, C, O, CB)."""
    return list(alanine.atoms.values())


# =============================================================================
# Diagnostics Fixtures
# =============================================================================


@pytest.fixture
def collector() -> DiagnosticCollector:
    """Fresh diagnostic sink."""
    return DiagnosticCollector()


@pytest.fixture(autouse=True)
def reset_state() -> Generator[None, None, None]:
    """Drop cached settings and CLI log handlers between tests."""
    reset_settings()
    yield
    reset_settings()
    package_logger = logging.getLogger("pdbelements")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.setLevel(logging.NOTSET)


# =============================================================================
# Helper Fixtures
# =============================================================================


@pytest.fixture
def assert_arrays_equal():
    """Fixture providing array comparison helper."""
    def _assert_arrays_equal(a: np.ndarray, b: np.ndarray, rtol: float = 1e-5):
        np.testing.assert_allclose(a, b, rtol=rtol)
    return _assert_arrays_equal
