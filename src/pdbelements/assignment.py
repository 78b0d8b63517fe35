"""Element assignment for atoms of macromolecular structures.

Legacy PDB files often leave the element column blank. For such atoms the
element is guessed from the atom name, which only works for the standard
atoms of proteins and nucleic acids. An empty string means the element
could not be determined; it is a regular result, not an error.
"""

from __future__ import annotations

from typing import Iterable, List, Protocol

from pdbelements.constants.atoms import STANDARD_ATOM_ELEMENTS

UNKNOWN_ELEMENT = ""


class AtomLike(Protocol):
    """Anything with an atom name and an (optionally empty) element symbol."""
    name: str
    element: str


def guess_element(atom_name: str) -> str:
    """Guess an element symbol from a standard atom name.

    Only exact names are recognized ('CA', 'OXT', "O5'", ...); padded,
    hydrogen and ligand atom names give an empty string.
    """
    return STANDARD_ATOM_ELEMENTS.get(atom_name, UNKNOWN_ELEMENT)


def assign_element(atom: AtomLike) -> str:
    """Given an atom, extract or guess its element symbol.

    An explicit element is returned verbatim, without checking it against
    the property tables.
    """
    if atom.element:
        return atom.element
    return guess_element(atom.name)


def assign_elements(atoms: Iterable[AtomLike]) -> List[str]:
    """Assign elements to a sequence of atoms."""
    return [assign_element(atom) for atom in atoms]
