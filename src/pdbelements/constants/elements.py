"""
Element properties and constants.

Periodic table data for the 110 elements from hydrogen to darmstadtium:
atomic numbers, atomic masses, covalent radii and van der Waals radii, as
suggested by the Cambridge Structural Database. Values are transcribed
verbatim and must not be "corrected" in place; downstream bond and contact
detection depends on the exact numbers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, FrozenSet, Mapping

# =============================================================================
# Element Vocabulary
# =============================================================================

# Upper-case element symbols, ordered by atomic number
ELEMENTS: Final[tuple[str, ...]] = (
    "H", "HE", "LI", "BE", "B", "C", "N", "O", "F", "NE", "NA", "MG", "AL",
    "SI", "P", "S", "CL", "AR", "K", "CA", "SC", "TI", "V", "CR", "MN",
    "FE", "CO", "NI", "CU", "ZN", "GA", "GE", "AS", "SE", "BR", "KR", "RB",
    "SR", "Y", "ZR", "NB", "MO", "TC", "RU", "RH", "PD", "AG", "CD", "IN",
    "SN", "SB", "TE", "I", "XE", "CS", "BA", "LA", "CE", "PR", "ND", "PM",
    "SM", "EU", "GD", "TB", "DY", "HO", "ER", "TM", "YB", "LU", "HF", "TA",
    "W", "RE", "OS", "IR", "PT", "AU", "HG", "TL", "PB", "BI", "PO", "AT",
    "RN", "FR", "RA", "AC", "TH", "PA", "U", "NP", "PU", "AM", "CM", "BK",
    "CF", "ES", "FM", "MD", "NO", "LR", "RF", "DB", "SG", "BH", "HS", "MT",
    "DS",
)

NUM_ELEMENTS: Final[int] = len(ELEMENTS)

# =============================================================================
# Atomic Numbers
# =============================================================================

ATOMIC_NUMBERS: Final[Mapping[str, int]] = MappingProxyType({
    # Period 1
    "H": 1,
    "HE": 2,

    # Period 2
    "LI": 3,
    "BE": 4,
    "B": 5,
    "C": 6,
    "N": 7,
    "O": 8,
    "F": 9,
    "NE": 10,

    # Period 3
    "NA": 11,
    "MG": 12,
    "AL": 13,
    "SI": 14,
    "P": 15,
    "S": 16,
    "CL": 17,
    "AR": 18,

    # Period 4
    "K": 19,
    "CA": 20,
    "SC": 21,
    "TI": 22,
    "V": 23,
    "CR": 24,
    "MN": 25,
    "FE": 26,
    "CO": 27,
    "NI": 28,
    "CU": 29,
    "ZN": 30,
    "GA": 31,
    "GE": 32,
    "AS": 33,
    "SE": 34,
    "BR": 35,
    "KR": 36,

    # Period 5
    "RB": 37,
    "SR": 38,
    "Y": 39,
    "ZR": 40,
    "NB": 41,
    "MO": 42,
    "TC": 43,
    "RU": 44,
    "RH": 45,
    "PD": 46,
    "AG": 47,
    "CD": 48,
    "IN": 49,
    "SN": 50,
    "SB": 51,
    "TE": 52,
    "I": 53,
    "XE": 54,

    # Period 6
    "CS": 55,
    "BA": 56,
    "LA": 57,
    "CE": 58,
    "PR": 59,
    "ND": 60,
    "PM": 61,
    "SM": 62,
    "EU": 63,
    "GD": 64,
    "TB": 65,
    "DY": 66,
    "HO": 67,
    "ER": 68,
    "TM": 69,
    "YB": 70,
    "LU": 71,
    "HF": 72,
    "TA": 73,
    "W": 74,
    "RE": 75,
    "OS": 76,
    "IR": 77,
    "PT": 78,
    "AU": 79,
    "HG": 80,
    "TL": 81,
    "PB": 82,
    "BI": 83,
    "PO": 84,
    "AT": 85,
    "RN": 86,

    # Period 7
    "FR": 87,
    "RA": 88,
    "AC": 89,
    "TH": 90,
    "PA": 91,
    "U": 92,
    "NP": 93,
    "PU": 94,
    "AM": 95,
    "CM": 96,
    "BK": 97,
    "CF": 98,
    "ES": 99,
    "FM": 100,
    "MD": 101,
    "NO": 102,
    "LR": 103,
    "RF": 104,
    "DB": 105,
    "SG": 106,
    "BH": 107,
    "HS": 108,
    "MT": 109,
    "DS": 110,
})

# =============================================================================
# Atomic Masses (g/mol)
# =============================================================================

ATOMIC_MASSES: Final[Mapping[str, float]] = MappingProxyType({
    # Period 1
    "H": 1.008,
    "HE": 4.003,

    # Period 2
    "LI": 6.941,
    "BE": 9.012,
    "B": 10.811,
    "C": 12.011,
    "N": 14.007,
    "O": 15.999,
    "F": 18.998,
    "NE": 20.180,

    # Period 3
    "NA": 22.991,
    "MG": 24.305,
    "AL": 26.982,
    "SI": 28.086,
    "P": 30.974,
    "S": 32.066,
    "CL": 35.453,
    "AR": 39.948,

    # Period 4
    "K": 39.098,
    "CA": 40.078,
    "SC": 44.956,
    "TI": 47.867,
    "V": 50.942,
    "CR": 51.996,
    "MN": 54.938,
    "FE": 55.845,
    "CO": 58.933,
    "NI": 58.693,
    "CU": 63.546,
    "ZN": 65.390,
    "GA": 69.723,
    "GE": 72.610,
    "AS": 74.922,
    "SE": 78.960,
    "BR": 79.904,
    "KR": 83.800,

    # Period 5
    "RB": 85.468,
    "SR": 87.620,
    "Y": 88.906,
    "ZR": 91.224,
    "NB": 92.906,
    "MO": 95.940,
    "TC": 98.000,
    "RU": 101.070,
    "RH": 102.906,
    "PD": 106.420,
    "AG": 107.868,
    "CD": 112.411,
    "IN": 114.818,
    "SN": 118.710,
    "SB": 121.760,
    "TE": 127.600,
    "I": 126.904,
    "XE": 131.290,

    # Period 6
    "CS": 132.905,
    "BA": 137.327,
    "LA": 138.906,
    "CE": 140.116,
    "PR": 140.908,
    "ND": 144.240,
    "PM": 145.000,
    "SM": 150.360,
    "EU": 151.964,
    "GD": 157.250,
    "TB": 158.925,
    "DY": 162.500,
    "HO": 164.930,
    "ER": 167.260,
    "TM": 168.934,
    "YB": 173.040,
    "LU": 174.967,
    "HF": 178.490,
    "TA": 180.948,
    "W": 183.840,
    "RE": 186.207,
    "OS": 190.230,
    "IR": 192.217,
    "PT": 195.078,
    "AU": 196.967,
    "HG": 200.590,
    "TL": 204.383,
    "PB": 207.200,
    "BI": 208.980,
    "PO": 210.000,
    "AT": 210.000,
    "RN": 222.000,

    # Period 7
    "FR": 223.000,
    "RA": 226.000,
    "AC": 227.000,
    "TH": 232.038,
    "PA": 231.036,
    "U": 238.029,
    "NP": 237.000,
    "PU": 244.000,
    "AM": 243.000,
    "CM": 247.000,
    "BK": 247.000,
    "CF": 251.000,
    "ES": 252.000,
    "FM": 257.000,
    "MD": 258.000,
    "NO": 259.000,
    "LR": 262.000,
    "RF": 261.000,
    "DB": 262.000,
    "SG": 266.000,
    "BH": 264.000,
    "HS": 269.000,
    "MT": 268.000,
    "DS": 271.000,
})

# =============================================================================
# Covalent Radii (Å)
# =============================================================================

# For determining covalent bonds based on distance.
# Elements without tabulated data carry 1.50.
COVALENT_RADII: Final[Mapping[str, float]] = MappingProxyType({
    # Period 1
    "H": 0.23,
    "HE": 1.50,

    # Period 2
    "LI": 1.28,
    "BE": 0.96,
    "B": 0.83,
    "C": 0.68,
    "N": 0.68,
    "O": 0.68,
    "F": 0.64,
    "NE": 1.50,

    # Period 3
    "NA": 1.66,
    "MG": 1.41,
    "AL": 1.21,
    "SI": 1.20,
    "P": 1.05,
    "S": 1.02,
    "CL": 0.99,
    "AR": 1.51,

    # Period 4
    "K": 2.03,
    "CA": 1.76,
    "SC": 1.70,
    "TI": 1.60,
    "V": 1.53,
    "CR": 1.39,
    "MN": 1.61,
    "FE": 1.52,
    "CO": 1.26,
    "NI": 1.24,
    "CU": 1.32,
    "ZN": 1.22,
    "GA": 1.22,
    "GE": 1.17,
    "AS": 1.21,
    "SE": 1.22,
    "BR": 1.21,
    "KR": 1.50,

    # Period 5
    "RB": 2.20,
    "SR": 1.95,
    "Y": 1.90,
    "ZR": 1.75,
    "NB": 1.64,
    "MO": 1.54,
    "TC": 1.47,
    "RU": 1.46,
    "RH": 1.42,
    "PD": 1.39,
    "AG": 1.45,
    "CD": 1.44,
    "IN": 1.42,
    "SN": 1.39,
    "SB": 1.39,
    "TE": 1.47,
    "I": 1.40,
    "XE": 1.50,

    # Period 6
    "CS": 2.44,
    "BA": 2.15,
    "LA": 2.07,
    "CE": 2.04,
    "PR": 2.03,
    "ND": 2.01,
    "PM": 1.99,
    "SM": 1.98,
    "EU": 1.98,
    "GD": 1.96,
    "TB": 1.94,
    "DY": 1.92,
    "HO": 1.92,
    "ER": 1.89,
    "TM": 1.90,
    "YB": 1.87,
    "LU": 1.87,
    "HF": 1.75,
    "TA": 1.70,
    "W": 1.62,
    "RE": 1.51,
    "OS": 1.44,
    "IR": 1.41,
    "PT": 1.36,
    "AU": 1.36,
    "HG": 1.32,
    "TL": 1.45,
    "PB": 1.46,
    "BI": 1.48,
    "PO": 1.40,
    "AT": 1.21,
    "RN": 1.50,

    # Period 7
    "FR": 2.60,
    "RA": 2.21,
    "AC": 2.15,
    "TH": 2.06,
    "PA": 2.00,
    "U": 1.96,
    "NP": 1.90,
    "PU": 1.87,
    "AM": 1.80,
    "CM": 1.69,
    "BK": 1.54,
    "CF": 1.83,
    "ES": 1.50,
    "FM": 1.50,
    "MD": 1.50,
    "NO": 1.50,
    "LR": 1.50,
    "RF": 1.50,
    "DB": 1.50,
    "SG": 1.50,
    "BH": 1.50,
    "HS": 1.50,
    "MT": 1.50,
    "DS": 1.50,
})

# =============================================================================
# Van der Waals Radii (Å)
# =============================================================================

# Used in clash and contact detection.
# NOTE: 2.00 is a placeholder for elements lacking a measured radius, not a
# physical value. It is kept as-is; see PLACEHOLDER_VDW_ELEMENTS.
VDW_RADII: Final[Mapping[str, float]] = MappingProxyType({
    # Period 1
    "H": 1.09,
    "HE": 1.40,

    # Period 2
    "LI": 1.82,
    "BE": 2.00,
    "B": 2.00,
    "C": 1.70,
    "N": 1.55,
    "O": 1.52,
    "F": 1.47,
    "NE": 1.54,

    # Period 3
    "NA": 2.27,
    "MG": 1.73,
    "AL": 2.00,
    "SI": 2.10,
    "P": 1.80,
    "S": 1.80,
    "CL": 1.75,
    "AR": 1.88,

    # Period 4
    "K": 2.75,
    "CA": 2.00,
    "SC": 2.00,
    "TI": 2.00,
    "V": 2.00,
    "CR": 2.00,
    "MN": 2.00,
    "FE": 2.00,
    "CO": 2.00,
    "NI": 1.63,
    "CU": 1.40,
    "ZN": 1.39,
    "GA": 1.87,
    "GE": 2.00,
    "AS": 1.85,
    "SE": 1.90,
    "BR": 1.85,
    "KR": 2.02,

    # Period 5
    "RB": 2.00,
    "SR": 2.00,
    "Y": 2.00,
    "ZR": 2.00,
    "NB": 2.00,
    "MO": 2.00,
    "TC": 2.00,
    "RU": 2.00,
    "RH": 2.00,
    "PD": 1.63,
    "AG": 1.72,
    "CD": 1.58,
    "IN": 1.93,
    "SN": 2.17,
    "SB": 2.00,
    "TE": 2.06,
    "I": 1.98,
    "XE": 2.16,

    # Period 6
    "CS": 2.00,
    "BA": 2.00,
    "LA": 2.00,
    "CE": 2.00,
    "PR": 2.00,
    "ND": 2.00,
    "PM": 2.00,
    "SM": 2.00,
    "EU": 2.00,
    "GD": 2.00,
    "TB": 2.00,
    "DY": 2.00,
    "HO": 2.00,
    "ER": 2.00,
    "TM": 2.00,
    "YB": 2.00,
    "LU": 2.00,
    "HF": 2.00,
    "TA": 2.00,
    "W": 2.00,
    "RE": 2.00,
    "OS": 2.00,
    "IR": 2.00,
    "PT": 1.72,
    "AU": 1.66,
    "HG": 1.55,
    "TL": 1.96,
    "PB": 2.02,
    "BI": 2.00,
    "PO": 2.00,
    "AT": 2.00,
    "RN": 2.00,

    # Period 7
    "FR": 2.00,
    "RA": 2.00,
    "AC": 2.00,
    "TH": 2.00,
    "PA": 2.00,
    "U": 1.86,
    "NP": 2.00,
    "PU": 2.00,
    "AM": 2.00,
    "CM": 2.00,
    "BK": 2.00,
    "CF": 2.00,
    "ES": 2.00,
    "FM": 2.00,
    "MD": 2.00,
    "NO": 2.00,
    "LR": 2.00,
    "RF": 2.00,
    "DB": 2.00,
    "SG": 2.00,
    "BH": 2.00,
    "HS": 2.00,
    "MT": 2.00,
    "DS": 2.00,
})

PLACEHOLDER_VDW_RADIUS: Final[float] = 2.00

PLACEHOLDER_VDW_ELEMENTS: Final[FrozenSet[str]] = frozenset(
    symbol for symbol, radius in VDW_RADII.items()
    if radius == PLACEHOLDER_VDW_RADIUS
)
