"""Full reference tables: every element against every property."""

import pytest

from pdbelements.constants.elements import ELEMENTS
from pdbelements.properties import (
    atomic_mass,
    atomic_number,
    covalent_radius,
    van_der_waals_radius,
)

# (symbol, atomic number, atomic mass, covalent radius, van der Waals radius)
REFERENCE_ROWS = [
    ("C", 6, 12.011, 0.68, 1.70),
    ("N", 7, 14.007, 0.68, 1.55),
    ("O", 8, 15.999, 0.68, 1.52),
    ("P", 15, 30.974, 1.05, 1.80),
    ("S", 16, 32.066, 1.02, 1.80),
    ("H", 1, 1.008, 0.23, 1.09),
    ("AC", 89, 227.000, 2.15, 2.00),
    ("AG", 47, 107.868, 1.45, 1.72),
    ("AL", 13, 26.982, 1.21, 2.00),
    ("AM", 95, 243.000, 1.80, 2.00),
    ("AR", 18, 39.948, 1.51, 1.88),
    ("AS", 33, 74.922, 1.21, 1.85),
    ("AT", 85, 210.000, 1.21, 2.00),
    ("AU", 79, 196.967, 1.36, 1.66),
    ("B", 5, 10.811, 0.83, 2.00),
    ("BA", 56, 137.327, 2.15, 2.00),
    ("BE", 4, 9.012, 0.96, 2.00),
    ("BH", 107, 264.000, 1.50, 2.00),
    ("BI", 83, 208.980, 1.48, 2.00),
    ("BK", 97, 247.000, 1.54, 2.00),
    ("BR", 35, 79.904, 1.21, 1.85),
    ("CA", 20, 40.078, 1.76, 2.00),
    ("CD", 48, 112.411, 1.44, 1.58),
    ("CE", 58, 140.116, 2.04, 2.00),
    ("CF", 98, 251.000, 1.83, 2.00),
    ("CL", 17, 35.453, 0.99, 1.75),
    ("CM", 96, 247.000, 1.69, 2.00),
    ("CO", 27, 58.933, 1.26, 2.00),
    ("CR", 24, 51.996, 1.39, 2.00),
    ("CS", 55, 132.905, 2.44, 2.00),
    ("CU", 29, 63.546, 1.32, 1.40),
    ("DB", 105, 262.000, 1.50, 2.00),
    ("DS", 110, 271.000, 1.50, 2.00),
    ("DY", 66, 162.500, 1.92, 2.00),
    ("ER", 68, 167.260, 1.89, 2.00),
    ("ES", 99, 252.000, 1.50, 2.00),
    ("EU", 63, 151.964, 1.98, 2.00),
    ("F", 9, 18.998, 0.64, 1.47),
    ("FE", 26, 55.845, 1.52, 2.00),
    ("FM", 100, 257.000, 1.50, 2.00),
    ("FR", 87, 223.000, 2.60, 2.00),
    ("GA", 31, 69.723, 1.22, 1.87),
    ("GD", 64, 157.250, 1.96, 2.00),
    ("GE", 32, 72.610, 1.17, 2.00),
    ("HE", 2, 4.003, 1.50, 1.40),
    ("HF", 72, 178.490, 1.75, 2.00),
    ("HG", 80, 200.590, 1.32, 1.55),
    ("HO", 67, 164.930, 1.92, 2.00),
    ("HS", 108, 269.000, 1.50, 2.00),
    ("I", 53, 126.904, 1.40, 1.98),
    ("IN", 49, 114.818, 1.42, 1.93),
    ("IR", 77, 192.217, 1.41, 2.00),
    ("K", 19, 39.098, 2.03, 2.75),
    ("KR", 36, 83.800, 1.50, 2.02),
    ("LA", 57, 138.906, 2.07, 2.00),
    ("LI", 3, 6.941, 1.28, 1.82),
    ("LR", 103, 262.000, 1.50, 2.00),
    ("LU", 71, 174.967, 1.87, 2.00),
    ("MD", 101, 258.000, 1.50, 2.00),
    ("MG", 12, 24.305, 1.41, 1.73),
    ("MN", 25, 54.938, 1.61, 2.00),
    ("MO", 42, 95.940, 1.54, 2.00),
    ("MT", 109, 268.000, 1.50, 2.00),
    ("NA", 11, 22.991, 1.66, 2.27),
    ("NB", 41, 92.906, 1.64, 2.00),
    ("ND", 60, 144.240, 2.01, 2.00),
    ("NE", 10, 20.180, 1.50, 1.54),
    ("NI", 28, 58.693, 1.24, 1.63),
    ("NO", 102, 259.000, 1.50, 2.00),
    ("NP", 93, 237.000, 1.90, 2.00),
    ("OS", 76, 190.230, 1.44, 2.00),
    ("PA", 91, 231.036, 2.00, 2.00),
    ("PB", 82, 207.200, 1.46, 2.02),
    ("PD", 46, 106.420, 1.39, 1.63),
    ("PM", 61, 145.000, 1.99, 2.00),
    ("PO", 84, 210.000, 1.40, 2.00),
    ("PR", 59, 140.908, 2.03, 2.00),
    ("PT", 78, 195.078, 1.36, 1.72),
    ("PU", 94, 244.000, 1.87, 2.00),
    ("RA", 88, 226.000, 2.21, 2.00),
    ("RB", 37, 85.468, 2.20, 2.00),
    ("RE", 75, 186.207, 1.51, 2.00),
    ("RF", 104, 261.000, 1.50, 2.00),
    ("RH", 45, 102.906, 1.42, 2.00),
    ("RN", 86, 222.000, 1.50, 2.00),
    ("RU", 44, 101.070, 1.46, 2.00),
    ("SB", 51, 121.760, 1.39, 2.00),
    ("SC", 21, 44.956, 1.70, 2.00),
    ("SE", 34, 78.960, 1.22, 1.90),
    ("SG", 106, 266.000, 1.50, 2.00),
    ("SI", 14, 28.086, 1.20, 2.10),
    ("SM", 62, 150.360, 1.98, 2.00),
    ("SN", 50, 118.710, 1.39, 2.17),
    ("SR", 38, 87.620, 1.95, 2.00),
    ("TA", 73, 180.948, 1.70, 2.00),
    ("TB", 65, 158.925, 1.94, 2.00),
    ("TC", 43, 98.000, 1.47, 2.00),
    ("TE", 52, 127.600, 1.47, 2.06),
    ("TH", 90, 232.038, 2.06, 2.00),
    ("TI", 22, 47.867, 1.60, 2.00),
    ("TL", 81, 204.383, 1.45, 1.96),
    ("TM", 69, 168.934, 1.90, 2.00),
    ("U", 92, 238.029, 1.96, 1.86),
    ("V", 23, 50.942, 1.53, 2.00),
    ("W", 74, 183.840, 1.62, 2.00),
    ("XE", 54, 131.290, 1.50, 2.16),
    ("Y", 39, 88.906, 1.90, 2.00),
    ("YB", 70, 173.040, 1.87, 2.00),
    ("ZN", 30, 65.390, 1.22, 1.39),
    ("ZR", 40, 91.224, 1.75, 2.00),
]


def test_reference_covers_vocabulary():
    symbols = [row[0] for row in REFERENCE_ROWS]
    assert len(symbols) == 110
    assert sorted(symbols) == sorted(ELEMENTS)


class TestReferenceTables:
    """Each tabulated value is returned exactly, without diagnostics."""

    @pytest.mark.parametrize("symbol,number,mass,covalent,vdw", REFERENCE_ROWS)
    def test_row(self, collector, symbol, number, mass, covalent, vdw):
        assert atomic_number(symbol, sink=collector) == number
        assert atomic_mass(symbol, sink=collector) == mass
        assert covalent_radius(symbol, sink=collector) == covalent
        assert van_der_waals_radius(symbol, sink=collector) == vdw
        assert collector.messages == []
