"""Command-line interface for pdbelements.

Provides CLI commands for:
- Showing the properties of elements
- Guessing elements from standard atom names
- Dumping a property table
"""

import argparse
import logging
import sys
from typing import List, Optional

from pdbelements.assignment import guess_element
from pdbelements.config import Settings, configure_settings, get_settings
from pdbelements.constants.elements import ELEMENTS, PLACEHOLDER_VDW_ELEMENTS
from pdbelements.properties import Property, element_properties, lookup
from pdbelements.utils import format_table, setup_logging

logger = logging.getLogger("pdbelements.cli")

PROPERTY_CHOICES = {
    "number": Property.ATOMIC_NUMBER,
    "mass": Property.ATOMIC_MASS,
    "covalent": Property.COVALENT_RADIUS,
    "vdw": Property.VAN_DER_WAALS_RADIUS,
}


def load_settings(args: argparse.Namespace) -> Settings:
    """Settings from --config, or from the environment.

    Settings loaded from a file are installed process-wide, so diagnostics
    and contact detection use them too.
    """
    if args.config:
        settings = Settings.from_yaml(args.config)
        configure_settings(settings)
        return settings
    return get_settings()


def configure(args: argparse.Namespace) -> Settings:
    settings = load_settings(args)
    level = logging.DEBUG if args.verbose else settings.log_level
    setup_logging(level=level, log_file=settings.log_file)
    return settings


def cmd_info(args: argparse.Namespace) -> int:
    """Show all properties of the given elements."""
    configure(args)

    rows = []
    missing = []
    for symbol in args.symbols:
        props = element_properties(symbol.upper())
        if props is None:
            missing.append(symbol)
            continue
        vdw = f"{props.van_der_waals_radius:.2f}"
        if props.symbol in PLACEHOLDER_VDW_ELEMENTS:
            vdw += "*"
        rows.append((
            props.symbol,
            props.atomic_number,
            f"{props.atomic_mass:.3f}",
            f"{props.covalent_radius:.2f}",
            vdw,
        ))

    if rows:
        print(format_table(("element", "number", "mass", "covalent", "vdw"), rows))
        if any(row[4].endswith("*") for row in rows):
            print("* placeholder van der Waals radius")

    for symbol in missing:
        logger.error(f"Unknown element: {symbol!r}")
    return 1 if missing else 0


def cmd_guess(args: argparse.Namespace) -> int:
    """Guess elements from atom names."""
    configure(args)

    rows = [(name, guess_element(name) or "?") for name in args.names]
    print(format_table(("atom", "element"), rows))
    return 0


def cmd_table(args: argparse.Namespace) -> int:
    """Dump one property for every known element."""
    configure(args)

    prop = PROPERTY_CHOICES[args.property]
    rows = [(symbol, lookup(prop, symbol).value) for symbol in ELEMENTS]
    print(format_table(("element", prop.value), rows))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="pdbelements",
        description="Element properties and element assignment for PDB atoms",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to YAML configuration file",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show properties of elements",
    )
    info_parser.add_argument(
        "symbols",
        nargs="+",
        help="Element symbols (case-insensitive)",
    )
    info_parser.set_defaults(func=cmd_info)

    # Guess command
    guess_parser = subparsers.add_parser(
        "guess",
        help="Guess elements from standard atom names",
    )
    guess_parser.add_argument(
        "names",
        nargs="+",
        help="Atom names, matched exactly (e.g. CA OXT \"O5'\")",
    )
    guess_parser.set_defaults(func=cmd_guess)

    # Table command
    table_parser = subparsers.add_parser(
        "table",
        help="Print a property table",
    )
    table_parser.add_argument(
        "-p", "--property",
        choices=sorted(PROPERTY_CHOICES),
        default="covalent",
        help="Property to print",
    )
    table_parser.set_defaults(func=cmd_table)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
