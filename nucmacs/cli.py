"""
MACS Calculator Command Line
============================

Download an evaluated cross section from the IAEA EXFOR/ENDF service and
print its Maxwellian-averaged cross section at several temperatures.

Usage:
    # Mo-94 neutron capture, JEFF-3.1, default temperatures (8,25,30,90 keV)
    nucmacs-macs --target Mo-94 --reaction n,g --library JEFF-3.1 --mass 94

    # Custom temperatures, save table and plot
    nucmacs-macs --target Zr-92 --reaction n,g --library ENDF-B-VIII.1 \\
        --mass 92 --temperatures 5,10,30 --csv zr92.csv --plot zr92.png

    # Everything from a YAML run file (command-line options override it)
    nucmacs-macs --config runs/mo94.yaml
"""

import argparse
import logging
import sys
from typing import List, Optional

from nucmacs.config import (
    DEFAULT_TEMPERATURES_KEV,
    MacsRunConfig,
    load_run_config,
    parse_temperatures,
)
from nucmacs.errors import MacsError
from nucmacs.exfor import ExforClient
from nucmacs.physics import compute_macs_for_dataset
from nucmacs.report import format_dataset_summary, format_macs_table

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='nucmacs-macs',
        description="Compute Maxwellian-averaged cross sections from EXFOR/ENDF data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nucmacs-macs --target Mo-94 --reaction n,g --library JEFF-3.1 --mass 94
  nucmacs-macs --config runs/mo94.yaml --temperatures 30
""",
    )
    parser.add_argument('--config', type=str, default=None,
                        help='YAML run file (target, reaction, library, atomic_mass, ...)')
    parser.add_argument('--target', type=str, default=None,
                        help='Target nuclide, e.g. Mo-94')
    parser.add_argument('--reaction', type=str, default=None,
                        help='Reaction, e.g. n,g')
    parser.add_argument('--library', type=str, default=None,
                        help='Library name exactly as listed by EXFOR, e.g. JEFF-3.1')
    parser.add_argument('--mass', type=float, default=None,
                        help='Atomic mass number A of the target')
    parser.add_argument('--temperatures', type=parse_temperatures, default=None,
                        help='Comma-separated kT values in keV '
                             f'(default: {",".join(f"{t:g}" for t in DEFAULT_TEMPERATURES_KEV)})')
    parser.add_argument('--base-url', type=str, default=None,
                        help='EXFOR web-service root URL')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Request timeout in seconds (default: none)')
    parser.add_argument('--csv', type=str, default=None,
                        help='Write the MACS table to this CSV file')
    parser.add_argument('--plot', type=str, default=None,
                        help='Save a cross-section/MACS figure to this file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Debug logging')
    return parser


def resolve_run_config(args: argparse.Namespace, parser: argparse.ArgumentParser) -> MacsRunConfig:
    """Merge the YAML run file (if any) with command-line overrides."""
    if args.config:
        try:
            config = load_run_config(args.config)
        except (OSError, ValueError) as e:
            parser.error(str(e))
        for attr, value in [('target', args.target), ('reaction', args.reaction),
                            ('library', args.library), ('atomic_mass', args.mass)]:
            if value is not None:
                setattr(config, attr, value)
        config.atomic_mass = float(config.atomic_mass)
    else:
        missing = [name for name, value in [('--target', args.target),
                                            ('--reaction', args.reaction),
                                            ('--library', args.library),
                                            ('--mass', args.mass)] if value is None]
        if missing:
            parser.error(f"missing required options: {', '.join(missing)} (or use --config)")
        config = MacsRunConfig(args.target, args.reaction, args.library, args.mass)

    if args.temperatures is not None:
        config.temperatures_keV = tuple(args.temperatures)
    if args.base_url is not None:
        config.exfor.base_url = args.base_url
    if args.timeout is not None:
        config.exfor.timeout = args.timeout
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s: %(message)s',
    )

    config = resolve_run_config(args, parser)
    client = ExforClient(config.exfor)

    print(f"Downloading {config.library} data for {config.target}({config.reaction})...")
    try:
        dataset = client.resolve_dataset(config.target, config.reaction, config.library)
        print(format_dataset_summary(dataset))
        table = compute_macs_for_dataset(dataset, config.atomic_mass, config.temperatures_keV)
    except MacsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print()
    print(format_macs_table(
        table, title=f"MACS Calculation for {config.library} {config.target}({config.reaction})"
    ))

    try:
        if args.csv:
            table.to_csv(args.csv, index=False)
            logger.info(f"MACS table written to {args.csv}")

        if args.plot:
            from nucmacs.visualization import MacsFigure

            fig = MacsFigure(title=f"{config.target}({config.reaction}) {config.library}")
            try:
                fig.add_dataset(dataset)
                fig.add_macs(table, label=f"A = {config.atomic_mass:g}")
                fig.save(args.plot)
            finally:
                fig.close()
            logger.info(f"Figure saved to {args.plot}")
    except OSError as e:
        print(f"ERROR: Could not write output: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
