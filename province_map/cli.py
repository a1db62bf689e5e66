"""Province map inspection - CLI entry point.

Reads map state files, province definition tables and region bitmaps and
prints what was extracted from them.

Usage:
    python -m province_map state <state_file> [--with-id]
    python -m province_map definitions <definition_file>
    python -m province_map image <region_bitmap> [-d DEFINITION_FILE]

Examples:
    python -m province_map state "history/states/5-Migus Magus.txt"
    python -m province_map definitions map/definition.csv
    python -m province_map image map/provinces.bmp -d map/definition.csv
"""

import sys
import argparse
import logging

from .definitions import load_province_definitions
from .errors import ProvinceMapError
from .map_image import load_region_image
from .state_file import load_state_definition, load_state_provinces

logger = logging.getLogger(__name__)


def _run_state(args) -> int:
    if args.with_id:
        state = load_state_definition(args.path)
        print(f"id: {state.id if state.id is not None else '-'}")
        provinces = state.provinces
    else:
        provinces = load_state_provinces(args.path)
    print(' '.join(str(p) for p in provinces))
    return 0


def _run_definitions(args) -> int:
    definitions = load_province_definitions(args.path)
    for (r, g, b), province_id in definitions.items():
        print(f"{province_id};{r};{g};{b}")
    print(f"\n{len(definitions)} definition(s)", file=sys.stderr)
    return 0


def _run_image(args) -> int:
    image = load_region_image(args.path)
    print(f"{image.width}x{image.height} RGB")
    if args.definitions:
        definitions = load_province_definitions(args.definitions)
        counts = image.province_pixel_counts(definitions)
        for province_id in sorted(counts):
            print(f"  {province_id}: {counts[province_id]} px")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='province-map',
        description='Extract provinces from map state files, definition tables and region bitmaps.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    commands = parser.add_subparsers(dest='command', required=True)

    state = commands.add_parser('state', help='Print the provinces of a state file.')
    state.add_argument('path', help='Path to the state definition text file.')
    state.add_argument(
        '--with-id',
        action='store_true',
        help='Also print the state id.',
    )
    state.set_defaults(handler=_run_state)

    definitions = commands.add_parser('definitions', help='Print a province definition table.')
    definitions.add_argument('path', help='Path to the definition table (id;r;g;b per line).')
    definitions.set_defaults(handler=_run_definitions)

    image = commands.add_parser('image', help='Describe a region bitmap.')
    image.add_argument('path', help='Path to the 8-bit RGB region bitmap.')
    image.add_argument(
        '-d', '--definitions',
        help='Definition table used to count pixels per province.',
    )
    image.set_defaults(handler=_run_image)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    try:
        return args.handler(args)
    except (ProvinceMapError, OSError) as e:
        logger.debug("Failed on %s", args.path, exc_info=True)
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
