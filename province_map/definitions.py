"""
Province definition table parser.

The definition table maps each province color on the region bitmap to a
province id, one record per line:

    <id>;<red>;<green>;<blue>[;ignored...]
"""

import logging
from pathlib import Path
from typing import Dict, Tuple, Union

from .constants import (
    COLOR_COMPONENT_BITS, DEFINITION_MIN_FIELDS, DEFINITION_SEPARATOR,
    PROVINCE_ID_BITS, TEXT_ENCODING,
)
from .errors import FormatError
from .script_parser import parse_uint

logger = logging.getLogger(__name__)

ColorKey = Tuple[int, int, int]


def parse_province_definitions(text: str) -> Dict[ColorKey, int]:
    """Parse definition table text into a color -> province id mapping.

    Raises:
        FormatError: If a line has fewer than four fields, a field is not a
            valid number of its width, or two lines share the same color.
            `line` on the error is the 0-based record index.
    """
    definitions = {}
    first_seen = {}

    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()

    for idx, line in enumerate(lines):
        if line.endswith('\r'):
            line = line[:-1]
        fields = line.split(DEFINITION_SEPARATOR)
        if len(fields) < DEFINITION_MIN_FIELDS:
            raise FormatError("not enough fields", line=idx, token=line)

        province_id = parse_uint(fields[0], PROVINCE_ID_BITS, line=idx)
        color = tuple(parse_uint(f, COLOR_COMPONENT_BITS, line=idx) for f in fields[1:4])

        if color in definitions:
            raise FormatError(
                f"color {color} is already used by province "
                f"{definitions[color]} on line {first_seen[color]}",
                line=idx, token=line,
            )
        definitions[color] = province_id
        first_seen[color] = idx

    logger.debug("Parsed %d province definition(s)", len(definitions))
    return definitions


def load_province_definitions(path: Union[str, Path]) -> Dict[ColorKey, int]:
    """Read a definition table file and parse it."""
    logger.debug("Reading definition table %s", path)
    with open(path, 'r', encoding=TEXT_ENCODING) as f:
        text = f.read()
    return parse_province_definitions(text)
