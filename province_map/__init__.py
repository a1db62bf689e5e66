"""
Province Map - Package.

Modules:
    script_parser  - Comment stripping, block matching, key/value and integer array scanning
    state_file     - state -> provinces extraction from map state files
    definitions    - Province definition table (color -> province id)
    map_image      - Region bitmap loading via Pillow
    errors         - Exception types
    constants      - Grammar characters, key names, file layout constants
    cli            - Command-line entry point
"""

from .errors import (
    ProvinceMapError,
    FormatError,
    MissingKeyError,
    UnsupportedEncodingError,
)
from .script_parser import (
    ScriptScanner,
    strip_comments,
    match_block,
    scan_key_values,
    parse_uint32_array,
    parse_uint,
)
from .state_file import (
    StateDefinition,
    resolve_key_path,
    extract_state_provinces,
    parse_state_definition,
    load_state_provinces,
    load_state_definition,
)
from .definitions import parse_province_definitions, load_province_definitions
from .map_image import MapImage, load_region_image

__all__ = [
    'ProvinceMapError', 'FormatError', 'MissingKeyError', 'UnsupportedEncodingError',
    'ScriptScanner', 'strip_comments', 'match_block', 'scan_key_values',
    'parse_uint32_array', 'parse_uint',
    'StateDefinition', 'resolve_key_path', 'extract_state_provinces',
    'parse_state_definition', 'load_state_provinces', 'load_state_definition',
    'parse_province_definitions', 'load_province_definitions',
    'MapImage', 'load_region_image',
]
