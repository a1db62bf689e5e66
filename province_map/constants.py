"""
Province Map - Constants and Configuration

This module contains the constant values used throughout the package:
- Script grammar characters
- Key path of the state/provinces lookup
- Province definition table layout
- File encodings and accepted bitmap pixel modes
"""

# ======================================================================
# SCRIPT GRAMMAR
# ======================================================================

COMMENT_CHAR = '#'
BLOCK_OPEN = '{'
BLOCK_CLOSE = '}'
ASSIGNMENT_CHAR = '='

# ASCII whitespace only; str.isspace() would also accept unicode spaces
WHITESPACE = ' \t\n\r\f\v'

# ======================================================================
# STATE FILE KEY PATH
# ======================================================================

STATE_KEY = 'state'
PROVINCES_KEY = 'provinces'
ID_KEY = 'id'

STATE_PROVINCES_PATH = (STATE_KEY, PROVINCES_KEY)

# ======================================================================
# INTEGER WIDTHS
# ======================================================================

PROVINCE_ID_BITS = 32
COLOR_COMPONENT_BITS = 8

# ======================================================================
# PROVINCE DEFINITION TABLE
# ======================================================================
# <id>;<r>;<g>;<b>[;anything else is ignored]

DEFINITION_SEPARATOR = ';'
DEFINITION_MIN_FIELDS = 4

# ======================================================================
# FILES
# ======================================================================

# Game files are frequently saved with a UTF-8 BOM
TEXT_ENCODING = 'utf-8-sig'

# Pillow mode for 8 bits per channel RGB without alpha
REGION_IMAGE_MODE = 'RGB'
RGB_CHANNELS = 3
