"""
State file extraction.

Walks a known key path through a map state file, e.g.

    state = {
        id = 1
        provinces = { 10 20 30 }
    }

and parses the value found at the end of it. Every step scans only the raw
text of the previous step's value, so nothing outside the path is parsed
beyond what is needed to skip over it.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set, Tuple, Union

from .constants import (
    ID_KEY, PROVINCE_ID_BITS, PROVINCES_KEY, STATE_KEY, STATE_PROVINCES_PATH,
    TEXT_ENCODING,
)
from .errors import MissingKeyError
from .script_parser import ScriptScanner, Span, parse_uint, strip_comments

logger = logging.getLogger(__name__)


@dataclass
class StateDefinition:
    """The parts of a state block this package understands."""
    id: Optional[int] = None
    provinces: List[int] = field(default_factory=list)


def _scan_block(text: str, span: Span, is_block: bool) -> Tuple[Dict[str, Span], Set[str]]:
    """Scan a value's pairs. A bare token value holds no pairs."""
    if not is_block:
        return {}, set()
    scanner = ScriptScanner.for_span(text, span)
    values = scanner.scan_spans()
    return values, scanner.block_keys


def _resolve_span(text: str, key_path: Sequence[str]) -> Span:
    """Follow key_path through nested scans of comment-free text."""
    span = (0, len(text))
    is_block = True
    walked = []
    for key in key_path:
        values, block_keys = _scan_block(text, span, is_block)
        if key not in values:
            raise MissingKeyError(key, walked)
        span = values[key]
        is_block = key in block_keys
        walked.append(key)
    return span


def resolve_key_path(text: str, key_path: Sequence[str]) -> str:
    """Return the raw value text found at the end of key_path.

    Args:
        text: Script text, comments included
        key_path: Keys to follow, outermost first

    Raises:
        FormatError: If any scanned level is malformed
        MissingKeyError: If a key along the path is absent
    """
    stripped = strip_comments(text)
    start, end = _resolve_span(stripped, key_path)
    return stripped[start:end]


def extract_state_provinces(text: str) -> List[int]:
    """Extract the province ids listed under state -> provinces.

    A `state` value that is a bare token instead of a block holds no
    pairs, so it is reported as a missing `provinces` key.
    """
    stripped = strip_comments(text)
    span = _resolve_span(stripped, STATE_PROVINCES_PATH)
    provinces = ScriptScanner.for_span(stripped, span).read_uint_array(PROVINCE_ID_BITS)
    logger.debug("Extracted %d province(s)", len(provinces))
    return provinces


def parse_state_definition(text: str) -> StateDefinition:
    """Extract the state id (if present) and its provinces."""
    stripped = strip_comments(text)
    top_level = ScriptScanner(stripped)
    top_values = top_level.scan_spans()
    if STATE_KEY not in top_values:
        raise MissingKeyError(STATE_KEY)
    state_values, _ = _scan_block(stripped, top_values[STATE_KEY], STATE_KEY in top_level.block_keys)

    if PROVINCES_KEY not in state_values:
        raise MissingKeyError(PROVINCES_KEY, (STATE_KEY,))
    provinces = ScriptScanner.for_span(stripped, state_values[PROVINCES_KEY]).read_uint_array(PROVINCE_ID_BITS)

    state_id = None
    if ID_KEY in state_values:
        start, end = state_values[ID_KEY]
        state_id = parse_uint(stripped[start:end], PROVINCE_ID_BITS, line=top_level.line_at(start))

    logger.debug("Parsed state %s with %d province(s)", state_id, len(provinces))
    return StateDefinition(id=state_id, provinces=provinces)


def read_script_file(path: Union[str, Path]) -> str:
    """Read a whole script file as text, dropping a UTF-8 BOM if present."""
    with open(path, 'r', encoding=TEXT_ENCODING) as f:
        return f.read()


def load_state_provinces(path: Union[str, Path]) -> List[int]:
    """Read a state file and extract its province ids."""
    logger.debug("Reading state file %s", path)
    return extract_state_provinces(read_script_file(path))


def load_state_definition(path: Union[str, Path]) -> StateDefinition:
    """Read a state file and parse its id and provinces."""
    logger.debug("Reading state file %s", path)
    return parse_state_definition(read_script_file(path))
