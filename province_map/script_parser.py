"""
Paradox script scanner.

Small recursive descent scanner for the brace-delimited script format used by
map state files. Values are not interpreted while scanning: a key maps to the
raw text of its value (the inside of a { } block, or a bare token) and later
stages parse that text on demand.

Handles:
- '#' line comments
- balanced { } blocks (no awareness of quoted strings)
- key = value pairs separated by arbitrary whitespace
- whitespace separated arrays of unsigned integers
"""

import logging
import re
from typing import Dict, List, Optional, Tuple

from .constants import (
    ASSIGNMENT_CHAR, BLOCK_CLOSE, BLOCK_OPEN, COMMENT_CHAR,
    PROVINCE_ID_BITS, WHITESPACE,
)
from .errors import FormatError

logger = logging.getLogger(__name__)

# (start, end) offsets into the scanner's text
Span = Tuple[int, int]

_DECIMAL = re.compile(r'[0-9]+')


def strip_comments(text: str) -> str:
    """Remove every '#' comment, keeping the newline that ends it.

    Text without '#' is returned unchanged. A comment on the last line with no
    newline after it runs to the end of the text.
    """
    parts = []
    pos = 0
    while True:
        idx = text.find(COMMENT_CHAR, pos)
        if idx < 0:
            parts.append(text[pos:])
            break
        parts.append(text[pos:idx])
        newline = text.find('\n', idx)
        if newline < 0:
            break
        pos = newline
    return ''.join(parts)


def parse_uint(token: str, bits: int = PROVINCE_ID_BITS, line: Optional[int] = None) -> int:
    """Parse a decimal unsigned integer that must fit in `bits` bits.

    Signs, surrounding whitespace and digit separators are all rejected.

    Raises:
        FormatError: If the token is not a valid in-range decimal
    """
    if not _DECIMAL.fullmatch(token):
        raise FormatError(f"invalid integer '{token}'", line=line, token=token)
    # leading zeros allowed; length is checked before int()
    digits = token.lstrip('0') or '0'
    if len(digits) > len(str((1 << bits) - 1)) or int(digits) >= 1 << bits:
        raise FormatError(
            f"invalid integer '{token}': does not fit in {bits} bits",
            line=line, token=token,
        )
    return int(digits)


class ScriptScanner:
    """Cursor over a window of script text.

    The scanner only ever looks at text[start:end] and reports values as
    spans into that same buffer, so nested scans of block contents keep
    pointing into the original text and error lines stay absolute.
    """

    def __init__(self, text: str, start: int = 0, end: Optional[int] = None):
        self.text = text
        self.pos = start
        self.length = len(text) if end is None else end
        # keys of the last scan_spans() whose value was a { } block
        self.block_keys = set()

    @classmethod
    def for_span(cls, text: str, span: Span) -> 'ScriptScanner':
        """Create a scanner limited to a span returned by a previous scan."""
        return cls(text, span[0], span[1])

    def line_at(self, pos: int) -> int:
        """1-based line number of an offset."""
        return self.text.count('\n', 0, pos) + 1

    def skip_whitespace(self):
        """Skip ASCII whitespace."""
        while self.pos < self.length and self.text[self.pos] in WHITESPACE:
            self.pos += 1

    def at_end(self) -> bool:
        return self.pos >= self.length

    def read_block(self) -> Span:
        """Consume a balanced { } block starting at the cursor.

        Returns:
            Span of the text strictly between the braces; the cursor is left
            just after the closing brace

        Raises:
            FormatError: If the cursor is not on '{', or the input ends
                before every opened brace is closed
        """
        open_pos = self.pos
        if open_pos >= self.length or self.text[open_pos] != BLOCK_OPEN:
            raise FormatError("missing opening brace: block doesn't start with '{'",
                              line=self.line_at(open_pos))

        depth = 1
        pos = open_pos + 1
        while pos < self.length:
            char = self.text[pos]
            if char == BLOCK_OPEN:
                depth += 1
            elif char == BLOCK_CLOSE:
                depth -= 1
                if depth == 0:
                    self.pos = pos + 1
                    return (open_pos + 1, pos)
            pos += 1

        raise FormatError(
            f"unbalanced block: missing {depth} '}}' character(s) at the end of the block",
            line=self.line_at(open_pos), missing=depth,
        )

    def read_token(self) -> Span:
        """Consume characters up to the next whitespace (or the end)."""
        start = self.pos
        while self.pos < self.length and self.text[self.pos] not in WHITESPACE:
            self.pos += 1
        return (start, self.pos)

    def read_value(self) -> Span:
        """Read a value: a block's inner text or a bare token."""
        self.skip_whitespace()
        if self.pos < self.length and self.text[self.pos] == BLOCK_OPEN:
            return self.read_block()
        return self.read_token()

    def read_key(self) -> str:
        """Read the key of the next pair and consume its '='."""
        start = self.pos
        eq = self.text.find(ASSIGNMENT_CHAR, start, self.length)
        if eq < 0:
            raise FormatError("missing assignment: key doesn't have a '=' afterwards",
                              line=self.line_at(start),
                              token=self.text[start:self.length].strip(WHITESPACE))
        key = self.text[start:eq].rstrip(WHITESPACE)
        if not key:
            raise FormatError("empty key", line=self.line_at(eq))
        self.pos = eq + 1
        return key

    def scan_spans(self) -> Dict[str, Span]:
        """Scan key = value pairs until the window is exhausted.

        Returns:
            Dict mapping each key to the span of its raw value

        Raises:
            FormatError: On the first grammar violation, including a key
                defined twice in the same window
        """
        result = {}
        self.block_keys = set()
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            key_pos = self.pos
            key = self.read_key()
            self.skip_whitespace()
            is_block = self.pos < self.length and self.text[self.pos] == BLOCK_OPEN
            value = self.read_value()
            if key in result:
                prior = result[key]
                raise FormatError(
                    f"duplicate key '{key}' has two entries with values: "
                    f"{self.text[prior[0]:prior[1]]!r} and {self.text[value[0]:value[1]]!r}",
                    line=self.line_at(key_pos), token=key,
                )
            result[key] = value
            if is_block:
                self.block_keys.add(key)
        return result

    def scan_key_values(self) -> Dict[str, str]:
        """Scan key = value pairs and return the raw value text per key."""
        return {key: self.text[start:end] for key, (start, end) in self.scan_spans().items()}

    def read_uint_array(self, bits: int = PROVINCE_ID_BITS) -> List[int]:
        """Parse every remaining whitespace separated token as an unsigned integer."""
        values = []
        while True:
            self.skip_whitespace()
            if self.at_end():
                break
            start, end = self.read_token()
            try:
                values.append(parse_uint(self.text[start:end], bits))
            except FormatError as e:
                raise FormatError(e.message, line=self.line_at(start), token=e.token) from None
        return values


# Utility functions for easy use

def match_block(text: str) -> Tuple[str, str]:
    """Split text starting with '{' into (inner text, text after the closing brace)."""
    scanner = ScriptScanner(text)
    start, end = scanner.read_block()
    return text[start:end], text[scanner.pos:]


def scan_key_values(text: str) -> Dict[str, str]:
    """Map each key of `key = value` pairs in text to its raw value text."""
    values = ScriptScanner(text).scan_key_values()
    logger.debug("Scanned %d key(s)", len(values))
    return values


def parse_uint32_array(text: str) -> List[int]:
    """Parse whitespace separated unsigned 32-bit integers, in source order."""
    return ScriptScanner(text).read_uint_array(PROVINCE_ID_BITS)
