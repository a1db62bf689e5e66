"""
Exceptions raised while reading state files, definition tables and region bitmaps.

File access problems are not wrapped: the OSError raised by open() or Pillow
already names the file and propagates unchanged.
"""

from typing import Optional, Sequence


class ProvinceMapError(Exception):
    """Base class for every error raised by this package."""


class FormatError(ProvinceMapError, ValueError):
    """Input text breaks the expected grammar at a specific point.

    Attributes:
        line: 1-based line number in the scanned text (or 0-based record
            index for definition tables), None when not known
        token: Offending token, if any
        missing: Number of closing braces still required (unbalanced blocks)
    """

    def __init__(self, message: str, line: Optional[int] = None,
                 token: Optional[str] = None, missing: Optional[int] = None):
        self.message = message
        self.line = line
        self.token = token
        self.missing = missing
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line})"


class MissingKeyError(ProvinceMapError, LookupError):
    """A required key is absent from an otherwise well-formed mapping."""

    def __init__(self, key: str, path: Sequence[str] = ()):
        self.key = key
        self.path = tuple(path)
        where = " -> ".join(self.path) if self.path else "top level"
        super().__init__(f"no '{key}' field under {where}")


class UnsupportedEncodingError(ProvinceMapError, ValueError):
    """Region bitmap uses a pixel encoding other than 8-bit RGB."""

    def __init__(self, mode: str, path=None):
        self.mode = mode
        self.path = path
        source = f" in {path}" if path is not None else ""
        super().__init__(f"image format{source} should be 8-bit RGB, got mode '{mode}'")
