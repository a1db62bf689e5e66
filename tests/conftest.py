"""
Shared fixtures for province map tests.

Provides sample state files, definition tables and region bitmaps.
"""
import sys
import os
import pytest
from PIL import Image

# Ensure the project root is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))


# ── Sample state files ──────────────────────────────────────────────────

SAMPLE_STATE = """\
# Migus Magus
state={
\tid=5 # state id
\tname="STATE_5"

\tprovinces={
\t\t10 20 # coast
\t\t30
\t}
\thistory={
\t\towner = ABC
\t\tbuildings = { infrastructure = 2 }
\t}
}
"""

SAMPLE_STATE_NO_PROVINCES = """\
state={
\tid=7
\tmanpower=1200
}
"""

SAMPLE_DEFINITIONS = """\
1;255;0;0;land;false;unknown;0
2;0;255;0;land;false;unknown;0
3;0;0;255;sea;true;ocean;0
"""


@pytest.fixture
def state_file(tmp_path):
    path = tmp_path / "5-Migus Magus.txt"
    path.write_text(SAMPLE_STATE, encoding='utf-8')
    return path


@pytest.fixture
def definitions_file(tmp_path):
    path = tmp_path / "definition.csv"
    path.write_text(SAMPLE_DEFINITIONS, encoding='utf-8')
    return path


@pytest.fixture
def region_bitmap(tmp_path):
    """4x2 RGB bitmap: top row red, bottom row green/blue/blue/unknown."""
    img = Image.new('RGB', (4, 2), (255, 0, 0))
    img.putpixel((0, 1), (0, 255, 0))
    img.putpixel((1, 1), (0, 0, 255))
    img.putpixel((2, 1), (0, 0, 255))
    img.putpixel((3, 1), (9, 9, 9))
    path = tmp_path / "provinces.bmp"
    img.save(path)
    return path
