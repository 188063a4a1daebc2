"""Shared pytest fixtures for the glyph_lib test suite.

Fixtures:
    counting_face: Scripted FontFace that records how often it is queried
    cached_face: CachedFace over a fresh counting_face
    test_font_bytes: A small TrueType font generated in memory
    test_font_path: The same font written to a temporary file
    unit_area: The full unit surface as a SizeAndCenter

Markers:
    slow: Mark test as slow-running (skip with -m "not slow")
    integration: Mark test as integration test
"""

import io
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from glyph_lib.domain.geometry import Points, SizeAndCenter
from glyph_lib.fonts.cache import CachedFace
from glyph_lib.fonts.face import FontFace


# -----------------------------------------------------------------------------
# Pytest Markers
# -----------------------------------------------------------------------------

def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow-running (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


# -----------------------------------------------------------------------------
# Scripted Font Face
# -----------------------------------------------------------------------------

# Outline scripts replayed into the builder: (method name, *args)
SQUARE_EVENTS = [
    ('move_to', 0.0, 0.0),
    ('line_to', 0.0, 100.0),
    ('line_to', 100.0, 100.0),
    ('line_to', 100.0, 0.0),
    ('close',),
]

ARCH_EVENTS = [
    ('move_to', 0.0, 0.0),
    ('quad_to', 50.0, 100.0, 100.0, 0.0),
    ('close',),
]

BUMP_EVENTS = [
    ('move_to', 0.0, 0.0),
    ('curve_to', 0.0, 100.0, 100.0, 100.0, 100.0, 0.0),
    ('close',),
]

TALL_EVENTS = [
    ('move_to', 20.0, -10.0),
    ('line_to', 20.0, 90.0),
    ('line_to', 80.0, 90.0),
    ('line_to', 80.0, -10.0),
    ('close',),
]

# char -> (glyph id, tight bounds or None, events)
SCRIPTED_GLYPHS = {
    'A': (1, Points(0.0, 100.0, 100.0, 0.0), SQUARE_EVENTS),
    'q': (2, Points(0.0, 50.0, 100.0, 0.0), ARCH_EVENTS),
    'c': (3, Points(0.0, 75.0, 100.0, 0.0), BUMP_EVENTS),
    'T': (4, Points(20.0, 90.0, 80.0, -10.0), TALL_EVENTS),
    # id present but no outline, like a real space glyph
    ' ': (5, None, []),
}


class CountingFace(FontFace):
    """FontFace replaying scripted outlines and counting every query."""

    def __init__(self, glyphs=None):
        self.glyphs = dict(SCRIPTED_GLYPHS if glyphs is None else glyphs)
        self._by_id = {glyph_id: (bbox, events) for glyph_id, bbox, events in self.glyphs.values()}
        self.index_calls = []
        self.outline_calls = []

    def glyph_index(self, char):
        self.index_calls.append(char)
        entry = self.glyphs.get(char)
        return None if entry is None else entry[0]

    def outline_glyph(self, glyph_id, builder):
        self.outline_calls.append(glyph_id)
        bbox, events = self._by_id[glyph_id]
        for name, *args in events:
            getattr(builder, name)(*args)
        return bbox


@pytest.fixture
def counting_face():
    """Return a CountingFace with the default scripted glyphs.

    Glyphs:
        'A': 100x100 square of four straight lines (two on, two off)
        'q': one quadratic arch plus its closing line
        'c': one cubic bump plus its closing line
        'T': 60x100 box spanning y -10..90
        ' ': glyph id without an outline
    """
    return CountingFace()


@pytest.fixture
def cached_face(counting_face):
    """Return a CachedFace over a fresh CountingFace."""
    return CachedFace(counting_face)


@pytest.fixture
def unit_area():
    """Return the whole unit surface, [-1, 1] on both axes."""
    return SizeAndCenter(1.0, 1.0, 0.0, 0.0)


# -----------------------------------------------------------------------------
# Generated TrueType Font
# -----------------------------------------------------------------------------

def _draw_box(pen, x0, y0, x1, y1):
    pen.moveTo((x0, y0))
    pen.lineTo((x0, y1))
    pen.lineTo((x1, y1))
    pen.lineTo((x1, y0))
    pen.closePath()


def build_test_font() -> bytes:
    """Build a TrueType font with '.notdef', space, 'A' (box) and 'O' (quadratic ring).

    'A' is the box 100..600 x 0..700 drawn with straight lines only.
    'O' spans the same box with four quadratic segments and no lines.
    """
    from fontTools.fontBuilder import FontBuilder
    from fontTools.pens.ttGlyphPen import TTGlyphPen

    glyph_order = ['.notdef', 'space', 'A', 'O']
    fb = FontBuilder(1000, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({0x20: 'space', 0x41: 'A', 0x4F: 'O'})

    glyphs = {}

    pen = TTGlyphPen(None)
    _draw_box(pen, 50, 0, 450, 700)
    glyphs['.notdef'] = pen.glyph()

    pen = TTGlyphPen(None)
    glyphs['space'] = pen.glyph()

    pen = TTGlyphPen(None)
    _draw_box(pen, 100, 0, 600, 700)
    glyphs['A'] = pen.glyph()

    pen = TTGlyphPen(None)
    pen.moveTo((100, 350))
    pen.qCurveTo((100, 700), (350, 700))
    pen.qCurveTo((600, 700), (600, 350))
    pen.qCurveTo((600, 0), (350, 0))
    pen.qCurveTo((100, 0), (100, 350))
    pen.closePath()
    glyphs['O'] = pen.glyph()

    fb.setupGlyf(glyphs)

    glyph_table = fb.font['glyf']
    metrics = {name: (700, getattr(glyph_table[name], 'xMin', 0)) for name in glyph_order}
    fb.setupHorizontalMetrics(metrics)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({'familyName': 'GlyphLibTest', 'styleName': 'Regular'})
    fb.setupOS2(sTypoAscender=800, usWinAscent=800, usWinDescent=200)
    fb.setupPost()

    buf = io.BytesIO()
    fb.save(buf)
    return buf.getvalue()


@pytest.fixture(scope='session')
def test_font_bytes():
    """Return the bytes of the generated TrueType test font."""
    return build_test_font()


@pytest.fixture
def test_font_path(tmp_path, test_font_bytes):
    """Write the generated font to a temporary .ttf and return its path."""
    path = tmp_path / 'GlyphLibTest.ttf'
    path.write_bytes(test_font_bytes)
    return str(path)
