"""Integration tests for the fontTools-backed font face.

Exercises TTFontFace, CachedFace and the text layout against a real
TrueType font generated with fontTools' FontBuilder (see conftest.py).
"""

import numpy as np
import pytest

from glyph_lib.domain.geometry import Points, SizeAndCenter
from glyph_lib.fonts.cache import CachedFace
from glyph_lib.fonts.face import FontLoadError, TTFontFace
from glyph_lib.fonts.outline import GlyphOutlineBuilder
from glyph_lib.layout.text import compute_unfit_chars, fill_text_as_lines

pytestmark = pytest.mark.integration


@pytest.fixture
def face(test_font_bytes):
    return TTFontFace.from_bytes(test_font_bytes)


class TestTTFontFace:
    """Tests for TTFontFace loading and queries."""

    def test_metrics(self, face):
        assert face.units_per_em == 1000

    def test_glyph_index(self, face):
        assert face.glyph_index('A') == 2
        assert face.glyph_index('O') == 3
        assert face.glyph_index('Z') is None

    def test_outline_of_box(self, face):
        builder = GlyphOutlineBuilder()
        bbox = face.outline_glyph(face.glyph_index('A'), builder)
        assert bbox == Points(100.0, 700.0, 600.0, 0.0)
        assert len(builder.on_lines) == 2
        assert len(builder.off_lines) == 2
        assert builder.quad_curves == []

    def test_outline_of_quadratic_ring(self, face):
        builder = GlyphOutlineBuilder()
        bbox = face.outline_glyph(face.glyph_index('O'), builder)
        assert bbox == Points(100.0, 700.0, 600.0, 0.0)
        assert len(builder.quad_curves) == 4
        assert builder.on_lines == [] and builder.off_lines == []
        # contour is closed by its last curve
        assert (builder.quad_curves[-1].p2x, builder.quad_curves[-1].p2y) == (
            builder.quad_curves[0].p1x, builder.quad_curves[0].p1y)

    def test_space_has_no_outline(self, face):
        builder = GlyphOutlineBuilder()
        assert face.outline_glyph(face.glyph_index(' '), builder) is None

    def test_from_path(self, test_font_path):
        face = TTFontFace.from_path(test_font_path)
        assert face.glyph_index('A') == 2

    def test_from_path_missing(self, tmp_path):
        with pytest.raises(FontLoadError):
            TTFontFace.from_path(tmp_path / 'nope.ttf')

    def test_from_bytes_garbage(self):
        with pytest.raises(FontLoadError) as excinfo:
            TTFontFace.from_bytes(b'\x00\x01garbage')
        assert excinfo.value.__cause__ is not None


class TestLayoutWithRealFont:
    """End-to-end layout through CachedFace over a TrueType font."""

    def test_unfit_layout(self, face):
        cached = CachedFace(face)
        lines, bounds, char_bounds = compute_unfit_chars(cached, 'A O', 10)
        assert lines.shape == (4 + 4 * 10, 4)
        # 'A' box, font space glyph has no outline so the synthetic space is used
        assert char_bounds[0] == Points(50.0, 700.0, 550.0, 0.0)
        assert char_bounds[1] == Points(600.0, 0.0, 800.0, 0.0)
        assert char_bounds[2] == Points(850.0, 700.0, 1350.0, 0.0)
        assert bounds == Points(50.0, 700.0, 1350.0, 0.0)

    def test_fit_layout(self, face):
        cached = CachedFace(face)
        area = SizeAndCenter(1.0, 0.5, 0.0, 0.0)
        fit = fill_text_as_lines(cached, 'OA', area, 640, 360)
        assert np.isfinite(fit.lines).all()
        eps = 1e-9
        assert fit.lines[:, 0::2].min() >= fit.bounds.p1x - eps
        assert fit.lines[:, 0::2].max() <= fit.bounds.p2x + eps
        assert fit.bounds.p1y <= area.cy + area.sy + eps
        assert fit.bounds.p2y >= area.cy - area.sy - eps

    def test_cache_reuses_font_outlines(self, face):
        cached = CachedFace(face)
        fill_text_as_lines(cached, 'AAOO', SizeAndCenter(1.0, 1.0, 0.0, 0.0), 640, 360)
        assert cached.misses == 2
        assert cached.hits == 2
