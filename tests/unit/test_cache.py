"""Unit tests for CachedFace memoization."""

import logging

from glyph_lib.domain.geometry import Points
from glyph_lib.domain.glyph import Glyph, Line


class TestCachedFace:
    """Tests for CachedFace.get_glyph."""

    def test_builds_glyph_from_outline(self, cached_face):
        glyph = cached_face.get_glyph('A')
        assert isinstance(glyph, Glyph)
        assert glyph.tight_bounding_box == Points(0.0, 100.0, 100.0, 0.0)
        assert len(glyph.on_lines) == 2
        assert len(glyph.off_lines) == 2
        assert glyph.quad_curves == ()

    def test_closing_line_is_stored(self, cached_face):
        glyph = cached_face.get_glyph('q')
        assert len(glyph.quad_curves) == 1
        assert glyph.on_lines == (Line(100.0, 0.0, 0.0, 0.0),)

    def test_second_query_does_not_rebuild(self, cached_face, counting_face):
        first = cached_face.get_glyph('A')
        second = cached_face.get_glyph('A')
        assert first is second
        assert counting_face.outline_calls == [1]
        assert counting_face.index_calls == ['A']
        assert (cached_face.hits, cached_face.misses) == (1, 1)

    def test_missing_character_is_memoized(self, cached_face, counting_face):
        assert cached_face.get_glyph('Z') is None
        assert cached_face.get_glyph('Z') is None
        assert counting_face.index_calls == ['Z']
        assert counting_face.outline_calls == []
        assert 'Z' in cached_face

    def test_empty_outline_is_memoized_as_none(self, cached_face, counting_face):
        assert cached_face.get_glyph(' ') is None
        assert cached_face.get_glyph(' ') is None
        assert counting_face.outline_calls == [5]

    def test_table_grows_with_distinct_characters(self, cached_face):
        for char in 'AAqqAqZZ':
            cached_face.get_glyph(char)
        assert len(cached_face) == 3
        assert cached_face.misses == 3
        assert cached_face.hits == 5

    def test_logs_lookups_at_debug(self, cached_face, caplog):
        with caplog.at_level(logging.DEBUG, logger='glyph_lib.fonts'):
            cached_face.get_glyph('A')
        messages = [record.getMessage() for record in caplog.records]
        assert "Getting glyph id for 'A'" in messages
        assert "Generating outline for 'A'" in messages
        assert "Creating closing line" in messages

    def test_straight_lines_orders_on_before_off(self, cached_face):
        lines = cached_face.get_glyph('A').straight_lines()
        assert lines.shape == (4, 4)
        # first two rows are the on-lines
        assert tuple(lines[0]) == (0.0, 0.0, 0.0, 100.0)
        assert tuple(lines[1]) == (100.0, 0.0, 0.0, 0.0)
