"""Unit tests for normalized widget placement."""

import pytest

from cosinepanel.gui import layout


class TestBlocks:
    def test_plot_rect_full_window(self):
        assert layout.plot_rect() == pytest.approx((0.06, 0.2, 0.5, 0.65))

    def test_hint_rect_full_window(self):
        assert layout.hint_rect() == pytest.approx((0.06, 0.05, 0.5, 0.05))

    def test_controls_rect_full_window(self):
        assert layout.controls_rect() == pytest.approx((0.6, 0.2, 0.38, 0.7))

    def test_blocks_follow_position(self):
        pos = (0.5, 0.5, 0.5, 0.5)
        assert layout.plot_rect(pos) == pytest.approx((0.53, 0.6, 0.25, 0.325))
        assert layout.controls_rect(pos) == pytest.approx((0.8, 0.6, 0.19, 0.35))


class TestFieldPlacements:
    def test_five_fields_top_to_bottom(self):
        placements = layout.field_placements(5)
        assert len(placements) == 5
        bottoms = [p.entry[1] for p in placements]
        assert bottoms == sorted(bottoms, reverse=True)

    def test_first_entry(self):
        first = layout.field_placements(5)[0]
        # controls: left 0.6, width 0.38, top 0.9
        assert first.entry == pytest.approx((0.78, 0.85, 0.1, 0.05))
        assert first.label == pytest.approx((0.62, 0.845, 0.15, 0.05))

    def test_row_spacing(self):
        placements = layout.field_placements(5)
        step = placements[0].entry[1] - placements[1].entry[1]
        assert step == pytest.approx(0.7 / 5)

    def test_zero_fields_rejected(self):
        with pytest.raises(ValueError):
            layout.field_placements(0)


class TestToPixels:
    def test_flips_origin(self):
        assert layout.to_pixels((0.0, 0.0, 0.5, 0.25), 200, 100) == (0, 75, 100, 25)

    def test_top_left_block(self):
        assert layout.to_pixels((0.0, 0.75, 0.5, 0.25), 200, 100) == (0, 0, 100, 25)

    def test_minimum_one_pixel(self):
        assert layout.to_pixels((0.1, 0.1, 0.0, 0.0), 10, 10)[2:] == (1, 1)

    def test_to_qrect(self):
        rect = layout.to_qrect((0.25, 0.5, 0.5, 0.5), 400, 200)
        assert (rect.x(), rect.y(), rect.width(), rect.height()) == (100, 0, 200, 100)
