import pytest

from pitch_curator.coverage import CoverageTracker


class TestCoverageTracker:
    def test_starts_empty(self):
        assert CoverageTracker((4, 5)).coverage_percent() == 0.0

    def test_mark_is_idempotent(self):
        t = CoverageTracker((4, 5))
        t.mark_footprint(slice(0, 2), slice(0, 5))
        t.mark_footprint(slice(0, 2), slice(0, 5))
        assert t.covered_cells == 10
        assert t.coverage_percent() == pytest.approx(50.0)

    def test_non_decreasing_and_full(self):
        t = CoverageTracker((4, 4))
        seen = []
        for r in range(4):
            t.mark_footprint(slice(r, r + 1), slice(0, 4))
            t.mark_footprint(slice(0, 1), slice(0, 1))
            seen.append(t.coverage_percent())
        assert seen == sorted(seen)
        assert seen[-1] == pytest.approx(100.0)

    def test_mask_is_a_copy(self):
        t = CoverageTracker((3, 3))
        m = t.mask
        m[:] = True
        assert t.covered_cells == 0

    def test_rejects_empty_shape(self):
        with pytest.raises(ValueError):
            CoverageTracker((0, 3))
