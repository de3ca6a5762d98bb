import numpy as np
import pytest

from pitch_curator.planner import PlannerError, interpolate, max_step, plan, sweep_rows


class TestPlan:
    def test_standard_pitch_rows(self):
        wp = plan(61, 402, 6, 5)
        assert len(wp) == 18
        assert list(np.unique(wp[:, 1])) == [5, 11, 17, 23, 29, 35, 41, 47, 53]

    def test_rows_alternate_direction(self):
        wp = plan(61, 402, 6, 5)
        assert tuple(wp[0]) == (5, 5) and tuple(wp[1]) == (397, 5)
        assert tuple(wp[2]) == (397, 11) and tuple(wp[3]) == (5, 11)
        assert tuple(wp[4]) == (5, 17)

    def test_uneven_span_stops_short_of_far_edge(self):
        rows = sweep_rows(21, 5, 5)
        assert list(rows) == [5, 10, 15]

    def test_far_edge_row_added_when_requested(self):
        rows = sweep_rows(21, 5, 5, include_far_edge=True)
        assert list(rows) == [5, 10, 15, 16]
        wp = plan(21, 30, 5, 5, include_far_edge=True)
        # fourth row (index 3) runs right to left
        assert tuple(wp[-2]) == (25, 16) and tuple(wp[-1]) == (5, 16)

    def test_far_edge_noop_when_span_divides(self):
        assert list(sweep_rows(20, 5, 5, include_far_edge=True)) == [5, 10, 15]

    def test_single_row(self):
        wp = plan(8, 20, 6, 4)
        assert wp.tolist() == [[4, 4], [16, 4]]

    def test_no_row_fits(self):
        with pytest.raises(PlannerError):
            plan(8, 20, 6, 5)

    def test_non_positive_spacing(self):
        with pytest.raises(ValueError):
            plan(61, 402, 0, 5)


class TestInterpolate:
    def test_unit_spacing_over_full_sweep(self):
        path = interpolate(plan(61, 402, 6, 5))
        assert max_step(path) <= 1.0 + 1e-9

    def test_endpoints_preserved(self):
        wp = plan(61, 402, 6, 5)
        path = interpolate(wp)
        assert tuple(path[0]) == tuple(wp[0])
        assert tuple(path[-1]) == tuple(wp[-1])

    def test_fractional_distance(self):
        path = interpolate([(0, 0), (2.5, 0)])
        assert len(path) == 4
        assert max_step(path) <= 1.0
        assert path[-1].tolist() == [2.5, 0]

    def test_duplicate_waypoint_emits_one_sample(self):
        path = interpolate([(1, 1), (1, 1), (4, 1)])
        assert path.tolist() == [[1, 1], [1, 1], [2, 1], [3, 1], [4, 1]]

    def test_sample_count_includes_final_waypoint(self):
        path = interpolate([(0, 0), (3, 0), (3, 2)])
        assert len(path) == 3 + 2 + 1
        assert path[-1].tolist() == [3, 2]

    def test_diagonal_leg(self):
        path = interpolate([(0, 0), (3, 4)])
        assert len(path) == 6
        assert max_step(path) == pytest.approx(1.0)

    def test_single_and_empty(self):
        assert interpolate([(2, 3)]).tolist() == [[2, 3]]
        assert interpolate([]).shape == (0, 2)
