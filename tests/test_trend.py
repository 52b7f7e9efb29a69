from __future__ import annotations

import pytest

from tacea_kpis.services.trend import compute_trend


class TestTrend:
    def test_eight_labelled_points(self):
        points = compute_trend(10, 50)
        assert len(points) == 8
        assert [p.label for p in points] == [f"S{i}" for i in range(1, 9)]

    def test_coefficients(self):
        points = compute_trend(roas=10, roi=50)
        assert points[0].roas == pytest.approx(8.5)
        assert points[7].roas == pytest.approx(13.5)
        assert points[0].roi == pytest.approx(40)
        # 50 * (0.8 + 7/10)
        assert points[7].roi == pytest.approx(75)

    def test_roas_never_negative_but_roi_can_be(self):
        points = compute_trend(roas=-4, roi=-20)
        assert all(p.roas == 0 for p in points)
        assert points[0].roi == pytest.approx(-16)

    def test_zero_snapshot(self):
        assert all(p.roas == 0 and p.roi == 0 for p in compute_trend(0, 0))

    def test_deterministic(self):
        assert compute_trend(3.3, 12.5) == compute_trend(3.3, 12.5)
