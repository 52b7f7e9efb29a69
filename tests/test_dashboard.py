from __future__ import annotations

from tacea_kpis.schemas.counters import RawCounters
from tacea_kpis.services.dashboard import build_snapshot
from tacea_kpis.services.metrics import compute_metrics


class TestSnapshot:
    def test_trend_is_driven_by_current_metrics(self, conservative: RawCounters):
        snap = build_snapshot(conservative)
        metrics = compute_metrics(conservative)
        assert snap.metrics == metrics
        assert snap.trend[0].roas == metrics.roas * 0.85
        assert snap.trend[0].roi == metrics.roi * 0.8

    def test_serializes_with_wire_names(self, conservative: RawCounters):
        data = build_snapshot(conservative).model_dump(by_alias=True, mode="json")
        assert data["counters"]["messagesStarted"] == "980"
        assert "totalConversion" in data["metrics"]
        assert data["funnel"][2]["name"] == "Messages Started"
        assert data["indicators"]["ctr"] == "up"
