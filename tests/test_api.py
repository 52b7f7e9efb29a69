"""HTTP surface over the store and the pure KPI functions."""

from __future__ import annotations

import inspect
from datetime import date

import pytest
from fastapi.testclient import TestClient

from tacea_kpis.services.persistence import InMemoryPersistenceGateway
from tacea_kpis.services.store import DEFAULT_STORE_KEY


class TestHandlers:
    def test_api_handlers_are_sync(self, client: TestClient):
        # Database writes and PDF rendering must stay off the event loop.
        endpoints = [r.endpoint for r in client.app.routes if getattr(r, "path", "").startswith("/api/v1")]
        assert endpoints
        assert not any(inspect.iscoroutinefunction(e) for e in endpoints)


class TestHealth:
    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}
        assert resp.headers["x-request-id"]
        assert resp.headers["X-Content-Type-Options"] == "nosniff"

    def test_request_id_is_echoed(self, client: TestClient):
        resp = client.get("/health", headers={"x-request-id": "abc123"})
        assert resp.headers["x-request-id"] == "abc123"


class TestDashboard:
    def test_empty_snapshot(self, client: TestClient):
        body = client.get("/api/v1/dashboard").json()
        assert body["counters"]["spend"] == ""
        assert all(v == 0 for v in body["metrics"].values())
        assert len(body["funnel"]) == 6
        assert body["funnel"][0]["percentOfImpressions"] == 100
        assert len(body["trend"]) == 8
        assert all(v is None for v in body["indicators"].values())
        assert body["profit"] == 0

    def test_set_field_recomputes(self, client: TestClient, gateway: InMemoryPersistenceGateway):
        client.put("/api/v1/dashboard/fields/impressions", json={"value": "10,000"})
        resp = client.put("/api/v1/dashboard/fields/spend", json={"value": "$250"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["counters"]["impressions"] == "10000"
        assert body["counters"]["spend"] == "250"
        assert body["metrics"]["cpm"] == pytest.approx(25.0)
        assert DEFAULT_STORE_KEY in gateway.data

    def test_unknown_field_is_rejected(self, client: TestClient):
        resp = client.put("/api/v1/dashboard/fields/budget", json={"value": "1"})
        assert resp.status_code == 422

    def test_presets(self, client: TestClient):
        presets = client.get("/api/v1/dashboard/presets").json()
        assert [p["name"] for p in presets] == ["Conservative Example", "Accelerated Example"]
        assert presets[1]["counters"]["salesClosed"] == "310"

    def test_apply_preset(self, client: TestClient):
        body = client.post("/api/v1/dashboard/presets", json={"name": "Accelerated Example"}).json()
        assert body["metrics"]["roas"] == pytest.approx(28.0)
        assert body["metrics"]["cac"] == pytest.approx(112.90, abs=0.01)
        assert body["trend"][0]["roas"] == pytest.approx(28.0 * 0.85)
        assert body["profit"] == 945000

    def test_unknown_preset(self, client: TestClient):
        resp = client.post("/api/v1/dashboard/presets", json={"name": "Nope"})
        assert resp.status_code == 404
        assert "Nope" in resp.json()["detail"]

    def test_reset(self, client: TestClient):
        client.post("/api/v1/dashboard/presets", json={"name": "Conservative Example"})
        body = client.post("/api/v1/dashboard/reset").json()
        assert body["counters"]["totalRevenue"] == ""
        assert all(v == 0 for v in body["metrics"].values())


class TestReports:
    def test_csv_download(self, client: TestClient):
        client.post("/api/v1/dashboard/presets", json={"name": "Conservative Example"})
        resp = client.get("/api/v1/reports/kpis.csv")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/csv")
        expected = f"attachment; filename=tacea_kpis_{date.today().isoformat()}.csv"
        assert resp.headers["content-disposition"] == expected
        assert resp.text.startswith("RAW INPUTS\nAd Spend,12000\n")
        assert "ROAS,22.08\n" in resp.text

    def test_pdf_download(self, client: TestClient):
        resp = client.get("/api/v1/reports/kpis.pdf")
        assert resp.status_code == 200
        assert resp.headers["content-type"] == "application/pdf"
        assert resp.content.startswith(b"%PDF")
