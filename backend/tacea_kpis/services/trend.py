from tacea_kpis.schemas.metrics import TrendPoint

TREND_POINTS = 8


def compute_trend(roas: float, roi: float) -> list[TrendPoint]:
    """Illustrative series derived from the current ROAS/ROI; not a forecast."""
    return [
        TrendPoint(
            label=f"S{i + 1}",
            roas=max(0.0, roas * (0.85 + i / 14)),
            roi=roi * (0.8 + i / 10),
        )
        for i in range(TREND_POINTS)
    ]
