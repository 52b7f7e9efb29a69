from tacea_kpis.schemas.counters import RawCounters
from tacea_kpis.schemas.metrics import DashboardSnapshot
from tacea_kpis.services.funnel import compute_funnel
from tacea_kpis.services.indicators import benchmark_report, evaluate_indicators
from tacea_kpis.services.metrics import compute_metrics, compute_profit
from tacea_kpis.services.trend import compute_trend


def build_snapshot(counters: RawCounters) -> DashboardSnapshot:
    metrics = compute_metrics(counters)
    return DashboardSnapshot(
        counters=counters,
        metrics=metrics,
        funnel=compute_funnel(counters),
        trend=compute_trend(metrics.roas, metrics.roi),
        indicators=evaluate_indicators(metrics),
        benchmarks=benchmark_report(metrics),
        profit=compute_profit(counters),
    )
