import math
from dataclasses import dataclass

from tacea_kpis.schemas.metrics import Benchmark, DerivedMetrics, Signal


@dataclass(frozen=True)
class Threshold:
    value: float
    # Lower is better (costs).
    inverse: bool = False


# Keyed by the metric's wire name.
THRESHOLDS: dict[str, Threshold] = {
    "cpm": Threshold(50, inverse=True),
    "ctr": Threshold(1),
    "cpc": Threshold(10, inverse=True),
    "startRate": Threshold(10),
    "costPerMessage": Threshold(50, inverse=True),
    "responseRate": Threshold(50),
    "quoteRate": Threshold(40),
    "closeRate": Threshold(25),
}


@dataclass(frozen=True)
class BenchmarkRange:
    key: str
    label: str
    minimum: float
    maximum: float | None = None


BENCHMARKS: tuple[BenchmarkRange, ...] = (
    BenchmarkRange("ctr", "Optimal CTR %", 1, 3),
    BenchmarkRange("startRate", "Conversation start rate %", 10, 20),
    BenchmarkRange("closeRate", "Close rate %", 20, 30),
    BenchmarkRange("roas", "Minimum recommended ROAS", 3),
    BenchmarkRange("roi", "Healthy ROI %", 100),
)


def signal_for(value: float, threshold: Threshold) -> Signal | None:
    if not math.isfinite(value) or value == 0:
        return None
    good = value < threshold.value if threshold.inverse else value > threshold.value
    return Signal.up if good else Signal.down


def evaluate_indicators(metrics: DerivedMetrics) -> dict[str, Signal | None]:
    values = metrics.model_dump(by_alias=True)
    return {key: signal_for(values[key], threshold) for key, threshold in THRESHOLDS.items()}


def benchmark_report(metrics: DerivedMetrics) -> list[Benchmark]:
    values = metrics.model_dump(by_alias=True)
    report: list[Benchmark] = []
    for b in BENCHMARKS:
        actual = values[b.key]
        meets = actual >= b.minimum and (b.maximum is None or actual <= b.maximum)
        report.append(
            Benchmark(key=b.key, label=b.label, actual=actual, minimum=b.minimum, maximum=b.maximum, meets=meets)
        )
    return report
