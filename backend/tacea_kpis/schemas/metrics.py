import enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tacea_kpis.schemas.counters import RawCounters

_camel = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


class DerivedMetrics(BaseModel):
    model_config = _camel

    cpm: float = 0.0
    ctr: float = 0.0
    cpc: float = 0.0
    start_rate: float = 0.0
    cost_per_message: float = 0.0
    response_rate: float = 0.0
    quote_rate: float = 0.0
    close_rate: float = 0.0
    avg_ticket: float = 0.0
    roi: float = 0.0
    roas: float = 0.0
    cac: float = 0.0
    total_conversion: float = 0.0


class FunnelStage(BaseModel):
    model_config = _camel

    name: str
    raw_value: float
    percent_of_impressions: float


class TrendPoint(BaseModel):
    model_config = _camel

    label: str
    roas: float
    roi: float


class Signal(str, enum.Enum):
    up = "up"
    down = "down"


class Benchmark(BaseModel):
    model_config = _camel

    key: str
    label: str
    actual: float
    minimum: float
    # None means the benchmark is open-ended ("at least minimum").
    maximum: float | None = None
    meets: bool


class DashboardSnapshot(BaseModel):
    model_config = _camel

    counters: RawCounters
    metrics: DerivedMetrics
    funnel: list[FunnelStage]
    trend: list[TrendPoint]
    indicators: dict[str, Signal | None]
    benchmarks: list[Benchmark]
    profit: float
