from tacea_kpis.schemas.counters import RawCounters
from tacea_kpis.schemas.metrics import FunnelStage
from tacea_kpis.services.metrics import guarded_ratio, parse_counters
from tacea_kpis.services.numbers import format_fixed, format_raw

# Display name and counter attribute, top of the funnel first.
FUNNEL_STAGES: tuple[tuple[str, str], ...] = (
    ("Impressions", "impressions"),
    ("Clicks", "clicks"),
    ("Messages Started", "messages_started"),
    ("Active Conversations", "active_conversations"),
    ("Quotes Sent", "quotes_sent"),
    ("Sales Closed", "sales_closed"),
)


def compute_funnel(raw: RawCounters) -> list[FunnelStage]:
    v = parse_counters(raw)
    stages: list[FunnelStage] = []
    for i, (name, attr) in enumerate(FUNNEL_STAGES):
        value = getattr(v, attr)
        # The top stage is the base of every other percentage.
        percent = 100.0 if i == 0 else guarded_ratio(value, v.impressions, 100)
        stages.append(FunnelStage(name=name, raw_value=value, percent_of_impressions=percent))
    return stages


def funnel_rows(stages: list[FunnelStage]) -> list[str]:
    """Text rendering of a funnel, one "<name>: <count> (<pct>%)" line per stage."""
    return [f"{s.name}: {format_raw(s.raw_value)} ({format_fixed(s.percent_of_impressions)}%)" for s in stages]
