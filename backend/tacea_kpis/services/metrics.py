import math

from tacea_kpis.schemas.counters import CounterValues, RawCounters
from tacea_kpis.schemas.metrics import DerivedMetrics
from tacea_kpis.services.numbers import parse_number


def parse_counters(raw: RawCounters) -> CounterValues:
    return CounterValues(**{name: parse_number(getattr(raw, name)) for name in CounterValues.model_fields})


def guarded_ratio(numerator: float, denominator: float, scale: float = 1.0) -> float:
    """numerator / denominator * scale, or exactly 0 when denominator <= 0."""
    if denominator <= 0:
        return 0.0
    value = numerator / denominator * scale
    return value if math.isfinite(value) else 0.0


def compute_metrics(raw: RawCounters) -> DerivedMetrics:
    v = parse_counters(raw)

    return DerivedMetrics(
        # Top funnel: acquisition
        cpm=guarded_ratio(v.spend, v.impressions, 1000),
        ctr=guarded_ratio(v.clicks, v.impressions, 100),
        cpc=guarded_ratio(v.spend, v.clicks),
        # Middle funnel: conversation
        start_rate=guarded_ratio(v.messages_started, v.clicks, 100),
        cost_per_message=guarded_ratio(v.spend, v.messages_started),
        response_rate=guarded_ratio(v.active_conversations, v.messages_started, 100),
        # Bottom funnel: conversion
        quote_rate=guarded_ratio(v.quotes_sent, v.active_conversations, 100),
        close_rate=guarded_ratio(v.sales_closed, v.quotes_sent, 100),
        avg_ticket=guarded_ratio(v.total_revenue, v.sales_closed),
        roi=guarded_ratio(v.total_revenue - v.spend, v.spend, 100),
        roas=guarded_ratio(v.total_revenue, v.spend),
        # Efficiency
        cac=guarded_ratio(v.spend, v.sales_closed),
        total_conversion=guarded_ratio(v.sales_closed, v.impressions, 100),
    )


def compute_profit(raw: RawCounters) -> float:
    v = parse_counters(raw)
    profit = v.total_revenue - v.spend
    return profit if math.isfinite(profit) else 0.0
