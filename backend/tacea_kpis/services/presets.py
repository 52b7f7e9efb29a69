from tacea_kpis.schemas.counters import RawCounters

PRESETS: dict[str, RawCounters] = {
    "Conservative Example": RawCounters(
        spend="12000",
        impressions="450000",
        clicks="7200",
        messages_started="980",
        active_conversations="620",
        quotes_sent="260",
        sales_closed="78",
        total_revenue="265000",
    ),
    "Accelerated Example": RawCounters(
        spend="35000",
        impressions="1200000",
        clicks="21000",
        messages_started="3800",
        active_conversations="2400",
        quotes_sent="1200",
        sales_closed="310",
        total_revenue="980000",
    ),
}
