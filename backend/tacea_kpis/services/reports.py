from datetime import date
from io import BytesIO, StringIO
import csv

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from tacea_kpis.schemas.counters import RawCounters
from tacea_kpis.schemas.metrics import DerivedMetrics
from tacea_kpis.services.metrics import parse_counters
from tacea_kpis.services.numbers import format_fixed, format_raw

DEFAULT_FILENAME_PREFIX = "tacea_kpis"


def report_rows(raw: RawCounters, derived: DerivedMetrics) -> list[list[str]]:
    """Rows of the KPI report. Headers are single-field; an empty row separates sections."""
    v = parse_counters(raw)
    m = derived

    return [
        ["RAW INPUTS"],
        ["Ad Spend", format_raw(v.spend)],
        ["Impressions", format_raw(v.impressions)],
        ["Clicks", format_raw(v.clicks)],
        ["Messages Started", format_raw(v.messages_started)],
        ["Active Conversations", format_raw(v.active_conversations)],
        ["Quotes Sent", format_raw(v.quotes_sent)],
        ["Sales Closed", format_raw(v.sales_closed)],
        ["Total Revenue", format_raw(v.total_revenue)],
        [],
        ["TOP FUNNEL - ACQUISITION"],
        ["CPM (Cost per thousand impressions)", format_fixed(m.cpm)],
        ["CTR (Click-through rate) %", format_fixed(m.ctr)],
        ["CPC (Cost per click)", format_fixed(m.cpc)],
        [],
        ["MIDDLE FUNNEL - CONVERSATION"],
        ["Conversation start rate %", format_fixed(m.start_rate)],
        ["Cost per message", format_fixed(m.cost_per_message)],
        ["Response rate %", format_fixed(m.response_rate)],
        [],
        ["BOTTOM FUNNEL - CONVERSION"],
        ["Quote rate %", format_fixed(m.quote_rate)],
        ["Close rate %", format_fixed(m.close_rate)],
        ["Average ticket", format_fixed(m.avg_ticket)],
        ["ROI %", format_fixed(m.roi)],
        ["ROAS", format_fixed(m.roas)],
        [],
        ["EFFICIENCY"],
        ["CAC (Customer acquisition cost)", format_fixed(m.cac)],
        ["Total conversion %", format_fixed(m.total_conversion, 4)],
    ]


def build_report(raw: RawCounters, derived: DerivedMetrics) -> str:
    out = StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerows(report_rows(raw, derived))
    # Rows are newline-joined; no terminator after the last one.
    return out.getvalue().removesuffix("\n")


def report_pdf(raw: RawCounters, derived: DerivedMetrics, title: str = "Tacea KPI Report") -> bytes:
    buffer = BytesIO()
    p = canvas.Canvas(buffer, pagesize=letter)
    y = 760
    p.setFont("Helvetica-Bold", 16)
    p.drawString(50, y, title)
    y -= 40

    for row in report_rows(raw, derived):
        if y < 60:
            p.showPage()
            y = 760
        if not row:
            y -= 10
            continue
        if len(row) == 1:
            p.setFont("Helvetica-Bold", 12)
            p.drawString(50, y, row[0])
        else:
            p.setFont("Helvetica", 11)
            p.drawString(50, y, row[0])
            p.drawRightString(540, y, row[1])
        y -= 20

    p.showPage()
    p.save()
    buffer.seek(0)
    return buffer.read()


def report_filename(extension: str = "csv", today: date | None = None, prefix: str = DEFAULT_FILENAME_PREFIX) -> str:
    today = today or date.today()
    return f"{prefix}_{today.isoformat()}.{extension}"
