from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response

from tacea_kpis.api.deps import get_store
from tacea_kpis.core.config import get_settings
from tacea_kpis.core.rate_limit import limiter
from tacea_kpis.services.metrics import compute_metrics
from tacea_kpis.services.reports import build_report, report_filename, report_pdf
from tacea_kpis.services.store import InputStateStore

router = APIRouter(prefix="/reports", tags=["reports"])
settings = get_settings()


@router.get("/kpis.csv")
@limiter.limit(settings.EXPORT_RATE_LIMIT)
def export_kpis_csv(request: Request, store: InputStateStore = Depends(get_store)):
    counters = store.snapshot
    csv_data = build_report(counters, compute_metrics(counters))
    filename = report_filename("csv", prefix=settings.REPORT_FILENAME_PREFIX)
    return Response(
        content=csv_data,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.get("/kpis.pdf")
@limiter.limit(settings.EXPORT_RATE_LIMIT)
def export_kpis_pdf(request: Request, store: InputStateStore = Depends(get_store)):
    counters = store.snapshot
    pdf = report_pdf(counters, compute_metrics(counters), title=f"{settings.PROJECT_NAME} - KPI Report")
    filename = report_filename("pdf", prefix=settings.REPORT_FILENAME_PREFIX)
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )
