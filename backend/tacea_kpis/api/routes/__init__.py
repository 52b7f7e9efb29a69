from tacea_kpis.api.routes import dashboard, reports

__all__ = [
    "dashboard",
    "reports",
]
