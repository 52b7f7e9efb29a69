from fastapi import Request

from tacea_kpis.services.store import InputStateStore


def get_store(request: Request) -> InputStateStore:
    return request.app.state.store
