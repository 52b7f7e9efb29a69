from fastapi import APIRouter, Depends, HTTPException

from tacea_kpis.api.deps import get_store
from tacea_kpis.core.exceptions import UnknownPresetError
from tacea_kpis.schemas.counters import CounterField, FieldUpdate, PresetApply, PresetResponse
from tacea_kpis.schemas.metrics import DashboardSnapshot
from tacea_kpis.services.dashboard import build_snapshot
from tacea_kpis.services.presets import PRESETS
from tacea_kpis.services.store import InputStateStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardSnapshot)
def get_dashboard(store: InputStateStore = Depends(get_store)):
    return build_snapshot(store.snapshot)


@router.put("/fields/{field}", response_model=DashboardSnapshot)
def set_field(field: CounterField, payload: FieldUpdate, store: InputStateStore = Depends(get_store)):
    return build_snapshot(store.set_field(field, payload.value))


@router.get("/presets", response_model=list[PresetResponse])
def list_presets():
    return [PresetResponse(name=name, counters=counters) for name, counters in PRESETS.items()]


@router.post("/presets", response_model=DashboardSnapshot)
def apply_preset(payload: PresetApply, store: InputStateStore = Depends(get_store)):
    try:
        counters = store.apply_preset(payload.name)
    except UnknownPresetError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return build_snapshot(counters)


@router.post("/reset", response_model=DashboardSnapshot)
def reset(store: InputStateStore = Depends(get_store)):
    return build_snapshot(store.reset())
