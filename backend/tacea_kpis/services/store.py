import json
import logging
import threading

from tacea_kpis.core.exceptions import UnknownFieldError, UnknownPresetError
from tacea_kpis.schemas.counters import CounterField, RawCounters
from tacea_kpis.services.numbers import sanitize_numeric_text
from tacea_kpis.services.persistence import PersistenceGateway
from tacea_kpis.services.presets import PRESETS

logger = logging.getLogger(__name__)

DEFAULT_STORE_KEY = "tacea_kpi_dashboard"


def _attr_for(field: CounterField | str) -> str:
    try:
        return CounterField(field).name
    except ValueError:
        # Also accept the snake_case attribute name.
        if isinstance(field, str) and field in CounterField.__members__:
            return field
        raise UnknownFieldError(str(field)) from None


class InputStateStore:
    """Owns the raw counters and writes every change through to a persistence gateway.

    The store is the only thing that replaces the snapshot; callers get frozen
    ``RawCounters`` back and recompute derived views from them. Mutations are
    serialized by a lock, so each one reads, replaces and persists before the
    next starts.
    """

    def __init__(self, gateway: PersistenceGateway, key: str = DEFAULT_STORE_KEY):
        self._gateway = gateway
        self._key = key
        self._counters = RawCounters()
        self._lock = threading.RLock()

    @property
    def snapshot(self) -> RawCounters:
        return self._counters

    def load(self) -> RawCounters:
        with self._lock:
            self._counters = self._read()
            return self._counters

    def set_field(self, field: CounterField | str, raw_text: str | None) -> RawCounters:
        attr = _attr_for(field)
        value = sanitize_numeric_text(raw_text)
        logger.debug("set %s=%r", attr, value)
        with self._lock:
            return self._replace(self._counters.model_copy(update={attr: value}))

    def apply_preset(self, name: str) -> RawCounters:
        preset = PRESETS.get(name)
        if preset is None:
            raise UnknownPresetError(name)
        logger.debug("apply preset %r", name)
        return self._replace(preset)

    def reset(self) -> RawCounters:
        logger.debug("reset counters")
        return self._replace(RawCounters())

    def _replace(self, counters: RawCounters) -> RawCounters:
        with self._lock:
            self._counters = counters
            self._write()
            return counters

    def _read(self) -> RawCounters:
        try:
            saved = self._gateway.get(self._key)
        except Exception:
            # Any gateway failure falls back to defaults.
            logger.warning("could not read saved counters; starting empty", exc_info=True)
            return RawCounters()
        if not saved:
            return RawCounters()

        try:
            parsed = json.loads(saved)
        except ValueError:
            logger.warning("saved counters under %r are not valid JSON; starting empty", self._key)
            return RawCounters()
        if not isinstance(parsed, dict):
            logger.warning("saved counters under %r are not an object; starting empty", self._key)
            return RawCounters()

        values: dict[str, str] = {}
        for field in CounterField:
            item = parsed.get(field.value)
            if isinstance(item, bool) or not isinstance(item, (str, int, float)):
                continue
            values[field.name] = sanitize_numeric_text(str(item))
        return RawCounters(**values)

    def _write(self) -> None:
        text = json.dumps(self._counters.model_dump(by_alias=True))
        try:
            self._gateway.set(self._key, text)
        except Exception:
            # In-memory state stays authoritative for the session.
            logger.warning("could not persist counters under %r", self._key, exc_info=True)
