from typing import Protocol, runtime_checkable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from tacea_kpis.core.exceptions import PersistenceError
from tacea_kpis.models.kv import KeyValueEntry


@runtime_checkable
class PersistenceGateway(Protocol):
    """Key/value storage for the counters snapshot.

    Implementations should wrap backend failures in ``PersistenceError``; the
    store logs and absorbs any exception a gateway raises.
    """

    def get(self, key: str) -> str | None: ...

    def set(self, key: str, text: str) -> None: ...


class InMemoryPersistenceGateway:
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, text: str) -> None:
        self.data[key] = text


class SqlPersistenceGateway:
    """Key/value gateway backed by the ``kv_entries`` table."""

    def __init__(self, session_factory: sessionmaker[Session]):
        self._session_factory = session_factory

    def get(self, key: str) -> str | None:
        try:
            with self._session_factory() as db:
                entry = db.get(KeyValueEntry, key)
                return entry.value if entry else None
        except SQLAlchemyError as exc:
            raise PersistenceError(f"failed to read {key!r}") from exc

    def set(self, key: str, text: str) -> None:
        try:
            with self._session_factory() as db:
                db.merge(KeyValueEntry(key=key, value=text))
                db.commit()
        except SQLAlchemyError as exc:
            raise PersistenceError(f"failed to write {key!r}") from exc
