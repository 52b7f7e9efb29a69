from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tacea_kpis.core.database import Base
from tacea_kpis.main import create_app
from tacea_kpis.schemas.counters import RawCounters
from tacea_kpis.services.persistence import InMemoryPersistenceGateway, SqlPersistenceGateway
from tacea_kpis.services.presets import PRESETS
from tacea_kpis.services.store import InputStateStore


@pytest.fixture()
def gateway() -> InMemoryPersistenceGateway:
    return InMemoryPersistenceGateway()


@pytest.fixture()
def store(gateway: InMemoryPersistenceGateway) -> InputStateStore:
    """A freshly loaded store over an empty in-memory gateway."""
    s = InputStateStore(gateway)
    s.load()
    return s


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    engine.dispose()


@pytest.fixture()
def sql_gateway(session_factory) -> SqlPersistenceGateway:
    return SqlPersistenceGateway(session_factory)


@pytest.fixture()
def conservative() -> RawCounters:
    return PRESETS["Conservative Example"]


@pytest.fixture()
def accelerated() -> RawCounters:
    return PRESETS["Accelerated Example"]


@pytest.fixture()
def client(store: InputStateStore):
    with TestClient(create_app(store=store)) as c:
        yield c
