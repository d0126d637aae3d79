from __future__ import annotations

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from inventory_service.database import StoreGateway
from inventory_service.main import create_app
from inventory_service.startup import StartupSequencer


@pytest.fixture()
def store():
    gateway = StoreGateway(
        "sqlite+pysqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield gateway
    finally:
        gateway.dispose()


@pytest.fixture()
def app(store):
    return create_app(store, StartupSequencer(store, sleep=lambda _seconds: None))


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
