import pytest
from sqlalchemy import inspect, text
from sqlalchemy.engine import make_url

from inventory_service import crud, database, schemas
from inventory_service.database import SchemaAction, StoreGateway
from inventory_service.exceptions import StoreUnavailable

HEAD = "8a4e6d2c5b31"


def _columns(store):
    return {col["name"] for col in inspect(store.engine).get_columns("inventory_items")}


def test_ensure_schema_creates_tables_on_empty_store(store):
    result = store.ensure_schema()

    assert result.action == SchemaAction.CREATED
    assert result.revision == HEAD
    assert result.error is None
    assert _columns(store) == {"id", "article_number", "name", "quantity", "location", "supplier"}


def test_ensure_schema_is_idempotent(store):
    store.ensure_schema()
    result = store.ensure_schema()

    assert result.action == SchemaAction.UNCHANGED
    assert result.revision == HEAD


def test_ensure_schema_upgrades_narrow_legacy_table(store):
    with store.engine.begin() as connection:
        connection.execute(text(
            "CREATE TABLE inventory_items ("
            "id INTEGER PRIMARY KEY, article_number VARCHAR NOT NULL, "
            "quantity INTEGER NOT NULL, location VARCHAR NOT NULL)"
        ))
        connection.execute(text(
            "INSERT INTO inventory_items (article_number, quantity, location) VALUES ('OLD-1', 7, 'W9')"
        ))

    result = store.ensure_schema()

    assert result.action == SchemaAction.UPGRADED
    assert result.revision == HEAD
    assert {"name", "supplier"} <= _columns(store)

    db = store.SessionLocal()
    try:
        item = crud.get_inventory_item_by_article_number(db, "OLD-1")
        assert (item.quantity, item.location, item.name, item.supplier) == (7, "W9", "", "")
    finally:
        db.close()


def test_ensure_schema_reports_failed_upgrade_instead_of_raising(store, monkeypatch):
    with store.engine.begin() as connection:
        connection.execute(text("CREATE TABLE inventory_items (id INTEGER PRIMARY KEY)"))

    def _failing_upgrade(_config, _revision):
        raise RuntimeError("migration exploded")

    monkeypatch.setattr(database.command, "upgrade", _failing_upgrade)

    result = store.ensure_schema()

    assert result.action == SchemaAction.UPGRADE_FAILED
    assert result.revision is None
    assert result.error == "migration exploded"


def test_can_connect_raises_store_unavailable(tmp_path):
    unreachable = StoreGateway(f"sqlite+pysqlite:///{tmp_path / 'missing-dir' / 'inventory.db'}")
    try:
        with pytest.raises(StoreUnavailable):
            unreachable.can_connect()
    finally:
        unreachable.dispose()


def test_can_connect_succeeds_on_reachable_store(store):
    store.can_connect()


def test_crud_round_trip_by_article_number(store):
    store.ensure_schema()
    db = store.SessionLocal()
    try:
        created = crud.create_inventory_item(
            db, schemas.InventoryItemCreate(article_number="C1", quantity=2, location="W1")
        )
        assert created.id

        updated = crud.update_inventory_item_quantity(db, "C1", 9)
        assert (updated.id, updated.quantity, updated.location) == (created.id, 9, "W1")

        assert crud.delete_inventory_item(db, "C1") is True
        assert crud.get_inventory_item_by_article_number(db, "C1") is None
        assert crud.update_inventory_item_quantity(db, "C1", 1) is None
        assert crud.delete_inventory_item(db, "C1") is False
        assert crud.get_inventory_items(db) == []
    finally:
        db.close()


def test_connection_string_to_url_passes_sqlalchemy_urls_through():
    url = "postgresql://app:pw@db:5432/inventory?sslmode=require"
    assert database.connection_string_to_url(url) == url
    assert database.connection_string_to_url("sqlite+pysqlite://") == "sqlite+pysqlite://"


def test_connection_string_to_url_converts_npgsql_keywords():
    url = database.connection_string_to_url(
        "Host=db;Port=5432;Database=inventory;Username=postgres;Password=p@ss;Pooling=true;"
    )
    parsed = make_url(url)
    assert (parsed.drivername, parsed.host, parsed.port, parsed.database) == ("postgresql", "db", 5432, "inventory")
    assert (parsed.username, parsed.password) == ("postgres", "p@ss")


def test_connection_string_without_host_is_rejected():
    with pytest.raises(ValueError):
        database.connection_string_to_url("Database=inventory;Username=postgres")


def test_database_url_from_env_prefers_database_url(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite://")
    monkeypatch.setenv("ConnectionStrings__DefaultConnection", "Host=db;Database=inventory")
    assert database.database_url_from_env() == "sqlite+pysqlite://"


def test_database_url_from_env_reads_npgsql_fallback(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.setenv("ConnectionStrings__DefaultConnection", "Host=db;Database=inventory;Username=postgres;Password=pw")

    gateway = StoreGateway()
    try:
        assert gateway.engine.url.host == "db"
        assert gateway.engine.url.database == "inventory"
    finally:
        gateway.dispose()


def test_database_url_from_env_default(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ConnectionStrings__DefaultConnection", raising=False)
    assert database.database_url_from_env() == database.DEFAULT_DATABASE_URL
