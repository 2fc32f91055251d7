import pytest

from lightbnb_db import LightBnBDB, LightBnBDBConfig, QueryExecutionError, create_lightbnb_db
from lightbnb_db.core import _create_backend_from_config
from lightbnb_db.db import PostgresBackend, SQLiteBackend


PROPERTY_FORM = {
    "owner_id": "1",
    "title": "Loft",
    "description": "",
    "thumbnail_photo_url": "https://example.com/t.jpg",
    "cover_photo_url": "https://example.com/c.jpg",
    "cost_per_night": "7500",
    "parking_spaces": "0",
    "number_of_bathrooms": "1",
    "number_of_bedrooms": "1",
    "country": "Canada",
    "street": "5 Granville St",
    "city": "Vancouver",
    "province": "BC",
    "post_code": "V6C 1T2",
}


class TestConstruction:
    def test_from_config_creates_schema(self, tmp_path):
        cfg = LightBnBDBConfig(db_backend="sqlite", db_uri=str(tmp_path / "app.db"))
        db = create_lightbnb_db(cfg)

        assert isinstance(db.db_pool.backend, SQLiteBackend)
        assert db.get_all_properties() == []
        assert db.get_user_with_id(1) is None

    def test_from_config_without_schema(self, tmp_path):
        cfg = LightBnBDBConfig(db_uri=str(tmp_path / "empty.db"))
        db = LightBnBDB.from_config(cfg, init_schema=False)

        with pytest.raises(QueryExecutionError):
            db.get_all_properties()

    def test_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("LIGHTBNB_DB_BACKEND", "sqlite")
        monkeypatch.setenv("LIGHTBNB_DB_URI", str(tmp_path / "env.db"))
        monkeypatch.setenv("LIGHTBNB_DEFAULT_LIMIT", "3")

        db = LightBnBDB.from_env()

        assert db.config.default_limit == 3
        assert db.get_all_reservations(1) == []

    def test_postgres_backend_selected(self):
        backend = _create_backend_from_config(
            LightBnBDBConfig(db_backend="postgresql", db_uri="postgresql://u:secret@h/db")
        )

        assert isinstance(backend, PostgresBackend)
        assert backend.paramstyle == "format"
        assert backend.ilike == "ILIKE"
        assert "secret" not in repr(backend)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            _create_backend_from_config(LightBnBDBConfig(db_backend="oracle"))


class TestOperations:
    def test_user_round(self, db):
        row = db.add_user({"name": "Ann", "email": "ANN@example.com", "password": "pw"})

        assert db.get_user_with_email("ann@EXAMPLE.com")["id"] == row["id"]
        assert db.get_user_with_id(row["id"])["name"] == "Ann"

    def test_add_user_missing_field(self, db):
        with pytest.raises(ValueError):
            db.add_user({"name": "Ann", "email": "ann@example.com"})

    def test_get_all_properties_accepts_form_mapping(self, db):
        rows = db.get_all_properties(
            {"city": "van", "minimum_price_per_night": "", "minimum_rating": "4"}
        )

        assert [r["title"] for r in rows] == ["Speed lamp"]

    def test_default_limit_from_config(self, db):
        db.config.default_limit = 1

        assert len(db.get_all_properties()) == 1
        assert len(db.get_all_properties(limit=3)) == 3
        assert len(db.get_all_reservations(3)) == 1

    def test_add_property_from_form(self, db):
        row = db.add_property(PROPERTY_FORM)

        assert row["cost_per_night"] == 7500
        assert row["description"] is None
        assert row["title"] in [r["title"] for r in db.get_all_properties({"owner_id": 1})]
