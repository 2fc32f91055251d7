import pytest

from lightbnb_db.config import load_config
from lightbnb_db.models import NewProperty, NewUser, PropertyFilterOptions


class TestPropertyFilterOptions:
    def test_from_mapping_coerces_numbers(self):
        options = PropertyFilterOptions.from_mapping({
            "city": "Vancouver",
            "owner_id": "4",
            "minimum_price_per_night": "50",
            "maximum_price_per_night": "149.5",
            "minimum_rating": 4,
            "unrelated": "ignored",
        })

        assert options == PropertyFilterOptions(
            city="Vancouver",
            owner_id=4,
            minimum_price_per_night=50,
            maximum_price_per_night=149.5,
            minimum_rating=4,
        )

    def test_blank_values_become_none(self):
        options = PropertyFilterOptions.from_mapping({"city": "  ", "owner_id": ""})
        assert options == PropertyFilterOptions()

    def test_none_mapping(self):
        assert PropertyFilterOptions.from_mapping(None) == PropertyFilterOptions()

    @pytest.mark.parametrize("field", ["owner_id", "minimum_price_per_night", "minimum_rating"])
    def test_non_numeric_value(self, field):
        with pytest.raises(ValueError):
            PropertyFilterOptions.from_mapping({field: "cheap"})


    @pytest.mark.parametrize("value", ["nan", "inf", "-inf", float("nan"), float("inf")])
    def test_non_finite_value(self, value):
        with pytest.raises(ValueError, match="finite"):
            PropertyFilterOptions.from_mapping({"minimum_rating": value})


class TestInsertPayloads:
    def test_new_user_requires_all_fields(self):
        with pytest.raises(ValueError, match="password"):
            NewUser.from_mapping({"name": "Ann", "email": "a@b.c", "password": ""})

    def test_new_property_column_order(self):
        assert NewProperty.columns()[:3] == ("owner_id", "title", "description")
        assert NewProperty.columns()[-1] == "post_code"
        assert len(NewProperty.columns()) == 14

    def test_new_property_missing_field(self):
        with pytest.raises(ValueError, match="city"):
            NewProperty.from_mapping({"owner_id": 1, "title": "x"})


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in (
            "LIGHTBNB_DB_BACKEND",
            "LIGHTBNB_DB_URI",
            "LIGHTBNB_DEFAULT_LIMIT",
            "LIGHTBNB_ENABLE_LOGGING",
        ):
            monkeypatch.delenv(name, raising=False)

        cfg = load_config()

        assert cfg.db_backend == "sqlite"
        assert cfg.db_uri == "lightbnb.db"
        assert cfg.default_limit == 10
        assert cfg.enable_logging is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("LIGHTBNB_DB_BACKEND", "Postgres")
        monkeypatch.setenv("LIGHTBNB_DB_URI", "postgresql://localhost/lightbnb")
        monkeypatch.setenv("LIGHTBNB_DEFAULT_LIMIT", "25")
        monkeypatch.setenv("LIGHTBNB_ENABLE_LOGGING", "yes")

        cfg = load_config()

        assert cfg.db_backend == "postgres"
        assert cfg.db_uri == "postgresql://localhost/lightbnb"
        assert cfg.default_limit == 25
        assert cfg.enable_logging is True

    @pytest.mark.parametrize("value", ["ten", "0", "-5"])
    def test_bad_default_limit(self, monkeypatch, value):
        monkeypatch.setenv("LIGHTBNB_DEFAULT_LIMIT", value)
        with pytest.raises(ValueError):
            load_config()
