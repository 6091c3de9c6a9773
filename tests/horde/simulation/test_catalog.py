"""Unit tests for the monster catalog and its JSON loader."""
from __future__ import annotations

import json

import pytest

from horde.simulation.catalog import (
    DEFAULT_CATALOG_PATH,
    CatalogError,
    MonsterCatalog,
    MonsterType,
    load_catalog,
    parse_catalog,
)

pytestmark = pytest.mark.unit


def _entry(**overrides) -> dict:
    entry = {
        "type": "goblin",
        "template": "monsters/goblin",
        "hp": 100,
        "damage": 8,
        "speed": 3.5,
        "spawn_interval": 2.0,
        "mul_hp": 0.5,
    }
    entry.update(overrides)
    return entry


class TestMonsterCatalog:
    def test_empty_catalog(self):
        cat = MonsterCatalog()
        assert cat.is_empty()
        assert len(cat) == 0

    def test_order_preserved(self, goblin, orc):
        cat = MonsterCatalog([orc, goblin])
        assert cat.types() == [MonsterType.ORC, MonsterType.GOBLIN]
        assert cat[0] is orc

    def test_get_by_type(self, catalog, orc):
        assert catalog.get(MonsterType.ORC) is orc
        assert catalog.get(MonsterType.WRAITH) is None

    def test_catalog_is_immutable_copy(self, goblin):
        source = [goblin]
        cat = MonsterCatalog(source)
        source.clear()
        assert len(cat) == 1


class TestParseCatalog:
    def test_parse_minimal(self):
        cat = parse_catalog({"monsters": [_entry()]})
        m = cat[0]
        assert m.monster_type is MonsterType.GOBLIN
        assert m.hp == 100
        assert m.mul_hp == 0.5
        assert m.mul_spawn_interval == 0.0
        assert m.template == "monsters/goblin"

    def test_missing_template_is_unset(self):
        cat = parse_catalog({"monsters": [_entry(template=None)]})
        assert cat[0].template is None

    def test_empty_template_is_unset(self):
        cat = parse_catalog({"monsters": [_entry(template="")]})
        assert cat[0].template is None

    def test_unknown_type_rejected(self):
        with pytest.raises(CatalogError):
            parse_catalog({"monsters": [_entry(type="dragon")]})

    def test_non_positive_interval_rejected(self):
        with pytest.raises(CatalogError):
            parse_catalog({"monsters": [_entry(spawn_interval=0.0)]})

    def test_duplicate_type_rejected(self):
        with pytest.raises(CatalogError, match="Duplicate"):
            parse_catalog({"monsters": [_entry(), _entry(hp=5)]})

    def test_empty_document(self):
        assert parse_catalog({}).is_empty()


class TestLoadCatalog:
    def test_bundled_catalog_loads(self):
        cat = load_catalog()
        assert DEFAULT_CATALOG_PATH.exists()
        assert len(cat) >= 1
        assert all(m.template for m in cat)

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "monsters.json"
        path.write_text(json.dumps({"monsters": [_entry(), _entry(type="orc")]}))
        cat = load_catalog(path)
        assert cat.types() == [MonsterType.GOBLIN, MonsterType.ORC]

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogError, match="not found"):
            load_catalog(tmp_path / "nope.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json")
        with pytest.raises(CatalogError, match="not valid JSON"):
            load_catalog(path)

    def test_catalog_error_is_value_error(self):
        assert issubclass(CatalogError, ValueError)
