"""
Tests for catalog loading.

Tests cover:
- Packaged imperial and metric catalogs
- Loading from explicit paths and $HOLLOWCORE_DATA_DIR
- Error handling for missing and malformed files
- The async provider and the per-system cache
"""

import asyncio
import json

import pytest

from hollowcore.catalog.loader import (
    DATA_DIR_ENV,
    CatalogCache,
    CatalogLoadError,
    catalog_exists,
    catalog_path,
    fetch_catalog,
    load_catalog,
    parse_catalog,
)
from hollowcore.catalog.normalize import normalize
from hollowcore.models.inputs import UnitSystem


class TestPackagedCatalogs:
    """The catalogs shipped with the package."""

    @pytest.mark.parametrize("system", list(UnitSystem))
    def test_catalog_exists(self, system):
        assert catalog_exists(system)
        assert catalog_path(system).name == system.catalog_file_name

    @pytest.mark.parametrize("system", list(UnitSystem))
    def test_every_thickness_option_has_records(self, system):
        catalog = load_catalog(system)
        labels = {normalize(r.thickness) for r in catalog}
        for option in system.thickness_options:
            assert normalize(option) in labels

    def test_imperial_values(self):
        catalog = load_catalog(UnitSystem.IMPERIAL)
        assert len(catalog) == 60
        assert max(r.capacity for r in catalog) == 360

    def test_metric_values_are_in_native_units(self):
        catalog = load_catalog(UnitSystem.METRIC)
        assert all(r.span < 20 for r in catalog)
        assert all(r.capacity < 25 for r in catalog)


class TestLoadCatalog:
    """Loading from explicit locations."""

    def test_load_from_path(self, catalog_file, mixed_catalog):
        catalog = load_catalog(UnitSystem.IMPERIAL, catalog_file)
        assert catalog == mixed_catalog

    def test_data_dir_env(self, tmp_path, catalog_file, monkeypatch):
        monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
        assert catalog_path(UnitSystem.IMPERIAL) == catalog_file
        assert len(load_catalog(UnitSystem.IMPERIAL)) == 8

    def test_explicit_data_dir(self, tmp_path):
        assert catalog_path(UnitSystem.METRIC, tmp_path) == tmp_path / "metric_data.json"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(UnitSystem.IMPERIAL, tmp_path / "missing.json")
        assert not catalog_exists(UnitSystem.IMPERIAL, tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "imperial_data.json"
        path.write_text("[{not json")
        with pytest.raises(CatalogLoadError):
            load_catalog(UnitSystem.IMPERIAL, path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "imperial_data.json"
        path.write_bytes(b"\xff\xfe[]")
        with pytest.raises(CatalogLoadError):
            load_catalog(UnitSystem.IMPERIAL, path)

    def test_directory_path(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            load_catalog(UnitSystem.IMPERIAL, tmp_path)

    def test_not_a_list(self, tmp_path):
        path = tmp_path / "imperial_data.json"
        path.write_text(json.dumps({"Thickness": "8''"}))
        with pytest.raises(CatalogLoadError):
            load_catalog(UnitSystem.IMPERIAL, path)

    def test_record_missing_field(self):
        with pytest.raises(CatalogLoadError):
            parse_catalog([{"Thickness": "8''", "Span": 20, "Capacity": 100}])

    def test_parse_accepts_both_key_styles(self):
        catalog = parse_catalog([
            {"Thickness": "8''", "Span": 20, "Capacity": 100, "Strands": 5},
            {"thickness": "8''", "span": 24, "capacity": 130, "strands": 7},
        ])
        assert [r.strands for r in catalog] == [5, 7]

    def test_empty_catalog_file(self, tmp_path):
        path = tmp_path / "imperial_data.json"
        path.write_text("[]")
        assert load_catalog(UnitSystem.IMPERIAL, path) == []


class TestFetchCatalog:
    """The awaitable provider."""

    def test_fetch_matches_load(self, catalog_file):
        fetched = asyncio.run(fetch_catalog(UnitSystem.IMPERIAL, catalog_file))
        assert fetched == load_catalog(UnitSystem.IMPERIAL, catalog_file)

    def test_fetch_propagates_errors(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            asyncio.run(fetch_catalog(UnitSystem.IMPERIAL, tmp_path / "missing.json"))


class TestCatalogCache:
    """Per-system catalog cache."""

    def test_reuses_until_invalidated(self, tmp_path, catalog_file):
        cache = CatalogCache(data_dir=tmp_path)
        first = cache.get(UnitSystem.IMPERIAL)
        assert UnitSystem.IMPERIAL in cache

        catalog_file.write_text("[]")
        assert cache.get(UnitSystem.IMPERIAL) is first

        cache.invalidate(UnitSystem.IMPERIAL)
        assert UnitSystem.IMPERIAL not in cache
        assert cache.get(UnitSystem.IMPERIAL) == []

    def test_invalidate_all(self, tmp_path, catalog_file):
        cache = CatalogCache(data_dir=tmp_path)
        cache(UnitSystem.IMPERIAL)
        cache.invalidate()
        assert UnitSystem.IMPERIAL not in cache

    def test_missing_system_raises(self, tmp_path):
        cache = CatalogCache(data_dir=tmp_path)
        with pytest.raises(FileNotFoundError):
            cache.get(UnitSystem.METRIC)
