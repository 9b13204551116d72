"""
Slab catalog loader.

Loads precomputed configuration records for a unit system from JSON files
named ``<system>_data.json`` (imperial_data.json, metric_data.json).
"""

import asyncio
import importlib.resources as resources
import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from hollowcore.models.inputs import UnitSystem
from hollowcore.models.records import ConfigurationRecord

logger = logging.getLogger(__name__)

# Overrides the catalog directory when set
DATA_DIR_ENV = "HOLLOWCORE_DATA_DIR"

PathLike = Union[str, Path]


class CatalogLoadError(RuntimeError):
    """A catalog file exists but could not be read or parsed."""


def get_project_root() -> Path:
    """Get the project root directory."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


def _resource_path(filename: str) -> Optional[Path]:
    """
    Resolve a catalog shipped inside the hollowcore package.

    Returns None if the resource is unavailable.
    """
    try:
        resource = resources.files("hollowcore").joinpath("data").joinpath(filename)
        if resource.is_file():
            with resources.as_file(resource) as tmp_path:
                return Path(tmp_path)
    except (ModuleNotFoundError, FileNotFoundError, OSError):
        return None
    return None


def catalog_path(system: UnitSystem, data_dir: Optional[PathLike] = None) -> Path:
    """
    Find the best available path for a unit system's catalog.

    Search order: explicit directory, $HOLLOWCORE_DATA_DIR, project data/,
    working directory data/, packaged hollowcore/data.
    """
    filename = system.catalog_file_name
    if data_dir is not None:
        return Path(data_dir) / filename

    candidates = []
    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        candidates.append(Path(env_dir) / filename)
    candidates.append(get_project_root() / "data" / filename)
    candidates.append(Path.cwd() / "data" / filename)

    pkg_path = _resource_path(filename)
    if pkg_path:
        candidates.append(pkg_path)

    for candidate in candidates:
        if candidate.exists():
            return candidate

    # Default to first candidate for error reporting
    return candidates[0]


def catalog_exists(system: UnitSystem, path: Optional[PathLike] = None) -> bool:
    """Check if the catalog JSON for a unit system exists."""
    file_path = Path(path) if path else catalog_path(system)
    return file_path.exists()


def parse_catalog(data: object, source: str = "<memory>") -> list[ConfigurationRecord]:
    """
    Parse decoded JSON into configuration records.

    Raises:
        CatalogLoadError: If the data is not a list of valid records
    """
    if not isinstance(data, list):
        raise CatalogLoadError(f"Catalog {source} must contain a JSON array of records")
    try:
        return [ConfigurationRecord.model_validate(item) for item in data]
    except ValidationError as e:
        raise CatalogLoadError(f"Invalid record in catalog {source}: {e}") from e


def load_catalog(
    system: UnitSystem,
    path: Optional[PathLike] = None,
) -> list[ConfigurationRecord]:
    """
    Load the configuration catalog for a unit system.

    Args:
        system: Unit system whose catalog to load
        path: Path to a JSON file. If None, uses the default location.

    Returns:
        List of ConfigurationRecord objects in file order

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        CatalogLoadError: If the file cannot be read or is not valid catalog JSON
    """
    file_path = Path(path) if path else catalog_path(system)

    if not file_path.exists():
        raise FileNotFoundError(f"{system.value} catalog not found at {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError, OSError) as e:
        raise CatalogLoadError(f"Failed to load {file_path}: {e}") from e

    records = parse_catalog(data, source=str(file_path))
    logger.info("Loaded %d %s configurations from %s", len(records), system.value, file_path)
    return records


async def fetch_catalog(
    system: UnitSystem,
    path: Optional[PathLike] = None,
) -> list[ConfigurationRecord]:
    """Awaitable catalog provider; reads the file in a worker thread."""
    return await asyncio.to_thread(load_catalog, system, path)


class CatalogCache:
    """
    Catalogs kept in memory per unit system.

    A cached catalog is reused until invalidated; without a cache every
    selection reads the file fresh.
    """

    def __init__(self, data_dir: Optional[PathLike] = None):
        self.data_dir = data_dir
        self._catalogs: dict[UnitSystem, list[ConfigurationRecord]] = {}

    def get(self, system: UnitSystem) -> list[ConfigurationRecord]:
        """Return the cached catalog for a system, loading it on first use."""
        if system not in self._catalogs:
            path = catalog_path(system, self.data_dir) if self.data_dir is not None else None
            self._catalogs[system] = load_catalog(system, path)
        return self._catalogs[system]

    def invalidate(self, system: Optional[UnitSystem] = None) -> None:
        """Drop one system's catalog, or all of them."""
        if system is None:
            self._catalogs.clear()
        else:
            self._catalogs.pop(system, None)
        logger.debug("Invalidated catalog cache for %s", system.value if system else "all systems")

    def __contains__(self, system: UnitSystem) -> bool:
        return system in self._catalogs

    def __call__(self, system: UnitSystem) -> list[ConfigurationRecord]:
        return self.get(system)
