"""
Slab catalog module.

Loading of precomputed configuration catalogs per unit system and the
selection engine that matches a requirement against them.
"""

from hollowcore.catalog.normalize import normalize
from hollowcore.catalog.distance import euclidean, scaled_distance
from hollowcore.catalog.loader import (
    CatalogCache,
    CatalogLoadError,
    catalog_exists,
    catalog_path,
    fetch_catalog,
    load_catalog,
)
from hollowcore.catalog.selector import (
    find_exact,
    max_capacity,
    rank_alternatives,
    select_configuration,
    thickness_points,
)

__all__ = [
    "normalize",
    "euclidean",
    "scaled_distance",
    "CatalogCache",
    "CatalogLoadError",
    "catalog_exists",
    "catalog_path",
    "fetch_catalog",
    "load_catalog",
    "find_exact",
    "max_capacity",
    "rank_alternatives",
    "select_configuration",
    "thickness_points",
]
