"""
Slab configuration selection.

Chooses a catalog configuration for a required span and superimposed load at
a given thickness. Three outcomes, checked in this order:

1. Exact match: a same-thickness record with span >= required span and
   capacity >= required load. Fewest strands wins, then shortest span.
2. Infeasible: the load exceeds the highest capacity anywhere in the catalog,
   whatever the thickness.
3. Alternatives: up to three same-thickness records closest to the request.

Selection is a pure function of its arguments and never raises for finite
span and load.
"""

import logging
from typing import Sequence

from hollowcore.catalog.distance import euclidean, scaled_distance
from hollowcore.catalog.normalize import normalize
from hollowcore.models.inputs import UnitSystem
from hollowcore.models.outputs import (
    AlternativeOptions,
    ExactMatch,
    InfeasibleRequest,
    MAX_ALTERNATIVES,
    SelectionResult,
)
from hollowcore.models.records import ConfigurationRecord, RankedConfiguration

logger = logging.getLogger(__name__)


def max_capacity(catalog: Sequence[ConfigurationRecord]) -> float:
    """Highest capacity across the catalog; 0.0 for an empty catalog."""
    return max((record.capacity for record in catalog), default=0.0)


def same_thickness(
    catalog: Sequence[ConfigurationRecord],
    thickness: str,
) -> list[ConfigurationRecord]:
    """Records whose normalized thickness equals the normalized label, in catalog order."""
    wanted = normalize(thickness)
    return [record for record in catalog if normalize(record.thickness) == wanted]


def thickness_points(
    catalog: Sequence[ConfigurationRecord],
    thickness: str,
) -> list[ConfigurationRecord]:
    """Same-thickness records sorted by span, the input for capacity trend charts."""
    return sorted(same_thickness(catalog, thickness), key=lambda r: r.span)


def find_exact(
    catalog: Sequence[ConfigurationRecord],
    thickness: str,
    span: float,
    load: float,
) -> list[ConfigurationRecord]:
    """
    Records meeting both span and load at the thickness, best first.

    Sorted by (strands, span) ascending; the sort is stable so records equal
    on both keys keep catalog order.
    """
    hits = [
        record
        for record in same_thickness(catalog, thickness)
        if record.span >= span and record.capacity >= load
    ]
    hits.sort(key=lambda r: (r.strands, r.span))
    return hits


def rank_alternatives(
    candidates: Sequence[ConfigurationRecord],
    span: float,
    load: float,
    normalized: bool = False,
    limit: int = MAX_ALTERNATIVES,
) -> list[RankedConfiguration]:
    """
    Rank records by distance to (span, load), closest first.

    Args:
        candidates: Records to rank (already filtered by thickness)
        span: Requested span
        load: Requested load
        normalized: Divide each axis by the candidates' span / capacity range
        limit: Maximum number of records returned

    Returns:
        Up to ``limit`` records with their distances, ascending
    """
    span_scale = load_scale = 1.0
    if normalized and candidates:
        spans = [r.span for r in candidates]
        capacities = [r.capacity for r in candidates]
        span_scale = (max(spans) - min(spans)) or 1.0
        load_scale = (max(capacities) - min(capacities)) or 1.0

    ranked = []
    for record in candidates:
        if normalized:
            dist = scaled_distance(
                record.span, record.capacity, span, load, span_scale, load_scale
            )
        else:
            dist = euclidean(record.span, record.capacity, span, load)
        ranked.append(RankedConfiguration.from_record(record, dist))

    ranked.sort(key=lambda r: r.distance)
    return ranked[:limit]


def select_configuration(
    catalog: Sequence[ConfigurationRecord],
    thickness: str,
    span: float,
    load: float,
    system: UnitSystem = UnitSystem.IMPERIAL,
    normalized: bool = False,
) -> SelectionResult:
    """
    Select a slab configuration for a requirement.

    Args:
        catalog: Configuration records for the unit system (may be empty)
        thickness: Requested thickness label, compared after normalization
        span: Required span, finite
        load: Required superimposed load, finite
        system: Unit system of the catalog, used for log messages only
        normalized: Rank alternatives with axis-normalized distance

    Returns:
        ExactMatch, InfeasibleRequest or AlternativeOptions
    """
    hits = find_exact(catalog, thickness, span, load)
    if hits:
        best = hits[0]
        logger.debug(
            "Exact match for %s at %s %s / %s %s: %d strands, span %s",
            thickness, span, system.span_unit, load, system.load_unit,
            best.strands, best.span,
        )
        return ExactMatch(best=best)

    if not catalog:
        logger.debug("Empty %s catalog; request is infeasible", system.value)
        return InfeasibleRequest(requested_load=load, max_available_capacity=0.0)

    max_cap = max_capacity(catalog)
    if load > max_cap:
        logger.debug(
            "Load %s %s exceeds catalog maximum %s", load, system.load_unit, max_cap
        )
        return InfeasibleRequest(requested_load=load, max_available_capacity=max_cap)

    ranked = rank_alternatives(
        same_thickness(catalog, thickness), span, load, normalized=normalized
    )
    logger.debug("No exact match for %s; %d alternatives", thickness, len(ranked))
    return AlternativeOptions(ranked=ranked)
