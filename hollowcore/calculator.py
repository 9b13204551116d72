"""
Slab calculator pipeline.

Turns raw calculator input into a selection report:
expressions -> numeric requirement -> catalog -> selection -> chart series.
"""

import logging
from typing import Awaitable, Callable, Sequence

from hollowcore.catalog.loader import fetch_catalog, load_catalog
from hollowcore.catalog.selector import select_configuration
from hollowcore.chart import build_series
from hollowcore.expressions import evaluate_expression, is_valid_number
from hollowcore.models.inputs import CalculationRequest, Requirement, UnitSystem
from hollowcore.models.outputs import CalculationReport
from hollowcore.models.records import ConfigurationRecord

logger = logging.getLogger(__name__)

INVALID_INPUT_MESSAGE = "Enter span, load and thickness."

CatalogProvider = Callable[[UnitSystem], Sequence[ConfigurationRecord]]
AsyncCatalogProvider = Callable[[UnitSystem], Awaitable[Sequence[ConfigurationRecord]]]


class InvalidInputError(ValueError):
    """Span or load did not evaluate to a finite number, or thickness is blank."""


class SlabCalculator:
    """
    Calculator combining expression parsing, catalog loading and selection.

    The catalog provider is called once per calculation, so every call sees
    whatever the provider returns at that moment. Pass a CatalogCache to
    reuse loaded catalogs.
    """

    def __init__(
        self,
        catalog_provider: CatalogProvider = load_catalog,
        async_catalog_provider: AsyncCatalogProvider = fetch_catalog,
    ):
        self.catalog_provider = catalog_provider
        self.async_catalog_provider = async_catalog_provider

    @staticmethod
    def parse_request(request: CalculationRequest) -> Requirement:
        """
        Evaluate span and load expressions into a numeric requirement.

        Raises:
            InvalidInputError: If span or load is not a finite number or the
                thickness is blank
        """
        span = evaluate_expression(request.span)
        load = evaluate_expression(request.load)
        if not is_valid_number(span) or not is_valid_number(load) or not request.thickness.strip():
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
        return Requirement(
            thickness=request.thickness,
            span=span,
            load=load,
            system=request.system,
        )

    def _report(
        self,
        requirement: Requirement,
        catalog: Sequence[ConfigurationRecord],
        normalized: bool,
    ) -> CalculationReport:
        result = select_configuration(
            catalog,
            requirement.thickness,
            requirement.span,
            requirement.load,
            requirement.system,
            normalized=normalized,
        )
        logger.info(
            "%s %s at span %s / load %s: %s",
            requirement.system.value, requirement.thickness,
            requirement.span, requirement.load, result.kind,
        )
        chart = build_series(
            catalog,
            requirement.thickness,
            requirement.system,
            requirement.span,
            requirement.load,
        )
        return CalculationReport(
            requirement=requirement,
            result=result,
            chart=chart,
            catalog_size=len(catalog),
        )

    def calculate(self, request: CalculationRequest) -> CalculationReport:
        """
        Run one calculation.

        Raises:
            InvalidInputError: For unusable span, load or thickness input
            FileNotFoundError, CatalogLoadError: From the catalog provider
        """
        requirement = self.parse_request(request)
        catalog = self.catalog_provider(requirement.system)
        return self._report(requirement, catalog, request.normalized_distance)

    async def calculate_async(self, request: CalculationRequest) -> CalculationReport:
        """Same as calculate, awaiting the asynchronous catalog provider."""
        requirement = self.parse_request(request)
        catalog = await self.async_catalog_provider(requirement.system)
        return self._report(requirement, catalog, request.normalized_distance)
