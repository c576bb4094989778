"""Estimate Requirements Use Case: materials and cost for a weight, no write."""

import math
from dataclasses import dataclass

from snackbooks.application.dto.mappers import requirements_to_response
from snackbooks.application.dto.requests import RequirementsRequest
from snackbooks.application.dto.responses import RequirementsResponse
from snackbooks.config import get_settings
from snackbooks.core.entities.production import MaterialRequirements, ProductionConfig
from snackbooks.core.exceptions import ValidationError
from snackbooks.core.interfaces.material_store import IMaterialStore
from snackbooks.core.services.production import (
    cost_of,
    material_price_lookup,
    requirements_for,
)


@dataclass
class RequirementsEstimate:
    weight_grams: float
    requirements: MaterialRequirements
    estimated_cost: float


class EstimateRequirementsUseCase:
    """Requirements for a product weight priced at current material prices."""

    def __init__(
        self,
        material_store: IMaterialStore | None = None,
        config: ProductionConfig | None = None,
    ):
        self._material_store = material_store
        self._config = config

    async def _get_material_store(self) -> IMaterialStore:
        if self._material_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_material_store

            self._material_store = await get_material_store()
        return self._material_store

    def _get_config(self) -> ProductionConfig:
        return self._config or get_settings().production.to_config()

    async def execute(self, request: RequirementsRequest) -> RequirementsEstimate:
        if not math.isfinite(request.weight_grams):
            raise ValidationError(
                "weight_grams", "Weight must be a finite number", request.weight_grams
            )

        config = self._get_config()
        materials = await (await self._get_material_store()).load()

        requirements = requirements_for(request.weight_grams, config)
        cost = cost_of(requirements, material_price_lookup(materials), config)
        return RequirementsEstimate(
            weight_grams=request.weight_grams,
            requirements=requirements,
            estimated_cost=cost,
        )

    def to_response(self, result: RequirementsEstimate) -> RequirementsResponse:
        """Convert result to API response."""
        return requirements_to_response(
            result.requirements, result.weight_grams, result.estimated_cost
        )
