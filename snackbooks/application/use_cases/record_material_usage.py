"""Record Material Usage Use Case: batch kg -> requirements -> cost -> log."""

import math
from datetime import date

from snackbooks.application.dto.mappers import usage_to_response
from snackbooks.application.dto.requests import RecordUsageRequest
from snackbooks.application.dto.responses import MaterialUsageResponse
from snackbooks.config import get_logger, get_settings
from snackbooks.core.entities.production import MaterialUsage, ProductionConfig
from snackbooks.core.exceptions import ValidationError
from snackbooks.core.interfaces.material_store import IMaterialStore
from snackbooks.core.services.production import (
    cost_of,
    material_price_lookup,
    requirements_for,
)

logger = get_logger(__name__)


class RecordMaterialUsageUseCase:
    """
    Log a production batch.

    Stock levels are left alone; the log is a cost record only.
    """

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

    async def execute(self, request: RecordUsageRequest) -> MaterialUsage:
        """Execute record usage use case."""
        batch_kg = request.batch_size_kg
        if not math.isfinite(batch_kg) or batch_kg <= 0:
            raise ValidationError("batch_size_kg", "Batch size must be greater than zero", batch_kg)

        config = self._get_config()
        store = await self._get_material_store()
        materials = await store.load()

        requirements = requirements_for(batch_kg * 1000, config)
        total_cost = cost_of(requirements, material_price_lookup(materials), config)

        usage = MaterialUsage(
            usage_date=request.usage_date or date.today(),
            batch_size_kg=batch_kg,
            requirements=requirements,
            total_cost=total_cost,
        )
        usage = await store.add_usage(usage)

        logger.info(
            "record_usage_complete",
            usage_id=usage.id,
            batch_size_kg=batch_kg,
            total_cost=total_cost,
        )
        return usage

    def to_response(self, result: MaterialUsage) -> MaterialUsageResponse:
        """Convert result to API response."""
        return usage_to_response(result)
