"""Update Material Price Use Case."""

import math

from snackbooks.application.dto.mappers import material_to_response
from snackbooks.application.dto.requests import UpdateMaterialPriceRequest
from snackbooks.application.dto.responses import MaterialResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.production import Material
from snackbooks.core.exceptions import MaterialNotFoundError, ValidationError
from snackbooks.core.interfaces.material_store import IMaterialStore

logger = get_logger(__name__)


class UpdateMaterialPriceUseCase:
    """Set a material's unit price. Only positive prices are accepted."""

    def __init__(self, material_store: IMaterialStore | None = None):
        self._material_store = material_store

    async def _get_material_store(self) -> IMaterialStore:
        if self._material_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_material_store

            self._material_store = await get_material_store()
        return self._material_store

    async def execute(self, material_id: int, request: UpdateMaterialPriceRequest) -> Material:
        price = request.price_per_unit
        if not math.isfinite(price) or price <= 0:
            raise ValidationError("price_per_unit", "Price must be greater than zero", price)

        store = await self._get_material_store()
        materials = await store.load()
        material = next((m for m in materials if m.id == material_id), None)
        if material is None:
            raise MaterialNotFoundError(material_id)

        old_price = material.price_per_unit
        material.price_per_unit = price
        await store.save([material])

        logger.info(
            "material_price_updated",
            material_id=material_id,
            name=material.name,
            old_price=old_price,
            new_price=price,
        )
        return material

    def to_response(self, result: Material) -> MaterialResponse:
        """Convert result to API response."""
        return material_to_response(result)
