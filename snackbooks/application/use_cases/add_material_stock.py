"""Add Material Stock Use Case: stock only ever goes up."""

import math

from snackbooks.application.dto.mappers import material_to_response
from snackbooks.application.dto.requests import AddMaterialStockRequest
from snackbooks.application.dto.responses import MaterialResponse
from snackbooks.config import get_logger
from snackbooks.core.entities.production import Material
from snackbooks.core.exceptions import MaterialNotFoundError, ValidationError
from snackbooks.core.interfaces.material_store import IMaterialStore

logger = get_logger(__name__)


class AddMaterialStockUseCase:
    """Add purchased quantity to a material's stock."""

    def __init__(self, material_store: IMaterialStore | None = None):
        self._material_store = material_store

    async def _get_material_store(self) -> IMaterialStore:
        if self._material_store is None:
            from snackbooks.infrastructure.storage.sqlite import get_material_store

            self._material_store = await get_material_store()
        return self._material_store

    async def execute(self, material_id: int, request: AddMaterialStockRequest) -> Material:
        quantity = request.quantity
        if not math.isfinite(quantity) or quantity <= 0:
            raise ValidationError("quantity", "Stock added must be greater than zero", quantity)

        store = await self._get_material_store()
        materials = await store.load()
        material = next((m for m in materials if m.id == material_id), None)
        if material is None:
            raise MaterialNotFoundError(material_id)

        material.stock += quantity
        await store.save([material])

        logger.info(
            "material_stock_added",
            material_id=material_id,
            name=material.name,
            added=quantity,
            stock=material.stock,
        )
        return material

    def to_response(self, result: Material) -> MaterialResponse:
        """Convert result to API response."""
        return material_to_response(result)
