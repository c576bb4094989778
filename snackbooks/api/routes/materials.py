"""Raw material endpoints: prices, stock, requirements and usage log."""

from fastapi import APIRouter, Depends, status

from snackbooks.api.dependencies import (
    get_add_material_stock_use_case,
    get_estimate_requirements_use_case,
    get_materials,
    get_record_usage_use_case,
    get_update_material_price_use_case,
)
from snackbooks.application.dto.mappers import material_to_response, usage_to_response
from snackbooks.application.dto.requests import (
    AddMaterialStockRequest,
    RecordUsageRequest,
    RequirementsRequest,
    UpdateMaterialPriceRequest,
)
from snackbooks.application.dto.responses import (
    ErrorResponse,
    MaterialListResponse,
    MaterialResponse,
    MaterialUsageListResponse,
    MaterialUsageResponse,
    RequirementsResponse,
)
from snackbooks.application.use_cases import (
    AddMaterialStockUseCase,
    EstimateRequirementsUseCase,
    RecordMaterialUsageUseCase,
    UpdateMaterialPriceUseCase,
)
from snackbooks.core.interfaces import IMaterialStore

router = APIRouter(prefix="/api/materials", tags=["materials"])


@router.get("", response_model=MaterialListResponse)
async def list_materials(
    store: IMaterialStore = Depends(get_materials),
) -> MaterialListResponse:
    """All materials with price, stock and stock value."""
    materials = await store.load()
    return MaterialListResponse(
        materials=[material_to_response(m) for m in materials],
        total=len(materials),
        total_stock_value=sum(m.stock_value for m in materials),
    )


@router.put(
    "/{material_id}/price",
    response_model=MaterialResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_material_price(
    material_id: int,
    request: UpdateMaterialPriceRequest,
    use_case: UpdateMaterialPriceUseCase = Depends(get_update_material_price_use_case),
) -> MaterialResponse:
    """Set a material's price per unit."""
    result = await use_case.execute(material_id, request)
    return use_case.to_response(result)


@router.post(
    "/{material_id}/stock",
    response_model=MaterialResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_material_stock(
    material_id: int,
    request: AddMaterialStockRequest,
    use_case: AddMaterialStockUseCase = Depends(get_add_material_stock_use_case),
) -> MaterialResponse:
    """Add purchased stock."""
    result = await use_case.execute(material_id, request)
    return use_case.to_response(result)


@router.post("/requirements", response_model=RequirementsResponse)
async def estimate_requirements(
    request: RequirementsRequest,
    use_case: EstimateRequirementsUseCase = Depends(get_estimate_requirements_use_case),
) -> RequirementsResponse:
    """Materials and estimated cost to produce a weight of product."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.post(
    "/usage",
    response_model=MaterialUsageResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
async def record_usage(
    request: RecordUsageRequest,
    use_case: RecordMaterialUsageUseCase = Depends(get_record_usage_use_case),
) -> MaterialUsageResponse:
    """Log a production batch with its computed cost."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get("/usage", response_model=MaterialUsageListResponse)
async def list_usage(
    limit: int = 100,
    store: IMaterialStore = Depends(get_materials),
) -> MaterialUsageListResponse:
    """Production batches, newest first."""
    usage = await store.list_usage(limit=limit)
    return MaterialUsageListResponse(
        usage=[usage_to_response(u) for u in usage],
        total=len(usage),
    )
