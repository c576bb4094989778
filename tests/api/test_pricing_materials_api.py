"""API tests for selling-price and material endpoints."""

from datetime import date
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient

from snackbooks.api.dependencies import (
    get_add_material_stock_use_case,
    get_estimate_requirements_use_case,
    get_materials,
    get_pricing,
    get_record_usage_use_case,
    get_update_material_price_use_case,
    get_update_selling_price_use_case,
)
from snackbooks.api.main import app
from snackbooks.application.use_cases import (
    AddMaterialStockUseCase,
    EstimateRequirementsUseCase,
    RecordMaterialUsageUseCase,
    UpdateMaterialPriceUseCase,
    UpdateSellingPriceUseCase,
)
from snackbooks.core.entities import MaterialUsage, PricingTable, ProductionConfig
from snackbooks.core.exceptions import DatabaseError
from snackbooks.core.services import requirements_for


@pytest.fixture
def mock_pricing_store():
    store = AsyncMock()
    store.load.return_value = PricingTable(prices={"retail": {100: 30.0}})
    return store


@pytest.fixture
def mock_material_store(sample_materials):
    store = AsyncMock()
    store.load.return_value = sample_materials
    store.list_usage.return_value = [
        MaterialUsage(
            id=1,
            usage_date=date(2024, 3, 5),
            batch_size_kg=1.0,
            requirements=requirements_for(1000),
            total_cost=100.0,
        )
    ]

    async def add_usage(usage: MaterialUsage) -> MaterialUsage:
        usage.id = 2
        return usage

    store.add_usage.side_effect = add_usage
    return store


@pytest.fixture
def catalog_client(client, mock_pricing_store, mock_material_store):
    config = ProductionConfig()
    app.dependency_overrides[get_pricing] = lambda: mock_pricing_store
    app.dependency_overrides[get_materials] = lambda: mock_material_store
    app.dependency_overrides[get_update_selling_price_use_case] = lambda: UpdateSellingPriceUseCase(
        pricing_store=mock_pricing_store
    )
    app.dependency_overrides[get_update_material_price_use_case] = lambda: UpdateMaterialPriceUseCase(
        material_store=mock_material_store
    )
    app.dependency_overrides[get_add_material_stock_use_case] = lambda: AddMaterialStockUseCase(
        material_store=mock_material_store
    )
    app.dependency_overrides[get_estimate_requirements_use_case] = lambda: EstimateRequirementsUseCase(
        material_store=mock_material_store, config=config
    )
    app.dependency_overrides[get_record_usage_use_case] = lambda: RecordMaterialUsageUseCase(
        material_store=mock_material_store, config=config
    )
    return client


class TestPricingAPI:
    async def test_table_is_resolved(self, catalog_client: AsyncClient):
        data = (await catalog_client.get("/api/pricing")).json()

        assert data["sizes"] == [50, 100, 250, 500, 1000]
        assert data["prices"]["retail"]["100"] == 30.0
        assert data["prices"]["retail"]["250"] == 70.0
        assert data["prices"]["wholesale"]["1000"] == 200.0

    @pytest.mark.parametrize(
        ("params", "price", "source"),
        [
            ({"size": 100}, 30.0, "stored"),
            ({"size": 250}, 70.0, "default"),
            ({"size": 400, "variant": "wholesale"}, 80.0, "fallback"),
        ],
    )
    async def test_single_price_reports_source(
        self, catalog_client: AsyncClient, params, price, source
    ):
        data = (await catalog_client.get("/api/pricing/price", params=params)).json()
        assert data["price"] == pytest.approx(price)
        assert data["source"] == source

    async def test_update_price(self, catalog_client: AsyncClient, mock_pricing_store):
        response = await catalog_client.put(
            "/api/pricing", json={"variant": "wholesale", "size": 250, "price": 60}
        )
        data = response.json()

        assert response.status_code == 200
        assert data["updated"] is True
        assert data["price"] == 60.0
        mock_pricing_store.save.assert_awaited_once()

    async def test_negative_price_is_a_no_op(self, catalog_client: AsyncClient, mock_pricing_store):
        response = await catalog_client.put("/api/pricing", json={"size": 100, "price": -3})
        data = response.json()

        assert response.status_code == 200
        assert data["updated"] is False
        assert data["price"] == 30.0
        mock_pricing_store.save.assert_not_called()


class TestMaterialsAPI:
    async def test_list_materials(self, catalog_client: AsyncClient):
        data = (await catalog_client.get("/api/materials")).json()

        assert data["total"] == 5
        assert data["total_stock_value"] == 10.0 * 45.0 + 2.0 * 120.0
        assert data["materials"][0]["name"] == "Maida"

    async def test_update_material_price(self, catalog_client: AsyncClient):
        response = await catalog_client.put("/api/materials/1/price", json={"price_per_unit": 50})
        assert response.status_code == 200
        assert response.json()["price_per_unit"] == 50.0

    async def test_zero_material_price_rejected(self, catalog_client: AsyncClient):
        response = await catalog_client.put("/api/materials/1/price", json={"price_per_unit": 0})
        assert response.status_code == 400

    async def test_unknown_material(self, catalog_client: AsyncClient):
        response = await catalog_client.post("/api/materials/99/stock", json={"quantity": 1})
        assert response.status_code == 404
        assert response.json()["error_code"] == "MATERIAL_NOT_FOUND"

    async def test_add_stock(self, catalog_client: AsyncClient):
        response = await catalog_client.post("/api/materials/2/stock", json={"quantity": 3})
        assert response.json()["stock"] == 5.0

    async def test_requirements(self, catalog_client: AsyncClient):
        response = await catalog_client.post(
            "/api/materials/requirements", json={"weight_grams": 5100}
        )
        data = response.json()

        assert response.status_code == 200
        assert data["gas_minutes"] == 60
        assert data["flour_kg"] == pytest.approx(5.1 / 1.4)
        assert data["estimated_cost"] > 120

    async def test_overflowing_weight_is_rejected(self, catalog_client: AsyncClient):
        response = await catalog_client.post(
            "/api/materials/requirements",
            content=b'{"weight_grams": 1e400}',
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error_code"] == "VALIDATION_ERROR"
        assert response.json()["hint"] == "Check the 'weight_grams' value."

    async def test_busy_database_is_unavailable(
        self, catalog_client: AsyncClient, mock_material_store
    ):
        mock_material_store.load.side_effect = DatabaseError("acquire", "no free connection")

        response = await catalog_client.post(
            "/api/materials/requirements", json={"weight_grams": 1000}
        )
        data = response.json()

        assert response.status_code == 503
        assert data["error_code"] == "DATABASE_ERROR"
        assert "Retry" in data["hint"]
        assert data["path"] == "/api/materials/requirements"

    async def test_negative_weight_is_schema_error(self, catalog_client: AsyncClient):
        response = await catalog_client.post(
            "/api/materials/requirements", json={"weight_grams": -1}
        )
        assert response.status_code == 422

    async def test_record_usage(self, catalog_client: AsyncClient, mock_material_store):
        response = await catalog_client.post(
            "/api/materials/usage", json={"batch_size_kg": 2, "usage_date": "2024-03-06"}
        )
        assert response.status_code == 201

        data = response.json()
        assert data["id"] == 2
        assert data["requirements"]["weight_grams"] == 2000
        mock_material_store.save.assert_not_called()

    async def test_record_usage_rejects_zero_batch(self, catalog_client: AsyncClient):
        response = await catalog_client.post("/api/materials/usage", json={"batch_size_kg": 0})
        assert response.status_code == 400

    async def test_list_usage(self, catalog_client: AsyncClient):
        data = (await catalog_client.get("/api/materials/usage")).json()
        assert data["total"] == 1
        assert data["usage"][0]["total_cost"] == 100.0
